"""Address resolution over plan module trees and flat state resource lists."""

from .address_resolver import (
    ROOT_MODULE,
    ModuleLookup,
    PlanStructureError,
    StateStructureError,
    check_plan_module,
    compose_name,
    expected_resource_address,
    find_module,
    find_state_resource,
    search_child_modules,
)

__all__ = [
    "ROOT_MODULE",
    "ModuleLookup",
    "PlanStructureError",
    "StateStructureError",
    "check_plan_module",
    "compose_name",
    "expected_resource_address",
    "find_module",
    "find_state_resource",
    "search_child_modules",
]
