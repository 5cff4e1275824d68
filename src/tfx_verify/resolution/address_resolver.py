"""Lookup of modules and resources inside Terraform plan and state documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)

ROOT_MODULE = "root_module"

_CHECK_CONFIGURATION = "Check your plan configuration and try again."


class PlanStructureError(RuntimeError):
    """Raised when a plan lacks the structure required to locate a module."""


class StateStructureError(RuntimeError):
    """Raised when a state document lacks its resource list."""


@dataclass(frozen=True, slots=True)
class ModuleLookup:
    """Result of a module search."""

    found: bool
    node: Optional[Mapping[str, Any]] = None


def search_child_modules(address: str, modules: Iterable[Mapping[str, Any]]) -> ModuleLookup:
    """Depth-first search for the module whose address equals ``address``.

    Each node is compared before its ``child_modules`` are visited, and the
    first match wins. Bracketed index segments are compared verbatim.
    """

    for module in modules or ():
        if module.get("address") == address:
            return ModuleLookup(found=True, node=module)

        lookup = search_child_modules(address, module.get("child_modules") or ())
        if lookup.found:
            return lookup

    return ModuleLookup(found=False)


def check_plan_module(address: str, plan: Mapping[str, Any]) -> Mapping[str, Any]:
    """Validate that ``plan`` can hold the module at ``address``; return its root module."""

    root = plan.get(ROOT_MODULE) if isinstance(plan, Mapping) else None
    if root is None:
        raise PlanStructureError(
            f"Expected terraform plan to have root_module at top level. {_CHECK_CONFIGURATION}"
        )

    if address == ROOT_MODULE:
        if "resources" not in root:
            raise PlanStructureError(
                f"Expected root module to have resources. {_CHECK_CONFIGURATION}"
            )
        if not root["resources"]:
            raise PlanStructureError(
                "Expected root_module to contain at least one resource. "
                f"{_CHECK_CONFIGURATION}"
            )
        return root

    if "child_modules" not in root:
        raise PlanStructureError(
            f"Expected terraform plan root_module to have child_modules. {_CHECK_CONFIGURATION}"
        )
    if not root["child_modules"]:
        raise PlanStructureError(f"Expected child_modules to be created. {_CHECK_CONFIGURATION}")
    return root


def find_module(address: str, plan: Mapping[str, Any]) -> ModuleLookup:
    """Locate ``address`` (``root_module`` or a ``module.*`` path) within ``plan``."""

    root = check_plan_module(address, plan)
    if address == ROOT_MODULE:
        return ModuleLookup(found=True, node={**root, "address": ROOT_MODULE})

    lookup = search_child_modules(address, root["child_modules"])
    logger.debug("Module %s %s in plan", address, "found" if lookup.found else "not found")
    return lookup


def expected_resource_address(module_address: Optional[str], resource_address: str) -> str:
    """Compose the absolute address of a resource declared relative to a module."""

    if not module_address or module_address == ROOT_MODULE:
        return resource_address
    return f"{module_address}.{resource_address}"


def compose_name(resource: Mapping[str, Any]) -> str:
    """Build the canonical address of a state resource entry."""

    parts = []
    if resource.get("module"):
        parts.append(str(resource["module"]))
    if resource.get("mode") == "data":
        parts.append("data")
    parts.append(str(resource.get("type", "")))
    parts.append(str(resource.get("name", "")))
    return ".".join(parts)


def find_state_resource(address: str, state: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    """Return the first state resource whose composed address equals ``address``."""

    resources = state.get("resources") if isinstance(state, Mapping) else None
    if not isinstance(resources, list):
        raise StateStructureError(
            "Expected terraform state to have resources at top level. "
            "Check your state file and try again."
        )

    for candidate in resources:
        if compose_name(candidate) == address:
            return candidate
    return None


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
