"""Tests for one expected resource inside a resolved plan module."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..comparison import PlanAttributeContext, ValueComparator
from ..models.expectation import ExpectedResource
from ..models.report import TestGroup, is_not_false
from ..resolution import expected_resource_address


def find_module_resource(
    module: Optional[Mapping[str, Any]], spec: ExpectedResource
) -> Optional[Mapping[str, Any]]:
    """Return the resource of ``module`` matching the module-relative ``spec.address``."""

    if not module:
        return None

    target = expected_resource_address(module.get("address"), spec.address)
    for candidate in module.get("resources") or ():
        if candidate.get("address") == target:
            return candidate
    return None


def build_resource_test(
    module: Optional[Mapping[str, Any]],
    spec: ExpectedResource,
    *,
    comparator: ValueComparator | None = None,
) -> TestGroup:
    """Build the existence and attribute tests for ``spec``.

    ``module`` is ``None`` when the module could not be resolved, in which case
    every attribute degrades to the absent branch.
    """

    comparator = comparator or ValueComparator()
    module_address = module.get("address") if module else None
    match = find_module_resource(module, spec)

    tests = [
        is_not_false(
            f"Module {module_address} should contain resource {spec.address}",
            match is not None,
            f"Expected {module_address} contain the {spec.name} resource.",
        )
    ]

    actual = match.get("values") if match is not None else None
    context = PlanAttributeContext(resource_name=spec.name, address=spec.address)
    tests.extend(comparator.compare(context, spec.values, actual))

    return TestGroup(describe=spec.name, tests=tuple(tests))


__all__ = ["build_resource_test", "find_module_resource"]
