"""Tests for resources and instances recorded in a Terraform state."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

from ..comparison import InstanceAttributeContext, ValueComparator
from ..models.expectation import ExpectedInstance, ExpectedState
from ..models.report import TestGroup, TestNode, is_not_false, is_true
from ..resolution import find_state_resource

logger = logging.getLogger(__name__)

IndexKey = Union[str, int]


def find_instance(
    instances: Sequence[Mapping[str, Any]], key: IndexKey
) -> Optional[Mapping[str, Any]]:
    """Return the instance whose ``index_key`` (or position, when unset) equals ``key``.

    Keys of different types never match, so ``True`` does not select ``1``.
    """

    for position, candidate in enumerate(instances):
        candidate_key = candidate.get("index_key", position)
        if type(candidate_key) is type(key) and candidate_key == key:
            return candidate
    return None


def build_instance_test(
    address: str,
    state: Mapping[str, Any],
    instances: Sequence[ExpectedInstance],
    *,
    comparator: ValueComparator | None = None,
) -> TestGroup:
    comparator = comparator or ValueComparator()
    resource = find_state_resource(address, state)

    tests: List[TestNode] = [
        is_not_false(
            f"Resource {address} should be in tfstate",
            resource is not None,
            f"Expected {address} resource to be included in tfstate",
        )
    ]

    actual_instances = resource.get("instances") if resource is not None else None
    if not isinstance(actual_instances, list):
        tests.append(
            is_true(
                f"Expected {address} to contain instance data got None",
                False,
                "Expected instances to be present.",
            )
        )
        return TestGroup(describe=address, tests=tuple(tests))

    for position, expected in enumerate(instances):
        key = position if expected.index_key is None else expected.index_key
        match = find_instance(actual_instances, key)
        tests.append(
            is_true(
                f"Expected instance with key {key} to exist at {address}",
                match is not None,
                f"Expected instance with key {key} to exist at {address}.instances",
            )
        )
        if match is None:
            logger.debug("No instance with key %s at %s", key, address)
            continue

        context = InstanceAttributeContext(address=address, index_key=key)
        tests.extend(comparator.compare(context, expected.values, match.get("attributes")))

    return TestGroup(describe=address, tests=tuple(tests))


def build_state_test(
    name: str,
    state: Mapping[str, Any],
    specs: Sequence[ExpectedState],
    *,
    comparator: ValueComparator | None = None,
) -> TestGroup:
    """Group the instance tests of every expected state resource under ``name``."""

    comparator = comparator or ValueComparator()
    groups = [
        build_instance_test(spec.address, state, spec.instances, comparator=comparator)
        for spec in specs
    ]
    return TestGroup(describe=name, tests=tuple(groups))


__all__ = ["build_instance_test", "build_state_test", "find_instance"]
