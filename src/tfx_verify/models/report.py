"""Report models describing the assertions handed to an external test runner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Tuple, Union


class AssertionKind(str, Enum):
    """Assertion styles the external runner must implement."""

    IS_TRUE = "isTrue"
    IS_NOT_FALSE = "isNotFalse"
    DEEP_EQUAL = "deepEqual"


@dataclass(frozen=True, slots=True)
class TestLeaf:
    """A single assertion: the runner applies ``kind`` to ``args``."""

    __test__ = False  # keep pytest from collecting the model

    name: str
    kind: AssertionKind
    args: Tuple[Any, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "assertionKind": self.kind.value,
            "args": list(self.args),
        }


@dataclass(frozen=True, slots=True)
class TestGroup:
    """A named container of leaves and nested groups, kept in build order."""

    __test__ = False

    describe: str
    tests: Tuple["TestNode", ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "describe": self.describe,
            "tests": [test.to_dict() for test in self.tests],
        }

    def iter_leaves(self) -> Iterator[TestLeaf]:
        """Yield every leaf depth-first, in the order a runner registers them."""

        for test in self.tests:
            if isinstance(test, TestGroup):
                yield from test.iter_leaves()
            else:
                yield test


TestNode = Union[TestLeaf, TestGroup]


def is_true(name: str, *args: Any) -> TestLeaf:
    return TestLeaf(name=name, kind=AssertionKind.IS_TRUE, args=args)


def is_not_false(name: str, *args: Any) -> TestLeaf:
    return TestLeaf(name=name, kind=AssertionKind.IS_NOT_FALSE, args=args)


def deep_equal(name: str, *args: Any) -> TestLeaf:
    return TestLeaf(name=name, kind=AssertionKind.DEEP_EQUAL, args=args)


__all__ = [
    "AssertionKind",
    "TestGroup",
    "TestLeaf",
    "TestNode",
    "deep_equal",
    "is_not_false",
    "is_true",
]
