"""Data models for expectations and the generated assertion tree."""

from .expectation import (
    ExpectationError,
    Expectation,
    ExpectedInstance,
    ExpectedResource,
    ExpectedState,
    Literal,
    Nested,
    Predicate,
    PredicateResult,
    address,
    evaluate,
    instance,
    resource,
    to_expectation,
)
from .report import AssertionKind, TestGroup, TestLeaf, TestNode

__all__ = [
    "AssertionKind",
    "ExpectationError",
    "Expectation",
    "ExpectedInstance",
    "ExpectedResource",
    "ExpectedState",
    "Literal",
    "Nested",
    "Predicate",
    "PredicateResult",
    "TestGroup",
    "TestLeaf",
    "TestNode",
    "address",
    "evaluate",
    "instance",
    "resource",
    "to_expectation",
]
