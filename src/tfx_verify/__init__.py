"""Acceptance-test synthesis for Terraform plans and state."""

from .models import (
    AssertionKind,
    ExpectedInstance,
    ExpectedResource,
    ExpectedState,
    Literal,
    Nested,
    Predicate,
    PredicateResult,
    TestGroup,
    TestLeaf,
    address,
    evaluate,
    instance,
    resource,
)
from .service import OptionsError, VerificationOptions, VerificationService

__all__ = [
    "AssertionKind",
    "ExpectedInstance",
    "ExpectedResource",
    "ExpectedState",
    "Literal",
    "Nested",
    "OptionsError",
    "Predicate",
    "PredicateResult",
    "TestGroup",
    "TestLeaf",
    "VerificationOptions",
    "VerificationService",
    "address",
    "evaluate",
    "instance",
    "resource",
]
