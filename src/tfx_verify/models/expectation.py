"""Expectation models and the helpers used to author them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union


class ExpectationError(RuntimeError):
    """Raised when expectations are authored with an invalid shape."""


@dataclass(frozen=True, slots=True)
class PredicateResult:
    """Outcome of a predicate: whether the data matched and how to describe it."""

    expected_data: bool
    append_message: str


@dataclass(frozen=True, slots=True)
class Literal:
    """Expect the actual value to deep-equal ``value``."""

    value: Any


@dataclass(frozen=True, slots=True)
class Predicate:
    """Expect ``fn(actual)`` to report ``expected_data=True``.

    ``fn`` is called even when the attribute is absent, receiving ``None``.
    It may return a :class:`PredicateResult` or a mapping carrying
    ``expectedData``/``appendMessage`` (or their snake_case spellings).
    """

    fn: Callable[[Any], Any]

    def evaluate(self, actual: Any) -> PredicateResult:
        result = self.fn(actual)
        if isinstance(result, PredicateResult):
            return result
        if isinstance(result, Mapping):
            expected = result.get("expected_data", result.get("expectedData"))
            message = result.get("append_message", result.get("appendMessage", ""))
            return PredicateResult(expected_data=bool(expected), append_message=str(message))
        raise ExpectationError(
            f"Predicate must return PredicateResult or a mapping, got {type(result).__name__}"
        )


@dataclass(frozen=True, slots=True)
class Nested:
    """Expectations for the keys of a nested block."""

    fields: Mapping[str, "Expectation"]

    @property
    def has_predicates(self) -> bool:
        for expectation in self.fields.values():
            if isinstance(expectation, Predicate):
                return True
            if isinstance(expectation, Nested) and expectation.has_predicates:
                return True
        return False

    def plain(self) -> Dict[str, Any]:
        """Return the literal mapping this block stands for."""

        plain: Dict[str, Any] = {}
        for key, expectation in self.fields.items():
            if isinstance(expectation, Literal):
                plain[key] = expectation.value
            elif isinstance(expectation, Nested):
                plain[key] = expectation.plain()
            else:
                raise ExpectationError(f"Cannot express predicate for {key} as a literal value")
        return plain


Expectation = Union[Literal, Predicate, Nested]


def to_expectation(value: Any) -> Expectation:
    """Resolve a raw authored value into its expectation variant."""

    if isinstance(value, (Literal, Predicate, Nested)):
        return value
    if callable(value):
        return Predicate(value)
    if isinstance(value, Mapping):
        return Nested({str(key): to_expectation(item) for key, item in value.items()})
    return Literal(value)


def to_expectations(values: Optional[Mapping[str, Any]]) -> Dict[str, Expectation]:
    return {str(key): to_expectation(value) for key, value in (values or {}).items()}


@dataclass(frozen=True, slots=True)
class ExpectedResource:
    """A resource expected inside a plan module, addressed relative to it."""

    name: str
    address: str
    values: Mapping[str, Expectation] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ExpectedInstance:
    """Attribute expectations for one state instance.

    ``index_key`` of ``None`` means "the instance at this position".
    """

    index_key: Optional[Union[str, int]] = None
    values: Mapping[str, Expectation] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ExpectedState:
    """A state resource, addressed absolutely, with the instances it must hold."""

    name: str
    address: str
    instances: Tuple[ExpectedInstance, ...] = ()


# Authoring helpers ------------------------------------------------------------
def resource(
    name: str, address: str, values: Optional[Mapping[str, Any]] = None
) -> ExpectedResource:
    """Declare a resource expected in the plan module under test.

    ``address`` is relative to the module, e.g. ``test.resource`` for
    ``module.example.test.resource`` when testing ``module.example``.
    """

    return ExpectedResource(name=name, address=address, values=to_expectations(values))


def instance(index_key: Optional[Union[str, int]] = None, **values: Any) -> ExpectedInstance:
    return ExpectedInstance(index_key=index_key, values=to_expectations(values))


def as_instance(value: Union[ExpectedInstance, Mapping[str, Any]]) -> ExpectedInstance:
    """Convert an instance mapping (optionally carrying ``index_key``) to a model."""

    if isinstance(value, ExpectedInstance):
        return value
    if not isinstance(value, Mapping):
        raise ExpectationError("address expected all instances to be of type mapping")

    values = dict(value)
    index_key = values.pop("index_key", None)
    return ExpectedInstance(index_key=index_key, values=to_expectations(values))


def address(
    resource_address: str,
    *instances: Union[ExpectedInstance, Mapping[str, Any]],
    name: Optional[str] = None,
) -> ExpectedState:
    """Declare a state resource by its composed address and expected instances."""

    if not instances:
        raise ExpectationError("address expects at least one instance")

    return ExpectedState(
        name=name or resource_address,
        address=resource_address,
        instances=tuple(as_instance(item) for item in instances),
    )


def evaluate(append_message: str, fn: Callable[[Any], bool]) -> Predicate:
    """Wrap a boolean function as a predicate with a fixed description."""

    def predicate(value: Any) -> PredicateResult:
        return PredicateResult(expected_data=bool(fn(value)), append_message=append_message)

    return Predicate(predicate)


__all__ = [
    "ExpectationError",
    "Expectation",
    "ExpectedInstance",
    "ExpectedResource",
    "ExpectedState",
    "Literal",
    "Nested",
    "Predicate",
    "PredicateResult",
    "address",
    "as_instance",
    "evaluate",
    "instance",
    "resource",
    "to_expectation",
    "to_expectations",
]
