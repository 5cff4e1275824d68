"""Expected-versus-actual attribute comparison producing assertion leaves."""

from __future__ import annotations

import copy
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from ..models.expectation import Expectation, Literal, Nested, Predicate
from ..models.report import TestLeaf, deep_equal, is_not_false, is_true
from ..normalization import NullNormalizer

logger = logging.getLogger(__name__)


class AttributeContext(ABC):
    """Phrases test names and messages for the attributes of one subject."""

    @abstractmethod
    def value_name(self, path: str) -> str:
        """Name of the leaf checking the value at ``path``."""

    @abstractmethod
    def equal_message(self, path: str, expected: Any) -> str:
        """Message attached to a deep-equal leaf."""

    @abstractmethod
    def predicate_message(self, path: str) -> str:
        """Prefix joined with a predicate's ``append_message``."""

    @abstractmethod
    def presence_name(self, path: str) -> str:
        """Name of the leaf checking that ``path`` exists."""

    @abstractmethod
    def presence_message(self, path: str) -> str:
        """Message attached to a presence leaf."""

    def absent_name(self, path: str) -> str:
        return self.presence_name(path)

    def absent_message(self, path: str) -> str:
        return self.presence_message(path)


@dataclass(frozen=True, slots=True)
class PlanAttributeContext(AttributeContext):
    """Wording for values of a resource declared in a plan."""

    resource_name: str
    address: str

    def value_name(self, path: str) -> str:
        return f"{self.resource_name} should have the correct {path} value"

    def equal_message(self, path: str, expected: Any) -> str:
        return f"Expected {self.address} to have correct value for {path}."

    def predicate_message(self, path: str) -> str:
        return f"Expected {self.address} {path}"

    def presence_name(self, path: str) -> str:
        return f"{self.resource_name} should have a value for {path}"

    def presence_message(self, path: str) -> str:
        return f"Expected {self.address} to have a value for {path}."

    def absent_name(self, path: str) -> str:
        return self.value_name(path)

    def absent_message(self, path: str) -> str:
        return f"Expected {self.address} to have correct value for {path} got None."


@dataclass(frozen=True, slots=True)
class InstanceAttributeContext(AttributeContext):
    """Wording for attributes of one instance of a state resource."""

    address: str
    index_key: Union[str, int]

    @property
    def subject(self) -> str:
        return f"{self.address}[{self.index_key}]"

    def value_name(self, path: str) -> str:
        if _is_nested_path(path):
            return f"Expected resource {self.subject} to have correct value for {path}"
        return f"Expected resource {self.subject} to have correct value for {path}."

    def equal_message(self, path: str, expected: Any) -> str:
        if _is_nested_path(path):
            return f"Expected {self.subject} attribute {path} to be {_render(expected)}"
        return f"Expected {self.subject} {path} to have value {_render(expected)}"

    def predicate_message(self, path: str) -> str:
        return f"Expected {self.subject} attribute {path}"

    def presence_name(self, path: str) -> str:
        return f"Expected resource {self.subject} to have value for {path}"

    def presence_message(self, path: str) -> str:
        return f"Expected {self.subject} attribute {path} to exist"


def _is_nested_path(path: str) -> bool:
    return "." in path


def _render(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, separators=(",", ":"))
    except TypeError:
        return repr(value)


def _is_singleton_block(value: Any) -> bool:
    return isinstance(value, list) and len(value) == 1 and isinstance(value[0], Mapping)


class ValueComparator:
    """Compare expected attribute values against actual Terraform data."""

    def __init__(self, normalizer: NullNormalizer | None = None) -> None:
        self._normalizer = normalizer or NullNormalizer()

    def compare(
        self,
        context: AttributeContext,
        values: Mapping[str, Expectation],
        actual: Optional[Mapping[str, Any]],
        *,
        prefix: str = "",
    ) -> List[TestLeaf]:
        """Return one or more leaves per expected key, in key order."""

        leaves: List[TestLeaf] = []
        for key, expected in values.items():
            leaves.extend(self._compare_key(context, prefix + key, key, expected, actual))
        return leaves

    # ------------------------------------------------------------------
    def _compare_key(
        self,
        context: AttributeContext,
        path: str,
        key: str,
        expected: Expectation,
        actual: Optional[Mapping[str, Any]],
    ) -> List[TestLeaf]:
        present = isinstance(actual, Mapping) and key in actual
        value = actual[key] if present else None

        if isinstance(expected, Predicate):
            result = expected.evaluate(value)
            return [
                is_true(
                    context.value_name(path),
                    result.expected_data,
                    f"{context.predicate_message(path)} {result.append_message}",
                )
            ]

        if not present:
            return [is_not_false(context.absent_name(path), False, context.absent_message(path))]

        if isinstance(expected, Nested):
            if _is_singleton_block(value):
                logger.debug("Unwrapping single element block at %s", path)
                presence = is_not_false(
                    context.presence_name(path), True, context.presence_message(path)
                )
                nested = self.compare(context, expected.fields, value[0], prefix=f"{path}[0].")
                return [presence, *nested]

            if expected.has_predicates:
                nested_actual = value if isinstance(value, Mapping) else None
                return self.compare(context, expected.fields, nested_actual, prefix=f"{path}.")

            plain = copy.deepcopy(expected.plain())
            if isinstance(value, Mapping):
                value = self._normalizer.normalize(value)
                plain = self._normalizer.normalize(plain)
            return [
                deep_equal(
                    context.value_name(path),
                    copy.deepcopy(value),
                    plain,
                    context.equal_message(path, plain),
                )
            ]

        literal = expected.value if isinstance(expected, Literal) else expected
        return [
            deep_equal(
                context.value_name(path),
                copy.deepcopy(value),
                copy.deepcopy(literal),
                context.equal_message(path, literal),
            )
        ]


__all__ = [
    "AttributeContext",
    "InstanceAttributeContext",
    "PlanAttributeContext",
    "ValueComparator",
]
