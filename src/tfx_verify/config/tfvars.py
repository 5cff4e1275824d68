"""Validation of variables handed to Terraform alongside an expectation manifest."""

from __future__ import annotations

from typing import Any, List, Mapping


class TfVarError(RuntimeError):
    """Raised with every invalid variable listed, one per line."""


def _type_label(value: Any) -> str:
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, (list, tuple)):
        return "list"
    if value is None:
        return "null"
    return type(value).__name__


def validate_tf_vars(variables: Mapping[str, Any]) -> None:
    """Check that every value is a string, number, or boolean.

    All violations are collected before raising so callers can fix them in
    one pass.
    """

    errors: List[str] = []
    for key, value in variables.items():
        if isinstance(value, (str, bool, int, float)):
            continue
        errors.append(
            f"Expected type of string, number, or boolean for {key} got {_type_label(value)}"
        )

    if errors:
        raise TfVarError("\n".join(errors))


__all__ = ["TfVarError", "validate_tf_vars"]
