"""Attribute comparison between expectations and Terraform data."""

from .value_comparator import (
    AttributeContext,
    InstanceAttributeContext,
    PlanAttributeContext,
    ValueComparator,
)

__all__ = [
    "AttributeContext",
    "InstanceAttributeContext",
    "PlanAttributeContext",
    "ValueComparator",
]
