"""Normalization helpers applied to Terraform data before it is compared."""

from .naming import capitalize_words, format_module_name
from .null_normalizer import NullNormalizer

__all__ = ["NullNormalizer", "capitalize_words", "format_module_name"]
