"""Removal of null-valued attributes from Terraform data before comparison."""

from __future__ import annotations

from typing import Any, Dict, Mapping


class NullNormalizer:
    """Strip ``None`` values from attribute mappings.

    Terraform reports unset optional arguments as ``null``. Both sides of a
    structural comparison are normalized.
    """

    def normalize(self, data: Mapping[str, Any], shallow: bool = False) -> Dict[str, Any]:
        """Return a copy of ``data`` without ``None`` values.

        Deep mode descends into nested mappings and also drops a nested mapping
        that the pruning left empty. Shallow mode only touches top-level keys.
        Lists are never traversed.
        """

        normalized: Dict[str, Any] = {}
        for key, value in data.items():
            if value is None:
                continue

            if not shallow and isinstance(value, Mapping):
                pruned = self.normalize(value)
                if value and not pruned:
                    continue
                value = pruned

            normalized[key] = value
        return normalized
