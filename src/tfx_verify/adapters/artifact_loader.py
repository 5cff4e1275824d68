from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)


class ArtifactLoaderError(RuntimeError):
    """Exception raised when a plan or state artifact cannot be ingested."""


class ArtifactLoader:
    """Load Terraform plan or state JSON exported by the infrastructure tool.

    Accepts the output of ``terraform show -json`` for a plan, the plan's
    ``planned_values`` document on its own, or a raw ``terraform.tfstate``.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path).resolve()

    def load(self) -> Any:
        """Return the parsed JSON document."""

        if not self.path.exists():
            raise ArtifactLoaderError(f"Terraform artifact not found: {self.path}")

        with self.path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ArtifactLoaderError(f"Invalid JSON in artifact: {self.path}") from exc

        if not isinstance(data, Mapping):
            raise ArtifactLoaderError(f"Terraform artifact must be a JSON object: {self.path}")

        logger.info("Loaded Terraform artifact %s", self.path)
        return data

    def load_plan(self) -> Mapping[str, Any]:
        """Return the module tree holding ``root_module``."""

        return plan_values(self.load())

    def load_state(self) -> Mapping[str, Any]:
        """Return the document holding the flat ``resources`` list."""

        return self.load()


def plan_values(plan: Mapping[str, Any]) -> Mapping[str, Any]:
    """Unwrap ``planned_values`` from full ``terraform show -json`` output."""

    planned = plan.get("planned_values")
    if "root_module" not in plan and isinstance(planned, Mapping):
        return planned
    return plan


__all__ = ["ArtifactLoader", "ArtifactLoaderError", "plan_values"]
