"""Loading expectation manifests written in YAML (or JSON)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

import yaml

from ..models.expectation import (
    ExpectationError,
    ExpectedResource,
    ExpectedState,
    address,
    resource,
)
from ..normalization import format_module_name
from .tfvars import TfVarError, validate_tf_vars

logger = logging.getLogger(__name__)


class ManifestError(RuntimeError):
    """Raised when an expectation manifest cannot be loaded or parsed."""


@dataclass(slots=True)
class ModuleExpectation:
    """Resources expected in one plan module."""

    name: str
    address: str
    resources: List[ExpectedResource] = field(default_factory=list)


@dataclass(slots=True)
class StateExpectation:
    """A named group of state resources checked after apply."""

    name: str
    resources: List[ExpectedState] = field(default_factory=list)


@dataclass(slots=True)
class Manifest:
    """Expectations declared for a plan, a state, or both.

    ``variables`` are the Terraform inputs the artifacts were produced with.
    They are type-checked on load and kept for callers that pass them on to
    Terraform; the verification engine itself never reads them.
    """

    plan: List[ModuleExpectation] = field(default_factory=list)
    state: List[StateExpectation] = field(default_factory=list)
    variables: Dict[str, Any] = field(default_factory=dict)


class ManifestLoader:
    """Read manifest files and turn them into expectation models."""

    def load(self, path: Path | str) -> Manifest:
        """Load and validate the manifest at ``path``."""

        manifest_path = Path(path)
        data = self._read(manifest_path)
        manifest = self.parse(data)
        logger.info(
            "Loaded manifest %s with %d plan module(s) and %d state group(s)",
            manifest_path,
            len(manifest.plan),
            len(manifest.state),
        )
        return manifest

    # ------------------------------------------------------------------
    def parse(self, data: Mapping[str, Any]) -> Manifest:
        """Build a :class:`Manifest` from an already parsed document."""

        if not isinstance(data, Mapping):
            raise ManifestError("Expectation manifest must be a mapping")

        variables = data.get("variables") or {}
        if not isinstance(variables, Mapping):
            raise ManifestError("Manifest variables must be a mapping")
        try:
            validate_tf_vars(variables)
        except TfVarError as exc:
            raise ManifestError(f"Invalid manifest variables:\n{exc}") from exc

        return Manifest(
            plan=[self._parse_module(entry) for entry in self._sequence(data, "plan")],
            state=[self._parse_state_group(entry) for entry in self._sequence(data, "state")],
            variables=dict(variables),
        )

    # ------------------------------------------------------------------
    def _parse_module(self, entry: Mapping[str, Any]) -> ModuleExpectation:
        module_address = entry.get("address")
        if not module_address:
            raise ManifestError("Each plan module requires an address")

        resources: List[ExpectedResource] = []
        for item in self._sequence(entry, "resources"):
            resource_address = item.get("address")
            if not resource_address:
                raise ManifestError(f"Resource in module {module_address} requires an address")
            values = item.get("values") or {}
            if not isinstance(values, Mapping):
                raise ManifestError(f"Values for {resource_address} must be a mapping")
            name = str(item.get("name") or resource_address)
            resources.append(resource(name, str(resource_address), values))

        return ModuleExpectation(
            name=str(entry.get("name") or format_module_name(str(module_address))),
            address=str(module_address),
            resources=resources,
        )

    def _parse_state_group(self, entry: Mapping[str, Any]) -> StateExpectation:
        name = entry.get("name")
        if not name:
            raise ManifestError("Each state group requires a name")

        resources: List[ExpectedState] = []
        for item in self._sequence(entry, "resources"):
            resource_address = item.get("address")
            if not resource_address:
                raise ManifestError(f"Resource in state group {name} requires an address")
            instances = item.get("instances") or []
            try:
                resources.append(
                    address(str(resource_address), *instances, name=item.get("name"))
                )
            except ExpectationError as exc:
                raise ManifestError(f"Invalid instances for {resource_address}: {exc}") from exc

        return StateExpectation(name=str(name), resources=resources)

    def _sequence(self, data: Mapping[str, Any], key: str) -> Sequence[Mapping[str, Any]]:
        items = data.get(key) or []
        if not isinstance(items, list) or not all(isinstance(item, Mapping) for item in items):
            raise ManifestError(f"Manifest section '{key}' must be a list of mappings")
        return items

    def _read(self, path: Path) -> Mapping[str, Any]:
        if not path.exists():
            raise ManifestError(f"Expectation manifest not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem errors surfaced to caller
            raise ManifestError(f"Failed to read expectation manifest {path}") from exc

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise ManifestError(f"Invalid YAML in expectation manifest {path}") from exc

        if not isinstance(data, Mapping):
            raise ManifestError(f"Expectation manifest must be a mapping: {path}")
        return data


__all__ = [
    "Manifest",
    "ManifestError",
    "ManifestLoader",
    "ModuleExpectation",
    "StateExpectation",
]
