"""Adapter layer for Terraform artifacts and live connectivity capabilities."""

from .artifact_loader import ArtifactLoader, ArtifactLoaderError, plan_values
from .connectivity import ConnectionProbe, ConnectionTests

__all__ = [
    "ArtifactLoader",
    "ArtifactLoaderError",
    "ConnectionProbe",
    "ConnectionTests",
    "plan_values",
]
