"""Configuration inputs: expectation manifests and Terraform variables."""

from .manifest import (
    Manifest,
    ManifestError,
    ManifestLoader,
    ModuleExpectation,
    StateExpectation,
)
from .tfvars import TfVarError, validate_tf_vars

__all__ = [
    "Manifest",
    "ManifestError",
    "ManifestLoader",
    "ModuleExpectation",
    "StateExpectation",
    "TfVarError",
    "validate_tf_vars",
]
