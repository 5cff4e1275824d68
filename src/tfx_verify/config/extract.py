"""Generation of an expectation manifest skeleton from an existing plan."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Tuple

import yaml

from ..normalization import NullNormalizer, format_module_name
from ..resolution import ROOT_MODULE


def _walk_modules(
    module: Mapping[str, Any], address: str
) -> Iterator[Tuple[str, Mapping[str, Any]]]:
    yield address, module
    for child in module.get("child_modules") or ():
        yield from _walk_modules(child, str(child.get("address")))


def _relative_address(module_address: str, resource_address: str) -> str:
    prefix = f"{module_address}."
    if module_address != ROOT_MODULE and resource_address.startswith(prefix):
        return resource_address[len(prefix):]
    return resource_address


def _display_name(module_address: str) -> str:
    if module_address == ROOT_MODULE:
        return "Root Module"
    return format_module_name(module_address)


def extract_manifest(
    plan: Mapping[str, Any], *, normalizer: NullNormalizer | None = None
) -> Dict[str, Any]:
    """Describe every module of ``plan`` as manifest entries pinning current values."""

    normalizer = normalizer or NullNormalizer()
    root = plan.get(ROOT_MODULE) or {}

    modules: List[Dict[str, Any]] = []
    for module_address, module in _walk_modules(root, ROOT_MODULE):
        resources = module.get("resources") or []
        if not resources:
            continue
        modules.append(
            {
                "name": _display_name(module_address),
                "address": module_address,
                "resources": [
                    {
                        "name": item.get("name") or item.get("address"),
                        "address": _relative_address(module_address, str(item.get("address"))),
                        "values": normalizer.normalize(item.get("values") or {}),
                    }
                    for item in resources
                ],
            }
        )
    return {"plan": modules}


def dump_manifest(manifest: Mapping[str, Any], destination: Path) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(dict(manifest), handle, sort_keys=False)


__all__ = ["dump_manifest", "extract_manifest"]
