"""Command-line interface implementation for the verification tooling."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, List, Sequence

from ..adapters import ArtifactLoader, ArtifactLoaderError
from ..config import ManifestError, ManifestLoader
from ..config.extract import dump_manifest, extract_manifest
from ..models import TestGroup, TestNode
from ..resolution import PlanStructureError, StateStructureError
from ..service import VerificationService

logger = logging.getLogger(__name__)


def render_tree(nodes: Sequence[TestNode], indent: int = 0) -> str:
    """Render groups and leaves as an indented outline for terminal output."""

    if not nodes:
        return "No tests generated."

    lines: List[str] = []
    pad = "  " * indent
    for node in nodes:
        if isinstance(node, TestGroup):
            lines.append(f"{pad}{node.describe}")
            if node.tests:
                lines.append(render_tree(node.tests, indent + 1))
        else:
            lines.append(f"{pad}- [{node.kind.value}] {node.name}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="tfx-verify", description="Build acceptance tests for Terraform plans and state"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging on stderr."
    )
    subparsers = parser.add_subparsers(dest="command")

    build_parser_ = subparsers.add_parser(
        "build", help="Build the assertion tree for a plan or state against a manifest."
    )
    build_parser_.add_argument(
        "artifact",
        type=Path,
        help="Plan exported with `terraform show -json`, or a terraform.tfstate file.",
    )
    build_parser_.add_argument(
        "--manifest",
        type=Path,
        required=True,
        help="Path to a YAML/JSON expectation manifest.",
    )
    build_parser_.add_argument(
        "--apply",
        action="store_true",
        help="Treat the artifact as post-apply state and use the manifest's state section.",
    )
    build_parser_.add_argument(
        "--format",
        choices=["tree", "json"],
        default="tree",
        help="Output format for the generated tests.",
    )

    extract_parser = subparsers.add_parser(
        "extract", help="Write a manifest skeleton pinning the values found in a plan."
    )
    extract_parser.add_argument("artifact", type=Path, help="Plan JSON to read.")
    extract_parser.add_argument(
        "--out", type=Path, required=True, help="Destination path of the YAML manifest."
    )

    return parser


def create_service() -> VerificationService:
    """Create the verification service used by the CLI."""

    return VerificationService()


def _format_output(groups: Sequence[TestNode], output_format: str) -> str:
    if output_format not in {"tree", "json"}:
        raise ValueError("format must be either 'tree' or 'json'")

    if output_format == "json":
        payload: List[Any] = [group.to_dict() for group in groups]
        return json.dumps(payload, indent=2)
    return render_tree(groups)


def _handle_build(args: argparse.Namespace) -> int:
    service = create_service()
    loader = ArtifactLoader(args.artifact)

    try:
        manifest = ManifestLoader().load(args.manifest)
        if args.apply:
            groups = service.verify_manifest(manifest, state=loader.load_state())
        else:
            groups = service.verify_manifest(manifest, plan=loader.load_plan())
    except (ArtifactLoaderError, ManifestError, PlanStructureError, StateStructureError) as exc:
        print(f"Error: {exc}")
        return 2

    print(_format_output(groups, args.format))
    return 0


def _handle_extract(args: argparse.Namespace) -> int:
    try:
        plan = ArtifactLoader(args.artifact).load_plan()
    except ArtifactLoaderError as exc:
        print(f"Error: {exc}")
        return 2

    manifest = extract_manifest(plan)
    dump_manifest(manifest, args.out)
    print(f"Wrote {len(manifest['plan'])} module(s) to {args.out}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by tests and the ``python -m`` invocation."""

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "build":
        return _handle_build(args)
    if args.command == "extract":
        return _handle_extract(args)

    parser.print_help()
    return 0


def run() -> None:  # pragma: no cover - thin wrapper for module execution
    """Execute the CLI and exit with the produced status code."""

    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
