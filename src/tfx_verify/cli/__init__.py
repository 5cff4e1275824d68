"""Command-line interface package for the verification tooling."""

from .app import build_parser, create_service, main, render_tree, run

__all__ = ["build_parser", "create_service", "main", "render_tree", "run"]
