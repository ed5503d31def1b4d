"""Shared CLI helpers: registry lookup and error reporting."""

from __future__ import annotations

import json
import sys
from typing import NoReturn

import click

from clustercaps.core.registry import CapabilityRegistry, default_registry, load_registry
from clustercaps.exceptions import ClusterCapsError


def get_registry(ctx: click.Context, output_format: str = "text") -> CapabilityRegistry:
    """Return the registry chosen by ``--registry``, or the built-in one.

    Exits with code 2 if the registry file cannot be loaded, reporting the
    error in ``output_format``.
    """
    path = (ctx.obj or {}).get("registry_path")
    if path is None:
        return default_registry()
    try:
        return load_registry(path)
    except ClusterCapsError as exc:
        fail(exc, output_format)


def fail(exc: Exception, output_format: str, code: int = 2) -> NoReturn:
    """Report an error in the requested format and exit."""
    if output_format == "json":
        click.echo(json.dumps({"error": str(exc)}))
    else:
        click.echo(f"Error: {exc}")
    sys.exit(code)
