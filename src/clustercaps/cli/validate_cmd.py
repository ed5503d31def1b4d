"""``clustercaps validate <config>`` -- Validate declared capabilities.

Exit Codes:
    0 -- The declared capabilities are valid (warnings may be printed).
    1 -- The declared baseline capability set is unknown.
    2 -- The document or registry could not be loaded.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from clustercaps.cli.common import fail, get_registry
from clustercaps.config import load_config
from clustercaps.core.capabilities import validate_spec
from clustercaps.exceptions import ClusterCapsError, ValidationError


@click.command("validate")
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def validate_command(ctx: click.Context, config_path: str) -> None:
    """Check the declared capabilities in CONFIG_PATH against the registry.

    Exit code 0 if valid, 1 if invalid, 2 if the document cannot be loaded.
    """
    registry = get_registry(ctx)
    try:
        config = load_config(Path(config_path))
        warnings = validate_spec(config.spec, registry)
    except ValidationError as exc:
        fail(exc, "text", code=1)
    except ClusterCapsError as exc:
        fail(exc, "text")

    for warning in warnings:
        click.echo(f"Warning: {config.source}: {warning}")
    click.echo(f"{config.source}: capabilities are valid.")
    sys.exit(0)
