"""``clustercaps sets`` -- List baseline capability sets.

Exit Codes:
    0 -- Always, unless a ``--registry`` file cannot be loaded (2).
"""

from __future__ import annotations

import json

import click

from clustercaps.cli.common import get_registry


@click.command("sets")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_context
def sets_command(ctx: click.Context, output_format: str) -> None:
    """List the registry's baseline capability sets and their members."""
    registry = get_registry(ctx, output_format)
    if output_format == "json":
        click.echo(json.dumps({
            "defaultSet": registry.default_set,
            "knownCapabilities": sorted(registry.known),
            "baselineCapabilitySets": {
                name: list(registry.baseline_sets[name]) for name in registry.set_names()
            },
        }, indent=2))
        return

    from clustercaps.cli.output import print_sets
    print_sets(registry)
