"""clustercaps CLI -- Resolve cluster capabilities from ClusterVersion documents.

Entry point for the ``clustercaps`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    resolve   -- Resolve known/enabled/implicitly enabled capabilities.
    sets      -- List baseline capability sets and their members.
    validate  -- Check a document's declared capabilities.

Usage::

    clustercaps resolve ./clusterversion.yaml
    clustercaps resolve ./clusterversion.yaml --format json
    clustercaps --registry ./caps.yaml sets
    clustercaps validate ./clusterversion.yaml
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from clustercaps import __version__
from clustercaps.cli.resolve_cmd import resolve_command
from clustercaps.cli.sets_cmd import sets_command
from clustercaps.cli.validate_cmd import validate_command
from clustercaps.config import REGISTRY_ENV_VAR


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--registry", "registry_path",
    type=click.Path(dir_okay=False),
    envvar=REGISTRY_ENV_VAR,
    default=None,
    help=f"Capability registry file (default: built-in; env: {REGISTRY_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, registry_path: str | None) -> None:
    """clustercaps: Resolve the capabilities a cluster has enabled.

    Combines a baseline capability set, additionally enabled capabilities
    and previously enabled capabilities into the cluster's capability
    status, without ever silently disabling a capability.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    ctx.ensure_object(dict)
    ctx.obj["registry_path"] = registry_path


# Register all subcommands
cli.add_command(resolve_command)
cli.add_command(sets_command)
cli.add_command(validate_command)
