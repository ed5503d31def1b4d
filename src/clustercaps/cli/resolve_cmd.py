"""``clustercaps resolve <config>`` -- Resolve a cluster's capabilities.

Loads a ClusterVersion document, validates its declared capabilities
against the registry, resolves the known / enabled / implicitly enabled
sets, and prints the resulting status.

Exit Codes:
    0 -- Capabilities resolved and displayed.
    2 -- The document or registry could not be loaded, or the declared
         baseline set is unknown.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from clustercaps.cli.common import fail, get_registry
from clustercaps.config import load_config
from clustercaps.core.capabilities import (
    IMPLICITLY_ENABLED_REASON,
    implicitly_enabled_message,
    project_status,
    resolve,
    state_to_dict,
    validate_spec,
)
from clustercaps.exceptions import ClusterCapsError


@click.command("resolve")
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--prior", "prior",
    multiple=True,
    help="Previously enabled capability; replaces the document's status. Repeatable.",
)
@click.pass_context
def resolve_command(
    ctx: click.Context,
    config_path: str,
    output_format: str,
    prior: tuple[str, ...],
) -> None:
    """Resolve the capabilities declared in CONFIG_PATH.

    CONFIG_PATH is a ClusterVersion-shaped YAML or JSON document. The
    capabilities listed in its status are treated as previously enabled
    and are never dropped.

    Exit code 0 on success, 2 on load or validation errors.
    """
    registry = get_registry(ctx, output_format)
    try:
        config = load_config(Path(config_path))
        warnings = validate_spec(config.spec, registry)
    except ClusterCapsError as exc:
        fail(exc, output_format)

    prior_enabled = prior if prior else config.prior_enabled
    caps = resolve(config.spec, prior_enabled, registry)
    baseline = (config.spec.baseline_capability_set if config.spec else "") or registry.default_set

    if output_format == "json":
        state = state_to_dict(caps)
        payload = {
            "source": str(config.source),
            "baselineCapabilitySet": baseline,
            "status": project_status(caps).to_dict(),
            "implicitlyEnabled": state["implicitlyEnabled"],
            "unknownEnabled": sorted(caps.unknown_enabled()),
            "warnings": warnings,
        }
        message = implicitly_enabled_message(caps)
        if message:
            payload["condition"] = {"reason": IMPLICITLY_ENABLED_REASON, "message": message}
        click.echo(json.dumps(payload, indent=2))
    else:
        from clustercaps.cli.output import print_capabilities
        print_capabilities(caps, baseline, warnings)

    sys.exit(0)
