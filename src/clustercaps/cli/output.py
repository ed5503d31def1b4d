"""Rich output formatting helpers for the clustercaps CLI.

Capability states are shown as one table row per known or enabled
capability, colored by how the capability came to be enabled:

    enabled = green, implicitly enabled = yellow, disabled = dim,
    enabled but unknown to the registry = bold red
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from clustercaps.core.capabilities import (
    ClusterCapabilities,
    implicitly_enabled_message,
)
from clustercaps.core.registry import CapabilityRegistry

console = Console()


def _state_text(name: str, caps: ClusterCapabilities, unknown: frozenset[str]) -> Text:
    if caps.has_implicitly_enabled and name in caps.implicitly_enabled:
        return Text("IMPLICIT", style="yellow")
    if not caps.is_enabled(name):
        return Text("disabled", style="dim")
    if name in unknown:
        return Text("UNKNOWN", style="bold red")
    return Text("enabled", style="green")


def print_capabilities(
    caps: ClusterCapabilities,
    baseline: str,
    warnings: list[str],
) -> None:
    """Print a resolved capability state.

    Args:
        caps: Resolved state.
        baseline: Baseline set name that was applied.
        warnings: Validation warnings to show under the table.
    """
    header = Text.assemble(
        ("Baseline: ", "bold"), (baseline, ""),
        ("  Enabled: ", "bold"), (f"{len(caps.enabled)}/{len(caps.known)}", ""),
    )
    console.print(Panel(header, title="Cluster Capabilities"))

    table = Table(show_header=True, header_style="bold")
    table.add_column("Capability", style="bold")
    table.add_column("State", justify="center")
    unknown = caps.unknown_enabled()
    for name in sorted(caps.known | caps.enabled):
        table.add_row(name, _state_text(name, caps, unknown))
    console.print(table)

    message = implicitly_enabled_message(caps)
    if message:
        console.print(Text(message, style="yellow"))
    for warning in warnings:
        console.print(Text.assemble(("Warning: ", "red"), warning))


def print_sets(registry: CapabilityRegistry) -> None:
    """Print every baseline set with its members."""
    table = Table(title="Baseline Capability Sets", show_header=True, header_style="bold")
    table.add_column("Set", style="bold")
    table.add_column("Count", justify="right")
    table.add_column("Capabilities")
    for name in registry.set_names():
        members = registry.baseline_sets[name]
        label = f"{name} (default)" if name == registry.default_set else name
        table.add_row(label, str(len(members)), ", ".join(members) or "-")
    console.print(table)
