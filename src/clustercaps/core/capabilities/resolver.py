"""Capability resolution: declared spec plus history to resolved state.

Resolution never disables a capability on its own. Anything that was
enabled in the previously observed state but is not selected by the
current baseline and additional list stays enabled, and is recorded as
*implicitly enabled* so that the carry-forward is visible in status.
Turning such a capability off takes a separate action downstream.

All functions here are pure: they read a ``CapabilityRegistry`` passed
in by the caller and return fresh ``ClusterCapabilities`` values.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from clustercaps.core.capabilities.models import (
    CapabilitiesSpec,
    CapabilitiesStatus,
    ClusterCapabilities,
)
from clustercaps.core.registry import CapabilityRegistry

logger = logging.getLogger(__name__)

IMPLICITLY_ENABLED_REASON = "CapabilitiesImplicitlyEnabled"
_IMPLICITLY_ENABLED_PREFIX = "The following capabilities could not be disabled: "


def resolve(
    spec: CapabilitiesSpec | None,
    prior_enabled: Iterable[str] | None,
    registry: CapabilityRegistry,
) -> ClusterCapabilities:
    """Resolve the known, enabled and implicitly enabled capabilities.

    Args:
        spec: Declared capabilities, or None for the default baseline with
            no additions.
        prior_enabled: Capabilities enabled in the previous reconciliation.
            None or empty on first reconciliation.
        registry: Registry supplying the known universe and baseline sets.

    Returns:
        A new resolved state. ``known`` is always the full registry
        universe.
    """
    baseline = spec.baseline_capability_set if spec is not None else ""
    additional = spec.additional_enabled_capabilities if spec is not None else ()

    baseline_members = registry.members(baseline)
    enabled = set(baseline_members)
    enabled.update(additional)
    logger.debug(
        "Baseline %r selects %d capabilities, %d enabled with additions",
        baseline or registry.default_set, len(baseline_members), len(enabled),
    )

    implicit: set[str] = set()
    for name in prior_enabled or ():
        if name not in enabled and name not in implicit:
            logger.debug("Implicitly enabling previously enabled capability %r", name)
            implicit.add(name)

    return ClusterCapabilities(
        known=registry.known,
        enabled=frozenset(enabled | implicit),
        implicitly_enabled=frozenset(implicit) if implicit else None,
    )


def apply_implicitly_enabled(
    implicit: Iterable[str] | None,
    capabilities: ClusterCapabilities,
) -> ClusterCapabilities:
    """Apply a separately computed implicitly enabled set to a state.

    Every candidate is enabled and tagged implicitly enabled, including
    candidates that were already enabled. Any implicitly enabled set on
    the input state is replaced, not merged.

    Args:
        implicit: Capabilities to carry forward. None or empty clears the
            implicitly enabled set.
        capabilities: State to apply them to.

    Returns:
        A new state with ``known`` unchanged.
    """
    candidates = frozenset(implicit or ())
    return ClusterCapabilities(
        known=capabilities.known,
        enabled=capabilities.enabled | candidates,
        implicitly_enabled=candidates or None,
    )


def project_status(capabilities: ClusterCapabilities) -> CapabilitiesStatus:
    """Project a resolved state onto its sorted status lists."""
    return CapabilitiesStatus(
        enabled_capabilities=sorted(capabilities.enabled),
        known_capabilities=sorted(capabilities.known),
    )


def implicitly_enabled_message(capabilities: ClusterCapabilities) -> str | None:
    """Describe carried-forward capabilities for a status condition.

    Returns:
        A sentence naming the implicitly enabled capabilities in sorted
        order, or None when there are none.
    """
    if not capabilities.has_implicitly_enabled:
        return None
    return _IMPLICITLY_ENABLED_PREFIX + ", ".join(sorted(capabilities.implicitly_enabled))


def state_to_dict(capabilities: ClusterCapabilities) -> dict[str, Any]:
    """Convert a resolved state to a JSON-serializable dict of sorted lists."""
    return {
        "known": sorted(capabilities.known),
        "enabled": sorted(capabilities.enabled),
        "implicitlyEnabled": sorted(capabilities.implicitly_enabled or ()),
    }
