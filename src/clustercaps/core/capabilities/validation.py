"""Validation of declared capability specs against a registry.

The resolver accepts any input. This module is the gate in front of it:
an unregistered baseline set name is an error the administrator must
fix, while additional capabilities outside the known universe are only
warned about, since enabling an unknown name is harmless to resolution.
"""

from __future__ import annotations

from typing import Iterable

from clustercaps.core.capabilities.models import CapabilitiesSpec
from clustercaps.core.registry import CapabilityRegistry
from clustercaps.exceptions import ValidationError


def unknown_capabilities(
    names: Iterable[str], registry: CapabilityRegistry
) -> list[str]:
    """Return the sorted, duplicate-free names missing from ``registry.known``."""
    return sorted({name for name in names if not registry.is_known(name)})


def validate_spec(
    spec: CapabilitiesSpec | None, registry: CapabilityRegistry
) -> list[str]:
    """Validate a declared spec before resolution.

    Args:
        spec: Declared capabilities. None is always valid.
        registry: Registry to validate against.

    Returns:
        Warning messages, one per unknown additional capability.

    Raises:
        ValidationError: If the spec names an unregistered baseline set.
    """
    if spec is None:
        return []

    baseline = spec.baseline_capability_set
    if baseline and not registry.has_set(baseline):
        raise ValidationError(
            f"unknown baseline capability set {baseline!r} "
            f"(known sets: {', '.join(registry.set_names())})",
            name=baseline,
        )

    return [
        f"additional capability {name!r} is not a known capability"
        for name in unknown_capabilities(spec.additional_enabled_capabilities, registry)
    ]
