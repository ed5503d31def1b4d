"""Capability data models: declared spec, resolved state, and status.

These are pure data holders with no resolution logic, so they can be
imported by the loader, the resolver and the CLI without cycles.

- ``CapabilitiesSpec`` -- what the administrator declared.
- ``ClusterCapabilities`` -- the resolved known / enabled / implicitly
  enabled sets.
- ``CapabilitiesStatus`` -- the sorted, serializable projection of a
  resolved state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CapabilitiesSpec:
    """Declared capability configuration of a cluster.

    Attributes:
        baseline_capability_set: Name of the baseline set. Empty means the
            registry's default set.
        additional_enabled_capabilities: Capabilities enabled on top of the
            baseline. Duplicates are allowed and collapse on resolution.
    """

    baseline_capability_set: str = ""
    additional_enabled_capabilities: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        additional = self.additional_enabled_capabilities
        if isinstance(additional, str):
            additional = (additional,)
        if not isinstance(additional, tuple):
            additional = tuple(additional)
        object.__setattr__(self, "additional_enabled_capabilities", additional)


@dataclass(frozen=True)
class ClusterCapabilities:
    """Resolved capability state of a cluster.

    ``implicitly_enabled`` is ``None`` when nothing was carried forward.
    Callers should treat ``None`` and an empty set alike.

    Attributes:
        known: Every capability the registry recognizes.
        enabled: Capabilities that are on.
        implicitly_enabled: Capabilities that are on only because they
            were on before.
    """

    known: frozenset[str] = frozenset()
    enabled: frozenset[str] = frozenset()
    implicitly_enabled: frozenset[str] | None = None

    @property
    def has_implicitly_enabled(self) -> bool:
        """True if at least one capability was carried forward."""
        return bool(self.implicitly_enabled)

    def is_enabled(self, capability: str) -> bool:
        """Return True if ``capability`` is enabled."""
        return capability in self.enabled

    def unknown_enabled(self) -> frozenset[str]:
        """Return enabled capabilities absent from the known universe."""
        return self.enabled - self.known


@dataclass
class CapabilitiesStatus:
    """Serializable status of a cluster's capabilities.

    Both lists are sorted and duplicate-free. Empty sets project to empty
    lists, never ``None``.
    """

    enabled_capabilities: list[str] = field(default_factory=list)
    known_capabilities: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the status in its camelCase wire shape."""
        return {
            "enabledCapabilities": list(self.enabled_capabilities),
            "knownCapabilities": list(self.known_capabilities),
        }
