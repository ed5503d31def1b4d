"""CapabilityRegistry: the known capability universe and its baseline sets.

A registry is an immutable value. Resolution functions take it as an
explicit argument, so several registries (for example one per release
table, or small synthetic ones in tests) can coexist in one process.

Registries are built three ways:

- ``default_registry()`` -- the built-in table from ``sets``.
- ``registry_from_dict(data)`` -- from a parsed document.
- ``load_registry(path)`` -- from a YAML or JSON file on disk.

Document shape::

    knownCapabilities: [baremetal, marketplace, ...]
    baselineCapabilitySets:
      None: []
      v4.11: [baremetal, MachineAPI, marketplace, openshift-samples]
      vCurrent: [...]
    defaultSet: vCurrent      # optional
    noneSet: None             # optional
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from clustercaps.core.registry.sets import (
    BASELINE_CAPABILITY_SETS,
    KNOWN_CAPABILITIES,
    SET_CURRENT,
    SET_NONE,
)
from clustercaps.exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapabilityRegistry:
    """Immutable table of known capabilities and named baseline sets.

    Attributes:
        known: The full capability universe.
        baseline_sets: Read-only mapping of set name to ordered members.
        default_set: Set used when a spec declares no baseline.
        none_set: Set that enables nothing.
    """

    known: frozenset[str]
    baseline_sets: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    default_set: str = SET_CURRENT
    none_set: str = SET_NONE

    def __post_init__(self) -> None:
        if not isinstance(self.baseline_sets, MappingProxyType):
            frozen = MappingProxyType(
                {name: tuple(members) for name, members in self.baseline_sets.items()}
            )
            object.__setattr__(self, "baseline_sets", frozen)
        if not isinstance(self.known, frozenset):
            object.__setattr__(self, "known", frozenset(self.known))

    def has_set(self, name: str) -> bool:
        """Return True if ``name`` is a registered baseline set."""
        return name in self.baseline_sets

    def is_known(self, capability: str) -> bool:
        """Return True if ``capability`` belongs to the known universe."""
        return capability in self.known

    def set_names(self) -> list[str]:
        """Return the registered baseline set names in registration order."""
        return list(self.baseline_sets)

    def members(self, name: str | None) -> frozenset[str]:
        """Return the members of a baseline set.

        An empty or missing name selects the default set. A name the
        registry does not define selects nothing, as if the ``None`` set
        had been chosen; callers that want an error should validate the
        spec first.

        Args:
            name: Baseline set name, possibly empty.

        Returns:
            The set's members.
        """
        if not name:
            name = self.default_set
        members = self.baseline_sets.get(name)
        if members is None:
            logger.warning(
                "Unknown baseline capability set %r, treating as %r",
                name, self.none_set,
            )
            return frozenset()
        return frozenset(members)


def default_registry() -> CapabilityRegistry:
    """Create the built-in registry of OpenShift-style capabilities.

    Returns:
        A registry with every capability in ``KNOWN_CAPABILITIES`` and
        every set in ``BASELINE_CAPABILITY_SETS``.
    """
    return CapabilityRegistry(
        known=frozenset(KNOWN_CAPABILITIES),
        baseline_sets=BASELINE_CAPABILITY_SETS,
    )


def _string_list(value: Any, where: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{where} must be a list of strings")
    return value


def registry_from_dict(data: Any) -> CapabilityRegistry:
    """Build a registry from a parsed registry document.

    Baseline set members missing from ``knownCapabilities`` are added to
    the known universe. A missing none set is registered as empty.

    Args:
        data: Mapping with ``knownCapabilities`` and
            ``baselineCapabilitySets`` keys.

    Returns:
        The constructed registry.

    Raises:
        ConfigError: If the document has the wrong shape or does not
            define its default set.
    """
    if not isinstance(data, dict):
        raise ConfigError("Registry document must be a mapping")

    known = set(_string_list(data.get("knownCapabilities"), "knownCapabilities"))

    raw_sets = data.get("baselineCapabilitySets") or {}
    if not isinstance(raw_sets, dict):
        raise ConfigError("baselineCapabilitySets must be a mapping")

    default_set = data.get("defaultSet", SET_CURRENT)
    none_set = data.get("noneSet", SET_NONE)
    if not isinstance(default_set, str) or not isinstance(none_set, str):
        raise ConfigError("defaultSet and noneSet must be strings")

    baseline_sets: dict[str, tuple[str, ...]] = {}
    for name, members in raw_sets.items():
        if not isinstance(name, str):
            raise ConfigError(
                f"baselineCapabilitySets key {name!r} is not a string; "
                "quote numeric set names in YAML (e.g. \"4.10\": [...])"
            )
        members = _string_list(members, f"baselineCapabilitySets.{name}")
        baseline_sets[name] = tuple(dict.fromkeys(members))
        known.update(members)

    if none_set not in baseline_sets:
        baseline_sets[none_set] = ()
    elif baseline_sets[none_set]:
        raise ConfigError(f"Baseline set {none_set!r} must be empty")
    if default_set not in baseline_sets:
        raise ConfigError(f"Default baseline set {default_set!r} is not defined")

    return CapabilityRegistry(
        known=frozenset(known),
        baseline_sets=baseline_sets,
        default_set=default_set,
        none_set=none_set,
    )


def load_registry(path: Path | str) -> CapabilityRegistry:
    """Load a registry from a YAML (or JSON) file.

    Args:
        path: Path to the registry document.

    Returns:
        The constructed registry.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read registry file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid registry file {path}: {exc}") from exc
    logger.debug("Loaded capability registry from %s", path)
    return registry_from_dict(data)
