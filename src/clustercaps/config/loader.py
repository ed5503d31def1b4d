"""ClusterVersion document loader.

Reads the declared capabilities and the previously enabled capabilities
from a ClusterVersion-shaped YAML or JSON document::

    spec:
      capabilities:
        baselineCapabilitySet: v4.11
        additionalEnabledCapabilities: [Console]
    status:
      capabilities:
        enabledCapabilities: [baremetal, MachineAPI, Insights]

A document without ``spec.capabilities`` declares nothing, which resolves
to the registry's default baseline. A document without
``status.capabilities`` describes a first reconciliation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from clustercaps.core.capabilities import CapabilitiesSpec
from clustercaps.exceptions import ConfigError

logger = logging.getLogger(__name__)

REGISTRY_ENV_VAR = "CLUSTERCAPS_REGISTRY"


@dataclass(frozen=True)
class ClusterVersionConfig:
    """Inputs to one resolution pass, as read from a document.

    Attributes:
        spec: Declared capabilities, or None when not declared.
        prior_enabled: Capabilities reported enabled by the last status.
        source: File the document was read from, if any.
    """

    spec: CapabilitiesSpec | None = None
    prior_enabled: tuple[str, ...] = ()
    source: Path | None = None


def _mapping(value: Any, where: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{where} must be a mapping")
    return value


def _names(value: Any, where: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{where} must be a list of strings")
    return tuple(value)


def config_from_dict(data: Any, source: Path | None = None) -> ClusterVersionConfig:
    """Build a ClusterVersionConfig from a parsed document.

    Args:
        data: Parsed ClusterVersion-shaped mapping.
        source: Originating file, recorded for messages.

    Returns:
        The extracted configuration.

    Raises:
        ConfigError: If any field has the wrong type.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("ClusterVersion document must be a mapping")

    spec_section = _mapping(data.get("spec"), "spec")
    status_section = _mapping(data.get("status"), "status")

    spec: CapabilitiesSpec | None = None
    if spec_section.get("capabilities") is not None:
        caps = _mapping(spec_section["capabilities"], "spec.capabilities")
        baseline = caps.get("baselineCapabilitySet") or ""
        if not isinstance(baseline, str):
            raise ConfigError("spec.capabilities.baselineCapabilitySet must be a string")
        spec = CapabilitiesSpec(
            baseline_capability_set=baseline,
            additional_enabled_capabilities=_names(
                caps.get("additionalEnabledCapabilities"),
                "spec.capabilities.additionalEnabledCapabilities",
            ),
        )

    status_caps = _mapping(status_section.get("capabilities"), "status.capabilities")
    prior = _names(
        status_caps.get("enabledCapabilities"),
        "status.capabilities.enabledCapabilities",
    )

    return ClusterVersionConfig(spec=spec, prior_enabled=prior, source=source)


def load_config(path: Path | str) -> ClusterVersionConfig:
    """Load a ClusterVersion document from disk.

    Args:
        path: YAML or JSON file.

    Returns:
        The extracted configuration.

    Raises:
        ConfigError: If the file cannot be read, parsed, or interpreted.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc
    logger.debug("Loaded ClusterVersion config from %s", path)
    return config_from_dict(data, source=path)
