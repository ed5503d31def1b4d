"""Shared fixtures for CLI tests.

Provides ClusterVersion documents covering first reconciliation,
carry-forward of previously enabled capabilities, unknown baseline sets
and malformed input, plus a small custom registry file.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def v411_config(tmp_path: Path) -> Path:
    """A v4.11 cluster with one additional capability and no history."""
    path = tmp_path / "clusterversion.yaml"
    path.write_text(
        "apiVersion: config.openshift.io/v1\n"
        "kind: ClusterVersion\n"
        "spec:\n"
        "  capabilities:\n"
        "    baselineCapabilitySet: v4.11\n"
        "    additionalEnabledCapabilities: [Console]\n"
    )
    return path


@pytest.fixture
def carry_forward_config(tmp_path: Path) -> Path:
    """A cluster that moved to the None set after running with Insights."""
    path = tmp_path / "carry.yaml"
    path.write_text(
        "spec:\n"
        "  capabilities:\n"
        "    baselineCapabilitySet: None\n"
        "    additionalEnabledCapabilities: [baremetal]\n"
        "status:\n"
        "  capabilities:\n"
        "    enabledCapabilities: [baremetal, Insights]\n"
    )
    return path


@pytest.fixture
def unknown_set_config(tmp_path: Path) -> Path:
    """A cluster declaring a baseline set no registry defines."""
    path = tmp_path / "unknown.yaml"
    path.write_text("spec:\n  capabilities:\n    baselineCapabilitySet: v3.11\n")
    return path


@pytest.fixture
def unknown_cap_config(tmp_path: Path) -> Path:
    """A cluster enabling a capability the registry does not know."""
    path = tmp_path / "unknown-cap.yaml"
    path.write_text(
        "spec:\n"
        "  capabilities:\n"
        "    baselineCapabilitySet: None\n"
        "    additionalEnabledCapabilities: [Teleporter]\n"
    )
    return path


@pytest.fixture
def malformed_config(tmp_path: Path) -> Path:
    """A document whose capabilities section is a list."""
    path = tmp_path / "malformed.yaml"
    path.write_text("spec:\n  capabilities: [v4.11]\n")
    return path


@pytest.fixture
def custom_registry_file(tmp_path: Path) -> Path:
    """A registry with capabilities alpha/beta and sets None/lite/vCurrent."""
    path = tmp_path / "registry.yaml"
    path.write_text(
        "knownCapabilities: [alpha, beta]\n"
        "baselineCapabilitySets:\n"
        "  None: []\n"
        "  lite: [alpha]\n"
        "  vCurrent: [alpha, beta]\n"
    )
    return path
