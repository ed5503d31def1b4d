"""Shared fixtures for clustercaps tests."""

import pathlib

import pytest

from clustercaps.core.registry import CapabilityRegistry, default_registry


@pytest.fixture
def registry() -> CapabilityRegistry:
    """The built-in OpenShift-style registry."""
    return default_registry()


@pytest.fixture
def small_registry() -> CapabilityRegistry:
    """A synthetic registry with five capabilities and three sets.

    ``vCurrent`` enables cap1 and cap2, ``minimal`` enables cap1 only,
    and ``None`` enables nothing.
    """
    return CapabilityRegistry(
        known=frozenset({"cap1", "cap2", "cap3", "cap4", "cap5"}),
        baseline_sets={
            "None": (),
            "minimal": ("cap1",),
            "vCurrent": ("cap1", "cap2"),
        },
    )


@pytest.fixture
def empty_current_registry() -> CapabilityRegistry:
    """A registry whose default set enables nothing."""
    return CapabilityRegistry(
        known=frozenset({"a", "b"}),
        baseline_sets={"None": (), "vCurrent": ()},
    )


@pytest.fixture
def write_doc(tmp_path: pathlib.Path):
    """Return a helper that writes text to a file under tmp_path."""

    def _write(name: str, text: str) -> pathlib.Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
