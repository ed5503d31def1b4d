"""Capability registry: the known capability universe and baseline sets.

Submodules
----------
- ``sets``: Built-in capability names and baseline set table.
- ``models``: CapabilityRegistry and its constructors.

All public names are re-exported here::

    from clustercaps.core.registry import CapabilityRegistry, default_registry
"""

from clustercaps.core.registry.models import (
    CapabilityRegistry,
    default_registry,
    load_registry,
    registry_from_dict,
)
from clustercaps.core.registry.sets import (
    BASELINE_CAPABILITY_SETS,
    KNOWN_CAPABILITIES,
    SET_CURRENT,
    SET_NONE,
)

__all__ = [
    "BASELINE_CAPABILITY_SETS",
    "CapabilityRegistry",
    "KNOWN_CAPABILITIES",
    "SET_CURRENT",
    "SET_NONE",
    "default_registry",
    "load_registry",
    "registry_from_dict",
]
