"""Cluster capability resolution.

Submodules
----------
- ``models``: CapabilitiesSpec, ClusterCapabilities, CapabilitiesStatus.
- ``resolver``: resolve, apply_implicitly_enabled, project_status.
- ``validation``: validate_spec, unknown_capabilities.

All public names are re-exported here::

    from clustercaps.core.capabilities import CapabilitiesSpec, resolve
"""

from clustercaps.core.capabilities.models import (
    CapabilitiesSpec,
    CapabilitiesStatus,
    ClusterCapabilities,
)
from clustercaps.core.capabilities.resolver import (
    IMPLICITLY_ENABLED_REASON,
    apply_implicitly_enabled,
    implicitly_enabled_message,
    project_status,
    resolve,
    state_to_dict,
)
from clustercaps.core.capabilities.validation import (
    unknown_capabilities,
    validate_spec,
)

__all__ = [
    "CapabilitiesSpec",
    "CapabilitiesStatus",
    "ClusterCapabilities",
    "IMPLICITLY_ENABLED_REASON",
    "apply_implicitly_enabled",
    "implicitly_enabled_message",
    "project_status",
    "resolve",
    "state_to_dict",
    "unknown_capabilities",
    "validate_spec",
]
