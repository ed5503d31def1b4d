"""Built-in capability names and baseline capability sets.

This module defines the capability universe of an OpenShift-style
ClusterVersion and the named baseline sets an administrator can choose
from. Each versioned set is the set that was current when that release
shipped; later sets only ever add members, so moving to a newer baseline
never drops a capability.

Baseline Sets
-------------
- ``None``: enables nothing. Every capability must be listed explicitly.
- ``v4.11`` .. ``v4.18``: the defaults of the named release.
- ``vCurrent``: the latest default set. Used when no baseline is declared.
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Capability names
# ---------------------------------------------------------------------------

BAREMETAL = "baremetal"
MARKETPLACE = "marketplace"
OPENSHIFT_SAMPLES = "openshift-samples"
CONSOLE = "Console"
INSIGHTS = "Insights"
STORAGE = "Storage"
CSI_SNAPSHOT = "CSISnapshot"
NODE_TUNING = "NodeTuning"
MACHINE_API = "MachineAPI"
BUILD = "Build"
DEPLOYMENT_CONFIG = "DeploymentConfig"
IMAGE_REGISTRY = "ImageRegistry"
OPERATOR_LIFECYCLE_MANAGER = "OperatorLifecycleManager"
CLOUD_CREDENTIAL = "CloudCredential"
INGRESS = "Ingress"
CLOUD_CONTROLLER_MANAGER = "CloudControllerManager"
OPERATOR_LIFECYCLE_MANAGER_V1 = "OperatorLifecycleManagerV1"

KNOWN_CAPABILITIES: tuple[str, ...] = (
    BAREMETAL,
    MARKETPLACE,
    OPENSHIFT_SAMPLES,
    CONSOLE,
    INSIGHTS,
    STORAGE,
    CSI_SNAPSHOT,
    NODE_TUNING,
    MACHINE_API,
    BUILD,
    DEPLOYMENT_CONFIG,
    IMAGE_REGISTRY,
    OPERATOR_LIFECYCLE_MANAGER,
    CLOUD_CREDENTIAL,
    INGRESS,
    CLOUD_CONTROLLER_MANAGER,
    OPERATOR_LIFECYCLE_MANAGER_V1,
)
"""Every capability name the built-in registry recognizes."""


# ---------------------------------------------------------------------------
# Baseline set names
# ---------------------------------------------------------------------------

SET_NONE = "None"
SET_4_11 = "v4.11"
SET_4_12 = "v4.12"
SET_4_13 = "v4.13"
SET_4_14 = "v4.14"
SET_4_15 = "v4.15"
SET_4_16 = "v4.16"
SET_4_17 = "v4.17"
SET_4_18 = "v4.18"
SET_CURRENT = "vCurrent"


# ---------------------------------------------------------------------------
# Baseline set members
# ---------------------------------------------------------------------------

_V4_11: tuple[str, ...] = (BAREMETAL, MACHINE_API, MARKETPLACE, OPENSHIFT_SAMPLES)
_V4_12 = _V4_11 + (CONSOLE, INSIGHTS, STORAGE, CSI_SNAPSHOT)
_V4_13 = _V4_12 + (NODE_TUNING,)
_V4_14 = _V4_13 + (BUILD, DEPLOYMENT_CONFIG, IMAGE_REGISTRY)
_V4_15 = _V4_14 + (OPERATOR_LIFECYCLE_MANAGER, CLOUD_CREDENTIAL)
_V4_16 = _V4_15 + (CLOUD_CONTROLLER_MANAGER, INGRESS)
_V4_17 = _V4_16
_V4_18 = _V4_17 + (OPERATOR_LIFECYCLE_MANAGER_V1,)

BASELINE_CAPABILITY_SETS: dict[str, tuple[str, ...]] = {
    SET_NONE: (),
    SET_4_11: _V4_11,
    SET_4_12: _V4_12,
    SET_4_13: _V4_13,
    SET_4_14: _V4_14,
    SET_4_15: _V4_15,
    SET_4_16: _V4_16,
    SET_4_17: _V4_17,
    SET_4_18: _V4_18,
    SET_CURRENT: _V4_18,
}
"""Baseline set name to its ordered members, in registration order."""
