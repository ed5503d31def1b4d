"""clustercaps: Cluster capability resolution for OpenShift-style clusters."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
