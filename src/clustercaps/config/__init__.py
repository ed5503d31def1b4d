"""Loading of ClusterVersion-shaped configuration documents.

All public names are re-exported here::

    from clustercaps.config import ClusterVersionConfig, load_config
"""

from clustercaps.config.loader import (
    REGISTRY_ENV_VAR,
    ClusterVersionConfig,
    config_from_dict,
    load_config,
)

__all__ = [
    "REGISTRY_ENV_VAR",
    "ClusterVersionConfig",
    "config_from_dict",
    "load_config",
]
