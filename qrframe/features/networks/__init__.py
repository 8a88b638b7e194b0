"""Network registry feature module for QR Frame.

Static catalog of the supported chains, each with its display name,
explorer link prefix and accent colour.
"""

from qrframe.features.networks.registry import (
    DEFAULT_REGISTRY,
    NETWORKS,
    Network,
    NetworkRegistry,
    lookup,
)

__all__ = [
    "DEFAULT_REGISTRY",
    "NETWORKS",
    "Network",
    "NetworkRegistry",
    "lookup",
]
