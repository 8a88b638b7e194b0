"""QR Frame - an interactive card flow that turns an address or ENS name into a QR code.

This package is organized into feature-based modules:
- features.networks: Fixed registry of supported chains
- features.resolver: ENS-style name resolution
- features.qr: QR image references and terminal rendering
- features.frames: Screen builder, flow controller and route mapping
- shared: Shared utilities (config, logging, network, validation)
"""

from qrframe.features.frames import (
    FlowController,
    FlowStep,
    RequestContext,
    ScreenBuilder,
    ScreenDescription,
)
from qrframe.features.networks import NETWORKS, Network, lookup
from qrframe.features.resolver import NameResolverService, resolve_name
from qrframe.shared import (
    FrameConfig,
    NetworkClient,
    NetworkError,
    NetworkErrorType,
    TimeoutConfig,
    ValidationResult,
    is_valid_address,
)

__version__ = "0.1.0"
__all__ = [
    "FlowController",
    "FlowStep",
    "FrameConfig",
    "NETWORKS",
    "NameResolverService",
    "Network",
    "NetworkClient",
    "NetworkError",
    "NetworkErrorType",
    "RequestContext",
    "ScreenBuilder",
    "ScreenDescription",
    "TimeoutConfig",
    "ValidationResult",
    "is_valid_address",
    "lookup",
    "resolve_name",
]
