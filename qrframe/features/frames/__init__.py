"""Frame flow feature module for QR Frame.

This module provides the three-step card flow:
- Choose a network from the registry
- Enter an address or ENS name
- Show a QR code and explorer link for the resolved address
"""

from qrframe.features.frames.builder import ScreenBuilder
from qrframe.features.frames.controller import FlowController
from qrframe.features.frames.errors import FlowError, FlowException
from qrframe.features.frames.models import (
    ActionKind,
    FlowStep,
    FrameAction,
    RequestContext,
    ScreenData,
    ScreenDescription,
    Visual,
)
from qrframe.features.frames.routes import (
    RouteNotFound,
    context_from_path,
    next_path,
    path_for,
)

__all__ = [
    "ActionKind",
    "FlowController",
    "FlowError",
    "FlowException",
    "FlowStep",
    "FrameAction",
    "RequestContext",
    "RouteNotFound",
    "ScreenBuilder",
    "ScreenData",
    "ScreenDescription",
    "Visual",
    "context_from_path",
    "next_path",
    "path_for",
]
