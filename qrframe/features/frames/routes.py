"""Mapping between request paths and flow steps.

Paths follow the frame layout ``/``, ``/<network>`` and ``/<network>/qr``
under an optional base path.
"""

from __future__ import annotations

from dataclasses import dataclass

from qrframe.features.frames.models import FlowStep, RequestContext
from qrframe.shared.config import DEFAULT_BASE_PATH

RESULT_SEGMENT = "qr"


@dataclass
class RouteNotFound(Exception):
    path: str

    def __str__(self) -> str:
        return f"No frame route for path: {self.path}"


def _strip_base_path(path: str, base_path: str) -> str:
    base = base_path.rstrip("/")
    if base and (path == base or path.startswith(f"{base}/")):
        path = path[len(base):]
    return path.strip("/")


def context_from_path(
    path: str,
    input_text: str | None = None,
    base_path: str = DEFAULT_BASE_PATH,
) -> RequestContext:
    relative = _strip_base_path(path.split("?", 1)[0], base_path)
    if not relative:
        return RequestContext(step=FlowStep.CHOOSE_NETWORK)

    segments = relative.split("/")
    if len(segments) == 1:
        return RequestContext(step=FlowStep.ENTER_ADDRESS, network_key=segments[0])
    if len(segments) == 2 and segments[1] == RESULT_SEGMENT and segments[0]:
        return RequestContext(
            step=FlowStep.SHOW_RESULT,
            network_key=segments[0],
            raw_input=input_text,
        )

    raise RouteNotFound(path)


def path_for(
    step: FlowStep,
    network_key: str | None = None,
    base_path: str = DEFAULT_BASE_PATH,
) -> str:
    base = base_path.rstrip("/")
    if step == FlowStep.CHOOSE_NETWORK or not network_key:
        return f"{base}/"
    if step == FlowStep.ENTER_ADDRESS:
        return f"{base}/{network_key}"
    return f"{base}/{network_key}/{RESULT_SEGMENT}"


def next_path(
    current_step: FlowStep,
    submitted_value: str | None,
    base_path: str = DEFAULT_BASE_PATH,
) -> str:
    """Path hit when a submit-value action is pressed on ``current_step``."""
    if current_step == FlowStep.CHOOSE_NETWORK:
        return path_for(FlowStep.ENTER_ADDRESS, submitted_value, base_path)
    if current_step == FlowStep.ENTER_ADDRESS:
        return path_for(FlowStep.SHOW_RESULT, submitted_value, base_path)
    return path_for(FlowStep.CHOOSE_NETWORK, base_path=base_path)
