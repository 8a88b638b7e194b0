"""Data model for the QR Frame card flow."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from qrframe.features.frames.errors import FlowError
from qrframe.features.networks.registry import Network


class FlowStep(Enum):
    CHOOSE_NETWORK = "choose_network"
    ENTER_ADDRESS = "enter_address"
    SHOW_RESULT = "show_result"


class ActionKind(Enum):
    SUBMIT_VALUE = "submit"
    LINK = "link"
    RESET = "reset"
    TEXT_INPUT = "text_input"


@dataclass(frozen=True)
class RequestContext:
    step: FlowStep
    network_key: str | None = None
    raw_input: str | None = None


@dataclass(frozen=True)
class FrameAction:
    label: str
    kind: ActionKind
    payload: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "kind": self.kind.value, "payload": self.payload}


@dataclass(frozen=True)
class Visual:
    text: str
    background: str
    color: str = "white"
    font_size: int = 28
    image_url: str | None = None
    footer: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "background": self.background,
            "color": self.color,
            "font_size": self.font_size,
            "image_url": self.image_url,
            "footer": self.footer,
        }


@dataclass(frozen=True)
class ScreenData:
    """Inputs the screen builder needs beyond the step itself."""

    network: Network | None = None
    address: str | None = None
    qr_image_url: str | None = None
    error: FlowError | None = None


@dataclass(frozen=True)
class ScreenDescription:
    step: FlowStep
    visual: Visual
    actions: tuple[FrameAction, ...]
    error: FlowError | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def actions_of(self, kind: ActionKind) -> list[FrameAction]:
        return [action for action in self.actions if action.kind == kind]

    def to_dict(self) -> dict[str, Any]:
        return {
            "step": self.step.value,
            "visual": self.visual.to_dict(),
            "actions": [action.to_dict() for action in self.actions],
            "error": self.error.value if self.error else None,
        }
