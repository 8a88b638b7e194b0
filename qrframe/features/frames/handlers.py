"""Frame event handlers for the QR Frame terminal preview."""

from __future__ import annotations

from typing import TYPE_CHECKING

from qrframe.features.frames.controller import FlowController
from qrframe.features.frames.models import ActionKind, FlowStep, ScreenDescription
from qrframe.features.frames.routes import (
    RouteNotFound,
    context_from_path,
    next_path,
    path_for,
)
from qrframe.features.frames.screen import FrameActionSelected, FrameScreen
from qrframe.screens import ExplorerLinkScreen
from qrframe.shared.config import FrameConfig
from qrframe.shared.logging import get_logger

if TYPE_CHECKING:
    from qrframe.__main__ import QRFrameApp

logger = get_logger(__name__)


class FrameHandlersMixin:
    """Mixin class playing the routing shell for QRFrameApp.

    Each button press becomes a fresh request path handed to the
    controller; nothing but the path and the typed text carries over.
    """

    controller: FlowController
    config: FrameConfig
    current_description: ScreenDescription | None = None
    current_path: str | None = None

    async def show_frame(
        self: "QRFrameApp", path: str, input_text: str | None = None
    ) -> None:
        try:
            context = context_from_path(path, input_text, self.config.base_path)
        except RouteNotFound as e:
            logger.warning("Route not found: %s", e.path)
            self.notify(str(e), severity="error")
            return

        logger.debug("Requesting frame %s", path)
        description = await self.controller.handle(context)
        self.current_description = description
        self.current_path = path

        screen = FrameScreen(description)
        if isinstance(self.screen, FrameScreen):
            self.switch_screen(screen)
        else:
            self.push_screen(screen)

    async def action_restart_flow(self: "QRFrameApp") -> None:
        await self.show_frame(path_for(FlowStep.CHOOSE_NETWORK, base_path=self.config.base_path))

    async def on_frame_action_selected(
        self: "QRFrameApp", message: FrameActionSelected
    ) -> None:
        action = message.action
        description = self.current_description

        if action.kind == ActionKind.LINK and action.payload:
            self.push_screen(ExplorerLinkScreen(action.payload))
        elif action.kind == ActionKind.RESET or description is None:
            await self.action_restart_flow()
        elif action.kind == ActionKind.SUBMIT_VALUE:
            if description.step == FlowStep.ENTER_ADDRESS:
                self.notify("Generating QR...", timeout=2)
            path = next_path(description.step, action.payload, self.config.base_path)
            await self.show_frame(path, message.input_text)
