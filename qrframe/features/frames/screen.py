"""Textual rendering of a frame ``ScreenDescription`` for the terminal preview."""

from typing import cast

from qrcode.exceptions import DataOverflowError
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Button, Footer, Input, Static

from qrframe.features.frames.models import ActionKind, FrameAction, ScreenDescription
from qrframe.features.qr.service import qr_data_from_url, render_terminal_qr
from qrframe.shared.logging import get_logger

logger = get_logger(__name__)


class FrameActionSelected(Message):
    def __init__(self, action: FrameAction, input_text: str | None = None):
        super().__init__()
        self.action = action
        self.input_text = input_text


class FrameScreen(Screen):
    BINDINGS = [
        ("escape", "app.restart_flow", "Start Over"),
        ("q", "app.quit", "Quit"),
    ]

    def __init__(self, description: ScreenDescription):
        super().__init__()
        self.description = description

    def compose(self) -> ComposeResult:
        visual = self.description.visual
        with Container(id="frame-card"):
            yield Static(visual.text, id="frame-text")
            if visual.image_url:
                yield Static(self._render_qr(visual.image_url), id="frame-qr")
            if visual.footer:
                yield Static(visual.footer, id="frame-footer")

        for action in self.description.actions_of(ActionKind.TEXT_INPUT):
            yield Input(placeholder=action.payload or "", id="frame-input")

        yield Horizontal(
            *[
                Button(action.label, id=f"action-{index}", classes=action.kind.value)
                for index, action in enumerate(self.description.actions)
                if action.kind != ActionKind.TEXT_INPUT
            ],
            id="frame-actions",
        )
        yield Footer()

    def on_mount(self) -> None:
        card = self.query_one("#frame-card")
        card.styles.background = self.description.visual.background
        card.styles.color = self.description.visual.color

    @staticmethod
    def _render_qr(image_url: str) -> str:
        data = qr_data_from_url(image_url)
        if not data:
            return image_url
        try:
            return render_terminal_qr(data)
        except DataOverflowError as e:
            logger.warning("Could not render QR preview: %s", str(e))
            return image_url

    def _input_text(self) -> str | None:
        inputs = self.query("#frame-input")
        if not inputs:
            return None
        return cast(Input, inputs.first()).value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        submit_actions = self.description.actions_of(ActionKind.SUBMIT_VALUE)
        if submit_actions:
            self.post_message(FrameActionSelected(submit_actions[0], event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if not button_id.startswith("action-"):
            return
        action = self.description.actions[int(button_id.removeprefix("action-"))]
        self.post_message(FrameActionSelected(action, self._input_text()))
