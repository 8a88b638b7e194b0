"""Modal screens for the QR Frame terminal preview."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from qrframe.shared.logging import get_logger

logger = get_logger(__name__)


class BaseModalScreen(ModalScreen):
    """Base modal screen with common key bindings."""

    BINDINGS = [
        ("escape", "app.pop_screen", "Close"),
        ("tab", "app.focus_next", "Next"),
        ("shift+tab", "app.focus_previous", "Previous"),
    ]


class ExplorerLinkScreen(BaseModalScreen):
    """Shows the explorer link a link action points at."""

    def __init__(self, url: str):
        super().__init__()
        self.url = url

    def compose(self) -> ComposeResult:
        yield Label("🔗 View on Explorer")
        yield Static(self.url, id="explorer-url")
        yield Horizontal(
            Button("🌐 Open", id="open-button", variant="primary"),
            Button("❌ Close", id="close-button"),
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "open-button":
            self.app.open_url(self.url)
            logger.info("Opened explorer link %s", self.url)
        elif event.button.id == "close-button":
            self.app.pop_screen()
