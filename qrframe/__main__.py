"""Terminal preview entry point for QR Frame."""

from textual.app import App

from qrframe.features.frames.controller import FlowController
from qrframe.features.frames.handlers import FrameHandlersMixin
from qrframe.features.frames.models import FlowStep
from qrframe.features.frames.routes import path_for
from qrframe.features.resolver.service import NameResolverService
from qrframe.shared.config import FrameConfig
from qrframe.shared.logging import get_logger, setup_logging
from qrframe.styles import CSS

logger = get_logger(__name__)


class QRFrameApp(FrameHandlersMixin, App):
    CSS = CSS
    TITLE = "QR Generator"
    BINDINGS = [("q", "quit", "Quit")]

    def __init__(
        self,
        config: FrameConfig | None = None,
        controller: FlowController | None = None,
    ):
        super().__init__()
        self.config = config or FrameConfig.from_environment()
        self.controller = controller or FlowController(
            resolver=NameResolverService(config=self.config),
            config=self.config,
        )
        self.current_description = None
        self.current_path: str | None = None

    async def on_mount(self) -> None:
        logger.info("QR Frame preview started")
        await self.show_frame(
            path_for(FlowStep.CHOOSE_NETWORK, base_path=self.config.base_path)
        )


def main() -> None:
    setup_logging()
    logger.info("Logging system initialized")
    QRFrameApp().run()


if __name__ == "__main__":
    main()
