"""Maps a flow step and its data to a declarative screen description."""

from __future__ import annotations

from qrframe.features.frames.errors import FlowError
from qrframe.features.frames.models import (
    ActionKind,
    FlowStep,
    FrameAction,
    ScreenData,
    ScreenDescription,
    Visual,
)
from qrframe.features.networks.registry import DEFAULT_REGISTRY, Network, NetworkRegistry
from qrframe.features.qr.service import build_qr_image_url
from qrframe.shared.config import FrameConfig

CHOOSE_NETWORK_BACKGROUND = "#020617"
RESULT_BACKGROUND = "#000"
ERROR_BACKGROUND = "#111827"
ERROR_COLOR = "#fecaca"
ADDRESS_PLACEHOLDER = "0x123... or vitalik.eth"


class ScreenBuilder:
    """Pure and total: equal inputs always give equal descriptions."""

    def __init__(
        self,
        registry: NetworkRegistry | None = None,
        config: FrameConfig | None = None,
    ):
        self.registry = registry or DEFAULT_REGISTRY
        self.config = config or FrameConfig.from_environment()

    def build(self, step: FlowStep, data: ScreenData | None = None) -> ScreenDescription:
        data = data or ScreenData()
        if step == FlowStep.CHOOSE_NETWORK:
            return self.choose_network()
        if step == FlowStep.ENTER_ADDRESS:
            return self.enter_address(data.network)
        return self.show_result(
            data.network,
            address=data.address,
            qr_image_url=data.qr_image_url,
            error=data.error,
        )

    def choose_network(self) -> ScreenDescription:
        return ScreenDescription(
            step=FlowStep.CHOOSE_NETWORK,
            visual=Visual(
                text="Choose Network",
                background=CHOOSE_NETWORK_BACKGROUND,
                font_size=32,
            ),
            actions=tuple(
                FrameAction(network.label, ActionKind.SUBMIT_VALUE, network.key)
                for network in self.registry
            ),
        )

    def enter_address(self, network: Network | None) -> ScreenDescription:
        if network is None:
            return self.error_screen(FlowError.UNKNOWN_NETWORK, FlowStep.ENTER_ADDRESS)

        return ScreenDescription(
            step=FlowStep.ENTER_ADDRESS,
            visual=Visual(
                text=f"{network.display_name} — Enter Address or ENS",
                background=network.accent_color,
                font_size=28,
            ),
            actions=(
                FrameAction("Address or ENS", ActionKind.TEXT_INPUT, ADDRESS_PLACEHOLDER),
                FrameAction("Generate", ActionKind.SUBMIT_VALUE, network.key),
            ),
        )

    def show_result(
        self,
        network: Network | None,
        address: str | None = None,
        qr_image_url: str | None = None,
        error: FlowError | None = None,
    ) -> ScreenDescription:
        if network is None:
            return self.error_screen(FlowError.UNKNOWN_NETWORK)
        if error is not None:
            return self.error_screen(error)
        if not address:
            return self.error_screen(FlowError.UNRESOLVABLE_INPUT)

        if qr_image_url is None:
            qr_image_url = build_qr_image_url(
                address,
                size=self.config.qr_size,
                base_url=self.config.qr_service_url,
            )

        return ScreenDescription(
            step=FlowStep.SHOW_RESULT,
            visual=Visual(
                text=address,
                background=RESULT_BACKGROUND,
                font_size=24,
                image_url=qr_image_url,
                footer=self.config.footer,
            ),
            actions=(
                FrameAction(
                    "View on Explorer", ActionKind.LINK, network.explorer_url(address)
                ),
                FrameAction("New QR", ActionKind.RESET),
            ),
        )

    def error_screen(
        self, error: FlowError, step: FlowStep = FlowStep.SHOW_RESULT
    ) -> ScreenDescription:
        return ScreenDescription(
            step=step,
            visual=Visual(
                text=error.message,
                background=ERROR_BACKGROUND,
                color=ERROR_COLOR,
                font_size=26,
            ),
            actions=(FrameAction(error.recovery_label, ActionKind.RESET),),
            error=error,
        )
