"""Request-driven state machine for the QR Frame card flow."""

from __future__ import annotations

from typing import Callable

from qrframe.features.frames.builder import ScreenBuilder
from qrframe.features.frames.errors import FlowError, FlowException
from qrframe.features.frames.models import (
    FlowStep,
    RequestContext,
    ScreenData,
    ScreenDescription,
)
from qrframe.features.networks.registry import DEFAULT_REGISTRY, Network, NetworkRegistry
from qrframe.features.qr.service import build_qr_image_url
from qrframe.features.resolver.service import NameResolver, get_default_resolver
from qrframe.shared.config import FrameConfig
from qrframe.shared.logging import get_logger
from qrframe.shared.validation import NameInputValidator, is_valid_address

logger = get_logger(__name__)


class FlowController:
    """Picks the next screen from a ``RequestContext``.

    Holds no per-request state. Every failure is turned into an error
    screen carrying one recovery action; ``handle`` never raises.
    """

    def __init__(
        self,
        registry: NetworkRegistry | None = None,
        resolver: NameResolver | None = None,
        builder: ScreenBuilder | None = None,
        config: FrameConfig | None = None,
        qr_url_builder: Callable[[str], str] | None = None,
    ):
        self.config = config or FrameConfig.from_environment()
        self.registry = registry or DEFAULT_REGISTRY
        self.resolver = resolver or get_default_resolver()
        self.builder = builder or ScreenBuilder(self.registry, self.config)
        self.qr_url_builder = qr_url_builder or self._default_qr_url

    def _default_qr_url(self, address: str) -> str:
        return build_qr_image_url(
            address,
            size=self.config.qr_size,
            base_url=self.config.qr_service_url,
        )

    async def handle(self, context: RequestContext) -> ScreenDescription:
        log = logger.with_context(step=context.step.value, network=context.network_key)
        log.debug("Handling frame request")

        if context.step == FlowStep.CHOOSE_NETWORK:
            return self.builder.choose_network()

        network = self.registry.lookup(context.network_key)
        if context.step == FlowStep.ENTER_ADDRESS:
            if network is None:
                log.info("Unknown network requested")
            return self.builder.enter_address(network)

        try:
            address = await self._resolve_target(network, context.raw_input)
        except FlowException as e:
            log.info("Frame flow stopped: %s", e.error.value)
            return self.builder.build(
                FlowStep.SHOW_RESULT, ScreenData(network=network, error=e.error)
            )

        try:
            qr_image_url = self.qr_url_builder(address)
        except (UnicodeEncodeError, ValueError) as e:
            log.warning("Could not encode resolved address: %s", str(e))
            return self.builder.build(
                FlowStep.SHOW_RESULT,
                ScreenData(network=network, error=FlowError.UNRESOLVABLE_INPUT),
            )

        log.info("Generated QR for %s", address)
        return self.builder.build(
            FlowStep.SHOW_RESULT,
            ScreenData(network=network, address=address, qr_image_url=qr_image_url),
        )

    async def _resolve_target(self, network: Network | None, raw_input: str | None) -> str:
        if network is None:
            raise FlowException(FlowError.UNKNOWN_NETWORK)

        input_result = NameInputValidator.validate(raw_input)
        if not input_result.is_valid:
            raise FlowException(FlowError.EMPTY_INPUT)

        text: str = input_result.normalized_value
        if is_valid_address(text):
            return text

        try:
            resolved = await self.resolver.resolve_name(text)
        except Exception as e:
            logger.warning("Resolver raised instead of returning not-found: %s", str(e))
            resolved = None

        if not resolved:
            raise FlowException(FlowError.UNRESOLVABLE_INPUT)
        return resolved
