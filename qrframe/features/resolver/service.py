"""ENS-style name resolution service for QR Frame."""

from __future__ import annotations

import asyncio
from typing import Any, Protocol
from urllib.parse import quote

from qrframe.shared.config import FrameConfig
from qrframe.shared.logging import format_error_for_user, get_logger
from qrframe.shared.network import NetworkClient, NetworkError

logger = get_logger(__name__)


class NameResolver(Protocol):
    async def resolve_name(self, name: str) -> str | None: ...


class NetworkClientProtocol(Protocol):
    def get_optional(self, endpoint: str, context: str = "", **kwargs: Any) -> Any: ...


class NameResolverService:
    """Turns a human-readable name into an address via the external resolver.

    Every failure collapses to ``None``: transport errors, HTTP errors,
    malformed bodies, replies without an ``address`` field and timeouts.
    One outbound call per invocation, no retries and no caching.
    """

    def __init__(
        self,
        network_client: NetworkClientProtocol | None = None,
        config: FrameConfig | None = None,
    ):
        self.config = config or FrameConfig()
        self.network_client = network_client or NetworkClient(self.config.resolver_url)
        self.timeout = self.config.resolver_timeout

    def _fetch(self, name: str) -> Any:
        return self.network_client.get_optional(
            f"/{quote(name, safe='')}",
            context="Resolve name",
        )

    @staticmethod
    def extract_address(payload: Any) -> str | None:
        if not isinstance(payload, dict):
            return None
        address = payload.get("address")
        if not isinstance(address, str) or not address.strip():
            return None
        try:
            address.encode("utf-8")
        except UnicodeEncodeError:
            # Lone surrogates survive json.loads but cannot go into a URL.
            return None
        return address

    async def resolve_name(self, name: str) -> str | None:
        if not name or not name.strip():
            return None

        log = logger.with_context(name=name)
        try:
            payload = await asyncio.wait_for(
                asyncio.to_thread(self._fetch, name), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            log.warning("Name resolution timed out after %.1fs", self.timeout)
            return None
        except NetworkError as e:
            log.warning(
                "Name resolution failed: %s (%s)", e.message, format_error_for_user(e)
            )
            return None
        except Exception as e:
            log.warning("Name resolution failed unexpectedly: %s", str(e))
            return None

        if payload is None:
            log.info("Name not found by resolver")
            return None

        address = self.extract_address(payload)
        if address is None:
            log.info("Resolver returned no address")
            return None

        log.debug("Resolved name to %s", address)
        return address


_default_service: NameResolverService | None = None


def get_default_resolver() -> NameResolverService:
    global _default_service
    if _default_service is None:
        _default_service = NameResolverService(config=FrameConfig.from_environment())
    return _default_service


async def resolve_name(name: str) -> str | None:
    return await get_default_resolver().resolve_name(name)
