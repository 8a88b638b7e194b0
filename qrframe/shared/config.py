"""Runtime configuration for QR Frame, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_RESOLVER_URL = "https://api.ensideas.com/ens/resolve"
DEFAULT_QR_SERVICE_URL = "https://api.qrserver.com/v1/create-qr-code/"
DEFAULT_QR_SIZE = 400
DEFAULT_RESOLVER_TIMEOUT = 10.0
DEFAULT_BASE_PATH = "/api"
DEFAULT_FOOTER = "Powered by AvaPage"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class FrameConfig:
    resolver_url: str = DEFAULT_RESOLVER_URL
    qr_service_url: str = DEFAULT_QR_SERVICE_URL
    qr_size: int = DEFAULT_QR_SIZE
    resolver_timeout: float = DEFAULT_RESOLVER_TIMEOUT
    base_path: str = DEFAULT_BASE_PATH
    footer: str = DEFAULT_FOOTER

    @classmethod
    def from_environment(cls) -> "FrameConfig":
        return cls(
            resolver_url=os.getenv("QRFRAME_RESOLVER_URL") or DEFAULT_RESOLVER_URL,
            qr_service_url=os.getenv("QRFRAME_QR_SERVICE_URL")
            or DEFAULT_QR_SERVICE_URL,
            qr_size=_env_int("QRFRAME_QR_SIZE", DEFAULT_QR_SIZE),
            resolver_timeout=_env_float(
                "QRFRAME_RESOLVER_TIMEOUT", DEFAULT_RESOLVER_TIMEOUT
            ),
            base_path=os.getenv("QRFRAME_BASE_PATH", DEFAULT_BASE_PATH),
            footer=os.getenv("QRFRAME_FOOTER") or DEFAULT_FOOTER,
        )
