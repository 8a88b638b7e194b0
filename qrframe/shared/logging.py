"""Logging setup for QR Frame.

Log records may carry a ``context`` dict (network, step, name) added through
``ContextAdapter``. Anything that looks like an EVM private key is redacted
before it reaches a handler; addresses are left alone since they are public
and are what the flow is about.
"""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

from qrframe.shared.network import NetworkErrorType, classify_error

PACKAGE_LOGGER = "qrframe"
DEFAULT_LOG_DIR = Path.home() / ".qrframe"


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name, "").strip().lower()
    if not value:
        return default
    return value in ("1", "true", "yes")


@dataclass
class LoggingConfig:
    log_level: LogLevel = LogLevel.INFO
    log_to_file: bool = True
    log_to_stdout: bool = False
    log_dir: Path | None = None
    log_filename: str = "qrframe.log"
    json_format: bool = False
    sanitize_keys: bool = True

    @classmethod
    def from_environment(cls) -> "LoggingConfig":
        try:
            log_level = LogLevel(os.getenv("QRFRAME_LOG_LEVEL", "INFO").upper())
        except ValueError:
            log_level = LogLevel.INFO

        return cls(
            log_level=log_level,
            log_to_file=_env_flag("QRFRAME_LOG_FILE", True),
            log_to_stdout=_env_flag("QRFRAME_LOG_STDOUT", False),
            json_format=os.getenv("QRFRAME_LOG_FORMAT", "").lower() == "json",
        )

    @property
    def log_path(self) -> Path:
        return (self.log_dir or DEFAULT_LOG_DIR) / self.log_filename


# 32-byte secp256k1 private key, labelled or bare. Addresses are 20 bytes
# and never match.
LABELLED_KEY_PATTERN = re.compile(
    r"(private[_-]?key['\"]?\s*[:=]\s*['\"]?)(?:0x)?[A-Fa-f0-9]{64}\b",
    re.IGNORECASE,
)
BARE_KEY_PATTERN = re.compile(r"\b(?:0x)?[A-Fa-f0-9]{64}\b")


def sanitize_message(message: str) -> str:
    if not message:
        return message
    message = LABELLED_KEY_PATTERN.sub(r"\1[REDACTED]", message)
    return BARE_KEY_PATTERN.sub("[KEY_REDACTED]", message)


_ERROR_HINTS: dict[NetworkErrorType, tuple[str, str]] = {
    NetworkErrorType.TIMEOUT: (
        "The name service timed out.",
        "Try again later or paste the 0x address directly.",
    ),
    NetworkErrorType.CONNECTION_ERROR: (
        "Unable to reach the name service.",
        "Check your internet connection and try again.",
    ),
    NetworkErrorType.HTTP_ERROR: (
        "The name service rejected the lookup.",
        "Check the spelling of the ENS name.",
    ),
    NetworkErrorType.INVALID_RESPONSE: (
        "The name service returned an unexpected response.",
        "Try again later.",
    ),
}


def get_user_friendly_error(error: Exception) -> tuple[str, str | None]:
    """Map a resolver failure to a short message and an optional suggestion."""
    hint = _ERROR_HINTS.get(classify_error(error))
    if hint is None:
        return "An unexpected error occurred.", None
    return hint


def format_error_for_user(error: Exception) -> str:
    message, suggestion = get_user_friendly_error(error)
    return f"{message} {suggestion}" if suggestion else message


class StructuredFormatter(logging.Formatter):
    """One JSON object per line."""

    def __init__(self, sanitize: bool = True):
        super().__init__()
        self.sanitize = sanitize

    def _clean(self, value: Any) -> Any:
        if self.sanitize and isinstance(value, str):
            return sanitize_message(value)
        return value

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._clean(record.getMessage()),
            "line": record.lineno,
        }

        context = getattr(record, "context", None)
        if isinstance(context, dict) and context:
            entry["context"] = {key: self._clean(value) for key, value in context.items()}

        if record.exc_info:
            entry["exception"] = self._clean(self.formatException(record.exc_info))

        return json.dumps(entry, default=str)


class HumanReadableFormatter(logging.Formatter):
    def __init__(self, sanitize: bool = True):
        super().__init__(
            fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self.sanitize = sanitize

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = getattr(record, "context", None)
        if isinstance(context, dict) and context:
            line += " [" + " ".join(f"{k}={v}" for k, v in context.items()) + "]"
        return sanitize_message(line) if self.sanitize else line


class ContextAdapter(logging.LoggerAdapter):
    """Logger adapter that ships its ``extra`` dict as ``record.context``."""

    def __init__(self, logger: logging.Logger, context: dict[str, Any] | None = None):
        super().__init__(logger, context or {})

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        if self.extra:
            extra["context"] = {**self.extra, **extra.get("context", {})}
        kwargs["extra"] = extra
        return msg, kwargs

    def with_context(self, **context: Any) -> "ContextAdapter":
        return ContextAdapter(self.logger, {**self.extra, **context})


def get_logger(name: str, context: dict[str, Any] | None = None) -> ContextAdapter:
    return ContextAdapter(logging.getLogger(name), context)


_configured = False


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Attach handlers to the ``qrframe`` logger. Only the first call counts."""
    global _configured
    if _configured:
        return

    config = config or LoggingConfig.from_environment()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(config.log_level.value)

    if config.json_format:
        formatter: logging.Formatter = StructuredFormatter(config.sanitize_keys)
    else:
        formatter = HumanReadableFormatter(config.sanitize_keys)

    handlers: list[logging.Handler] = []
    if config.log_to_file:
        config.log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_path, encoding="utf-8"))
    if config.log_to_stdout:
        handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    _configured = True


def reset_logging() -> None:
    global _configured
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    _configured = False


__all__ = [
    "ContextAdapter",
    "HumanReadableFormatter",
    "LogLevel",
    "LoggingConfig",
    "StructuredFormatter",
    "format_error_for_user",
    "get_logger",
    "get_user_friendly_error",
    "reset_logging",
    "sanitize_message",
    "setup_logging",
]
