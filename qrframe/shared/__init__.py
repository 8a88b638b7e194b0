"""Shared utilities for QR Frame."""

from qrframe.shared.config import FrameConfig
from qrframe.shared.logging import (
    ContextAdapter,
    LoggingConfig,
    LogLevel,
    format_error_for_user,
    get_logger,
    get_user_friendly_error,
    sanitize_message,
    setup_logging,
)
from qrframe.shared.network import (
    NetworkClient,
    NetworkError,
    NetworkErrorType,
    TimeoutConfig,
)
from qrframe.shared.validation import (
    NameInputValidator,
    ValidationResult,
    is_valid_address,
)

__all__ = [
    "FrameConfig",
    "NetworkClient",
    "NetworkError",
    "NetworkErrorType",
    "TimeoutConfig",
    "NameInputValidator",
    "ValidationResult",
    "is_valid_address",
    "ContextAdapter",
    "LoggingConfig",
    "LogLevel",
    "format_error_for_user",
    "get_logger",
    "get_user_friendly_error",
    "sanitize_message",
    "setup_logging",
]
