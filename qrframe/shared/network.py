"""Network utilities for QR Frame with timeout handling.

Outbound calls are single-attempt: a failure is classified and raised as a
``NetworkError`` so the caller can fail closed.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import requests
from requests.exceptions import ConnectionError, HTTPError, Timeout

logger = logging.getLogger(__name__)


class NetworkErrorType(Enum):
    TIMEOUT = "timeout"
    CONNECTION_ERROR = "connection_error"
    HTTP_ERROR = "http_error"
    INVALID_RESPONSE = "invalid_response"
    UNKNOWN = "unknown"


@dataclass
class NetworkError(Exception):
    error_type: NetworkErrorType
    message: str
    original_error: Exception | None = None
    status_code: int | None = None
    response_text: str | None = None

    def __str__(self) -> str:
        return self.message


@dataclass
class TimeoutConfig:
    connect_timeout: float = 5.0
    read_timeout: float = 10.0

    @property
    def request_timeout(self) -> tuple[float, float]:
        return (self.connect_timeout, self.read_timeout)


DEFAULT_TIMEOUT_CONFIG = TimeoutConfig()


def classify_error(error: Exception) -> NetworkErrorType:
    if isinstance(error, NetworkError):
        return error.error_type
    if isinstance(error, Timeout):
        return NetworkErrorType.TIMEOUT
    elif isinstance(error, ConnectionError):
        return NetworkErrorType.CONNECTION_ERROR
    elif isinstance(error, HTTPError):
        return NetworkErrorType.HTTP_ERROR
    elif isinstance(error, ValueError):
        return NetworkErrorType.INVALID_RESPONSE
    return NetworkErrorType.UNKNOWN


def create_network_error(
    error: Exception, base_url: str, context: str = ""
) -> NetworkError:
    error_type = classify_error(error)
    context_prefix = f"{context}: " if context else ""

    if error_type == NetworkErrorType.TIMEOUT:
        message = f"{context_prefix}Connection timeout. Service may be unavailable: {base_url}"
    elif error_type == NetworkErrorType.CONNECTION_ERROR:
        message = (
            f"{context_prefix}Cannot connect to service: {base_url}. "
            "Check your network connection."
        )
    elif error_type == NetworkErrorType.HTTP_ERROR:
        response = getattr(error, "response", None)
        status_code = getattr(response, "status_code", None)
        response_text = getattr(response, "text", None)
        message = f"{context_prefix}HTTP error {status_code}: {response_text or 'Unknown error'}"
        return NetworkError(
            error_type=error_type,
            message=message,
            original_error=error,
            status_code=status_code,
            response_text=response_text,
        )
    elif error_type == NetworkErrorType.INVALID_RESPONSE:
        message = f"{context_prefix}Invalid JSON response from {base_url}"
    else:
        message = f"{context_prefix}Network error: {str(error)}"

    return NetworkError(
        error_type=error_type,
        message=message,
        original_error=error,
    )


class NetworkClient:
    def __init__(
        self,
        base_url: str,
        timeout_config: TimeoutConfig | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_config = timeout_config or DEFAULT_TIMEOUT_CONFIG
        self.headers = {"Accept": "application/json", **(headers or {})}

    def _url(self, endpoint: str) -> str:
        if not endpoint:
            return self.base_url
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return f"{self.base_url}{endpoint}"

    def get_optional(
        self,
        endpoint: str,
        context: str = "",
        **kwargs,
    ) -> Any | None:
        """GET a JSON document, returning ``None`` when the service answers 404."""
        url = self._url(endpoint)
        timeout = kwargs.pop("timeout", self.timeout_config.request_timeout)
        headers = {**self.headers, **kwargs.pop("headers", {})}

        try:
            response = requests.get(url, timeout=timeout, headers=headers, **kwargs)
            if response.status_code == 404:
                return None
            response.raise_for_status()
            return response.json()
        except Exception as e:
            error = create_network_error(e, self.base_url, context)
            logger.debug("Request to %s failed: %s", url, error.message)
            raise error from e
