import json
import logging
from unittest.mock import Mock

import pytest
from requests.exceptions import ConnectionError, HTTPError, Timeout

from qrframe.shared.logging import (
    ContextAdapter,
    HumanReadableFormatter,
    LoggingConfig,
    LogLevel,
    StructuredFormatter,
    format_error_for_user,
    get_logger,
    get_user_friendly_error,
    reset_logging,
    sanitize_message,
    setup_logging,
)
from qrframe.shared.network import NetworkError, NetworkErrorType

PRIVATE_KEY = "ab" * 32
ADDRESS = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"


def make_record(msg, args=(), context=None):
    record = logging.LogRecord(
        name="qrframe.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )
    if context is not None:
        record.context = context
    return record


@pytest.mark.unit
class TestSanitizeMessage:
    def test_redacts_private_key_assignment(self):
        sanitized = sanitize_message(f"private_key=0x{PRIVATE_KEY}")
        assert sanitized == "private_key=[REDACTED]"

    def test_redacts_bare_key(self):
        assert sanitize_message(f"loaded {PRIVATE_KEY}") == "loaded [KEY_REDACTED]"

    def test_redacts_prefixed_bare_key(self):
        assert PRIVATE_KEY not in sanitize_message(f"loaded 0x{PRIVATE_KEY}")

    def test_addresses_are_kept(self):
        assert sanitize_message(f"Generated QR for {ADDRESS}") == (
            f"Generated QR for {ADDRESS}"
        )

    def test_empty_message(self):
        assert sanitize_message("") == ""


@pytest.mark.unit
class TestUserFriendlyErrors:
    def test_timeout(self):
        message, suggestion = get_user_friendly_error(Timeout("slow"))
        assert "timed out" in message
        assert "0x address" in suggestion

    def test_connection_error(self):
        message, _ = get_user_friendly_error(ConnectionError("refused"))
        assert message == "Unable to reach the name service."

    def test_http_error(self):
        error = NetworkError(
            error_type=NetworkErrorType.HTTP_ERROR,
            message="Resolve name: HTTP error 503: unavailable",
            status_code=503,
        )
        message, _ = get_user_friendly_error(error)
        assert message == "The name service rejected the lookup."

    def test_raw_http_error(self):
        message, _ = get_user_friendly_error(HTTPError(response=Mock(status_code=500)))
        assert message == "The name service rejected the lookup."

    def test_invalid_json(self):
        error = json.JSONDecodeError("Expecting value", "<html>", 0)
        message, _ = get_user_friendly_error(error)
        assert message == "The name service returned an unexpected response."

    def test_unknown_error(self):
        message, suggestion = get_user_friendly_error(RuntimeError("weird"))
        assert message == "An unexpected error occurred."
        assert suggestion is None

    def test_format_error_for_user_joins_suggestion(self):
        formatted = format_error_for_user(ConnectionError("refused"))
        assert formatted == (
            "Unable to reach the name service. "
            "Check your internet connection and try again."
        )

    def test_format_error_for_user_without_suggestion(self):
        assert format_error_for_user(RuntimeError("x")) == "An unexpected error occurred."


@pytest.mark.unit
class TestFormatters:
    def test_structured_formatter_emits_json_with_context(self):
        formatter = StructuredFormatter()
        record = make_record("resolved %s", ("vitalik.eth",), {"network": "eth"})
        data = json.loads(formatter.format(record))
        assert data["message"] == "resolved vitalik.eth"
        assert data["context"] == {"network": "eth"}
        assert data["level"] == "INFO"

    def test_structured_formatter_sanitizes_context(self):
        formatter = StructuredFormatter()
        record = make_record("loaded", context={"secret": PRIVATE_KEY, "size": 400})
        data = json.loads(formatter.format(record))
        assert data["context"] == {"secret": "[KEY_REDACTED]", "size": 400}

    def test_human_formatter_sanitizes_arguments(self):
        formatter = HumanReadableFormatter()
        record = make_record("key %s", (PRIVATE_KEY,))
        formatted = formatter.format(record)
        assert PRIVATE_KEY not in formatted
        assert "[KEY_REDACTED]" in formatted

    def test_human_formatter_appends_context(self):
        formatter = HumanReadableFormatter()
        record = make_record("handled", context={"step": "show_result"})
        assert formatter.format(record).endswith("[step=show_result]")

    def test_sanitizing_can_be_disabled(self):
        formatter = HumanReadableFormatter(sanitize=False)
        assert PRIVATE_KEY in formatter.format(make_record("key %s", (PRIVATE_KEY,)))


@pytest.mark.unit
class TestContextAdapter:
    def test_with_context_merges(self):
        adapter = get_logger("qrframe.test", {"step": "choose_network"})
        child = adapter.with_context(network="eth")
        assert isinstance(child, ContextAdapter)
        assert child.extra == {"step": "choose_network", "network": "eth"}
        assert adapter.extra == {"step": "choose_network"}

    def test_process_places_context_in_extra(self):
        adapter = ContextAdapter(logging.getLogger("qrframe.test"), {"network": "eth"})
        _, kwargs = adapter.process("msg", {})
        assert kwargs["extra"]["context"] == {"network": "eth"}


@pytest.mark.unit
class TestSetupLogging:
    def test_config_from_environment(self, monkeypatch):
        monkeypatch.setenv("QRFRAME_LOG_LEVEL", "debug")
        monkeypatch.setenv("QRFRAME_LOG_STDOUT", "yes")
        monkeypatch.setenv("QRFRAME_LOG_FILE", "0")
        monkeypatch.setenv("QRFRAME_LOG_FORMAT", "json")
        config = LoggingConfig.from_environment()
        assert config.log_level == LogLevel.DEBUG
        assert config.log_to_stdout is True
        assert config.log_to_file is False
        assert config.json_format is True

    def test_defaults(self, monkeypatch):
        for name in ("QRFRAME_LOG_LEVEL", "QRFRAME_LOG_STDOUT", "QRFRAME_LOG_FILE"):
            monkeypatch.delenv(name, raising=False)
        config = LoggingConfig.from_environment()
        assert config.log_level == LogLevel.INFO
        assert config.log_to_file is True
        assert config.log_to_stdout is False

    def test_invalid_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("QRFRAME_LOG_LEVEL", "chatty")
        assert LoggingConfig.from_environment().log_level == LogLevel.INFO

    def test_writes_log_file(self, tmp_path):
        reset_logging()
        try:
            setup_logging(LoggingConfig(log_level=LogLevel.DEBUG, log_dir=tmp_path))
            get_logger("qrframe.test").with_context(network="eth").info("hello from test")
            for handler in logging.getLogger("qrframe").handlers:
                handler.flush()
            content = (tmp_path / "qrframe.log").read_text()
            assert "hello from test [network=eth]" in content
        finally:
            reset_logging()
