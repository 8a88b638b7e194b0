import pytest

from qrframe.shared.validation import (
    EMPTY_INPUT_MESSAGE,
    NameInputValidator,
    ValidationResult,
    is_valid_address,
)

HEX_DIGITS = "0123456789abcdefABCDEF"


class TestValidationResult:
    def test_valid_result(self):
        result = ValidationResult(is_valid=True, normalized_value="0xabc")
        assert result.is_valid is True
        assert result.error_message is None
        assert result.normalized_value == "0xabc"

    def test_invalid_result(self):
        result = ValidationResult(is_valid=False, error_message="Test error")
        assert result.is_valid is False
        assert result.error_message == "Test error"
        assert result.normalized_value is None


@pytest.mark.unit
class TestIsValidAddress:
    @pytest.mark.parametrize(
        "address",
        [
            "0x" + "0" * 40,
            "0x" + "f" * 40,
            "0x" + "F" * 40,
            "0x" + "Aa" * 20,
            "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045",
            "0x" + (HEX_DIGITS * 2)[:40],
        ],
    )
    def test_accepts_forty_hex_digits(self, address):
        assert is_valid_address(address) is True

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "0x",
            "0x" + "a" * 39,
            "0x" + "a" * 41,
            "a" * 42,
            "0X" + "a" * 40,
            "1x" + "a" * 40,
            "0x" + "g" + "a" * 39,
            "0x" + "a" * 39 + "z",
            " 0x" + "a" * 40,
            "0x" + "a" * 40 + " ",
            "0x" + "a" * 40 + "\n",
            "vitalik.eth",
        ],
    )
    def test_rejects_everything_else(self, address):
        assert is_valid_address(address) is False

    def test_non_string_input(self):
        assert is_valid_address(None) is False
        assert is_valid_address(0x1234) is False
        assert is_valid_address(b"0x" + b"a" * 40) is False

    def test_every_hex_character_accepted_in_every_position(self):
        for char in HEX_DIGITS:
            assert is_valid_address("0x" + char * 40) is True


@pytest.mark.unit
class TestNameInputValidator:
    def test_trims_input(self):
        result = NameInputValidator.validate("  vitalik.eth \n")
        assert result.is_valid is True
        assert result.normalized_value == "vitalik.eth"

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank_input(self, value):
        result = NameInputValidator.validate(value)
        assert result.is_valid is False
        assert result.error_message == EMPTY_INPUT_MESSAGE
