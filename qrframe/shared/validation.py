"""Input validation utilities for addresses and ENS-style names."""

import re
from dataclasses import dataclass
from typing import Any

ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{40}")
EMPTY_INPUT_MESSAGE = "Address or ENS cannot be empty."


@dataclass
class ValidationResult:
    is_valid: bool
    error_message: str | None = None
    normalized_value: Any = None


def is_valid_address(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return ADDRESS_PATTERN.fullmatch(value) is not None


class NameInputValidator:
    @staticmethod
    def validate(value: str | None) -> ValidationResult:
        if not value or not value.strip():
            return ValidationResult(
                is_valid=False,
                error_message=EMPTY_INPUT_MESSAGE,
            )

        return ValidationResult(is_valid=True, normalized_value=value.strip())
