"""Recoverable flow errors for QR Frame."""

from dataclasses import dataclass
from enum import Enum


class FlowError(Enum):
    UNKNOWN_NETWORK = "unknown_network"
    EMPTY_INPUT = "empty_input"
    UNRESOLVABLE_INPUT = "unresolvable_input"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]

    @property
    def recovery_label(self) -> str:
        return _RECOVERY_LABELS[self]


_ERROR_MESSAGES = {
    FlowError.UNKNOWN_NETWORK: "Unknown network. Please start again.",
    FlowError.EMPTY_INPUT: "Address or ENS cannot be empty.",
    FlowError.UNRESOLVABLE_INPUT: "Invalid ENS name or address.",
}

_RECOVERY_LABELS = {
    FlowError.UNKNOWN_NETWORK: "Start Over",
    FlowError.EMPTY_INPUT: "Start Over",
    FlowError.UNRESOLVABLE_INPUT: "Try Again",
}


@dataclass
class FlowException(Exception):
    error: FlowError

    def __str__(self) -> str:
        return self.error.message
