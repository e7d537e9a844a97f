"""Exceptions raised by radix64."""

from enum import Enum


class DecodeErrorKind(Enum):
    """Reasons a piece of text can fail to decode."""

    INVALID_CHARACTER = "invalid_character"    # Not a data or padding symbol
    MISPLACED_PADDING = "misplaced_padding"    # Padding outside the trailing run
    INVALID_LENGTH = "invalid_length"          # Cannot form whole groups
    NON_ZERO_PADDING = "non_zero_padding"      # Filler bits of the last group are set


class InvalidSymbolError(ValueError):
    """Raised when a character is not one of the 64 data symbols."""

    def __init__(self, symbol: str):
        super().__init__(f"Not a data symbol: {symbol!r}")
        self.symbol = symbol


class DecodeError(ValueError):
    """Raised when text cannot be decoded.

    Attributes:
        kind: Which validation rule rejected the input.
        position: 0-based character offset the failure points at.
    """

    def __init__(self, kind: DecodeErrorKind, position: int, detail: str = ""):
        message = f"{kind.value} at position {position}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.kind = kind
        self.position = position
