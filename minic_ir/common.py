"""Small shared helpers: number formatting, character classes, trimming, logging."""

from __future__ import annotations

import sys
from enum import IntEnum

_UINT64_MASK = (1 << 64) - 1


class LogLevel(IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    INFO = 1
    ERROR = 2


def int_to_str(num: int) -> str:
    """Format ``num`` as an unsigned 64-bit decimal number."""
    return str(num & _UINT64_MASK)


def double_to_str(num: float) -> str:
    """Format ``num`` with six digits after the decimal point."""
    return f"{num:f}"


def _char(ch: str) -> str:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def is_letter(ch: str) -> bool:
    """True for an ASCII letter."""
    ch = _char(ch)
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def is_digit(ch: str) -> bool:
    """True for an ASCII digit 0-9."""
    ch = _char(ch)
    return "0" <= ch <= "9"


def is_letter_or_digit(ch: str) -> bool:
    return is_letter(ch) or is_digit(ch)


def is_letter_digit_underscore(ch: str) -> bool:
    return is_letter_or_digit(ch) or ch == "_"


def is_letter_underscore(ch: str) -> bool:
    return is_letter(ch) or ch == "_"


def trim(text: str) -> str:
    """Strip leading and trailing spaces; text made only of spaces is returned unchanged."""
    stripped = text.strip(" ")
    return stripped if stripped else text


def log(level: LogLevel | int, message: str) -> None:
    """Write a message: errors go to standard output, everything else to standard error."""
    stream = sys.stdout if level == LogLevel.ERROR else sys.stderr
    print(message, file=stream)