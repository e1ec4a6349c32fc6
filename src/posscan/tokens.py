"""Token data structures and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 0-based line and column."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Number:
    """Integer literal, held as a signed 32-bit value."""

    value: int


@dataclass(frozen=True, slots=True)
class Operator:
    """One of the arithmetic operators ``+ - * /``."""

    value: str


Token = Number | Operator


@dataclass(frozen=True, slots=True)
class TokenInfo:
    """A token paired with the position of its first character."""

    token: Token
    position: Position


OPERATORS = frozenset("+-*/")

# Skipped silently between tokens
WHITESPACE = frozenset(" \r\t")

_INT32_MIN = -(2**31)
_UINT32_RANGE = 2**32


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_operator(ch: str) -> bool:
    return ch in OPERATORS


def is_ignored(ch: str) -> bool:
    return ch in WHITESPACE


def wrap_int32(value: int) -> int:
    """Truncate value to a signed 32-bit integer with two's complement wraparound."""
    return (value - _INT32_MIN) % _UINT32_RANGE + _INT32_MIN
