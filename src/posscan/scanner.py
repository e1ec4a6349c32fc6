"""posscan scanner — converts lines of arithmetic source into positioned tokens."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

from posscan.errors import INVALID_TOKEN, TokenError
from posscan.tokens import (
    Number,
    Operator,
    Position,
    TokenInfo,
    is_digit,
    is_ignored,
    is_operator,
    wrap_int32,
)

logger = logging.getLogger(__name__)


class ScanResult(NamedTuple):
    """Tokens and errors from one scan, both in scan order."""

    tokens: list[TokenInfo]
    errors: list[TokenError]


class Scanner:
    """Single-pass scanner over newline-stripped lines.

    Invalid characters are collected as TokenError values and scanning
    continues with the next character, so one pass reports every error.
    """

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines = lines
        self._line = 0
        self._col = 0
        self._tokens: list[TokenInfo] = []
        self._errors: list[TokenError] = []

    def scan(self) -> ScanResult:
        """Scan every line and return the collected tokens and errors."""
        self._line = 0
        self._col = 0
        self._tokens = []
        self._errors = []

        while self._line < len(self._lines):
            self._col = 0
            self._scan_line()
            self._line += 1

        logger.debug(
            "scanned %d line(s): %d token(s), %d error(s)",
            len(self._lines),
            len(self._tokens),
            len(self._errors),
        )
        return ScanResult(self._tokens, self._errors)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col)

    def _line_remaining(self) -> bool:
        return self._col < len(self._lines[self._line])

    def _peek(self) -> str:
        return self._lines[self._line][self._col]

    def _advance(self) -> str:
        ch = self._peek()
        self._col += 1
        return ch

    # ------------------------------------------------------------------
    # Line scanning
    # ------------------------------------------------------------------

    def _scan_line(self) -> None:
        self._skip_ignored()

        while self._line_remaining():
            ch = self._peek()

            if is_digit(ch):
                self._scan_number()
            elif is_operator(ch):
                self._scan_operator()
            else:
                start = self._current_pos()
                self._advance()
                self._errors.append(TokenError(INVALID_TOKEN, start))

            self._skip_ignored()

    def _skip_ignored(self) -> None:
        while self._line_remaining() and is_ignored(self._peek()):
            self._col += 1

    def _scan_number(self) -> None:
        start = self._current_pos()
        value = 0
        while self._line_remaining() and is_digit(self._peek()):
            digit = ord(self._advance()) - ord("0")
            # Fixed-width arithmetic: long runs wrap around rather than grow
            value = wrap_int32(value * 10 + digit)
        self._tokens.append(TokenInfo(Number(value), start))

    def _scan_operator(self) -> None:
        start = self._current_pos()
        self._tokens.append(TokenInfo(Operator(self._advance()), start))


def scan(lines: Sequence[str]) -> ScanResult:
    """Convenience function: scan lines and return (tokens, errors)."""
    return Scanner(lines).scan()
