"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from posscan.errors import TokenError
from posscan.scanner import ScanResult, scan
from posscan.tokens import Number, Operator, Position, Token, TokenInfo


@pytest.fixture
def scan_text():
    """Return a helper that splits source on newlines and scans it."""

    def _scan(source: str) -> ScanResult:
        return scan(source.split("\n")) if source else scan([])

    return _scan


def assert_tokens(tokens: list[TokenInfo], expected: list[Token]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.token for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_positions(items: list[TokenInfo] | list[TokenError], expected: list[tuple[int, int]]) -> None:
    """Assert that (line, column) of each token or error match the expected list."""
    actual = [(i.position.line, i.position.column) for i in items]
    assert actual == expected, f"Expected {expected}, got {actual}"


def num(value: int) -> Number:
    return Number(value)


def op(value: str) -> Operator:
    return Operator(value)


def pos(line: int, column: int) -> Position:
    return Position(line, column)
