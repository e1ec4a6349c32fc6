"""Rendering of scan results for display."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from posscan.errors import TokenError
from posscan.scanner import ScanResult
from posscan.tokens import Number, Operator, TokenInfo

FORMATS = ("text", "json")


def format_token(info: TokenInfo) -> str:
    """One-line form of a token, e.g. ``0:2  NUMBER 42``."""
    pos = info.position
    return f"{pos.line}:{pos.column}  {_kind(info)} {info.token.value}"


def format_error(err: TokenError) -> str:
    pos = err.position
    return f"error: {err.message} at {pos.line}:{pos.column}"


def write_report(
    result: ScanResult,
    lines: Sequence[str],
    *,
    file: TextIO = sys.stdout,
    filename: str = "example.pos",
    fmt: str = "text",
) -> None:
    """Write *result* to *file*.

    Text output shows only the errors when there are any, and the tokens
    otherwise. JSON output always carries both lists.
    """
    if fmt == "json":
        json.dump(_to_json(result), file, indent=2)
        file.write("\n")
        return
    if fmt != "text":
        raise ValueError(f"unknown report format {fmt!r}")

    if result.errors:
        file.write("Errors\n")
        for err in result.errors:
            file.write(err.format(lines, filename))
            file.write("\n")
    else:
        file.write("Tokens\n")
        for info in result.tokens:
            file.write(format_token(info))
            file.write("\n")


def _kind(info: TokenInfo) -> str:
    if isinstance(info.token, Number):
        return "NUMBER"
    if isinstance(info.token, Operator):
        return "OPERATOR"
    raise TypeError(f"unexpected token {info.token!r}")


def _to_json(result: ScanResult) -> dict[str, Any]:
    return {
        "tokens": [
            {
                "kind": _kind(info).lower(),
                "value": info.token.value,
                "line": info.position.line,
                "column": info.position.column,
            }
            for info in result.tokens
        ],
        "errors": [
            {
                "message": err.message,
                "line": err.position.line,
                "column": err.position.column,
            }
            for err in result.errors
        ],
    }
