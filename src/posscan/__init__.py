"""posscan: integer and arithmetic operator scanner."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from posscan.scanner import ScanResult

__version__ = "0.1.0"


def scan(lines: Sequence[str]) -> ScanResult:
    """Scan newline-stripped lines into (tokens, errors)."""
    from posscan.scanner import scan as _scan

    return _scan(lines)
