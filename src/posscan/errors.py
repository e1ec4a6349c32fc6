"""Scan error values and the source reading exception."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from posscan.tokens import Position

INVALID_TOKEN = "Invalid token."


@dataclass(frozen=True, slots=True)
class TokenError:
    """A character that failed classification, collected instead of raised."""

    message: str
    position: Position

    def format(self, lines: Sequence[str], filename: str = "example.pos") -> str:
        """Render the error with the offending source line and a caret under it.

        The location line is shown 1-based, the way editors number lines.
        """
        line_idx = self.position.line
        col = self.position.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx]
        else:
            source_line = ""

        line_num = str(line_idx + 1)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        # Tabs are kept so the caret lines up under the same character
        pad = "".join("\t" if ch == "\t" else " " for ch in source_line[:col])

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{line_idx + 1}:{col + 1}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class SourceError(Exception):
    """Raised when an input file cannot be read or decoded."""

    def __init__(self, message: str, path: Path) -> None:
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}")
