"""Line splitting and file reading for scanner input."""

from __future__ import annotations

from pathlib import Path

from posscan.errors import SourceError


def split_lines(text: str) -> list[str]:
    """Split text into newline-stripped lines.

    Rules:
    1. Only "\\n" ends a line; other Unicode separators stay in the line.
    2. One trailing "\\r" is removed from each line (CRLF input).
    3. A trailing newline does not produce a final empty line.
    """
    if not text:
        return []

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """Read a file into newline-stripped lines, raising SourceError on failure."""
    try:
        # newline="" keeps "\r" so split_lines decides what ends a line
        with open(path, encoding=encoding, newline="") as f:
            text = f.read()
    except OSError as exc:
        raise SourceError(exc.strerror or str(exc), path) from exc
    except UnicodeDecodeError as exc:
        raise SourceError(f"cannot decode as {encoding}: {exc.reason}", path) from exc
    except LookupError as exc:
        raise SourceError(f"unknown encoding {encoding!r}", path) from exc
    return split_lines(text)
