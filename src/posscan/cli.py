"""Command-line interface for posscan."""

from __future__ import annotations

import argparse
import io
import logging
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from posscan.errors import SourceError
from posscan.report import FORMATS

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "example.pos"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    fmt: str
    encoding: str
    watch: bool
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="posscan",
        description="Scan integer and arithmetic operator tokens",
    )
    p.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Input file (default: {DEFAULT_INPUT})",
    )
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Report format (default: text)",
    )
    p.add_argument(
        "--encoding",
        default=None,
        metavar="ENC",
        help="Input file encoding (default: utf-8)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover posscan.toml)",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and rescan")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "posscan.toml"

    if not path.is_file():
        return {}

    logger.debug("loading config from %s", path)
    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    fmt = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_fmt = cfg_output.get("format")
        if cfg_fmt is not None:
            if cfg_fmt not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config (expected one of {', '.join(FORMATS)}): "
                    f"{cfg_fmt}"
                )
            fmt = cfg_fmt
    if args.format is not None:
        fmt = args.format

    encoding = "utf-8"
    cfg_input = config.get("input")
    if isinstance(cfg_input, dict):
        cfg_encoding = cfg_input.get("encoding")
        if isinstance(cfg_encoding, str):
            encoding = cfg_encoding
    if args.encoding is not None:
        encoding = args.encoding

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        fmt=fmt,
        encoding=encoding,
        watch=args.watch,
        verbose=args.verbose,
    )


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def scan_file(options: CliOptions) -> tuple[str, bool]:
    """Read and scan a file. Returns (report text, whether errors were found)."""
    from posscan.lines import read_lines
    from posscan.report import write_report
    from posscan.scanner import scan

    lines = read_lines(options.input_file, options.encoding)
    result = scan(lines)

    out = io.StringIO()
    write_report(result, lines, file=out, filename=str(options.input_file), fmt=options.fmt)
    return out.getvalue(), bool(result.errors)


def _emit(options: CliOptions, report: str) -> None:
    if options.output_file:
        options.output_file.write_text(report, encoding="utf-8")
    else:
        sys.stdout.write(report)
        sys.stdout.flush()


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, rescan on each modification."""
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    report, has_errors = scan_file(options)
                    _emit(options, report)
                    status = "with errors" if has_errors else "clean"
                    print(f"Scanned {options.input_file} ({status})", file=sys.stderr)
                except SourceError as exc:
                    print(f"error: {exc}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"error: cannot read config file: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    try:
        report, has_errors = scan_file(options)
    except SourceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    _emit(options, report)
    return 1 if has_errors else 0
