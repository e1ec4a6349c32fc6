"""Tests for the CLI module: arg parsing, exit codes, output, end-to-end."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from posscan.cli import CliOptions, build_parser, main, scan_file

# ---------------------------------------------------------------------------
# Arg parsing via build_parser
# ---------------------------------------------------------------------------


class TestArgParsing:
    def test_default_input(self) -> None:
        p = build_parser()
        ns = p.parse_args([])
        assert ns.input == "example.pos"
        assert ns.output is None
        assert ns.format is None

    def test_input_and_output(self) -> None:
        p = build_parser()
        ns = p.parse_args(["calc.pos", "-o", "out.txt"])
        assert ns.input == "calc.pos"
        assert ns.output == "out.txt"

    def test_format_flag(self) -> None:
        p = build_parser()
        ns = p.parse_args(["calc.pos", "--format", "json"])
        assert ns.format == "json"

    def test_invalid_format_rejected(self) -> None:
        p = build_parser()
        with pytest.raises(SystemExit):
            p.parse_args(["calc.pos", "--format", "xml"])

    def test_watch_and_verbose(self) -> None:
        p = build_parser()
        ns = p.parse_args(["calc.pos", "--watch", "-v"])
        assert ns.watch is True
        assert ns.verbose is True


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class TestExitCodes:
    def test_clean_returns_0(self, tmp_path: Path) -> None:
        src = tmp_path / "ok.pos"
        src.write_text("1 + 2\n")
        assert main([str(src), "-o", str(tmp_path / "out.txt")]) == 0

    def test_scan_errors_return_1(self, tmp_path: Path) -> None:
        src = tmp_path / "bad.pos"
        src.write_text("1 & 2\n")
        assert main([str(src), "-o", str(tmp_path / "out.txt")]) == 1

    def test_missing_input_returns_2(self, tmp_path: Path, capsys) -> None:
        assert main([str(tmp_path / "missing.pos")]) == 2
        assert "error:" in capsys.readouterr().err

    def test_bad_config_returns_2(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "posscan.toml").write_text("[output\n")
        src = tmp_path / "in.pos"
        src.write_text("1\n")
        assert main([str(src)]) == 2
        assert "invalid config" in capsys.readouterr().err

    def test_unreadable_config_returns_2(
        self, tmp_path: Path, capsys, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def denied(config_path: Path | None, input_dir: Path) -> dict:
            raise PermissionError(13, "Permission denied", str(input_dir / "posscan.toml"))

        monkeypatch.setattr("posscan.cli.load_config", denied)
        src = tmp_path / "in.pos"
        src.write_text("1\n")
        assert main([str(src)]) == 2
        assert "cannot read config file" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class TestOutput:
    def test_tokens_to_stdout(self, tmp_path: Path, capsys) -> None:
        src = tmp_path / "in.pos"
        src.write_text("12+3\n")
        assert main([str(src)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Tokens\n")
        assert "0:2  OPERATOR +" in out

    def test_errors_to_output_file(self, tmp_path: Path) -> None:
        src = tmp_path / "in.pos"
        src.write_text("1\n2 x\n")
        out = tmp_path / "report.txt"
        assert main([str(src), "-o", str(out)]) == 1
        text = out.read_text()
        assert text.startswith("Errors\n")
        assert f"{src}:2:3" in text

    def test_json_output(self, tmp_path: Path, capsys) -> None:
        src = tmp_path / "in.pos"
        src.write_text("7 ?\n")
        assert main([str(src), "--format", "json"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data["tokens"][0]["value"] == 7
        assert data["errors"][0]["column"] == 2


# ---------------------------------------------------------------------------
# scan_file smoke test
# ---------------------------------------------------------------------------


class TestScanFile:
    def test_basic(self, tmp_path: Path) -> None:
        src = tmp_path / "simple.pos"
        src.write_text("4 / 2\n")
        opts = CliOptions(
            input_file=src,
            output_file=None,
            fmt="text",
            encoding="utf-8",
            watch=False,
            verbose=False,
        )
        report, has_errors = scan_file(opts)
        assert has_errors is False
        assert "0:2  OPERATOR /" in report
