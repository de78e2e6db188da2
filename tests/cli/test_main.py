"""Tests for the root command group and the ``main`` entry point."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from tempconv import __version__
from tempconv.cli.main import cli, main

if TYPE_CHECKING:
    from pathlib import Path


class TestRootGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("convert", "history", "ui"):
            assert name in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_convert_help_mentions_directions(self) -> None:
        result = CliRunner().invoke(cli, ["convert", "--help"])
        assert "--to-fahrenheit" in result.output
        assert "--to-celsius" in result.output
        assert "--yes" in result.output


@pytest.mark.usefixtures("cli_env")
class TestMain:
    def test_success_returns_normally(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["convert", "100", "--format", "json"])
        assert json.loads(capsys.readouterr().out)["data"]["label"] == "212°F"

    def test_conversion_error_exits_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["convert", "abc", "--format", "json"])
        assert exc_info.value.code == 1
        assert json.loads(capsys.readouterr().out)["error"]["code"] == "not_a_number"

    def test_confirmation_error_exits_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["convert", "5000", "--format", "json"])
        assert exc_info.value.code == 1
        assert json.loads(capsys.readouterr().out)["error"]["code"] == "requires_confirmation"

    def test_usage_error_exits_2(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["convert"])
        assert exc_info.value.code == 2

    def test_output_format_from_dotenv(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("TEMPCONV_OUTPUT_FORMAT=rich\n", encoding="utf-8")
        result = CliRunner().invoke(cli, ["convert", "0"])
        assert result.exit_code == 0, result.output
        assert "32°F" in result.stdout
        assert not result.stdout.lstrip().startswith("{")
