"""Tests for OutputFormatter format selection and prompting."""

from __future__ import annotations

import json
import sys
from io import StringIO

import pytest

from tempconv.output.formatter import OutputFormatter


class _TtyStream(StringIO):
    def isatty(self) -> bool:
        return True


class TestFormatSelection:
    def test_pipe_defaults_to_json(self) -> None:
        assert OutputFormatter(stream=StringIO()).format == "json"

    def test_terminal_defaults_to_rich(self) -> None:
        assert OutputFormatter(stream=_TtyStream()).format == "rich"

    def test_forced_format_wins(self) -> None:
        assert OutputFormatter(stream=_TtyStream(), force_format="json").format == "json"


class TestInteractive:
    def test_json_never_prompts(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stdin", _TtyStream())
        assert not OutputFormatter(stream=_TtyStream(), force_format="json").interactive

    def test_rich_prompts_on_terminal_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stdin", _TtyStream())
        assert OutputFormatter(stream=_TtyStream()).interactive

    def test_rich_without_terminal_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stdin", StringIO())
        assert not OutputFormatter(stream=_TtyStream()).interactive


class TestEmit:
    def test_json_error_envelope(self) -> None:
        stream = StringIO()
        OutputFormatter(stream=stream, force_format="json").output_error(
            code="not_a_number", message="Please enter a valid number", command="convert"
        )
        parsed = json.loads(stream.getvalue())
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "not_a_number"

    def test_rich_error_line(self) -> None:
        stream = StringIO()
        OutputFormatter(stream=stream, force_format="rich").output_error(
            code="empty_input", message="Please enter a temperature", command="convert"
        )
        assert "Please enter a temperature" in stream.getvalue()
