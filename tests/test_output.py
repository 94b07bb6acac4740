"""Tests for JSON envelope rendering (cli/output.py)."""

from __future__ import annotations

import io
import json

import pytest

from askcosmos.cli import output


class TestRender:
    def test_compact_single_line(self) -> None:
        text = output.render({"status": "ok", "nested": {"a": [1, 2]}})
        assert text == '{"status":"ok","nested":{"a":[1,2]}}'

    def test_multiline_message_stays_on_one_line(self) -> None:
        text = output.render(output.error_envelope("line one\nline two"))
        assert "\n" not in text
        assert json.loads(text)["message"] == "line one\nline two"

    @pytest.mark.parametrize("value", [42, "text", None, [], 1.5, True])
    def test_scalars(self, value: object) -> None:
        assert json.loads(output.render(value)) == value


class TestEmit:
    def test_emit_writes_one_line(self) -> None:
        stream = io.StringIO()
        output.emit([{"id": "a"}], stream)
        assert stream.getvalue() == '[{"id":"a"}]\n'

    def test_emit_error_envelope(self) -> None:
        stream = io.StringIO()
        output.emit_error("Database 'x' not found", stream)
        assert json.loads(stream.getvalue()) == {
            "status": "error",
            "message": "Database 'x' not found",
        }

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.emit({"status": "ok"})
        captured = capsys.readouterr()
        assert captured.out == '{"status":"ok"}\n'
        assert captured.err == ""

    def test_unserializable_value_writes_nothing(self) -> None:
        stream = io.StringIO()
        with pytest.raises(TypeError):
            output.emit({"tags": {1, 2}}, stream)
        assert stream.getvalue() == ""
