from __future__ import annotations

import json

import pytest

from converter.cli import main


def test_to_unicode_prints_converted_text(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["to-unicode", "TiÕng ViÖt"]) == 0

    assert capsys.readouterr().out.strip() == "Tiếng Việt"


def test_to_tcvn3_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--format", "json", "to-tcvn3", "Xin chào"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload == {"value": "Xin chµo", "ok": True, "error": None}


def test_transcode_prints_target_bytes(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["transcode", "你好", "--source", "utf8", "--target", "gbk"]) == 0

    assert capsys.readouterr().out.strip() == "你好".encode("gbk").hex(" ")


def test_transcode_failure_reports_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--format", "json", "transcode", "你好", "--target", "windows-1252"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["value"] == ""
    assert payload["ok"] is False
    assert payload["error"]
