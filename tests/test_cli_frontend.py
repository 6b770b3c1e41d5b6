# tests/test_cli_frontend.py
"""
Tests for the phrasing-cli command-line frontend.
"""

from __future__ import annotations

import io
import json

import pytest

from nlg import cli_frontend


def _run(argv, capsys) -> str:
    with pytest.raises(SystemExit) as excinfo:
        cli_frontend.main(argv)
    assert excinfo.value.code == 0
    return capsys.readouterr().out.strip()


def test_render_from_flags(capsys) -> None:
    out = _run(
        [
            "render",
            "--template", "@I jumped with @my spear at ~user!",
            "--user-person", "2",
            "--user-name", "rogue",
            "--user-gender", "female",
            "--user-specific", "Brunhilda",
            "--target-name", "goblin",
            "--target-gender", "male",
        ],
        capsys,
    )
    assert out == "You jumped with your spear at the goblin!"


def test_render_without_capitalization(capsys) -> None:
    out = _run(
        ["render", "-t", "@user fell.", "--user-name", "idol", "--no-capitalize"],
        capsys,
    )
    assert out == "the idol fell."


def test_render_from_json_file(tmp_path, capsys) -> None:
    request = {
        "template": "~user dodged @my arrow.",
        "user": {"person": 1, "being": {"general_name": "archers", "gender": "plural"}},
        "target": {"person": 3, "being": {"general_name": "thief", "specific_name": "Vex"}},
    }
    path = tmp_path / "request.json"
    path.write_text(json.dumps(request), encoding="utf-8")

    assert _run(["render", "--input", str(path)], capsys) == "Vex dodged our arrow."


def test_render_from_stdin(monkeypatch, capsys) -> None:
    request = {"template": "@I @was tired.", "user": {"person": 3, "being": {"general_name": "ox"}}}
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(request)))
    assert _run(["render", "--input", "-"], capsys) == "It was tired."


def test_missing_user_name_exits_with_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_frontend.main(["render", "-t", "@I ran."])
    assert "--user-name" in str(excinfo.value.code)


def test_invalid_person_exits_with_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_frontend.main(["render", "-t", "@I ran.", "--user-name", "elk", "--user-person", "5"])
    assert "invalid render request" in str(excinfo.value.code)
