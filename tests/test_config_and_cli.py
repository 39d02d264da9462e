from __future__ import annotations

import json
from pathlib import Path

import pytest

from parsediag import ConfigError, FormatterConfig, SnippetFormatter
from parsediag.cli import main


@pytest.mark.parametrize(
    "kw",
    [
        {"tab_size": 0},
        {"lines_before": -1},
        {"lines_after": -2},
        {"marker": ""},
        {"marker": "^^"},
        {"prefix": "a\nb"},
    ],
)
def test_invalid_config_is_rejected_eagerly(kw: dict) -> None:
    with pytest.raises(ConfigError):
        FormatterConfig(**kw)


def test_config_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="tab_size"):
        SnippetFormatter(FormatterConfig(tab_size=-3))


def test_with_indent() -> None:
    cfg = FormatterConfig.with_indent(3, marker="~")
    assert cfg.prefix == "   "
    assert cfg.marker == "~"
    with pytest.raises(ConfigError, match="prefix"):
        FormatterConfig.with_indent(2, prefix="> ")


def test_from_mapping() -> None:
    cfg = FormatterConfig.from_mapping({"tab-size": 4, "lines_after": 2, "indent": 2})
    assert cfg == FormatterConfig(tab_size=4, lines_after=2, prefix="  ")
    with pytest.raises(ConfigError, match="unknown"):
        FormatterConfig.from_mapping({"colour": True})
    with pytest.raises(ConfigError):
        FormatterConfig.from_mapping({"tab_size": "8"})


def test_from_pyproject(tmp_path: Path) -> None:
    p = tmp_path / "pyproject.toml"
    p.write_text('[tool.parsediag]\ntab-size = 2\nmarker = "~"\nlines-before = 1\n', encoding="utf-8")
    assert FormatterConfig.from_pyproject(p) == FormatterConfig(tab_size=2, marker="~", lines_before=1)

    p.write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert FormatterConfig.from_pyproject(p) == FormatterConfig()

    p.write_text("[tool.parsediag\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        FormatterConfig.from_pyproject(p)


def test_cli_prints_snippet(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "input.txt"
    src.write_text("alpha\nbeta gamma\ndelta\n", encoding="utf-8")

    rc = main([str(src), "--line", "2", "--column", "5", "--length", "5", "--indent", "0", "-m", "bad word"])
    assert rc == 0
    out = capsys.readouterr().out
    assert out == f"{src}:2:5: bad word\n2: beta gamma\n        ^^^^^\n"


def test_cli_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "input.txt"
    src.write_text("a b c", encoding="utf-8")

    rc = main([str(src), "--line", "1", "--column", "2", "--stop-column", "4", "--marker", "~", "--json"])
    assert rc == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["snippet"] == " a b c\n   ~~~\n"
    assert payload["message"] is None


def test_cli_rejects_bad_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "input.txt"
    src.write_text("x", encoding="utf-8")
    assert main([str(src), "--line", "1", "--column", "0", "--tab-size", "0"]) == 2
    assert "tab_size" in capsys.readouterr().err


def test_cli_reports_missing_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "nope.txt"
    assert main([str(missing), "--line", "1", "--column", "0"]) == 2
    assert capsys.readouterr().err.startswith("parsediag: ")

    src = tmp_path / "input.txt"
    src.write_text("x", encoding="utf-8")
    assert main([str(src), "--line", "1", "--column", "0", "--config", str(tmp_path / "pyproject.toml")]) == 2
    assert "pyproject.toml" in capsys.readouterr().err


def test_cli_single_line_file_with_trailing_newline(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "input.txt"
    src.write_text("ab cd ef\n", encoding="utf-8")
    assert main([str(src), "--line", "1", "--column", "3", "--length", "2", "--indent", "0"]) == 0
    assert capsys.readouterr().out == "ab cd ef\n   ^^\n"
