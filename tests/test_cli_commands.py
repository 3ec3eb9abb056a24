from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from obfuscator.cli import app


@pytest.fixture
def five_symbol_config(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "five.yml"
    cfg_file.write_text(
        "naming:\n"
        "  mode: lower\n"
        "  alphabet: custom\n"
        '  custom_lower: "ABCDE"\n'
        '  custom_upper: "VWXYZ"\n',
        encoding="utf-8",
    )
    return cfg_file


def test_sample_prints_bracketed_names(five_symbol_config: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["sample", "--count", "6", "--config", str(five_symbol_config)])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["  [A]", "  [B]", "  [C]", "  [D]", "  [E]", "  [AA]"]


def test_sample_mode_override(five_symbol_config: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["sample", "-n", "7", "--mode", "mixed", "--config", str(five_symbol_config)]
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines()[5:] == ["  [V]", "  [W]"]


def test_sample_defaults_to_kana() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["sample", "--count", "2"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["  [あ]", "  [い]"]


def test_sample_zero_count() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["sample", "--count", "0"])
    assert result.exit_code == 0
    assert result.stdout == ""


def test_encode(five_symbol_config: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["encode", "0", "4", "5", "9", "29", "30", "--config", str(five_symbol_config)]
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "0\tA",
        "4\tE",
        "5\tAA",
        "9\tAE",
        "29\tEE",
        "30\tAAA",
    ]


def test_decode(five_symbol_config: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["decode", "A", "EE", "AAA", "--config", str(five_symbol_config)]
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["A\t0", "EE\t29", "AAA\t30"]


def test_decode_latin_mixed(tmp_path: Path) -> None:
    cfg_file = tmp_path / "latin.yml"
    cfg_file.write_text("naming:\n  alphabet: latin\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["decode", "Z", "aa", "--config", str(cfg_file)])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Z\t51", "aa\t52"]
