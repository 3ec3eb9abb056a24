from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from obfuscator.cli import app


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["sample", "--config", str(bad_cfg)])
    assert result.exit_code == 4


def test_missing_config(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["encode", "1", "--config", str(tmp_path / "missing.yml")])
    assert result.exit_code == 4


def test_invalid_custom_alphabet(tmp_path: Path) -> None:
    cfg_file = tmp_path / "dup.yml"
    cfg_file.write_text(
        'naming:\n  alphabet: custom\n  custom_lower: "ab"\n  custom_upper: "ba"\n',
        encoding="utf-8",
    )
    runner = CliRunner()
    result = runner.invoke(app, ["sample", "--config", str(cfg_file)])
    assert result.exit_code == 4
    assert "duplicate symbol" in result.output


def test_unknown_mode() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["encode", "1", "--mode", "upper"])
    assert result.exit_code == 2


def test_negative_index() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["encode", "--", "-1"])
    assert result.exit_code == 5
    assert "non-negative" in result.output


def test_undecodable_name() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["decode", "abc"])
    assert result.exit_code == 5
    assert "not part of the mixed alphabet" in result.output


def test_malformed_yaml(tmp_path: Path) -> None:
    cfg_file = tmp_path / "broken.yml"
    cfg_file.write_text("naming: [unclosed\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["sample", "--config", str(cfg_file)])
    assert result.exit_code == 4
