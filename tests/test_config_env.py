from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from obfuscator.config import load_config


def test_env_log_level(monkeypatch: Any) -> None:
    monkeypatch.setenv("OBFUSCATOR_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.logging.level == "DEBUG"


def test_explicit_env_mapping_wins_over_process_env(monkeypatch: Any) -> None:
    monkeypatch.setenv("OBFUSCATOR_LOG_LEVEL", "DEBUG")
    cfg = load_config(env={})
    assert cfg.logging.level == "WARNING"


def test_custom_env_override(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('logging:\n  level_env: "CUSTOM_ENV"\n')
    cfg = load_config(cfg_file, env={"CUSTOM_ENV": "error", "OBFUSCATOR_LOG_LEVEL": "DEBUG"})
    assert cfg.logging.level_env == "CUSTOM_ENV"
    assert cfg.logging.level == "ERROR"


def test_invalid_env_level() -> None:
    with pytest.raises(ValidationError):
        load_config(env={"OBFUSCATOR_LOG_LEVEL": "chatty"})
