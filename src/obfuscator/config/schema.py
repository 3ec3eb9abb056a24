"""Typed configuration schema and loader for the obfuscator package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, model_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class NamingSettings(BaseModel):
    """Name generation settings."""

    mode: Literal["mixed", "lower"]
    alphabet: Literal["kana", "latin", "custom"]
    custom_lower: str | None = None
    custom_upper: str | None = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _custom_symbols_present(self) -> "NamingSettings":
        if self.alphabet == "custom" and not (self.custom_lower and self.custom_upper):
            raise ValueError("custom alphabet requires custom_lower and custom_upper")
        return self


class LoggingSettings(BaseModel):
    """Package logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    level_env: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    naming: NamingSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``logging.level_env``.
    """

    with (
        importlib_resources.files("obfuscator.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    logging_section = merged.get("logging")
    level_env = logging_section.get("level_env") if isinstance(logging_section, dict) else None
    if level_env and level_env in environ:
        merged = deep_merge_dicts(merged, {"logging": {"level": environ[level_env].upper()}})

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "NamingSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]
