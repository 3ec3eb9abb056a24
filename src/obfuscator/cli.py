"""Typer-based command line interface for inspecting generated names.

The commands never rename anything themselves; they show which names a
renaming pass would receive for a given configuration.  ``sample`` prints the
start of a name sequence, ``encode`` maps indices to names and ``decode`` maps
names back to indices.

Exit codes
----------
0 success
2 usage error (reported by Typer)
4 configuration error
5 naming error (negative index, name outside the alphabet)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .naming import NameMode, NamingSession, alphabet_from_config, decode, encode
from .utils.errors import NamingError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="obfuscator",
    help="Inspect generated names. Try 'obfuscator sample'.",
)

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None) -> ConfigModel:
    """Load configuration, exiting with code 4 when it is unusable."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError, ValueError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging(cfg.logging.level)
    return cfg


def _resolve_mode(cfg: ConfigModel, mode: str | None) -> NameMode:
    value = mode if mode is not None else cfg.naming.mode
    try:
        return NameMode(value)
    except ValueError:
        _safe_exit(2, f"Unknown mode {value!r}; expected 'mixed' or 'lower'")


_MODE_HELP = "Name mode [mixed|lower]; defaults to the configured mode"
_CONFIG_HELP = "YAML config to override defaults"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main() -> None:
    """Entry point for the obfuscator command group."""
    pass


@app.command()
def sample(
    count: int = typer.Option(60, "--count", "-n", min=0, help="Number of names to print"),
    mode: Optional[str] = typer.Option(None, "--mode", help=_MODE_HELP),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help=_CONFIG_HELP
    ),
) -> None:
    """Print the first ``count`` names of a fresh factory."""

    cfg = _load(config_path)
    name_mode = _resolve_mode(cfg, mode)
    try:
        factory = NamingSession.from_config(cfg).factory(name_mode)
    except NamingError as exc:
        _safe_exit(4, str(exc))
    logger.info("sampling %d %s-mode names", count, name_mode.value)
    for _ in range(count):
        typer.echo(f"  [{factory.next_name()}]")


@app.command("encode")
def encode_cmd(
    indices: List[int] = typer.Argument(..., help="Sequence indices to encode"),  # noqa: B008
    mode: Optional[str] = typer.Option(None, "--mode", help=_MODE_HELP),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help=_CONFIG_HELP
    ),
) -> None:
    """Print the name assigned to each index."""

    cfg = _load(config_path)
    name_mode = _resolve_mode(cfg, mode)
    try:
        alphabet = alphabet_from_config(cfg)
    except NamingError as exc:
        _safe_exit(4, str(exc))
    for index in indices:
        try:
            name = encode(index, alphabet, name_mode)
        except NamingError as exc:
            _safe_exit(5, str(exc))
        typer.echo(f"{index}\t{name}")


@app.command("decode")
def decode_cmd(
    names: List[str] = typer.Argument(..., help="Generated names to decode"),  # noqa: B008
    mode: Optional[str] = typer.Option(None, "--mode", help=_MODE_HELP),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help=_CONFIG_HELP
    ),
) -> None:
    """Print the sequence index of each name."""

    cfg = _load(config_path)
    name_mode = _resolve_mode(cfg, mode)
    try:
        alphabet = alphabet_from_config(cfg)
    except NamingError as exc:
        _safe_exit(4, str(exc))
    for name in names:
        try:
            index = decode(name, alphabet, name_mode)
        except NamingError as exc:
            _safe_exit(5, str(exc))
        typer.echo(f"{name}\t{index}")


__all__ = ["app"]
