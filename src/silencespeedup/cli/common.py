"""Option and timestamp loading shared by the subcommands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from silencespeedup.models.config import SpeedUpOptions
from silencespeedup.utils.io import read_timestamps, read_yaml
from silencespeedup.utils.progress import log_error


def config_option(func: Callable) -> Callable:
    return click.option(
        "--config", "-c",
        default=None,
        type=click.Path(),
        help="Options YAML file (see `silencespeedup init`)",
    )(func)


def speed_options(func: Callable) -> Callable:
    func = click.option(
        "--silence-speed", type=float, default=None, help="Rate inside silences (0.2-20)"
    )(func)
    func = click.option(
        "--speed", "playback_speed", type=float, default=None, help="Rate outside silences (0.2-20)"
    )(func)
    return func


def load_options(config: str | None, **overrides: Any) -> SpeedUpOptions:
    """Build options from an optional YAML file, then apply CLI overrides."""
    data: dict[str, Any] = {}
    if config:
        config_path = Path(config).resolve()
        if not config_path.exists():
            log_error(f"Config not found: {config_path}")
            raise SystemExit(1)
        try:
            data = read_yaml(config_path)
        except Exception as e:
            log_error(f"Cannot read config {config_path}: {e}")
            raise SystemExit(1)

    for key, value in overrides.items():
        if value is not None:
            alias = SpeedUpOptions.model_fields[key].alias
            if alias:
                data.pop(alias, None)
            data[key] = value

    try:
        return SpeedUpOptions.model_validate(data)
    except ValidationError as e:
        log_error(f"Invalid options: {e}")
        raise SystemExit(1)


def load_timestamps(path: str) -> Any:
    """Read a timestamps file, exiting with status 1 when unreadable."""
    timestamps_path = Path(path).resolve()
    if not timestamps_path.exists():
        log_error(f"Timestamps file not found: {timestamps_path}")
        raise SystemExit(1)
    try:
        return read_timestamps(timestamps_path)
    except Exception as e:
        log_error(f"Cannot read timestamps {timestamps_path}: {e}")
        raise SystemExit(1)
