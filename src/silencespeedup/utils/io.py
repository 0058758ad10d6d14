"""File I/O utilities — atomic writes, YAML and JSON handling."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

_yaml = YAML()
_yaml.preserve_quotes = True
_yaml.default_flow_style = False


def write_atomic(path: Path | str, data: Any, *, as_yaml: bool = False) -> None:
    """Write data to a file atomically (write to temp, then rename)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="w",
        dir=path.parent,
        suffix=path.suffix,
        delete=False,
    ) as tmp:
        if as_yaml:
            _yaml.dump(data, tmp)
        elif isinstance(data, str):
            tmp.write(data)
        else:
            json.dump(data, tmp, indent=2, default=str)
        tmp_path = Path(tmp.name)

    tmp_path.replace(path)


def read_yaml(path: Path | str) -> dict:
    """Read a YAML file and return as dict."""
    path = Path(path)
    with open(path) as f:
        return dict(_yaml.load(f) or {})


def write_yaml(path: Path | str, data: dict) -> None:
    """Write a dict to a YAML file atomically."""
    write_atomic(path, data, as_yaml=True)


def read_json(path: Path | str) -> Any:
    """Read a JSON file."""
    with open(path) as f:
        return json.load(f)


def write_json(path: Path | str, data: Any) -> None:
    """Write data to a JSON file atomically."""
    write_atomic(path, data)


def read_timestamps(path: Path | str) -> Any:
    """Load raw silence timestamps from a JSON or YAML file.

    The file may hold the timestamps directly (a list of pairs, or a
    mapping of parallel ``start``/``end`` lists) or nest them under a
    top-level ``timestamps`` key. The raw value is returned unvalidated.
    """
    path = Path(path)
    if path.suffix.lower() in (".yaml", ".yml"):
        with open(path) as f:
            data = _plain(_yaml.load(f))
    else:
        data = read_json(path)

    if isinstance(data, dict) and "timestamps" in data:
        return data["timestamps"]
    return data


def _plain(value: Any) -> Any:
    """Convert ruamel round-trip containers into plain dicts and lists."""
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value
