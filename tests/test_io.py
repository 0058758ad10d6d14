"""File helpers."""

from __future__ import annotations

import json

from silencespeedup.intervals.store import normalize
from silencespeedup.utils.io import read_json, read_timestamps, write_json, write_yaml


def test_read_timestamps_json_list(tmp_path):
    path = tmp_path / "t.json"
    path.write_text(json.dumps([[1, 5], [8, 12]]))
    assert read_timestamps(path) == [[1, 5], [8, 12]]


def test_read_timestamps_nested_yaml(tmp_path):
    path = tmp_path / "t.yaml"
    write_yaml(path, {"timestamps": [{"start": 1, "end": 5}]})
    raw = read_timestamps(path)
    assert raw == [{"start": 1, "end": 5}]
    assert len(normalize(raw, 1.0, 8.0)) == 1


def test_write_json_atomic_creates_parents(tmp_path):
    path = tmp_path / "a" / "b.json"
    write_json(path, {"x": 1})
    assert read_json(path) == {"x": 1}
    assert list(path.parent.iterdir()) == [path]
