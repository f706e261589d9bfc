import json

import pytest

from taskboard.state import read_file, write_to_file


def test_round_trip(tmp_path):
    path = tmp_path / "state.json"
    state = {"wash": "PENDING", "cook": "DONE"}
    write_to_file(path, state)
    assert read_file(path) == state


def test_written_json_is_compact(tmp_path):
    path = tmp_path / "state.json"
    write_to_file(path, {"a": "DONE"})
    assert path.read_text(encoding="utf-8") == '{"a":"DONE"}'


def test_keys_are_written_sorted(tmp_path):
    path = tmp_path / "state.json"
    write_to_file(path, {"zeta": "DONE", "alpha": "PENDING", "mid": "DONE"})
    keys = list(json.loads(path.read_text(encoding="utf-8")))
    assert keys == sorted(keys)


def test_unicode_titles_survive(tmp_path):
    path = tmp_path / "state.json"
    state = {"café": "PENDING"}
    write_to_file(path, state)
    assert read_file(path) == state
    assert "café" in path.read_text(encoding="utf-8")


def test_non_object_raises(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        read_file(path)


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        read_file(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "absent.json")