"""
Tests for the JSON persistence service.
"""

import json

from task_bridge.io.writers.json import JSONWriter, create_json_writer


def test_round_trip(tmp_path):
    writer = create_json_writer()
    target = tmp_path / "data.json"

    assert writer.write(target, {"x": 1}) is None
    assert writer.read(target) == {"x": 1}


def test_write_uses_two_space_indent_and_keeps_unicode(tmp_path):
    target = tmp_path / "pretty.json"

    JSONWriter().write(target, {"name": "Zoë", "tags": [1]})

    assert target.read_text(encoding="utf-8") == '{\n  "name": "Zoë",\n  "tags": [\n    1\n  ]\n}'


def test_write_replaces_previous_content(tmp_path):
    writer = JSONWriter()
    target = tmp_path / "snapshot.json"
    writer.write(target, {"a": 1, "b": 2})

    writer.write(target, ["only"])

    assert json.loads(target.read_text(encoding="utf-8")) == ["only"]


def test_read_missing_file_returns_none(tmp_path, caplog):
    with caplog.at_level("ERROR"):
        assert JSONWriter().read(tmp_path / "nope.json") is None

    assert "File not found" in caplog.text


def test_read_invalid_json_returns_none(tmp_path, caplog):
    target = tmp_path / "broken.json"
    target.write_text("{not json", encoding="utf-8")

    with caplog.at_level("ERROR"):
        assert JSONWriter().read(target) is None

    assert "Error reading JSON file" in caplog.text


def test_read_resolves_relative_paths_against_cwd(tmp_path, monkeypatch):
    (tmp_path / "rel.json").write_text('{"ok": true}', encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert JSONWriter().read("rel.json") == {"ok": True}


def test_write_unserializable_value_returns_error_message(tmp_path):
    error = JSONWriter().write(tmp_path / "bad.json", {"value": object()})

    assert isinstance(error, str)
    assert "not JSON serializable" in error
