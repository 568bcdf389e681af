"""
Tests for the CSV codec and CSV persistence service.

Rows are fully quoted with backslash-escaped quotes, and the header line is
written only when the file is new or blank.
"""

import pytest

from task_bridge.io.writers.csv import CSVWriter, convert_to_csv
from tests import DEFAULT_HEADERS, SAMPLE_RECORDS


def test_convert_escapes_quotes_with_backslash():
    body = convert_to_csv([{"a": 'x"y', "b": 1}], ["a", "b"])
    assert body == '"x\\"y","1"'


def test_convert_empty_records_yields_empty_string():
    assert convert_to_csv([], ["a", "b"]) == ""


def test_convert_missing_key_and_special_values():
    body = convert_to_csv(
        [{"a": None, "b": True, "c": 2.0, "d": ["x", None, 3]}],
        ["a", "b", "c", "d", "missing"],
    )
    assert body == '"null","true","2","x,,3","undefined"'


def test_convert_keeps_header_order_and_joins_rows():
    body = convert_to_csv(SAMPLE_RECORDS, DEFAULT_HEADERS)
    assert body.split("\n") == [
        '"Acme Corp","Senior \\"Rockstar\\" Engineer","applied"',
        '"Globex","QA Lead","skipped"',
    ]


def test_write_single_record_to_fresh_file(tmp_path):
    target = tmp_path / "out.csv"

    assert CSVWriter().write(target, {"a": 'x"y', "b": 1}, ["a", "b"]) is True

    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines == ["a,b", '"x\\"y","1"']


def test_successive_appends_write_header_once(tmp_path):
    target = tmp_path / "results.csv"
    writer = CSVWriter()

    writer.write(target, SAMPLE_RECORDS[0], DEFAULT_HEADERS, append=True)
    writer.write(target, SAMPLE_RECORDS[1], DEFAULT_HEADERS, append=True)

    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "company,title,status"
    assert lines.count("company,title,status") == 1
    assert lines[1].startswith('"Acme Corp"')
    assert lines[2].startswith('"Globex"')
    assert len(lines) == 3


def test_whitespace_only_file_gets_header(tmp_path):
    target = tmp_path / "blank.csv"
    target.write_text("  \n\n", encoding="utf-8")

    CSVWriter().write(target, [{"a": 1}], ["a"])

    assert target.read_text(encoding="utf-8") == 'a\n"1"\n'


def test_overwrite_keeps_header_and_replaces_rows(tmp_path):
    target = tmp_path / "replace.csv"
    writer = CSVWriter()
    writer.write(target, SAMPLE_RECORDS, DEFAULT_HEADERS)

    writer.write(target, {"company": "Initech", "title": "Dev", "status": "fail"}, DEFAULT_HEADERS, append=False)

    assert target.read_text(encoding="utf-8") == 'company,title,status\n"Initech","Dev","fail"\n'


def test_write_creates_parent_directories(tmp_path):
    target = tmp_path / "nested" / "deeper" / "out.csv"

    assert CSVWriter().write(target, {"a": 1}, ["a"]) is True
    assert target.exists()


def test_write_failure_returns_false_and_logs(tmp_path, caplog):
    target = tmp_path / "is_a_dir.csv"
    target.mkdir()

    with caplog.at_level("ERROR"):
        assert CSVWriter().write(target, {"a": 1}, ["a"]) is False

    assert "Error writing CSV file" in caplog.text


def test_append_to_file_with_undecodable_bytes(tmp_path):
    target = tmp_path / "latin1.csv"
    target.write_bytes(b'name\n"Caf\xe9"\n')

    assert CSVWriter().write(target, {"name": "x"}, ["name"]) is True

    assert target.read_bytes() == b'name\n"Caf\xe9"\n"x"\n'


def test_convert_renders_objects_and_special_floats():
    body = convert_to_csv(
        [{"a": {"nested": 1}, "b": float("inf"), "c": float("-inf"), "d": float("nan")}],
        ["a", "b", "c", "d"],
    )
    assert body == '"[object Object]","Infinity","-Infinity","NaN"'
