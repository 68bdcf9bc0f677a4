"""Tests for log_retrieval/formatter.py"""

import json

from log_retrieval.formatter import format_json, format_text, get_formatter
from log_retrieval.parser import LogRecord

RECORDS = [
    LogRecord(timestamp="2024-01-15T10:00:00Z", log_id="abc", level="INFO", message="hello"),
    LogRecord(timestamp="2024-01-15T10:00:01Z", level="ERROR", message="GET /x", status=500),
]


class TestFormatText:
    def test_one_line_per_record(self):
        lines = format_text(RECORDS).split("\n")
        assert len(lines) == 2
        assert lines[0].startswith("[2024-01-15T10:00:00Z] INFO ")
        assert "abc" in lines[0]
        assert lines[1].endswith("GET /x -> 500")

    def test_missing_log_id_shown_as_dash(self):
        assert " - " in format_text(RECORDS[1:])

    def test_empty(self):
        assert format_text([]) == ""


class TestFormatJson:
    def test_valid_json(self):
        data = json.loads(format_json(RECORDS))
        assert data[0]["log_id"] == "abc"
        assert "log_id" not in data[1]
        assert data[1]["status"] == 500


class TestGetFormatter:
    def test_selects(self):
        assert get_formatter("json") is format_json
        assert get_formatter("text") is format_text
        assert get_formatter("anything") is format_text
