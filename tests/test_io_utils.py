import io
import json
import tempfile

import pytest

from report_sanitizer.errors import InvalidReportError
from report_sanitizer.io_utils import read_json_content, to_jsonable, write_json_export
from report_sanitizer.nodes import ABSENT


def test_read_json_from_path(tmp_path):
    path = tmp_path / "report.json"
    path.write_text(json.dumps({"a": 1}), encoding="utf-8")
    assert read_json_content(str(path)) == {"a": 1}


def test_read_json_from_file_objects():
    assert read_json_content(io.StringIO('[1, 2]')) == [1, 2]
    assert read_json_content(io.BytesIO(b'{"b": null}')) == {"b": None}


def test_read_json_errors():
    with pytest.raises(InvalidReportError):
        read_json_content(None)
    with pytest.raises(InvalidReportError):
        read_json_content(io.StringIO("{not json"))


def test_to_jsonable_replaces_absent():
    assert to_jsonable(ABSENT) is None
    assert to_jsonable({"a": ABSENT, "b": [ABSENT, 1]}) == {"a": None, "b": [None, 1]}


def test_write_json_export(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    path = write_json_export({"Image Size": 1, "Missing": ABSENT}, "../out")
    assert path == str(tmp_path / "out.json")
    with open(path, encoding="utf-8") as f:
        assert json.load(f) == {"Image Size": 1, "Missing": None}

    default_path = write_json_export([1], "  ")
    assert default_path.endswith("sanitized_report.json")
