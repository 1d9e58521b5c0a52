import json
import tempfile

from report_sanitizer.handlers import (
    OPERATION_FLATTEN,
    OPERATION_HIDE_PATHS,
    OPERATIONS,
    describe_report,
    export_handler,
    load_report_handler,
    preview_handler,
)
from report_sanitizer.log_utils import setup_logging

REPORT = {"image": {"path": "/home/john/rpi.img", "recommendedSize": 4}}


def test_load_report_handler(tmp_path):
    path = tmp_path / "report.json"
    path.write_text(json.dumps(REPORT), encoding="utf-8")

    data, _, message = load_report_handler(str(path))
    assert data == REPORT
    assert message == "Successfully loaded an object with 1 top-level key."


def test_load_report_handler_errors(tmp_path):
    assert load_report_handler(None)[0] is None

    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")
    data, _, message = load_report_handler(str(path))
    assert data is None
    assert message.startswith("Error parsing JSON")


def test_preview_handler():
    preview, status = preview_handler(REPORT, OPERATIONS, "posix")
    assert preview == {"Image Path": "rpi.img", "Image Recommended Size": 4}
    assert status == "Preview updated."

    preview, _ = preview_handler(REPORT, [OPERATION_HIDE_PATHS], "posix")
    assert preview == {"image": {"path": "rpi.img", "recommendedSize": 4}}

    assert preview_handler(None, OPERATIONS) == (None, "No data loaded.")


def test_preview_handler_reports_errors():
    preview, status = preview_handler(REPORT, OPERATIONS, "amiga")
    assert preview is None
    assert status.startswith("Error:")


def test_export_handler(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    path, status = export_handler(REPORT, [OPERATION_FLATTEN], "posix", "flat")
    assert path == str(tmp_path / "flat.json")
    assert status.startswith("Export successful!")
    with open(path, encoding="utf-8") as f:
        assert json.load(f) == {"Image Path": "/home/john/rpi.img", "Image Recommended Size": 4}


def test_setup_logging_accepts_level_names():
    logger = setup_logging("debug")
    assert logger.name == "report_sanitizer"


def test_describe_report_pluralizes():
    assert describe_report({"a": 1, "b": 2}) == "an object with 2 top-level keys"
    assert describe_report([1]) == "an array with 1 item"
    assert describe_report([]) == "an array with 0 items"
    assert describe_report(3) == "a single int value"
