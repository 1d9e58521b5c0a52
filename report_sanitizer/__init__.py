"""Sanitize JSON-like reports before they are shown or sent anywhere.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- flatten nested objects into single-level mappings with start-case keys
- replace absolute filesystem paths with their basenames
"""
from .anonymizer import hide_absolute_path, hide_absolute_paths
from .casing import start_case, transform_key
from .errors import (
    CircularReferenceError,
    InvalidReportError,
    ReportSanitizerError,
    UnsupportedPlatformError,
)
from .flattening import flatten_mapping, make_flat_start_case
from .nodes import ABSENT, NodeKind, kind_of
from .report import sanitize_report

__all__ = [
    "ABSENT",
    "CircularReferenceError",
    "InvalidReportError",
    "NodeKind",
    "ReportSanitizerError",
    "UnsupportedPlatformError",
    "flatten_mapping",
    "hide_absolute_path",
    "hide_absolute_paths",
    "kind_of",
    "make_flat_start_case",
    "sanitize_report",
    "start_case",
    "transform_key",
]
