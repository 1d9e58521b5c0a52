from __future__ import annotations

import logging
from typing import Any, List, Optional

import gradio as gr

from .errors import ReportSanitizerError
from .io_utils import read_json_content, to_jsonable, write_json_export
from .report import sanitize_report

logger = logging.getLogger(__name__)

OPERATION_HIDE_PATHS = "Hide absolute paths"
OPERATION_FLATTEN = "Flatten keys (start case)"
OPERATIONS = [OPERATION_HIDE_PATHS, OPERATION_FLATTEN]

PLATFORM_CHOICES = ["posix", "windows"]


def load_report_handler(file_obj):
    if file_obj is None:
        return None, gr.update(interactive=False), "No file uploaded."

    try:
        data = read_json_content(file_obj)
    except (ReportSanitizerError, OSError) as e:
        logger.warning("Could not load report: %s", e)
        return None, gr.update(interactive=False), str(e)

    logger.info("Loaded report of type %s", type(data).__name__)
    return data, gr.update(interactive=True), f"Successfully loaded {describe_report(data)}."


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def describe_report(data: Any) -> str:
    if isinstance(data, dict):
        return f"an object with {_plural(len(data), 'top-level key')}"
    if isinstance(data, list):
        return f"an array with {_plural(len(data), 'item')}"
    return f"a single {type(data).__name__} value"


def apply_operations(data: Any, operations: Optional[List[str]], platform: Optional[str] = None) -> Any:
    operations = operations or []
    return sanitize_report(
        data,
        platform=platform or None,
        hide_paths=OPERATION_HIDE_PATHS in operations,
        flatten=OPERATION_FLATTEN in operations,
    )


def preview_handler(data, operations, platform=None):
    if data is None:
        return None, "No data loaded."

    try:
        result = apply_operations(data, operations, platform)
    except ReportSanitizerError as e:
        logger.error("Preview failed: %s", e)
        return None, f"Error: {e}"

    return to_jsonable(result), "Preview updated."


def export_handler(data, operations, platform=None, file_name=None):
    if data is None:
        return None, "No data loaded."

    try:
        result = apply_operations(data, operations, platform)
        path = write_json_export(result, file_name or '')
    except (ReportSanitizerError, OSError) as e:
        logger.error("Export failed: %s", e)
        return None, f"Error during export: {e}"

    logger.info("Exported sanitized report to %s", path)
    return path, f"Export successful! Saved to {path}"
