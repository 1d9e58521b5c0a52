from __future__ import annotations

import json
import os
import tempfile
from typing import Any

from .errors import InvalidReportError
from .nodes import ABSENT
from .traversal import map_tree


def read_json_content(file_obj):
    """Read a JSON report from an uploaded file or file path."""
    if file_obj is None:
        raise InvalidReportError("No file uploaded.")

    try:
        if hasattr(file_obj, 'read'):
            if hasattr(file_obj, 'seek'):
                file_obj.seek(0)
            content = file_obj.read()
            if isinstance(content, bytes):
                content = content.decode('utf-8')
            return json.loads(content)

        path = file_obj.name if hasattr(file_obj, 'name') else file_obj
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidReportError(f"Error parsing JSON: {e}") from e


def to_jsonable(node: Any) -> Any:
    """Replace ABSENT with ``None`` so the tree can be shown or dumped as JSON."""
    if node is ABSENT:
        return None
    return map_tree(node, value_fn=lambda value: None if value is ABSENT else value)


def write_json_export(data: Any, file_name: str = '') -> str:
    if not file_name or not file_name.strip():
        file_name = "sanitized_report"
    file_name = os.path.basename(file_name.strip())
    if not file_name.lower().endswith('.json'):
        file_name += '.json'

    path = os.path.join(tempfile.gettempdir(), file_name)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(to_jsonable(data), f, indent=2, ensure_ascii=False)
    return path
