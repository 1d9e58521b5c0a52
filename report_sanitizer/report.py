from __future__ import annotations

from typing import Any, Optional

from .anonymizer import hide_absolute_paths
from .flattening import make_flat_start_case


def sanitize_report(
    data: Any,
    platform: Optional[str] = None,
    hide_paths: bool = True,
    flatten: bool = True,
) -> Any:
    """Prepare a report for display: hide user paths, then flatten into start-case keys."""
    if hide_paths:
        data = hide_absolute_paths(data, platform)
    if flatten:
        data = make_flat_start_case(data)
    return data
