from __future__ import annotations

from typing import Any, Optional

from .paths import basename, is_absolute_path, is_device_path, resolve_platform
from .traversal import map_tree


def hide_absolute_path(value: Any, platform: Optional[str] = None) -> Any:
    """Reduce an absolute path string to its basename; anything else is returned as is.

    Device paths (``/dev/sda``, ``\\\\.\\PhysicalDrive0``) are kept.
    """
    if not isinstance(value, str):
        return value
    if is_device_path(value):
        return value
    if is_absolute_path(value, platform):
        return basename(value, platform)
    return value


def hide_absolute_paths(node: Any, platform: Optional[str] = None) -> Any:
    """Create a copy of ``node`` with all absolute paths replaced by their basename.

    Example::

        hide_absolute_paths({
            'path1': '/home/john/rpi.img',
            'simpleProperty': None,
            'nested': {'path2': 'yet-another-image.img', 'otherProperty': False},
        })
        # {'path1': 'rpi.img', 'simpleProperty': None,
        #  'nested': {'path2': 'yet-another-image.img', 'otherProperty': False}}

    Only values are rewritten, keys are left alone. ``platform`` selects the
    path rules ('posix' or 'windows'); it defaults to the running platform.
    """
    platform = resolve_platform(platform)
    return map_tree(node, value_fn=lambda value: hide_absolute_path(value, platform))
