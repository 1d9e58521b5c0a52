from __future__ import annotations

import os
import posixpath
import re
from typing import Optional

from .errors import UnsupportedPlatformError

POSIX = 'posix'
WINDOWS = 'windows'

# Raw block devices look like absolute paths but identify a disk, not a file.
DEVICE_PATH_PREFIXES = ('/dev/', '\\\\.\\')

_WINDOWS_DRIVE_RE = re.compile(r'^[A-Za-z]:[\\/]')
_WINDOWS_DRIVE_PREFIX_RE = re.compile(r'^[A-Za-z]:')
_WINDOWS_SEPARATORS_RE = re.compile(r'[\\/]')


def host_platform() -> str:
    return WINDOWS if os.name == 'nt' else POSIX


def resolve_platform(platform: Optional[str] = None) -> str:
    """Normalize a platform name; ``None`` means the platform we are running on."""
    if platform is None:
        return host_platform()
    name = str(platform).strip().lower()
    if name in ('posix', 'linux', 'darwin', 'macos'):
        return POSIX
    if name in ('windows', 'win32', 'nt'):
        return WINDOWS
    raise UnsupportedPlatformError(platform)


def is_device_path(value: str) -> bool:
    return value.startswith(DEVICE_PATH_PREFIXES)


def is_absolute_path(value: str, platform: Optional[str] = None) -> bool:
    """Absoluteness test for the given platform.

    POSIX paths are absolute when they start with ``/``. Windows paths are
    absolute when they start with a separator (this includes UNC shares) or
    with a drive letter followed by a separator: ``C:\\``. A bare drive
    (``C:foo``) is relative to that drive's working directory.
    """
    if not value:
        return False
    if resolve_platform(platform) == POSIX:
        return value.startswith('/')
    return value[0] in '\\/' or bool(_WINDOWS_DRIVE_RE.match(value))


def basename(value: str, platform: Optional[str] = None) -> str:
    """Last path segment, ignoring trailing separators (``/home/john/`` -> ``john``).

    On Windows only a drive letter prefix is dropped, so UNC roots keep their
    share name: ``\\\\server\\share`` -> ``share``.
    """
    if resolve_platform(platform) == POSIX:
        return posixpath.basename(value.rstrip('/'))
    tail = _WINDOWS_DRIVE_PREFIX_RE.sub('', value, count=1).rstrip('\\/')
    return _WINDOWS_SEPARATORS_RE.split(tail)[-1]
