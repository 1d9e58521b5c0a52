import pytest

from report_sanitizer import paths
from report_sanitizer.errors import UnsupportedPlatformError


def test_resolve_platform_aliases():
    assert paths.resolve_platform("Linux") == paths.POSIX
    assert paths.resolve_platform(" win32 ") == paths.WINDOWS
    with pytest.raises(UnsupportedPlatformError):
        paths.resolve_platform("beos")


def test_host_platform(monkeypatch):
    monkeypatch.setattr(paths.os, "name", "nt")
    assert paths.resolve_platform(None) == paths.WINDOWS
    monkeypatch.setattr(paths.os, "name", "posix")
    assert paths.resolve_platform(None) == paths.POSIX


@pytest.mark.parametrize(
    "value, platform, expected",
    [
        ("/home/john", "posix", True),
        ("home/john", "posix", False),
        ("", "posix", False),
        ("\\temp", "posix", False),
        ("C:\\temp", "windows", True),
        ("c:/temp", "windows", True),
        ("\\temp", "windows", True),
        ("C:temp", "windows", False),
        ("", "windows", False),
    ],
)
def test_is_absolute_path(value, platform, expected):
    assert paths.is_absolute_path(value, platform) is expected


def test_device_paths():
    assert paths.is_device_path("/dev/sdb")
    assert paths.is_device_path("\\\\.\\PhysicalDrive0")
    assert not paths.is_device_path("/devices/sdb")


def test_basename():
    assert paths.basename("/home/john/rpi.img", "posix") == "rpi.img"
    assert paths.basename("C:\\a\\b/c.img", "windows") == "c.img"
    assert paths.basename("rpi.img", "posix") == "rpi.img"
