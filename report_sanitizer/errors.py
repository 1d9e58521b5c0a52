from __future__ import annotations


class ReportSanitizerError(Exception):
    """Base class for errors raised by report_sanitizer."""


class CircularReferenceError(ReportSanitizerError, ValueError):
    def __init__(self, path):
        self.path = list(path)
        where = '.'.join(str(p) for p in self.path) or '(root)'
        super().__init__(f"Circular reference detected at {where}")


class UnsupportedPlatformError(ReportSanitizerError, ValueError):
    def __init__(self, platform):
        self.platform = platform
        super().__init__(f"Unsupported path platform: {platform!r} (expected 'posix' or 'windows')")


class InvalidReportError(ReportSanitizerError, ValueError):
    """Uploaded report is missing or is not valid JSON."""
