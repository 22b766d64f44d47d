"""
This module contains the exceptions raised by the textanalysis package.
"""

from typing import Optional


class TextAnalysisException(Exception):
    """
    Base exception for all textanalysis errors.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ChecksumMismatchError(TextAnalysisException):
    """
    Raised when a downloaded artifact does not match the expected checksum.
    """

    def __init__(self, package_id: str, expected: str, actual: str):
        super().__init__(
            f"Bad checksum for the downloaded package {package_id}: "
            f"expected {expected}, got {actual}"
        )
        self.package_id = package_id
        self.expected = expected
        self.actual = actual


class ArchiveOpenError(TextAnalysisException):
    """
    Raised when a downloaded artifact cannot be opened as an archive.
    """

    def __init__(self, archive_path: str, reason: str = ""):
        message = f"Unable to open archive {archive_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.archive_path = archive_path


class InstallIOError(TextAnalysisException):
    """
    Raised when a filesystem operation needed for an installation fails.
    """

    def __init__(self, path: str, operation: str, reason: Optional[str] = None):
        message = f"Failed to {operation} {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
        self.operation = operation


class NetworkError(TextAnalysisException):
    """
    Raised when a remote resource cannot be fetched.
    """

    def __init__(self, url: str, reason: str = ""):
        message = f"Failed to fetch {url}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.url = url
