"""Exception hierarchy for launcher failures.

Every error here is fatal: the CLI reports it on stderr and exits with
``EXIT_LAUNCHER_FAILURE``. The wrapped binary's own exit status is never
represented as an exception.
"""

from __future__ import annotations

from typing import Optional, Sequence


class LauncherError(Exception):
    """Base class for fatal launcher errors."""


class UnsupportedPlatformError(LauncherError):
    """Raised when the host OS/architecture has no published binary."""

    def __init__(self, platform: str, supported: Sequence[str]) -> None:
        super().__init__(f"Unsupported platform: {platform}")
        self.platform = platform
        self.supported = tuple(supported)


class DownloadError(LauncherError):
    """Raised when the release archive cannot be fetched."""

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class ExtractionError(LauncherError):
    """Raised when the archive extraction utility fails."""

    def __init__(
        self,
        message: str,
        *,
        returncode: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class InstallError(LauncherError):
    """Raised when the extracted binary cannot be put in place."""
