"""Configuration data model for the mpf launcher.

A single immutable LauncherConfig is built at startup and passed to every
component that needs it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from moshpf.bootstrap.download import DEFAULT_MAX_REDIRECTS
from moshpf.bootstrap.paths import ARCHIVE_SUFFIX, MpfPaths, artifact_name
from moshpf.bootstrap.platform import PlatformInfo
from moshpf.bootstrap.versions import version_tag

TOOL_NAME = "mpf"
DEFAULT_REPOSITORY = "liyu1981/moshpf"
DEFAULT_RELEASE_HOST = "github.com"


@dataclass(frozen=True)
class LauncherConfig:
    """Process-wide launcher settings."""

    version: str
    home: Path
    tool_name: str = TOOL_NAME
    repository: str = DEFAULT_REPOSITORY  # "{org}/{repo}"
    release_host: str = DEFAULT_RELEASE_HOST
    max_redirects: int = DEFAULT_MAX_REDIRECTS

    @property
    def version_tag(self) -> str:
        return version_tag(self.version)

    @property
    def paths(self) -> MpfPaths:
        return MpfPaths(self.home)

    def archive_name(self, platform: PlatformInfo) -> str:
        """Release archive file name, e.g. ``mpf-v1.2.3-linux-amd64.tar.gz``."""
        return artifact_name(self.tool_name, self.version_tag, platform) + ARCHIVE_SUFFIX

    def release_url(self, platform: PlatformInfo) -> str:
        """Download URL of the release archive for a platform."""
        return (
            f"https://{self.release_host}/{self.repository}/releases/download/"
            f"{self.version_tag}/{self.archive_name(platform)}"
        )

    def binary_path(self, platform: PlatformInfo) -> Path:
        return self.paths.binary_path(self.tool_name, self.version_tag, platform)

    def archive_path(self, platform: PlatformInfo) -> Path:
        return self.paths.archive_path(self.tool_name, self.version_tag, platform)
