"""Path management for the mpf binary cache.

Handles the ~/.mpf directory structure and path resolution.
Installed binaries live under ~/.mpf/bin/{tool}-{tag}-{os}-{arch}.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from moshpf.bootstrap.platform import PlatformInfo

# Default directory name under user home
DEFAULT_HOME_DIR_NAME = ".mpf"

# Environment variable to override home directory
MPF_HOME_ENV = "MPF_HOME"

ARCHIVE_SUFFIX = ".tar.gz"


def get_mpf_home() -> Path:
    """Get the mpf home directory path.

    Resolution order:
    1. MPF_HOME environment variable (if set)
    2. ~/.mpf (default)

    Returns:
        Path to the mpf home directory.
    """
    env_home = os.environ.get(MPF_HOME_ENV)
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / DEFAULT_HOME_DIR_NAME


def artifact_name(tool_name: str, version_tag: str, platform: PlatformInfo) -> str:
    """Versioned artifact stem, e.g. ``mpf-v1.2.3-linux-amd64``."""
    return f"{tool_name}-{version_tag}-{platform.os}-{platform.arch}"


@dataclass(frozen=True)
class MpfPaths:
    """Manages paths within the mpf home directory.

    Directory structure:
        ~/.mpf/
            bin/
                mpf-v1.2.3-linux-amd64          - Installed binary
                mpf-v1.2.3-linux-amd64.tar.gz   - Release archive (transient)
            config/
                launcher.yml                    - Optional launcher settings
    """

    home: Path

    # Subdirectory names
    _BIN_DIR: ClassVar[str] = "bin"
    _CONFIG_DIR: ClassVar[str] = "config"

    @property
    def bin_dir(self) -> Path:
        """Directory containing installed binaries."""
        return self.home / self._BIN_DIR

    @property
    def config_dir(self) -> Path:
        """Directory for configuration files."""
        return self.home / self._CONFIG_DIR

    def binary_path(self, tool_name: str, version_tag: str, platform: PlatformInfo) -> Path:
        """Get the install path for a tool version on a platform.

        The same inputs always map to the same path, so an existing file
        there is treated as a complete install.
        """
        return self.bin_dir / artifact_name(tool_name, version_tag, platform)

    def archive_path(self, tool_name: str, version_tag: str, platform: PlatformInfo) -> Path:
        """Get the temporary download path of the release archive."""
        return self.bin_dir / (artifact_name(tool_name, version_tag, platform) + ARCHIVE_SUFFIX)

    def ensure_directories(self) -> None:
        """Create the bin directory if it doesn't exist."""
        self.bin_dir.mkdir(parents=True, exist_ok=True)
