"""Installation of the mpf binary from GitHub release archives.

Binary management:
- Downloads from https://github.com/liyu1981/moshpf/releases/
- Caches at ~/.mpf/bin/mpf-{tag}-{os}-{arch}
- Extracts with the system ``tar`` utility
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from moshpf.bootstrap.download import download_file
from moshpf.bootstrap.platform import PlatformInfo
from moshpf.bootstrap.validation import ToolStatus, validate_binary
from moshpf.bootstrap.versions import is_dev_version
from moshpf.config.models import LauncherConfig
from moshpf.core.errors import ExtractionError, InstallError
from moshpf.core.logging import get_logger

LOGGER = get_logger(__name__)

EXECUTABLE_MODE = 0o755


def extract_archive(archive: Path, dest_dir: Path) -> None:
    """Extract a gzipped tarball into ``dest_dir`` with ``tar``.

    Raises:
        ExtractionError: If ``tar`` is missing or exits non-zero.
    """
    cmd = ["tar", "-xzf", str(archive), "-C", str(dest_dir)]
    LOGGER.debug(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise ExtractionError(f"Failed to extract tarball: tar not found ({e})") from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise ExtractionError(
            f"Failed to extract tarball: {stderr or f'tar exited with {result.returncode}'}",
            returncode=result.returncode,
            stderr=stderr,
        )


class BinaryInstaller:
    """Ensures the pinned mpf binary is installed for a platform."""

    def __init__(self, config: LauncherConfig) -> None:
        self._config = config

    def ensure_binary(self, platform: PlatformInfo) -> Path:
        """Return the installed binary, downloading it on a cache miss."""
        binary_path = self._config.binary_path(platform)

        if binary_path.exists():
            LOGGER.debug(f"{self._config.tool_name} binary found at {binary_path}")
            if validate_binary(binary_path) == ToolStatus.NOT_EXECUTABLE:
                binary_path.chmod(EXECUTABLE_MODE)
            return binary_path

        LOGGER.info(
            f"Binary not found locally. Downloading {self._config.tool_name} "
            f"{self._config.version_tag} for {platform.tag}..."
        )
        self.install(platform)
        return binary_path

    def install(self, platform: PlatformInfo) -> Path:
        """Download, extract and install the binary for ``platform``.

        The archive is always removed. A half-extracted binary is removed
        when any step fails.

        Raises:
            DownloadError: If the archive cannot be fetched.
            ExtractionError: If ``tar`` fails.
            InstallError: If the binary cannot be put in place.
        """
        config = self._config
        if is_dev_version(config.version):
            raise InstallError(
                f"Cannot download a release for version '{config.version}'; "
                f"install {config.tool_name} manually at {config.binary_path(platform)}"
            )

        paths = config.paths
        paths.ensure_directories()

        binary_path = config.binary_path(platform)
        archive_path = config.archive_path(platform)
        # The archive holds a single file named after the bare tool.
        extracted_path = paths.bin_dir / config.tool_name
        url = config.release_url(platform)

        try:
            download_file(url, archive_path, max_redirects=config.max_redirects)
            extract_archive(archive_path, paths.bin_dir)

            if not extracted_path.is_file():
                raise InstallError(
                    f"Archive {config.archive_name(platform)} does not contain "
                    f"'{config.tool_name}'"
                )
            try:
                extracted_path.replace(binary_path)
                binary_path.chmod(EXECUTABLE_MODE)
            except OSError as e:
                binary_path.unlink(missing_ok=True)
                raise InstallError(f"Failed to install {binary_path}: {e}") from e
        except Exception:
            extracted_path.unlink(missing_ok=True)
            raise
        finally:
            archive_path.unlink(missing_ok=True)

        if validate_binary(binary_path) != ToolStatus.PRESENT:
            raise InstallError(f"Installed binary is not executable: {binary_path}")

        LOGGER.info(f"{config.tool_name} {config.version_tag} installed to {binary_path}")
        return binary_path
