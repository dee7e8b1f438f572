"""Version of the mpf binary pinned by this launcher.

The launcher and the binary are released together, so the launcher's own
package version is the binary version.
"""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "moshpf"

# Release tags are the version with this prefix, e.g. "v1.2.3".
TAG_PREFIX = "v"

# Version reported by development builds; nothing is published for it.
DEV_VERSION = "dev"


@lru_cache(maxsize=1)
def get_version() -> str:
    """Get the installed package version, read once per process."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        # Fallback for source checkouts that have not been installed.
        from moshpf import __version__

        return __version__


def version_tag(version_string: str) -> str:
    """Build the release tag for a version string."""
    if version_string.startswith(TAG_PREFIX):
        return version_string
    return f"{TAG_PREFIX}{version_string}"


def is_dev_version(version_string: str) -> bool:
    return version_string.removeprefix(TAG_PREFIX) == DEV_VERSION
