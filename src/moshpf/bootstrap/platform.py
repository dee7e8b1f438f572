"""Host platform detection.

Maps ``platform.system()`` / ``platform.machine()`` onto the tags used in
release artifact names and checks them against the published allow-list.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from moshpf.core.errors import UnsupportedPlatformError

# Release artifacts exist for exactly these {os}-{arch} combinations.
SUPPORTED_PLATFORMS: Tuple[str, ...] = (
    "linux-amd64",
    "linux-arm64",
    "darwin-arm64",
)

_ARCH_TAGS = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
}


@dataclass(frozen=True)
class PlatformInfo:
    """Normalized operating system and architecture of a host."""

    os: str
    arch: str

    @property
    def tag(self) -> str:
        """Combined ``{os}-{arch}`` tag used in artifact names."""
        return f"{self.os}-{self.arch}"


def normalize_os(value: str) -> str:
    # "Linux" -> "linux", "Darwin" -> "darwin"; anything else passes through
    # so the unsupported-platform error can name it.
    return value.strip().lower()


def normalize_arch(value: str) -> str:
    normalized = value.strip().lower()
    return _ARCH_TAGS.get(normalized, normalized)


def get_platform_info(
    system: Optional[str] = None,
    machine: Optional[str] = None,
) -> PlatformInfo:
    """Detect the current platform.

    Args:
        system: Raw OS name, defaults to :func:`platform.system`.
        machine: Raw machine name, defaults to :func:`platform.machine`.

    Returns:
        PlatformInfo with normalized tags. No support check is made here.
    """
    return PlatformInfo(
        os=normalize_os(system if system is not None else platform.system()),
        arch=normalize_arch(machine if machine is not None else platform.machine()),
    )


def resolve_platform(
    supported: Sequence[str] = SUPPORTED_PLATFORMS,
    system: Optional[str] = None,
    machine: Optional[str] = None,
) -> PlatformInfo:
    """Detect the current platform and require it to be supported.

    Raises:
        UnsupportedPlatformError: If ``{os}-{arch}`` is not in ``supported``.
    """
    info = get_platform_info(system=system, machine=machine)
    if info.tag not in supported:
        raise UnsupportedPlatformError(info.tag, supported)
    return info
