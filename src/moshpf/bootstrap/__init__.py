"""Bootstrap module for mpf binary management.

This module handles:
- Platform detection (OS + architecture)
- Binary cache directory management (~/.mpf/bin/)
- Release archive download and installation
- Binary validation utilities
"""

from moshpf.bootstrap.platform import (
    SUPPORTED_PLATFORMS,
    PlatformInfo,
    get_platform_info,
    resolve_platform,
)
from moshpf.bootstrap.paths import get_mpf_home, MpfPaths
from moshpf.bootstrap.validation import validate_binary, ToolStatus

__all__ = [
    "SUPPORTED_PLATFORMS",
    "PlatformInfo",
    "get_platform_info",
    "resolve_platform",
    "get_mpf_home",
    "MpfPaths",
    "validate_binary",
    "ToolStatus",
]
