"""Configuration module for the mpf launcher.

Provides the immutable LauncherConfig and its loader, with support for:
- Global config (~/.mpf/config/launcher.yml)
- Environment variable expansion
"""

from moshpf.config.models import LauncherConfig, TOOL_NAME
from moshpf.config.loader import ConfigError, load_config, find_global_config
from moshpf.config.validation import validate_config, ConfigValidationWarning

__all__ = [
    "LauncherConfig",
    "TOOL_NAME",
    "ConfigError",
    "load_config",
    "find_global_config",
    "validate_config",
    "ConfigValidationWarning",
]
