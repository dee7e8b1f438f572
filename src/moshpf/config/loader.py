"""Configuration loading for the mpf launcher.

Builds the LauncherConfig from:
- Built-in defaults
- Optional global config (~/.mpf/config/launcher.yml)
- Environment variable expansion (${VAR}, ${VAR:-default})
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from moshpf.bootstrap.paths import MpfPaths, get_mpf_home
from moshpf.bootstrap.versions import get_version
from moshpf.config.models import LauncherConfig
from moshpf.config.validation import validate_config
from moshpf.core.logging import get_logger

LOGGER = get_logger(__name__)

GLOBAL_CONFIG_NAME = "launcher.yml"

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """Configuration loading or parsing error."""

    pass


def load_config(
    home: Optional[Path] = None,
    version: Optional[str] = None,
) -> LauncherConfig:
    """Build the launcher configuration.

    Args:
        home: mpf home directory (default: $MPF_HOME or ~/.mpf).
        version: Pinned binary version (default: installed package version).

    Returns:
        Immutable LauncherConfig instance.

    Raises:
        ConfigError: If launcher.yml exists but cannot be read or parsed.
    """
    home = home if home is not None else get_mpf_home()
    version = version if version is not None else get_version()

    overrides: Dict[str, Any] = {}
    config_path = find_global_config(home)
    if config_path is not None:
        try:
            data = load_yaml_file(config_path)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e

        # Empty files parse to None
        if data is not None:
            overrides = _valid_overrides(data, source=str(config_path))
        LOGGER.debug(f"Loaded launcher config from {config_path}")

    config = LauncherConfig(version=version, home=home, **overrides)
    LOGGER.debug(
        f"Launcher config: {config.tool_name} {config.version_tag} "
        f"from {config.release_host}/{config.repository}, home {config.home}"
    )
    return config


def find_global_config(home: Path) -> Optional[Path]:
    """Find the launcher config at <home>/config/launcher.yml.

    Returns:
        Path to the config file if it exists, None otherwise.
    """
    config_path = MpfPaths(home).config_dir / GLOBAL_CONFIG_NAME
    if config_path.is_file():
        return config_path
    return None


def load_yaml_file(path: Path) -> Any:
    """Load and parse a YAML config file.

    Performs environment variable expansion on string values.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        FileNotFoundError: If file doesn't exist.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Recursively expand ${VAR} references in string values."""
    if isinstance(data, dict):
        return {key: expand_env_vars(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    else:
        return data


def _env_var_replacer(match: re.Match[str]) -> str:
    """Replace environment variable reference with its value."""
    var_name = match.group(1)
    default_value = match.group(2)

    value = os.environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def _valid_overrides(data: Any, source: str) -> Dict[str, Any]:
    """Keep only the keys of ``data`` that passed validation."""
    warnings = validate_config(data, source=source)
    if not isinstance(data, dict):
        return {}
    rejected = {warning.key for warning in warnings}
    return {key: value for key, value in data.items() if key not in rejected}
