"""Launcher runner.

Runs the launch sequence: resolve platform, load config, ensure the
binary is installed, then hand the process over to it.
"""

from __future__ import annotations

import os
import sys
from typing import Iterable, List, Optional

from moshpf.bootstrap.install import BinaryInstaller
from moshpf.bootstrap.platform import SUPPORTED_PLATFORMS, resolve_platform
from moshpf.cli.exit_codes import EXIT_INTERRUPTED, EXIT_LAUNCHER_FAILURE
from moshpf.config import ConfigError, load_config
from moshpf.core.errors import LauncherError, UnsupportedPlatformError
from moshpf.core.logging import configure_logging, get_logger
from moshpf.launcher import run_binary

LOGGER = get_logger(__name__)

# The launcher forwards every argument, so verbosity comes from the environment.
DEBUG_ENV = "MPF_LAUNCHER_DEBUG"
QUIET_ENV = "MPF_LAUNCHER_QUIET"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


class LauncherRunner:
    """Runs the mpf launch sequence."""

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Launch mpf with the given arguments.

        Args:
            argv: Arguments for mpf (defaults to sys.argv[1:]).

        Returns:
            The exit status of mpf, or a launcher exit code on failure.
        """
        arguments: List[str] = list(argv) if argv is not None else sys.argv[1:]

        configure_logging(debug=_env_flag(DEBUG_ENV), quiet=_env_flag(QUIET_ENV))

        # Platform support is checked before any filesystem or network access.
        try:
            platform = resolve_platform(SUPPORTED_PLATFORMS)
        except UnsupportedPlatformError as e:
            LOGGER.error(str(e))
            LOGGER.error(f"Supported platforms: {', '.join(e.supported)}")
            return EXIT_LAUNCHER_FAILURE

        try:
            config = load_config()
            binary = BinaryInstaller(config).ensure_binary(platform)
        except (LauncherError, ConfigError, OSError) as e:
            LOGGER.error(f"Error: {e}")
            return EXIT_LAUNCHER_FAILURE
        except KeyboardInterrupt:
            LOGGER.error("Interrupted")
            return EXIT_INTERRUPTED

        try:
            return run_binary(binary, arguments)
        except OSError as e:
            LOGGER.error(f"Error: failed to run {binary}: {e}")
            return EXIT_LAUNCHER_FAILURE
