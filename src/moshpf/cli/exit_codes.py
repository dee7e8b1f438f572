"""Exit codes for the mpf launcher.

On success the launcher exits with the wrapped binary's own status, so only
the launcher's own codes are defined here:
- 1: Launcher failure (unsupported platform, download, extraction, install)
- 130: Interrupted by the user
"""

from __future__ import annotations

EXIT_LAUNCHER_FAILURE = 1
EXIT_INTERRUPTED = 130
