"""Command-line entry point for the mpf launcher."""

from __future__ import annotations

from typing import Iterable, Optional

from moshpf.cli.runner import LauncherRunner
from moshpf.cli.exit_codes import EXIT_LAUNCHER_FAILURE, EXIT_INTERRUPTED


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entrypoint.

    Returns an exit code suitable for use as a console script.

    Args:
        argv: Arguments forwarded to mpf (defaults to sys.argv[1:]).

    Returns:
        Exit code.
    """
    runner = LauncherRunner()
    return runner.run(argv)


__all__ = [
    "main",
    "LauncherRunner",
    "EXIT_LAUNCHER_FAILURE",
    "EXIT_INTERRUPTED",
]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
