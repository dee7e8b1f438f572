"""Delegation of the process to the installed binary."""

from __future__ import annotations

import signal
import subprocess
import threading
from pathlib import Path
from typing import Sequence

from moshpf.core.logging import get_logger

LOGGER = get_logger(__name__)


def run_binary(binary: Path, arguments: Sequence[str]) -> int:
    """Run ``binary`` with ``arguments`` and return its exit status.

    The child inherits stdin, stdout and stderr; nothing is captured.
    While it runs, the launcher ignores SIGINT, so Ctrl-C is handled by the
    child alone and the child's own exit status is reported.
    A child killed by a signal reports ``128 + signum``, as a shell would.
    """
    cmd = [str(binary), *arguments]
    LOGGER.debug(f"Running: {' '.join(cmd)}")

    # signal.signal() only works from the main thread.
    owns_signals = threading.current_thread() is threading.main_thread()
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN) if owns_signals else None
    # An ignored disposition survives exec, so hand the child the default
    # one unless the launcher itself was started with SIGINT ignored.
    preexec_fn = _default_sigint if owns_signals and previous != signal.SIG_IGN else None
    try:
        proc = subprocess.Popen(cmd, preexec_fn=preexec_fn)
        returncode = proc.wait()
    finally:
        if owns_signals:
            # None means the handler was not installed from Python.
            signal.signal(signal.SIGINT, signal.SIG_DFL if previous is None else previous)

    if returncode < 0:
        signum = -returncode
        LOGGER.debug(f"{binary.name} terminated by {_signal_name(signum)}")
        return 128 + signum
    return returncode


def _default_sigint() -> None:
    signal.signal(signal.SIGINT, signal.SIG_DFL)


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"
