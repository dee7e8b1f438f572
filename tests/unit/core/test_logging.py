"""Tests for moshpf.core.logging."""

from __future__ import annotations

import io
import logging

from moshpf.core.logging import configure_logging, get_logger


class TestGetLogger:
    def test_namespaces_foreign_names(self) -> None:
        assert get_logger("installer").name == "moshpf.installer"

    def test_keeps_package_names(self) -> None:
        assert get_logger("moshpf.bootstrap.install").name == "moshpf.bootstrap.install"
        assert get_logger("moshpf").name == "moshpf"


class TestConfigureLogging:
    def test_default_shows_info_plainly(self) -> None:
        stream = io.StringIO()
        configure_logging(stream=stream)
        get_logger("moshpf.test").info("Downloading mpf v1.2.3 for linux-amd64...")
        assert stream.getvalue() == "Downloading mpf v1.2.3 for linux-amd64...\n"

    def test_quiet_shows_errors_only(self) -> None:
        stream = io.StringIO()
        configure_logging(quiet=True, stream=stream)
        logger = get_logger("moshpf.test")
        logger.info("progress")
        logger.error("Error: boom")
        assert stream.getvalue() == "Error: boom\n"

    def test_debug_level_and_format(self) -> None:
        stream = io.StringIO()
        configure_logging(debug=True, stream=stream)
        get_logger("moshpf.test").debug("GET https://github.com")
        output = stream.getvalue()
        assert "DEBUG [moshpf.test] GET https://github.com" in output

    def test_quiet_wins_over_debug(self) -> None:
        configure_logging(debug=True, quiet=True, stream=io.StringIO())
        assert logging.getLogger("moshpf").level == logging.ERROR

    def test_reconfiguring_does_not_stack_handlers(self) -> None:
        configure_logging(stream=io.StringIO())
        configure_logging(stream=io.StringIO())
        assert len(logging.getLogger("moshpf").handlers) == 1
