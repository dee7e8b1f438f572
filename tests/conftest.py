"""Shared fixtures for moshpf tests."""

from __future__ import annotations

import io
import tarfile
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

from moshpf.bootstrap.platform import PlatformInfo
from moshpf.config.models import LauncherConfig

# Stand-in for the real mpf: prints its arguments and exits with status 3.
FAKE_MPF_SCRIPT = b'#!/bin/sh\necho "mpf args: $*"\nexit 3\n'


class FakeResponse(io.BytesIO):
    """Minimal stand-in for an urllib response."""

    def __init__(
        self,
        status: int,
        body: bytes = b"",
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(body)
        self.status = status
        self.headers = headers or {}

    def getcode(self) -> int:
        return self.status


@pytest.fixture(autouse=True)
def mpf_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the launcher at a throwaway home directory."""
    home = tmp_path / ".mpf"
    monkeypatch.setenv("MPF_HOME", str(home))
    monkeypatch.delenv("MPF_LAUNCHER_DEBUG", raising=False)
    monkeypatch.delenv("MPF_LAUNCHER_QUIET", raising=False)
    return home


@pytest.fixture
def linux_amd64() -> PlatformInfo:
    return PlatformInfo(os="linux", arch="amd64")


@pytest.fixture
def launcher_config(mpf_home: Path) -> LauncherConfig:
    return LauncherConfig(version="1.2.3", home=mpf_home)


@pytest.fixture
def response_factory() -> Callable[..., FakeResponse]:
    return FakeResponse


@pytest.fixture
def release_archive() -> bytes:
    """A gzipped tarball holding a single executable named ``mpf``."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        info = tarfile.TarInfo(name="mpf")
        info.size = len(FAKE_MPF_SCRIPT)
        info.mode = 0o644
        tar.addfile(info, io.BytesIO(FAKE_MPF_SCRIPT))
    return buffer.getvalue()
