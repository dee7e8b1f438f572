"""Tests for moshpf.bootstrap.paths."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from moshpf.bootstrap.paths import MpfPaths, get_mpf_home
from moshpf.bootstrap.platform import PlatformInfo


class TestGetMpfHome:
    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MPF_HOME", str(tmp_path / "custom"))
        assert get_mpf_home() == tmp_path / "custom"

    def test_default_under_user_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MPF_HOME", raising=False)
        with patch("moshpf.bootstrap.paths.Path.home", return_value=tmp_path):
            assert get_mpf_home() == tmp_path / ".mpf"

    def test_empty_env_uses_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MPF_HOME", "")
        with patch("moshpf.bootstrap.paths.Path.home", return_value=tmp_path):
            assert get_mpf_home() == tmp_path / ".mpf"


class TestMpfPaths:
    def test_directories(self, tmp_path: Path) -> None:
        paths = MpfPaths(tmp_path)
        assert paths.bin_dir == tmp_path / "bin"
        assert paths.config_dir == tmp_path / "config"

    def test_binary_path_shape(self, tmp_path: Path, linux_amd64: PlatformInfo) -> None:
        paths = MpfPaths(tmp_path)
        assert paths.binary_path("mpf", "v1.2.3", linux_amd64) == (
            tmp_path / "bin" / "mpf-v1.2.3-linux-amd64"
        )

    def test_archive_path_is_sibling(self, tmp_path: Path, linux_amd64: PlatformInfo) -> None:
        paths = MpfPaths(tmp_path)
        archive = paths.archive_path("mpf", "v1.2.3", linux_amd64)
        assert archive.name == "mpf-v1.2.3-linux-amd64.tar.gz"
        assert archive.parent == paths.bin_dir

    def test_binary_path_is_deterministic(self, tmp_path: Path) -> None:
        first = MpfPaths(tmp_path).binary_path("mpf", "v1.2.3", PlatformInfo("linux", "arm64"))
        second = MpfPaths(tmp_path).binary_path("mpf", "v1.2.3", PlatformInfo("linux", "arm64"))
        assert str(first) == str(second)

    @pytest.mark.parametrize(
        "tool,tag,platform",
        [
            ("other", "v1.2.3", PlatformInfo("linux", "amd64")),
            ("mpf", "v1.2.4", PlatformInfo("linux", "amd64")),
            ("mpf", "v1.2.3", PlatformInfo("linux", "arm64")),
            ("mpf", "v1.2.3", PlatformInfo("darwin", "arm64")),
        ],
    )
    def test_any_changed_input_changes_path(
        self, tmp_path: Path, tool: str, tag: str, platform: PlatformInfo
    ) -> None:
        paths = MpfPaths(tmp_path)
        base = paths.binary_path("mpf", "v1.2.3", PlatformInfo("linux", "amd64"))
        assert paths.binary_path(tool, tag, platform) != base

    def test_computing_paths_has_no_side_effects(self, tmp_path: Path, linux_amd64: PlatformInfo) -> None:
        paths = MpfPaths(tmp_path / "home")
        paths.binary_path("mpf", "v1.2.3", linux_amd64)
        paths.archive_path("mpf", "v1.2.3", linux_amd64)
        assert not paths.home.exists()

    def test_ensure_directories_is_idempotent(self, tmp_path: Path) -> None:
        paths = MpfPaths(tmp_path / "home")
        paths.ensure_directories()
        paths.ensure_directories()
        assert paths.bin_dir.is_dir()
