"""Unit tests — Scope and environment detection."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from usysconf.config import RuntimeConfig
from usysconf.triggers.scope import Scope, is_chroot, is_live


@pytest.mark.unit
class TestScope:
    def test_defaults(self) -> None:
        s = Scope()
        assert (s.forced, s.chroot, s.live, s.dry_run, s.debug) == (False,) * 5

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Scope().forced = True  # type: ignore[misc]

    def test_detect_uses_runtime_paths(self, tmp_path: Path) -> None:
        marker = tmp_path / "livesys"
        marker.touch()
        runtime = RuntimeConfig(live_marker=marker, proc_root=tmp_path)

        s = Scope.detect(forced=True, dry_run=True, runtime=runtime)

        assert s.forced and s.dry_run
        assert s.live is True
        assert s.chroot is True


@pytest.mark.unit
class TestDetection:
    def test_same_root_is_not_chroot(self) -> None:
        assert is_chroot(Path("/"), Path("/")) is False

    def test_different_root_is_chroot(self, tmp_path: Path) -> None:
        assert is_chroot(tmp_path, Path("/")) is True

    def test_unreadable_proc_root_is_not_chroot(self, tmp_path: Path) -> None:
        assert is_chroot(tmp_path / "missing") is False

    def test_live_marker(self, tmp_path: Path) -> None:
        marker = tmp_path / "livesys"
        assert is_live(marker) is False
        marker.touch()
        assert is_live(marker) is True
