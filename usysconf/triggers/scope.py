"""Execution scope — the runtime context a trigger is evaluated against.

A :class:`Scope` is built once by the CLI from its flags plus environment
detection, then handed unchanged to every trigger of the run.

Detection:
  - **chroot**: ``/`` and the root of PID 1 (``/proc/1/root``) are different
    inodes.  When PID 1's root cannot be inspected (unprivileged user, no
    ``/proc``) we assume we are not in a chroot.
  - **live**: the live-media marker file (``/run/livesys``) exists.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from usysconf.config import RuntimeConfig


@dataclass(frozen=True)
class Scope:
    forced: bool = False
    chroot: bool = False
    live: bool = False
    dry_run: bool = False
    debug: bool = False

    @classmethod
    def detect(
        cls,
        forced: bool = False,
        dry_run: bool = False,
        debug: bool = False,
        runtime: RuntimeConfig | None = None,
    ) -> "Scope":
        """Build a scope from CLI flags and the current environment."""
        runtime = runtime or RuntimeConfig()
        return cls(
            forced=forced,
            chroot=is_chroot(runtime.proc_root),
            live=is_live(runtime.live_marker),
            dry_run=dry_run,
            debug=debug,
        )


def is_chroot(proc_root: Path = Path("/proc/1/root"), root: Path = Path("/")) -> bool:
    try:
        outer = os.stat(proc_root)
        inner = os.stat(root)
    except OSError:
        return False
    return (outer.st_dev, outer.st_ino) != (inner.st_dev, inner.st_ino)


def is_live(marker: Path = Path("/run/livesys")) -> bool:
    return marker.exists()
