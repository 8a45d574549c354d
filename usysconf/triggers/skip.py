"""Skip policy — decides whether a trigger is bypassed for a given scope.

Two kinds of conditions are evaluated, in this order:

1. ``[check]`` is a *hard* precondition.  Every listed path must resolve on
   this system; if one does not, the failure is logged and the trigger is
   skipped.  ``--force`` does not override it, since a missing path means
   the environment is not ready for the trigger's binaries.
2. ``[skip]`` holds *soft* heuristics (chroot, live media, marker paths)
   which ``--force`` overrides.
"""

from __future__ import annotations

import os
from typing import Any

from usysconf.exceptions import CheckResolutionError
from usysconf.logging import get_logger
from usysconf.triggers import paths as fs
from usysconf.triggers.models import Check, TriggerConfig
from usysconf.triggers.scope import Scope


def resolve_check(check: Check) -> list[str]:
    """Resolve every required path of *check* and return the resolved paths.

    Raises:
        CheckResolutionError: a pattern matches nothing, or a match cannot be
            resolved (e.g. a dangling symlink or a symlink loop).
    """
    resolved: list[str] = []
    for pattern in check.paths:
        matches = fs.expand(pattern)
        if not matches:
            raise CheckResolutionError(pattern, "no such file or directory")
        for match in matches:
            try:
                resolved.append(os.path.realpath(match, strict=True))
            except OSError as exc:
                raise CheckResolutionError(match, exc.strerror or str(exc)) from exc
    return resolved


class SkipPolicy:
    """Evaluate a trigger's ``[check]`` and ``[skip]`` sections.

    The logger receiving check failures is injected so tests can observe it
    without capturing real output.
    """

    def __init__(self, logger: Any | None = None) -> None:
        self._log = logger or get_logger(__name__)

    def should_skip(self, config: TriggerConfig, scope: Scope) -> bool:
        if config.check is not None:
            try:
                resolve_check(config.check)
            except CheckResolutionError as exc:
                self._log.error("check_failed", path=exc.path, reason=exc.reason)
                return True

        if scope.forced:
            return False

        skip = config.skip
        if skip is None:
            return False

        if skip.chroot and scope.chroot:
            self._log.debug("skip_chroot")
            return True

        if skip.live and scope.live:
            self._log.debug("skip_live")
            return True

        found = fs.any_exists(skip.paths)
        if found is not None:
            self._log.debug("skip_path_exists", path=found)
            return True

        return False
