"""Bin executor — runs one expanded invocation.

Notes:
  - Commands are always run with ``subprocess.run`` and shell=False; argv
    comes straight from the trigger definition.
  - The trigger's ``[env]`` is merged into a *copy* of the process
    environment, so one invocation never leaks variables into another.
  - No timeout is applied: a hanging binary blocks the run.
  - stdout is discarded; only the exit status and stderr are interpreted.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from typing import Any, Mapping

from usysconf.logging import get_logger
from usysconf.triggers.models import ExpandedBin, Output, Status
from usysconf.triggers.scope import Scope


class BinExecutor:
    def __init__(self, logger: Any | None = None) -> None:
        self._log = logger or get_logger(__name__)

    def execute(
        self,
        expanded: ExpandedBin,
        env: Mapping[str, str] | None = None,
        scope: Scope | None = None,
    ) -> Output:
        scope = scope or Scope()
        out = Output(name=expanded.task, sub_task=expanded.sub_task)
        command = shlex.join(expanded.argv)

        if scope.dry_run:
            self._log.info("dry_run", task=expanded.task, command=command, env=dict(env or {}))
            out.status = Status.SUCCESS
            return out

        proc_env = os.environ.copy()
        if env:
            proc_env.update(env)

        self._log.debug("bin_started", task=expanded.task, command=command)
        try:
            proc = subprocess.run(
                list(expanded.argv),
                env=proc_env,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as exc:
            self._log.debug("bin_launch_failed", task=expanded.task, error=str(exc))
            out.status = Status.FAILURE
            out.message = f"unable to run {expanded.argv[0]}: {exc.strerror or exc}"
            return out

        if proc.returncode == 0:
            out.status = Status.SUCCESS
            return out

        stderr = proc.stderr.decode(errors="replace").strip() if proc.stderr else ""
        self._log.debug("bin_failed", task=expanded.task, return_code=proc.returncode)
        out.status = Status.FAILURE
        out.message = stderr or f"{expanded.argv[0]} exited with status {proc.returncode}"
        return out
