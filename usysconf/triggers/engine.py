"""Trigger engine — executes one validated trigger against a scope.

Pipeline::

    SkipPolicy ──skip──▶ [skipped]
        │
    DirectoryCleaner ──error──▶ [failure]
        │
    fan-out (all bins, declaration order)
        │
    BinExecutor × N  (every invocation runs, failures do not stop the rest)
        │
    OutputBuilder ──▶ ordered outputs

The engine never prints; callers format the returned outputs.
"""

from __future__ import annotations

from typing import Any

from usysconf.exceptions import RemovalError
from usysconf.logging import bind_trigger_context, clear_trigger_context, get_logger
from usysconf.triggers.aggregator import OutputBuilder
from usysconf.triggers.executor import BinExecutor
from usysconf.triggers.fanout import expand_all
from usysconf.triggers.models import Output, Status, TriggerConfig
from usysconf.triggers.remover import DirectoryCleaner
from usysconf.triggers.scope import Scope
from usysconf.triggers.skip import SkipPolicy


class TriggerEngine:
    """Run triggers.  Holds no per-run state and can be reused.

    Args:
        skip_policy: Evaluates ``[check]`` and ``[skip]``.
        executor:    Runs each expanded bin.
        logger:      Receives engine-level events.
    """

    def __init__(
        self,
        skip_policy: SkipPolicy | None = None,
        executor: BinExecutor | None = None,
        logger: Any | None = None,
    ) -> None:
        self._log = logger or get_logger(__name__)
        self.skip_policy = skip_policy or SkipPolicy(self._log)
        self.executor = executor or BinExecutor(self._log)

    def execute(self, config: TriggerConfig, scope: Scope, name: str = "") -> list[Output]:
        """Execute *config*; it must already have passed ``validate()``."""
        label = name or config.description
        bind_trigger_context(name or None)
        try:
            return self._execute(config, scope, label)
        finally:
            clear_trigger_context()

    def _execute(self, config: TriggerConfig, scope: Scope, label: str) -> list[Output]:
        if self.skip_policy.should_skip(config, scope):
            self._log.info("trigger_skipped")
            return OutputBuilder.skipped(label)

        if config.remove_dirs is not None:
            cleaner = DirectoryCleaner(config.remove_dirs, self._log)
            try:
                cleaner.execute(scope)
            except RemovalError as exc:
                self._log.error("remove_failed", path=exc.path, reason=exc.reason)
                return OutputBuilder.failed(label, f"error removing path: {exc.message}")

        expanded, builder = expand_all(config)
        self._log.debug("trigger_expanded", bins=len(config.bins), invocations=len(expanded))

        for i, e in enumerate(expanded):
            builder.fill(i, self.executor.execute(e, config.env, scope))

        outputs = builder.build()
        failures = sum(1 for o in outputs if o.status is Status.FAILURE)
        self._log.info("trigger_finished", invocations=len(outputs), failures=failures)
        return outputs
