"""Structural validation of a loaded trigger.

Must be called after loading and before
:meth:`usysconf.triggers.engine.TriggerEngine.execute`; the engine does not
re-validate.
"""

from __future__ import annotations

from usysconf.exceptions import EmptyBinsError, TaskTooLongError
from usysconf.triggers.models import TASK_MAX_LEN, TriggerConfig


def validate(config: TriggerConfig) -> None:
    """Raise if *config* cannot be executed.

    Raises:
        EmptyBinsError: the trigger declares no ``[[bins]]``.
        TaskTooLongError: a task label is longer than 42 characters, which
            would break the alignment of the report.
    """
    if not config.bins:
        raise EmptyBinsError()

    for b in config.bins:
        if len(b.task) > TASK_MAX_LEN:
            raise TaskTooLongError(b.task, TASK_MAX_LEN)
