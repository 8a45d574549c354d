"""Trigger definitions — Canonical data models.

Every structure found in a trigger definition file is defined here and
validated through Pydantic v2.  Do not add execution logic here — only data
shapes.  Structural invariants that must be reported distinctly (empty
``bins``, over-long task labels) are enforced by
:mod:`usysconf.triggers.validator`, not at parse time.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

TASK_MAX_LEN = 42
WILDCARD_TOKEN = "***"


class _TriggerModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


class Replace(_TriggerModel):
    """Explicit glob patterns used to fan a bin out."""

    paths: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)


class Bin(_TriggerModel):
    """One templated binary declaration."""

    task: str = Field(description="Label printed next to the result, at most 42 characters.")
    cmd: list[str] = Field(
        min_length=1,
        description="argv template. One argument may contain the '***' wildcard token.",
    )
    replace: Replace | None = Field(
        default=None,
        description="Glob patterns that supply the values substituted for the token.",
    )

    @field_validator("cmd")
    @classmethod
    def binary_not_empty(cls, v: list[str]) -> list[str]:
        if not v[0].strip():
            raise ValueError("The binary (first element of cmd) must not be empty.")
        return v

    @property
    def wildcard_index(self) -> int | None:
        """Index into ``cmd`` of the first argument carrying the token."""
        for i, arg in enumerate(self.cmd[1:], start=1):
            if WILDCARD_TOKEN in arg:
                return i
        return None


class Skip(_TriggerModel):
    """Soft conditions under which the trigger is bypassed (``--force`` overrides)."""

    chroot: bool = False
    live: bool = False
    paths: list[str] = Field(default_factory=list)


class Check(_TriggerModel):
    """Paths that must resolve before the trigger may run."""

    paths: list[str] = Field(default_factory=list)


class Remove(_TriggerModel):
    """Paths deleted before any bin runs."""

    paths: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)


class TriggerConfig(_TriggerModel):
    """One trigger definition, as read from a ``.toml`` file."""

    description: str = ""
    bins: list[Bin] = Field(default_factory=list)
    skip: Skip | None = None
    check: Check | None = None
    env: dict[str, str] = Field(default_factory=dict)
    remove_dirs: Remove | None = Field(default=None, alias="remove")


# ---------------------------------------------------------------------------
# Execution artefacts
# ---------------------------------------------------------------------------


class ExpandedBin(_TriggerModel):
    """A concrete invocation produced by fan-out."""

    task: str
    argv: tuple[str, ...]
    sub_task: str | None = Field(
        default=None,
        description="The glob match this invocation was produced for, if any.",
    )


class Status(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    SKIPPED = "skipped"


class Output(BaseModel):
    """The outcome of one expanded bin, or of a whole skipped/failed trigger."""

    name: str = ""
    sub_task: str | None = None
    status: Status | None = Field(
        default=None,
        description="None while the output is a placeholder awaiting execution.",
    )
    message: str = ""
