"""usysconf — Exception hierarchy.

All exceptions raised by usysconf inherit from USysConfError so that callers
can catch the full family with a single except clause when needed.

Hierarchy:
    USysConfError
    ├── TriggerLoadError
    │   ├── TriggerNotFoundError
    │   ├── TriggerReadError
    │   └── TriggerParseError
    ├── TriggerValidationError
    │   ├── EmptyBinsError
    │   └── TaskTooLongError
    ├── CheckResolutionError
    └── RemovalError
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class USysConfError(Exception):
    """Base exception for all usysconf errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context})"


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TriggerLoadError(USysConfError):
    """Base for errors raised while turning a file into a TriggerConfig."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message, context={"path": str(path) if path is not None else None})
        self.path = path


class TriggerNotFoundError(TriggerLoadError):
    """The trigger definition file does not exist."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Trigger definition not found: {path}", path=path)


class TriggerReadError(TriggerLoadError):
    """The trigger definition exists but could not be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Unable to read trigger definition at {path}: {reason}", path=path)
        self.reason = reason


class TriggerParseError(TriggerLoadError):
    """The content is not valid TOML or does not match the trigger shape."""

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message, path=path)
        self.errors = errors or []
        self.context["errors"] = self.errors


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TriggerValidationError(USysConfError):
    """A loaded trigger violates a structural invariant."""


class EmptyBinsError(TriggerValidationError):
    def __init__(self) -> None:
        super().__init__("Triggers must contain at least one [[bins]] entry.")


class TaskTooLongError(TriggerValidationError):
    def __init__(self, task: str, limit: int) -> None:
        super().__init__(
            f"The task `{task}` cannot exceed {limit} characters.",
            context={"task": task, "length": len(task), "limit": limit},
        )
        self.task = task


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------


class CheckResolutionError(USysConfError):
    """A ``[check]`` path could not be resolved on this system."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Required path {path} could not be resolved: {reason}",
            context={"path": path},
        )
        self.path = path
        self.reason = reason


class RemovalError(USysConfError):
    """A ``[remove]`` path could not be deleted."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}", context={"path": path})
        self.path = path
        self.reason = reason
