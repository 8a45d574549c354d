"""Trigger definitions — Loader.

Responsibilities:
  1. Locate trigger definition files (``*.toml``) in the discovery directories
  2. Read and decode TOML
  3. Validate the structure against :class:`TriggerConfig`
  4. Serialise a loaded trigger back to plain data

The loader does NOT enforce the structural invariants checked by
:func:`usysconf.triggers.validator.validate`; callers run that separately.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from usysconf.exceptions import (
    TriggerNotFoundError,
    TriggerParseError,
    TriggerReadError,
)
from usysconf.logging import get_logger
from usysconf.triggers.models import TriggerConfig

_log = get_logger(__name__)

TRIGGER_SUFFIX = ".toml"


class TriggerLoader:
    """Stateless trigger definition loader.

    Usage::

        loader = TriggerLoader()
        config = loader.load("/usr/share/defaults/usysconf.d/fonts.toml")
        every = loader.load_all(settings.trigger_dirs())
    """

    def load(self, path: str | Path) -> TriggerConfig:
        """Read the file at *path* and parse it into a :class:`TriggerConfig`.

        Raises:
            TriggerNotFoundError: *path* does not exist.
            TriggerReadError: *path* exists but cannot be read as UTF-8 text.
            TriggerParseError: the content is not TOML or has the wrong shape.
        """
        path = Path(path)
        try:
            path.stat()
        except FileNotFoundError as exc:
            raise TriggerNotFoundError(path) from exc
        except OSError as exc:
            raise TriggerReadError(path, str(exc)) from exc

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TriggerReadError(path, str(exc)) from exc

        return self.parse(text, source=path)

    def parse(self, text: str, source: str | Path | None = None) -> TriggerConfig:
        """Parse TOML *text* into a :class:`TriggerConfig`."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise TriggerParseError(
                f"Invalid TOML in trigger definition {source or '<string>'}: {exc}",
                path=source,
            ) from exc

        try:
            return TriggerConfig.model_validate(data)
        except ValidationError as exc:
            errors = exc.errors(include_url=False)
            messages = "; ".join(
                f"{'.'.join(str(part) for part in e.get('loc', ()))}: {e.get('msg', '')}"
                for e in errors
            )
            raise TriggerParseError(
                f"Trigger definition {source or '<string>'} does not match the expected shape: {messages}",
                path=source,
                errors=errors,
            ) from exc

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def discover(self, dirs: Iterable[str | Path]) -> dict[str, Path]:
        """Map trigger names to definition files across *dirs*.

        Directories are given lowest priority first: a definition in a later
        directory replaces an earlier one with the same name.  Missing
        directories are ignored.
        """
        found: dict[str, Path] = {}
        for directory in dirs:
            directory = Path(directory)
            if not directory.is_dir():
                _log.debug("trigger_dir_missing", path=str(directory))
                continue
            for path in sorted(directory.glob(f"*{TRIGGER_SUFFIX}")):
                if not path.is_file():
                    continue
                if path.stem in found:
                    _log.debug(
                        "trigger_overridden",
                        name=path.stem,
                        previous=str(found[path.stem]),
                        path=str(path),
                    )
                found[path.stem] = path
        return dict(sorted(found.items()))

    def load_all(self, dirs: Iterable[str | Path]) -> dict[str, TriggerConfig]:
        """Load every discovered trigger; the first load error is raised."""
        return {name: self.load(path) for name, path in self.discover(dirs).items()}

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    @staticmethod
    def to_dict(config: TriggerConfig) -> dict[str, Any]:
        """Serialise *config* to the plain data shape of a definition file."""
        return config.model_dump(by_alias=True, exclude_none=True)

    @staticmethod
    def to_json(config: TriggerConfig, indent: int = 2) -> str:
        return json.dumps(TriggerLoader.to_dict(config), indent=indent)
