"""Directory cleaner — deletes ``[remove]`` paths before the bins run."""

from __future__ import annotations

import os
import shutil
from typing import Any

from usysconf.exceptions import RemovalError
from usysconf.logging import get_logger
from usysconf.triggers import paths as fs
from usysconf.triggers.models import Remove
from usysconf.triggers.scope import Scope


def remove_path(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    else:
        os.unlink(path)


class DirectoryCleaner:
    """Remove every path matched by a :class:`Remove` section.

    Removal stops at the first failure; paths after it are left alone and
    the failure is raised as :class:`RemovalError`.
    """

    def __init__(self, remove: Remove, logger: Any | None = None) -> None:
        self.remove = remove
        self._log = logger or get_logger(__name__)

    def targets(self) -> list[str]:
        return fs.expand_all(self.remove.paths, self.remove.exclude)

    def execute(self, scope: Scope) -> None:
        for path in self.targets():
            if scope.dry_run:
                self._log.info("dry_run_remove", path=path)
                continue
            self._log.debug("removing", path=path)
            try:
                remove_path(path)
            except FileNotFoundError:
                continue
            except OSError as exc:
                raise RemovalError(path, exc.strerror or str(exc)) from exc
