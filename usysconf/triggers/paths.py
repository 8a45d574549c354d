"""Filesystem helpers shared by the skip, check, remove and fan-out steps.

Every path in a trigger definition may be a glob pattern.  Matching is
done with :mod:`glob` (absolute patterns, hidden files included) and
results are always sorted so that the order of the report does not depend
on directory iteration order.
"""

from __future__ import annotations

import fnmatch
import glob
import os
from typing import Iterable


def expand(pattern: str) -> list[str]:
    """Return the sorted matches of *pattern*, including dangling symlinks."""
    return sorted(glob.glob(os.path.normpath(pattern), include_hidden=True))


def expand_all(patterns: Iterable[str], exclude: Iterable[str] = ()) -> list[str]:
    """Expand every pattern, drop excluded matches and duplicates, and sort."""
    excludes = list(exclude)
    matches: set[str] = set()
    for pattern in patterns:
        for match in expand(pattern):
            if not is_excluded(match, excludes):
                matches.add(match)
    return sorted(matches)


def is_excluded(path: str, exclude: Iterable[str]) -> bool:
    return any(fnmatch.fnmatchcase(path, os.path.normpath(p)) for p in exclude)


def exists(path: str) -> bool:
    """Follow symlinks; anything but a missing target counts as present."""
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError:
        return True
    return True


def any_exists(patterns: Iterable[str]) -> str | None:
    """Return the first path matched by *patterns* whose target exists, or None."""
    for pattern in patterns:
        if glob.has_magic(pattern):
            for match in expand(pattern):
                if exists(match):
                    return match
        elif exists(os.path.normpath(pattern)):
            return pattern
    return None
