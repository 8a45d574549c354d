"""Fan-out — expand templated bins into concrete invocations.

A bin whose arguments carry the ``***`` token is run once per path matched
by a glob.  Expansion is an explicit three-stage pipeline:

    find_wildcard()       where is the token, and which patterns apply?
    enumerate_matches()   which paths do the patterns match (sorted)?
    substitute()          build one argv per match

Patterns come from the bin's ``[bins.replace]`` table when present; the
token inside the argument is then replaced by each match, so
``--dir=***`` becomes ``--dir=/usr/share/icons/hicolor``.  Without a
``replace`` table the argument itself is the pattern (token read as ``*``)
and each match replaces the whole argument.

A pattern that matches nothing yields no invocation for that bin.  This is
not an error: the task simply has nothing to do on this system.
"""

from __future__ import annotations

from dataclasses import dataclass

from usysconf.triggers import paths as fs
from usysconf.triggers.aggregator import OutputBuilder
from usysconf.triggers.models import WILDCARD_TOKEN, Bin, ExpandedBin, TriggerConfig


@dataclass(frozen=True)
class Wildcard:
    index: int
    patterns: tuple[str, ...]
    exclude: tuple[str, ...]
    whole_argument: bool


def find_wildcard(b: Bin) -> Wildcard | None:
    index = b.wildcard_index
    if index is None:
        return None
    if b.replace is not None and b.replace.paths:
        return Wildcard(
            index=index,
            patterns=tuple(b.replace.paths),
            exclude=tuple(b.replace.exclude),
            whole_argument=False,
        )
    exclude = tuple(b.replace.exclude) if b.replace is not None else ()
    return Wildcard(
        index=index,
        patterns=(b.cmd[index].replace(WILDCARD_TOKEN, "*"),),
        exclude=exclude,
        whole_argument=True,
    )


def enumerate_matches(wildcard: Wildcard) -> list[str]:
    return fs.expand_all(wildcard.patterns, wildcard.exclude)


def substitute(b: Bin, wildcard: Wildcard, match: str) -> ExpandedBin:
    argv = list(b.cmd)
    if wildcard.whole_argument:
        argv[wildcard.index] = match
    else:
        argv[wildcard.index] = argv[wildcard.index].replace(WILDCARD_TOKEN, match)
    return ExpandedBin(task=b.task, argv=tuple(argv), sub_task=match)


def fan_out(b: Bin) -> list[ExpandedBin]:
    """Expand *b* into zero or more concrete invocations."""
    wildcard = find_wildcard(b)
    if wildcard is None:
        return [ExpandedBin(task=b.task, argv=tuple(b.cmd))]
    return [substitute(b, wildcard, match) for match in enumerate_matches(wildcard)]


def expand_all(config: TriggerConfig) -> tuple[list[ExpandedBin], OutputBuilder]:
    """Fan out every bin of *config* in declaration order.

    Returns the invocations together with a builder pre-sized with one
    placeholder output per invocation, so results can be filled in by
    position.
    """
    expanded: list[ExpandedBin] = []
    builder = OutputBuilder()
    for b in config.bins:
        for e in fan_out(b):
            expanded.append(e)
            builder.placeholder(e.task, e.sub_task)
    return expanded, builder
