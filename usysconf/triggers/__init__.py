"""Trigger layer — loading, validation, skip evaluation, fan-out and execution."""

from usysconf.triggers.aggregator import OutputBuilder
from usysconf.triggers.engine import TriggerEngine
from usysconf.triggers.executor import BinExecutor
from usysconf.triggers.fanout import expand_all, fan_out
from usysconf.triggers.loader import TriggerLoader
from usysconf.triggers.models import (
    TASK_MAX_LEN,
    WILDCARD_TOKEN,
    Bin,
    Check,
    ExpandedBin,
    Output,
    Remove,
    Replace,
    Skip,
    Status,
    TriggerConfig,
)
from usysconf.triggers.remover import DirectoryCleaner
from usysconf.triggers.scope import Scope
from usysconf.triggers.skip import SkipPolicy, resolve_check
from usysconf.triggers.validator import validate

__all__ = [
    "TASK_MAX_LEN",
    "WILDCARD_TOKEN",
    "Bin",
    "BinExecutor",
    "Check",
    "DirectoryCleaner",
    "ExpandedBin",
    "Output",
    "OutputBuilder",
    "Remove",
    "Replace",
    "Scope",
    "Skip",
    "SkipPolicy",
    "Status",
    "TriggerConfig",
    "TriggerEngine",
    "TriggerLoader",
    "expand_all",
    "fan_out",
    "resolve_check",
    "validate",
]
