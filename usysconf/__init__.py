"""usysconf — Post-install trigger runner.

Packages and administrators drop declarative trigger definitions (TOML, one
per subsystem: font caches, icon caches, tmpfiles, ...) into well-known
directories.  usysconf loads them, decides which apply to the current system,
fans templated commands out over glob matches and runs them in order,
reporting every result.

Layers (bottom to top):
    1. Models    — Pydantic trigger definition and result models
    2. Triggers  — loader, validator, skip policy, fan-out, executor, engine
    3. CLI       — ``usysconf list`` / ``usysconf run``
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from usysconf.triggers.models import Output, TriggerConfig

__all__ = [
    "__version__",
    "Output",
    "TriggerConfig",
]
