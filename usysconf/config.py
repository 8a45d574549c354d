"""usysconf — Runtime settings.

Settings are loaded from (in order of increasing priority):
    1. Built-in defaults (this file)
    2. System config: /etc/usysconf/config.yaml
    3. An explicit ``--config`` file
    4. Environment variables prefixed with USYSCONF_

These settings describe *where* triggers live and how the runner logs; the
trigger definitions themselves are TOML files handled by
:mod:`usysconf.triggers.loader`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SYSTEM_CONFIG_FILE = Path("/etc/usysconf/config.yaml")


class TriggerDirsConfig(BaseModel):
    model_config = ConfigDict(validate_default=True)

    system_dir: Path = Field(
        default=Path("/usr/share/defaults/usysconf.d"),
        description="Vendor trigger definitions shipped by packages.",
    )
    admin_dir: Path = Field(
        default=Path("/etc/usysconf.d"),
        description="Administrator definitions; override vendor ones by name.",
    )
    user_dir: Path = Field(
        default=Path("~/.config/usysconf.d"),
        description="Per-user definitions, used when not running as root.",
    )

    @field_validator("system_dir", "admin_dir", "user_dir", mode="after")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        return v.expanduser()


class RuntimeConfig(BaseModel):
    live_marker: Path = Field(
        default=Path("/run/livesys"),
        description="File whose presence means the system booted from live media.",
    )
    proc_root: Path = Field(
        default=Path("/proc/1/root"),
        description="Root of PID 1, compared with / to detect a chroot.",
    )


class LoggingConfig(BaseModel):
    level: Literal["debug", "info", "warning", "error", "critical"] = "warning"
    format: Literal["json", "console"] = "console"
    file: Path | None = None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="USYSCONF_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    triggers: TriggerDirsConfig = Field(default_factory=TriggerDirsConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Settings":
        """Load settings from file + environment variables."""
        data: dict[str, object] = {}

        candidates = [SYSTEM_CONFIG_FILE]
        if config_file:
            candidates.append(config_file)

        for path in candidates:
            if path.exists():
                import yaml  # lazy import — only needed when a file exists

                with path.open() as f:
                    loaded = yaml.safe_load(f) or {}
                    data.update(loaded)

        return cls(**data)

    def trigger_dirs(self, euid: int | None = None) -> list[Path]:
        """Return the discovery directories, lowest priority first.

        root sees the vendor and administrator directories; everybody else
        only sees their own.
        """
        if euid is None:
            euid = os.geteuid()
        if euid == 0:
            return [self.triggers.system_dir, self.triggers.admin_dir]
        return [self.triggers.user_dir]


# Module-level singleton — replaced by ``Settings.load()`` at CLI startup.
_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def override_settings(settings: Settings) -> None:
    """Replace the module-level singleton. Used in tests."""
    global _settings
    _settings = settings
