"""CLI — ``usysconf list``."""

from __future__ import annotations

import typer
from rich.markup import escape

from usysconf.cli.formatting import format_trigger_table, get_console
from usysconf.config import get_settings
from usysconf.exceptions import USysConfError
from usysconf.triggers.loader import TriggerLoader


def list_triggers() -> None:
    """List available triggers to run (user-specific)."""
    console = get_console()
    settings = get_settings()
    try:
        triggers = TriggerLoader().load_all(settings.trigger_dirs())
    except USysConfError as exc:
        console.print(f"[red]Failed to load triggers, reason: {escape(exc.message)}[/red]")
        raise typer.Exit(1)

    format_trigger_table(triggers, console)
