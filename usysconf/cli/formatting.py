"""Rich formatting helpers for the usysconf CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from usysconf.triggers.models import TASK_MAX_LEN, Output, Status, TriggerConfig

_STATUS_STYLE = {
    Status.SUCCESS: ("green", "success"),
    Status.FAILURE: ("red", "failure"),
    Status.SKIPPED: ("yellow", "skipped"),
}


def get_console() -> Console:
    return Console(stderr=False)


def format_trigger_table(triggers: Mapping[str, TriggerConfig], console: Console) -> None:
    """Display trigger name → description."""
    if not triggers:
        console.print("[dim]No triggers found.[/dim]")
        return

    table = Table(title="Available Triggers", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for name, config in triggers.items():
        table.add_row(escape(name), escape(config.description))
    console.print(table)


def format_outputs(name: str, outputs: list[Output], console: Console) -> None:
    """Print one aligned line per output, with failure messages underneath."""
    console.print(f"[bold]{escape(name)}[/bold]")
    if not outputs:
        console.print("  [dim]nothing to do[/dim]")
        return

    for out in outputs:
        style, word = _STATUS_STYLE.get(out.status, ("dim", "pending"))
        label = escape(out.name.ljust(TASK_MAX_LEN))
        line = f"  {label} [{style}]{word}[/{style}]"
        if out.sub_task:
            line += f" [dim]{escape(out.sub_task)}[/dim]"
        console.print(line)
        if out.message:
            for msg_line in out.message.rstrip().splitlines():
                console.print(f"    [red]{escape(msg_line)}[/red]")
