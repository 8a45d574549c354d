"""CLI — ``usysconf run``.

Each trigger is loaded and validated on its own: a broken definition is
reported and skipped without stopping the others.  The exit code is 1 when
any trigger could not be loaded or any invocation failed.
"""

from __future__ import annotations

import typer
from rich.markup import escape

from usysconf.cli.formatting import format_outputs, get_console
from usysconf.config import get_settings
from usysconf.exceptions import USysConfError
from usysconf.logging import get_logger
from usysconf.triggers.engine import TriggerEngine
from usysconf.triggers.loader import TriggerLoader
from usysconf.triggers.models import Status
from usysconf.triggers.scope import Scope
from usysconf.triggers.validator import validate

_log = get_logger(__name__)


def run_triggers(
    ctx: typer.Context,
    names: list[str] | None = typer.Argument(
        None, help="Triggers to run. Runs every available trigger when omitted."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Ignore [skip] conditions (chroot, live, paths)."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Show what would run without running it."
    ),
) -> None:
    """Run triggers against the current system."""
    console = get_console()
    settings = get_settings()
    loader = TriggerLoader()

    found = loader.discover(settings.trigger_dirs())
    requested = list(names or [])
    unknown = [n for n in requested if n not in found]
    if unknown:
        console.print(f"[red]Unknown trigger(s): {escape(', '.join(unknown))}[/red]")
        raise typer.Exit(1)

    debug = bool((ctx.obj or {}).get("debug", False))
    scope = Scope.detect(
        forced=force, dry_run=dry_run, debug=debug, runtime=settings.runtime
    )
    _log.debug("scope_detected", forced=scope.forced, chroot=scope.chroot, live=scope.live)

    engine = TriggerEngine()
    failed = False
    for name in requested or list(found):
        try:
            config = loader.load(found[name])
            validate(config)
        except USysConfError as exc:
            console.print(f"[bold]{escape(name)}[/bold]")
            console.print(f"  [red]{escape(exc.message)}[/red]")
            failed = True
            continue

        outputs = engine.execute(config, scope, name=name)
        format_outputs(name, outputs, console)
        if any(o.status is Status.FAILURE for o in outputs):
            failed = True

    if failed:
        raise typer.Exit(1)
