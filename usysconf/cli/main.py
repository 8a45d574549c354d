"""usysconf CLI — Entry point.

Usage:
    usysconf list
    usysconf run [NAMES...] [--force] [--dry-run]
    usysconf --debug run fonts
    usysconf --config ./usysconf.yaml list
"""

from __future__ import annotations

from pathlib import Path

import typer

from usysconf.cli.commands.listing import list_triggers
from usysconf.cli.commands.run import run_triggers
from usysconf.config import Settings, override_settings
from usysconf.logging import configure_logging

app = typer.Typer(
    name="usysconf",
    help="usysconf — Run post-install triggers for the system.",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)

app.command("list")(list_triggers)
app.command("run")(run_triggers)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None, "--config", help="Settings file (YAML) to load after /etc/usysconf/config.yaml."
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging."),
) -> None:
    settings = Settings.load(config_file=config)
    override_settings(settings)

    level = "debug" if debug else settings.logging.level
    log_file = str(settings.logging.file) if settings.logging.file else None
    configure_logging(level=level, format=settings.logging.format, log_file=log_file)

    ctx.obj = {"debug": debug}


if __name__ == "__main__":
    app()
