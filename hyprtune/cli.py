# File: hyprtune/cli.py
import logging
import sys
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Annotated, NoReturn

import questionary
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from hyprtune.config import (
    APP_NAME,
    CONFIG_ENV_VAR,
    FIELD_SPECS,
    AppSettings,
    get_field,
)
from hyprtune.document import ConfigDocument, locate_in, set_value
from hyprtune.engine import apply_field, reset_fields
from hyprtune.errors import (
    ConfigNotFoundError,
    HyprtuneError,
    SessionTerminated,
)
from hyprtune.logging_config import console_logging_muted, setup_logging
from hyprtune.tui import current_values, describe_value, run_editor

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

app = typer.Typer(
    name=APP_NAME,
    add_completion=False,
    rich_markup_mode="markdown",
    pretty_exceptions_show_locals=False,
    help="Live terminal editor for Hyprland appearance settings.",
)


# --- CLI Option Annotations (Shared) ---
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        envvar=CONFIG_ENV_VAR,
        help="Path to appearance.conf (default: ~/.config/hypr/source/appearance.conf).",
        show_default=False,
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level", "-l", help="Set the logging level.", case_sensitive=False
    ),
]
LogFileOption = Annotated[
    Path | None, typer.Option("--log-file", help="Also write logs to this file.")
]
KeyArg = Annotated[str, typer.Argument(..., help="Key name, e.g. 'gaps_in'.")]
BlockOption = Annotated[
    str | None,
    typer.Option("--block", "-b", help="Restrict the lookup to this block, e.g. 'blur'."),
]


def _version_callback(value: bool):
    if value:
        try:
            pkg_version = importlib_metadata.version(APP_NAME)
        except importlib_metadata.PackageNotFoundError:
            pkg_version = "0.0.0-unknown (not installed)"
        console.print(f"{APP_NAME} version: [bold cyan]{pkg_version}[/]")
        raise typer.Exit()


def _fail(message: str, code: int = 1) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {message}")
    raise typer.Exit(code=code)


def _settings(ctx: typer.Context) -> AppSettings:
    settings = ctx.obj
    if not isinstance(settings, AppSettings):
        settings = AppSettings()
    return settings


def _require_config(settings: AppSettings) -> Path:
    """Exits before any work is done when the config file is missing."""
    path = settings.config_path
    if not path.is_file():
        _fail(f"Config file not found: {path}")
    return path


# --- Main Callback ---
@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: ConfigOption = None,
    log_level: LogLevelOption = "WARNING",
    log_file: LogFileOption = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show application version.",
            is_eager=True,
            callback=_version_callback,
        ),
    ] = False,
):
    """
    Browse and adjust Hyprland appearance values in place.

    Run without a subcommand to open the interactive editor.
    """
    try:
        options: dict = {"log_level": log_level, "log_file": log_file}
        if config is not None:
            options["config_path"] = config
        settings = AppSettings(**options)
    except ValidationError as e:
        _fail(str(e.errors()[0]["msg"]))
    setup_logging(settings)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        edit(ctx)


# --- Interactive Editor ---
@app.command()
def edit(ctx: typer.Context):
    """Open the interactive editor (the default when no command is given)."""
    settings = _settings(ctx)
    path = _require_config(settings)
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        _fail("The interactive editor needs a terminal (stdin and stdout must be TTYs).")

    try:
        with console_logging_muted():
            run_editor(path, console=console)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted.[/]")
        raise typer.Exit(code=130) from None
    except SessionTerminated as e:
        raise typer.Exit(code=e.exit_code) from None
    except ConfigNotFoundError as e:
        _fail(str(e))
    except HyprtuneError as e:
        logger.error(f"Editor session aborted: {e}", exc_info=True)
        _fail(str(e))
    console.print("[cyan][INFO][/cyan] Configuration saved.")


# --- Non-interactive Commands ---
@app.command()
def show(ctx: typer.Context):
    """Show every editable field with its current value."""
    path = _require_config(_settings(ctx))
    try:
        values = current_values(path)
    except HyprtuneError as e:
        _fail(str(e))
    table = Table(
        title="[bold]Hyprland Appearance[/]",
        header_style="bold magenta",
        box=None,
        padding=(0, 1),
    )
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Key", style="dim", no_wrap=True)
    table.add_column("Value")
    for spec in FIELD_SPECS:
        key_display = f"{spec.block}.{spec.key}" if spec.block else spec.key
        table.add_row(
            spec.label, key_display, describe_value(spec, values[spec.field_id])
        )
    console.print(table)
    console.print(f"File: [dim]{path}[/]")


@app.command()
def fields():
    """List the editable fields, their kinds, bounds and defaults."""
    table = Table(header_style="bold magenta", box=None, padding=(0, 1))
    table.add_column("Field id", style="cyan", no_wrap=True)
    table.add_column("Label")
    table.add_column("Kind")
    table.add_column("Min")
    table.add_column("Max")
    table.add_column("Default", style="yellow")
    for spec in FIELD_SPECS:
        table.add_row(
            spec.field_id,
            spec.label,
            spec.kind.value,
            "" if spec.minimum is None else str(spec.minimum),
            "" if spec.maximum is None else str(spec.maximum),
            spec.default,
        )
    console.print(table)


@app.command()
def get(ctx: typer.Context, key: KeyArg, block: BlockOption = None):
    """Print the current value of KEY (exit code 1 if it is not set)."""
    path = _require_config(_settings(ctx))
    try:
        document = ConfigDocument.load(path)
    except HyprtuneError as e:
        _fail(str(e))
    value = locate_in(document, key, block)
    if value is None:
        scope = f" in block '{block}'" if block else ""
        _fail(f"Key '{key}'{scope} is not set in {path}.")
    typer.echo(value)


@app.command("set")
def set_cmd(
    ctx: typer.Context,
    key: KeyArg,
    value: Annotated[str, typer.Argument(..., help="New value, written verbatim.")],
    block: BlockOption = None,
):
    """Write VALUE to KEY in place, keeping the rest of the file intact."""
    path = _require_config(_settings(ctx))
    try:
        changed = set_value(path, key, value, block)
    except HyprtuneError as e:
        _fail(str(e))
    if not changed:
        scope = f" in block '{block}'" if block else ""
        _fail(f"Key '{key}'{scope} is not present in {path}; nothing written.")
    console.print(f"[green]✅ {escape(key)} = {escape(value)}[/]")


@app.command()
def adjust(
    ctx: typer.Context,
    field: Annotated[
        str, typer.Argument(..., help="Field id or label, e.g. 'blur_size'.")
    ],
    down: Annotated[
        bool, typer.Option("--down", "-d", help="Decrease instead of increase.")
    ] = False,
):
    """Apply one step (or toggle) to a field, as the editor's arrow keys do."""
    path = _require_config(_settings(ctx))
    spec = get_field(field)
    if spec is None:
        _fail(f"Unknown field '{field}'. Run '{APP_NAME} fields' to list them.")
    try:
        written = apply_field(path, spec, -1 if down else 1)
    except HyprtuneError as e:
        _fail(str(e))
    if written is None:
        _fail(f"Key '{spec.key}' for '{spec.label}' is not present in {path}.")
    console.print(f"{spec.label} → [bold]{escape(written)}[/]")


@app.command()
def reset(
    ctx: typer.Context,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Do not ask for confirmation.")
    ] = False,
):
    """Restore every field to its factory default."""
    path = _require_config(_settings(ctx))
    if not yes:
        confirmed = questionary.confirm(
            f"Reset all {len(FIELD_SPECS)} fields in {path} to defaults?",
            default=False,
        ).ask()
        if not confirmed:
            console.print("Reset cancelled.")
            raise typer.Exit()
    try:
        written = reset_fields(path)
    except HyprtuneError as e:
        _fail(str(e))
    console.print(
        Panel(
            f"Restored [bold cyan]{written}[/] of {len(FIELD_SPECS)} fields to defaults.",
            title="[bold green]Reset[/]",
            border_style="green",
            expand=False,
        )
    )


if __name__ == "__main__":
    app()
