# File: hyprtune/tui/render.py
"""Builds the Rich renderables for the editor screen."""

import logging
from pathlib import Path

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..config.fields import DYNAMIC_COLOR, FIELD_SPECS, FieldKind, FieldSpec
from ..document import ConfigDocument, locate_in
from ..errors import ConfigNotFoundError
from .keys import HELP_TEXT
from .state import SessionState

logger = logging.getLogger(__name__)

LABEL_WIDTH = 20


def current_values(
    config_path: Path, fields: tuple[FieldSpec, ...] = FIELD_SPECS
) -> dict[str, str | None]:
    """Reads every field's value from one fresh parse of the document."""
    try:
        document = ConfigDocument.load(config_path)
    except ConfigNotFoundError:
        logger.warning(f"Config {config_path} disappeared; showing all fields unset.")
        return {spec.field_id: None for spec in fields}
    return {spec.field_id: locate_in(document, spec.key, spec.block) for spec in fields}


def describe_value(spec: FieldSpec, value: str | None) -> Text:
    """Formats a raw config value for display."""
    if value == "true":
        return Text("ON", style="bold green")
    if value == "false":
        return Text("OFF", style="bold red")
    if not value:
        return Text("unset", style="bold red")
    if DYNAMIC_COLOR in value:
        return Text(f"Dynamic ({DYNAMIC_COLOR})", style="bold magenta")
    if spec.kind is FieldKind.COLOR:
        return Text(f"Static ({value})", style="bright_black")
    return Text(value, style="bold white")


def build_menu(
    state: SessionState,
    values: dict[str, str | None],
    fields: tuple[FieldSpec, ...] = FIELD_SPECS,
) -> Table:
    table = Table.grid(padding=(0, 1))
    table.add_column(width=3)
    table.add_column(min_width=LABEL_WIDTH, no_wrap=True)
    table.add_column(width=1)
    table.add_column()
    for index, spec in enumerate(fields):
        display = describe_value(spec, values.get(spec.field_id))
        if index == state.selected:
            table.add_row(
                Text(" ➤", style="bold cyan"),
                Text(spec.label, style="reverse"),
                ":",
                display,
            )
        else:
            table.add_row("", spec.label, ":", display)
    return table


def build_screen(
    state: SessionState,
    config_path: Path,
    fields: tuple[FieldSpec, ...] = FIELD_SPECS,
) -> Group:
    """Renders the whole editor screen from the current file contents."""
    header = Panel(
        Text.assemble(
            ("Hyprland Configuration ", "bold white"),
            (":: ", "magenta"),
            ("Real-time Preview", "bold cyan"),
        ),
        border_style="magenta",
        expand=False,
    )
    menu = build_menu(state, current_values(config_path, fields), fields)
    footer = Text.assemble(
        ("\n " + HELP_TEXT + "\n", "cyan"),
        (" File: ", "cyan"),
        (str(config_path), "dim"),
    )
    parts = [header, menu, footer]
    if state.status:
        parts.append(Text(f" {state.status}", style="yellow"))
    return Group(*parts)
