"""Rendering of calculator state — the two display lines and the keypad table.

The engine decides what the lines say; this module only decides how they
look. The result line turns red while the engine is in its error state.
"""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pocketcalc.keypad import ButtonKind, KEYPAD_ROWS, button_kind, event_for_label
from pocketcalc.models import Digit, EngineState, Event, OperatorKey

_KIND_STYLES = {
    ButtonKind.DIGIT: "blue",
    ButtonKind.SCIENTIFIC: "dim",
    ButtonKind.CONTROL: "white",
    ButtonKind.BACKSPACE: "white",
    ButtonKind.OPERATOR: "cyan",
    ButtonKind.EQUALS: "bold cyan",
}


def input_line(state: EngineState) -> str:
    """The number being typed or shown."""
    return state.display_text


def result_line(state: EngineState) -> str:
    """'=' followed by the last result, or the input when there is none."""
    return f"={state.result_text or state.display_text}"


def render_display(state: EngineState) -> Panel:
    """Build the two-line display panel for a state."""
    lines = Group(
        Text(input_line(state), style="grey70", justify="right"),
        Text(result_line(state), style="bold red" if state.has_error else "bold", justify="right"),
    )
    return Panel(lines, title="pocketcalc", border_style="red" if state.has_error else "blue")


def describe_event(event: Event) -> str:
    """Short name for an event: 'Digit 7', 'OperatorKey *', 'Noop'."""
    name = type(event).__name__
    if isinstance(event, Digit):
        return f"{name} {event.digit}"
    if isinstance(event, OperatorKey):
        return f"{name} {event.operator.value}"
    return name


def print_display(state: EngineState, console: Console) -> None:
    console.print(render_display(state))


def render_keypad(console: Console) -> None:
    """Render a Rich table of every keypad label, its kind and its event."""
    table = Table(title="Keypad", show_header=True, header_style="bold")
    table.add_column("Row", justify="right", style="dim")
    table.add_column("Label", min_width=5)
    table.add_column("Kind", min_width=10, no_wrap=True)
    table.add_column("Event", min_width=12, no_wrap=True)

    for row_no, row in enumerate(KEYPAD_ROWS, 1):
        for label in row:
            kind = button_kind(label)
            style = _KIND_STYLES[kind]
            table.add_row(
                str(row_no),
                f"[{style}]{label}[/{style}]",
                kind.value,
                describe_event(event_for_label(label)),
            )

    console.print()
    console.print(table)
    console.print()
