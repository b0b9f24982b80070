"""CLI for the pocketcalc keypad calculator.

Usage:
    python -m pocketcalc press 1 2 + 5 =        # Apply keys, show the display
    python -m pocketcalc press "12+5=" --json   # Same, final state as JSON
    python -m pocketcalc press "8/0=" --trace   # Report every key step
    python -m pocketcalc keys                   # Show the keypad layout
    python -m pocketcalc format 12454           # Format a number for display
    python -m pocketcalc repl                   # Interactive session
"""

from __future__ import annotations

import json
from typing import List, Optional

import typer
from rich.markup import escape

from pocketcalc.config import Settings
from pocketcalc.display import print_display, render_keypad
from pocketcalc.formatting import format_number
from pocketcalc.keypad import split_keys
from pocketcalc.session import CalculatorSession

app = typer.Typer(
    name="pocketcalc",
    help="Keypad calculator with left-to-right operator chaining",
    no_args_is_help=True,
)
settings = Settings.from_env()
console = settings.console(stderr=True)
out = settings.console()

_QUIT_WORDS = ("q", "quit", "exit")


def _labels(words: List[str]) -> list[str]:
    labels: list[str] = []
    for word in words:
        labels.extend(split_keys(word))
    return labels


@app.command("press")
def cmd_press(
    keys: Optional[List[str]] = typer.Argument(None, help="Key labels or typed keys, e.g. 1 2 + 5 = or '12+5='"),
    json_out: bool = typer.Option(False, "--json", help="Print the final engine state as JSON"),
    trace: Optional[bool] = typer.Option(None, "--trace/--no-trace", help="Report every key step (default: POCKETCALC_TRACE)"),
) -> None:
    """Press keys on a fresh calculator and show the result."""
    labels = _labels(keys or [])
    if not labels:
        console.print("[red]No keys given.[/red] Try: press 1 2 + 5 =")
        raise typer.Exit(1)

    session = CalculatorSession(console=console, trace=settings.trace if trace is None else trace)
    session.press_all(labels)

    if json_out:
        typer.echo(json.dumps(session.state.to_dict()))
    else:
        print_display(session.state, out)


@app.command("keys")
def cmd_keys() -> None:
    """Show the keypad layout and what each key does."""
    render_keypad(out)


@app.command("format")
def cmd_format(
    value: str = typer.Argument(help="Number to format (e.g., '12454' or '-1234.5')"),
) -> None:
    """Format a number the way the display shows results."""
    try:
        number = float(value)
    except ValueError:
        console.print(f"[red]Not a number:[/red] {escape(value)}")
        raise typer.Exit(1)
    typer.echo(format_number(number))


@app.command("repl")
def cmd_repl(
    trace: Optional[bool] = typer.Option(None, "--trace/--no-trace", help="Report every key step (default: POCKETCALC_TRACE)"),
) -> None:
    """Interactive session: type keys, see the display after each line."""
    session = CalculatorSession(console=console, trace=settings.trace if trace is None else trace)
    console.print("[dim]Type keys (e.g. 12+5=), 'Ac' to clear, 'q' to quit.[/dim]")
    print_display(session.state, out)

    while True:
        try:
            line = console.input(escape(settings.prompt))
        except EOFError:
            break
        text = line.strip()
        if text.lower() in _QUIT_WORDS:
            break
        if not text:
            continue
        session.press_all(split_keys(text))
        print_display(session.state, out)

    count = len(session.history)
    console.print(f"[dim]{count} {'key' if count == 1 else 'keys'} pressed.[/dim]")


if __name__ == "__main__":
    app()
