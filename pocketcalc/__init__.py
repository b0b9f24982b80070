"""pocketcalc — a keypad calculator engine.

Turns discrete key presses (digits, '.', + - * / %, =, Ac, ⌫) into the two
display lines of a pocket calculator. Evaluation is strictly left to right
with one pending operator; division or modulus by zero latches an error
that only Ac clears.

Usage:
    python -m pocketcalc press 1 2 + 5 =   # Apply keys, show the display
    python -m pocketcalc keys              # Show the keypad layout
    python -m pocketcalc repl              # Interactive session
"""

from pocketcalc.engine import apply, apply_all, evaluate
from pocketcalc.formatting import format_number, parse_display
from pocketcalc.keypad import event_for_label, split_keys
from pocketcalc.models import (
    Backspace,
    Clear,
    Decimal,
    Digit,
    EngineState,
    Equals,
    Noop,
    Operator,
    OperatorKey,
)
from pocketcalc.session import CalculatorSession

__all__ = [
    "Backspace",
    "CalculatorSession",
    "Clear",
    "Decimal",
    "Digit",
    "EngineState",
    "Equals",
    "Noop",
    "Operator",
    "OperatorKey",
    "apply",
    "apply_all",
    "evaluate",
    "event_for_label",
    "format_number",
    "parse_display",
    "split_keys",
]
