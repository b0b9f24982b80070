"""Keypad labels and their mapping onto engine events.

The front end forwards presses by label. Every label maps to exactly one
event; scientific-only and unknown labels map to Noop.

Layout (six rows, + and = span two rows each, 0 spans two columns):

    e   μ   sin  deg
    Ac  ⌫   /    *
    7   8   9    -
    4   5   6    +
    1   2   3    +
    0   0   .    =
"""

from __future__ import annotations

from enum import Enum

from pocketcalc.models import (
    Backspace,
    Clear,
    Decimal,
    Digit,
    Equals,
    Event,
    Noop,
    Operator,
    OperatorKey,
)


class ButtonKind(str, Enum):
    """How a key is classified on the keypad."""

    DIGIT = "digit"
    OPERATOR = "operator"
    EQUALS = "equals"
    CONTROL = "control"
    SCIENTIFIC = "scientific"
    BACKSPACE = "backspace"


CLEAR_LABEL = "Ac"
BACKSPACE_LABEL = "⌫"

SCIENTIFIC_LABELS = ("e", "μ", "sin", "deg")

KEYPAD_ROWS: list[list[str]] = [
    list(SCIENTIFIC_LABELS),
    [CLEAR_LABEL, BACKSPACE_LABEL, "/", "*"],
    ["7", "8", "9", "-"],
    ["4", "5", "6", "+"],
    ["1", "2", "3"],
    ["0", ".", "="],
]

# Typing shortcuts for terminals without the keypad glyphs.
ALIASES: dict[str, str] = {
    "AC": CLEAR_LABEL,
    "ac": CLEAR_LABEL,
    "bs": BACKSPACE_LABEL,
    "back": BACKSPACE_LABEL,
    "<": BACKSPACE_LABEL,
    "x": "*",
    "×": "*",
    "÷": "/",
}


def keypad_labels() -> list[str]:
    """All labels on the keypad, in layout order, without duplicates."""
    seen: list[str] = []
    for row in KEYPAD_ROWS:
        for label in row:
            if label not in seen:
                seen.append(label)
    return seen


def resolve_alias(label: str) -> str:
    return ALIASES.get(label, label)


def button_kind(label: str) -> ButtonKind:
    """Classify a label for styling purposes."""
    label = resolve_alias(label)
    if label in SCIENTIFIC_LABELS:
        return ButtonKind.SCIENTIFIC
    if label == CLEAR_LABEL:
        return ButtonKind.CONTROL
    if label == BACKSPACE_LABEL:
        return ButtonKind.BACKSPACE
    if label == "=":
        return ButtonKind.EQUALS
    if label in {op.value for op in Operator}:
        return ButtonKind.OPERATOR
    return ButtonKind.DIGIT


def event_for_label(label: str) -> Event:
    """Map a button label to the engine event it produces.

    Args:
        label: Keypad label ('7', '.', '+', 'Ac', '⌫', '=', 'sin', ...) or
            one of the typing aliases.

    Returns:
        The matching event; Noop for scientific and unrecognized labels.
    """
    label = resolve_alias(label)
    if label == CLEAR_LABEL:
        return Clear()
    if label == BACKSPACE_LABEL:
        return Backspace()
    if label == "=":
        return Equals()
    if label == ".":
        return Decimal()
    if len(label) == 1 and label in "0123456789":
        return Digit(label)
    try:
        return OperatorKey(Operator(label))
    except ValueError:
        return Noop(label)


def _is_known(word: str) -> bool:
    if resolve_alias(word) in SCIENTIFIC_LABELS:
        return True
    return not isinstance(event_for_label(word), Noop)


def split_keys(text: str) -> list[str]:
    """Split typed input into key labels.

    Whitespace-separated words that are labels on their own stay whole
    ('sin', 'Ac', 'bs'); any other word is split into single characters.

    '12+5='   → ['1', '2', '+', '5', '=']
    '8 / 0 ='  → ['8', '/', '0', '=']
    'Ac 7 bs' → ['Ac', '7', 'bs']
    """
    keys: list[str] = []
    for word in text.split():
        if _is_known(word):
            keys.append(word)
        else:
            keys.extend(word)
    return keys
