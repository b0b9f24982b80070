"""Calculator engine — a pure reducer over key events.

apply(state, event) returns the next EngineState. States are frozen, so an
ignored event hands back the very same object.

Evaluation is strictly left to right with a single pending operator:
pressing an operator while another is pending computes the pending one first
(chaining). Zero divisors for / and % latch the error state instead of
raising; only Clear leaves it.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Optional

from pocketcalc.formatting import format_number, parse_display
from pocketcalc.models import (
    DIVISION_BY_ZERO,
    MODULUS_BY_ZERO,
    Backspace,
    Clear,
    Decimal,
    Digit,
    EngineState,
    Equals,
    Event,
    Noop,
    Operator,
    OperatorKey,
)


class ZeroDivisorError(ArithmeticError):
    """Right operand of / or % was exactly zero.

    Raised by evaluate() and caught inside apply(); it never escapes the
    engine.
    """

    def __init__(self, operator: Operator) -> None:
        self.operator = operator
        message = DIVISION_BY_ZERO if operator == Operator.DIVIDE else MODULUS_BY_ZERO
        super().__init__(message)

    @property
    def diagnostic(self) -> str:
        return self.args[0]


def evaluate(left: float, operator: Operator, right: float) -> float:
    """Compute `left <operator> right` with double semantics.

    % is the truncated remainder (sign follows `left`), matching math.fmod
    rather than Python's floor-mod `%`.
    """
    if operator == Operator.ADD:
        return left + right
    if operator == Operator.SUBTRACT:
        return left - right
    if operator == Operator.MULTIPLY:
        return left * right
    if right == 0.0:
        raise ZeroDivisorError(operator)
    if operator == Operator.DIVIDE:
        return left / right
    if math.isinf(left):
        # math.fmod raises here instead of returning nan
        return math.nan
    return math.fmod(left, right)


def _on_digit(state: EngineState, digit: str) -> EngineState:
    if state.awaiting_second_operand:
        return replace(state, display_text=digit, awaiting_second_operand=False, result_text="")
    if state.display_text == "0":
        return replace(state, display_text=digit, result_text="")
    return replace(state, display_text=state.display_text + digit, result_text="")


def _on_decimal(state: EngineState) -> EngineState:
    if state.awaiting_second_operand:
        return replace(state, display_text="0.", awaiting_second_operand=False, result_text="")
    if "." in state.display_text:
        return replace(state, result_text="")
    return replace(state, display_text=state.display_text + ".", result_text="")


def _on_operator(state: EngineState, operator: Operator) -> EngineState:
    current = parse_display(state.display_text)

    if state.pending_operator is None:
        return replace(
            state,
            first_operand=current,
            pending_operator=operator,
            awaiting_second_operand=True,
            result_text="",
        )

    # Chaining: settle the pending operation before installing the new one
    try:
        value = evaluate(state.first_operand, state.pending_operator, current)
    except ZeroDivisorError as e:
        return replace(state, has_error=True, result_text=e.diagnostic)

    return replace(
        state,
        first_operand=value,
        display_text=format_number(value),
        pending_operator=operator,
        awaiting_second_operand=True,
        result_text="",
    )


def _on_equals(state: EngineState) -> EngineState:
    if state.pending_operator is None:
        return state

    second = parse_display(state.display_text)
    try:
        value = evaluate(state.first_operand, state.pending_operator, second)
    except ZeroDivisorError as e:
        return replace(state, has_error=True, result_text=e.diagnostic)

    # pending_operator stays installed; the next operator recomputes with it
    result = format_number(value)
    return replace(
        state,
        result_text=result,
        display_text=result,
        first_operand=value,
        awaiting_second_operand=True,
    )


def _on_backspace(state: EngineState) -> EngineState:
    text = state.display_text
    return replace(state, display_text=text[:-1] if len(text) > 1 else "0", result_text="")


def apply(state: EngineState, event: Event) -> EngineState:
    """Apply one key event and return the resulting state.

    Args:
        state: Current calculator state.
        event: One of Digit, Decimal, OperatorKey, Equals, Clear, Backspace, Noop.

    Returns:
        The next state. The input state itself when the event is ignored
        (Noop, Equals with nothing pending, anything but Clear while in error).
    """
    if isinstance(event, Clear):
        return EngineState()
    if isinstance(event, Noop) or state.has_error:
        return state

    if isinstance(event, Digit):
        return _on_digit(state, event.digit)
    if isinstance(event, Decimal):
        return _on_decimal(state)
    if isinstance(event, OperatorKey):
        return _on_operator(state, event.operator)
    if isinstance(event, Equals):
        return _on_equals(state)
    if isinstance(event, Backspace):
        return _on_backspace(state)
    raise TypeError(f"unknown calculator event: {event!r}")


def apply_all(events, state: Optional[EngineState] = None) -> EngineState:
    """Fold a sequence of events over `state` (a fresh state by default)."""
    state = state if state is not None else EngineState()
    for event in events:
        state = apply(state, event)
    return state
