"""Engine tests — key sequences in, display state out.

Covers digit entry guards, operator chaining, equals, the zero-divisor error
latch, backspace and clear, plus the left-over pending operator after equals.
"""

import math

import pytest

from pocketcalc.engine import ZeroDivisorError, apply, apply_all, evaluate
from pocketcalc.keypad import event_for_label
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


def press(keys: str, state=None) -> EngineState:
    """Apply a run of single-character keys ('12+5=') to a state."""
    return apply_all([event_for_label(k) for k in keys], state)


@pytest.fixture
def error_state():
    s = press("8/0=")
    assert s.has_error
    return s


# --- Fresh state ---

def test_fresh_state():
    s = EngineState()
    assert s.display_text == "0"
    assert s.result_text == ""
    assert s.first_operand is None
    assert s.pending_operator is None
    assert s.awaiting_second_operand is False
    assert s.has_error is False


# --- Digit and decimal entry ---

def test_digits_append():
    assert press("123").display_text == "123"


def test_leading_zero_guard():
    s = apply_all([Digit("0"), Digit("0"), Digit("5")])
    assert s.display_text == "5"


def test_decimal_guard():
    s = apply_all([Digit("1"), Decimal(), Decimal(), Digit("5")])
    assert s.display_text == "1.5"


def test_decimal_on_fresh_zero():
    assert press(".5").display_text == "0.5"


def test_zero_after_decimal_is_kept():
    assert press("0.05").display_text == "0.05"


def test_decimal_starts_second_operand():
    s = press("5+.")
    assert s.display_text == "0."
    assert s.awaiting_second_operand is False
    assert press(".5=", s).result_text == "5.5"


def test_zero_starts_second_operand_literally():
    s = press("5+0")
    assert s.display_text == "0"
    assert s.awaiting_second_operand is False
    # Then the leading-zero guard applies
    assert press("7", s).display_text == "7"


# --- Equals ---

def test_addition_sequence():
    s = apply_all([Digit("1"), Digit("2"), OperatorKey(Operator.ADD), Digit("5"), Equals()])
    assert s.result_text == "17"
    assert s.display_text == "17"
    assert s.first_operand == 17.0
    assert s.awaiting_second_operand is True


def test_equals_without_pending_operator_is_ignored():
    s = press("42")
    assert apply(s, Equals()) is s


def test_subtraction_to_negative():
    assert press("3-8=").result_text == "-5"


def test_division_renders_full_double():
    assert press("1/3=").result_text == "0.3333333333333333"


def test_double_rounding_flows_through():
    assert press(".1+.2=").result_text == "0.30000000000000004"


def test_result_is_grouped():
    assert press("9999999*1000=").result_text == "9,999,999,000"


def test_digit_after_result_starts_new_number():
    s = press("12+5=3")
    assert s.display_text == "3"
    assert s.result_text == ""


# --- Operator chaining ---

def test_chaining_is_left_to_right():
    s = apply_all([
        Digit("2"), OperatorKey(Operator.ADD), Digit("3"),
        OperatorKey(Operator.MULTIPLY), Digit("4"), Equals(),
    ])
    assert s.result_text == "20"


def test_chaining_shows_intermediate_result():
    s = press("2+3*")
    assert s.display_text == "5"
    assert s.first_operand == 5.0
    assert s.pending_operator == Operator.MULTIPLY
    assert s.result_text == ""


def test_second_operator_without_digits_reuses_display():
    # 2 + * → 2 + 2 is settled before * is installed
    s = press("2+*")
    assert s.display_text == "4"
    assert press("3=", s).result_text == "12"


def test_pending_operator_survives_equals():
    s = press("2+3=")
    assert s.pending_operator == Operator.ADD
    assert s.first_operand == 5.0


def test_operator_after_equals_recomputes_with_old_operator():
    # 2 + 3 = gives 5; typing 4 then + settles 5 + 4 first
    s = press("2+3=4+")
    assert s.display_text == "9"
    assert press("=", s).result_text == "18"


def test_repeated_equals_reuses_result_as_operand():
    assert press("2+3==").result_text == "10"


def test_grouped_display_parses_as_zero():
    s = press("1000+1=")
    assert s.display_text == "1,001"
    # "1,001" reads back as 0.0, so a second = adds nothing
    assert press("=", s).result_text == "1,001"


# --- Modulus ---

def test_modulus():
    assert press("17%5=").result_text == "2"


def test_modulus_is_truncated_not_floored():
    # 0 - 7 % 3 → -7 % 3; truncated remainder keeps the left sign
    assert press("0-7%3=").result_text == "-1"


def test_evaluate_modulus_sign_follows_left_operand():
    assert evaluate(-7.0, Operator.MODULUS, 3.0) == -1.0
    assert evaluate(7.0, Operator.MODULUS, -3.0) == 1.0
    assert evaluate(7.5, Operator.MODULUS, 2.0) == 1.5


# --- Zero-divisor errors ---

def test_division_by_zero():
    s = apply_all([Digit("8"), OperatorKey(Operator.DIVIDE), Digit("0"), Equals()])
    assert s.has_error is True
    assert s.result_text == "Error: Division by zero"


def test_modulus_by_zero():
    s = press("8%0=")
    assert s.has_error is True
    assert s.result_text == "Error: Modulus by zero"


def test_negative_zero_divisor_is_an_error():
    s = EngineState(display_text="-0", first_operand=4.0, pending_operator=Operator.DIVIDE)
    assert apply(s, Equals()).has_error


def test_division_by_zero_while_chaining():
    s = press("6/0+")
    assert s.has_error is True
    assert s.result_text == "Error: Division by zero"
    # New operator is not installed
    assert s.pending_operator == Operator.DIVIDE
    assert s.first_operand == 6.0


def test_evaluate_raises_zero_divisor():
    with pytest.raises(ZeroDivisorError) as exc:
        evaluate(1.0, Operator.MODULUS, 0.0)
    assert exc.value.diagnostic == "Error: Modulus by zero"


@pytest.mark.parametrize("event", [
    Digit("5"),
    Decimal(),
    OperatorKey(Operator.ADD),
    OperatorKey(Operator.DIVIDE),
    Equals(),
    Backspace(),
    Noop("sin"),
])
def test_error_state_ignores_everything_but_clear(error_state, event):
    assert apply(error_state, event) is error_state


def test_clear_exits_error_state(error_state):
    assert apply(error_state, Clear()) == EngineState()


# --- Non-finite results ---

def test_overflow_renders_infinity():
    s = EngineState(display_text="10", first_operand=1e308, pending_operator=Operator.MULTIPLY)
    s = apply(s, Equals())
    assert s.result_text == "Infinity"
    assert s.first_operand == math.inf
    assert s.has_error is False


def test_infinity_display_reads_back():
    s = EngineState(display_text="Infinity", first_operand=1.0, pending_operator=Operator.SUBTRACT)
    assert apply(s, Equals()).result_text == "-Infinity"


# --- Backspace and clear ---

def test_backspace_single_character_yields_zero():
    s = apply_all([Digit("7"), Backspace()])
    assert s.display_text == "0"


def test_backspace_drops_last_character():
    assert press("1.").display_text == "1."
    assert apply(press("1."), Backspace()).display_text == "1"
    assert apply(press("123"), Backspace()).display_text == "12"


def test_backspace_leaves_operands_alone():
    s = apply(press("12+5="), Backspace())
    assert s.display_text == "1"
    assert s.result_text == ""
    assert s.first_operand == 17.0
    assert s.pending_operator == Operator.ADD
    assert s.awaiting_second_operand is True


def test_clear_from_any_state():
    for keys in ("", "123", "1+", "12+5=", "9.5*2"):
        assert apply(press(keys), Clear()).display_text == "0"
        assert apply(press(keys), Clear()) == EngineState()


# --- Noop and invariants ---

def test_noop_does_not_mutate():
    s = press("12+")
    assert apply(s, Noop("sin")) is s


def test_unknown_event_type_rejected():
    with pytest.raises(TypeError):
        apply(EngineState(), "7")


@pytest.mark.parametrize("keys", ["12+5=", "2+3*4=", "1.5.5", "9/3-1=", "7+", "2+3=4+", "8/0="])
def test_operand_and_operator_set_together(keys):
    state = EngineState()
    for k in keys:
        state = apply(state, event_for_label(k))
        assert (state.first_operand is None) == (state.pending_operator is None)
        assert state.display_text != ""
        assert state.display_text.count(".") <= 1


def test_large_product_switches_to_exponent():
    assert press("10000000*100000000=").result_text == "1,000,000,000,000,000"
    assert press("100000000*100000000=").result_text == "1e+16"
