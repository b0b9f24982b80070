"""Data models for the pocketcalc engine.

Operator enum, the key events, and EngineState — all the typed structures
that flow through keypad → engine → display.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Operator(str, Enum):
    """Binary operators the engine can hold pending."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULUS = "%"


DIVISION_BY_ZERO = "Error: Division by zero"
MODULUS_BY_ZERO = "Error: Modulus by zero"


@dataclass(frozen=True)
class Digit:
    """A single digit key, '0'..'9'."""

    digit: str

    def __post_init__(self) -> None:
        if len(self.digit) != 1 or self.digit not in "0123456789":
            raise ValueError(f"not a digit key: {self.digit!r}")


@dataclass(frozen=True)
class Decimal:
    """The decimal point key."""


@dataclass(frozen=True)
class OperatorKey:
    """One of the five binary operator keys."""

    operator: Operator


@dataclass(frozen=True)
class Equals:
    """The equals key."""


@dataclass(frozen=True)
class Clear:
    """All-clear (Ac)."""


@dataclass(frozen=True)
class Backspace:
    """Delete the last typed character."""


@dataclass(frozen=True)
class Noop:
    """A key with no numeric effect (e, μ, sin, deg, unknown labels)."""

    label: str = ""


Event = Union[Digit, Decimal, OperatorKey, Equals, Clear, Backspace, Noop]


@dataclass(frozen=True)
class EngineState:
    """Everything the calculator knows between two key presses.

    `first_operand` and `pending_operator` are set and cleared together.
    While `has_error` is set, `result_text` holds the diagnostic and only
    Clear produces a different state.
    """

    display_text: str = "0"
    result_text: str = ""
    first_operand: Optional[float] = None
    pending_operator: Optional[Operator] = None
    awaiting_second_operand: bool = False
    has_error: bool = False

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "display_text": self.display_text,
            "result_text": self.result_text,
            "first_operand": self.first_operand,
            "pending_operator": self.pending_operator.value if self.pending_operator else None,
            "awaiting_second_operand": self.awaiting_second_operand,
            "has_error": self.has_error,
        }

    @classmethod
    def from_dict(cls, d: dict) -> EngineState:
        """Deserialize from a dict produced by to_dict().

        Raises:
            ValueError: if only one of first_operand / pending_operator is
                set, or the operator symbol is unknown.
        """
        op = d.get("pending_operator")
        first = d.get("first_operand")
        if (first is None) != (op is None):
            raise ValueError("first_operand and pending_operator must be set together")
        return cls(
            display_text=d.get("display_text", "0") or "0",
            result_text=d.get("result_text", ""),
            first_operand=float(first) if first is not None else None,
            pending_operator=Operator(op) if op is not None else None,
            awaiting_second_operand=d.get("awaiting_second_operand", False),
            has_error=d.get("has_error", False),
        )
