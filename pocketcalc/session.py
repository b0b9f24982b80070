"""Calculator session — the front-end owner of an EngineState.

Data flow per key press:
1. Resolve the label to an event (keypad)
2. apply(state, event) → new state (engine)
3. Record the step in the in-memory history
4. Optionally report the step on the console (trace)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape

from pocketcalc.display import input_line, result_line
from pocketcalc.engine import apply
from pocketcalc.keypad import event_for_label
from pocketcalc.models import Clear, EngineState, Event


@dataclass(frozen=True)
class Step:
    """One key press and the state it produced."""

    label: str
    event: Event
    state: EngineState
    previous: Optional[EngineState] = None

    @property
    def changed(self) -> bool:
        """False when the engine ignored the key."""
        return self.previous is None or self.state is not self.previous


class CalculatorSession:
    """Holds the calculator state for the life of one session.

    Keys go in by label; the engine is the only thing that decides how the
    state changes. Nothing is persisted.
    """

    def __init__(self, console: Optional[Console] = None, trace: bool = False) -> None:
        self._state = EngineState()
        self._history: list[Step] = []
        self.console = console
        self.trace = trace

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def history(self) -> list[Step]:
        return list(self._history)

    @property
    def input_line(self) -> str:
        return input_line(self._state)

    @property
    def result_line(self) -> str:
        return result_line(self._state)

    @property
    def has_error(self) -> bool:
        return self._state.has_error

    def dispatch(self, label: str, event: Event) -> EngineState:
        """Apply an already-resolved event and record it under `label`."""
        previous = self._state
        self._state = apply(previous, event)
        step = Step(label=label, event=event, state=self._state, previous=previous)
        self._history.append(step)
        if self.trace and self.console is not None:
            self._report(step)
        return self._state

    def press(self, label: str) -> EngineState:
        """Press one key by its label."""
        return self.dispatch(label, event_for_label(label))

    def press_all(self, labels: Iterable[str]) -> EngineState:
        for label in labels:
            self.press(label)
        return self._state

    def clear(self) -> EngineState:
        return self.dispatch("Ac", Clear())

    def _report(self, step: Step) -> None:
        s = step.state
        label = escape(f"{step.label:>4}")
        if not step.changed:
            self.console.print(f"  [dim]{label}  ignored[/dim]")
            return
        op = s.pending_operator.value if s.pending_operator else "-"
        line = escape(
            f"  {step.label:>4}  display={s.display_text!r} result={s.result_text!r} "
            f"op={op} awaiting={s.awaiting_second_operand}"
        )
        if s.has_error:
            self.console.print(f"[red]{line}[/red]")
        else:
            self.console.print(line)
