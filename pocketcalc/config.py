"""Environment-driven settings for the pocketcalc front end.

The engine itself takes no configuration; these only affect how the CLI
reports and renders.

    POCKETCALC_TRACE   truthy → report every key step (1/true/yes/on)
    POCKETCALC_PROMPT  prompt shown by `repl` (default 'keys> ')
    NO_COLOR           set → plain, uncoloured console output
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from rich.console import Console

_TRUTHY = ("1", "true", "yes", "on")

DEFAULT_PROMPT = "keys> "


def _flag(env: Mapping[str, str], key: str) -> bool:
    return env.get(key, "").strip().lower() in _TRUTHY


@dataclass
class Settings:
    """Front-end settings resolved from the environment."""

    trace: bool = False
    prompt: str = DEFAULT_PROMPT
    no_color: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Read settings from `env` (defaults to os.environ)."""
        env = os.environ if env is None else env
        return cls(
            trace=_flag(env, "POCKETCALC_TRACE"),
            prompt=env.get("POCKETCALC_PROMPT", DEFAULT_PROMPT),
            # NO_COLOR: any non-empty value disables colour
            no_color=bool(env.get("NO_COLOR")),
        )

    def console(self, stderr: bool = False) -> Console:
        """Build a Rich console honouring the colour setting."""
        return Console(stderr=stderr, no_color=self.no_color)
