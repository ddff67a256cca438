"""
prompts.py

Responsibility: Ask the user questions in a terminal.

The resolver only depends on the `Prompter` protocol, so the terminal
implementation can be swapped for a scripted one in tests.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

import readchar
from rich.console import Console
from rich.live import Live
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from create_vite.catalog import ColorTag
from create_vite.display import console as default_console
from create_vite.display import styled


class PromptCancelled(Exception):
    pass


@dataclass(frozen=True)
class Choice:
    value: str
    label: str
    color: ColorTag | None = None


class Prompter(Protocol):
    def text(self, message: str, *, default: str) -> str: ...

    def select(self, message: str, choices: Sequence[Choice], *, default_index: int = 0) -> Choice: ...


_UP_KEYS = (readchar.key.UP, readchar.key.CTRL_P)
_DOWN_KEYS = (readchar.key.DOWN, readchar.key.CTRL_N)
_ENTER_KEYS = (readchar.key.ENTER, readchar.key.CR, readchar.key.LF)
_CANCEL_KEYS = (readchar.key.ESC, readchar.key.CTRL_C, readchar.key.CTRL_D)

if sys.platform == "win32":
    _READ_ERRORS: tuple[type[BaseException], ...] = (KeyboardInterrupt, EOFError, OSError)
else:
    import termios

    _READ_ERRORS = (KeyboardInterrupt, EOFError, OSError, termios.error)


class TerminalPrompter:
    """Interactive prompter: `rich.prompt` for text, arrow keys for choices."""

    def __init__(self, console: Console | None = None, *, interactive: bool | None = None) -> None:
        self.console = console or default_console
        self._interactive = interactive

    def _is_interactive(self) -> bool:
        if self._interactive is not None:
            return self._interactive
        return sys.stdin is not None and sys.stdin.isatty()

    def text(self, message: str, *, default: str) -> str:
        try:
            answer = Prompt.ask(message, default=default, console=self.console)
        except (KeyboardInterrupt, EOFError) as e:
            raise PromptCancelled(message) from e
        return answer if answer is not None else default

    def select(self, message: str, choices: Sequence[Choice], *, default_index: int = 0) -> Choice:
        if not choices:
            raise ValueError("select() needs at least one choice")
        index = default_index if 0 <= default_index < len(choices) else 0
        # arrow-key selection needs a real terminal on stdin
        if not self._is_interactive():
            raise PromptCancelled(message)

        def panel() -> Table:
            table = Table.grid(padding=(0, 1))
            table.add_column(width=2)
            table.add_column()
            table.add_row("?", Text(message, style="bold"))
            for i, choice in enumerate(choices):
                label = styled(choice.label, choice.color)
                if i == index:
                    label.stylize("underline")
                table.add_row("❯" if i == index else " ", label)
            table.add_row("", Text("Use ↑/↓ to navigate, Enter to select, Esc to cancel", style="dim"))
            return table

        with Live(panel(), console=self.console, transient=True, auto_refresh=False) as live:
            while True:
                try:
                    key = readchar.readkey()
                except _READ_ERRORS as e:
                    raise PromptCancelled(message) from e

                if key in _UP_KEYS:
                    index = (index - 1) % len(choices)
                elif key in _DOWN_KEYS:
                    index = (index + 1) % len(choices)
                elif key in _ENTER_KEYS:
                    break
                elif key in _CANCEL_KEYS:
                    raise PromptCancelled(message)
                live.update(panel(), refresh=True)

        picked = choices[index]
        summary = Text.assemble(("✔ ", "green"), (message, "bold"), " › ", styled(picked.label, picked.color))
        self.console.print(summary)
        return picked
