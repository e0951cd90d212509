"""Interactive prompting for the recipe collection flow.

The flow only depends on the ``PromptService`` protocol.  ``RichPromptService``
implements it on top of ``rich.prompt`` with numbered menus rendered as Rich
tables, which keeps the tool usable in any terminal without a full-screen UI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table

from .utils import console as default_console


@dataclass(frozen=True)
class Choice:
    """One selectable answer.

    Attributes:
        value: Value returned when the choice is picked.
        label: Text shown to the user.
        checked: Pre-selected state for checkbox prompts.
        key: Single-letter shortcut for expand prompts.
    """

    value: Any
    label: str
    checked: bool = False
    key: str | None = None


class PromptService(Protocol):
    """Blocking question/answer interface used by ``ComponentFactory``."""

    def select(self, message: str, choices: Sequence[Choice]) -> Any:
        """Pick exactly one of *choices*; returns its value."""

    def text(self, message: str) -> str:
        """Free text input."""

    def confirm(self, message: str, default: bool = True) -> bool:
        """Yes/no question."""

    def checkbox(self, message: str, choices: Sequence[Choice]) -> list[Any]:
        """Pick any subset of *choices*; returns the selected values in order."""

    def expand(self, message: str, choices: Sequence[Choice]) -> Any:
        """Pick one of *choices* by its single-letter key; returns its value."""


class RichPromptService:
    """``PromptService`` backed by ``rich.prompt``."""

    NONE_ANSWER = "none"

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    # -- PromptService -------------------------------------------------------

    def select(self, message: str, choices: Sequence[Choice]) -> Any:
        self._print_menu(message, choices)
        numbers = [str(i) for i in range(1, len(choices) + 1)]
        answer = Prompt.ask(
            "Choice", choices=numbers, default="1", show_choices=False, console=self.console
        )
        return choices[int(answer) - 1].value

    def text(self, message: str) -> str:
        return Prompt.ask(escape(message), default="", show_default=False, console=self.console)

    def confirm(self, message: str, default: bool = True) -> bool:
        return Confirm.ask(escape(message), default=default, console=self.console)

    def checkbox(self, message: str, choices: Sequence[Choice]) -> list[Any]:
        self._print_menu(message, choices, checkbox=True)
        while True:
            answer = Prompt.ask(
                f"Numbers separated by commas, blank keeps the checked items, "
                f"'{self.NONE_ANSWER}' clears them",
                default="",
                show_default=False,
                console=self.console,
            )
            try:
                picked = parse_checkbox_answer(answer, len(choices))
            except ValueError as exc:
                self.console.print(f"[red]{escape(str(exc))}[/red]")
                continue
            if picked is None:
                return [c.value for c in choices if c.checked]
            return [choices[i].value for i in picked]

    def expand(self, message: str, choices: Sequence[Choice]) -> Any:
        by_key = {c.key: c for c in choices if c.key}
        while True:
            answer = Prompt.ask(
                f"{escape(message)} ({''.join(by_key)}h)",
                choices=[*by_key, "h"],
                show_choices=False,
                console=self.console,
            )
            if answer == "h":
                table = Table(show_header=False, box=None)
                for key, choice in by_key.items():
                    table.add_row(f"[bold]{key}[/bold]", escape(choice.label))
                table.add_row("[bold]h[/bold]", "Help, list all options")
                self.console.print(table)
                continue
            return by_key[answer].value

    # -- Internals -------------------------------------------------------------

    def _print_menu(self, message: str, choices: Sequence[Choice], *, checkbox: bool = False) -> None:
        table = Table(title=escape(message), title_justify="left", show_header=False, box=None)
        table.add_column("#", style="cyan", justify="right")
        if checkbox:
            table.add_column("", no_wrap=True)
        table.add_column("Option")
        for number, choice in enumerate(choices, start=1):
            row = [str(number)]
            if checkbox:
                row.append("[green]\\[x][/green]" if choice.checked else "\\[ ]")
            row.append(escape(choice.label))
            table.add_row(*row)
        self.console.print(table)


def parse_checkbox_answer(answer: str, count: int) -> list[int] | None:
    """Parse a comma-separated list of 1-based choice numbers.

    Returns zero-based indices in the order the choices are listed, ``None``
    for a blank answer (keep defaults) and ``[]`` for ``none``.

    Raises:
        ValueError: If a token is not a number between 1 and *count*.
    """
    answer = answer.strip().lower()
    if not answer:
        return None
    if answer == RichPromptService.NONE_ANSWER:
        return []
    picked: set[int] = set()
    for token in answer.replace(" ", ",").split(","):
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= count:
            raise ValueError(f"Invalid choice {token!r}: pick numbers between 1 and {count}")
        picked.add(int(token) - 1)
    return sorted(picked)
