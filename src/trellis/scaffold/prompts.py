"""Interactive prompt backends.

The option resolver asks its questions through a Prompter. ConsolePrompter
renders them with rich as numbered choices, free text and yes/no
questions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from rich.console import Console
from rich.prompt import Confirm, Prompt

# Returns an error message for an invalid answer, or None when valid.
TextValidator = Callable[[str], "str | None"]


@dataclass(frozen=True)
class Choice:
    """One option in a selection prompt."""

    value: str
    label: str


class Prompter(ABC):
    """Abstract source of answers to the resolver's questions."""

    @abstractmethod
    def select(
        self,
        name: str,
        message: str,
        choices: list[Choice],
        default: str | None = None,
    ) -> str:
        """Ask the user to pick one of *choices*; return its value."""
        ...

    @abstractmethod
    def text(
        self,
        name: str,
        message: str,
        default: str = "",
        validate: TextValidator | None = None,
    ) -> str:
        """Ask for free text, re-asking until *validate* accepts it."""
        ...

    @abstractmethod
    def confirm(self, name: str, message: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        ...


class ConsolePrompter(Prompter):
    """Asks questions on the terminal with rich prompts."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def select(
        self,
        name: str,
        message: str,
        choices: list[Choice],
        default: str | None = None,
    ) -> str:
        self.console.print(f"[bold]{message}[/bold]")
        for index, choice in enumerate(choices, start=1):
            self.console.print(f"  [cyan]{index}[/cyan]. {choice.label}")

        default_index = 1
        for index, choice in enumerate(choices, start=1):
            if choice.value == default:
                default_index = index
        answer = Prompt.ask(
            "Select",
            console=self.console,
            choices=[str(i) for i in range(1, len(choices) + 1)],
            default=str(default_index),
        )
        return choices[int(answer) - 1].value

    def text(
        self,
        name: str,
        message: str,
        default: str = "",
        validate: TextValidator | None = None,
    ) -> str:
        while True:
            answer = Prompt.ask(message, console=self.console, default=default).strip()
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.console.print(f"[red]{error}[/red]")

    def confirm(self, name: str, message: str, default: bool = False) -> bool:
        return Confirm.ask(message, console=self.console, default=default)
