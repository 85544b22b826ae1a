"""
Interactive Prompts
===================
The session asks its questions through the ``Prompter`` protocol so the
flow can be driven by a terminal or by a scripted answer source.

``ClickPrompter`` is the terminal implementation. Validation (ranges,
menu bounds) happens here, before answers reach the core.
"""

from typing import Protocol, Sequence, TypeVar

import click

T = TypeVar("T")


class Prompter(Protocol):
    """Source of validated answers for the interactive session."""

    def confirm(self, message: str, default: bool = False) -> bool:
        ...

    def text(self, message: str, default: str = "") -> str:
        ...

    def choose(self, message: str, options: Sequence[T]) -> T:
        ...

    def integer(self, message: str, default: int, minimum: int, maximum: int) -> int:
        ...


class ClickPrompter:
    """Prompter that reads answers from the terminal using click."""

    def confirm(self, message: str, default: bool = False) -> bool:
        return click.confirm(message, default=default)

    def text(self, message: str, default: str = "") -> str:
        return click.prompt(message, default=default, type=str)

    def choose(self, message: str, options: Sequence[T]) -> T:
        """
        Show a numbered menu and return the selected option.

        Enum options are listed by their value, anything else by ``str()``.
        """
        click.echo(message)
        for index, option in enumerate(options, start=1):
            label = getattr(option, "value", option)
            click.echo(f"  {index}) {label}")

        selected = click.prompt(
            "Choice",
            type=click.IntRange(1, len(options)),
            default=1
        )
        return options[selected - 1]

    def integer(self, message: str, default: int, minimum: int, maximum: int) -> int:
        return click.prompt(
            message,
            default=default,
            type=click.IntRange(minimum, maximum)
        )
