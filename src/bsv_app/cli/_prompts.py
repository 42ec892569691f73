"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TypeVar

from rich.console import Console
from rich.markup import escape
from simple_term_menu import TerminalMenu

from bsv_app.cli._errors import PromptFailure, UserCancelled
from bsv_app.cli._types import (
    DEFAULT_PROJECT_NAME,
    DEFAULT_TEMPLATE,
    RunOptions,
    ScaffoldRequest,
    template_labels,
)

_console = Console()

T = TypeVar("T")

Validator = Callable[[str], str | None]


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _select(question: str, options: list[T], labels: list[str]) -> T:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    try:
        menu = TerminalMenu(
            labels,
            menu_cursor="│  ● ",
            menu_cursor_style=("fg_cyan", "bold"),
            menu_highlight_style=("fg_cyan",),
        )
        raw_index = menu.show()
    except (OSError, NotImplementedError) as exc:
        raise PromptFailure("Prompt could not be rendered in this environment.") from exc

    if raw_index is None:
        raise UserCancelled("Goodbye!")

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    for i, lbl in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {escape(lbl)}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{escape(lbl)}[/]")
    _print_bar()

    return selected


def _text(question: str, default: str = "", validate: Validator | None = None) -> str:
    """Display a clack-style free-text prompt.

    An empty answer falls back to *default*. When *validate* returns a message
    the prompt is shown again with that message underneath.
    """
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    suffix = f" ({default}) " if default else " "
    shown = 2
    while True:
        _console.print("[dim]│[/]  ", end="")
        try:
            answer = input(suffix).strip()
        except EOFError as exc:
            raise UserCancelled("Goodbye!") from exc
        shown += 1

        result = answer or default
        error = validate(result) if validate is not None else None
        if error is None:
            break
        _console.print(f"[dim]│[/]  [red]{escape(error)}[/]")
        shown += 1

    # Overwrite the ◆ question + │ bar + every answer and error line
    _clear_lines(shown)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {escape(result) if result else '[dim]-[/]'}")
    _print_bar()

    return result


def _not_empty(value: str) -> str | None:
    return None if value else "Project name cannot be empty."


def prompt_template() -> str:
    """Prompt user to choose a project template. Returns the template label."""
    labels = template_labels()
    return _select("Which template would you like to use?", labels, labels)


def prompt_project_name() -> str:
    """Prompt user for the project directory name."""
    return _text("Enter a name for your project:", DEFAULT_PROJECT_NAME, _not_empty)


def prompt_author() -> str:
    """Prompt user for an optional author name."""
    return _text("Enter the author name:")


def gather_request(options: RunOptions) -> ScaffoldRequest:
    """Collect the scaffold request, prompting unless running non-interactively."""
    if options.non_interactive:
        return ScaffoldRequest(DEFAULT_TEMPLATE.label, DEFAULT_PROJECT_NAME, "")

    template = prompt_template()
    project_name = prompt_project_name()
    author = prompt_author()
    return ScaffoldRequest(template, project_name, author)
