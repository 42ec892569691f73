"""Typer CLI application for bsv-app."""

from __future__ import annotations

from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Exit, Option, Typer

import bsv_app
from bsv_app.cli._errors import ScaffoldError, UserCancelled
from bsv_app.cli._materializer import materialize
from bsv_app.cli._preflight import check_environment
from bsv_app.cli._process import PACKAGE_MANAGER
from bsv_app.cli._prompts import gather_request
from bsv_app.cli._types import RunOptions

app = Typer(
    add_completion=False,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
_console = Console()


def _report(error: ScaffoldError) -> None:
    if isinstance(error, UserCancelled):
        _console.print(f"\n[yellow]🚪 {escape(str(error))}[/]")
    else:
        _console.print(f"[bold red]❌ Error:[/] {escape(str(error))}")


@app.command()
def create(
    skip_install: Annotated[
        bool, Option("--skip-install", "-s", help="Skip npm install")
    ] = False,
    git_init: Annotated[
        bool, Option("--git-init", "-g", help="Initialize a new git repository")
    ] = False,
    yes: Annotated[
        bool, Option("--yes", "-y", help="Use default options without prompting")
    ] = False,
) -> None:
    """Start building your BSV-powered app from a project template."""
    options = RunOptions(skip_install=skip_install, git_init=git_init, non_interactive=yes)

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  bsv-app v{bsv_app.__version__}")
    _console.print("[bold green]Start building your BSV-powered app with ease! 🚀[/]")
    _console.print("[dim]│[/]")

    try:
        check_environment()
        request = gather_request(options)
        materialize(request, options)
    except KeyboardInterrupt:
        _console.print("\n🚪 Exiting... Goodbye!")
        raise Exit(code=0) from None
    except ScaffoldError as exc:
        _report(exc)
        raise Exit(code=exc.exit_code) from None

    _console.print("[dim]│[/]")
    _console.print("[bold green]✅ All done! Start coding with:[/]")
    _console.print(f"[cyan]cd {escape(request.project_name)}[/]")
    _console.print(f"[cyan]{PACKAGE_MANAGER} start[/]")
    _console.print()
