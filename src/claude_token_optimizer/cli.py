"""CLI app definition: a single interactive scaffolding command."""

import os
from typing import Annotated

import typer

from claude_token_optimizer.scaffold import run_init
from claude_token_optimizer.utils import console
from claude_token_optimizer.version import get_version


def _version_callback(value: bool):
    if value:
        console.print(get_version())
        raise typer.Exit()


def _ask(label: str) -> str:
    """Prompt for a free-text answer. An empty answer is accepted."""
    return typer.prompt(label, default="", show_default=False)


def _confirm(label: str) -> bool:
    response = typer.prompt(label, default="", show_default=False)
    return response.strip().lower().startswith("y")


app = typer.Typer(
    help="Set up token-optimized Claude documentation in the current project.",
    add_completion=False,
)


@app.command()
def init(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit.", callback=_version_callback, is_eager=True),
    ] = False,
) -> None:
    """Scaffold CLAUDE.md, .claudeignore, .claude/ and docs/ into the current directory."""
    try:
        exit_code = run_init(os.getcwd(), ask=_ask, confirm=_confirm)
    except OSError as exc:
        console.print(f"ERROR: {exc}", style="bold red", markup=False)
        console.print("The project may be partially scaffolded. Fix the problem and run again.", style="yellow")
        raise typer.Exit(1)
    if exit_code != 0:
        raise typer.Exit(exit_code)
