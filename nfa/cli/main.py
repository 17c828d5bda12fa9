"""
CLI Entry Point.

Command-line note-taking application built with Typer.

Usage:
    nfa --help                                         # Show help
    nfa "This is a quick note"                         # Quick note, title inferred
    nfa new -t "Meeting Notes" -c "Discuss timeline"   # Note with title
    nfa list                                           # All notes, first to last
    nfa show <note-id>                                 # One note
    nfa update -i <note-id> -t "New Title"             # Partial update
    nfa delete <note-id>                               # Delete

Options:
    --verbose, -v     Enable verbose output (INFO level logging)
    --debug, -d       Enable debug mode (DEBUG level logging)
    --home PATH       Storage directory (default: NFA_HOME or ~/.nfa)
"""

from typing import Any, Optional

import click
import typer
from typer.core import TyperGroup

from nfa.cli.commands import notes
from nfa.cli.context import CliState
from nfa.core.logging import setup_logging


class QuickNoteGroup(TyperGroup):
    """
    Command group that treats an unknown first argument as quick-note content.

    `nfa "some text"` is parsed as `nfa quick "some text"`. Leading global
    options are skipped when looking for that first argument.
    """

    default_command = "quick"
    value_options = frozenset({"--home"})

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        index = 0
        while index < len(args) and args[index].startswith("-"):
            index += 2 if args[index] in self.value_options else 1
        if index < len(args) and args[index] not in self.commands:
            args.insert(index, self.default_command)
        return super().parse_args(ctx, args)


app = typer.Typer(
    name="nfa",
    cls=QuickNoteGroup,
    help="A simple note-taking application.",
    invoke_without_command=True,
    rich_markup_mode="rich",
)

app.command("quick")(notes.quick)
app.command("new")(notes.new)
app.command("list")(notes.list_notes)
app.command("show")(notes.show)
app.command("update")(notes.update)
app.command("delete")(notes.delete)


@app.callback()
def root(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    home: Optional[str] = typer.Option(
        None,
        "--home",
        help="Storage directory (default: NFA_HOME or ~/.nfa)",
    ),
) -> None:
    """
    A command-line note-taking application.

    Create, list, show, update, and delete notes stored locally.
    """
    level = "DEBUG" if debug else "INFO" if verbose else None
    with notes.handle_errors():
        setup_logging(level=level, home=home)

    state = CliState(home=home)
    ctx.obj = state
    ctx.call_on_close(state.close)

    if ctx.invoked_subcommand is None:
        typer.echo("No content provided. Use --help for usage information.")


def main(*args: Any, **kwargs: Any) -> Any:
    """Console script entry point."""
    return app(*args, **kwargs)


if __name__ == "__main__":
    main()
