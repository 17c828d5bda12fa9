"""
Note Commands.

Thin presentation layer over NoteManager: parse arguments, call the
manager, print plain text. User text is printed with markup disabled so
brackets in a note never turn into Rich styles.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from nfa.cli.context import CliState
from nfa.core.config import get_app_config
from nfa.core.exceptions import ApplicationError, NoteNotFoundError
from nfa.core.logging import get_logger, log_with_source
from nfa.models.note import Note

console = Console(soft_wrap=True)
logger = get_logger(__name__)


def _echo(text: str) -> None:
    console.print(text, markup=False, highlight=False)


def _format_time(value: datetime) -> str:
    return f"{value.isoformat(sep=' ', timespec='seconds')} UTC"


def infer_title(content: str, length: int = 10, ellipsis: str = "...") -> str:
    """
    Derive a title from the first ``length`` characters of ``content``.

    ``ellipsis`` is appended only when content was cut.

    Examples:
        infer_title("short")                  -> "short"
        infer_title("This is a quick note")   -> "This is a ..."
    """
    title = content[:length]
    if len(content) > length:
        return f"{title}{ellipsis}"
    return title


@contextmanager
def handle_errors() -> Iterator[None]:
    """Print application errors; exit 1 for anything but a missing note."""
    try:
        yield
    except NoteNotFoundError as e:
        log_with_source(logger, "cli", "info", "Note not found", note_id=e.note_id)
        _echo("Note not found")
    except ApplicationError as e:
        log_with_source(logger, "cli", "error", "Command failed", code=e.code, error=e.message)
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)


def _state(ctx: typer.Context) -> CliState:
    return ctx.ensure_object(CliState)


def _print_created(note: Note) -> None:
    _echo(f"Created note with ID: {note.id}")


def quick(
    ctx: typer.Context,
    content: str = typer.Argument(..., help="Note content; the title is inferred from it"),
) -> None:
    """
    Create a quick note without specifying a title.

    The title is the first few characters of the content.

    Examples:
        nfa "This is a quick note"
    """
    if not content:
        _echo("Error: Content cannot be empty")
        return

    quick_note = get_app_config().application.quick_note
    title = infer_title(content, quick_note.title_length, quick_note.ellipsis)
    with handle_errors():
        _print_created(_state(ctx).manager.create_note(title, content))


def new(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", "-t", help="Note title"),
    content: str = typer.Option(..., "--content", "-c", help="Note content"),
) -> None:
    """
    Create a note with a title.

    Examples:
        nfa new -t "Meeting Notes" -c "Discuss project timeline"
    """
    with handle_errors():
        _print_created(_state(ctx).manager.create_note(title, content))


def list_notes(ctx: typer.Context) -> None:
    """
    List all notes from first to last update.

    Examples:
        nfa list
    """
    with handle_errors():
        notes = _state(ctx).manager.list_notes()
        if not notes:
            _echo("No notes found")
            return
        for note in notes:
            _echo(f"ID: {note.id}")
            _echo(f"Title: {note.title}")
            _echo(f"Content: {note.content}")
            _echo("---")


def show(
    ctx: typer.Context,
    note_id: str = typer.Argument(..., metavar="ID", help="Note ID"),
) -> None:
    """
    Show a specific note.

    Examples:
        nfa show 1f3a9c0e5b7d2468
    """
    with handle_errors():
        note = _state(ctx).manager.get_note(note_id)
        _echo(f"Title: {note.title}")
        _echo(f"Content: {note.content}")
        _echo(f"Created: {_format_time(note.created_at)}")
        _echo(f"Updated: {_format_time(note.updated_at)}")


def update(
    ctx: typer.Context,
    note_id: str = typer.Option(..., "--id", "-i", help="Note ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New content"),
) -> None:
    """
    Update a note. Omitted fields keep their current value.

    Examples:
        nfa update -i 1f3a9c0e5b7d2468 -t "New Title" -c "New Content"
    """
    with handle_errors():
        _state(ctx).manager.update_note(note_id, title=title, content=content)
        _echo("Note updated successfully")


def delete(
    ctx: typer.Context,
    note_id: str = typer.Argument(..., metavar="ID", help="Note ID"),
) -> None:
    """
    Delete a note.

    Examples:
        nfa delete 1f3a9c0e5b7d2468
    """
    with handle_errors():
        manager = _state(ctx).manager
        # delete_note succeeds for unknown ids, so check first to report it
        if not manager.exists(note_id):
            _echo("Note not found")
            return
        manager.delete_note(note_id)
        _echo("Note deleted successfully")
