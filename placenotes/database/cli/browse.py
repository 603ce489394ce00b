"""
Browse Commands
---------------

Listing and search over stored Places and Notes.

Commands:
    - places: List stored places
    - notes: List notes as a past/upcoming timeline
    - search: Text search over notes or places
"""
import click
from typing import Optional

from placenotes.core.logging_manager import handle_cli_error
from placenotes.core.exceptions import DatabaseError
from placenotes.dataclasses import Note, Place
from placenotes.search import NoteResults, SearchScope, favourite_places
from placenotes.search import search as run_search
from placenotes.search import timeline
from . import get_data

DATE_DISPLAY = "%Y-%m-%d %H:%M"


def format_place(place: Place, note_count: Optional[int] = None) -> str:
    line = f"  • [{place.id}] {place}"
    if note_count is not None:
        line += f" - {note_count} note{'s' if note_count != 1 else ''}"
    if place.categories:
        line += f"\n      🏷️  {', '.join(place.categories)}"
    return line


def format_note(note: Note, place: Optional[Place] = None) -> str:
    where = place.name if place else f"place {note.place_id}"
    line = f"  • [{note.id}] {note.date.strftime(DATE_DISPLAY)}  {note.title}  @ {where}"
    if note.description:
        line += f"\n      {note.description}"
    return line


@click.command()
@click.option("--favourites", is_flag=True, help="Only show favourite places")
@click.pass_context
def places(ctx, favourites):
    """List stored places."""
    try:
        data = get_data(ctx)

        shown = favourite_places(data.places) if favourites else list(data.places)
        if not shown:
            click.echo("📭 No places stored")
            return

        title = "Favourite places" if favourites else "Places"
        click.echo(f"\n📍 {title} ({len(shown)}):\n")
        for place in shown:
            click.echo(format_place(place, len(data.notes_for_place(place.id))))

    except DatabaseError as e:
        handle_cli_error(ctx, e, "places")


@click.command()
@click.option("--place-id", type=int, help="Only notes attached to this place")
@click.pass_context
def notes(ctx, place_id):
    """List notes, split into past and upcoming."""
    try:
        data = get_data(ctx)

        selected = data.notes_for_place(place_id) if place_id is not None else data.notes
        if not selected:
            click.echo("📭 No notes stored")
            return

        split = timeline(selected)
        click.echo(f"\n🕰️  Past ({len(split.past)}):\n")
        for note in split.past:
            click.echo(format_note(note, data.get_place(note.place_id)))
        click.echo(f"\n📅 Upcoming ({len(split.upcoming)}):\n")
        for note in split.upcoming:
            click.echo(format_note(note, data.get_place(note.place_id)))

    except DatabaseError as e:
        handle_cli_error(ctx, e, "notes")


@click.command()
@click.argument("query", default="")
@click.option(
    "--places", "in_places", is_flag=True, help="Search place names instead of notes"
)
@click.pass_context
def search(ctx, query, in_places):
    """Case-insensitive text search over notes (default) or places."""
    try:
        data = get_data(ctx)

        scope = SearchScope.PLACES if in_places else SearchScope.NOTES
        result = run_search(query, scope, data.notes, data.places)

        if not len(result):
            click.echo(f"🔍 No {scope.value} match '{query}'")
            return

        click.echo(f"\n🔍 {len(result)} {scope.value} matching '{query}':\n")
        if isinstance(result, NoteResults):
            for note in result.notes:
                click.echo(format_note(note, data.get_place(note.place_id)))
        else:
            for place in result.places:
                click.echo(format_place(place))

    except DatabaseError as e:
        handle_cli_error(ctx, e, "search")
