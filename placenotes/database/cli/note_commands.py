"""
Note Commands
-------------

Create, edit and delete notes.

Commands:
    - add-note: Attach a note to a stored place or to a new location
    - edit-note: Change title, description or date
    - delete-note: Delete one or more notes (orphaned places are removed)
"""
import sys
import click
from datetime import datetime

from placenotes.core.logging_manager import handle_cli_error
from placenotes.core.exceptions import DatabaseError, ValidationError
from placenotes.geo.models import ExternalLocation
from . import get_data
from .browse import format_note


@click.command("add-note")
@click.argument("title")
@click.option("-d", "--description", default="", help="Note body")
@click.option("--date", "when", help="Date, YYYY-MM-DD or YYYY-MM-DDTHH:MM[:SS] (default: now)")
@click.option("--place-id", type=int, help="Attach to this stored place")
@click.option("--name", help="Name of a new location")
@click.option("--lat", type=float, help="Latitude of a new location")
@click.option("--lon", type=float, help="Longitude of a new location")
@click.option(
    "-c", "--category", "categories", multiple=True, help="Category of a new location (repeatable)"
)
@click.pass_context
def add_note(ctx, title, description, when, place_id, name, lat, lon, categories):
    """Attach a note to a stored place or to a new location."""
    if place_id is None and (name is None or lat is None or lon is None):
        raise click.UsageError("Give either --place-id or all of --name, --lat and --lon")

    try:
        data = get_data(ctx)
        date = when if when is not None else datetime.now()

        if place_id is not None:
            place = data.get_place(place_id)
            if place is None:
                click.echo(f"❌ No place with id {place_id}", err=True)
                sys.exit(1)
            note = data.create_note_for_place(title, description, date, place)
        else:
            location = ExternalLocation(
                name=name, categories=categories, latitude=lat, longitude=lon
            )
            note = data.create_note_for_location(title, description, date, location)

        if note is None:
            click.echo("❌ Note could not be stored", err=True)
            sys.exit(1)

        click.echo("✅ Note added:")
        click.echo(format_note(note, data.get_place(note.place_id)))

    except (DatabaseError, ValidationError) as e:
        handle_cli_error(ctx, e, "add_note", {"title": title})


@click.command("edit-note")
@click.argument("note_id", type=int)
@click.option("-t", "--title", help="New title")
@click.option("-d", "--description", help="New description")
@click.option("--date", "when", help="New date")
@click.pass_context
def edit_note(ctx, note_id, title, description, when):
    """Change the title, description or date of a note."""
    if title is None and description is None and when is None:
        raise click.UsageError("Nothing to change: give --title, --description or --date")

    try:
        data = get_data(ctx)

        if data.get_note(note_id) is None:
            click.echo(f"❌ No note with id {note_id}", err=True)
            sys.exit(1)

        if not data.edit_note(note_id, title=title, description=description, date=when):
            click.echo(f"❌ Note {note_id} could not be updated", err=True)
            sys.exit(1)

        note = data.get_note(note_id)
        click.echo("✅ Note updated:")
        click.echo(format_note(note, data.get_place(note.place_id)))

    except (DatabaseError, ValidationError) as e:
        handle_cli_error(ctx, e, "edit_note", {"note_id": note_id})


@click.command("delete-note")
@click.argument("note_ids", type=int, nargs=-1, required=True)
@click.pass_context
def delete_note(ctx, note_ids):
    """Delete notes by id. Places left without notes are removed unless favourite."""
    try:
        data = get_data(ctx)

        missing = [i for i in note_ids if data.get_note(i) is None]
        for note_id in missing:
            click.echo(f"⚠️  No note with id {note_id}", err=True)

        places_before = len(data.places)
        if len(note_ids) == 1:
            ok = data.delete_note(note_ids[0])
        else:
            ok = data.delete_notes(note_ids)

        if not ok:
            click.echo("❌ Delete failed", err=True)
            sys.exit(1)

        click.echo(f"🗑️  Deleted {len(note_ids) - len(missing)} note(s)")
        removed = places_before - len(data.places)
        if removed:
            click.echo(f"🧹 Removed {removed} unused place(s)")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "delete_note", {"note_ids": list(note_ids)})
