"""
Maintenance Commands
--------------------

Favourite toggling, orphan cleanup and reset.

Commands:
    - favourite: Mark a place as favourite
    - unfavourite: Clear the favourite flag (removes the place if it has no notes)
    - cleanup: Remove places with no notes that are not favourites
    - reset: Delete every note and every non-favourite place
"""
import sys
import click

from placenotes.core.logging_manager import handle_cli_error
from placenotes.core.exceptions import DatabaseError
from . import get_data


def _set_favourite(ctx, place_id: int, flag: bool) -> None:
    data = get_data(ctx)

    place = data.get_place(place_id)
    if place is None:
        click.echo(f"❌ No place with id {place_id}", err=True)
        sys.exit(1)

    if not data.set_favourite(place_id, flag):
        click.echo(f"❌ Could not update place {place_id}", err=True)
        sys.exit(1)

    if flag:
        click.echo(f"♥ {place.name} is now a favourite")
    elif data.get_place(place_id) is None:
        click.echo(f"🧹 {place.name} removed (no notes left)")
    else:
        click.echo(f"✅ {place.name} is no longer a favourite")


@click.command()
@click.argument("place_id", type=int)
@click.pass_context
def favourite(ctx, place_id):
    """Mark a place as favourite."""
    try:
        _set_favourite(ctx, place_id, True)
    except DatabaseError as e:
        handle_cli_error(ctx, e, "favourite", {"place_id": place_id})


@click.command()
@click.argument("place_id", type=int)
@click.pass_context
def unfavourite(ctx, place_id):
    """Clear the favourite flag of a place."""
    try:
        _set_favourite(ctx, place_id, False)
    except DatabaseError as e:
        handle_cli_error(ctx, e, "unfavourite", {"place_id": place_id})


@click.command()
@click.pass_context
def cleanup(ctx):
    """Remove places with no notes that are not favourites."""
    try:
        data = get_data(ctx)
        click.echo("🧹 Cleaning up unused places...")

        before = len(data.places)
        if not data.clear_unused_places():
            click.echo("❌ Cleanup failed", err=True)
            sys.exit(1)

        removed = before - len(data.places)
        if removed:
            click.echo(f"✅ Removed {removed} unused place(s)")
        else:
            click.echo("✅ No unused places found")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "cleanup")


@click.command()
@click.confirmation_option(
    prompt="⚠️  This will DELETE every note and every non-favourite place! Are you sure?"
)
@click.pass_context
def reset(ctx):
    """Delete all notes and all places except favourites."""
    try:
        data = get_data(ctx)
        click.echo("🗑️  Resetting...")

        if not data.complete_reset():
            click.echo("❌ Reset failed", err=True)
            sys.exit(1)

        click.echo(f"✅ Reset complete: {len(data.places)} favourite place(s) kept")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "reset")
