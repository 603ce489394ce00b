#!/usr/bin/env python3
"""
PlaceNotes CLI
--------------

Command-line interface over the PlaceNotes data store.

This module provides the main CLI group and shared context setup
for all commands.

Command Structure:
    - Browse (places, notes, search)
    - Notes (add-note, edit-note, delete-note)
    - Maintenance (favourite, unfavourite, cleanup, reset)
    - Explore (explore, cities)

Usage:
    # Get general help
    placenotes --help

    # Get help for a specific command
    placenotes add-note --help
"""
import click
from pathlib import Path

from placenotes.core.config import Settings, load_settings
from placenotes.core.logging_manager import PlaceNotesLogger
from placenotes.core.paths import CONFIG_PATH, DB_PATH, LOG_DIR
from placenotes.database import DataStore, EntityStore


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    default=str(DB_PATH),
    help="Path to database file",
)
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Path to log directory",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(),
    default=str(CONFIG_PATH),
    help="Path to YAML settings file",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Show detailed errors and tracebacks",
)
@click.pass_context
def cli(ctx, db_path, log_dir, config_path, verbose):
    """PlaceNotes: dated notes attached to places"""
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = Path(db_path)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["config_path"] = Path(config_path)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = PlaceNotesLogger(Path(log_dir), component_name="cli")


def get_data(ctx) -> DataStore:
    """
    Get or create the data store from context.

    Raises:
        StorageOpenError: If the database could not be opened
    """
    if "data" not in ctx.obj:
        store = EntityStore(ctx.obj["db_path"], logger=ctx.obj["logger"])
        if store.failure is not None:
            raise store.failure
        ctx.obj["data"] = DataStore(store)
    return ctx.obj["data"]


def get_settings(ctx) -> Settings:
    """
    Get or load settings from context.

    Raises:
        ConfigError: If the settings file is malformed
    """
    if "settings" not in ctx.obj:
        ctx.obj["settings"] = load_settings(ctx.obj["config_path"])
    return ctx.obj["settings"]


# Import and register command modules
# These imports must come after CLI group definition
from .browse import notes, places, search  # noqa: E402
from .note_commands import add_note, delete_note, edit_note  # noqa: E402
from .maintenance import cleanup, favourite, reset, unfavourite  # noqa: E402
from .explore import cities, explore  # noqa: E402

# Browse
cli.add_command(places)
cli.add_command(notes)
cli.add_command(search)

# Notes
cli.add_command(add_note)
cli.add_command(edit_note)
cli.add_command(delete_note)

# Maintenance
cli.add_command(favourite)
cli.add_command(unfavourite)
cli.add_command(cleanup)
cli.add_command(reset)

# Explore
cli.add_command(explore)
cli.add_command(cities)


if __name__ == "__main__":
    cli(obj={})
