"""
Explore Commands
----------------

External place and city search around a map centre.

Commands:
    - explore: Fetch nearby places of one category and show them next to
      the stored places
    - cities: Look up cities by name

Both commands need a Geoapify API key, from the settings file or the
GEOAPIFY_API_KEY environment variable.
"""
import asyncio
import sys
import click

from placenotes.core.logging_manager import handle_cli_error
from placenotes.core.exceptions import ConfigError, DatabaseError, ValidationError
from placenotes.geo import Known, LocationCategory, MapExplorer
from . import get_data, get_settings


def _explorer(ctx) -> MapExplorer:
    settings = get_settings(ctx)
    if not settings.geoapify_api_key:
        click.echo("⚠️  No Geoapify API key configured; results will be empty", err=True)
    return MapExplorer(settings, logger=ctx.obj.get("logger"))


@click.command()
@click.argument(
    "category",
    type=click.Choice([c.value for c in LocationCategory]),
)
@click.option("--lat", type=float, help="Centre latitude (default: home)")
@click.option("--lon", type=float, help="Centre longitude (default: home)")
@click.option("--city", help="Centre on the first city matching this name")
@click.pass_context
def explore(ctx, category, lat, lon, city):
    """Search nearby places of CATEGORY and list them with stored places."""
    try:
        explorer = _explorer(ctx)

        if city:
            matches = asyncio.run(explorer.search_cities(city))
            if not matches:
                click.echo(f"❌ No city matches '{city}'", err=True)
                sys.exit(1)
            explorer.move_to(matches[0].latitude, matches[0].longitude)
            click.echo(f"🏙️  Centred on {matches[0]}")
        elif lat is not None and lon is not None:
            explorer.move_to(lat, lon)

        click.echo(f"🔍 Searching {category} around {explorer.latitude}, {explorer.longitude}...")
        empty = asyncio.run(explorer.search(category))
        if empty:
            click.echo("📭 No locations found")

        data = get_data(ctx)
        points = explorer.annotations(data.places)

        click.echo(f"\n🗺️  {len(points)} map point(s):\n")
        for point in points:
            p_lat, p_lon = point.coordinates
            if isinstance(point, Known):
                marker = "♥" if point.place.is_favourite else "🔖"
                click.echo(f"  {marker} [{point.place.id}] {point.name} ({p_lat:.5f}, {p_lon:.5f})")
            else:
                click.echo(f"  ➕ {point.name} ({p_lat:.5f}, {p_lon:.5f})")

    except (ConfigError, DatabaseError, ValidationError) as e:
        handle_cli_error(ctx, e, "explore", {"category": category})


@click.command()
@click.argument("name")
@click.pass_context
def cities(ctx, name):
    """Look up cities whose name matches NAME."""
    try:
        explorer = _explorer(ctx)
        results = asyncio.run(explorer.search_cities(name))

        if not results:
            click.echo(f"📭 No city matches '{name}'")
            return

        click.echo(f"\n🏙️  {len(results)} cit{'y' if len(results) == 1 else 'ies'}:\n")
        for result in results:
            click.echo(f"  • {result} ({result.latitude:.5f}, {result.longitude:.5f})")

    except ConfigError as e:
        handle_cli_error(ctx, e, "cities", {"name": name})
