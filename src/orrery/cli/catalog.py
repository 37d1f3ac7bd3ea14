"""CLI commands for inspecting and seeding the planet catalog."""

import sys
from typing import Optional

import click
from sqlalchemy.exc import SQLAlchemyError

from ..catalog.distance import DistanceParser
from ..catalog.loader import load_catalog_file
from ..catalog.normalizer import normalize_catalog
from ..catalog.source import load_catalog
from ..catalog.storage import PlanetStore
from ..errors import OrreryError, describe
from .positions import build_config, open_store


@click.group()
def catalog() -> None:
    """Inspect or seed the planet catalog."""
    pass


@catalog.command()
@click.option("--catalog", "catalog_path", type=click.Path(dir_okay=False), help="JSON catalog file.")
@click.option("--data", type=click.Path(file_okay=False), help="Data directory holding planets.db.")
def show(catalog_path: Optional[str], data: Optional[str]) -> None:
    """List the normalized catalog, nearest body first."""
    config = build_config(data, catalog_path, None)
    parser = DistanceParser.from_config(config)
    try:
        store = open_store(config, parser)
        entries = normalize_catalog(
            load_catalog(store=store, path=config.catalog_path), skip_invalid=True
        )
    except OrreryError as e:
        click.echo(f"Error: {describe(e)}", err=True)
        sys.exit(1)

    rows = sorted(
        ((parser.parse(entry.distance, entry.key), entry) for entry in entries),
        key=lambda row: row[0],
    )
    for distance, entry in rows:
        period = (
            f"{entry.orbit_period_days:g} d" if entry.orbit_period_days is not None else "-"
        )
        click.echo(f"{entry.key:<10} {entry.name:<12} {distance:>10.1f} {period:>12}")


@catalog.command()
@click.option("--catalog", "catalog_path", type=click.Path(dir_okay=False), help="JSON catalog file to load.")
@click.option("--data", default="./data", show_default=True, type=click.Path(file_okay=False), help="Data directory for planets.db.")
def seed(catalog_path: Optional[str], data: str) -> None:
    """Replace the planet store's contents with a JSON catalog."""
    config = build_config(data, catalog_path, None)
    parser = DistanceParser.from_config(config)
    try:
        records = load_catalog_file(config.catalog_path)
        count = PlanetStore(config.data_dir, parser).replace_all(records)
    except OrreryError as e:
        click.echo(f"Error: {describe(e)}", err=True)
        sys.exit(1)
    except SQLAlchemyError as e:
        click.echo(f"Error: cannot write planet store: {e}", err=True)
        sys.exit(1)

    click.echo(f"Stored {count} planets in {config.data_dir / 'planets.db'}")
