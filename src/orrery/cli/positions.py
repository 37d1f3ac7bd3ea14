"""CLI command for computing body positions."""

import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click
from sqlalchemy.exc import SQLAlchemyError

from ..catalog.distance import DistanceParser
from ..catalog.source import load_catalog
from ..catalog.storage import PlanetStore
from ..config import EngineConfig
from ..engine.positions import PositionEngine
from ..errors import OrreryError, describe
from ..logging import get_logger
from ..space_time.pythonic_datetimes import NaiveDateTimeError
from .common import parse_date_input

logger = get_logger(__name__)


def build_config(
    data: Optional[str], catalog: Optional[str], kernel: Optional[str]
) -> EngineConfig:
    """Environment configuration, overridden by whatever flags were given."""
    config = EngineConfig.from_env()
    overrides = {}
    if data is not None:
        overrides["data_dir"] = Path(data)
    if catalog is not None:
        overrides["catalog_path"] = Path(catalog)
    if kernel is not None:
        overrides["kernel_path"] = Path(kernel)
    return replace(config, **overrides) if overrides else config


def open_store(
    config: EngineConfig, parser: Optional[DistanceParser] = None
) -> Optional[PlanetStore]:
    """The planet store in the data directory, if one has been seeded there."""
    db_path = config.data_dir / "planets.db"
    if not db_path.is_file():
        return None
    try:
        return PlanetStore(config.data_dir, parser or DistanceParser.from_config(config))
    except SQLAlchemyError as e:
        logger.warning(f"Cannot open planet store {db_path}, using catalog file: {e}")
        return None


@click.command()
@click.option(
    "--date",
    "-d",
    default="now",
    help="Instant to compute positions for. ISO format, Julian date or 'now'.",
)
@click.option(
    "--catalog",
    type=click.Path(dir_okay=False),
    help="JSON catalog to read when the planet store is empty. Defaults to the bundled catalog.",
)
@click.option(
    "--data",
    type=click.Path(file_okay=False),
    help="Data directory holding planets.db and the ephemeris kernel.",
)
@click.option(
    "--kernel",
    type=click.Path(dir_okay=False),
    help="JPL kernel for precise positions. Defaults to <data>/de421.bsp.",
)
@click.option(
    "--no-precise",
    is_flag=True,
    help="Skip the precise ephemeris and use fallback orbits only.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on catalog records without a key or name instead of skipping them.",
)
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation.")
def positions(
    date: str,
    catalog: Optional[str],
    data: Optional[str],
    kernel: Optional[str],
    no_precise: bool,
    strict: bool,
    indent: int,
) -> None:
    """Print current positions of every body in the catalog as JSON.

    Examples:

    Positions right now:
       orrery positions

    At a given instant, fallback orbits only:
       orrery positions --date 2025-03-19T20:00:00Z --no-precise
    """
    try:
        instant = parse_date_input(date)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--date")

    try:
        config = build_config(data, catalog, kernel)
        store = open_store(config)
        records = load_catalog(store=store, path=config.catalog_path)
        engine = PositionEngine.from_config(config, use_precise=not no_precise)
        logger.debug(f"Precision source: {engine.precision!r}")
        report = engine.query(records, at=instant, skip_invalid=not strict)
    except (OrreryError, NaiveDateTimeError, ValueError) as e:
        click.echo(f"Error: {describe(e)}", err=True)
        sys.exit(1)

    click.echo(json.dumps(report.to_dict(), indent=indent))
