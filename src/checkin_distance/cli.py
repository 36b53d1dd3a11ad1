"""CLI entrypoint for checkin-distance."""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Iterator

import click
from rich.console import Console
from rich.table import Table

from checkin_distance.accumulator import iter_trip
from checkin_distance.config import DEFAULT_CONFIG, LOG_LEVEL
from checkin_distance.geo import DistanceUnit, convert_miles, great_circle_distance
from checkin_distance.models import CheckIn, DailySummary
from checkin_distance.parsers import CheckInLogParser, CheckInParseError
from checkin_distance.report import format_moving_time, iter_report_lines, round_tenth

logger = logging.getLogger(__name__)

console = Console()

_SPEED_LABELS = {
    DistanceUnit.MILES: "mph",
    DistanceUnit.KILOMETERS: "km/h",
    DistanceUnit.NAUTICAL_MILES: "kn",
}

_unit_option = click.option(
    "--unit", default="M", type=click.Choice(["M", "K", "N"], case_sensitive=False),
    help="M = statute miles, K = kilometers, N = nautical miles.",
)


def _read_checkins(lines: Iterable[str]) -> Iterator[CheckIn]:
    parser = CheckInLogParser()
    for checkin in parser.iter_checkins(lines):
        errors = parser.validate(checkin)
        if errors:
            logger.warning("line %d: %s", checkin.line_number, "; ".join(errors))
        yield checkin


@click.group()
def cli():
    """Check-in log travel metrics — distances, daily totals and speeds."""
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def report(path: str):
    """Annotate every check-in in PATH with leg and cumulative miles.

    A daily summary line is printed whenever the calendar day changes and
    once more at the end of the log.
    """
    with open(path, encoding="utf-8") as handle:
        try:
            for line in iter_report_lines(iter_trip(_read_checkins(handle), DEFAULT_CONFIG)):
                click.echo(line)
        except CheckInParseError as exc:
            raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@_unit_option
def days(path: str, unit: str):
    """Show the per-day distance, moving time and speed for PATH."""
    dist_unit = DistanceUnit.parse(unit)

    with open(path, encoding="utf-8") as handle:
        try:
            summaries: list[DailySummary] = []
            for item in iter_trip(_read_checkins(handle), DEFAULT_CONFIG):
                if isinstance(item, DailySummary):
                    summaries.append(item)
                elif item.closed_day is not None:
                    summaries.append(item.closed_day)
        except CheckInParseError as exc:
            raise click.ClickException(str(exc)) from exc

    table = Table(title=f"Daily totals ({path})")
    table.add_column("Day")
    table.add_column(f"Distance ({dist_unit.label})", justify="right")
    table.add_column("Moving time", justify="right")
    table.add_column(f"Speed ({_SPEED_LABELS[dist_unit]})", justify="right")

    for s in summaries:
        table.add_row(
            f"{s.day:%a %m/%d/%Y}",
            f"{round_tenth(convert_miles(s.distance, dist_unit))}",
            format_moving_time(s.moving_time_seconds),
            f"{round_tenth(convert_miles(s.average_speed, dist_unit))}",
        )

    console.print(table)


@cli.command()
@click.argument("lat1", type=float)
@click.argument("lon1", type=float)
@click.argument("lat2", type=float)
@click.argument("lon2", type=float)
@_unit_option
def distance(lat1: float, lon1: float, lat2: float, lon2: float, unit: str):
    """Great-circle distance between two points.

    Put "--" before the coordinates when any of them is negative.
    """
    dist_unit = DistanceUnit.parse(unit)
    value = great_circle_distance(lat1, lon1, lat2, lon2, dist_unit)
    click.echo(f"{value} {dist_unit.label}")
