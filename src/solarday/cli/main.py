"""Command-line entry point: print sunrise and sunset for ISO 6709 locations."""

from datetime import datetime, timedelta, timezone
import logging
import sys

import click
import yaml

from ..core.daylight import Daylight
from ..core.timebase import Timebase
from ..io.jsonl import jsonl_line
from ..io.report import report_row, resolve_tz, tsv_line
from ..model.location import LocationError, parse_location
from ..model.settings import LOG_LEVELS, SuntimeConfig, load_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def _parse_start_time(value):
    if value is None:
        return datetime.now(timezone.utc)
    start = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    return start


@click.command(context_settings={"ignore_unknown_options": True})
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML configuration file (time zone, output format, named places)",
)
@click.option(
    "--tz",
    "time_zone",
    help="Output time zone: UTC, an offset like -04:00, or an IANA name (default: local)",
)
@click.option(
    "--start-time",
    help="Evaluate relative to this instant (ISO format, default: current time)",
)
@click.option(
    "--days",
    default=1,
    type=click.IntRange(min=1),
    help="Number of consecutive days to print (default: 1)",
)
@click.option(
    "--format",
    "output",
    type=click.Choice(["tsv", "jsonl"]),
    help="Output format (default: tsv)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging threshold (default: WARNING)",
)
@click.argument("offset", type=int, required=False)
@click.argument("locations", nargs=-1)
@click.pass_context
def main(ctx, config, time_zone, start_time, days, output, log_level, offset, locations):
    """Print sunrise and sunset times for each location.

    OFFSET is the number of days to add to today. Each LOCATION is an
    ISO 6709 string (+DDMM+DDDMM or +DDMMSS+DDDMMSS) or a place name from
    the configuration file. One line per location:

        YYYY-MM-DD<TAB>sunrise<TAB>sunset

    Examples:
        # New York City, tomorrow
        suntime 1 +404246-0740022

        # Sydney, next week, in UTC
        suntime --tz UTC 7 -3352+15113
    """
    if offset is None or not locations:
        click.echo(f"usage: {ctx.command_path} <offset in days> <location...>", err=True)
        sys.exit(1)

    try:
        cfg = load_config(config) if config else SuntimeConfig()
    except (ValueError, yaml.YAMLError) as e:
        raise click.BadParameter(str(e), param_hint="--config")

    logging.basicConfig(level=(log_level or cfg.log_level).upper(), format=LOG_FORMAT)

    try:
        tz = resolve_tz(time_zone or cfg.time_zone)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--tz")

    try:
        start = _parse_start_time(start_time)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--start-time")

    output = output or cfg.output
    try:
        timebase = Timebase(start + timedelta(days=offset), days)
        end = timebase.end
    except OverflowError as e:
        raise click.BadParameter(f"{e} (offset {offset}, {days} day(s))", param_hint="OFFSET")
    logger.info("evaluating %s to %s", timebase.start.isoformat(), end.isoformat())

    for arg in locations:
        try:
            latitude, longitude = parse_location(cfg.places.get(arg, arg))
        except LocationError as e:
            logger.debug("%s", e)
            click.echo(f"error: {arg}: bad location coords", err=True)
            continue

        daylight = Daylight(latitude=latitude, longitude=longitude)
        for instant in timebase.instants():
            result = daylight.sunrise_sunset(instant)
            if result is None:
                click.echo(f"error: {arg}: sun today never rises or sets", err=True)
                continue
            row = report_row(arg, result, tz)
            click.echo(jsonl_line(row) if output == "jsonl" else tsv_line(row))


if __name__ == "__main__":
    main()
