"""CLI command producing the solar elevation curve for one day."""

from datetime import date
import logging

import click

from ..core.elevation import ElevationStrategy, solar_elevation_series
from ..errors import SolarDayError
from ..io.export import export_series
from .common import ISO_DATE, ExitOneCommand, fail, resolve_observer, setup_logging

logger = logging.getLogger(__name__)


def _parse_clock(value: str) -> float:
    """Convert "HH:MM" to fractional hours."""
    try:
        hh, mm = value.split(":")
        hours, minutes = int(hh), int(mm)
    except ValueError:
        raise click.BadParameter(f"expected HH:MM, got '{value}'")
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise click.BadParameter(f"time out of range: '{value}'")
    return hours + minutes / 60.0


@click.command(cls=ExitOneCommand)
@click.option("--latitude", "-l", type=float, help="Latitude in degrees (default: 0)")
@click.option("--longitude", type=float, help="Longitude in degrees, east positive (default: 0)")
@click.option("--timezone", "-t", "timezone_offset", type=float, help="Clock offset from UTC in hours (default: 0)")
@click.option("--date", "-d", "when", type=ISO_DATE, help="Date (YYYY-MM-DD), defaults to today")
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in ElevationStrategy]),
    help="noaa: equation of time + longitude correction; simple: plain hour angle (default: noaa)",
)
@click.option("--config", type=click.Path(exists=True, dir_okay=False), help="Observer YAML file")
@click.option("--preset", help="Named location from the bundled presets")
@click.option("--at", "at_clock", callback=lambda ctx, param, v: None if v is None else _parse_clock(v),
              help="Print the elevation at this local time (HH:MM)")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write .csv, .jsonl or .parquet")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def main(latitude, longitude, timezone_offset, when, strategy, config, preset, at_clock, output, verbose):
    """Compute the solar elevation angle for every minute of one day.

    Values come from --preset, then --config, then individual flags, each
    overriding the previous.

    Examples:
        # CSV to stdout for London on the summer solstice
        solarday-elevation --preset london -d 2024-06-21

        # Elevation read-out at 09:30 local time
        solarday-elevation -l 35.68 --longitude 139.69 -t 9 --at 09:30

        # Parquet export
        solarday-elevation --config observer.yaml -o out/elevation.parquet
    """
    setup_logging(verbose)

    observer = resolve_observer(
        preset,
        config,
        latitude=latitude,
        longitude=longitude,
        timezone_offset=timezone_offset,
        date=when,
        strategy=strategy,
    )

    day = observer.date or date.today()
    logger.info(f"Observer {observer.name}: lat={observer.latitude} lon={observer.longitude} UTC{observer.timezone_offset:+}")

    try:
        series = solar_elevation_series(
            observer.latitude,
            observer.longitude,
            observer.timezone_offset,
            day,
            observer.strategy,
        )
    except SolarDayError as e:
        fail(str(e))

    if at_clock is not None:
        click.echo(series.describe_at(at_clock))
        if not output:
            return

    try:
        export_series(series, output)
    except ValueError as e:
        fail(str(e))
    if output:
        peak = series.peak()
        click.echo(f"Wrote {len(series)} samples to {output} (peak {peak.elevation_deg:.1f}° at {peak.clock})", err=True)


if __name__ == "__main__":
    main()
