from datetime import date, timedelta

import click

from ..core.daylight import year_day_lengths
from ..core.declination import DeclinationModel
from ..errors import SolarDayError
from ..io.export import export_rows
from .common import ExitOneCommand, fail, resolve_observer, setup_logging


@click.command(cls=ExitOneCommand)
@click.option("--latitude", "-l", type=float, help="Latitude in degrees (default: 0)")
@click.option("--year", "-y", type=click.IntRange(1, 9999), help="Calendar year (default: current year)")
@click.option(
  "--model",
  type=click.Choice([m.value for m in DeclinationModel]),
  help="Declination model (default: simple)",
)
@click.option("--config", type=click.Path(exists=True, dir_okay=False), help="Observer YAML file")
@click.option("--preset", help="Named location from the bundled presets")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write .csv, .jsonl or .parquet instead of stdout")
@click.option("--verbose", is_flag=True)
def main(latitude, year, model, config, preset, output, verbose):
  """Daylight hours for every day of a year at one latitude."""
  setup_logging(verbose)
  observer = resolve_observer(preset, config, latitude=latitude, model=model)
  # a date in the config picks the year when --year is absent
  year = year or (observer.date or date.today()).year
  model = observer.model or DeclinationModel.SIMPLE_APPROX
  location = observer.location()
  try:
    lengths = year_day_lengths(location.latitude, year, model)
  except SolarDayError as e:
    fail(str(e))
  jan1 = date(year, 1, 1)
  rows = [
    {"date": (jan1 + timedelta(days=i)).isoformat(), "day_of_year": i + 1, "daylight_hours": round(float(h), 4)}
    for i, h in enumerate(lengths)
  ]
  try:
    export_rows(rows, output, {"latitude": location.latitude, "year": year, "model": model.value})
  except ValueError as e:
    fail(str(e))
  if output:
    click.echo(f"Wrote {len(rows)} days to {output}", err=True)


if __name__ == "__main__":
  main()
