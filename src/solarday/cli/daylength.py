from datetime import date
import logging

import click

from ..core.calendar import CalendarDate
from ..core.daylight import day_length_hours
from ..core.declination import DeclinationModel
from ..errors import SolarDayError
from .common import ISO_DATE, ExitOneCommand, fail, resolve_observer, setup_logging

logger = logging.getLogger(__name__)


@click.command(cls=ExitOneCommand)
@click.option(
  "--latitude", "-l",
  type=float,
  help="Geographic latitude of observation point (degrees, positive for North, negative for South), defaults to 0",
)
@click.option(
  "--date", "-d", "when",
  type=ISO_DATE,
  help="Date (format: YYYY-MM-DD), defaults to today",
)
@click.option(
  "--model",
  type=click.Choice([m.value for m in DeclinationModel]),
  help="Declination model (default: simple)",
)
@click.option("--config", type=click.Path(exists=True, dir_okay=False), help="Observer YAML file")
@click.option("--preset", help="Named location from the bundled presets")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def main(latitude, when, model, config, preset, verbose):
  """Calculate daylight duration (in hours) for given date and latitude."""
  setup_logging(verbose)
  observer = resolve_observer(preset, config, latitude=latitude, date=when, model=model)
  when = observer.date or date.today()
  model = observer.model or DeclinationModel.SIMPLE_APPROX
  location = observer.location()
  try:
    cd = CalendarDate.from_date(when)
    hours = day_length_hours(location.latitude, cd.day_of_year, cd.year, model)
  except SolarDayError as e:
    fail(str(e))
  logger.info(f"Computed {hours:.4f}h with {model.value} model")
  click.echo(f"{when:%Y-%m-%d}  |  Latitude: {location.latitude:.2f} deg  |  Daylight: {hours:.2f} hours")


if __name__ == "__main__":
  main()
