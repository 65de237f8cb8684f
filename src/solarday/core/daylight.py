from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
import logging
import math
from typing import Optional

import numpy as np

from .calendar import CalendarDate, days_in_year
from .declination import DeclinationModel, declination
from .equation_of_time import solar_noon
from .location import GeoLocation, check_latitude, check_timezone_offset

logger = logging.getLogger(__name__)

POLE_EPSILON = 1e-12
# At a pole the sun circles the horizon at height delta. Within this band
# (about 1.15 deg, a few days either side of an equinox for both models) the
# split between day and night is taken as even.
EQUINOX_DECLINATION_TOLERANCE = 0.02

POLAR_DAY = 24.0
POLAR_NIGHT = 0.0
EQUINOX_AT_POLE = 12.0


def _tan_latitude(phi: float) -> float:
  # tan(pi/2) in floating point is ~1.6e16, not infinity
  if abs(abs(phi) - math.pi / 2) <= POLE_EPSILON:
    return math.copysign(math.inf, phi)
  return math.tan(phi)


def day_length_from_declination(phi: float, delta: float) -> float:
  """Hours between sunrise and sunset for latitude ``phi`` and declination ``delta`` (radians).

  Uses the sunrise equation cos(w0) = -tan(phi) * tan(delta). The argument is
  not clamped: values beyond +/-1 are exactly the polar night/day cases.
  """
  tan_phi = _tan_latitude(phi)
  if math.isinf(tan_phi) and abs(delta) <= EQUINOX_DECLINATION_TOLERANCE:
    delta = 0.0
  x = -tan_phi * math.tan(delta)
  if math.isnan(x):
    return EQUINOX_AT_POLE
  if x < -1:
    return POLAR_DAY
  if x > 1:
    return POLAR_NIGHT
  return 24.0 / math.pi * math.acos(x)


def day_length_hours(latitude_deg: float, day_of_year: int, year: int, model: DeclinationModel) -> float:
  check_latitude(latitude_deg)
  CalendarDate(year=year, day_of_year=day_of_year)
  delta = declination(day_of_year, year, model)
  hours = day_length_from_declination(math.radians(latitude_deg), delta)
  logger.debug(f"lat={latitude_deg} day={year}/{day_of_year} model={DeclinationModel(model).value} -> {hours:.4f}h")
  return hours


def year_day_lengths(latitude_deg: float, year: int, model: DeclinationModel) -> np.ndarray:
  """Daylight hours for every day of ``year``; index 0 is January 1st."""
  n = days_in_year(year)
  lengths = np.array([day_length_hours(latitude_deg, i + 1, year, model) for i in range(n)])
  lengths.setflags(write=False)
  return lengths


@dataclass
class Daylight:
  location: GeoLocation
  model: DeclinationModel = DeclinationModel.NOAA_FOURIER

  def hours(self, d: date) -> float:
    cd = CalendarDate.from_date(d)
    return day_length_hours(self.location.latitude, cd.day_of_year, cd.year, self.model)

  def solar_noon(self, d: date, timezone_offset: float = 0.0) -> float:
    # The simple model has no equation-of-time term
    if DeclinationModel(self.model) is DeclinationModel.SIMPLE_APPROX:
      return 12.0 - self.location.longitude / 15.0 + timezone_offset
    cd = CalendarDate.from_date(d)
    return solar_noon(self.location.longitude, timezone_offset, cd.day_of_year, cd.year)

  def sunrise_sunset(self, d: date, timezone_offset: float = 0.0) -> Optional[tuple[datetime, datetime]]:
    """Sunrise and sunset as aware datetimes, or None during polar day or night.

    Geometric centre of the disc, no refraction; the interval is centred on
    solar noon.
    """
    check_timezone_offset(timezone_offset)
    hours = self.hours(d)
    if hours in (POLAR_DAY, POLAR_NIGHT):
      return None
    tz = timezone(timedelta(hours=timezone_offset))
    mid = datetime(d.year, d.month, d.day, tzinfo=tz) + timedelta(hours=self.solar_noon(d, timezone_offset))
    sunrise = mid - timedelta(hours=hours / 2)
    sunset = mid + timedelta(hours=hours / 2)
    return sunrise, sunset
