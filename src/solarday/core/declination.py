"""Solar declination models.

Two models are kept side by side and neither is treated as authoritative:

* ``SIMPLE_APPROX``: a single sinusoid with a fixed 365-day period,
  ``23.44 deg * sin(2*pi/365 * (n - 81))``. No year dependence.
* ``NOAA_FOURIER``: the NOAA seven-term Fourier series in the fractional
  year angle ``gamma``, which follows the length of the actual year.

All functions return radians.
"""
from enum import Enum
import math

from .calendar import days_in_year

AXIAL_TILT_DEG = 23.44
SIMPLE_EQUINOX_DAY = 81
# The elevation chart references its sinusoid to day 79 instead.
CHART_EQUINOX_DAY = 79


class DeclinationModel(str, Enum):
  SIMPLE_APPROX = "simple"
  NOAA_FOURIER = "noaa"


def fractional_year(day_of_year: int, year: int, day_fraction: float = 0.0) -> float:
  """Fractional year angle (radians) at ``day_fraction`` into the given day.

  Midnight starting day 1 maps to 0.
  """
  return 2.0 * math.pi / days_in_year(year) * (day_of_year - 1 + day_fraction)


def sinusoidal_declination(day_of_year, equinox_day: float = SIMPLE_EQUINOX_DAY, xp=math):
  return math.radians(AXIAL_TILT_DEG) * xp.sin(2.0 * math.pi / 365.0 * (day_of_year - equinox_day))


def noaa_declination(gamma, xp=math):
  """NOAA declination series.

  ``xp`` supplies cos/sin; pass ``numpy`` to evaluate a whole array of angles.
  """
  cos, sin = xp.cos, xp.sin
  return (
    0.006918
    - 0.399912 * cos(gamma)
    + 0.070257 * sin(gamma)
    - 0.006758 * cos(2.0 * gamma)
    + 0.000907 * sin(2.0 * gamma)
    - 0.002697 * cos(3.0 * gamma)
    + 0.001480 * sin(3.0 * gamma)
  )


def declination(day_of_year: int, year: int, model: DeclinationModel) -> float:
  model = DeclinationModel(model)
  if model is DeclinationModel.SIMPLE_APPROX:
    return sinusoidal_declination(day_of_year)
  gamma = 2.0 * math.pi * day_of_year / days_in_year(year)
  return noaa_declination(gamma)
