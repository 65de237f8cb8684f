"""Solar elevation curve over one local day.

Two strategies are available and they are not numerically interchangeable:

``NOAA_CORRECTED``
    NOAA declination and equation of time evaluated at every sample, with the
    hour angle corrected for longitude and the clock's UTC offset.
``SIMPLE_HOUR_ANGLE``
    A single sinusoidal declination for the whole day (referenced to day 79)
    and an hour angle of 15 deg per hour from 12:00. Longitude and timezone
    are ignored, so noon is always at 12:00 on the curve.

Every sample depends only on its index and the shared inputs, so the whole
curve is evaluated as one numpy expression over the index array.
"""
from dataclasses import dataclass, field
import datetime
from enum import Enum
import logging
import math
from typing import Iterator, List, Tuple

import numpy as np

from .calendar import CalendarDate
from .declination import CHART_EQUINOX_DAY, fractional_year, noaa_declination, sinusoidal_declination
from .equation_of_time import eot_minutes
from .location import GeoLocation, check_timezone_offset

logger = logging.getLogger(__name__)

RESOLUTION = 1440  # samples per 24h
MINUTES_PER_DAY = 24 * 60


class ElevationStrategy(str, Enum):
  NOAA_CORRECTED = "noaa"
  SIMPLE_HOUR_ANGLE = "simple"


@dataclass(frozen=True)
class ElevationSample:
  time_of_day: float  # hours in [0, 24)
  elevation_deg: float

  @property
  def clock(self) -> str:
    minutes = int(round(self.time_of_day * 60))
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True, eq=False)
class ElevationSeries:
  """Immutable elevation curve plus the inputs it was computed from."""

  latitude: float
  longitude: float
  timezone_offset: float
  date: datetime.date
  strategy: ElevationStrategy
  time_of_day: np.ndarray = field(repr=False)
  elevation_deg: np.ndarray = field(repr=False)

  def __len__(self) -> int:
    return len(self.time_of_day)

  def __iter__(self) -> Iterator[ElevationSample]:
    for t, e in zip(self.time_of_day, self.elevation_deg):
      yield ElevationSample(float(t), float(e))

  def samples(self) -> Tuple[ElevationSample, ...]:
    return tuple(self)

  def index_at(self, hours: float) -> int:
    # nearest sample; hours built from HH:MM land a hair below the exact minute
    return int(round(hours * len(self) / 24.0)) % len(self)

  def sample_at(self, hours: float) -> ElevationSample:
    """Sample nearest to ``hours`` (wraps past 24h)."""
    i = self.index_at(hours)
    return ElevationSample(float(self.time_of_day[i]), float(self.elevation_deg[i]))

  def peak(self) -> ElevationSample:
    i = int(np.argmax(self.elevation_deg))
    return ElevationSample(float(self.time_of_day[i]), float(self.elevation_deg[i]))

  def describe_at(self, hours: float) -> str:
    s = self.sample_at(hours)
    return f"Time: {s.clock}\nSolar Elevation: {s.elevation_deg:.1f}°"

  def to_rows(self) -> List[dict]:
    return [{"time": s.clock, "elevation_deg": s.elevation_deg} for s in self]


def _noaa_corrected(lat_rad: float, longitude_deg: float, tz_hours: float, cd: CalendarDate, idx: np.ndarray) -> np.ndarray:
  minutes = idx * (MINUTES_PER_DAY / RESOLUTION)
  gamma = fractional_year(cd.day_of_year, cd.year, idx / RESOLUTION)
  decl = noaa_declination(gamma, xp=np)
  eqtime = eot_minutes(gamma, xp=np)
  # true solar time, minutes
  tst = minutes + eqtime + 4.0 * longitude_deg - 60.0 * tz_hours
  ha = np.radians(tst / 4.0 - 180.0)
  cos_zenith = math.sin(lat_rad) * np.sin(decl) + math.cos(lat_rad) * np.cos(decl) * np.cos(ha)
  # rounding can push the cosine marginally past +/-1
  cos_zenith = np.clip(cos_zenith, -1.0, 1.0)
  return 90.0 - np.degrees(np.arccos(cos_zenith))


def _simple_hour_angle(lat_rad: float, cd: CalendarDate, idx: np.ndarray) -> np.ndarray:
  delta = sinusoidal_declination(cd.day_of_year, CHART_EQUINOX_DAY)
  t = idx * (24.0 / RESOLUTION)
  ha = (2.0 * math.pi / 24.0) * (t - 12.0)
  sin_a = math.sin(lat_rad) * math.sin(delta) + math.cos(lat_rad) * math.cos(delta) * np.cos(ha)
  return np.degrees(np.arcsin(np.clip(sin_a, -1.0, 1.0)))


def solar_elevation_series(
  latitude_deg: float,
  longitude_deg: float,
  timezone_offset_hours: float,
  date: datetime.date,
  strategy: ElevationStrategy = ElevationStrategy.NOAA_CORRECTED,
) -> ElevationSeries:
  location = GeoLocation(latitude=latitude_deg, longitude=longitude_deg)
  check_timezone_offset(timezone_offset_hours)
  strategy = ElevationStrategy(strategy)
  if isinstance(date, datetime.datetime):
    date = date.date()
  cd = CalendarDate.from_date(date)

  idx = np.arange(RESOLUTION, dtype=float)
  if strategy is ElevationStrategy.NOAA_CORRECTED:
    elevation = _noaa_corrected(location.latitude_rad, location.longitude, timezone_offset_hours, cd, idx)
  else:
    elevation = _simple_hour_angle(location.latitude_rad, cd, idx)
  time_of_day = idx * (24.0 / RESOLUTION)
  time_of_day.setflags(write=False)
  elevation.setflags(write=False)
  logger.debug(f"{strategy.value} series for {date.isoformat()} at ({latitude_deg}, {longitude_deg}) UTC{timezone_offset_hours:+}")
  return ElevationSeries(
    latitude=latitude_deg,
    longitude=longitude_deg,
    timezone_offset=timezone_offset_hours,
    date=date,
    strategy=strategy,
    time_of_day=time_of_day,
    elevation_deg=elevation,
  )
