import math

from .calendar import days_in_year

# minutes per radian of hour angle: 24 * 60 / (2 * pi)
MINUTES_PER_RADIAN = 229.18


def eot_minutes(gamma, xp=math):
  """Apparent minus mean solar time, in minutes, for fractional year angle ``gamma``."""
  cos, sin = xp.cos, xp.sin
  return MINUTES_PER_RADIAN * (
    0.000075
    + 0.001868 * cos(gamma)
    - 0.032077 * sin(gamma)
    - 0.014615 * cos(2.0 * gamma)
    - 0.040849 * sin(2.0 * gamma)
  )


def equation_of_time(day_of_year: int, year: int) -> float:
  gamma = 2.0 * math.pi * day_of_year / days_in_year(year)
  return eot_minutes(gamma)


def solar_noon(longitude_deg: float, timezone_offset_hours: float, day_of_year: int, year: int) -> float:
  """Local clock time (hours) at which the sun crosses the meridian."""
  return 12.0 - equation_of_time(day_of_year, year) / 60.0 - longitude_deg / 15.0 + timezone_offset_hours
