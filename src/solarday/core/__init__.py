"""Calendar, declination, day-length and elevation calculators."""

from .calendar import CalendarDate, day_of_year, days_in_year, is_leap_year, parse_iso_date
from .declination import DeclinationModel, declination
from .equation_of_time import equation_of_time, solar_noon
from .daylight import Daylight, day_length_hours, year_day_lengths
from .elevation import RESOLUTION, ElevationSample, ElevationSeries, ElevationStrategy, solar_elevation_series
from .location import GeoLocation

__all__ = [
    "CalendarDate",
    "day_of_year",
    "days_in_year",
    "is_leap_year",
    "parse_iso_date",
    "DeclinationModel",
    "declination",
    "equation_of_time",
    "solar_noon",
    "Daylight",
    "day_length_hours",
    "year_day_lengths",
    "RESOLUTION",
    "ElevationSample",
    "ElevationSeries",
    "ElevationStrategy",
    "solar_elevation_series",
    "GeoLocation",
]
