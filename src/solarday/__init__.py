"""Daylight duration and solar elevation for a terrestrial observer."""

from .core import (
    RESOLUTION,
    CalendarDate,
    Daylight,
    DeclinationModel,
    ElevationSample,
    ElevationSeries,
    ElevationStrategy,
    GeoLocation,
    day_length_hours,
    day_of_year,
    days_in_year,
    declination,
    equation_of_time,
    is_leap_year,
    parse_iso_date,
    solar_elevation_series,
    solar_noon,
    year_day_lengths,
)
from .errors import InvalidDateError, InvalidLocationError, SolarDayError

__version__ = "0.1.0"

__all__ = [
    "RESOLUTION",
    "CalendarDate",
    "Daylight",
    "DeclinationModel",
    "ElevationSample",
    "ElevationSeries",
    "ElevationStrategy",
    "GeoLocation",
    "day_length_hours",
    "day_of_year",
    "days_in_year",
    "declination",
    "equation_of_time",
    "is_leap_year",
    "parse_iso_date",
    "solar_elevation_series",
    "solar_noon",
    "year_day_lengths",
    "SolarDayError",
    "InvalidDateError",
    "InvalidLocationError",
]
