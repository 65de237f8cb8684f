"""Exceptions raised at the input boundary of the calculators."""


class SolarDayError(ValueError):
  """Base class for solarday input errors."""


class InvalidDateError(SolarDayError):
  """Date text or ordinal day that does not name a real calendar day."""


class InvalidLocationError(SolarDayError):
  """Latitude, longitude or timezone offset outside the physical range."""
