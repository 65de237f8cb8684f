from dataclasses import dataclass
from datetime import date, datetime
import re

from ..errors import InvalidDateError

ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_leap_year(year: int) -> bool:
  return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
  return 366 if is_leap_year(year) else 365


def day_of_year(d: date) -> int:
  # datetime is a date subclass; timetuple() works for both
  return d.timetuple().tm_yday


def parse_iso_date(text: str) -> date:
  """Parse a strict YYYY-MM-DD string."""
  if not isinstance(text, str) or not ISO_DATE_RE.fullmatch(text):
    raise InvalidDateError(f"Invalid date format: {text}")
  try:
    return datetime.strptime(text, "%Y-%m-%d").date()
  except ValueError as e:
    raise InvalidDateError(f"Invalid date format: {text}") from e


@dataclass(frozen=True)
class CalendarDate:
  year: int
  day_of_year: int

  def __post_init__(self):
    if not 1 <= self.day_of_year <= days_in_year(self.year):
      raise InvalidDateError(
        f"Day {self.day_of_year} is outside year {self.year} ({days_in_year(self.year)} days)"
      )

  @classmethod
  def from_date(cls, d: date) -> "CalendarDate":
    return cls(year=d.year, day_of_year=day_of_year(d))

  @classmethod
  def today(cls) -> "CalendarDate":
    return cls.from_date(date.today())

  @property
  def days_in_year(self) -> int:
    return days_in_year(self.year)
