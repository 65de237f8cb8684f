from dataclasses import dataclass
import math

from ..errors import InvalidLocationError

# UTC-12 (Baker Island) .. UTC+14 (Line Islands)
MIN_TZ_OFFSET = -12.0
MAX_TZ_OFFSET = 14.0


def check_latitude(latitude: float) -> float:
  if not -90.0 <= latitude <= 90.0:
    raise InvalidLocationError(f"Latitude {latitude} outside [-90, 90]")
  return latitude


def check_longitude(longitude: float) -> float:
  if not -180.0 <= longitude <= 180.0:
    raise InvalidLocationError(f"Longitude {longitude} outside [-180, 180]")
  return longitude


def check_timezone_offset(offset_hours: float) -> float:
  if not MIN_TZ_OFFSET <= offset_hours <= MAX_TZ_OFFSET:
    raise InvalidLocationError(f"Timezone offset {offset_hours} outside [{MIN_TZ_OFFSET:+}, {MAX_TZ_OFFSET:+}] hours")
  return offset_hours


@dataclass(frozen=True)
class GeoLocation:
  latitude: float
  longitude: float = 0.0

  def __post_init__(self):
    # NaN fails both range checks
    check_latitude(self.latitude)
    check_longitude(self.longitude)

  @property
  def latitude_rad(self) -> float:
    return math.radians(self.latitude)
