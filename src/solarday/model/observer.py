import datetime
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from ..core.declination import DeclinationModel
from ..core.elevation import ElevationStrategy
from ..core.location import MAX_TZ_OFFSET, MIN_TZ_OFFSET, GeoLocation
from ..errors import SolarDayError


class ObserverConfig(BaseModel):
  name: str = "observer"
  latitude: float = Field(0.0, ge=-90.0, le=90.0)
  longitude: float = Field(0.0, ge=-180.0, le=180.0)
  timezone_offset: float = Field(0.0, ge=MIN_TZ_OFFSET, le=MAX_TZ_OFFSET)
  date: Optional[datetime.date] = None
  # None leaves the choice to the command reading the config
  model: Optional[DeclinationModel] = None
  strategy: ElevationStrategy = ElevationStrategy.NOAA_CORRECTED

  def location(self) -> GeoLocation:
    return GeoLocation(latitude=self.latitude, longitude=self.longitude)


def load_observer(path) -> ObserverConfig:
  """Read an observer YAML file; keys may sit at top level or under ``observer:``."""
  cfg = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
  if isinstance(cfg, dict) and "observer" in cfg:
    cfg = cfg["observer"]
  if not isinstance(cfg, dict):
    raise SolarDayError(f"{path}: expected a mapping of observer settings, got {type(cfg).__name__}")
  return ObserverConfig.model_validate(cfg)
