import csv
import os
import sys
from typing import Iterable, Optional, TextIO

from ..core.elevation import ElevationSeries


def _open_target(path: Optional[str]):
  if path is None:
    return sys.stdout, False
  parent = os.path.dirname(path)
  if parent:
    os.makedirs(parent, exist_ok=True)
  return open(path, "w", encoding="utf-8", newline=""), True


def write_series_csv_to(series: ElevationSeries, f: TextIO):
  f.write("# Solar Elevation Data\n")
  f.write(f"# Date: {series.date:%Y-%m-%d}\n")
  f.write(f"# Latitude: {series.latitude:.2f} degrees\n")
  f.write(f"# Longitude: {series.longitude:.1f} degrees\n")
  f.write(f"# Timezone: UTC{series.timezone_offset:+.2f}\n")
  f.write("#\n")
  w = csv.writer(f, lineterminator="\n")
  w.writerow(["Time", "Solar Elevation (degrees)"])
  for row in series.to_rows():
    w.writerow([row["time"], f"{row['elevation_deg']:.3f}"])


def write_series_csv(series: ElevationSeries, path: Optional[str] = None):
  """Write the curve in the elevation tool's CSV layout; stdout when ``path`` is None."""
  f, owned = _open_target(path)
  try:
    write_series_csv_to(series, f)
  finally:
    if owned:
      f.close()


def write_rows_csv(rows_iter: Iterable[dict], path: Optional[str] = None):
  rows = list(rows_iter)
  f, owned = _open_target(path)
  try:
    if rows:
      w = csv.DictWriter(f, fieldnames=list(rows[0].keys()), lineterminator="\n")
      w.writeheader()
      w.writerows(rows)
  finally:
    if owned:
      f.close()
