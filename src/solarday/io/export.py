"""Pick a writer from the output path's extension."""
from pathlib import Path
from typing import Optional

from ..core.elevation import ElevationSeries
from .write_csv import write_rows_csv, write_series_csv
from .write_jsonl import write_jsonl
from .write_parquet import write_parquet

FORMATS = (".csv", ".jsonl", ".parquet")


def series_metadata(series: ElevationSeries) -> dict:
  return {
    "date": series.date.isoformat(),
    "latitude": series.latitude,
    "longitude": series.longitude,
    "timezone_offset": series.timezone_offset,
    "strategy": series.strategy.value,
  }


def _suffix(path: str) -> str:
  suffix = Path(path).suffix.lower()
  if suffix not in FORMATS:
    raise ValueError(f"Unsupported output format '{suffix}' (use one of {', '.join(FORMATS)})")
  return suffix


def export_series(series: ElevationSeries, path: Optional[str] = None):
  if path is None:
    write_series_csv(series)
    return
  suffix = _suffix(path)
  if suffix == ".csv":
    write_series_csv(series, path)
  elif suffix == ".jsonl":
    write_jsonl(series.to_rows(), path, series_metadata(series))
  else:
    write_parquet(series.to_rows(), path, series_metadata(series))


def export_rows(rows: list, path: Optional[str] = None, metadata: Optional[dict] = None):
  if path is None or _suffix(path) == ".csv":
    write_rows_csv(rows, path)
  elif _suffix(path) == ".jsonl":
    write_jsonl(rows, path, metadata)
  else:
    write_parquet(rows, path, metadata)
