import json
import os
from typing import Iterable, Optional

import pyarrow as pa
import pyarrow.parquet as pq


def write_parquet(rows_iter: Iterable[dict], path: str, metadata: Optional[dict] = None):
  """Write rows as a snappy Parquet table; ``metadata`` goes into the schema as JSON."""
  parent = os.path.dirname(path)
  if parent:
    os.makedirs(parent, exist_ok=True)
  rows = list(rows_iter)
  if not rows:
    return
  table = pa.Table.from_pylist(rows)
  if metadata:
    table = table.replace_schema_metadata({b"solarday": json.dumps(metadata, default=str).encode()})
  pq.write_table(table, path, compression="snappy")
