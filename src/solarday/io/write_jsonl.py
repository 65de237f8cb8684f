import json
import os
from typing import Iterable, Optional


def write_jsonl(rows_iter: Iterable[dict], path: str, metadata: Optional[dict] = None):
  """One JSON object per line; ``metadata`` keys are repeated on every row."""
  parent = os.path.dirname(path)
  if parent:
    os.makedirs(parent, exist_ok=True)
  prefix = metadata or {}
  with open(path, "w", encoding="utf-8") as f:
    for r in rows_iter:
      f.write(json.dumps({**prefix, **r}, ensure_ascii=False, default=str) + "\n")
