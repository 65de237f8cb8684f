from pathlib import Path
from typing import Dict

import yaml

from .observer import ObserverConfig

PRESETS_PATH = Path(__file__).parent.parent / "config" / "locations.yaml"


def load_presets(path=PRESETS_PATH) -> Dict[str, ObserverConfig]:
  locations = yaml.safe_load(Path(path).read_text(encoding="utf-8"))["locations"]
  return {k: ObserverConfig(name=k, **v) for k, v in locations.items()}


def get_preset(name: str, path=PRESETS_PATH) -> ObserverConfig:
  presets = load_presets(path)
  if name not in presets:
    raise KeyError(f"Unknown location preset '{name}' (known: {', '.join(sorted(presets))})")
  return presets[name]
