# gridpath/app/config.py
#!/usr/bin/env python3
"""
Driver configuration.

Resolution order (later wins):
  1. defaults below
  2. ENV: GRIDPATH_<KEY>   e.g. GRIDPATH_COLUMNS=80, GRIDPATH_BUDGET=25
  3. CLI: --<key>=<value>  e.g. --wall-chance=0.2, --seed=7, --headless

An empty environment value means "not set". On the command line, empty
--budget=, --seed= and --map= values mean "not set" too. A bare --headless
turns headless on.
"""

import logging
import math
import os
import sys
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from gridpath.core.heuristics import HEURISTICS

logger = logging.getLogger(__name__)

ENV_PREFIX = "GRIDPATH_"
CELL_COUNT = 50
TICKRATE = 60.0
FPS = 60.0


@dataclass
class DriverConfig:
    columns: int = CELL_COUNT
    rows: int = CELL_COUNT
    wall_chance: float = 0.3
    seed: Optional[int] = None
    budget: Optional[int] = None      # None -> whole search in one tick
    tick_rate: float = TICKRATE
    fps: float = FPS
    heuristic: str = "chebyshev"
    map_path: Optional[Path] = None
    headless: bool = False

    def validate(self) -> "DriverConfig":
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(f"grid size must be positive, got {self.columns}x{self.rows}")
        if not 0.0 <= self.wall_chance <= 1.0:
            raise ValueError(f"wall_chance must be within [0, 1], got {self.wall_chance}")
        if self.budget is not None and self.budget < 1:
            raise ValueError(f"budget must be >= 1, got {self.budget}")
        for label, v in (("tick_rate", self.tick_rate), ("fps", self.fps)):
            if not math.isfinite(v) or v <= 0:
                raise ValueError(f"{label} must be a positive finite number, got {v}")
        if self.heuristic not in HEURISTICS:
            raise ValueError(f"heuristic must be one of {sorted(HEURISTICS)}, got {self.heuristic!r}")
        return self


def _to_bool(raw: str) -> bool:
    v = raw.strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _convert(key: str, raw: str):
    try:
        if key in ("columns", "rows"):
            return int(raw)
        if key in ("seed", "budget"):
            return int(raw) if raw.strip() else None
        if key in ("wall_chance", "tick_rate", "fps"):
            return float(raw)
        if key == "map_path":
            return Path(raw) if raw.strip() else None
        if key == "headless":
            return _to_bool(raw)
        return raw.strip().lower()
    except ValueError as ex:
        raise ValueError(f"invalid value for {key}: {raw!r} ({ex})") from None


def _from_env(env: Mapping[str, str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for f in fields(DriverConfig):
        name = ENV_PREFIX + f.name.upper()
        if env.get(name, "").strip():
            out[f.name] = env[name]
    return out


def _from_argv(argv: List[str]) -> Dict[str, str]:
    known = {f.name for f in fields(DriverConfig)}
    out: Dict[str, str] = {}
    for arg in argv:
        if not arg.startswith("--"):
            continue
        key, sep, value = arg[2:].partition("=")
        key = key.replace("-", "_")
        if key == "map":
            key = "map_path"
        if key not in known:
            logger.warning("ignoring unknown option %s", arg)
            continue
        if sep:
            out[key] = value
        else:
            # bare flag: --headless
            out[key] = "true" if key == "headless" else ""
    return out


def resolve_config(argv: Optional[List[str]] = None,
                   env: Optional[Mapping[str, str]] = None) -> DriverConfig:
    argv = sys.argv[1:] if argv is None else argv
    env = os.environ if env is None else env

    raw = _from_env(env)
    raw.update(_from_argv(argv))
    values = {k: _convert(k, v) for k, v in raw.items()}
    return replace(DriverConfig(), **values).validate()
