# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from math import inf
from typing import List, Tuple, Optional, Dict, Any

Coord = Tuple[int, int]  # (x, y) == (col, row)

# Cell kinds (mutually exclusive)
START      = "start"
END        = "end"
PATH       = "path"
WALL       = "wall"
BACKGROUND = "background"
KINDS = (START, END, PATH, WALL, BACKGROUND)

# Search status
IDLE      = "idle"
RUNNING   = "running"
FOUND     = "found"
EXHAUSTED = "exhausted"


@dataclass
class Cell:
    x: int
    y: int
    kind: str = BACKGROUND
    g: float = inf      # best known cost from start; pinned to 0 on walls
    h: float = 0.0      # estimate to end
    f: float = inf      # g + h, open-set key

    @property
    def passable(self) -> bool:
        return self.kind != WALL

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "found" | "exhausted"
    opened: List[int] = field(default_factory=list)
    closed: List[int] = field(default_factory=list)
    current: Optional[int] = None
    path: Optional[List[int]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def finished(self) -> bool:
        return self.status in (FOUND, EXHAUSTED)
