# gridpath/core/traversal.py
#!/usr/bin/env python3
"""
Mutable search state for one start/end query.

Open-set entries are (f, h, -g, seq, index):
lower f, then lower h, then deeper g, then FIFO by seq.
There is no decrease-key; a cell can sit in the heap several times and the
outdated copies are dropped when popped (their g no longer matches the cell).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import heapq
from math import isnan

from gridpath.core.grid import Grid
from gridpath.core.heuristics import Heuristic, chebyshev
from gridpath.core.types import IDLE, RUNNING, StepResult

Entry = Tuple[float, float, float, int, int]  # (f, h, -g, seq, index)


@dataclass
class Traversal:
    start: int
    end: int
    heuristic: Heuristic = chebyshev

    open: List[Entry] = field(default_factory=list)
    predecessors: Dict[int, int] = field(default_factory=dict)
    status: str = IDLE
    popped: int = 0
    expansions: int = 0
    seq: int = 0  # monotonic counter for PQ stability
    result: Optional[StepResult] = None  # cached once terminal

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    # -------------------- lifecycle --------------------

    def seed(self, grid: Grid) -> None:
        """Reset grid scores and this state, then push the start cell."""
        grid.coords(self.start)  # bounds check
        grid.coords(self.end)
        grid.reset_scores()
        self.open.clear()
        self.predecessors.clear()
        self.popped = 0
        self.expansions = 0
        self.seq = 0
        self.result = None

        s = grid.cells[self.start]
        e = grid.cells[self.end]
        s.g = 0.0
        s.h = self.heuristic(s.x, s.y, e.x, e.y)
        s.f = s.g + s.h
        if isnan(s.f):
            raise FloatingPointError(f"NaN score at start cell {grid.coords(self.start)}")
        self.push(s.f, s.h, s.g, self.start)
        self.status = RUNNING

    # -------------------- open set --------------------

    def push(self, f: float, h: float, g: float, index: int) -> None:
        heapq.heappush(self.open, (f, h, -g, self._bump(), index))

    def pop(self) -> Tuple[float, int]:
        """Remove the best entry and return (g recorded at push time, index)."""
        _, _, neg_g, _, index = heapq.heappop(self.open)
        self.popped += 1
        return -neg_g, index

    def is_empty(self) -> bool:
        return not self.open

    @property
    def open_size(self) -> int:
        return len(self.open)


def begin(grid: Grid, start: int, end: int, heuristic: Heuristic = chebyshev) -> Traversal:
    t = Traversal(start=start, end=end, heuristic=heuristic)
    t.seed(grid)
    return t
