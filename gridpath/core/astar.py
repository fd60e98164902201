# gridpath/core/astar.py
#!/usr/bin/env python3
"""
A* search driver, invoked once per logical update.

tick(grid, traversal, budget=None) -> StepResult

- budget=None: run until the end cell is popped or the open set is empty,
  all inside a single call.
- budget=N: expand at most N cells, then return RUNNING; the traversal
  keeps the frontier so the next call resumes where this one stopped.

Every step costs 1.0 (orthogonal and diagonal alike). Walls are skipped by
their kind; their g is also pinned at 0 so no positive candidate can ever
relax one.
"""

import logging
from math import isnan
from typing import Dict, List, Optional

from gridpath.core.grid import Grid
from gridpath.core.heuristics import Heuristic, chebyshev
from gridpath.core.traversal import Traversal, begin
from gridpath.core.types import (
    Coord, StepResult, PATH, IDLE, RUNNING, FOUND, EXHAUSTED,
)

logger = logging.getLogger(__name__)

STEP_COST = 1.0


def tick(grid: Grid, traversal: Traversal, budget: Optional[int] = None) -> StepResult:
    if budget is not None and budget < 1:
        raise ValueError(f"budget must be >= 1 or None, got {budget}")

    t = traversal
    if t.status == IDLE:
        return StepResult(status=IDLE, metrics=_metrics(t))
    if t.result is not None:
        return t.result

    end = grid.cells[t.end]
    opened: List[int] = []
    closed: List[int] = []
    current: Optional[int] = None
    expanded = 0

    while budget is None or expanded < budget:
        if t.is_empty():
            t.status = EXHAUSTED
            t.result = StepResult(status=EXHAUSTED, opened=opened, closed=closed,
                                  current=current, metrics=_metrics(t))
            logger.info("no path from %s to %s after %d expansions",
                        grid.coords(t.start), grid.coords(t.end), t.expansions)
            return t.result

        g_u, u = t.pop()
        cu = grid.cells[u]

        # Ignore stale pops
        if g_u != cu.g:
            continue
        current = u

        if u == t.end:
            path = reconstruct_path(grid, t.predecessors, t.start, t.end)
            t.status = FOUND
            t.result = StepResult(status=FOUND, opened=opened, closed=closed,
                                  current=u, path=path, metrics=_metrics(t, path))
            logger.info("path found: %d steps, %d expansions, %d pops",
                        len(path) - 1, t.expansions, t.popped)
            return t.result

        expanded += 1
        t.expansions += 1
        closed.append(u)

        alt = cu.g + STEP_COST
        for v in grid.neighbors(cu.x, cu.y):
            cv = grid.cells[v]
            if not cv.passable:
                continue
            if alt < cv.g:
                cv.g = alt
                cv.h = t.heuristic(cv.x, cv.y, end.x, end.y)
                cv.f = cv.g + cv.h
                if isnan(cv.f):
                    raise FloatingPointError(f"NaN score at cell {grid.coords(v)}")
                t.predecessors[v] = u
                t.push(cv.f, cv.h, cv.g, v)
                opened.append(v)

    logger.debug("tick: expanded %d, open %d", expanded, t.open_size)
    return StepResult(status=RUNNING, opened=opened, closed=closed,
                      current=current, metrics=_metrics(t))


def reconstruct_path(grid: Grid, predecessors: Dict[int, int], start: int, end: int) -> List[int]:
    """
    Walk predecessors back from `end` and return indices start..end.
    Cells strictly between start and end are relabelled PATH.
    Stops early at the first index with no predecessor.
    """
    path: List[int] = [end]
    seen = {end}
    cur = end
    while cur != start:
        prev = predecessors.get(cur)
        if prev is None:
            break
        if prev in seen:
            raise RuntimeError(f"predecessor cycle through cell {grid.coords(prev)}")
        seen.add(prev)
        path.append(prev)
        cur = prev
    path.reverse()

    for i in path:
        if i != start and i != end:
            grid.cells[i].kind = PATH
    return path


def find_path(grid: Grid, start: Coord, end: Coord, heuristic: Heuristic = chebyshev) -> List[Coord]:
    """One-shot search between two coordinates; [] when unreachable."""
    t = begin(grid, grid.idx(*start), grid.idx(*end), heuristic)
    res = tick(grid, t)
    if res.status != FOUND:
        return []
    return [grid.coords(i) for i in res.path]


def _metrics(t: Traversal, path: Optional[List[int]] = None) -> dict:
    return {
        "popped": t.popped,
        "expansions": t.expansions,
        "open_size": t.open_size,
        "closed_count": t.expansions,
        "path_len": len(path) - 1 if path else 0,
        "total_cost": (len(path) - 1) * STEP_COST if path else None,
    }
