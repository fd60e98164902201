# gridpath/core/heuristics.py
#!/usr/bin/env python3
"""
Distance estimates between two grid coordinates.

Every move (orthogonal or diagonal) costs 1.0, so the true remaining cost on
an open grid is the Chebyshev distance. That makes `chebyshev` the default:
it never overestimates. `euclidean` overestimates on diagonal-heavy routes
(sqrt(2) per diagonal vs. a cost of 1.0) and may return longer paths; it is
kept selectable by name.
"""

from math import hypot, sqrt
from typing import Callable, Dict

Heuristic = Callable[[int, int, int, int], float]


def euclidean(x1: int, y1: int, x2: int, y2: int) -> float:
    return hypot(x2 - x1, y2 - y1)


def chebyshev(x1: int, y1: int, x2: int, y2: int) -> float:
    return float(max(abs(x2 - x1), abs(y2 - y1)))


def octile(x1: int, y1: int, x2: int, y2: int) -> float:
    """Exact distance when diagonal steps cost sqrt(2)."""
    dx, dy = abs(x2 - x1), abs(y2 - y1)
    return (dx + dy) + (sqrt(2) - 2) * min(dx, dy)


def manhattan(x1: int, y1: int, x2: int, y2: int) -> float:
    # only admissible for 4-connected movement
    return float(abs(x2 - x1) + abs(y2 - y1))


HEURISTICS: Dict[str, Heuristic] = {
    "chebyshev": chebyshev,
    "euclidean": euclidean,
    "octile": octile,
    "manhattan": manhattan,
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name.lower()]
    except KeyError:
        raise KeyError(f"unknown heuristic {name!r}; choose from {sorted(HEURISTICS)}") from None
