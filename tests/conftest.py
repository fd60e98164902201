from pathlib import Path

import pytest

from gridpath.core.grid import Grid
from gridpath.core.traversal import begin
from gridpath.core.types import START, END

MAPS_DIR = Path(__file__).resolve().parents[1] / "maps"


@pytest.fixture
def maps_dir() -> Path:
    return MAPS_DIR


@pytest.fixture
def make_search():
    """Factory: grid with walls, start/end marked and a seeded traversal."""
    def _make(columns, rows, start, end, walls=(), **kwargs):
        grid = Grid(columns, rows)
        for x, y in walls:
            grid.set_wall(x, y)
        s = grid.mark(start[0], start[1], START)
        e = grid.mark(end[0], end[1], END)
        return grid, begin(grid, s, e, **kwargs)
    return _make
