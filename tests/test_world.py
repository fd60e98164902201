import json
import random

import pytest

from gridpath.app.config import DriverConfig
from gridpath.app.world import build_world, load_map, render_ascii, scatter_walls
from gridpath.core.grid import Grid
from gridpath.core.types import END, START, WALL


def test_scatter_walls_extremes():
    grid = Grid(4, 4)
    assert scatter_walls(grid, 0.0, random.Random(1)) == 0
    assert grid.find(WALL) == []

    assert scatter_walls(grid, 1.0, random.Random(1)) == 16
    assert all(c.kind == WALL and c.g == 0.0 for c in grid.cells)


def test_build_world_marks_corners_and_clears_their_walls():
    world = build_world(DriverConfig(columns=6, rows=4, wall_chance=1.0, seed=5))
    grid = world.grid
    assert world.start == grid.idx(0, 0)
    assert world.end == grid.idx(5, 3)
    assert grid.cells[world.start].kind == START
    assert grid.cells[world.end].kind == END
    assert len(grid.find(WALL)) == 22


def test_build_world_is_reproducible_with_seed():
    cfg = DriverConfig(columns=20, rows=20, wall_chance=0.4, seed=42)
    a = build_world(cfg).grid
    b = build_world(cfg).grid
    assert [c.kind for c in a.cells] == [c.kind for c in b.cells]


def test_load_open_map(maps_dir):
    world = load_map(maps_dir / "01_open.json")
    assert (world.grid.columns, world.grid.rows) == (5, 5)
    assert world.start == 0
    assert world.end == 24
    assert world.grid.find(WALL) == []


def test_load_wall_gap_map(maps_dir):
    world = load_map(maps_dir / "02_wall_gap.json")
    walls = {world.grid.coords(i) for i in world.grid.find(WALL)}
    assert walls == {(3, 0), (3, 1), (3, 2), (3, 3)}


def _write(tmp_path, data):
    p = tmp_path / "map.json"
    p.write_text(json.dumps(data))
    return p


def test_load_map_size_mismatch(tmp_path):
    p = _write(tmp_path, {"width": 3, "height": 2, "start": [0, 0], "goal": [2, 1],
                          "cells": [[0, 0, 0]]})
    with pytest.raises(ValueError, match="size mismatch"):
        load_map(p)


def test_load_map_goal_out_of_bounds(tmp_path):
    p = _write(tmp_path, {"width": 2, "height": 2, "start": [0, 0], "goal": [2, 1],
                          "cells": [[0, 0], [0, 0]]})
    with pytest.raises(ValueError, match="goal"):
        load_map(p)


def test_load_map_missing_key(tmp_path):
    p = _write(tmp_path, {"width": 2, "height": 2, "cells": [[0, 0], [0, 0]]})
    with pytest.raises(ValueError, match="malformed"):
        load_map(p)


def test_map_start_on_wall_is_cleared(tmp_path):
    p = _write(tmp_path, {"width": 2, "height": 1, "start": [0, 0], "goal": [1, 0],
                          "cells": [[1, 0]]})
    world = load_map(p)
    assert world.grid.cells[0].kind == START
    assert world.grid.cells[0].g != 0.0


def test_render_ascii():
    grid = Grid(3, 2)
    grid.mark(0, 0, START)
    grid.set_wall(1, 0)
    grid.mark(2, 1, END)
    grid.mark(1, 1, "path")
    assert render_ascii(grid) == "S#.\n.*E"


_GOOD = {"width": 2, "height": 2, "start": [0, 0], "goal": [1, 1], "cells": [[0, 0], [0, 0]]}


@pytest.mark.parametrize("override", [
    {"start": [0.0, 0]},
    {"start": ["a", 0]},
    {"start": [True, 0]},
    {"start": [0]},
    {"goal": 3},
    {"cells": 5},
    {"cells": [0, 0]},
    {"cells": "ab"},
    {"width": "wide"},
])
def test_load_map_rejects_malformed_fields(tmp_path, override):
    p = _write(tmp_path, {**_GOOD, **override})
    with pytest.raises(ValueError):
        load_map(p)


def test_load_map_rejects_non_object(tmp_path):
    p = _write(tmp_path, [1, 2, 3])
    with pytest.raises(ValueError, match="malformed"):
        load_map(p)
