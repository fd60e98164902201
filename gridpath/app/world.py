# gridpath/app/world.py
#!/usr/bin/env python3
"""
World initialization for the driver: wall placement policy, JSON map
loading and a plain-text rendering for headless runs.
"""

import json
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from gridpath.app.config import DriverConfig
from gridpath.core.grid import Grid
from gridpath.core.types import START, END, PATH, WALL

logger = logging.getLogger(__name__)

GLYPHS = {START: "S", END: "E", PATH: "*", WALL: "#"}


@dataclass
class World:
    grid: Grid
    start: int
    end: int


def scatter_walls(grid: Grid, chance: float, rng: random.Random) -> int:
    """Independently turn each cell into a wall with probability `chance`."""
    count = 0
    for c in grid.cells:
        if rng.random() < chance:
            grid.set_wall(c.x, c.y)
            count += 1
    return count


def build_world(config: DriverConfig, rng: Optional[random.Random] = None) -> World:
    if config.map_path is not None:
        return load_map(config.map_path)

    rng = rng or random.Random(config.seed)
    grid = Grid(config.columns, config.rows)
    walls = scatter_walls(grid, config.wall_chance, rng)

    sx, sy = 0, 0
    ex, ey = config.columns - 1, config.rows - 1
    for x, y in ((sx, sy), (ex, ey)):
        grid.clear_wall(x, y)
    start = grid.mark(sx, sy, START)
    end = grid.mark(ex, ey, END)
    logger.info("world %dx%d, %d walls, start=%s end=%s",
                grid.columns, grid.rows, walls, (sx, sy), (ex, ey))
    return World(grid, start, end)


def _coord(value) -> Tuple[int, int]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise TypeError(f"expected an [x, y] pair, got {value!r}")
    for v in value:
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"coordinates must be integers, got {value!r}")
    return (value[0], value[1])


# ---------- Loader ----------
def load_map(path: Path) -> World:
    """
    JSON map: {"width": W, "height": H, "cells": [[...] * W] * H,
               "start": [x, y], "goal": [x, y]}
    A cell value of 1 is a wall, anything else is open ground.
    """
    with open(path, "r") as f:
        data = json.load(f)
    try:
        width  = int(data["width"])
        height = int(data["height"])
        start  = _coord(data["start"])
        goal   = _coord(data["goal"])
        cells  = data["cells"]
    except (KeyError, TypeError, ValueError) as ex:
        raise ValueError(f"{path}: malformed map ({ex})") from None

    if not isinstance(cells, list) or not all(isinstance(r, list) for r in cells):
        raise ValueError(f"{path}: cells must be a list of rows")
    if len(cells) != height or not all(len(r) == width for r in cells):
        raise ValueError(f"{path}: cells size mismatch, expected {width}x{height}")

    grid = Grid(width, height)
    for label, (x, y) in (("start", start), ("goal", goal)):
        if not grid.in_bounds(x, y):
            raise ValueError(f"{path}: {label} {(x, y)} out of bounds")

    for row in range(height):
        for col in range(width):
            if cells[row][col] == 1:
                grid.set_wall(col, row)
    for x, y in (start, goal):
        grid.clear_wall(x, y)

    s = grid.mark(start[0], start[1], START)
    e = grid.mark(goal[0], goal[1], END)
    return World(grid, s, e)


def render_ascii(grid: Grid) -> str:
    lines = []
    for y in range(grid.rows):
        row = grid.cells[y * grid.columns:(y + 1) * grid.columns]
        lines.append("".join(GLYPHS.get(c.kind, ".") for c in row))
    return "\n".join(lines)
