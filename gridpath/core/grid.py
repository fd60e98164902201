# gridpath/core/grid.py
#!/usr/bin/env python3
"""
Fixed-size planar grid stored as a row-major arena of cells.

index = y * columns + x

Walls keep g pinned at 0; every other cell starts at +inf. Use set_wall /
clear_wall when the classification and the score must stay in sync, and
mark() when only the label should change (start/end designation).
"""

from math import inf
from typing import List

from gridpath.core.types import Cell, Coord, BACKGROUND, PATH, WALL, KINDS

# 8-connected offsets, clockwise from north
OFFSETS8 = (
    (0, -1), (1, -1), (1, 0), (1, 1),
    (0, 1), (-1, 1), (-1, 0), (-1, -1),
)


class Grid:
    def __init__(self, columns: int, rows: int):
        for label, v in (("columns", columns), ("rows", rows)):
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"{label} must be an integer, got {v!r}")
            if v <= 0:
                raise ValueError(f"{label} must be positive, got {v}")
        self.columns = columns
        self.rows = rows
        self.cells: List[Cell] = [Cell(x, y) for y in range(rows) for x in range(columns)]

    def __len__(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        return f"Grid(columns={self.columns}, rows={self.rows})"

    # -------------------- addressing --------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.columns and 0 <= y < self.rows

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.columns}x{self.rows} grid")
        return y * self.columns + x

    def coords(self, index: int) -> Coord:
        if not 0 <= index < len(self.cells):
            raise IndexError(f"cell index {index} out of range")
        return (index % self.columns, index // self.columns)

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[self.idx(x, y)]

    # -------------------- classification --------------------

    def mark(self, x: int, y: int, kind: str) -> int:
        """Overwrite a cell's kind and return its index. Scores are untouched."""
        if kind not in KINDS:
            raise ValueError(f"unknown cell kind {kind!r}")
        i = self.idx(x, y)
        self.cells[i].kind = kind
        return i

    def set_wall(self, x: int, y: int) -> int:
        i = self.mark(x, y, WALL)
        self.cells[i].g = 0.0
        return i

    def clear_wall(self, x: int, y: int) -> int:
        i = self.idx(x, y)
        c = self.cells[i]
        if c.kind == WALL:
            c.kind = BACKGROUND
            c.g = inf
        return i

    def find(self, kind: str) -> List[int]:
        return [i for i, c in enumerate(self.cells) if c.kind == kind]

    def reset_scores(self) -> None:
        """Restore the pre-search state: wall g = 0, others +inf, stale PATH labels cleared."""
        for c in self.cells:
            if c.kind == PATH:
                c.kind = BACKGROUND
            c.g = 0.0 if c.kind == WALL else inf
            c.h = 0.0
            c.f = inf

    # -------------------- adjacency --------------------

    def neighbors(self, x: int, y: int) -> List[int]:
        """In-bounds 8-connected neighbour indices, clockwise from north."""
        out: List[int] = []
        for dx, dy in OFFSETS8:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                out.append(ny * self.columns + nx)
        return out
