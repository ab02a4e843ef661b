#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Character maze -> occupancy grid with a start and a finish cell.

Grid convention: walls[y, x] == True means wall (blocked), False means free.
Coordinates are (x, y) with y growing downwards, so a cell indexes the
array as walls[cell.y, cell.x].

Input format:
    '#'  wall
    'S'  start (entered facing East)
    'E'  finish
    anything else is free space
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

WALL = "#"
START = "S"
FINISH = "E"


class MalformedGridError(ValueError):
    """Raised when the maze text cannot be turned into a valid Grid."""


class Cell(NamedTuple):
    x: int
    y: int


class Heading(Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self.value]

    @property
    def symbol(self) -> str:
        return "^>v<"[self.value]

    def left(self) -> "Heading":
        return Heading((self.value - 1) % 4)

    def right(self) -> "Heading":
        return Heading((self.value + 1) % 4)


# (dx, dy) indexed by Heading.value
_DELTAS = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass
class Grid:
    """Read-only maze: wall mask plus the two distinguished cells."""
    walls: np.ndarray       # (H, W) bool array: True = wall, False = free
    start: Cell
    finish: Cell

    @property
    def shape(self) -> Tuple[int, int]:
        return self.walls.shape

    @property
    def H(self) -> int:
        return self.walls.shape[0]

    @property
    def W(self) -> int:
        return self.walls.shape[1]

    @property
    def num_free(self) -> int:
        return int((~self.walls).sum())

    def in_bounds(self, cell: Cell) -> bool:
        return (0 <= cell.x < self.W) and (0 <= cell.y < self.H)

    def is_free(self, cell: Cell) -> bool:
        """False for walls and for anything outside the grid."""
        if not self.in_bounds(cell):
            return False
        return not self.walls[cell.y, cell.x]

    def free_cells(self) -> Iterator[Cell]:
        for y, x in np.argwhere(~self.walls):
            yield Cell(int(x), int(y))

    def to_text(self, marks: Optional[dict] = None) -> str:
        """
        Render back to the input alphabet. `marks` maps Cell -> character and
        overrides the free-space character (e.g. 'O' for optimal cells).
        """
        marks = marks or {}
        rows: List[str] = []
        for y in range(self.H):
            row = []
            for x in range(self.W):
                cell = Cell(x, y)
                if self.walls[y, x]:
                    row.append(WALL)
                elif cell == self.start:
                    row.append(START)
                elif cell == self.finish:
                    row.append(FINISH)
                else:
                    row.append(marks.get(cell, "."))
            rows.append("".join(row))
        return "\n".join(rows)


def parse_grid(text: str, strict: bool = True) -> Grid:
    """
    Parse maze text into a Grid.

    With strict=True every row must have the same width; otherwise short rows
    are padded with walls. Exactly one 'S' and one 'E' are required.
    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise MalformedGridError("Empty maze")

    widths = {len(line) for line in lines}
    if strict and len(widths) > 1:
        raise MalformedGridError(f"Rows have inconsistent widths: {sorted(widths)}")
    H, W = len(lines), max(widths)

    walls = np.ones((H, W), dtype=bool)
    starts: List[Cell] = []
    finishes: List[Cell] = []
    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            if ch == WALL:
                continue
            walls[y, x] = False
            if ch == START:
                starts.append(Cell(x, y))
            elif ch == FINISH:
                finishes.append(Cell(x, y))

    if len(starts) != 1:
        raise MalformedGridError(f"Expected exactly one '{START}', found {len(starts)}")
    if len(finishes) != 1:
        raise MalformedGridError(f"Expected exactly one '{FINISH}', found {len(finishes)}")

    return Grid(walls=walls, start=starts[0], finish=finishes[0])


def load_grid(path: str, strict: bool = True) -> Grid:
    """Read a UTF-8 maze file ('-' reads stdin) and parse it."""
    if path == "-":
        return parse_grid(sys.stdin.read(), strict=strict)
    with open(path, "r", encoding="utf-8") as f:
        return parse_grid(f.read(), strict=strict)
