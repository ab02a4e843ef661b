#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random reindeer mazes for benchmarks and randomized tests.

- Walled border, independent random interior walls at `density`.
- Start in the bottom-left interior corner, finish in the top-right one,
  matching the layout of the puzzle inputs.
- Reproducibility: explicit np.random.Generator.

No connectivity guarantee: a dense maze may leave the finish unreachable,
which is a valid case for the solver.
"""

from __future__ import annotations
from typing import Optional

import numpy as np

from .grid import Cell, Grid


def generate_maze(H: int = 41, W: int = 41, density: float = 0.25,
                  rng: Optional[np.random.Generator] = None) -> Grid:
    if H < 3 or W < 4:
        raise ValueError(f"Maze must be at least 3x4, got {H}x{W}")
    if not (0.0 <= density <= 1.0):
        raise ValueError(f"density must be in [0, 1], got {density}")
    rng = rng if rng is not None else np.random.default_rng()

    walls = rng.random((H, W)) < density
    walls[0, :] = walls[-1, :] = True
    walls[:, 0] = walls[:, -1] = True

    start = Cell(1, H - 2)
    finish = Cell(W - 2, 1)
    walls[start.y, start.x] = False
    walls[finish.y, finish.x] = False
    return Grid(walls=walls, start=start, finish=finish)
