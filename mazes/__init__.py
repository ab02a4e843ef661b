# -*- coding: utf-8 -*-
"""
Maze grids parsed from text.
Exposes:
- Grid, Cell, Heading (dataclass / value types from grid.py)
- parse_grid(...), load_grid(...)
- generate_maze(...)  (random mazes, from generator.py)
- MalformedGridError
"""

from __future__ import annotations

from .grid import Cell, Grid, Heading, MalformedGridError, load_grid, parse_grid
from .generator import generate_maze

__all__ = [
    "Cell",
    "Grid",
    "Heading",
    "MalformedGridError",
    "generate_maze",
    "load_grid",
    "parse_grid",
]
