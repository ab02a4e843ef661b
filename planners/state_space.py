#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Search states for the reindeer maze: (cell, heading).
- Moving forward one cell costs 1.
- Turning 90 degrees in place costs 1000.
The same cell under two headings is two different states.
"""

from __future__ import annotations
from typing import Iterator, NamedTuple, Tuple

from mazes.grid import Cell, Grid, Heading

FORWARD_COST = 1
TURN_COST = 1000


class State(NamedTuple):
    cell: Cell
    heading: Heading

    @property
    def index(self) -> Tuple[int, int, int]:
        """Index into (H, W, 4) tables."""
        return (self.cell.y, self.cell.x, self.heading.value)


class Neighbors(NamedTuple):
    forward: State      # candidate only; may be a wall or off the grid
    turn_left: State
    turn_right: State


def neighbors(state: State) -> Neighbors:
    dx, dy = state.heading.delta
    cell, heading = state
    return Neighbors(
        forward=State(Cell(cell.x + dx, cell.y + dy), heading),
        turn_left=State(cell, heading.left()),
        turn_right=State(cell, heading.right()),
    )


def edges(grid: Grid, state: State) -> Iterator[Tuple[State, int]]:
    """Traversable (next_state, cost) pairs out of `state`."""
    nb = neighbors(state)
    if grid.is_free(nb.forward.cell):
        yield nb.forward, FORWARD_COST
    yield nb.turn_left, TURN_COST
    yield nb.turn_right, TURN_COST


def edge_cost(u: State, v: State) -> int:
    """Cost of the single edge u -> v; ValueError if v is not adjacent to u."""
    nb = neighbors(u)
    if v == nb.forward:
        return FORWARD_COST
    if v == nb.turn_left or v == nb.turn_right:
        return TURN_COST
    raise ValueError(f"{v} is not reachable from {u} in one step")
