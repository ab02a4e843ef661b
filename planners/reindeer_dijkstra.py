#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tie-preserving Dijkstra over (cell, heading) states.

- Start state is (grid.start, EAST) at cost 0.
- Edges: forward 1 (only into free cells), turn left/right 1000.
- Every predecessor that reaches a state at its minimal cost is kept, so all
  minimum-cost paths can be rebuilt afterwards (see reconstruct.py).
- The answer is the minimum over the four headings at the finish cell.

Termination: the loop stops once the popped cost exceeds the best finish cost
seen so far. By then every state at the winning cost, under all four finish
headings, is settled and its tied predecessors are recorded. With
early_exit=False the frontier is drained completely.

Returns a SearchResult; an unreachable finish is reported through
SearchResult.success / cost(), never raised from plan().
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Set

import numpy as np
from tqdm import tqdm

from mazes.grid import Grid, Heading
from .state_space import State, edges

START_HEADING = Heading.EAST


class NoPathError(RuntimeError):
    """The finish cell cannot be reached from the start under any heading."""


class SearchInvariantError(RuntimeError):
    """Internal consistency check failed; indicates a bug, never bad input."""


@dataclass
class SearchResult:
    grid: Grid
    start: State
    distances: np.ndarray                   # (H, W, 4) float, inf = unreached
    predecessors: Dict[State, Set[State]]   # tied best predecessors per state
    visited: np.ndarray                     # (H, W, 4) bool, finalized states
    best_cost: float                        # inf when unreachable
    finish_states: List[State]              # finish states at best_cost

    @property
    def success(self) -> bool:
        return bool(np.isfinite(self.best_cost))

    @property
    def states_visited(self) -> int:
        return int(self.visited.sum())

    def distance(self, state: State) -> float:
        if not self.grid.in_bounds(state.cell):
            return float("inf")
        return float(self.distances[state.index])

    def cost(self) -> int:
        if not self.success:
            raise NoPathError(
                f"Finish {tuple(self.grid.finish)} unreachable from start {tuple(self.grid.start)}"
            )
        return int(self.best_cost)

    def summary(self) -> Dict:
        return {
            "success": self.success,
            "cost": int(self.best_cost) if self.success else None,
            "finish_headings": [s.heading.name for s in self.finish_states],
            "states_visited": self.states_visited,
        }


class ReindeerDijkstra:
    def __init__(self, queue: str = "bucket", bucket_width: int = 100,
                 early_exit: bool = True, progress: bool = False):
        self.queue = queue
        self.bucket_width = bucket_width
        self.early_exit = early_exit
        self.progress = progress

    def _make_queue(self):
        from . import get_queue  # lazy import
        return get_queue(self.queue, bucket_width=self.bucket_width)

    def plan(self, grid: Grid) -> SearchResult:
        H, W = grid.shape
        dist = np.full((H, W, 4), np.inf, dtype=np.float64)
        visited = np.zeros((H, W, 4), dtype=bool)
        preds: Dict[State, Set[State]] = {}

        start = State(grid.start, START_HEADING)
        dist[start.index] = 0.0
        pq = self._make_queue()
        pq.insert_or_update(start, 0)

        best = np.inf
        with tqdm(total=4 * grid.num_free, desc="States explored",
                  disable=not self.progress, leave=False) as pbar:
            while pq:
                u = pq.pop_minimum()
                if u is None:
                    break
                if visited[u.index]:
                    continue
                d = dist[u.index]
                if not np.isfinite(d):
                    raise SearchInvariantError(f"Popped {u} with no recorded distance")
                if self.early_exit and d > best:
                    break
                visited[u.index] = True
                pbar.update(1)

                if u.cell == grid.finish and d < best:
                    best = d

                for v, step in edges(grid, u):
                    nd = d + step
                    old = dist[v.index]
                    if nd < old:
                        dist[v.index] = nd
                        preds[v] = {u}
                        if not visited[v.index]:
                            pq.insert_or_update(v, nd)
                    elif nd == old:
                        preds.setdefault(v, set()).add(u)

        finish_states = []
        if np.isfinite(best):
            finish_states = [State(grid.finish, h) for h in Heading
                             if dist[grid.finish.y, grid.finish.x, h.value] == best]

        return SearchResult(
            grid=grid,
            start=start,
            distances=dist,
            predecessors=preds,
            visited=visited,
            best_cost=float(best),
            finish_states=finish_states,
        )
