#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Rebuild minimum-cost paths from a SearchResult's predecessor table.

- enumerate_optimal_paths(): materialises every optimal path (start -> finish).
  The number of paths is exponential in the number of ties, so use `limit`
  on anything larger than a puzzle grid.
- optimal_cells(): distinct cells lying on at least one optimal path, by a
  linear backward walk over the predecessor graph.
- count_optimal_paths(): number of optimal paths, by dynamic programming.

All three work with explicit stacks / ordering, never recursion.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Set

from mazes.grid import Cell
from .reindeer_dijkstra import SearchInvariantError, SearchResult
from .state_space import State


def _targets(result: SearchResult, finish_state: Optional[State]) -> List[State]:
    if finish_state is not None:
        # unreached states have no paths to rebuild
        if result.distance(finish_state) == float("inf"):
            return []
        # a tentative distance may still be missing tied predecessors
        if not result.visited[finish_state.index]:
            raise ValueError(
                f"{finish_state} was not settled by the search; "
                f"plan with early_exit=False to rebuild paths to it"
            )
        return [finish_state]
    return list(result.finish_states)


def _preds_of(result: SearchResult, state: State) -> Set[State]:
    preds = result.predecessors.get(state)
    if not preds:
        raise SearchInvariantError(f"{state} is not the start but has no predecessors")
    return preds


def enumerate_optimal_paths(result: SearchResult,
                            finish_state: Optional[State] = None,
                            limit: Optional[int] = None) -> List[List[State]]:
    """
    Every minimum-cost state sequence from the start to `finish_state`
    (default: to each optimal finish heading). Empty when unreachable;
    ValueError when `finish_state` was reached but never settled.
    """
    paths: List[List[State]] = []
    stack = [(s, (s,)) for s in _targets(result, finish_state)]
    while stack:
        state, tail = stack.pop()
        if state == result.start:
            paths.append(list(tail))
            if limit is not None and len(paths) >= limit:
                break
            continue
        for p in _preds_of(result, state):
            stack.append((p, (p,) + tail))
    return paths


def _backward_states(result: SearchResult, targets: Iterable[State]) -> Set[State]:
    seen: Set[State] = set()
    stack = list(targets)
    while stack:
        state = stack.pop()
        if state in seen:
            continue
        seen.add(state)
        if state == result.start:
            continue
        stack.extend(_preds_of(result, state))
    return seen


def optimal_cells(result: SearchResult,
                  finish_state: Optional[State] = None,
                  method: str = "walk") -> Set[Cell]:
    """Distinct cells on at least one optimal path."""
    targets = _targets(result, finish_state)
    if method == "walk":
        return {s.cell for s in _backward_states(result, targets)}
    if method == "enumerate":
        return {s.cell for path in enumerate_optimal_paths(result, finish_state) for s in path}
    raise ValueError(f"Unknown method '{method}'. Available: ['enumerate', 'walk']")


def count_optimal_paths(result: SearchResult,
                        finish_state: Optional[State] = None) -> int:
    targets = _targets(result, finish_state)
    if not targets:
        return 0
    states = _backward_states(result, targets)
    # Predecessors are strictly cheaper, so increasing cost is a topological order.
    order = sorted(states, key=result.distance)
    counts: Dict[State, int] = {}
    for state in order:
        if state == result.start:
            counts[state] = 1
        else:
            counts[state] = sum(counts[p] for p in result.predecessors[state])
    return sum(counts[t] for t in targets)
