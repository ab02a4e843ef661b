# -*- coding: utf-8 -*-
"""
Reindeer-maze search with a unified API:
ReindeerDijkstra(...).plan(grid: Grid) -> SearchResult
followed by optimal_cells(result) / enumerate_optimal_paths(result).
"""

from __future__ import annotations
from typing import Any, Dict, Type

from .bucket_queue import BucketQueue
from .heap_queue import HeapQueue

# Mapping used by factories/CLIs
QUEUES: Dict[str, Type] = {
    "bucket": BucketQueue,
    "heap": HeapQueue,
}


def get_queue(name: str, **kwargs) -> Any:
    """
    Factory: instantiate a priority queue by name ('bucket' or 'heap').
    kwargs are passed to the constructor (e.g., bucket_width=100).
    """
    name = name.strip().lower()
    if name not in QUEUES:
        raise ValueError(f"Unknown queue '{name}'. Available: {sorted(QUEUES)}")
    return QUEUES[name](**kwargs)


from .state_space import FORWARD_COST, TURN_COST, State, neighbors, edge_cost  # noqa: E402
from .reindeer_dijkstra import (  # noqa: E402
    NoPathError,
    ReindeerDijkstra,
    SearchInvariantError,
    SearchResult,
)
from .reconstruct import count_optimal_paths, enumerate_optimal_paths, optimal_cells  # noqa: E402

__all__ = [
    "BucketQueue",
    "HeapQueue",
    "QUEUES",
    "get_queue",
    "FORWARD_COST",
    "TURN_COST",
    "State",
    "neighbors",
    "edge_cost",
    "NoPathError",
    "ReindeerDijkstra",
    "SearchInvariantError",
    "SearchResult",
    "count_optimal_paths",
    "enumerate_optimal_paths",
    "optimal_cells",
]
