#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest

from mazes.generator import generate_maze
from planners import (
    ReindeerDijkstra,
    count_optimal_paths,
    edge_cost,
    enumerate_optimal_paths,
    optimal_cells,
)


def test_generator_layout_is_reproducible():
    a = generate_maze(H=15, W=21, density=0.3, rng=np.random.default_rng(5))
    b = generate_maze(H=15, W=21, density=0.3, rng=np.random.default_rng(5))
    assert np.array_equal(a.walls, b.walls)
    assert a.shape == (15, 21)
    assert a.walls[0, :].all() and a.walls[-1, :].all()
    assert a.walls[:, 0].all() and a.walls[:, -1].all()
    assert a.is_free(a.start) and a.is_free(a.finish)


def test_generator_rejects_bad_arguments():
    with pytest.raises(ValueError):
        generate_maze(H=2, W=10)
    with pytest.raises(ValueError):
        generate_maze(density=1.5)


@pytest.mark.parametrize("seed", range(12))
def test_random_mazes_bucket_matches_heap(seed):
    rng = np.random.default_rng(seed)
    grid = generate_maze(H=21, W=21, density=0.28, rng=rng)
    a = ReindeerDijkstra(queue="bucket", bucket_width=50).plan(grid)
    b = ReindeerDijkstra(queue="heap").plan(grid)
    assert a.success == b.success
    assert a.best_cost == b.best_cost
    assert optimal_cells(a) == optimal_cells(b)
    assert count_optimal_paths(a) == count_optimal_paths(b)


@pytest.mark.parametrize("seed", range(12))
def test_random_mazes_invariants(seed):
    rng = np.random.default_rng(100 + seed)
    grid = generate_maze(H=17, W=17, density=0.25, rng=rng)
    res = ReindeerDijkstra().plan(grid)
    for v, preds in res.predecessors.items():
        for u in preds:
            assert res.distance(v) == res.distance(u) + edge_cost(u, v)
    if not res.success:
        assert optimal_cells(res) == set()
        return
    cells = optimal_cells(res)
    assert grid.start in cells and grid.finish in cells
    assert all(grid.is_free(c) for c in cells)
    if count_optimal_paths(res) <= 500:
        assert optimal_cells(res, method="enumerate") == cells
        for p in enumerate_optimal_paths(res):
            assert sum(edge_cost(u, v) for u, v in zip(p, p[1:])) == res.best_cost
