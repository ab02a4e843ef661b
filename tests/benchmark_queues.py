import os, sys, time, csv
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
from mazes.generator import generate_maze
from planners import QUEUES, ReindeerDijkstra, optimal_cells

OUT_DIR = os.path.join(os.path.dirname(__file__), "out")
os.makedirs(OUT_DIR, exist_ok=True)
CSV_PATH = os.path.join(OUT_DIR, "queue_benchmark.csv")

def run_case(queue, bucket_width, seed, H, W, density, early_exit=True):
    rng = np.random.default_rng(seed)
    grid = generate_maze(H=H, W=W, density=density, rng=rng)
    planner = ReindeerDijkstra(queue=queue, bucket_width=bucket_width, early_exit=early_exit)

    t0 = time.perf_counter()
    res = planner.plan(grid)
    t1 = time.perf_counter()
    cells = optimal_cells(res)
    t2 = time.perf_counter()

    return {
        "queue": queue,
        "bucket_width": bucket_width if queue == "bucket" else 0,
        "early_exit": int(early_exit),
        "seed": seed,
        "H": H, "W": W, "density": density,
        "success": int(res.success),
        "cost": int(res.best_cost) if res.success else -1,
        "cells": len(cells),
        "states_visited": res.states_visited,
        "search_s": t1 - t0,
        "reconstruct_s": t2 - t1,
    }

def main():
    rows = []
    # Tweak these cases as needed
    cases = [
        # seed,  H,   W,   density
        (0,     41,  41,  0.20),
        (1,     81,  81,  0.20),
        (2,     141, 141, 0.15),
        (3,     141, 141, 0.30),
    ]
    widths = [10, 100, 1000]

    for seed, H, W, density in cases:
        for name in sorted(QUEUES):
            for bw in (widths if name == "bucket" else [0]):
                rows.append(run_case(name, bw or 100, seed, H, W, density))

    with open(CSV_PATH, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        w.writeheader()
        w.writerows(rows)

    print(f"Saved: {CSV_PATH}")
    print(f"{'queue':7} {'bw':>5} {'seed':4} {'size':>8} {'succ':4} {'cost':>7} {'cells':>6} {'search[s]':>10}")
    for r in rows:
        print(f"{r['queue']:7} {r['bucket_width']:5d} {r['seed']:4d} {str(r['H'])+'x'+str(r['W']):>8} "
              f"{r['success']:4d} {r['cost']:7d} {r['cells']:6d} {r['search_s']:10.4f}")

if __name__ == "__main__":
    main()
