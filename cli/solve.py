#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
solve.py
--------
Solve one reindeer maze and print two answers, one per line:
  1. the minimum cost from S to E (forward = 1, turn = 1000)
  2. the number of distinct cells on at least one minimum-cost path

An unreachable finish prints "unreachable" for both answers.

Example:
    python -m cli.solve input.txt --queue bucket --bucket-width 100 \
        --plot results/maze.png --verbose --show

Exit status: 0 on success (including unreachable), 1 on a malformed maze or
unreadable file.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from mazes.grid import MalformedGridError, load_grid
from planners import QUEUES, NoPathError, ReindeerDijkstra, count_optimal_paths, optimal_cells


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Minimum-cost reindeer path through a maze.")
    ap.add_argument("input", nargs="?", default="input.txt",
                    help="Maze file ('-' reads stdin; default: input.txt)")
    ap.add_argument("--queue", type=str, default="bucket", choices=sorted(QUEUES),
                    help="Priority queue implementation (default: bucket)")
    ap.add_argument("--bucket-width", type=int, default=100,
                    help="Cost width of one bucket in the bucket queue")
    ap.add_argument("--no-early-exit", action="store_true",
                    help="Drain the whole frontier instead of stopping after the finish settles")
    ap.add_argument("--lenient", action="store_true",
                    help="Pad ragged rows with walls instead of rejecting them")
    ap.add_argument("--progress", action="store_true", help="Show a progress bar while searching")
    ap.add_argument("--verbose", action="store_true", help="Print a search summary")
    ap.add_argument("--show", action="store_true",
                    help="Print the maze with optimal cells marked 'O'")
    ap.add_argument("--plot", type=str, default=None,
                    help="Save a figure of the maze with optimal cells highlighted")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.bucket_width <= 0:
        print(f"Error: --bucket-width must be positive, got {args.bucket_width}", file=sys.stderr)
        return 1

    try:
        grid = load_grid(args.input, strict=not args.lenient)
    except (OSError, MalformedGridError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    planner = ReindeerDijkstra(
        queue=args.queue,
        bucket_width=args.bucket_width,
        early_exit=not args.no_early_exit,
        progress=args.progress,
    )
    result = planner.plan(grid)

    try:
        cost = result.cost()
    except NoPathError as e:
        print("unreachable")
        print("unreachable")
        if args.verbose:
            print(f"{e}; states visited: {result.summary()['states_visited']}")
        return 0

    cells = optimal_cells(result)
    print(cost)
    print(len(cells))

    if args.verbose:
        s = result.summary()
        print(f"states visited: {s['states_visited']}; "
              f"finish headings: {','.join(s['finish_headings'])}; "
              f"optimal paths: {count_optimal_paths(result)}")

    if args.show:
        print(grid.to_text(marks={c: "O" for c in cells}))

    if args.plot:
        from tools.plot_maze import save_maze_figure  # lazy import (matplotlib)
        out = save_maze_figure(grid, cells, args.plot, title=f"cost {cost}, {len(cells)} cells")
        print(f"Saved: {out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
