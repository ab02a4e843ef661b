import os
import numpy as np
import matplotlib.pyplot as plt


def render_maze(grid, cells=None, ax=None, title=None):
    """
    Render a maze Grid.

    Layers:
      - free space (white), walls (dark gray)
      - cells on optimal paths (gold)
      - start (green star), finish (red star)
    """
    H, W = grid.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, W/5), max(3, H/5)), dpi=120)

    rgb = np.ones((H, W, 3), dtype=float)
    rgb[grid.walls] = 0.2
    if cells:
        xs = np.array([c.x for c in cells], dtype=int)
        ys = np.array([c.y for c in cells], dtype=int)
        rgb[ys, xs] = (1.0, 0.8, 0.2)

    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    ax.plot(grid.start.x, grid.start.y, marker="*", markersize=10, markeredgecolor="k", markerfacecolor="lime", lw=0)
    ax.text(grid.start.x+0.2, grid.start.y-0.2, "S", color="k", fontsize=8)
    ax.plot(grid.finish.x, grid.finish.y, marker="*", markersize=10, markeredgecolor="k", markerfacecolor="red", lw=0)
    ax.text(grid.finish.x+0.2, grid.finish.y-0.2, "E", color="k", fontsize=8)

    if title:
        ax.set_title(title, fontsize=10)

    return ax


def save_maze_figure(grid, cells, path, title=None):
    H, W = grid.shape
    fig, ax = plt.subplots(figsize=(max(3, W/5), max(3, H/5)), dpi=120)
    render_maze(grid, cells, ax=ax, title=title)
    fig.tight_layout()
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path
