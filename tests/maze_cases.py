import os

DATA_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "data"))
EXAMPLE_SMALL = os.path.join(DATA_DIR, "example_small.txt")
EXAMPLE_LARGE = os.path.join(DATA_DIR, "example_large.txt")

# East 4, turn left, north 4: 4 + 1000 + 4
SINGLE_TURN = "\n".join([
    "#######",
    "#####E#",
    "#####.#",
    "#####.#",
    "#####.#",
    "#S....#",
    "#######",
])

# S and E split by a wall column
UNREACHABLE = "\n".join([
    "#####",
    "#S#E#",
    "#####",
])

# Two mirror-image detours, each 3 turns and 8 moves. They arrive at E
# under different headings (SOUTH over the top, NORTH along the bottom).
SYMMETRIC = "\n".join([
    "#######",
    "#.....#",
    "#.###.#",
    "#S###E#",
    "#.###.#",
    "#.....#",
    "#######",
])

# Straight corridor, no turns
STRAIGHT = "\n".join([
    "#######",
    "#S...E#",
    "#######",
])
