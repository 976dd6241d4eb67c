# maze_data.py
import random
from collections import namedtuple
from enum import Enum


class Cell(Enum):
    WALL = "1"
    PATH = "0"


class ConfigurationError(ValueError):
    """Maze dimensions that cannot hold an odd carving lattice."""


# Arah: kanan, kiri, bawah, atas (bergerak 2 sel sekaligus)
CARVE_STEPS = [(2, 0), (-2, 0), (0, 2), (0, -2)]

# One cell per key press
DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

MazeSession = namedtuple("MazeSession", ["grid", "position", "goal"])


def start_cell(width, height):
    """The start is always (1, 1); the dimensions are accepted to mirror goal_cell."""
    return (1, 1)


def goal_cell(width, height):
    return (width - 2, height - 2)


def _check_dimension(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < 3:
        raise ConfigurationError(f"{name} must be at least 3, got {value}")
    if value % 2 == 0:
        raise ConfigurationError(f"{name} must be odd, got {value}")


def generate_maze(width=21, height=21, rng=None, seed=None):
    """
    Carve a perfect maze with a randomized depth-first worklist.

    Every lattice cell (odd x, odd y) ends up as PATH and is joined to the
    cell it was reached from by exactly one carved midpoint, so the PATH
    cells form a single tree rooted at the start.

    Popped cells are never pushed back: each one gets a single pass over
    its four neighbours in shuffled order. Neighbours carved earlier in
    the same pass are already PATH when later directions are checked.

    Pass ``rng`` (anything with ``shuffle``) or ``seed`` for repeatable
    mazes. Returns the grid as a tuple of row tuples, indexed [y][x].
    """
    _check_dimension("width", width)
    _check_dimension("height", height)

    if rng is None:
        rng = random.Random(seed) if seed is not None else random

    # Buat semua sel menjadi dinding
    maze = [[Cell.WALL for _ in range(width)] for _ in range(height)]

    start_x, start_y = start_cell(width, height)
    end_x, end_y = goal_cell(width, height)

    maze[start_y][start_x] = Cell.PATH
    stack = [(start_x, start_y)]

    while stack:
        x, y = stack.pop()

        directions = list(CARVE_STEPS)
        rng.shuffle(directions)

        for dx, dy in directions:
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height and maze[ny][nx] is Cell.WALL:
                maze[ny][nx] = Cell.PATH
                # Buka jalan antara sel saat ini dan sel tujuan
                maze[y + dy // 2][x + dx // 2] = Cell.PATH
                stack.append((nx, ny))

    # Pastikan end cell adalah jalan
    maze[end_y][end_x] = Cell.PATH

    return tuple(tuple(row) for row in maze)


def can_move_to(grid, coordinate):
    """True if ``coordinate`` (x, y) is inside ``grid`` and on a PATH cell."""
    x, y = coordinate
    if not grid or not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
        return False
    return grid[y][x] is Cell.PATH


def new_session(width=21, height=21, rng=None, seed=None):
    grid = generate_maze(width, height, rng=rng, seed=seed)
    return MazeSession(
        grid=grid,
        position=start_cell(width, height),
        goal=goal_cell(width, height),
    )


def handle_directional_input(session, direction):
    """
    Apply one key press to ``session`` and return the resulting session.

    The player moves a single cell when the guard allows it; otherwise the
    same session comes back untouched.
    """
    try:
        dx, dy = DIRECTIONS[direction]
    except KeyError:
        raise ValueError(f"unknown direction {direction!r}") from None

    x, y = session.position
    candidate = (x + dx, y + dy)
    if not can_move_to(session.grid, candidate):
        return session
    return session._replace(position=candidate)


def is_goal_reached(session):
    return session.position == session.goal


def maze_to_rows(grid, start=None, goal=None, player=None):
    """
    1 = dinding, 0 = jalan, S = start, E = end, P = pemain
    """
    rows = [[cell.value for cell in row] for row in grid]
    for marker, coordinate in (("S", start), ("E", goal), ("P", player)):
        if coordinate is not None:
            x, y = coordinate
            rows[y][x] = marker
    return ["".join(row) for row in rows]


# Default ukuran cell (digunakan di main.py)
CELL_SIZE = 24
