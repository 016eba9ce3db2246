from __future__ import annotations

from typing import Iterable, List, Optional, Tuple
import numpy as np

EMPTY = 0
WALL = 1
BARRIER = 2

CARVE_DIRECTIONS = [(-2, 0), (2, 0), (0, -2), (0, 2)]
NEIGHBOUR_DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1), (0, -1),
                        (0, 1), (1, -1), (1, 0), (1, 1)]


def get_maze(cells_wide: int = 10, cells_high: int = 10, rng: np.random.Generator = None) -> np.ndarray:
    """
    Generate a perfect maze (exactly one route between any two rooms).

    Rooms sit on odd (row, col) indices of a (2 * cells_high + 1, 2 * cells_wide + 1)
    grid; walls are WALL and open space is EMPTY. The outer border is always wall.
    """
    if cells_wide < 1 or cells_high < 1:
        raise ValueError("Maze needs at least one room in each direction")

    if rng is None:
        rng = np.random.default_rng()

    rows = 2 * cells_high + 1
    cols = 2 * cells_wide + 1
    maze = np.full((rows, cols), WALL, dtype=int)

    start = (2 * int(rng.integers(cells_high)) + 1, 2 * int(rng.integers(cells_wide)) + 1)
    maze[start] = EMPTY
    stack = [start]

    # Iterative depth-first carving
    while stack:
        row, col = stack[-1]
        unvisited = []
        for dr, dc in CARVE_DIRECTIONS:
            nr, nc = row + dr, col + dc
            if 0 < nr < rows - 1 and 0 < nc < cols - 1 and maze[nr, nc] == WALL:
                unvisited.append((nr, nc))

        if not unvisited:
            stack.pop()
            continue

        next_row, next_col = unvisited[int(rng.integers(len(unvisited)))]
        maze[(row + next_row) // 2, (col + next_col) // 2] = EMPTY
        maze[next_row, next_col] = EMPTY
        stack.append((next_row, next_col))

    return maze


def room_to_cell(room_row: int, room_col: int) -> Tuple[int, int]:
    return 2 * room_row + 1, 2 * room_col + 1


def add_barrier_around_walls(world: np.ndarray) -> np.ndarray:
    """Mark free cells touching a wall (8-neighbourhood) as BARRIER."""
    h, w = world.shape
    result = world.copy()
    walls = np.argwhere(world == WALL)
    for x, y in walls:
        for dx, dy in NEIGHBOUR_DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < h and 0 <= ny < w and result[nx, ny] == EMPTY:
                result[nx, ny] = BARRIER
    return result


def free_cells(world: np.ndarray) -> List[Tuple[int, int]]:
    return [(int(r), int(c)) for r, c in np.argwhere(world == EMPTY)]


def render_maze(grid: np.ndarray, path: Optional[Iterable[Tuple[int, int]]] = None) -> str:
    wall_char = "██"
    near_char = "░░"
    path_char = "••"
    empty_char = "  "

    on_path = set(path) if path is not None else set()
    h, w = grid.shape
    lines = []
    for x in range(h):
        row_chars = []
        for y in range(w):
            val = grid[x, y]
            if (x, y) in on_path:
                row_chars.append(path_char)
            elif val == WALL:
                row_chars.append(wall_char)
            elif val == BARRIER:
                row_chars.append(near_char)
            else:
                row_chars.append(empty_char)
        lines.append("".join(row_chars))
    return "\n".join(lines)


def print_maze(grid: np.ndarray, path: Optional[Iterable[Tuple[int, int]]] = None) -> None:
    print(render_maze(grid, path))
