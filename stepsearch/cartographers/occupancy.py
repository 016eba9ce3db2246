"""
Cartographer over a numpy occupancy grid.

Nodes are (row, col) tuples. A cell is free when its value is 0; any other
value (walls, inflated margins) blocks it.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from stepsearch.core.algebra import Point2D
from stepsearch.core.astar import AStar, AStarParams
from stepsearch.core.cartographer import Cartographer
from stepsearch.core.console import RED_COLOR, log

Cell = Tuple[int, int]

STRAIGHT_OFFSETS = [(0, 1), (0, -1), (1, 0), (-1, 0)]
DIAGONAL_OFFSETS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]

PLANNER_NAME = "A*Algorithm"


class OccupancyGridCartographer(Cartographer[Cell]):
    def __init__(self, grid, goal: Cell, diagonal: bool = True, cut_corners: bool = False) -> None:
        """
        Args:
            grid: 2D array-like, 0 = free space
            goal: Goal cell (row, col)
            diagonal: Allow the four diagonal moves
            cut_corners: Allow diagonal moves that squeeze between two blocked cells
        """
        self.grid = np.asarray(grid)
        if self.grid.ndim != 2:
            raise ValueError("grid must be two-dimensional")

        self.goal = (int(goal[0]), int(goal[1]))
        self.diagonal = diagonal
        self.cut_corners = cut_corners

    def is_valid(self, row: int, col: int) -> bool:
        return 0 <= row < self.grid.shape[0] and 0 <= col < self.grid.shape[1]

    def is_unblocked(self, row: int, col: int) -> bool:
        return self.grid[row, col] == 0

    def is_free(self, cell: Cell) -> bool:
        return self.is_valid(cell[0], cell[1]) and self.is_unblocked(cell[0], cell[1])

    def estimate_cost_to_goal(self, node: Cell) -> float:
        return math.hypot(node[0] - self.goal[0], node[1] - self.goal[1])

    def get_adjacent_nodes(self, node: Cell) -> List[Cell]:
        row, col = node
        adjacent_nodes = []
        for dr, dc in STRAIGHT_OFFSETS:
            if self.is_free((row + dr, col + dc)):
                adjacent_nodes.append((row + dr, col + dc))

        if self.diagonal:
            for dr, dc in DIAGONAL_OFFSETS:
                if not self.is_free((row + dr, col + dc)):
                    continue
                if not self.cut_corners and not (self.is_free((row + dr, col)) or self.is_free((row, col + dc))):
                    continue
                adjacent_nodes.append((row + dr, col + dc))

        return adjacent_nodes

    def get_cost_to_adjacent_node(self, from_node: Cell, to_node: Cell) -> float:
        return math.hypot(to_node[0] - from_node[0], to_node[1] - from_node[1])

    def is_goal_node(self, node: Cell) -> bool:
        return node == self.goal


def a_star_search(grid, src: Sequence[int], dest: Sequence[int], diagonal: bool = True,
                  loop_count_max: Optional[int] = None) -> Optional[List[Cell]]:
    """
    Plan a path between two free cells of an occupancy grid.

    Args:
        grid: 2D array-like, 0 = free space
        src: Source cell (row, col)
        dest: Destination cell (row, col)
        diagonal: Allow diagonal moves
        loop_count_max: Optional cap on search steps

    Returns:
        List of cells from src to dest (both included), or None if the input
        is invalid or no path exists
    """
    src = (int(src[0]), int(src[1]))
    dest = (int(dest[0]), int(dest[1]))
    cartographer = OccupancyGridCartographer(grid, dest, diagonal=diagonal)

    if not cartographer.is_valid(*src) or not cartographer.is_valid(*dest):
        log(PLANNER_NAME, "Source or destination is invalid", RED_COLOR, error=True)
        return None

    if not cartographer.is_unblocked(*src) or not cartographer.is_unblocked(*dest):
        log(PLANNER_NAME, "Source or the destination is blocked", RED_COLOR, error=True)
        return None

    if src == dest:
        log(PLANNER_NAME, "The start position IS the end position!", RED_COLOR, error=True)
        return None

    astar = AStar(cartographer, AStarParams(verbose=False, loop_count_max=loop_count_max))
    if not astar.search(src):
        log(PLANNER_NAME, "Failed to find the destination cell", RED_COLOR, error=True)
        return None

    log(PLANNER_NAME, "Path computed")
    return [src] + astar.get_path()


def cell_to_world(row: int, col: int, rows: int, cols: int, cell_size: float) -> Point2D:
    """Centre of a cell, with the grid centred on the world origin and row 0 on top."""
    origin_x = -cols * cell_size / 2.0
    origin_y = rows * cell_size / 2.0
    return Point2D(origin_x + (col + 0.5) * cell_size, origin_y - (row + 0.5) * cell_size)


def world_to_cell(point, rows: int, cols: int, cell_size: float) -> Cell:
    """Inverse of `cell_to_world`; the result may lie outside the grid."""
    origin_x = -cols * cell_size / 2.0
    origin_y = rows * cell_size / 2.0
    col = int(math.floor((point.x - origin_x) / cell_size))
    row = int(math.floor((origin_y - point.y) / cell_size))
    return row, col


def path_to_waypoints(grid, path: Optional[Sequence[Cell]], cell_size: float) -> List[Point2D]:
    if not path:
        return []
    rows, cols = np.asarray(grid).shape
    return [cell_to_world(r, c, rows, cols, cell_size) for (r, c) in path]
