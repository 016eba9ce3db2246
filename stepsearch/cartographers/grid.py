"""
Grid cartographer for continuous space.
Nodes are spaced equally apart in the eight cardinal and diagonal directions.
"""

from __future__ import annotations

from typing import List, Tuple

from stepsearch.core.algebra import Point2D, distance_xy
from stepsearch.core.cartographer import Cartographer, N, NodeFactory, SpaceTester

GRID_OFFSETS = [(1, 0), (-1, 0), (0, 1), (0, -1),
                (1, 1), (1, -1), (-1, 1), (-1, -1)]


class GridCartographer(Cartographer[N]):
    def __init__(self, goal_node: N, is_space_available: SpaceTester, step_size: float = 1.0,
                 make_node: NodeFactory = Point2D, origin=None) -> None:
        """
        Initialize a grid cartographer.

        Args:
            goal_node: Node to reach. Nodes expose `x` and `y` attributes
            is_space_available: Predicate rejecting nodes in blocked space
            step_size: Distance between neighbouring nodes along each axis
            make_node: Factory building a node from (x, y)
            origin: Lattice anchor with `x` and `y` attributes, (0, 0) if None.
                Neighbours are placed on the lattice, so a start node off it
                steps onto it.
        """
        if step_size <= 0.0:
            raise ValueError("step_size must be positive")

        self.goal_node = goal_node
        self.is_space_available = is_space_available
        self.step_size = float(step_size)
        self.make_node = make_node
        self.origin_x = 0.0 if origin is None else float(origin.x)
        self.origin_y = 0.0 if origin is None else float(origin.y)

    def lattice_index(self, node: N) -> Tuple[int, int]:
        return (round((node.x - self.origin_x) / self.step_size),
                round((node.y - self.origin_y) / self.step_size))

    def lattice_node(self, i: int, j: int) -> N:
        # Built from integer indices so every route to a cell yields equal coordinates
        return self.make_node(self.origin_x + i * self.step_size, self.origin_y + j * self.step_size)

    def estimate_cost_to_goal(self, node: N) -> float:
        return distance_xy(node, self.goal_node)

    def get_adjacent_nodes(self, node: N) -> List[N]:
        if distance_xy(node, self.goal_node) <= self.step_size:
            return [self.goal_node]

        i, j = self.lattice_index(node)
        adjacent_nodes = []
        for dx, dy in GRID_OFFSETS:
            adjacent_node = self.lattice_node(i + dx, j + dy)
            if self.is_space_available(adjacent_node):
                adjacent_nodes.append(adjacent_node)
        return adjacent_nodes

    def get_cost_to_adjacent_node(self, from_node: N, to_node: N) -> float:
        return distance_xy(from_node, to_node)

    def is_goal_node(self, node: N) -> bool:
        return distance_xy(node, self.goal_node) == 0.0
