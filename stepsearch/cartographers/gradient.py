"""
Gradient cartographer for continuous space.

Candidate steps are sampled at equally spaced headings around a node, the
first one pointing straight at the goal. The step size grows with the
distance already travelled from the start, so the search reaches far goals
in few expansions while staying fine-grained near the start.
"""

from __future__ import annotations

import math
from typing import List

from stepsearch.core.algebra import Point2D, distance_xy, heading_xy, wrap_angle
from stepsearch.core.cartographer import Cartographer, N, NodeFactory, SpaceTester


class GradientCartographer(Cartographer[N]):
    def __init__(self, start_node: N, goal_node: N, is_space_available: SpaceTester,
                 init_step_size: float = 1.0, directions: int = 8,
                 make_node: NodeFactory = Point2D) -> None:
        if init_step_size <= 0.0:
            raise ValueError("init_step_size must be positive")
        if directions < 1:
            raise ValueError("directions must be at least 1")

        self.start_node = start_node
        self.goal_node = goal_node
        self.is_space_available = is_space_available
        self.init_step_size = float(init_step_size)
        self.directions = int(directions)
        self.make_node = make_node

    def get_step_size(self, node: N) -> float:
        """Distance from the start quantized to multiples of the initial step."""
        distance_from_start = distance_xy(node, self.start_node)
        multiple = max(1, math.floor(distance_from_start / self.init_step_size))
        return self.init_step_size * multiple

    def estimate_cost_to_goal(self, node: N) -> float:
        return distance_xy(node, self.goal_node)

    def get_adjacent_nodes(self, node: N) -> List[N]:
        step_size = self.get_step_size(node)
        if distance_xy(node, self.goal_node) <= step_size:
            return [self.goal_node]

        heading = heading_xy(node, self.goal_node)
        adjacent_nodes = []
        for i in range(self.directions):
            angle = wrap_angle(heading + 2.0 * math.pi * i / self.directions)
            adjacent_node = self.make_node(node.x + step_size * math.cos(angle),
                                           node.y + step_size * math.sin(angle))
            if self.is_space_available(adjacent_node):
                adjacent_nodes.append(adjacent_node)
        return adjacent_nodes

    def get_cost_to_adjacent_node(self, from_node: N, to_node: N) -> float:
        return distance_xy(from_node, to_node)

    def is_goal_node(self, node: N) -> bool:
        return distance_xy(node, self.goal_node) == 0.0
