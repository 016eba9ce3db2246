"""
Cartographer interface for the A* engine.

A cartographer describes a search space: which nodes are reachable from a
node, what each step costs, how far a node probably is from the goal and
whether a node is the goal. The engine never looks inside a node.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Sequence, TypeVar

N = TypeVar("N")

# Predicate telling whether a node lies in free space.
SpaceTester = Callable[[N], bool]

# Builds a node from x and y coordinates.
NodeFactory = Callable[[float, float], N]


class Cartographer(ABC, Generic[N]):
    """A* map maker.

    Costs returned by `get_cost_to_adjacent_node` must be non-negative and
    `estimate_cost_to_goal` must never overestimate for the engine to
    return optimal paths. Neither is checked.
    """

    @abstractmethod
    def estimate_cost_to_goal(self, node: N) -> float:
        ...

    @abstractmethod
    def get_adjacent_nodes(self, node: N) -> Sequence[N]:
        ...

    @abstractmethod
    def get_cost_to_adjacent_node(self, from_node: N, to_node: N) -> float:
        ...

    @abstractmethod
    def is_goal_node(self, node: N) -> bool:
        ...
