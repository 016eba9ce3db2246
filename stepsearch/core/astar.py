"""
Incremental A* search.

The engine is a step function: `reset` seeds the open list with the start
node and every call to `loop_once` expands a single node. Callers decide how
many steps to run per frame, which lets a simulation spread one search
across many ticks. Domain knowledge (adjacency, step costs, heuristic, goal
test) comes from a `Cartographer`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generic, List, Optional, Tuple
import heapq
import itertools
import math

from .cartographer import Cartographer, N
from .console import BLUE_COLOR, log


@dataclass(frozen=True, order=True)
class NodeInfo:
    """Search bookkeeping for one node, ordered by total cost only."""

    cost_from_start: float = field(default=0.0, compare=False)
    total_cost: float = 0.0


class SearchState(Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    GOAL_FOUND = "goal_found"
    EXHAUSTED = "exhausted"


@dataclass
class AStarParams:
    verbose: bool = True
    loop_count_max: Optional[int] = None


class AStar(Generic[N]):
    def __init__(self, cartographer: Cartographer[N], params: Optional[AStarParams] = None,
                 name: str = "A*Algorithm", color_code: str = BLUE_COLOR) -> None:

        self.cartographer = cartographer
        self.params = params if params is not None else AStarParams()

        self.node_to_node_info: Dict[N, NodeInfo] = {}
        self.node_to_parent: Dict[N, N] = {}
        self.best_node: Optional[N] = None
        self.best_total_cost: float = math.inf
        self.goal_node: Optional[N] = None
        self.list_empty: bool = False
        self.start_node: Optional[N] = None
        self.expansion_count: int = 0

        # Heap entries are (total_cost, serial, node). Only the entry whose
        # serial matches _open_serials[node] is live; the rest are stale.
        self._open_heap: List[Tuple[float, int, N]] = []
        self._open_serials: Dict[N, int] = {}
        self._serials = itertools.count()
        self._started: bool = False

        self._label_name: str = name
        self._color_code: str = color_code

    @property
    def state(self) -> SearchState:
        if not self._started:
            return SearchState.IDLE
        if self.goal_node is not None:
            return SearchState.GOAL_FOUND
        if self.list_empty:
            return SearchState.EXHAUSTED
        return SearchState.SEARCHING

    def is_goal_found(self) -> bool:
        return self.goal_node is not None

    def reset(self, start_node: N) -> None:
        self.goal_node = None
        self.list_empty = False
        self._open_heap = []
        self._open_serials = {}
        self.node_to_node_info = {}
        self.node_to_parent = {}
        self.best_node = None
        self.best_total_cost = math.inf
        self.start_node = start_node
        self.expansion_count = 0
        self._started = True

        start_total_cost = self.cartographer.estimate_cost_to_goal(start_node)
        self.node_to_node_info[start_node] = NodeInfo(0.0, start_total_cost)
        self._push_open(start_node, start_total_cost)

    def loop_once(self) -> bool:
        """
        Expand the cheapest open node.

        Returns:
            False once the open list is exhausted or a goal node has just been
            popped, True while more work may remain.
        """
        if not self._open_serials:
            if self._started and not self.list_empty:
                self.list_empty = True
                if self.goal_node is None:
                    self._log(f"Open list exhausted after {self.expansion_count} expansions, "
                              f"goal not reachable", error=True)
            return False

        current_node = self._pop_open()
        current_info = self.node_to_node_info[current_node]
        self.expansion_count += 1

        if self.cartographer.is_goal_node(current_node):
            if (self.goal_node is None or current_info.cost_from_start
                    < self.node_to_node_info[self.goal_node].cost_from_start):
                self.goal_node = current_node
                self._log(f"Goal found (cost={current_info.cost_from_start:.3f}, "
                          f"expansions={self.expansion_count})")
            return False

        for adjacent_node in self.cartographer.get_adjacent_nodes(current_node):
            new_cost_from_start = current_info.cost_from_start \
                + self.cartographer.get_cost_to_adjacent_node(current_node, adjacent_node)

            adjacent_info = self.node_to_node_info.get(adjacent_node)
            if adjacent_info is not None and adjacent_info.cost_from_start <= new_cost_from_start:
                continue

            total_cost = new_cost_from_start + self.cartographer.estimate_cost_to_goal(adjacent_node)
            self.node_to_node_info[adjacent_node] = NodeInfo(new_cost_from_start, total_cost)
            self.node_to_parent[adjacent_node] = current_node
            # Pushing issues a new serial, which retires any older entry.
            self._push_open(adjacent_node, total_cost)

            if total_cost < self.best_total_cost:
                self.best_total_cost = total_cost
                self.best_node = adjacent_node

        return True

    def search(self, start_node: N, loop_count_max: Optional[int] = None) -> bool:
        """
        Reset and step the search until it stops or the loop cap is reached.

        Args:
            start_node: Node to search from
            loop_count_max: Maximum number of productive `loop_once` calls.
                Defaults to `params.loop_count_max`; None means unbounded.

        Returns:
            True if a goal node was found
        """
        if loop_count_max is None:
            loop_count_max = self.params.loop_count_max

        self.reset(start_node)
        loop_count = 0
        while loop_count_max is None or loop_count < loop_count_max:
            if not self.loop_once():
                return self.is_goal_found()
            loop_count += 1

        self._log(f"Stopped after {loop_count} loops without finishing", error=True)
        return self.is_goal_found()

    def get_first_step(self) -> Optional[N]:
        chain = self._chain_to_start()
        if not chain:
            return None
        return chain[-1]

    def get_path(self) -> List[N]:
        """Nodes from the first step to the goal (or best node), start excluded."""
        chain = self._chain_to_start()
        chain.reverse()
        return chain

    def get_cost_from_start(self, node: N) -> Optional[float]:
        node_info = self.node_to_node_info.get(node)
        if node_info is None:
            return None
        return node_info.cost_from_start

    def open_nodes(self) -> List[N]:
        """Live open nodes in expansion order."""
        return [node for _, serial, node in sorted(self._open_heap, key=lambda entry: entry[:2])
                if self._open_serials.get(node) == serial]

    def _chain_to_start(self) -> List[N]:
        target_node = self.goal_node if self.goal_node is not None else self.best_node
        if target_node is None:
            return []

        chain: List[N] = []
        node = target_node
        limit = len(self.node_to_node_info)
        while node in self.node_to_parent:
            chain.append(node)
            if len(chain) > limit:
                raise RuntimeError(f"Cycle in parent chain starting at {target_node!r}")
            node = self.node_to_parent[node]
        return chain

    def _push_open(self, node: N, total_cost: float) -> None:
        serial = next(self._serials)
        self._open_serials[node] = serial
        heapq.heappush(self._open_heap, (total_cost, serial, node))

    def _pop_open(self) -> N:
        # Caller guarantees at least one live entry.
        while True:
            _, serial, node = heapq.heappop(self._open_heap)
            if self._open_serials.get(node) == serial:
                del self._open_serials[node]
                return node

    def _log(self, message: str, error: bool = False) -> None:
        if self.params.verbose:
            log(self._label_name, message, self._color_code, error=error)
