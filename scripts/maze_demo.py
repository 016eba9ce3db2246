"""
Maze search demo.

Generates a random maze, runs the A* engine a few expansions per simulated
frame and writes an interactive plot of the result.

Usage:
    python scripts/maze_demo.py [seed]
"""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np

from stepsearch.cartographers import OccupancyGridCartographer, path_to_waypoints
from stepsearch.core.astar import AStar, AStarParams
from stepsearch.core.console import YELLOW_COLOR, log
from stepsearch.generators import get_maze, print_maze, room_to_cell
from stepsearch.plotting import cell_to_xy, plot_search_2d

MAZE_ROOMS_WIDE = 15
MAZE_ROOMS_HIGH = 10
EXPANSIONS_PER_FRAME = 25
CELL_SIZE = 0.5
OUTPUT_FILE = Path(__file__).parent / "maze_search.html"


def run_episode(seed: int) -> None:
    rng = np.random.default_rng(seed)
    log("Environment", f"Generating maze (seed={seed})...", YELLOW_COLOR)
    world = get_maze(MAZE_ROOMS_WIDE, MAZE_ROOMS_HIGH, rng=rng)

    start = room_to_cell(0, 0)
    goal = room_to_cell(MAZE_ROOMS_HIGH - 1, MAZE_ROOMS_WIDE - 1)
    astar = AStar(OccupancyGridCartographer(world, goal), AStarParams())
    astar.reset(start)

    frame = 0
    searching = True
    while searching:
        for _ in range(EXPANSIONS_PER_FRAME):
            if not astar.loop_once():
                searching = False
                break
        frame += 1
        log("Environment", f"Frame {frame}: {astar.expansion_count} expansions, "
                           f"first step {astar.get_first_step()}", YELLOW_COLOR)

    path = [start] + astar.get_path()
    print_maze(world, path)

    waypoints = path_to_waypoints(world, path, CELL_SIZE)
    log("Environment", f"{len(waypoints)} waypoints, ends at "
                       f"({waypoints[-1].x:.2f}, {waypoints[-1].y:.2f})", YELLOW_COLOR)

    fig = plot_search_2d(astar, goal=goal, node_to_xy=cell_to_xy, title="Maze Search")
    fig.write_html(str(OUTPUT_FILE))
    log("Environment", f"Plot written to {OUTPUT_FILE}", YELLOW_COLOR)


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 0
    run_episode(seed)


if __name__ == "__main__":
    main()
