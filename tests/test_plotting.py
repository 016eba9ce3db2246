"""Tests for the search plots."""

import numpy as np
import plotly.graph_objects as go

from stepsearch.cartographers import GridCartographer, OccupancyGridCartographer
from stepsearch.core.algebra import Circle, Point2D, Rectangle
from stepsearch.core.astar import AStar, AStarParams
from stepsearch.plotting import cell_to_xy, plot_search_2d, pos_to_tuple

AREA = Rectangle(-5.0, 5.0, -5.0, 5.0)
GOAL = Point2D(3.0, 0.0)


def _trace_names(fig):
    return [trace.name for trace in fig.data]


def test_plot_finished_search():
    astar = AStar(GridCartographer(GOAL, AREA.contains), AStarParams(verbose=False))
    astar.search(Point2D(0.0, 0.0))
    obstacles = [Circle(Point2D(0.0, 3.0), 1.0), Circle(Point2D(0.0, -3.0), 1.0)]
    fig = plot_search_2d(astar, obstacles=obstacles, bounds=AREA, goal=GOAL)
    assert isinstance(fig, go.Figure)
    names = _trace_names(fig)
    assert "Path" in names
    assert names.count("Obstacles") == 2
    assert any(name.startswith("Start") for name in names)
    assert any(name.startswith("Goal") for name in names)
    path_trace = fig.data[names.index("Path")]
    assert list(path_trace.x) == [0.0, 1.0, 2.0, 3.0]
    assert "goal_found" in fig.layout.title.text


def test_plot_partial_search_on_grid():
    grid = np.zeros((5, 5), dtype=int)
    astar = AStar(OccupancyGridCartographer(grid, (4, 4)), AStarParams(verbose=False))
    astar.reset((0, 0))
    astar.loop_once()
    fig = plot_search_2d(astar, node_to_xy=cell_to_xy)
    names = _trace_names(fig)
    assert "Best Partial Path" in names
    assert "Open (3)" in names
    assert "Explored (1)" in names


def test_pos_to_tuple():
    assert pos_to_tuple(None) is None
    assert pos_to_tuple(Point2D(1.0, 2.0)) == (1.0, 2.0)
    assert pos_to_tuple((3, 4)) == (3.0, 4.0)
    assert cell_to_xy((2, 5)) == (5.0, -2.0)
