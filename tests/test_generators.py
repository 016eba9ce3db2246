"""Tests for the obstacle and maze generators."""

import numpy as np
import pytest

from stepsearch.cartographers import GridCartographer, a_star_search
from stepsearch.core.algebra import Circle, Point2D, Rectangle
from stepsearch.core.astar import AStar, AStarParams
from stepsearch.generators import (
    add_barrier_around_walls,
    clearance,
    free_cells,
    get_maze,
    get_obstacles,
    obstacles_to_space_tester,
    obstacles_to_world_grid,
    render_maze,
    room_to_cell,
)
from stepsearch.generators.maze_generator import BARRIER, EMPTY, WALL

AREA = Rectangle(-10.0, 10.0, -10.0, 10.0)
START = Point2D(-8.0, 0.0)
GOAL = Point2D(8.0, 0.0)


def test_obstacles_respect_clearances():
    rng = np.random.default_rng(7)
    obstacles = get_obstacles(AREA, num_obstacles=10, keep_clear=[START, GOAL],
                              min_clearance=1.5, min_passage_width=1.0, rng=rng)
    assert 0 < len(obstacles) <= 10
    for obs in obstacles:
        assert AREA.contains(obs.center)
        assert 0.5 <= obs.radius <= 1.0
    assert clearance(START, obstacles) > 1.5
    assert clearance(GOAL, obstacles) > 1.5
    for i, a in enumerate(obstacles):
        for b in obstacles[i + 1:]:
            assert not a.intersects(b, margin=1.0)


def test_obstacles_are_reproducible_with_seed():
    first = get_obstacles(AREA, rng=np.random.default_rng(3))
    second = get_obstacles(AREA, rng=np.random.default_rng(3))
    assert first == second


def test_obstacles_reject_bad_parameters():
    with pytest.raises(ValueError):
        get_obstacles(AREA, num_obstacles=-1)
    with pytest.raises(ValueError):
        get_obstacles(AREA, radius_range=(1.0, 0.5))


def test_clearance_without_obstacles_is_infinite():
    assert clearance(START, []) == float("inf")


def test_space_tester_combines_bounds_and_obstacles():
    obstacles = [Circle(Point2D(0.0, 0.0), 1.0)]
    is_space_available = obstacles_to_space_tester(obstacles, AREA, safety_margin=0.5)
    assert not is_space_available(Point2D(0.0, 1.2))
    assert is_space_available(Point2D(0.0, 1.6))
    assert not is_space_available(Point2D(11.0, 0.0))


def test_search_through_generated_obstacles():
    obstacles = get_obstacles(AREA, num_obstacles=8, keep_clear=[START, GOAL], rng=np.random.default_rng(11))
    is_space_available = obstacles_to_space_tester(obstacles, AREA)
    astar = AStar(GridCartographer(GOAL, is_space_available), AStarParams(verbose=False, loop_count_max=5_000))
    assert astar.search(START)
    path = astar.get_path()
    assert path[-1] == GOAL
    assert all(is_space_available(p) for p in path)


def test_world_grid_marks_cells_under_obstacle():
    bounds = Rectangle(-2.0, 2.0, -2.0, 2.0)
    grid = obstacles_to_world_grid([Circle(Point2D(0.0, 0.0), 0.8)], bounds, cell_size=1.0)
    assert grid.shape == (4, 4)
    assert grid.sum() == 4
    assert grid[1:3, 1:3].all()
    assert grid[0, 0] == 0


def test_world_grid_rejects_bad_cell_size():
    with pytest.raises(ValueError):
        obstacles_to_world_grid([], AREA, cell_size=0.0)


def test_maze_shape_and_border():
    maze = get_maze(5, 4, rng=np.random.default_rng(1))
    assert maze.shape == (9, 11)
    assert (maze[0, :] == WALL).all()
    assert (maze[-1, :] == WALL).all()
    assert (maze[:, 0] == WALL).all()
    assert (maze[:, -1] == WALL).all()


def test_maze_is_perfect():
    maze = get_maze(5, 4, rng=np.random.default_rng(2))
    rooms = 5 * 4
    for room_row in range(4):
        for room_col in range(5):
            assert maze[room_to_cell(room_row, room_col)] == EMPTY
    # A spanning tree over the rooms opens exactly rooms - 1 passages
    assert len(free_cells(maze)) == rooms + (rooms - 1)


def test_maze_rooms_connected():
    maze = get_maze(6, 6, rng=np.random.default_rng(5))
    path = a_star_search(maze, room_to_cell(0, 0), room_to_cell(5, 5), diagonal=False)
    assert path is not None
    for (r0, c0), (r1, c1) in zip(path, path[1:]):
        assert abs(r0 - r1) + abs(c0 - c1) == 1
        assert maze[r1, c1] == EMPTY


def test_maze_rejects_empty_size():
    with pytest.raises(ValueError):
        get_maze(0, 3)


def test_barrier_around_walls():
    world = np.zeros((3, 3), dtype=int)
    world[0, 0] = WALL
    result = add_barrier_around_walls(world)
    assert result[0, 0] == WALL
    assert result[0, 1] == BARRIER
    assert result[1, 1] == BARRIER
    assert result[2, 2] == EMPTY
    assert world[0, 1] == EMPTY


def test_render_maze_marks_path():
    world = np.array([
        [1, 1, 1],
        [0, 0, 2],
    ])
    text = render_maze(world, path=[(1, 0)])
    lines = text.split("\n")
    assert len(lines) == 2
    assert lines[0] == "██" * 3
    assert lines[1] == "••" + "  " + "░░"
