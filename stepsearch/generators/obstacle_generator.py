"""
Obstacle Generator
Generates random circular obstacles and turns them into search spaces.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence, Tuple
import numpy as np

from stepsearch.core.algebra import Circle, Point2D, Rectangle, distance_xy


def get_obstacles(
    bounds: Rectangle,
    num_obstacles: int = 12,
    keep_clear: Sequence[Point2D] = (),
    min_clearance: float = 1.5,
    min_passage_width: float = 1.0,
    radius_range: Tuple[float, float] = (0.5, 1.0),
    max_attempts: int = 100,
    rng: np.random.Generator = None,
) -> List[Circle]:
    """
    Generate random circular obstacles inside a rectangle.

    Args:
        bounds: Area the obstacle centres are drawn from
        num_obstacles: Number of obstacles requested
        keep_clear: Points (start, goal) that no obstacle may come near
        min_clearance: Minimum free distance between an obstacle edge and a keep-clear point
        min_passage_width: Minimum gap between two obstacles
        radius_range: Tuple of (min_radius, max_radius)
        max_attempts: Placement attempts per obstacle before giving up on it
        rng: Random number generator (if None, creates a new one)

    Returns:
        List of Circle obstacles, possibly fewer than requested
    """
    if num_obstacles < 0:
        raise ValueError("num_obstacles must not be negative")
    if radius_range[0] <= 0.0 or radius_range[1] < radius_range[0]:
        raise ValueError("radius_range must be positive and ordered")

    if rng is None:
        rng = np.random.default_rng()

    obstacles: List[Circle] = []
    for _ in range(num_obstacles):
        for _ in range(max_attempts):
            center = Point2D(float(rng.uniform(bounds.x_min, bounds.x_max)),
                             float(rng.uniform(bounds.y_min, bounds.y_max)))
            candidate = Circle(center, float(rng.uniform(radius_range[0], radius_range[1])))

            if any(candidate.contains(p, margin=min_clearance) for p in keep_clear):
                continue
            if any(candidate.intersects(other, margin=min_passage_width) for other in obstacles):
                continue

            obstacles.append(candidate)
            break

    return obstacles


def obstacles_to_space_tester(
    obstacles: Iterable[Circle],
    bounds: Optional[Rectangle] = None,
    safety_margin: float = 0.0,
) -> Callable[[object], bool]:
    """Build an `is_space_available` predicate for the continuous cartographers."""
    obstacles = list(obstacles)

    def is_space_available(point) -> bool:
        if bounds is not None and not bounds.contains(point):
            return False
        return not any(obs.contains(point, margin=safety_margin) for obs in obstacles)

    return is_space_available


def obstacles_to_world_grid(
    obstacles: Iterable[Circle],
    bounds: Rectangle,
    cell_size: float = 0.25,
    safety_margin: float = 0.0,
) -> np.ndarray:
    """
    Rasterise obstacles into an occupancy grid (1 = obstacle, 0 = free).

    Row 0 is the top edge (y_max) and column 0 the left edge (x_min). A cell is
    blocked when its centre lies inside an obstacle grown by `safety_margin`.
    """
    if cell_size <= 0.0:
        raise ValueError("cell_size must be positive")

    cols = int(np.ceil(bounds.width() / cell_size))
    rows = int(np.ceil(bounds.height() / cell_size))
    world_grid = np.zeros((rows, cols), dtype=np.int32)

    centers_x = bounds.x_min + (np.arange(cols) + 0.5) * cell_size
    centers_y = bounds.y_max - (np.arange(rows) + 0.5) * cell_size
    grid_x, grid_y = np.meshgrid(centers_x, centers_y)

    for obs in obstacles:
        dist = np.hypot(grid_x - obs.center.x, grid_y - obs.center.y)
        world_grid[dist <= obs.radius + safety_margin] = 1

    return world_grid


def clearance(point: Point2D, obstacles: Iterable[Circle]) -> float:
    """Distance from a point to the closest obstacle edge (negative inside)."""
    distances = [distance_xy(point, obs.center) - obs.radius for obs in obstacles]
    if not distances:
        return float("inf")
    return min(distances)
