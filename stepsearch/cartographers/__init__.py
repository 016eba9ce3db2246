"""
Cartographers package.
Reference search spaces for the A* engine.
"""

from .grid import GridCartographer
from .gradient import GradientCartographer
from .occupancy import OccupancyGridCartographer, a_star_search, cell_to_world, world_to_cell, path_to_waypoints

__all__ = [
    'GridCartographer', 'GradientCartographer', 'OccupancyGridCartographer',
    'a_star_search', 'cell_to_world', 'world_to_cell', 'path_to_waypoints',
]
