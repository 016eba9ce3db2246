"""
Generators package.
Contains obstacle and maze generation utilities.
"""

from .obstacle_generator import get_obstacles, obstacles_to_space_tester, obstacles_to_world_grid, clearance
from .maze_generator import get_maze, add_barrier_around_walls, room_to_cell, free_cells, render_maze, print_maze

__all__ = [
    'get_obstacles', 'obstacles_to_space_tester', 'obstacles_to_world_grid', 'clearance',
    'get_maze', 'add_barrier_around_walls', 'room_to_cell', 'free_cells', 'render_maze', 'print_maze',
]
