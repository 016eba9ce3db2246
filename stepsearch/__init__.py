"""
stepsearch package.
Incremental A* search over pluggable cartographer spaces.
"""

from .core import AStar, AStarParams, Cartographer, NodeInfo, SearchState, Point2D, Rectangle, Circle
from .cartographers import GridCartographer, GradientCartographer, OccupancyGridCartographer, a_star_search

__all__ = [
    'AStar', 'AStarParams', 'Cartographer', 'NodeInfo', 'SearchState',
    'Point2D', 'Rectangle', 'Circle',
    'GridCartographer', 'GradientCartographer', 'OccupancyGridCartographer', 'a_star_search',
]
