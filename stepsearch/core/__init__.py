"""
Core utilities package.
Contains the A* engine, the cartographer interface and 2D geometry.
"""

from .algebra import Point2D, Rectangle, Circle, distance_xy, heading_xy, wrap_angle
from .astar import AStar, AStarParams, NodeInfo, SearchState
from .cartographer import Cartographer, NodeFactory, SpaceTester

__all__ = [
    'Point2D', 'Rectangle', 'Circle', 'distance_xy', 'heading_xy', 'wrap_angle',
    'AStar', 'AStarParams', 'NodeInfo', 'SearchState',
    'Cartographer', 'NodeFactory', 'SpaceTester',
]
