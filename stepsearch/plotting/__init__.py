"""
Plotting package.
Contains utilities for generating interactive visualizations.
"""

from .search import plot_search_2d, cell_to_xy, pos_to_tuple

__all__ = ['plot_search_2d', 'cell_to_xy', 'pos_to_tuple']
