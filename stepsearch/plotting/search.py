"""
Plotting utilities for A* searches.
"""

from typing import Callable, List, Optional, Sequence, Tuple
import numpy as np
import plotly.graph_objects as go

from stepsearch.core.algebra import Point2D, Rectangle
from stepsearch.core.astar import AStar


def pos_to_tuple(pos) -> Optional[Tuple[float, float]]:
    if pos is None:
        return None
    if isinstance(pos, Point2D):
        return (pos.x, pos.y)
    elif isinstance(pos, (tuple, list, np.ndarray)):
        return (float(pos[0]), float(pos[1]))
    else:
        return (float(pos.x), float(pos.y))


def _xy(nodes, node_to_xy: Callable) -> Tuple[List[float], List[float]]:
    points = [node_to_xy(n) for n in nodes]
    return [p[0] for p in points], [p[1] for p in points]


def plot_search_2d(
    astar: AStar,
    obstacles: Optional[Sequence] = None,
    bounds: Optional[Rectangle] = None,
    goal=None,
    node_to_xy: Callable = pos_to_tuple,
    title: str = "A* Search",
) -> go.Figure:
    """
    Create a 2D plot of the current state of a search.

    Args:
        astar: Search to draw; may be mid-search
        obstacles: Optional Circle obstacles
        bounds: Optional Rectangle drawn as the search area and used for the axis range
        goal: Optional goal node, marked even when it has not been reached
        node_to_xy: Maps a node to an (x, y) tuple
        title: Figure title

    Returns:
        Plotly figure with explored nodes, open nodes, path and key points
    """
    fig = go.Figure()

    # Plot obstacles as circles
    for i, obs in enumerate(obstacles or []):
        theta = np.linspace(0, 2 * np.pi, 50)
        fig.add_trace(go.Scatter(
            x=obs.center.x + obs.radius * np.cos(theta),
            y=obs.center.y + obs.radius * np.sin(theta),
            mode='lines',
            fill='toself',
            fillcolor='rgba(153, 51, 102, 0.5)',
            line=dict(color='rgba(153, 51, 102, 0.8)', width=2),
            name='Obstacles',
            legendgroup='obstacles',
            showlegend=(i == 0),
            hoverinfo='skip'
        ))

    if bounds is not None:
        fig.add_shape(type='rect', x0=bounds.x_min, y0=bounds.y_min, x1=bounds.x_max, y1=bounds.y_max,
                      line=dict(color='gray', dash='dash'))

    open_nodes = set(astar.open_nodes())
    closed_nodes = [n for n in astar.node_to_node_info if n not in open_nodes]
    closed_x, closed_y = _xy(closed_nodes, node_to_xy)
    fig.add_trace(go.Scatter(
        x=closed_x,
        y=closed_y,
        mode='markers',
        name=f'Explored ({len(closed_nodes)})',
        marker=dict(size=5, color='lightgray'),
        hoverinfo='skip'
    ))

    open_x, open_y = _xy(astar.open_nodes(), node_to_xy)
    fig.add_trace(go.Scatter(
        x=open_x,
        y=open_y,
        mode='markers',
        name=f'Open ({len(open_x)})',
        marker=dict(size=5, color='orange'),
        hoverinfo='skip'
    ))

    path = astar.get_path()
    if astar.start_node is not None:
        path = [astar.start_node] + path
    path_x, path_y = _xy(path, node_to_xy)
    fig.add_trace(go.Scatter(
        x=path_x,
        y=path_y,
        mode='lines+markers',
        name='Path' if astar.is_goal_found() else 'Best Partial Path',
        line=dict(color='blue', width=2),
        marker=dict(size=6)
    ))

    key_points = [
        (astar.start_node, 'Start', 'green', 'circle'),
        (goal, 'Goal', 'red', 'star'),
    ]
    for node, label, color, symbol in key_points:
        if node is None:
            continue
        x, y = node_to_xy(node)
        fig.add_trace(go.Scatter(
            x=[x],
            y=[y],
            mode='markers',
            name=f"{label} ({x:.2f}, {y:.2f})",
            marker=dict(size=12, color=color, symbol=symbol),
            hoverinfo='name'
        ))

    layout = dict(
        title=f"{title}: {astar.state.value}, {astar.expansion_count} expansions",
        xaxis_title="X",
        yaxis_title="Y",
        height=700,
        width=900,
        showlegend=True,
        yaxis_scaleanchor="x",
        yaxis_scaleratio=1,
    )
    if bounds is not None:
        layout.update(xaxis_range=[bounds.x_min - 0.5, bounds.x_max + 0.5],
                      yaxis_range=[bounds.y_min - 0.5, bounds.y_max + 0.5])
    fig.update_layout(**layout)

    return fig


def cell_to_xy(cell) -> Tuple[float, float]:
    """Plot (row, col) grid cells with rows growing downwards."""
    return (float(cell[1]), -float(cell[0]))
