"""
Human-readable renderings of graphs and BFS results.

Kept out of the engine modules; everything here returns strings.
"""

from typing import Iterable, Sequence

from graph import Graph, Vertex
from grid_bfs import Cell

NO_PATH = "No path found"
ARROW = " -> "


def format_traversal(order: Sequence[Vertex], title: str = "BFS Traversal") -> str:
    """e.g. "BFS Traversal: 0 -> 1 -> 2"."""
    return f"{title}: {_join(order)}"


def format_path(path: Sequence[Vertex], title: str = "Path") -> str:
    if not path:
        return f"{title}: {NO_PATH}"
    return f"{title}: {_join(path)}"


def format_grid_path(path: Sequence[Cell], title: str = "Grid Path") -> str:
    if not path:
        return f"{title}: {NO_PATH}"
    return f"{title}: {_join(f'({row},{col})' for row, col in path)}"


def format_graph(graph: Graph) -> str:
    """
    Adjacency dump, one "vertex: neighbours" line per vertex in graph order.
    """
    lines = ["Graph adjacency list:"]
    for vertex in graph.vertices():
        neighbors = " ".join(str(n) for n in graph.neighbors(vertex))
        lines.append(f"{vertex}: {neighbors}".rstrip())
    return "\n".join(lines)


def _join(items: Iterable[object]) -> str:
    return ARROW.join(str(item) for item in items)
