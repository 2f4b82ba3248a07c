"""
Unweighted graph abstraction for the BFS engine.

Vertices are integer ids.
Edges carry no weight; an undirected graph stores each edge in both
endpoints' neighbour lists.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

Vertex = int


class Graph(ABC):
    """Read-only view over an adjacency-list graph."""

    @property
    @abstractmethod
    def directed(self) -> bool:
        """Whether edges are one-way. Fixed at construction."""
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> Iterable[Vertex]:
        """Return all vertices in the graph."""
        raise NotImplementedError

    @abstractmethod
    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        """
        Neighbours of a vertex in edge insertion order.

        Parallel edges and self-loops show up as repeated entries.
        Returns an empty list for a vertex that is not in the graph.
        """
        raise NotImplementedError

    @abstractmethod
    def has_vertex(self, vertex: Vertex) -> bool:
        """Whether vertex has an adjacency entry."""
        raise NotImplementedError

    @abstractmethod
    def vertex_count(self) -> int:
        """Return the number of vertices in the graph."""
        raise NotImplementedError
