"""
Concrete unweighted graph implementation for the BFS engine.

Implements the Graph interface using a vertex -> [neighbour, ...] mapping.
"""

from typing import Dict, Iterable, List, Tuple

from graph import Graph, Vertex


class AdjacencyListGraph(Graph):
    """
    Directed or undirected multigraph backed by a vertex -> neighbour-list mapping.

    Duplicate edges and self-loops are stored as given, never deduplicated.
    """

    def __init__(self, directed: bool = False) -> None:
        self._directed = directed
        self._adj: Dict[Vertex, List[Vertex]] = {}

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Vertex, Vertex]],
        directed: bool = False,
        vertices: Iterable[Vertex] = (),
    ) -> "AdjacencyListGraph":
        """
        Build a graph from (src, dst) pairs plus any isolated vertices.

        Isolated vertices are added after the edges, so vertex order follows
        the edge list first.
        """
        graph = cls(directed=directed)
        for edge in edges:
            if len(edge) != 2:
                raise ValueError(f"Edge must be a (src, dst) pair, got {edge!r}.")
            src, dst = edge
            graph.add_edge(src, dst)
        for vertex in vertices:
            graph.add_vertex(vertex)
        return graph

    # --- Mutation API (not part of Graph interface) --------------------------

    def add_vertex(self, vertex: Vertex) -> None:
        """Ensure vertex exists in the graph."""
        self._adj.setdefault(vertex, [])

    def add_edge(self, src: Vertex, dst: Vertex) -> None:
        """
        Append dst to src's neighbours, and src to dst's when undirected.
        Auto-adds vertices if they don't exist.
        """
        self._adj.setdefault(src, []).append(dst)
        if self._directed:
            self.add_vertex(dst)
        else:
            self._adj.setdefault(dst, []).append(src)

    # --- Graph interface -----------------------------------------------------

    @property
    def directed(self) -> bool:
        return self._directed

    def vertices(self) -> Iterable[Vertex]:
        return self._adj.keys()

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        return list(self._adj.get(vertex, ()))  # defensive copy

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._adj

    def vertex_count(self) -> int:
        return len(self._adj)

    # --- Introspection -------------------------------------------------------

    def edge_count(self) -> int:
        """Number of stored adjacency entries; undirected edges count twice."""
        return sum(len(nbrs) for nbrs in self._adj.values())

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)
