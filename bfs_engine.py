"""
Breadth-first search queries over any Graph implementation.

Every query runs its own BFS with a fresh visited set and FIFO frontier, so
no state is shared between calls and the graph is never mutated. Queries are
total: a missing vertex, a negative distance or an unreachable target yields
an empty/sentinel result instead of an exception.

Complexity:
    O(V + E) time and O(V) extra space over the vertices reachable from start.
"""

from collections import deque
from typing import Deque, Dict, List, Optional, Set, Tuple
import logging

from graph import Graph, Vertex

logger = logging.getLogger(__name__)

# Parent recorded for the start vertex of a path query.
NO_PARENT: Optional[Vertex] = None

UNREACHABLE = -1


def traverse(graph: Graph, start: Vertex) -> List[Vertex]:
    """
    Visit every vertex reachable from start.

    Returns:
        Vertices in discovery order, start first; [] if start is absent.
    """
    if not graph.has_vertex(start):
        logger.debug("traverse: start %r not in graph", start)
        return []

    order: List[Vertex] = []
    visited: Set[Vertex] = {start}
    queue: Deque[Vertex] = deque([start])

    while queue:
        current = queue.popleft()
        order.append(current)

        for neighbor in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    logger.debug("traverse: reached %d vertices from %r", len(order), start)
    return order


def shortest_path(graph: Graph, start: Vertex, target: Vertex) -> List[Vertex]:
    """
    Fewest-edge path from start to target, both endpoints included.

    The search stops as soon as target is dequeued. The path is rebuilt by
    walking the parent map back from target, then reversed.

    Returns:
        [start, ..., target]; [start] when start == target; [] when either
        vertex is absent or target is unreachable.
    """
    if not graph.has_vertex(start) or not graph.has_vertex(target):
        return []

    if start == target:
        return [start]

    visited: Set[Vertex] = {start}
    queue: Deque[Vertex] = deque([start])
    parent: Dict[Vertex, Optional[Vertex]] = {start: NO_PARENT}

    while queue:
        current = queue.popleft()

        if current == target:
            path = _walk_parents(parent, target)
            logger.debug(
                "shortest_path: %r -> %r has %d hops", start, target, len(path) - 1
            )
            return path

        for neighbor in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                parent[neighbor] = current
                queue.append(neighbor)

    logger.debug("shortest_path: no path %r -> %r", start, target)
    return []


def _walk_parents(
    parent: Dict[Vertex, Optional[Vertex]], target: Vertex
) -> List[Vertex]:
    path: List[Vertex] = []
    node: Optional[Vertex] = target
    while node is not NO_PARENT:
        path.append(node)
        node = parent[node]
    path.reverse()
    return path


def shortest_distance(graph: Graph, start: Vertex, target: Vertex) -> int:
    """
    Number of edges on a shortest start -> target path.

    Target is tested when it is seen as a neighbour, before enqueueing, so
    the answer is available one level earlier than a dequeue-time check.

    Returns:
        Hop count; 0 when start == target; -1 when either vertex is absent
        or target is unreachable.
    """
    if not graph.has_vertex(start) or not graph.has_vertex(target):
        return UNREACHABLE

    if start == target:
        return 0

    visited: Set[Vertex] = {start}
    queue: Deque[Tuple[Vertex, int]] = deque([(start, 0)])

    while queue:
        vertex, distance = queue.popleft()

        for neighbor in graph.neighbors(vertex):
            if neighbor == target:
                logger.debug(
                    "shortest_distance: %r -> %r is %d", start, target, distance + 1
                )
                return distance + 1

            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, distance + 1))

    logger.debug("shortest_distance: %r unreachable from %r", target, start)
    return UNREACHABLE


def vertices_at_distance(graph: Graph, start: Vertex, distance: int) -> List[Vertex]:
    """
    Vertices whose BFS distance from start is exactly `distance`.

    Vertices at the requested level are collected but not expanded, so the
    search never looks beyond that level.

    Returns:
        Vertices in discovery order; [start] for distance 0; [] when start is
        absent or distance is negative.
    """
    if not graph.has_vertex(start) or distance < 0:
        return []

    if distance == 0:
        return [start]

    level: List[Vertex] = []
    visited: Set[Vertex] = {start}
    queue: Deque[Tuple[Vertex, int]] = deque([(start, 0)])

    while queue:
        vertex, current_distance = queue.popleft()

        if current_distance == distance:
            level.append(vertex)
            continue

        for neighbor in graph.neighbors(vertex):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, current_distance + 1))

    return level


def is_connected(graph: Graph) -> bool:
    """
    True when a traversal from the first vertex reaches every vertex.

    The empty graph is connected. For directed graphs this checks
    reachability from the first inserted vertex only, not strong connectivity.
    """
    vertices = list(graph.vertices())
    if not vertices:
        return True

    return len(traverse(graph, vertices[0])) == len(vertices)


def find_connected_components(graph: Graph) -> List[List[Vertex]]:
    """
    Partition the vertices into connected components.

    Vertices are scanned in graph order; each one not yet claimed by an
    earlier component seeds a new BFS. A global visited set tracks claimed
    vertices across scans while each scan keeps its own local visited set.

    Returns:
        One list per component, each in BFS discovery order from its seed;
        [] for the empty graph.
    """
    components: List[List[Vertex]] = []
    global_visited: Set[Vertex] = set()

    for vertex in graph.vertices():
        if vertex in global_visited:
            continue

        component: List[Vertex] = []
        visited: Set[Vertex] = {vertex}
        queue: Deque[Vertex] = deque([vertex])
        global_visited.add(vertex)

        while queue:
            current = queue.popleft()
            component.append(current)

            for neighbor in graph.neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    global_visited.add(neighbor)
                    queue.append(neighbor)

        components.append(component)

    logger.debug("find_connected_components: %d components", len(components))
    return components
