import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Generic, Hashable, List, Optional, Set, TypeVar, Union

from .exceptions import UnknownVertexError, UnreachableTargetError
from .graph import WeightedGraph
from .observers import AlgorithmEvent

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)

# Tentative distance of a vertex that has not been reached yet
INFINITY = float("inf")


@dataclass
class DijkstraResult(Generic[V]):
    """
    Outcome of a Dijkstra run.

    Attributes:
        path: The least-cost sequence of vertices from start to end, inclusive.
        distances: Final distance from start of every vertex that was finished.
        predecessors: The vertex preceding each vertex on its shortest path
                      (None for start and for vertices never reached).
        finished_order: Vertices in the order they were added to the finished set.
    """
    path: List[V]
    distances: Dict[V, int] = field(default_factory=dict)
    predecessors: Dict[V, Optional[V]] = field(default_factory=dict)
    finished_order: List[V] = field(default_factory=list)

    @property
    def cost(self) -> int:
        """Total weight of the path."""
        return self.distances[self.path[-1]]


def _check_endpoints(graph: WeightedGraph[V], start: V, end: V) -> None:
    if start not in graph:
        raise UnknownVertexError(start)
    if end not in graph:
        raise UnknownVertexError(end)


def _search(graph: WeightedGraph[V], start: V, end: V, depth_first: bool) -> List[V]:
    """
    Shared body of BFS and DFS. The only difference between the two is which
    end of the frontier the next vertex is taken from.
    """
    name = "DFS" if depth_first else "BFS"
    observers = graph.observers

    visited: Set[V] = set()
    visited_in_order: List[V] = []
    frontier: Deque[V] = deque([start])

    logger.debug("%s from %s to %s", name, start, end)
    observers.notify(AlgorithmEvent.DFS_BEGUN if depth_first else AlgorithmEvent.BFS_BEGUN)

    while frontier:
        # Stack for DFS, queue for BFS
        current = frontier.pop() if depth_first else frontier.popleft()

        if current not in visited:
            observers.notify(AlgorithmEvent.VISIT, current)
            visited.add(current)
            visited_in_order.append(current)

            for neighbor in graph.neighbors(current):
                if neighbor not in visited:
                    frontier.append(neighbor)

        # Checked on every dequeue, whether or not this one was a new visit
        if current == end:
            logger.debug("%s reached %s after %d visits", name, end, len(visited_in_order))
            observers.notify(AlgorithmEvent.SEARCH_OVER)
            return visited_in_order

    logger.debug("%s exhausted the frontier without reaching %s", name, end)
    return visited_in_order


def bfs(graph: WeightedGraph[V], start: V, end: V) -> List[V]:
    """
    Performs a Breadth-First Search from start, stopping as soon as end is reached.

    Observers are told the search has begun, then told about each vertex as it
    is visited, and finally that the search is over once end comes off the
    queue. If end is unreachable the search simply runs out of vertices and no
    search-over notification is sent.

    Args:
        graph: The graph to traverse.
        start: The vertex the search begins at.
        end: The vertex that terminates the search.

    Returns:
        The vertices in the order they were visited.

    Raises:
        UnknownVertexError: If start or end is not in the graph.
    """
    _check_endpoints(graph, start, end)
    return _search(graph, start, end, depth_first=False)


def dfs(graph: WeightedGraph[V], start: V, end: V) -> List[V]:
    """
    Performs a Depth-First Search from start, stopping as soon as end is reached.

    Same notifications and termination rules as bfs, but the frontier is a
    stack. Neighbors are pushed in the graph's order, so the last neighbor
    added is the first one explored.

    Args:
        graph: The graph to traverse.
        start: The vertex the search begins at.
        end: The vertex that terminates the search.

    Returns:
        The vertices in the order they were visited.

    Raises:
        UnknownVertexError: If start or end is not in the graph.
    """
    _check_endpoints(graph, start, end)
    return _search(graph, start, end, depth_first=True)


def dijkstra(graph: WeightedGraph[V], start: V, end: V) -> DijkstraResult[V]:
    """
    Runs Dijkstra's algorithm from start over the whole graph.

    The algorithm does not stop when end is finished; it keeps going until
    every vertex reachable from start is in the finished set. Each time a
    vertex is finished, observers receive it with its final cost. Afterwards
    the least-cost path from start to end is rebuilt from the predecessors and
    handed to the observers.

    Selection scans every unfinished vertex, so a run is O(V^2). Ties go to the
    vertex that comes first in the graph's order.

    Args:
        graph: The graph to run on.
        start: The source vertex.
        end: The vertex whose path is reported when the algorithm is over.

    Returns:
        A DijkstraResult holding the path and the shortest-path tree.

    Raises:
        UnknownVertexError: If start or end is not in the graph.
        UnreachableTargetError: If end cannot be reached from start. Vertices
                                that were reachable have already been reported
                                to the observers as finished.
    """
    _check_endpoints(graph, start, end)
    observers = graph.observers

    distances: Dict[V, Union[int, float]] = {vertex: INFINITY for vertex in graph.get_all_vertices()}
    predecessors: Dict[V, Optional[V]] = {vertex: None for vertex in graph.get_all_vertices()}
    finished: Set[V] = set()
    finished_order: List[V] = []
    final_distances: Dict[V, int] = {}
    distances[start] = 0

    logger.debug("Dijkstra from %s to %s over %d vertices", start, end, len(distances))
    observers.notify(AlgorithmEvent.DIJKSTRA_BEGUN)

    while len(finished) != len(distances):
        # Pick the unfinished vertex with the strictly smallest tentative distance
        least_cost = INFINITY
        selected: Optional[V] = None
        for vertex, distance in distances.items():
            if vertex not in finished and distance < least_cost:
                least_cost = distance
                selected = vertex

        if selected is None:
            # Only unreachable vertices are left
            break

        finished.add(selected)
        finished_order.append(selected)
        final_distances[selected] = least_cost
        observers.notify(AlgorithmEvent.VERTEX_FINISHED, selected, least_cost)

        for neighbor in graph.neighbors(selected):
            if neighbor in finished:
                continue
            weight = graph.get_weight(selected, neighbor)
            if least_cost + weight < distances[neighbor]:
                distances[neighbor] = least_cost + weight
                predecessors[neighbor] = selected

    if end not in finished:
        logger.warning(
            "Dijkstra could not reach %s from %s (%d of %d vertices reachable)",
            end, start, len(finished), len(distances),
        )
        raise UnreachableTargetError(start, end, final_distances)

    path: List[V] = []
    current: Optional[V] = end
    while current is not None:
        path.insert(0, current)
        current = predecessors[current]

    logger.debug("Dijkstra path to %s costs %d", end, final_distances[end])
    observers.notify(AlgorithmEvent.DIJKSTRA_OVER, path)

    return DijkstraResult(
        path=path,
        distances=final_distances,
        predecessors=predecessors,
        finished_order=finished_order,
    )
