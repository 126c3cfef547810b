from typing import TYPE_CHECKING, Dict, Generic, Hashable, Iterator, List, Optional, TypeVar

from .exceptions import DuplicateVertexError, InvalidEdgeError, UnknownVertexError
from .observers import GraphAlgorithmObserver, ObserverRegistry

if TYPE_CHECKING:
    from .algorithms import DijkstraResult

V = TypeVar("V", bound=Hashable)


class WeightedGraph(Generic[V]):
    """
    A directed graph whose edges carry non-negative integer weights.

    Vertices are arbitrary hashable values and are never duplicated. Edges
    only exist between vertices that were added first, and adding the same
    edge twice replaces its weight.

    The graph also keeps the observers that BFS, DFS and Dijkstra notify
    while they run.
    """

    def __init__(self) -> None:
        self._adjacency_list: Dict[V, Dict[V, int]] = {}  # Stores vertex -> {neighbor: weight}
        self._observers: ObserverRegistry[V] = ObserverRegistry()

    def add_observer(self, observer: GraphAlgorithmObserver[V]) -> None:
        """
        Registers an observer to be notified by the algorithms run on this graph.

        Args:
            observer: The observer to register. Registering it twice has no effect.
        """
        self._observers.add(observer)

    @property
    def observers(self) -> ObserverRegistry[V]:
        """The observers registered against this graph."""
        return self._observers

    def add_vertex(self, vertex: V) -> None:
        """
        Adds a vertex with no outgoing edges.

        Args:
            vertex: The vertex to add.

        Raises:
            DuplicateVertexError: If the vertex already exists.
        """
        if vertex in self._adjacency_list:
            raise DuplicateVertexError(vertex)
        self._adjacency_list[vertex] = {}

    def contains_vertex(self, vertex: V) -> bool:
        """Checks if a vertex exists in the graph."""
        return vertex in self._adjacency_list

    def add_edge(self, from_vertex: V, to_vertex: V, weight: int) -> None:
        """
        Adds a directed edge, or replaces the weight of an existing one.

        Args:
            from_vertex: The vertex the edge leads from.
            to_vertex: The vertex the edge leads to.
            weight: The non-negative weight of the edge.

        Raises:
            InvalidEdgeError: If either vertex is not in the graph, or the
                              weight is not a non-negative integer.
        """
        if from_vertex not in self._adjacency_list:
            raise InvalidEdgeError(from_vertex, to_vertex, f"vertex {from_vertex} does not exist")
        if to_vertex not in self._adjacency_list:
            raise InvalidEdgeError(from_vertex, to_vertex, f"vertex {to_vertex} does not exist")
        if not isinstance(weight, int) or isinstance(weight, bool):
            raise InvalidEdgeError(from_vertex, to_vertex, f"weight {weight!r} is not an integer")
        if weight < 0:
            raise InvalidEdgeError(from_vertex, to_vertex, f"weight {weight} is negative")

        self._adjacency_list[from_vertex][to_vertex] = weight

    def get_weight(self, from_vertex: V, to_vertex: V) -> Optional[int]:
        """
        Gets the weight of the edge from one vertex to another.

        Args:
            from_vertex: The vertex the edge leads from.
            to_vertex: The vertex the edge leads to.

        Returns:
            The weight of the edge, or None if there is no such edge.

        Raises:
            UnknownVertexError: If either vertex is not in the graph.
        """
        if from_vertex not in self._adjacency_list:
            raise UnknownVertexError(from_vertex)
        if to_vertex not in self._adjacency_list:
            raise UnknownVertexError(to_vertex)
        return self._adjacency_list[from_vertex].get(to_vertex)

    def neighbors(self, vertex: V) -> Iterator[V]:
        """
        Returns an iterator over the vertices reachable by one edge from a vertex.

        Neighbors come out in the order their edges were first added.

        Raises:
            UnknownVertexError: If the vertex does not exist.
        """
        if vertex not in self._adjacency_list:
            raise UnknownVertexError(vertex)
        return iter(self._adjacency_list[vertex])

    def get_all_vertices(self) -> Iterator[V]:
        """Returns an iterator over all vertices, in the order they were added."""
        return iter(self._adjacency_list)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency_list

    def __len__(self) -> int:
        """Returns the number of vertices in the graph."""
        return len(self._adjacency_list)

    def get_vertices_count(self) -> int:
        """Returns the number of vertices in the graph."""
        return len(self._adjacency_list)

    def get_edges_count(self) -> int:
        """Returns the number of edges in the graph."""
        return sum(len(edges) for edges in self._adjacency_list.values())

    def do_bfs(self, start: V, end: V) -> List[V]:
        """Runs a Breadth-First Search on this graph. See algorithms.bfs."""
        from .algorithms import bfs
        return bfs(self, start, end)

    def do_dfs(self, start: V, end: V) -> List[V]:
        """Runs a Depth-First Search on this graph. See algorithms.dfs."""
        from .algorithms import dfs
        return dfs(self, start, end)

    def do_dijkstra(self, start: V, end: V) -> "DijkstraResult[V]":
        """Runs Dijkstra's algorithm on this graph. See algorithms.dijkstra."""
        from .algorithms import dijkstra
        return dijkstra(self, start, end)
