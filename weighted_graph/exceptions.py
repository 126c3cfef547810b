from typing import Dict, Hashable


class GraphError(ValueError):
    """Base class for errors raised by weighted_graph operations."""


class DuplicateVertexError(GraphError):
    """Raised when a vertex that is already in the graph is added again."""

    def __init__(self, vertex: Hashable) -> None:
        self.vertex = vertex
        super().__init__(f"Vertex {vertex} already exists.")


class InvalidEdgeError(GraphError):
    """Raised when an edge has a missing endpoint or a negative weight."""

    def __init__(self, from_vertex: Hashable, to_vertex: Hashable, reason: str) -> None:
        self.from_vertex = from_vertex
        self.to_vertex = to_vertex
        super().__init__(f"Invalid edge {from_vertex} -> {to_vertex}: {reason}.")


class UnknownVertexError(GraphError):
    """Raised when an operation refers to a vertex that is not in the graph."""

    def __init__(self, vertex: Hashable) -> None:
        self.vertex = vertex
        super().__init__(f"Vertex {vertex} does not exist.")


class UnreachableTargetError(GraphError):
    """
    Raised by Dijkstra's algorithm when the end vertex cannot be reached
    from the start vertex.

    Attributes:
        start: The vertex the run started from.
        end: The vertex that could not be reached.
        distances: Final distances of every vertex that was reachable.
    """

    def __init__(self, start: Hashable, end: Hashable, distances: Dict[Hashable, int]) -> None:
        self.start = start
        self.end = end
        self.distances = distances
        super().__init__(f"Vertex {end} is not reachable from {start}.")
