from .graph import WeightedGraph
from .algorithms import DijkstraResult, bfs, dfs, dijkstra
from .exceptions import (
    GraphError, DuplicateVertexError, InvalidEdgeError,
    UnknownVertexError, UnreachableTargetError
)
from .observers import (
    AlgorithmEvent, GraphAlgorithmObserver, ObserverRegistry,
    RecordingObserver, LoggingObserver
)
from .maze import Juncture, Direction, Maze, GridMaze, MazeGraph
from .export import to_networkx

__all__ = [
    "WeightedGraph", "DijkstraResult", "bfs", "dfs", "dijkstra",
    "GraphError", "DuplicateVertexError", "InvalidEdgeError",
    "UnknownVertexError", "UnreachableTargetError",
    "AlgorithmEvent", "GraphAlgorithmObserver", "ObserverRegistry",
    "RecordingObserver", "LoggingObserver",
    "Juncture", "Direction", "Maze", "GridMaze", "MazeGraph",
    "to_networkx"
]
