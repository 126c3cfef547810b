import logging
from enum import Enum
from typing import Any, Dict, Generic, Hashable, Iterator, List, Optional, Sequence, Tuple, TypeVar

V = TypeVar("V", bound=Hashable)


class AlgorithmEvent(Enum):
    """Progress notifications emitted by the graph algorithms.

    The value of each member is the name of the observer hook that receives it.
    """
    BFS_BEGUN = "notify_bfs_has_begun"
    DFS_BEGUN = "notify_dfs_has_begun"
    VISIT = "notify_visit"                      # BFS/DFS, carries the vertex
    SEARCH_OVER = "notify_search_is_over"       # BFS/DFS, at most once per run
    DIJKSTRA_BEGUN = "notify_dijkstra_has_begun"
    VERTEX_FINISHED = "notify_dijkstra_vertex_finished"  # carries vertex and final cost
    DIJKSTRA_OVER = "notify_dijkstra_is_over"   # carries the start..end path


class GraphAlgorithmObserver(Generic[V]):
    """
    Listener for the progress of BFS, DFS and Dijkstra runs.

    Every hook is a no-op here, so subclasses only override the events they
    care about. Hooks are called synchronously from inside the running
    algorithm and must not modify the graph.
    """

    def notify_bfs_has_begun(self) -> None:
        pass

    def notify_dfs_has_begun(self) -> None:
        pass

    def notify_visit(self, vertex: V) -> None:
        pass

    def notify_search_is_over(self) -> None:
        pass

    def notify_dijkstra_has_begun(self) -> None:
        pass

    def notify_dijkstra_vertex_finished(self, vertex: V, cost: int) -> None:
        pass

    def notify_dijkstra_is_over(self, path: List[V]) -> None:
        pass


class ObserverRegistry(Generic[V]):
    """
    The set of observers registered against one graph.

    Observers are kept in registration order so that fan-out is deterministic.
    Adding an observer that is already registered does nothing.
    """

    def __init__(self) -> None:
        self._observers: Dict[GraphAlgorithmObserver[V], None] = {}  # dict as an ordered set

    def add(self, observer: GraphAlgorithmObserver[V]) -> None:
        """
        Registers an observer.

        Args:
            observer: The observer to register. Re-adding an observer that is
                      already registered is a no-op.
        """
        self._observers.setdefault(observer, None)

    def notify(self, event: AlgorithmEvent, *args: Any) -> None:
        """
        Delivers an event to every registered observer exactly once.

        Args:
            event: The event to deliver.
            *args: The event payload, passed positionally to the observer hook.
        """
        # Snapshot so an observer registered mid-event only sees later events
        for observer in list(self._observers):
            getattr(observer, event.value)(*args)

    def __contains__(self, observer: object) -> bool:
        return observer in self._observers

    def __iter__(self) -> Iterator[GraphAlgorithmObserver[V]]:
        return iter(self._observers)

    def __len__(self) -> int:
        return len(self._observers)


class RecordingObserver(GraphAlgorithmObserver[V]):
    """Keeps every event it receives, in order, as (event, payload) tuples."""

    def __init__(self) -> None:
        self.events: List[Tuple[AlgorithmEvent, Tuple[Any, ...]]] = []

    def notify_bfs_has_begun(self) -> None:
        self.events.append((AlgorithmEvent.BFS_BEGUN, ()))

    def notify_dfs_has_begun(self) -> None:
        self.events.append((AlgorithmEvent.DFS_BEGUN, ()))

    def notify_visit(self, vertex: V) -> None:
        self.events.append((AlgorithmEvent.VISIT, (vertex,)))

    def notify_search_is_over(self) -> None:
        self.events.append((AlgorithmEvent.SEARCH_OVER, ()))

    def notify_dijkstra_has_begun(self) -> None:
        self.events.append((AlgorithmEvent.DIJKSTRA_BEGUN, ()))

    def notify_dijkstra_vertex_finished(self, vertex: V, cost: int) -> None:
        self.events.append((AlgorithmEvent.VERTEX_FINISHED, (vertex, cost)))

    def notify_dijkstra_is_over(self, path: List[V]) -> None:
        self.events.append((AlgorithmEvent.DIJKSTRA_OVER, (list(path),)))

    def kinds(self) -> List[AlgorithmEvent]:
        """Returns just the event kinds, in the order they were received."""
        return [event for event, _ in self.events]

    def visited(self) -> List[V]:
        """Returns the vertices delivered through notify_visit, in order."""
        return [args[0] for event, args in self.events if event is AlgorithmEvent.VISIT]

    def finished(self) -> List[Tuple[V, int]]:
        """Returns the (vertex, cost) pairs delivered by Dijkstra, in order."""
        return [args for event, args in self.events if event is AlgorithmEvent.VERTEX_FINISHED]

    def clear(self) -> None:
        self.events.clear()


class LoggingObserver(GraphAlgorithmObserver[V]):
    """
    Writes every algorithm event to a logger.

    Args:
        logger: The logger to write to. Defaults to this module's logger.
        level: The level the events are logged at.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def _log(self, message: str, *args: Any) -> None:
        self.logger.log(self.level, message, *args)

    def notify_bfs_has_begun(self) -> None:
        self._log("BFS has begun")

    def notify_dfs_has_begun(self) -> None:
        self._log("DFS has begun")

    def notify_visit(self, vertex: V) -> None:
        self._log("Visited %s", vertex)

    def notify_search_is_over(self) -> None:
        self._log("Search is over")

    def notify_dijkstra_has_begun(self) -> None:
        self._log("Dijkstra has begun")

    def notify_dijkstra_vertex_finished(self, vertex: V, cost: int) -> None:
        self._log("Finished %s at cost %s", vertex, cost)

    def notify_dijkstra_is_over(self, path: Sequence[V]) -> None:
        self._log("Dijkstra is over, path: %s", " -> ".join(str(v) for v in path))
