"""
Turning rectangular mazes into weighted graphs.

A maze is a grid of junctures, identified by their X and Y coordinates with
(0, 0) in the upper left corner. Adjacent junctures may be separated by a
wall, and each step from one juncture to a neighbor has its own weight.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Protocol, Set, Tuple

from .graph import WeightedGraph


@dataclass(frozen=True)
class Juncture:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Direction(Enum):
    ABOVE = (0, -1)
    BELOW = (0, 1)
    TO_LEFT = (-1, 0)
    TO_RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def step(self, juncture: Juncture) -> Juncture:
        """Returns the juncture one step away in this direction."""
        dx, dy = self.value
        return Juncture(juncture.x + dx, juncture.y + dy)


class Maze(Protocol):
    """The queries MazeGraph needs from a maze."""

    def get_maze_width(self) -> int: ...
    def get_maze_height(self) -> int: ...

    def is_wall_above(self, juncture: Juncture) -> bool: ...
    def is_wall_below(self, juncture: Juncture) -> bool: ...
    def is_wall_to_left(self, juncture: Juncture) -> bool: ...
    def is_wall_to_right(self, juncture: Juncture) -> bool: ...

    def get_weight_above(self, juncture: Juncture) -> int: ...
    def get_weight_below(self, juncture: Juncture) -> int: ...
    def get_weight_to_left(self, juncture: Juncture) -> int: ...
    def get_weight_to_right(self, juncture: Juncture) -> int: ...


def _check_weight(weight: int) -> None:
    if not isinstance(weight, int) or isinstance(weight, bool):
        raise ValueError(f"Weight {weight!r} is not an integer.")
    if weight < 0:
        raise ValueError(f"Weight {weight} is negative.")


@dataclass
class GridMaze:
    """
    An in-memory maze.

    Walls sit on the boundary between two junctures, so adding one blocks
    movement in both directions. Weights belong to a single directed step and
    fall back to default_weight when not set.
    """
    width: int
    height: int
    default_weight: int = 1
    _walls: Set[Tuple[Juncture, Direction]] = field(default_factory=set, init=False, repr=False)
    _weights: Dict[Tuple[Juncture, Direction], int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Maze size {self.width}x{self.height} is invalid.")
        _check_weight(self.default_weight)

    def contains(self, juncture: Juncture) -> bool:
        return 0 <= juncture.x < self.width and 0 <= juncture.y < self.height

    def _check(self, juncture: Juncture) -> None:
        if not self.contains(juncture):
            raise ValueError(f"Juncture {juncture} is outside the maze.")

    def add_wall(self, juncture: Juncture, direction: Direction) -> None:
        """Puts a wall on the given side of a juncture (and on the matching side of its neighbor)."""
        self._check(juncture)
        self._walls.add((juncture, direction))
        self._walls.add((direction.step(juncture), direction.opposite))

    def set_weight(self, juncture: Juncture, direction: Direction, weight: int) -> None:
        """Sets the cost of stepping from a juncture in the given direction."""
        self._check(juncture)
        _check_weight(weight)
        self._weights[(juncture, direction)] = weight

    def is_wall(self, juncture: Juncture, direction: Direction) -> bool:
        return (juncture, direction) in self._walls

    def get_weight(self, juncture: Juncture, direction: Direction) -> int:
        return self._weights.get((juncture, direction), self.default_weight)

    def get_maze_width(self) -> int:
        return self.width

    def get_maze_height(self) -> int:
        return self.height

    def is_wall_above(self, juncture: Juncture) -> bool:
        return self.is_wall(juncture, Direction.ABOVE)

    def is_wall_below(self, juncture: Juncture) -> bool:
        return self.is_wall(juncture, Direction.BELOW)

    def is_wall_to_left(self, juncture: Juncture) -> bool:
        return self.is_wall(juncture, Direction.TO_LEFT)

    def is_wall_to_right(self, juncture: Juncture) -> bool:
        return self.is_wall(juncture, Direction.TO_RIGHT)

    def get_weight_above(self, juncture: Juncture) -> int:
        return self.get_weight(juncture, Direction.ABOVE)

    def get_weight_below(self, juncture: Juncture) -> int:
        return self.get_weight(juncture, Direction.BELOW)

    def get_weight_to_left(self, juncture: Juncture) -> int:
        return self.get_weight(juncture, Direction.TO_LEFT)

    def get_weight_to_right(self, juncture: Juncture) -> int:
        return self.get_weight(juncture, Direction.TO_RIGHT)


class MazeGraph(WeightedGraph[Juncture]):
    """
    A WeightedGraph built from a maze.

    Every juncture becomes a vertex. For each juncture and each direction with
    no wall and an existing neighbor, a directed edge is added with the weight
    the maze reports for that step. A pair of adjacent, unwalled junctures
    therefore ends up connected both ways.
    """

    def __init__(self, maze: Maze) -> None:
        super().__init__()
        width = maze.get_maze_width()
        height = maze.get_maze_height()

        for x in range(width):
            for y in range(height):
                self.add_vertex(Juncture(x, y))

        for x in range(width):
            for y in range(height):
                current = Juncture(x, y)
                # (wall query, weight query, direction) per side of the juncture
                sides = (
                    (maze.is_wall_above, maze.get_weight_above, Direction.ABOVE),
                    (maze.is_wall_below, maze.get_weight_below, Direction.BELOW),
                    (maze.is_wall_to_right, maze.get_weight_to_right, Direction.TO_RIGHT),
                    (maze.is_wall_to_left, maze.get_weight_to_left, Direction.TO_LEFT),
                )
                for is_wall, get_weight, direction in sides:
                    neighbor = direction.step(current)
                    if not is_wall(current) and self.contains_vertex(neighbor):
                        self.add_edge(current, neighbor, get_weight(current))
