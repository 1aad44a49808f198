from __future__ import annotations

from collections import namedtuple
from enum import Enum

Cell = tuple[int, int]

State = namedtuple(
    "State",
    [
        "snake",
        "food",
        "active_direction",
        "pending_direction",
        "score",
        "terminal",
        "grid_size",
        "end_reason",
    ],
)
# snake: tuple[(x, y)], head is first element.
# food: (x, y), or None once the grid is full.
# active_direction: Direction used by the last tick.
# pending_direction: Direction the next tick will commit.
# score: int
# terminal: bool
# grid_size: int, the board is grid_size x grid_size cells.
# end_reason: None, "wall", "self" or "grid_full".


def add_vectors(a: Cell, b: Cell) -> Cell:
    return (a[0] + b[0], a[1] + b[1])


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_opposite(self, other: Direction) -> bool:
        return self.opposite is other

    @classmethod
    def parse(cls, value) -> Direction | None:
        """Return the Direction named by ``value``, or None if it names none."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


def initial_state(grid_size: int) -> State:
    if grid_size < 3:
        raise ValueError(f"grid_size must be at least 3, got {grid_size}")
    start = (grid_size // 2, grid_size // 2)
    food = (3 * grid_size // 4, 3 * grid_size // 4)
    return State(
        snake=(start,),
        food=food,
        active_direction=Direction.RIGHT,
        pending_direction=Direction.RIGHT,
        score=0,
        terminal=False,
        grid_size=grid_size,
        end_reason=None,
    )


def in_bounds(cell: Cell, grid_size: int) -> bool:
    x, y = cell
    return 0 <= x < grid_size and 0 <= y < grid_size


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
