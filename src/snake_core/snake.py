"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable

from snake_core.grid import Cell


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values. Up is +y."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def step(self, cell: tuple[int, int]) -> tuple[int, int]:
        """Return the coordinate one step from *cell*, unchecked against any grid."""
        dx, dy = self.value
        return cell[0] + dx, cell[1] + dy


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def _adjacent(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


class Snake:
    """A snake represented as an ordered deque of cells.

    The head is ``body[0]``; the tail is ``body[-1]``. A set mirror of the
    body keeps :meth:`occupies` O(1).
    """

    def __init__(
        self,
        head: tuple[int, int],
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        hx, hy = head
        self.body: deque[Cell] = deque(
            Cell(hx - dx * i, hy - dy * i) for i in range(length)
        )
        self._cells: set[Cell] = set(self.body)
        self.direction = direction

    @classmethod
    def from_body(
        cls,
        cells: Iterable[tuple[int, int]],
        direction: Direction = Direction.RIGHT,
    ) -> Snake:
        """Build a snake from an explicit head-first body.

        Raises ``ValueError`` if segments repeat or are not grid-adjacent.
        """
        body = [Cell(*c) for c in cells]
        if not body:
            raise ValueError("Snake length must be at least 1.")
        if len(set(body)) != len(body):
            raise ValueError("Snake segments must occupy distinct cells.")
        for a, b in zip(body, body[1:]):
            if not _adjacent(a, b):
                raise ValueError(f"Segments {tuple(a)} and {tuple(b)} are not adjacent.")
        snake = cls(body[0], direction, length=1)
        snake.body = deque(body)
        snake._cells = set(body)
        return snake

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    def occupies(self, cell: tuple[int, int]) -> bool:
        """Check whether any segment, head and tail included, covers *cell*."""
        return cell in self._cells

    def advance(self, new_head: tuple[int, int], grow: bool = False) -> Cell | None:
        """Push *new_head* onto the front of the body.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        head = Cell(*new_head)
        self.body.appendleft(head)
        self._cells.add(head)
        if grow:
            return None
        tail = self.body.pop()
        self._cells.discard(tail)
        return tail

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
        }
