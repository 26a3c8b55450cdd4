"""Tracking of unoccupied grid cells."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

import numpy as np

from snake_core.errors import FreeSetExhausted, InvalidCellOperation
from snake_core.grid import Cell

if TYPE_CHECKING:
    from snake_core.grid import Grid

logger = logging.getLogger(__name__)


class FreeCellSet:
    """Cells not covered by the snake or the apple.

    Members live in a list with a reverse index so that ``add``, ``remove``
    and ``pick_random`` are all O(1). Removal swaps the last member into the
    vacated slot, so iteration order depends on the operation history but is
    reproducible for a given seed and call sequence.
    """

    def __init__(
        self,
        grid: Grid,
        occupied: Iterable[tuple[int, int]] = (),
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        blocked = {Cell(*c) for c in occupied}
        self._cells: list[Cell] = [c for c in grid.cells() if c not in blocked]
        self._index: dict[Cell, int] = {c: i for i, c in enumerate(self._cells)}

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._index

    def __iter__(self) -> Iterator[Cell]:
        return iter(list(self._cells))

    def remove(self, cell: tuple[int, int]) -> None:
        """Mark *cell* as occupied."""
        key = Cell(*cell)
        idx = self._index.pop(key, None)
        if idx is None:
            raise InvalidCellOperation(f"Cell {tuple(key)} is not free.")
        last = self._cells.pop()
        if idx < len(self._cells):
            self._cells[idx] = last
            self._index[last] = idx

    def add(self, cell: tuple[int, int]) -> None:
        """Mark *cell* as free."""
        key = Cell(*cell)
        if not self.grid.in_bounds(key.x, key.y):
            raise InvalidCellOperation(f"Cell {tuple(key)} is outside the grid.")
        if key in self._index:
            raise InvalidCellOperation(f"Cell {tuple(key)} is already free.")
        self._index[key] = len(self._cells)
        self._cells.append(key)

    def pick_random(self) -> Cell:
        """Return a uniformly random free cell without removing it."""
        if not self._cells:
            raise FreeSetExhausted("No free cells remain.")
        return self._cells[int(self.rng.integers(len(self._cells)))]
