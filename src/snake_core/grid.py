"""Grid representation for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import NamedTuple

import numpy as np


class Cell(NamedTuple):
    """A single grid position. ``y`` grows upward."""

    x: int
    y: int


class TileShade(enum.IntEnum):
    """Integer codes stored in the grid's shade array."""

    LIGHT = 0
    DARK = 1


class Grid:
    """Fixed-size playfield backed by a read-only NumPy shade array.

    The array is indexed ``[x, y]`` and holds the checkerboard tile shade of
    each cell. Dimensions are fixed at construction.
    """

    def __init__(self, width: int = 17, height: int = 14) -> None:
        if width < 4 or height < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        self._width = width
        self._height = height
        xs, ys = np.indices((width, height))
        self._shades = ((xs + ys) % 2).astype(np.int8)
        self._shades.flags.writeable = False

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shades(self) -> np.ndarray:
        """Read-only ``(width, height)`` array of :class:`TileShade` codes."""
        return self._shades

    def __len__(self) -> int:
        return self._width * self._height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self._width and 0 <= y < self._height

    def cell_at(self, x: int, y: int) -> Cell | None:
        """Return the cell at ``(x, y)``, or ``None`` when out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return Cell(x, y)

    def cells(self) -> Iterator[Cell]:
        """Yield every cell, column by column."""
        for x in range(self._width):
            for y in range(self._height):
                yield Cell(x, y)

    def shade_at(self, cell: tuple[int, int]) -> TileShade:
        """Return the tile shade of an in-bounds cell."""
        x, y = cell
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell {cell} is outside the {self._width}×{self._height} grid.")
        return TileShade(int(self._shades[x, y]))

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "width": self._width,
            "height": self._height,
            "shades": self._shades.tolist(),
        }
