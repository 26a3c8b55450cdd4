"""Exception types raised by the simulation core."""

from __future__ import annotations


class SnakeCoreError(Exception):
    """Base class for snake-core errors."""


class InvalidCellOperation(SnakeCoreError, RuntimeError):
    """A cell bookkeeping call would break the free/occupied partition.

    Signals a programming defect, not a game event; the engine never
    catches it.
    """


class FreeSetExhausted(SnakeCoreError, LookupError):
    """No free cell is left to pick from."""
