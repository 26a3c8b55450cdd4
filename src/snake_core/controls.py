"""Mapping of raw per-frame input to direction requests."""

from __future__ import annotations

from dataclasses import dataclass

from snake_core.snake import Direction


def direction_from_axes(horizontal: float, vertical: float) -> Direction | None:
    """Translate two raw input axes into at most one direction.

    Horizontal wins only when its magnitude is strictly greater; ties go to
    the vertical axis. Returns ``None`` when both axes are at rest.
    """
    if horizontal == 0 and vertical == 0:
        return None
    if abs(horizontal) > abs(vertical):
        return Direction.RIGHT if horizontal > 0 else Direction.LEFT
    return Direction.UP if vertical > 0 else Direction.DOWN


@dataclass(frozen=True)
class InputFrame:
    """Input sampled once per rendered frame."""

    direction: Direction | None = None
    restart_requested: bool = False

    @classmethod
    def from_axes(
        cls,
        horizontal: float = 0.0,
        vertical: float = 0.0,
        restart_requested: bool = False,
    ) -> InputFrame:
        return cls(direction_from_axes(horizontal, vertical), restart_requested)
