"""Notifications delivered to the audio, UI, and rendering collaborators."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from snake_core.models import GameOverReason, GamePhase
    from snake_core.grid import Cell


@dataclass(frozen=True)
class PhaseChanged:
    """The run moved between pre-game, running, and game-over."""

    previous: GamePhase
    current: GamePhase
    reason: GameOverReason | None = None


@dataclass(frozen=True)
class ScoreChanged:
    apples_eaten: int
    apples_record: int

    @property
    def score_text(self) -> str:
        return f"Apples {self.apples_eaten}"

    @property
    def record_text(self) -> str:
        return f"Record {self.apples_record}"


@dataclass(frozen=True)
class AppleEaten:
    """The snake grew; drives the audio cue."""

    cell: Cell
    apples_eaten: int


@dataclass(frozen=True)
class Ticked:
    tick: int


GameEvent = Union[PhaseChanged, ScoreChanged, AppleEaten, Ticked]
Listener = Callable[[GameEvent], None]
