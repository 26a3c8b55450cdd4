"""Pydantic models and enums for read-only state snapshots."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class GamePhase(str, enum.Enum):
    """Coarse lifecycle state of a run."""

    PRE_GAME = "pre_game"
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameOverReason(str, enum.Enum):
    """Why a run ended."""

    OUT_OF_BOUNDS = "out_of_bounds"
    SELF_COLLISION = "self_collision"
    BOARD_FULL = "board_full"


class GameSnapshot(BaseModel):
    """Everything a renderer or score display needs for one frame."""

    model_config = ConfigDict(frozen=True)

    phase: GamePhase
    width: int = Field(ge=4)
    height: int = Field(ge=4)
    tick: int = Field(default=0, ge=0)
    head: tuple[int, int] | None = None
    body: list[tuple[int, int]] = Field(default_factory=list)
    apple: tuple[int, int] | None = None
    apples_eaten: int = Field(default=0, ge=0)
    apples_record: int = Field(default=0, ge=0)
    reason: GameOverReason | None = None
    palette: dict[str, str] = Field(default_factory=dict)
