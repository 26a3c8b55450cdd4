"""Tick-based game state machine composing grid, snake, and apple logic."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

import numpy as np

from snake_core.apple import place_apple
from snake_core.config import GameConfig
from snake_core.controls import InputFrame
from snake_core.errors import FreeSetExhausted
from snake_core.events import (
    AppleEaten,
    GameEvent,
    Listener,
    PhaseChanged,
    ScoreChanged,
    Ticked,
)
from snake_core.free_cells import FreeCellSet
from snake_core.grid import Cell, Grid
from snake_core.models import GameOverReason, GamePhase, GameSnapshot
from snake_core.snake import Direction, Snake

logger = logging.getLogger(__name__)


@dataclass
class Score:
    """Apples eaten this run and the best run seen by this process."""

    apples_eaten: int = 0
    apples_record: int = 0

    def reset_run(self) -> None:
        self.apples_eaten = 0

    def record_apple(self) -> None:
        self.apples_eaten += 1
        if self.apples_eaten > self.apples_record:
            self.apples_record = self.apples_eaten


class GameState:
    """Single-snake, tick-based game state machine.

    The state owns the grid for its whole lifetime. The snake, the apple, and
    the free-cell set exist only while a run is in progress and are dropped
    when the run ends. Feed it one :class:`InputFrame` per rendered frame via
    :meth:`handle_input` and elapsed time via :meth:`update`; each elapsed
    ``step_interval`` fires one :meth:`step`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self.config = cfg
        self.grid = Grid(width=cfg.width, height=cfg.height)
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)

        self.phase = GamePhase.PRE_GAME
        self.reason: GameOverReason | None = None
        self.score = Score()
        self.tick = 0
        self.timer = 0.0

        self.snake: Snake | None = None
        self.apple: Cell | None = None
        self.free_cells: FreeCellSet | None = None

        self.pending_direction: Direction = cfg.direction
        self.last_direction: Direction = cfg.direction

        self._listeners: list[Listener] = []

    @property
    def running(self) -> bool:
        return self.phase == GamePhase.RUNNING

    # --- collaborators ---

    def subscribe(self, listener: Listener) -> None:
        """Register a callable that receives every emitted event."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    def _emit_score(self) -> None:
        self._emit(ScoreChanged(self.score.apples_eaten, self.score.apples_record))

    # --- phase transitions ---

    def start(self) -> None:
        """Begin a fresh run from any phase.

        Used both for the first start out of pre-game and for restarts, live
        or after a game over.
        """
        previous = self.phase
        cfg = self.config

        self.snake = Snake(cfg.start_head, cfg.direction, length=cfg.initial_length)
        self.free_cells = FreeCellSet(self.grid, self.snake.body, rng=self.rng)
        self.apple = place_apple(self.free_cells)
        self.free_cells.remove(self.apple)

        self.score.reset_run()
        self.tick = 0
        self.timer = 0.0
        self.pending_direction = cfg.direction
        self.last_direction = cfg.direction
        self.reason = None
        self.phase = GamePhase.RUNNING

        logger.info(
            "Run started on %dx%d grid, apple at %s.",
            self.grid.width, self.grid.height, tuple(self.apple),
        )
        self._emit(PhaseChanged(previous, GamePhase.RUNNING))
        self._emit_score()

    def _game_over(self, reason: GameOverReason) -> None:
        """Tear down the run and keep the final score for display."""
        self.snake = None
        self.apple = None
        self.free_cells = None
        self.timer = 0.0
        self.reason = reason
        self.phase = GamePhase.GAME_OVER
        logger.info(
            "Run ended at tick %d (%s) with %d apples, record %d.",
            self.tick, reason.value,
            self.score.apples_eaten, self.score.apples_record,
        )
        self._emit(PhaseChanged(GamePhase.RUNNING, GamePhase.GAME_OVER, reason))

    # --- input ---

    def request_direction(self, direction: Direction) -> bool:
        """Queue *direction* for the next tick.

        Rejected outside a run and when it reverses the direction of the last
        completed tick. A later accepted request replaces an earlier one.
        """
        if not self.running:
            return False
        if direction is self.last_direction.opposite:
            return False
        self.pending_direction = direction
        return True

    def handle_input(self, frame: InputFrame) -> None:
        """Consume one frame of input."""
        if frame.restart_requested:
            self.start()
        elif frame.direction is not None:
            self.request_direction(frame.direction)

    # --- simulation ---

    def update(self, dt: float) -> int:
        """Accumulate *dt* seconds and fire any ticks that fall due.

        Returns the number of ticks fired.
        """
        if not self.running:
            return 0
        self.timer += dt
        fired = 0
        interval = self.config.step_interval
        while self.running and self.timer > interval:
            self.timer -= interval
            self.step()
            fired += 1
        return fired

    def step(self) -> GameSnapshot:
        """Advance the run by one tick.

        Returns a snapshot of the resulting state.
        """
        if not self.running:
            return self.snapshot()

        reason = self._move()
        self.tick += 1
        if reason is not None:
            self._game_over(reason)
        self._emit(Ticked(self.tick))
        return self.snapshot()

    def _move(self) -> GameOverReason | None:
        assert self.snake is not None  # noqa: S101
        assert self.free_cells is not None  # noqa: S101

        direction = self.pending_direction
        self.last_direction = direction
        self.snake.direction = direction

        x, y = direction.step(self.snake.head)
        target = self.grid.cell_at(x, y)

        # --- boundary check ---
        if target is None:
            return GameOverReason.OUT_OF_BOUNDS

        # --- self-collision check against the pre-step body ---
        if self.snake.occupies(target):
            return GameOverReason.SELF_COLLISION

        if target == self.apple:
            # The apple cell passes straight to the snake, so the free set is
            # untouched until the replacement apple is committed.
            self.snake.advance(target, grow=True)
            self.score.record_apple()
            self._emit(AppleEaten(target, self.score.apples_eaten))
            self._emit_score()
            try:
                self.apple = place_apple(self.free_cells)
            except FreeSetExhausted:
                return GameOverReason.BOARD_FULL
            self.free_cells.remove(self.apple)
        else:
            vacated = self.snake.advance(target)
            if vacated is not None:
                self.free_cells.add(vacated)
            self.free_cells.remove(target)
        return None

    def snapshot(self) -> GameSnapshot:
        """Return a read-only view of the current state."""
        body = [tuple(c) for c in self.snake.body] if self.snake else []
        return GameSnapshot(
            phase=self.phase,
            width=self.grid.width,
            height=self.grid.height,
            tick=self.tick,
            head=body[0] if body else None,
            body=body,
            apple=tuple(self.apple) if self.apple is not None else None,
            apples_eaten=self.score.apples_eaten,
            apples_record=self.score.apples_record,
            reason=self.reason,
            palette=asdict(self.config.palette),
        )
