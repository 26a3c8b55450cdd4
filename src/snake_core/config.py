"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

from snake_core.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Palette:
    """Hex colours handed to the rendering collaborator."""

    tile_light: str = "#aad751"
    tile_dark: str = "#a2d149"
    snake_head: str = "#4674e9"
    snake_tail: str = "#5a86f0"
    apple: str = "#e7471d"


@dataclass(frozen=True)
class GameConfig:
    """Playfield, timing, and starting-layout settings.

    Supports JSON serialization for reproducibility.
    """

    width: int = 17
    height: int = 14
    step_interval: float = 0.15

    start_head: tuple[int, int] = (3, 3)
    start_direction: str = "right"
    initial_length: int = 3

    seed: int | None = None
    palette: Palette = field(default_factory=Palette)

    def __post_init__(self) -> None:
        if self.width < 4 or self.height < 4:
            raise ValueError("width and height must each be at least 4.")
        if self.step_interval <= 0:
            raise ValueError("step_interval must be positive.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        try:
            direction = Direction[self.start_direction.upper()]
        except KeyError:
            raise ValueError(
                f"Unknown start_direction {self.start_direction!r}."
            ) from None

        dx, dy = direction.value
        hx, hy = self.start_head
        for seg in range(self.initial_length):
            x = hx - dx * seg
            y = hy - dy * seg
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(
                    "initial snake does not fit the configured grid; "
                    "move start_head or reduce initial_length."
                )

    @property
    def direction(self) -> Direction:
        return Direction[self.start_direction.upper()]

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists on JSON dump)."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        palette_data = raw.pop("palette", {})
        raw["palette"] = Palette(**palette_data)
        if "start_head" in raw:
            raw["start_head"] = tuple(raw["start_head"])
        return cls(**raw)
