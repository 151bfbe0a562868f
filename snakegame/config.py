from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

Vec2 = Tuple[int, int]

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

GRID_SIZE = 18
TICK_MS = 80
CELL_SIZE = 30


def default_highscore_path() -> Path:
    return Path.home() / ".snakegame" / "highscore.json"


@dataclass
class GameConfig:
    grid_size: int = GRID_SIZE
    tick_ms: int = TICK_MS
    start: Vec2 = (2, 2)
    start_direction: Vec2 = DOWN
    start_food: Vec2 = (5, 5)
    seed: Optional[int] = None
    cell_size: int = CELL_SIZE
    highscore_path: Optional[Path] = field(default_factory=default_highscore_path)

    def __post_init__(self) -> None:
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.start_direction not in (UP, DOWN, LEFT, RIGHT):
            raise ValueError(f"start_direction must be a unit direction, got {self.start_direction}")
        for name in ("start", "start_food"):
            x, y = getattr(self, name)
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                raise ValueError(f"{name} {(x, y)} lies outside a {self.grid_size}x{self.grid_size} grid")
        if tuple(self.start) == tuple(self.start_food):
            raise ValueError("start and start_food must be different cells")
