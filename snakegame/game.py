from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Protocol, Sequence, Tuple

from snakegame.config import GameConfig, Vec2


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...

    def choice(self, seq: Sequence[Vec2]) -> Vec2: ...


class BoardFullError(Exception):
    """Raised when food cannot be placed because every cell is occupied."""


def add_pos(a: Vec2, b: Vec2) -> Vec2:
    return a[0] + b[0], a[1] + b[1]


def wrap_pos(pos: Vec2, grid_size: int) -> Vec2:
    """Fold a position back onto the board; each axis wraps independently."""
    return pos[0] % grid_size, pos[1] % grid_size


@dataclass(frozen=True)
class GameSession:
    grid_size: int
    snake: Tuple[Vec2, ...]  # head at index 0
    direction: Vec2
    food: Vec2
    score: int = 0
    high_score: int = 0
    alive: bool = True
    game_over: bool = False
    tick_ms: int = GameConfig.tick_ms
    board_full: bool = False

    @property
    def head(self) -> Vec2:
        return self.snake[0]


def new_session(config: Optional[GameConfig] = None, high_score: int = 0) -> GameSession:
    config = config or GameConfig()
    return GameSession(
        grid_size=config.grid_size,
        snake=(tuple(config.start),),
        direction=tuple(config.start_direction),
        food=tuple(config.start_food),
        score=0,
        high_score=high_score,
        alive=True,
        game_over=False,
        tick_ms=config.tick_ms,
    )


def place_food(
    occupied: Iterable[Vec2],
    grid_size: int,
    rng: Optional[RandomSource] = None,
) -> Vec2:
    """Pick a uniformly random free cell by rejection sampling.

    Sampling gives up after ``4 * grid_size**2`` draws and picks directly from
    the remaining free cells instead, so a nearly full board still terminates.
    Raises ``BoardFullError`` when there is no free cell at all.
    """
    rng = rng or random
    taken = set(occupied)
    for _ in range(grid_size * grid_size * 4):
        candidate = (rng.randrange(grid_size), rng.randrange(grid_size))
        if candidate not in taken:
            return candidate

    available = [
        (x, y)
        for y in range(grid_size)
        for x in range(grid_size)
        if (x, y) not in taken
    ]
    if not available:
        raise BoardFullError(f"no free cell left on a {grid_size}x{grid_size} board")
    return rng.choice(available)


def _end(session: GameSession, board_full: bool = False) -> GameSession:
    return replace(
        session,
        alive=False,
        game_over=True,
        board_full=board_full,
        high_score=max(session.high_score, session.score),
    )


def step(
    session: GameSession,
    direction: Vec2,
    rng: Optional[RandomSource] = None,
) -> GameSession:
    """Advance ``session`` by one tick moving towards ``direction``.

    Returns a new session; the argument is never modified. A terminated
    session is returned as is.
    """
    if not session.alive:
        return session

    new_head = wrap_pos(add_pos(session.head, direction), session.grid_size)

    # The tail has not moved yet, so running into it counts as a collision.
    if new_head in session.snake:
        return _end(session)

    if new_head == session.food:
        grown = replace(
            session,
            snake=(new_head,) + session.snake,
            direction=direction,
            score=session.score + 1,
        )
        # Exclude the new head too, so food never spawns under the snake.
        try:
            food = place_food(grown.snake, session.grid_size, rng)
        except BoardFullError:
            return _end(grown, board_full=True)
        return replace(grown, food=food)

    return replace(
        session,
        snake=(new_head,) + session.snake[:-1],
        direction=direction,
    )
