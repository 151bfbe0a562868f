from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from snakegame.config import Vec2
from snakegame.game import GameSession

EMPTY, SNAKE, FOOD = 0, 1, 2


@dataclass(frozen=True)
class Snapshot:
    """What the renderer needs to redraw one frame."""

    grid_size: int
    snake: Tuple[Vec2, ...]
    food: Vec2
    score: int
    high_score: int
    alive: bool
    game_over: bool


def snapshot(session: GameSession) -> Snapshot:
    return Snapshot(
        grid_size=session.grid_size,
        snake=session.snake,
        food=session.food,
        score=session.score,
        high_score=session.high_score,
        alive=session.alive,
        game_over=session.game_over,
    )


def encode_board(snap: Snapshot) -> np.ndarray:
    """Grid of cell codes indexed ``[y, x]``; snake cells win over food."""
    size = snap.grid_size
    board = np.full((size, size), EMPTY, dtype=np.int8)

    food_x, food_y = snap.food
    if 0 <= food_x < size and 0 <= food_y < size:
        board[food_y, food_x] = FOOD

    for x, y in snap.snake:
        board[y, x] = SNAKE

    return board


def cell_at(snap: Snapshot, pos: Vec2) -> str:
    if pos in snap.snake:
        return "snake"
    if pos == snap.food:
        return "food"
    return "empty"
