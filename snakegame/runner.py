from __future__ import annotations

import logging
import random
from typing import Optional

from snakegame.board import Snapshot, snapshot
from snakegame.config import GameConfig, Vec2
from snakegame.controls import on_key
from snakegame.game import GameSession, RandomSource, new_session, step
from snakegame.storage import HighScoreStore, MemoryHighScoreStore

logger = logging.getLogger(__name__)


class SnakeGame:
    """Owns the current session and hands it to the engine once per tick."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        store: Optional[HighScoreStore] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.store = store if store is not None else MemoryHighScoreStore()
        self.random = rng if rng is not None else random.Random(self.config.seed)

        self.session: GameSession = new_session(self.config, high_score=self.store.load())
        self.pending: Vec2 = self.session.direction

    @property
    def show_modal(self) -> bool:
        return self.session.game_over

    def press(self, key: str) -> Vec2:
        """Queue a turn for the next tick.

        Turns are judged against the direction the snake is actually moving
        in, so two quick presses inside one tick cannot fold it back onto
        itself. A rejected press keeps the earlier accepted one.
        """
        requested = on_key(self.session.direction, key)
        if requested != self.session.direction:
            self.pending = requested
        return self.pending

    def tick(self) -> GameSession:
        if not self.session.alive:
            return self.session

        previous_best = self.session.high_score
        self.session = step(self.session, self.pending, self.random)
        self.pending = self.session.direction

        if self.session.game_over:
            logger.info(
                "Game over: score=%d high_score=%d board_full=%s",
                self.session.score,
                self.session.high_score,
                self.session.board_full,
            )
        if self.session.high_score > previous_best:
            self.store.save(self.session.high_score)
        return self.session

    def restart(self) -> GameSession:
        self.session = new_session(self.config, high_score=self.session.high_score)
        self.pending = self.session.direction
        return self.session

    def snapshot(self) -> Snapshot:
        return snapshot(self.session)
