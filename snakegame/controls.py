from __future__ import annotations

from typing import Dict, Optional

import pygame

from snakegame.config import DOWN, LEFT, RIGHT, UP, Vec2

KEY_DIRECTIONS: Dict[str, Vec2] = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
}

PYGAME_KEYS: Dict[int, str] = {
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
}


def on_key(current: Vec2, key: str) -> Vec2:
    """Return the direction after pressing ``key`` while moving along ``current``.

    Only turns onto the other axis are accepted: vertical keys while moving
    horizontally and the reverse. Reversals, same-axis presses and unknown
    keys leave ``current`` unchanged.
    """
    requested = KEY_DIRECTIONS.get(key)
    if requested is None:
        return current
    if requested[1] != 0 and current[1] == 0:
        return requested
    if requested[0] != 0 and current[0] == 0:
        return requested
    return current


def key_name(key: int) -> Optional[str]:
    return PYGAME_KEYS.get(key)


class KeyboardController:
    """Picks arrow-key presses out of the pygame event stream."""

    def handle(self, event: pygame.event.Event) -> Optional[str]:
        """Return the key identifier for an arrow-key press, else ``None``.

        A non-None result means the event is consumed: the host must not hand
        it to any other handler, even when the turn itself is later rejected.
        """
        if event.type != pygame.KEYDOWN:
            return None
        return key_name(event.key)
