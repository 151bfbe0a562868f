from __future__ import annotations

import argparse
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

import pygame

from snakegame.config import CELL_SIZE, GRID_SIZE, TICK_MS, GameConfig, default_highscore_path
from snakegame.controls import KeyboardController
from snakegame.render import Renderer
from snakegame.runner import SnakeGame
from snakegame.storage import open_store

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1
RESTART_KEYS = (pygame.K_r, pygame.K_RETURN)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play wrap-around Snake")
    parser.add_argument("--grid", type=int, default=GRID_SIZE, help="Board size in cells per side")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS, help="Milliseconds between moves")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="Cell size in pixels")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument(
        "--highscore-file",
        type=Path,
        default=None,
        help="Where to keep the high score (default: ~/.snakegame/highscore.json)",
    )
    parser.add_argument(
        "--no-persist",
        action="store_true",
        help="Keep the high score in memory only",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    if args.no_persist:
        highscore_path = None
    else:
        highscore_path = args.highscore_file or default_highscore_path()
    return GameConfig(
        grid_size=args.grid,
        tick_ms=args.tick_ms,
        cell_size=args.cell_size,
        seed=args.seed,
        highscore_path=highscore_path,
    )


@contextmanager
def game_clock(tick_ms: int) -> Iterator[int]:
    """Run the tick timer and the key listener for the duration of the block.

    Both are released together on exit, including when the block raises.
    """
    pygame.event.set_allowed([pygame.KEYDOWN, TICK_EVENT])
    pygame.time.set_timer(TICK_EVENT, tick_ms)
    logger.debug("Tick timer started at %d ms", tick_ms)
    try:
        yield TICK_EVENT
    finally:
        pygame.time.set_timer(TICK_EVENT, 0)
        pygame.event.set_blocked(pygame.KEYDOWN)
        logger.debug("Tick timer and key listener released")


def wants_restart(event: pygame.event.Event, game: SnakeGame, renderer: Renderer) -> bool:
    if not game.show_modal:
        return False
    if event.type == pygame.KEYDOWN:
        return event.key in RESTART_KEYS
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        return renderer.hits_restart(event.pos)
    return False


def run(game: SnakeGame, renderer: Renderer) -> int:
    keyboard = KeyboardController()
    clock = pygame.time.Clock()
    running = True

    renderer.draw(game.snapshot(), game.show_modal)
    with game_clock(game.config.tick_ms) as tick_event:
        while running:
            redraw = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type == tick_event:
                    game.tick()
                    redraw = True
                    continue
                key = keyboard.handle(event)
                if key is not None:
                    game.press(key)
                    continue
                if wants_restart(event, game, renderer):
                    game.restart()
                    redraw = True
            if redraw:
                renderer.draw(game.snapshot(), game.show_modal)
            clock.tick(60)

    return game.session.score


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = build_config(args)
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}")

    game = SnakeGame(config, store=open_store(config.highscore_path))
    renderer = Renderer(config.grid_size, config.cell_size)
    renderer.open()
    try:
        score = run(game, renderer)
    finally:
        renderer.close()
    print(f"Final score: {score}  High score: {game.session.high_score}")


if __name__ == "__main__":
    main()
