from __future__ import annotations

from typing import Optional, Tuple

import pygame

from snakegame.board import EMPTY, FOOD, SNAKE, Snapshot, encode_board

Color = Tuple[int, int, int]

BACKGROUND: Color = (255, 255, 255)
TEXT: Color = (0, 0, 0)
CELL_COLORS = {
    SNAKE: (30, 41, 59),
    FOOD: (127, 29, 29),
    EMPTY: (229, 231, 235),
}
BUTTON: Color = (30, 41, 59)
BUTTON_TEXT: Color = (255, 255, 255)

GAP = 4
MARGIN = 40
HEADER = 80
FOOTER = 80


class Renderer:
    def __init__(self, grid_size: int, cell_size: int) -> None:
        self.grid_size = grid_size
        self.cell_size = cell_size
        self.board_px = grid_size * cell_size + (grid_size - 1) * GAP
        self.width = self.board_px + 2 * MARGIN
        self.height = HEADER + self.board_px + FOOTER

        self._window: Optional[pygame.Surface] = None
        self._title_font: Optional[pygame.font.Font] = None
        self._font: Optional[pygame.font.Font] = None
        self.restart_button: Optional[pygame.Rect] = None

    def open(self) -> None:
        pygame.init()
        self._window = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Snake")
        self._title_font = pygame.font.SysFont(None, 40)
        self._font = pygame.font.SysFont(None, 28)

    def close(self) -> None:
        pygame.quit()

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        step = self.cell_size + GAP
        return pygame.Rect(
            MARGIN + x * step,
            HEADER + y * step,
            self.cell_size,
            self.cell_size,
        )

    def draw(self, snap: Snapshot, show_modal: bool) -> None:
        assert self._window is not None, "open() must be called before draw()"
        assert self._title_font is not None and self._font is not None

        self._window.fill(BACKGROUND)
        title = self._title_font.render("Modern Snake Game", True, TEXT)
        self._window.blit(title, title.get_rect(center=(self.width // 2, HEADER // 2)))

        board = encode_board(snap)
        for y in range(self.grid_size):
            for x in range(self.grid_size):
                color = CELL_COLORS[int(board[y, x])]
                pygame.draw.rect(self._window, color, self.cell_rect(x, y), border_radius=6)

        bottom = HEADER + self.board_px
        score = self._font.render(f"Score: {snap.score}", True, TEXT)
        best = self._font.render(f"High Score: {snap.high_score}", True, TEXT)
        self._window.blit(score, score.get_rect(center=(self.width // 2, bottom + 24)))
        self._window.blit(best, best.get_rect(center=(self.width // 2, bottom + 56)))

        if show_modal:
            self._draw_modal(snap)
        else:
            self.restart_button = None

        pygame.display.flip()

    def _draw_modal(self, snap: Snapshot) -> None:
        assert self._window is not None and self._font is not None

        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 128))
        self._window.blit(overlay, (0, 0))

        box = pygame.Rect(0, 0, 300, 220)
        box.center = (self.width // 2, self.height // 2)
        pygame.draw.rect(self._window, BACKGROUND, box, border_radius=10)

        lines = (
            ("Game Over!", box.top + 40),
            (f"Your Score: {snap.score}", box.top + 80),
            (f"High Score: {snap.high_score}", box.top + 112),
        )
        for text, y in lines:
            surface = self._font.render(text, True, TEXT)
            self._window.blit(surface, surface.get_rect(center=(box.centerx, y)))

        button = pygame.Rect(0, 0, 120, 40)
        button.center = (box.centerx, box.bottom - 45)
        pygame.draw.rect(self._window, BUTTON, button, border_radius=6)
        label = self._font.render("Restart", True, BUTTON_TEXT)
        self._window.blit(label, label.get_rect(center=button.center))
        self.restart_button = button

    def hits_restart(self, pos: Tuple[int, int]) -> bool:
        return self.restart_button is not None and self.restart_button.collidepoint(pos)
