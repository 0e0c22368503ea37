#!/usr/bin/env python3
"""
flappy_client.py

pygame driver for the game core: opens the window, maps key presses to game
inputs, pumps frames into GameSession and draws its render state as a
character grid.
"""

import random
from typing import Optional, Tuple

import pygame

from .constants import (
    WINDOW_TITLE, CELL_SIZE, RENDER_FPS, BLACK, WHITE, NAVY, YELLOW, RED,
    DRAGON_GLYPH, WALL_GLYPH
)
from .data_models import GameConfig, GameInput, GameMode, RenderState
from .game_session import GameSession

Color = Tuple[int, int, int]

KEY_BINDINGS = {
    pygame.K_p: GameInput.START,
    pygame.K_q: GameInput.QUIT,
    pygame.K_SPACE: GameInput.FLAP,
}


def translate_key(event: pygame.event.Event) -> Optional[GameInput]:
    """Maps a single pygame event to a game input. Non-key events give None."""
    if event.type != pygame.KEYDOWN:
        return None
    return KEY_BINDINGS.get(event.key, GameInput.ANY)


# ----------------- Glyph Grid (drawing primitives) -----------------

class GlyphGrid:
    """A fixed-size grid of character cells drawn onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, cols: int, rows: int, cell_size: int = CELL_SIZE):
        self.surface = surface
        self.cols = cols
        self.rows = rows
        self.cell_size = cell_size
        self.font = pygame.font.Font(None, cell_size + 4)

    def cls(self):
        self.surface.fill(BLACK)

    def cls_bg(self, color: Color):
        self.surface.fill(color)

    def set(self, col: int, row: int, fg: Color, bg: Color, glyph: str):
        """Draws one glyph into a cell. Cells outside the grid are skipped."""
        if not (0 <= col < self.cols and 0 <= row < self.rows):
            return
        size = self.cell_size
        cell = pygame.Rect(col * size, row * size, size, size)
        pygame.draw.rect(self.surface, bg, cell)
        text = self.font.render(glyph, True, fg)
        self.surface.blit(text, text.get_rect(center=cell.center))

    def print(self, col: int, row: int, text: str, fg: Color = WHITE, bg: Color = BLACK):
        for offset, glyph in enumerate(text):
            self.set(col + offset, row, fg, bg, glyph)

    def print_centered(self, row: int, text: str, fg: Color = WHITE, bg: Color = BLACK):
        self.print((self.cols - len(text)) // 2, row, text, fg, bg)


def draw_frame(grid: GlyphGrid, state: RenderState):
    """Renders one frame of the game for the given mode."""
    if state.mode is GameMode.MENU:
        grid.cls()
        grid.print_centered(5, "Welcome to Flappy Dragon")
        grid.print_centered(8, "(P) Play")
        grid.print_centered(9, "(Q) Quit")

    elif state.mode is GameMode.PLAYING:
        grid.cls_bg(NAVY)
        grid.print(0, 0, "Press SPACE to flap your dragon's wings")
        grid.print(0, 1, f"Score: {state.score}")

        grid.set(state.dragon_col, state.dragon_row, YELLOW, BLACK, DRAGON_GLYPH)
        for y in state.wall.rows:
            grid.set(state.wall.screen_x, y, RED, BLACK, WALL_GLYPH)

    else:
        grid.cls()
        grid.print_centered(9, "You are dead!")
        grid.print_centered(10, f"Your score was {state.score}")
        grid.print_centered(11, "Press any key to continue...")


# ----------------- Game Client (window / frame pump) -----------------

class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.session = GameSession(config, rng)
        config = self.session.config

        pygame.init()
        self.screen = pygame.display.set_mode(
            (config.screen_width * CELL_SIZE, config.screen_height * CELL_SIZE))
        pygame.display.set_caption(WINDOW_TITLE)

        self.grid = GlyphGrid(self.screen, config.screen_width, config.screen_height)
        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop."""
        print(f"{WINDOW_TITLE} started. Press P to play, Q to quit.")

        running = True
        try:
            while running:
                frame_time_ms = float(self.clock.tick(RENDER_FPS))

                # The core takes at most one key per frame; extra presses are dropped
                key = None
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    mapped = translate_key(event)
                    if key is None:
                        key = mapped

                previous_mode = self.session.mode
                if self.session.update(key, frame_time_ms):
                    running = False

                if previous_mode is GameMode.PLAYING and self.session.mode is GameMode.DEAD:
                    print(f"Game over. Score: {self.session.score}")

                draw_frame(self.grid, self.session.render_state())
                pygame.display.flip()
        finally:
            print("Shutting down.")
            pygame.quit()


def main() -> int:
    try:
        client = FlappyClient()
    except pygame.error as e:
        print(f"Could not initialise display: {e}")
        pygame.quit()
        return 1

    client.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
