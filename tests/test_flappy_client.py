from __future__ import annotations

import pygame
import pytest

from flappy_dragon.constants import BLACK, CELL_SIZE, NAVY
from flappy_dragon.data_models import GameInput, GameMode, RenderState, WallView
from flappy_dragon.flappy_client import FlappyClient, GlyphGrid, draw_frame, main, translate_key


@pytest.fixture
def grid():
    pygame.font.init()
    surface = pygame.Surface((20 * CELL_SIZE, 12 * CELL_SIZE))
    yield GlyphGrid(surface, cols=20, rows=12)
    pygame.font.quit()


def _cell_corner(grid: GlyphGrid, col: int, row: int):
    return tuple(grid.surface.get_at((col * grid.cell_size, row * grid.cell_size)))[:3]


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_p, GameInput.START),
        (pygame.K_q, GameInput.QUIT),
        (pygame.K_SPACE, GameInput.FLAP),
        (pygame.K_a, GameInput.ANY),
        (pygame.K_RETURN, GameInput.ANY),
    ],
)
def test_translate_key_down(key: int, expected: GameInput) -> None:
    event = pygame.event.Event(pygame.KEYDOWN, key=key)
    assert translate_key(event) is expected


def test_translate_ignores_non_key_events() -> None:
    assert translate_key(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE)) is None
    assert translate_key(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))) is None


def test_set_skips_cells_off_grid(grid: GlyphGrid) -> None:
    grid.cls_bg(NAVY)
    grid.set(-1, 0, (255, 0, 0), BLACK, "|")
    grid.set(20, 0, (255, 0, 0), BLACK, "|")
    grid.set(0, 12, (255, 0, 0), BLACK, "|")
    assert _cell_corner(grid, 0, 0) == NAVY
    assert _cell_corner(grid, 19, 11) == NAVY


def test_playing_frame_draws_wall_rows_only(grid: GlyphGrid) -> None:
    state = RenderState(
        mode=GameMode.PLAYING,
        score=3,
        dragon_col=0,
        dragon_row=6,
        wall=WallView(screen_x=15, gap_top=4, gap_bottom=8, rows=(0, 1, 2, 3, 4, 8, 9, 10, 11)),
    )
    draw_frame(grid, state)

    assert _cell_corner(grid, 15, 4) == BLACK
    assert _cell_corner(grid, 15, 6) == NAVY
    assert _cell_corner(grid, 0, 6) == BLACK
    assert _cell_corner(grid, 10, 10) == NAVY


def test_wall_behind_dragon_is_not_drawn(grid: GlyphGrid) -> None:
    state = RenderState(
        mode=GameMode.PLAYING,
        score=0,
        dragon_col=0,
        dragon_row=6,
        wall=WallView(screen_x=-1, gap_top=4, gap_bottom=8, rows=(10, 11)),
    )
    draw_frame(grid, state)
    assert _cell_corner(grid, 0, 10) == NAVY


@pytest.mark.parametrize("mode", [GameMode.MENU, GameMode.DEAD])
def test_menu_and_dead_clear_to_black(grid: GlyphGrid, mode: GameMode) -> None:
    grid.cls_bg(NAVY)
    state = RenderState(mode=mode, score=5, dragon_col=0, dragon_row=0, wall=WallView(0, 0, 0))
    draw_frame(grid, state)
    assert _cell_corner(grid, 19, 11) == BLACK


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


def _post_keys(*keys: int) -> None:
    for key in keys:
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


def test_run_stops_on_quit_request(headless, capsys) -> None:
    client = FlappyClient()
    _post_keys(pygame.K_q)

    client.run()

    assert client.session.quit_requested is True
    assert client.session.mode is GameMode.MENU
    assert "Shutting down." in capsys.readouterr().out


def test_run_stops_on_window_close(headless) -> None:
    client = FlappyClient()
    pygame.event.post(pygame.event.Event(pygame.QUIT))

    client.run()

    assert client.session.quit_requested is False
    assert client.session.mode is GameMode.MENU


def test_run_hands_only_first_key_of_frame_to_session(headless) -> None:
    client = FlappyClient()
    _post_keys(pygame.K_p, pygame.K_q)
    pygame.event.post(pygame.event.Event(pygame.QUIT))

    client.run()

    assert client.session.mode is GameMode.PLAYING
    assert client.session.quit_requested is False


def test_main_reports_display_failure(headless, monkeypatch, capsys) -> None:
    def _broken_set_mode(*args, **kwargs):
        raise pygame.error("no video device")

    monkeypatch.setattr(pygame.display, "set_mode", _broken_set_mode)

    assert main() == 1
    out = capsys.readouterr().out
    assert "Could not initialise display: no video device" in out
