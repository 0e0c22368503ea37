"""
game_session.py: The Menu / Playing / Dead mode machine driven once per rendered frame.
"""

import random
from typing import Optional

from .data_models import GameConfig, GameInput, GameMode, RenderState
from .physics_core import Dragon, Wall


class GameSession:
    """
    Owns the dragon, the current wall and the score.

    The driver calls update() once per frame with at most one input and the
    elapsed milliseconds, then draws from render_state(). Physics only advances
    in PLAYING, and only once the frame accumulator passes frame_duration_ms.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.config.validate()
        self.rng = rng or random.Random()

        self.mode = GameMode.MENU
        self.quit_requested = False
        self.frame_time = 0.0
        self.score = 0
        self.dragon = Dragon.spawn(self.config)
        self.wall = Wall.spawn(self.config.screen_width, 0, self.rng, self.config)

        self._handlers = {
            GameMode.MENU: self._main_menu,
            GameMode.PLAYING: self._play,
            GameMode.DEAD: self._dead,
        }

    def update(self, key: Optional[GameInput], dt_ms: float) -> bool:
        """Advances one frame. Returns True once the player has asked to quit."""
        self._handlers[self.mode](key, dt_ms)
        return self.quit_requested

    def restart(self):
        self.dragon = Dragon.spawn(self.config)
        self.wall = Wall.spawn(self.config.screen_width, 0, self.rng, self.config)
        self.score = 0
        self.frame_time = 0.0
        self.mode = GameMode.PLAYING

    def render_state(self) -> RenderState:
        return RenderState(
            mode=self.mode,
            score=self.score,
            dragon_col=0,
            dragon_row=self.dragon.y,
            wall=self.wall.view(self.dragon.x, self.config.screen_height),
        )

    # ----------------- Mode handlers -----------------

    def _main_menu(self, key: Optional[GameInput], dt_ms: float):
        if key is GameInput.START:
            self.restart()
        elif key is GameInput.QUIT:
            self.quit_requested = True

    def _play(self, key: Optional[GameInput], dt_ms: float):
        self.frame_time += dt_ms
        if self.frame_time > self.config.frame_duration_ms:
            self.frame_time = 0.0
            self.dragon.apply_gravity_and_move()

        # Input is sampled every frame, independent of the physics step
        if key is GameInput.FLAP:
            self.dragon.flap()

        if self.dragon.y > self.config.screen_height or self.wall.collides_with(self.dragon):
            self.mode = GameMode.DEAD

        if self.dragon.x > self.wall.x:
            self.score += 1
            self.wall = Wall.spawn(
                self.dragon.x + self.config.screen_width, self.score, self.rng, self.config)

    def _dead(self, key: Optional[GameInput], dt_ms: float):
        if key is not None:
            self.mode = GameMode.MENU
