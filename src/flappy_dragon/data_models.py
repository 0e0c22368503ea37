"""
data_models.py: Data structures shared by the game core and the driver.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION_MS, SPAWN_X, SPAWN_Y,
    GRAVITY, TERMINAL_VELOCITY, FLAP_IMPULSE, FLAP_FLOOR,
    GAP_MIN_Y, GAP_MAX_Y, GAP_BASE, GAP_MIN
)


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    DEAD = "dead"


class GameInput(Enum):
    """The discrete key events the driver can hand to the core, one per frame."""
    START = "start"
    QUIT = "quit"
    FLAP = "flap"
    ANY = "any"


@dataclass(frozen=True)
class GameConfig:
    """Screen size and physics tuning for one session."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    frame_duration_ms: float = FRAME_DURATION_MS

    spawn_x: int = SPAWN_X
    spawn_y: int = SPAWN_Y
    gravity: float = GRAVITY
    terminal_velocity: float = TERMINAL_VELOCITY
    flap_impulse: float = FLAP_IMPULSE
    flap_floor: float = FLAP_FLOOR

    gap_min_y: int = GAP_MIN_Y
    gap_max_y: int = GAP_MAX_Y
    gap_base: int = GAP_BASE
    gap_min: int = GAP_MIN

    def validate(self):
        """Raises ValueError if the configuration cannot drive a game."""
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError(
                f"Screen size must be positive, got {self.screen_width}x{self.screen_height}")
        if self.frame_duration_ms <= 0:
            raise ValueError(f"frame_duration_ms must be positive, got {self.frame_duration_ms}")
        for name in ("gravity", "terminal_velocity", "flap_impulse", "flap_floor"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.gap_min_y >= self.gap_max_y:
            raise ValueError(f"Empty gap range [{self.gap_min_y}, {self.gap_max_y})")
        if self.gap_min < 2:
            # Anything smaller makes the half-size zero
            raise ValueError(f"gap_min must be at least 2, got {self.gap_min}")


@dataclass(frozen=True)
class WallView:
    """Wall geometry translated to screen columns."""
    screen_x: int
    gap_top: int
    gap_bottom: int
    rows: Tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RenderState:
    """Read-only snapshot of everything the driver needs to draw one frame."""
    mode: GameMode
    score: int
    dragon_col: int
    dragon_row: int
    wall: WallView
