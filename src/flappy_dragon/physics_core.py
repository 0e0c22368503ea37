"""
physics_core.py: Dragon kinematics, wall generation and collision logic.
"""

import random
from dataclasses import dataclass, field
from typing import List

from .data_models import GameConfig, WallView


@dataclass
class Dragon:
    """The player-controlled glider."""
    x: int
    y: int
    config: GameConfig = field(repr=False, compare=False)
    velocity: float = 0.0

    @classmethod
    def spawn(cls, config: GameConfig) -> "Dragon":
        return cls(x=config.spawn_x, y=config.spawn_y, config=config)

    def apply_gravity_and_move(self):
        """
        Advances the dragon by one physics step: gravity, vertical move, ceiling
        clamp and one column to the right.
        """
        self.velocity = min(self.velocity + self.config.gravity, self.config.terminal_velocity)

        # Truncates toward zero, so small upward speeds do not move the dragon
        self.y += int(self.velocity)
        if self.y < 0:
            self.y = 0

        self.x += 1

    def flap(self):
        self.velocity = max(self.velocity - self.config.flap_impulse, -self.config.flap_floor)


@dataclass
class Wall:
    """A vertical wall with a single passable gap."""
    x: int
    gap_y: int
    half_size: int

    @staticmethod
    def half_size_for(score: int, config: GameConfig) -> int:
        """Gap half-size narrows by one every two points and floors at gap_min // 2."""
        return max(config.gap_min, config.gap_base - score) // 2

    @classmethod
    def spawn(cls, x: int, score: int, rng: random.Random, config: GameConfig) -> "Wall":
        return cls(
            x=x,
            gap_y=rng.randrange(config.gap_min_y, config.gap_max_y),
            half_size=cls.half_size_for(score, config),
        )

    @property
    def gap_top(self) -> int:
        return self.gap_y - self.half_size

    @property
    def gap_bottom(self) -> int:
        return self.gap_y + self.half_size

    def collides_with(self, dragon: Dragon) -> bool:
        # Exact column match: the dragon moves one column per step, so it can't skip a wall
        return self.x == dragon.x and (dragon.y < self.gap_top or dragon.y > self.gap_bottom)

    def rows(self, screen_height: int) -> List[int]:
        """Rows painted for this wall. The gap's edge rows are drawn but still passable."""
        return [
            y for y in range(screen_height)
            if not (self.gap_top < y < self.gap_bottom)
        ]

    def view(self, player_x: int, screen_height: int) -> WallView:
        return WallView(
            screen_x=self.x - player_x,
            gap_top=self.gap_top,
            gap_bottom=self.gap_bottom,
            rows=tuple(self.rows(screen_height)),
        )
