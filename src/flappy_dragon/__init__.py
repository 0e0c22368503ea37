"""
Flappy Dragon: a terminal-style arcade game about steering a dragon through walls.
"""

from .data_models import GameConfig, GameInput, GameMode, RenderState, WallView
from .game_session import GameSession
from .physics_core import Dragon, Wall

__all__ = [
    "Dragon",
    "GameConfig",
    "GameInput",
    "GameMode",
    "GameSession",
    "RenderState",
    "Wall",
    "WallView",
]
