"""Configuration dictionaries for the invaders simulation"""

from .game_config import (
    GAME_CONFIG,
    DIFFICULTY_CONFIG,
    ENEMY_TYPE_CONFIG,
    MOVEMENT_CONFIG,
    SPAWN_CONFIG,
    POWERUP_CONFIG,
    HIGHSCORE_CONFIG,
    ENV_CONFIG,
)

__all__ = [
    "GAME_CONFIG",
    "DIFFICULTY_CONFIG",
    "ENEMY_TYPE_CONFIG",
    "MOVEMENT_CONFIG",
    "SPAWN_CONFIG",
    "POWERUP_CONFIG",
    "HIGHSCORE_CONFIG",
    "ENV_CONFIG",
]
