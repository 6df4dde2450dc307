"""Invaders - arcade shooter simulation with a headless Gymnasium interface"""

from .engine import Intents, shoot, tick
from .entities import Difficulty, EnemyType, GameState, MovementPattern, PowerUpType
from .highscores import HighScoreTable
from .session import EventType, GameEvent, Session, new_session, snapshot
from .shooter_env import InvadersEnv, run_random_episode
from .state_machine import Game, Intent

__all__ = [
    "Intents",
    "shoot",
    "tick",
    "Difficulty",
    "EnemyType",
    "GameState",
    "MovementPattern",
    "PowerUpType",
    "HighScoreTable",
    "EventType",
    "GameEvent",
    "Session",
    "new_session",
    "snapshot",
    "InvadersEnv",
    "run_random_episode",
    "Game",
    "Intent",
]
