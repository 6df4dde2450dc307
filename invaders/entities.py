"""
Game entity dataclasses and type tags
"""

from dataclasses import dataclass
from enum import Enum

from .configs.game_config import DIFFICULTY_CONFIG


class EnemyType(str, Enum):
    BASIC = "basic"
    FAST = "fast"
    TOUGH = "tough"
    ZIGZAG = "zigzag"
    CIRCULAR = "circular"
    DIVING = "diving"
    BOSS = "boss"


class MovementPattern(str, Enum):
    LINEAR = "linear"
    ZIGZAG = "zigzag"
    CIRCULAR = "circular"
    DIVING = "diving"


class PowerUpType(str, Enum):
    SHIELD = "shield"
    RAPID_FIRE = "rapidFire"
    EXTRA_LIFE = "extraLife"

    @property
    def is_timed(self) -> bool:
        return self is not PowerUpType.EXTRA_LIFE


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def multiplier(self) -> float:
        return DIFFICULTY_CONFIG[self.value]


class GameState(str, Enum):
    MENU = "menu"
    DIFFICULTY_SELECT = "difficultySelect"
    PLAYING = "playing"
    GAME_OVER = "gameOver"
    HIGH_SCORES = "highScores"


@dataclass
class Player:
    """Player ship at the bottom of the field"""
    x: float
    y: float
    width: float = 50.0
    height: float = 40.0
    speed: float = 5.0
    move_left: bool = False
    move_right: bool = False
    shielded: bool = False
    rapid_fire: bool = False


@dataclass
class Enemy:
    """Enemy ship; the movement anchor is where it was spawned"""
    x: float
    y: float
    width: float
    height: float
    speed: float  # signed, flips on wall contact for linear movers
    type: EnemyType = EnemyType.BASIC
    health: int = 1
    can_shoot: bool = False
    shoot_cooldown: float = 0.0  # frames
    movement_pattern: MovementPattern = MovementPattern.LINEAR
    movement_timer: float = 0.0  # seconds
    initial_x: float = 0.0
    initial_y: float = 0.0
    alive: bool = True

    @property
    def is_boss(self) -> bool:
        return self.type is EnemyType.BOSS


@dataclass
class Bullet:
    """Bullet projectile; negative speed travels up"""
    x: float
    y: float
    width: float
    height: float
    speed: float
    is_enemy_bullet: bool = False
    alive: bool = True


@dataclass
class PowerUp:
    """Falling collectible"""
    x: float
    y: float
    type: PowerUpType
    width: float = 20.0
    height: float = 20.0
    speed: float = 2.0
    alive: bool = True


@dataclass
class Barrier:
    """Static cover that soaks enemy fire"""
    x: float
    y: float
    width: float = 60.0
    height: float = 20.0
    health: int = 5
