"""
Session state for one play-through and the events it emits
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .configs.game_config import GAME_CONFIG
from .entities import Barrier, Bullet, Difficulty, Enemy, Player, PowerUp, PowerUpType
from .spawner import create_barriers, create_enemies


class EventType(str, Enum):
    SHOT_FIRED = "shotFired"
    ENEMY_HIT = "enemyHit"
    ENEMY_KILLED = "enemyKilled"
    PLAYER_HIT = "playerHit"
    POWER_UP_COLLECTED = "powerUpCollected"
    LEVEL_ADVANCED = "levelAdvanced"
    WAVE_RESET = "waveReset"
    GAME_OVER = "gameOver"


@dataclass
class GameEvent:
    kind: EventType
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Session:
    """Everything the simulation owns for one game"""
    player: Player
    difficulty: Difficulty = Difficulty.MEDIUM
    enemies: List[Enemy] = field(default_factory=list)
    bullets: List[Bullet] = field(default_factory=list)
    power_ups: List[PowerUp] = field(default_factory=list)
    barriers: List[Barrier] = field(default_factory=list)
    score: int = 0
    level: int = 1
    lives: int = GAME_CONFIG["starting_lives"]
    active_power_up: Optional[PowerUpType] = None
    power_up_remaining: float = 0.0  # ms
    game_over: bool = False
    width: float = GAME_CONFIG["width"]
    height: float = GAME_CONFIG["height"]
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @property
    def levels_completed(self) -> int:
        return self.level - 1


def make_player(width: float = GAME_CONFIG["width"], height: float = GAME_CONFIG["height"]) -> Player:
    pw = GAME_CONFIG["player_width"]
    ph = GAME_CONFIG["player_height"]
    return Player(
        x=width / 2 - pw / 2,
        y=height - ph - GAME_CONFIG["player_margin"],
        width=pw,
        height=ph,
        speed=GAME_CONFIG["player_speed"],
    )


def new_session(difficulty: Difficulty = Difficulty.MEDIUM, seed: Optional[int] = None) -> Session:
    """Fresh session: score, level, lives and power-up reset, first wave spawned"""
    session = Session(player=make_player(), difficulty=difficulty, rng=random.Random(seed))
    session.enemies = create_enemies(session.level, difficulty, session.rng, session.width)
    session.barriers = create_barriers(session.player.y, session.width)
    return session


def _rect(entity) -> Dict[str, float]:
    return {"x": entity.x, "y": entity.y, "width": entity.width, "height": entity.height}


def snapshot(session: Session) -> Dict[str, Any]:
    """Read-only, JSON-serializable view of the session for rendering"""
    player = session.player
    return {
        "player": {**_rect(player), "shielded": player.shielded, "rapid_fire": player.rapid_fire},
        "enemies": [
            {**_rect(e), "type": e.type.value, "health": e.health} for e in session.enemies
        ],
        "bullets": [
            {**_rect(b), "is_enemy_bullet": b.is_enemy_bullet} for b in session.bullets
        ],
        "power_ups": [{**_rect(p), "type": p.type.value} for p in session.power_ups],
        "barriers": [{**_rect(b), "health": b.health} for b in session.barriers],
        "score": session.score,
        "level": session.level,
        "lives": session.lives,
        "difficulty": session.difficulty.value,
        "active_power_up": session.active_power_up.value if session.active_power_up else None,
        "power_up_remaining": session.power_up_remaining,
    }
