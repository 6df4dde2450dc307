"""
Power-up spawning, pickup and the single timed-effect slot
"""

from __future__ import annotations

import logging
from typing import List

from .configs.game_config import GAME_CONFIG, POWERUP_CONFIG
from .entities import PowerUp, PowerUpType
from .movement import tick_scale
from .session import EventType, GameEvent, Session
from .utils import overlaps

logger = logging.getLogger(__name__)


def spawn_chance(session: Session, delta_ms: float) -> float:
    chance = POWERUP_CONFIG["spawn_rate"] * session.difficulty.multiplier * tick_scale(delta_ms)
    return min(chance, 1.0)


def maybe_spawn_power_up(session: Session, delta_ms: float):
    """Roll for a new power-up dropping in from above the field"""
    if session.rng.random() >= spawn_chance(session, delta_ms):
        return None

    size = POWERUP_CONFIG["size"]
    power_up = PowerUp(
        x=session.rng.uniform(0, session.width - size),
        y=-size,
        type=session.rng.choice(list(PowerUpType)),
        width=size,
        height=size,
        speed=POWERUP_CONFIG["fall_speed"],
    )
    session.power_ups.append(power_up)
    return power_up


def clear_timed_effect(session: Session):
    session.active_power_up = None
    session.power_up_remaining = 0.0
    session.player.shielded = False
    session.player.rapid_fire = False


def apply_power_up(session: Session, power_up_type: PowerUpType):
    """Apply a pickup; a timed effect replaces whatever occupied the slot"""
    if not power_up_type.is_timed:
        session.lives = min(session.lives + 1, GAME_CONFIG["max_lives"])
        return

    clear_timed_effect(session)
    session.active_power_up = power_up_type
    session.power_up_remaining = POWERUP_CONFIG["duration_ms"]
    if power_up_type is PowerUpType.SHIELD:
        session.player.shielded = True
    elif power_up_type is PowerUpType.RAPID_FIRE:
        session.player.rapid_fire = True
    else:
        raise ValueError(f"Unknown power-up type: {power_up_type}")


def advance_power_up_timer(session: Session, delta_ms: float):
    if session.active_power_up is None:
        return
    session.power_up_remaining -= delta_ms
    if session.power_up_remaining <= 0:
        logger.debug("%s expired", session.active_power_up.value)
        clear_timed_effect(session)


def collect_power_ups(session: Session, events: List[GameEvent]):
    for p in session.power_ups:
        if p.alive and overlaps(p, session.player):
            p.alive = False
            apply_power_up(session, p.type)
            events.append(GameEvent(EventType.POWER_UP_COLLECTED, {"type": p.type.value}))

    session.power_ups = [p for p in session.power_ups if p.alive]
