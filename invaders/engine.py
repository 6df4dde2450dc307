"""
The per-frame simulation step.

``tick`` advances a session by an elapsed-time delta and returns the
discrete events it produced. It never draws and never blocks, so it can run
headless under tests or an agent environment just as well as under a window.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .combat import enemy_fire, resolve_collisions
from .configs.game_config import GAME_CONFIG, POWERUP_CONFIG
from .entities import Bullet
from .movement import move_bullet, move_enemies, move_player, move_power_up
from .powerups import advance_power_up_timer, collect_power_ups, maybe_spawn_power_up
from .session import EventType, GameEvent, Session
from .spawner import create_enemies

logger = logging.getLogger(__name__)


@dataclass
class Intents:
    """Player intents for one tick"""
    move_left: bool = False
    move_right: bool = False
    fire: bool = False


def shoot(session: Session) -> List[Bullet]:
    """Fire from the player's nose; rapid fire adds two flanking shots"""
    player = session.player
    bw = GAME_CONFIG["bullet_width"]
    bh = GAME_CONFIG["bullet_height"]
    cx = player.x + player.width / 2 - bw / 2
    offsets = [0]
    if player.rapid_fire:
        spread = POWERUP_CONFIG["spread_offset"]
        offsets = [-spread, 0, spread]

    bullets = [
        Bullet(x=cx + dx, y=player.y, width=bw, height=bh, speed=-GAME_CONFIG["bullet_speed"])
        for dx in offsets
    ]
    session.bullets.extend(bullets)
    return bullets


def advance_wave(session: Session, events: List[GameEvent]):
    """Cleared roster: next level spawns immediately"""
    session.level += 1
    session.enemies = create_enemies(session.level, session.difficulty, session.rng, session.width)
    events.append(GameEvent(EventType.LEVEL_ADVANCED, {"level": session.level}))
    logger.info("Level %d (%d enemies)", session.level, len(session.enemies))


def tick(
    session: Session,
    delta_ms: float,
    intents: Optional[Intents] = None,
) -> Tuple[Session, List[GameEvent]]:
    """Advance ``session`` by ``delta_ms`` milliseconds.

    The session is updated in place and returned with the events of this
    tick. A finished session is left untouched.
    """
    events: List[GameEvent] = []
    if session.game_over:
        return session, events

    # A clock running backwards must not reverse motion
    delta_ms = max(0.0, delta_ms)

    if intents is not None:
        session.player.move_left = intents.move_left
        session.player.move_right = intents.move_right
        if intents.fire:
            bullets = shoot(session)
            events.append(GameEvent(EventType.SHOT_FIRED, {"count": len(bullets)}))

    advance_power_up_timer(session, delta_ms)

    move_player(session.player, delta_ms, session.width)
    move_enemies(session.enemies, delta_ms, session.width, session.height)
    for b in session.bullets:
        move_bullet(b, delta_ms, session.height)
    for p in session.power_ups:
        move_power_up(p, delta_ms, session.height)
    session.bullets = [b for b in session.bullets if b.alive]
    session.power_ups = [p for p in session.power_ups if p.alive]

    enemy_fire(session, delta_ms)
    maybe_spawn_power_up(session, delta_ms)

    resolve_collisions(session, events)
    if session.game_over:
        return session, events

    collect_power_ups(session, events)

    if not session.enemies:
        advance_wave(session, events)

    return session, events
