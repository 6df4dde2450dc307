"""
Collision handling between bullets, enemies, barriers and the player.

Each pass marks dead entities with ``alive = False`` and compacts the
collection afterwards, so nothing is removed from a list while it is being
scanned.
"""

from __future__ import annotations

import logging
from typing import List

from .configs.game_config import ENEMY_TYPE_CONFIG, GAME_CONFIG, SPAWN_CONFIG
from .entities import Bullet, Difficulty, Enemy, EnemyType
from .movement import tick_scale
from .session import EventType, GameEvent, Session
from .spawner import create_enemies, initial_shoot_cooldown
from .utils import overlaps, round_half_up

logger = logging.getLogger(__name__)


def points_for(enemy_type: EnemyType, difficulty: Difficulty) -> int:
    """Score awarded for destroying an enemy of ``enemy_type``"""
    return round_half_up(ENEMY_TYPE_CONFIG[enemy_type.value]["points"] * difficulty.multiplier)


def lose_life(session: Session, events: List[GameEvent], cause: str):
    """Take one life; the session ends the first time lives reach zero"""
    if session.game_over:
        return

    session.lives = max(session.lives - 1, 0)
    events.append(GameEvent(EventType.PLAYER_HIT, {"cause": cause, "lives": session.lives}))
    logger.debug("Life lost (%s), %d left", cause, session.lives)

    if session.lives == 0:
        session.game_over = True
        events.append(GameEvent(EventType.GAME_OVER, {
            "final_score": session.score,
            "levels_completed": session.levels_completed,
        }))
        logger.info("Game over: score=%d level=%d", session.score, session.level)


def resolve_enemy_bullets_vs_player(session: Session, events: List[GameEvent]):
    player = session.player
    for b in session.bullets:
        if not (b.alive and b.is_enemy_bullet):
            continue
        if overlaps(b, player):
            b.alive = False
            if player.shielded:
                events.append(GameEvent(EventType.PLAYER_HIT, {"cause": "bullet", "blocked": True, "lives": session.lives}))
            else:
                lose_life(session, events, "bullet")


def resolve_enemy_bullets_vs_barriers(session: Session):
    for b in session.bullets:
        if not (b.alive and b.is_enemy_bullet):
            continue
        for barrier in session.barriers:
            if barrier.health > 0 and overlaps(b, barrier):
                b.alive = False
                barrier.health -= 1
                break

    session.barriers = [barrier for barrier in session.barriers if barrier.health > 0]


def resolve_player_bullets_vs_enemies(session: Session, events: List[GameEvent]):
    for b in session.bullets:
        if not b.alive or b.is_enemy_bullet:
            continue
        for e in session.enemies:
            if not e.alive or not overlaps(b, e):
                continue
            # One bullet, one point of damage, one target
            b.alive = False
            e.health -= 1
            events.append(GameEvent(EventType.ENEMY_HIT, {"type": e.type.value, "health": max(e.health, 0)}))
            if e.health <= 0:
                e.alive = False
                points = points_for(e.type, session.difficulty)
                session.score += points
                events.append(GameEvent(EventType.ENEMY_KILLED, {"type": e.type.value, "points": points}))
            break

    session.enemies = [e for e in session.enemies if e.alive]


def resolve_roster_breach(session: Session, events: List[GameEvent]):
    """An enemy reaching the player row costs a life and resets the wave"""
    if not any(e.y + e.height >= session.player.y for e in session.enemies):
        return

    lose_life(session, events, "breach")
    if session.game_over:
        return

    session.enemies = create_enemies(session.level, session.difficulty, session.rng, session.width)
    events.append(GameEvent(EventType.WAVE_RESET, {"level": session.level}))
    logger.debug("Roster breached, wave %d restarted", session.level)


def enemy_volley(enemy: Enemy) -> List[Bullet]:
    """Bullets fired by ``enemy``; bosses fire a spread of double-size shots"""
    bw = GAME_CONFIG["bullet_width"]
    bh = GAME_CONFIG["bullet_height"]
    speed = GAME_CONFIG["enemy_bullet_speed"]
    bottom = enemy.y + enemy.height

    if not enemy.is_boss:
        return [Bullet(x=enemy.x + enemy.width / 2 - bw / 2, y=bottom, width=bw, height=bh,
                       speed=speed, is_enemy_bullet=True)]

    count = SPAWN_CONFIG["boss_volley_size"]
    bw, bh = bw * 2, bh * 2
    step = enemy.width / (count + 1)
    return [
        Bullet(x=enemy.x + step * (i + 1) - bw / 2, y=bottom, width=bw, height=bh,
               speed=speed, is_enemy_bullet=True)
        for i in range(count)
    ]


def enemy_fire(session: Session, delta_ms: float):
    """Count down shoot cooldowns and fire whoever is ready"""
    frames = tick_scale(delta_ms)
    for e in session.enemies:
        if not e.can_shoot:
            continue
        e.shoot_cooldown -= frames
        if e.shoot_cooldown <= 0:
            session.bullets.extend(enemy_volley(e))
            e.shoot_cooldown = initial_shoot_cooldown(session.rng, e.is_boss) / session.difficulty.multiplier


def resolve_collisions(session: Session, events: List[GameEvent]):
    """Run every collision pass for one tick, in order"""
    resolve_enemy_bullets_vs_player(session, events)
    resolve_enemy_bullets_vs_barriers(session)
    resolve_player_bullets_vs_enemies(session, events)
    session.bullets = [b for b in session.bullets if b.alive]
    resolve_roster_breach(session, events)
