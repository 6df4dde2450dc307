"""
Per-tick position updates for every moving entity.

Linear enemies march as one formation that turns and drops a row whenever
any of them meets a side wall; bosses bounce on their own. The other patterns
are closed-form functions of the movement timer and the spawn anchor, so an
enemy's position never accumulates per-frame error.

All rate-based motion is expressed in units per reference tick (16 ms) and
scaled by ``delta_ms / 16``.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from .configs.game_config import GAME_CONFIG, MOVEMENT_CONFIG
from .entities import Bullet, Enemy, MovementPattern, Player, PowerUp
from .utils import clamp

REFERENCE_TICK_MS = GAME_CONFIG["reference_tick_ms"]
TICKS_PER_SECOND = 1000.0 / REFERENCE_TICK_MS


def tick_scale(delta_ms: float) -> float:
    """Fraction of a reference tick covered by ``delta_ms``"""
    return delta_ms / REFERENCE_TICK_MS


def pattern_position(
    pattern: MovementPattern,
    initial_x: float,
    initial_y: float,
    timer: float,
    speed: float,
    field_height: float = GAME_CONFIG["height"],
    field_width: float = GAME_CONFIG["width"],
    entity_width: float = GAME_CONFIG["enemy_width"],
) -> Tuple[float, float]:
    """Position of a closed-form mover ``timer`` seconds after spawning.

    Only zigzag, circular and diving have a closed form; linear movement
    depends on wall contacts and goes through :func:`move_enemies`.
    """
    rate = abs(speed) * TICKS_PER_SECOND  # units per second at full speed

    if pattern is MovementPattern.ZIGZAG:
        x = initial_x + math.sin(timer * MOVEMENT_CONFIG["zigzag_frequency"]) * MOVEMENT_CONFIG["zigzag_amplitude"]
        y = initial_y + 0.5 * rate * timer
        return x, y

    if pattern is MovementPattern.CIRCULAR:
        radius = MOVEMENT_CONFIG["circle_radius"]
        drift = MOVEMENT_CONFIG["circle_drift"] * abs(speed) * timer
        x = initial_x + math.cos(timer) * radius
        y = initial_y + math.sin(timer) * radius + drift
        return x, y

    if pattern is MovementPattern.DIVING:
        dive_line = field_height * MOVEMENT_CONFIG["dive_line"]
        y = initial_y + 2.0 * rate * timer
        if y <= dive_line:
            return initial_x, y
        amplitude = MOVEMENT_CONFIG["dive_sweep_amplitude"]
        # the whole sweep stays on the field
        center = clamp(initial_x, amplitude, field_width - entity_width - amplitude)
        x = center + math.sin(timer * MOVEMENT_CONFIG["dive_sweep_frequency"]) * amplitude
        return x, dive_line

    raise ValueError(f"No closed form for movement pattern: {pattern}")


def in_formation(enemy: Enemy) -> bool:
    """Linear regulars march as one block; bosses bounce on their own"""
    return not enemy.is_boss and enemy.movement_pattern is MovementPattern.LINEAR


def _heading_into_wall(enemy: Enemy, width: float) -> bool:
    return (enemy.x <= 0 and enemy.speed < 0) or (enemy.x + enemy.width >= width and enemy.speed > 0)


def move_enemy(
    enemy: Enemy,
    delta_ms: float,
    width: float = GAME_CONFIG["width"],
    height: float = GAME_CONFIG["height"],
):
    """Advance one enemy by ``delta_ms`` according to its pattern"""
    enemy.movement_timer += delta_ms / 1000.0

    # Bosses sweep side to side whatever their pattern field says
    if enemy.is_boss or enemy.movement_pattern is MovementPattern.LINEAR:
        enemy.x += enemy.speed * tick_scale(delta_ms)
        if _heading_into_wall(enemy, width):
            enemy.speed = -enemy.speed
            enemy.x = clamp(enemy.x, 0.0, width - enemy.width)
            if not enemy.is_boss:
                enemy.y += GAME_CONFIG["row_drop"]
        return

    enemy.x, enemy.y = pattern_position(
        enemy.movement_pattern,
        enemy.initial_x,
        enemy.initial_y,
        enemy.movement_timer,
        enemy.speed,
        height,
        width,
        enemy.width,
    )


def move_enemies(
    enemies: List[Enemy],
    delta_ms: float,
    width: float = GAME_CONFIG["width"],
    height: float = GAME_CONFIG["height"],
):
    """Advance the roster; one wall contact turns the whole formation"""
    formation = []
    for e in enemies:
        if not in_formation(e):
            move_enemy(e, delta_ms, width, height)
            continue
        e.movement_timer += delta_ms / 1000.0
        e.x += e.speed * tick_scale(delta_ms)
        formation.append(e)

    if not any(_heading_into_wall(e, width) for e in formation):
        return

    # shift the block back inside so spacing is kept
    left = min(e.x for e in formation)
    right = max(e.x + e.width for e in formation)
    shift = -left if left < 0 else min(0.0, width - right)
    for e in formation:
        e.x += shift
        e.speed = -e.speed
        e.y += GAME_CONFIG["row_drop"]


def move_player(player: Player, delta_ms: float, width: float = GAME_CONFIG["width"]):
    step = player.speed * tick_scale(delta_ms)
    if player.move_left:
        player.x -= step
    if player.move_right:
        player.x += step
    player.x = clamp(player.x, 0.0, width - player.width)


def move_bullet(bullet: Bullet, delta_ms: float, height: float = GAME_CONFIG["height"]):
    bullet.y += bullet.speed * tick_scale(delta_ms)
    if bullet.y + bullet.height < 0 or bullet.y > height:
        bullet.alive = False


def move_power_up(power_up: PowerUp, delta_ms: float, height: float = GAME_CONFIG["height"]):
    power_up.y += power_up.speed * tick_scale(delta_ms)
    if power_up.y > height:
        power_up.alive = False
