"""
Wave generation: enemy counts, type mix, boss levels and barriers
"""

from __future__ import annotations

import random
from typing import List, Optional

from .configs.game_config import ENEMY_TYPE_CONFIG, GAME_CONFIG, SPAWN_CONFIG
from .entities import Barrier, Difficulty, Enemy, EnemyType, MovementPattern

REGULAR_TYPES = [t for t in EnemyType if t is not EnemyType.BOSS]


def is_boss_level(level: int) -> bool:
    return level % SPAWN_CONFIG["boss_level_every"] == 0


def eligible_types(level: int) -> List[EnemyType]:
    """Regular enemy types unlocked at ``level``, in unlock order"""
    return [t for t in REGULAR_TYPES if ENEMY_TYPE_CONFIG[t.value]["unlock_level"] <= level]


def enemy_count(level: int) -> int:
    """Size of a regular wave; grows linearly with level up to the cap"""
    count = SPAWN_CONFIG["base_enemy_count"] + SPAWN_CONFIG["enemies_per_level"] * (level - 1)
    return min(count, SPAWN_CONFIG["max_enemy_count"])


def base_speed(level: int, difficulty: Difficulty) -> float:
    return (SPAWN_CONFIG["base_speed"] + SPAWN_CONFIG["speed_per_level"] * level) * difficulty.multiplier


def initial_shoot_cooldown(rng: random.Random, boss: bool = False) -> float:
    lo, hi = SPAWN_CONFIG["boss_shoot_cooldown" if boss else "enemy_shoot_cooldown"]
    return float(rng.randint(lo, hi))


def make_enemy(
    enemy_type: EnemyType,
    x: float,
    y: float,
    level: int,
    difficulty: Difficulty,
    rng: random.Random,
) -> Enemy:
    """Build a regular enemy with its per-type modifiers applied"""
    if enemy_type is EnemyType.BOSS:
        raise ValueError("Bosses are built with create_boss")

    stats = ENEMY_TYPE_CONFIG[enemy_type.value]
    return Enemy(
        x=x,
        y=y,
        width=GAME_CONFIG["enemy_width"],
        height=GAME_CONFIG["enemy_height"],
        speed=base_speed(level, difficulty) * stats["speed_mult"],
        type=enemy_type,
        health=stats["health"],
        can_shoot=stats["can_shoot"],
        shoot_cooldown=initial_shoot_cooldown(rng) if stats["can_shoot"] else 0.0,
        movement_pattern=MovementPattern(stats["pattern"]),
        initial_x=x,
        initial_y=y,
    )


def create_boss(
    level: int,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
    width: float = GAME_CONFIG["width"],
) -> Enemy:
    """Boss stats scale with level; its size is capped"""
    rng = rng or random.Random()
    scale = min(2.0 + level / 10.0, SPAWN_CONFIG["boss_size_cap"])
    boss_w = GAME_CONFIG["enemy_width"] * scale
    boss_h = GAME_CONFIG["enemy_height"] * scale
    x = (width - boss_w) / 2
    y = float(SPAWN_CONFIG["grid_top"])

    return Enemy(
        x=x,
        y=y,
        width=boss_w,
        height=boss_h,
        speed=(SPAWN_CONFIG["base_speed"] + SPAWN_CONFIG["boss_speed_per_level"] * level) * difficulty.multiplier,
        type=EnemyType.BOSS,
        health=SPAWN_CONFIG["boss_base_health"] + SPAWN_CONFIG["boss_health_per_level"] * level,
        can_shoot=True,
        shoot_cooldown=initial_shoot_cooldown(rng, boss=True),
        movement_pattern=MovementPattern.LINEAR,
        initial_x=x,
        initial_y=y,
    )


def _grid_slot(index: int, top: float):
    cols = SPAWN_CONFIG["grid_columns"]
    gap = SPAWN_CONFIG["grid_gap"]
    row, col = divmod(index, cols)
    x = SPAWN_CONFIG["grid_left"] + col * (GAME_CONFIG["enemy_width"] + gap)
    y = top + row * (GAME_CONFIG["enemy_height"] + gap)
    return float(x), float(y)


def create_enemies(
    level: int,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
    width: float = GAME_CONFIG["width"],
) -> List[Enemy]:
    """Build the roster for a new wave at ``level``.

    Boss levels get one boss plus a fixed escort row under it; every other
    level gets a grid whose size and type mix grow with the level.
    """
    rng = rng or random.Random()
    types = eligible_types(level)

    if is_boss_level(level):
        boss = create_boss(level, difficulty, rng, width)
        escort_top = boss.y + boss.height + SPAWN_CONFIG["grid_gap"]
        enemies = [boss]
        for i in range(SPAWN_CONFIG["boss_escort_count"]):
            x, y = _grid_slot(i, escort_top)
            enemies.append(make_enemy(rng.choice(types), x, y, level, difficulty, rng))
        return enemies

    enemies = []
    for i in range(enemy_count(level)):
        x, y = _grid_slot(i, SPAWN_CONFIG["grid_top"])
        enemies.append(make_enemy(rng.choice(types), x, y, level, difficulty, rng))
    return enemies


def create_barriers(
    player_y: float,
    width: float = GAME_CONFIG["width"],
) -> List[Barrier]:
    """Evenly spaced barriers a fixed distance above the player row"""
    count = SPAWN_CONFIG["barrier_count"]
    bw = SPAWN_CONFIG["barrier_width"]
    bh = SPAWN_CONFIG["barrier_height"]
    y = player_y - SPAWN_CONFIG["barrier_offset"]
    spacing = width / count

    return [
        Barrier(
            x=spacing * i + (spacing - bw) / 2,
            y=y,
            width=bw,
            height=bh,
            health=SPAWN_CONFIG["barrier_health"],
        )
        for i in range(count)
    ]
