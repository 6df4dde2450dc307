import random

import pytest

from invaders.entities import Difficulty, EnemyType, MovementPattern
from invaders.spawner import (
    create_barriers,
    create_boss,
    create_enemies,
    eligible_types,
    enemy_count,
    is_boss_level,
)


def test_boss_levels_every_tenth_level():
    assert is_boss_level(10)
    assert is_boss_level(20)
    assert not is_boss_level(5)
    assert not is_boss_level(1)


def test_type_tiers_unlock_with_level():
    assert eligible_types(1) == [EnemyType.BASIC]
    assert eligible_types(2) == [EnemyType.BASIC, EnemyType.FAST]
    assert EnemyType.DIVING not in eligible_types(7)
    assert set(eligible_types(8)) == set(EnemyType) - {EnemyType.BOSS}


def test_enemy_count_grows_linearly_then_caps():
    assert enemy_count(1) == 6
    assert enemy_count(2) == 8
    assert enemy_count(3) - enemy_count(2) == enemy_count(2) - enemy_count(1)
    assert enemy_count(100) == 40


def test_first_wave_is_all_basic():
    enemies = create_enemies(1, Difficulty.MEDIUM, random.Random(1))
    assert len(enemies) == 6
    assert all(e.type is EnemyType.BASIC for e in enemies)
    assert all(e.health == 1 and e.movement_pattern is MovementPattern.LINEAR for e in enemies)
    # (1 + 0.2 * level) * difficulty
    assert enemies[0].speed == pytest.approx(1.2 * 1.5)


def test_enemies_spawn_at_their_anchor_inside_the_field():
    enemies = create_enemies(9, Difficulty.HARD, random.Random(3))
    for e in enemies:
        assert (e.initial_x, e.initial_y) == (e.x, e.y)
        assert 0 <= e.x and e.x + e.width <= 800
        assert e.health >= 1


def test_type_modifiers_are_applied():
    enemies = create_enemies(9, Difficulty.EASY, random.Random(7))
    for e in enemies:
        if e.type is EnemyType.TOUGH:
            assert e.health == 3 and e.can_shoot and e.shoot_cooldown > 0
        if e.type is EnemyType.ZIGZAG:
            assert e.movement_pattern is MovementPattern.ZIGZAG
        if e.type is EnemyType.DIVING:
            assert e.movement_pattern is MovementPattern.DIVING


def test_boss_level_spawns_boss_and_escort():
    enemies = create_enemies(10, Difficulty.MEDIUM, random.Random(0))
    bosses = [e for e in enemies if e.type is EnemyType.BOSS]
    assert len(bosses) == 1
    assert len(enemies) == 6

    boss = bosses[0]
    assert boss.health == 20 + 5 * 10
    assert boss.movement_pattern is MovementPattern.LINEAR
    assert boss.width > enemies[1].width
    assert all(e.y > boss.y + boss.height for e in enemies if e is not boss)


def test_boss_size_is_capped():
    assert create_boss(30, Difficulty.MEDIUM).width == pytest.approx(38 * 4)
    assert create_boss(100, Difficulty.MEDIUM).width == pytest.approx(38 * 4)
    assert create_boss(100, Difficulty.MEDIUM).health > create_boss(30, Difficulty.MEDIUM).health


def test_barriers_sit_above_the_player():
    barriers = create_barriers(player_y=550, width=800)
    assert len(barriers) == 4
    assert all(b.y + b.height < 550 and b.health == 5 for b in barriers)
    xs = [b.x for b in barriers]
    assert xs == sorted(xs)
    assert barriers[-1].x + barriers[-1].width <= 800
