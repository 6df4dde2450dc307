import random

import pytest

from invaders.entities import Bullet, Difficulty, Enemy, EnemyType
from invaders.session import new_session


class ZeroRandom(random.Random):
    """Every roll succeeds"""

    def random(self):
        return 0.0


class OneRandom(random.Random):
    """Every roll fails"""

    def random(self):
        return 0.999999


def make_enemy(x=300.0, y=50.0, enemy_type=EnemyType.BASIC, health=1, speed=0.0):
    return Enemy(x=x, y=y, width=38, height=30, speed=speed, type=enemy_type,
                 health=health, initial_x=x, initial_y=y)


def enemy_bullet_on(target):
    return Bullet(x=target.x + 5, y=target.y + 5, width=2, height=10, speed=4.0, is_enemy_bullet=True)


def player_bullet_on(target):
    return Bullet(x=target.x + 5, y=target.y + 5, width=2, height=10, speed=-7.0)


@pytest.fixture
def session():
    """Medium session with one parked, harmless enemy and no random drops"""
    s = new_session(Difficulty.MEDIUM, seed=0)
    s.rng = OneRandom(0)
    s.enemies = [make_enemy()]
    s.bullets = []
    s.power_ups = []
    return s
