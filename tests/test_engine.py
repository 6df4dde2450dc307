from invaders.engine import Intents, shoot, tick
from invaders.entities import Difficulty, PowerUpType
from invaders.powerups import apply_power_up
from invaders.session import EventType, new_session, snapshot

from conftest import enemy_bullet_on, make_enemy, player_bullet_on


def kinds(events):
    return [e.kind for e in events]


def test_new_session_starts_fresh():
    s = new_session(Difficulty.HARD, seed=1)
    assert (s.score, s.level, s.lives) == (0, 1, 3)
    assert s.active_power_up is None
    assert len(s.enemies) == 6
    assert len(s.barriers) == 4
    assert not s.game_over


def test_single_shot_and_rapid_fire_spread(session):
    assert len(shoot(session)) == 1
    apply_power_up(session, PowerUpType.RAPID_FIRE)
    spread = shoot(session)
    assert len(spread) == 3
    assert len({b.x for b in spread}) == 3
    assert all(b.speed < 0 and not b.is_enemy_bullet for b in spread)


def test_fire_intent_emits_shot_fired(session):
    _, events = tick(session, 16, Intents(fire=True))
    assert EventType.SHOT_FIRED in kinds(events)
    assert len(session.bullets) == 1


def test_move_intents_drive_the_player(session):
    x0 = session.player.x
    tick(session, 16, Intents(move_left=True))
    assert session.player.x == x0 - 5
    tick(session, 16, Intents(move_right=True))
    assert session.player.x == x0


def test_negative_delta_is_clamped_to_zero(session):
    session.enemies = [make_enemy(x=100, y=100, speed=3.0)]
    session.player.move_left = True
    before = (session.player.x, session.enemies[0].x, session.enemies[0].y)

    tick(session, -50)

    assert (session.player.x, session.enemies[0].x, session.enemies[0].y) == before


def test_empty_roster_advances_level_without_an_idle_tick(session):
    session.enemies = []
    _, events = tick(session, 16)

    assert session.level == 2
    assert len(session.enemies) > 0
    assert EventType.LEVEL_ADVANCED in kinds(events)


def test_killing_the_last_enemy_spawns_the_next_wave(session):
    target = session.enemies[0]
    session.bullets = [player_bullet_on(target)]

    _, events = tick(session, 16)

    assert session.score == 15
    assert session.level == 2
    assert len(session.enemies) == 8
    assert kinds(events)[-1] is EventType.LEVEL_ADVANCED


def test_shield_protects_until_it_expires(session):
    apply_power_up(session, PowerUpType.SHIELD)
    tick(session, 5000)

    session.bullets = [enemy_bullet_on(session.player)]
    tick(session, 16)
    assert session.lives == 3

    tick(session, 5000)
    assert not session.player.shielded

    session.bullets = [enemy_bullet_on(session.player)]
    tick(session, 16)
    assert session.lives == 2


def test_finished_session_is_not_advanced(session):
    session.lives = 1
    session.bullets = [enemy_bullet_on(session.player)]
    _, events = tick(session, 16)
    assert session.game_over
    assert kinds(events).count(EventType.GAME_OVER) == 1

    session.bullets = [enemy_bullet_on(session.player)]
    _, events = tick(session, 16)
    assert events == []
    assert session.lives == 0


def test_score_never_decreases_during_play():
    s = new_session(Difficulty.MEDIUM, seed=5)
    last = 0
    for i in range(600):
        tick(s, 16, Intents(fire=i % 10 == 0, move_left=i % 200 < 100, move_right=i % 200 >= 100))
        assert s.score >= last
        last = s.score
        if s.game_over:
            break
    for e in s.enemies:
        assert e.health > 0


def test_snapshot_is_plain_data(session):
    import json

    apply_power_up(session, PowerUpType.SHIELD)
    view = snapshot(session)
    text = json.dumps(view)
    assert '"active_power_up": "shield"' in text
    assert view["lives"] == 3
    assert view["enemies"][0]["type"] == "basic"
