import json

import pytest

from invaders.entities import Difficulty, GameState
from invaders.highscores import HighScoreTable
from invaders.session import EventType
from invaders.state_machine import Game, Intent

from conftest import OneRandom, enemy_bullet_on, make_enemy


@pytest.fixture
def game(tmp_path):
    return Game(high_scores=HighScoreTable(str(tmp_path / "scores.json")), seed=0)


def start(game, difficulty_steps=0):
    game.handle_intent(Intent.CONFIRM)
    for _ in range(difficulty_steps):
        game.handle_intent(Intent.NAVIGATE_DOWN)
    game.handle_intent(Intent.CONFIRM)
    # keep the field quiet so tests control every collision
    game.session.rng = OneRandom(0)
    game.session.enemies = [make_enemy()]


def lose_last_life(game, now=16.0):
    game.session.lives = 1
    game.session.bullets = [enemy_bullet_on(game.session.player)]
    return game.update(now)


def test_starts_at_menu(game):
    assert game.state is GameState.MENU
    assert game.snapshot()["menu_options"] == ["Start Game", "High Scores"]


def test_menu_to_difficulty_select_to_playing(game):
    game.handle_intent(Intent.CONFIRM)
    assert game.state is GameState.DIFFICULTY_SELECT
    assert game.menu_options()[game.menu_index] == "medium"

    game.handle_intent(Intent.NAVIGATE_DOWN)
    game.handle_intent(Intent.CONFIRM)
    assert game.state is GameState.PLAYING
    assert game.session.difficulty is Difficulty.HARD


def test_navigation_wraps(game):
    game.handle_intent(Intent.NAVIGATE_UP)
    assert game.menu_index == 1
    game.handle_intent(Intent.NAVIGATE_DOWN)
    assert game.menu_index == 0


def test_high_scores_screen_round_trip(game):
    game.handle_intent(Intent.NAVIGATE_DOWN)
    game.handle_intent(Intent.CONFIRM)
    assert game.state is GameState.HIGH_SCORES

    game.handle_intent(Intent.FIRE)
    assert game.state is GameState.HIGH_SCORES

    game.handle_intent(Intent.CONFIRM)
    assert game.state is GameState.MENU


def test_movement_intents_only_apply_while_playing(game):
    game.handle_intent(Intent.MOVE_LEFT)
    assert not game.intents.move_left
    assert game.update(0) == []

    start(game)
    x0 = game.session.player.x
    game.update(0)
    game.handle_intent(Intent.MOVE_LEFT)
    game.update(16)
    assert game.session.player.x == x0 - 5

    game.handle_intent(Intent.MOVE_LEFT, pressed=False)
    game.update(32)
    assert game.session.player.x == x0 - 5


def test_fire_is_consumed_by_one_tick(game):
    start(game)
    game.update(0)
    game.handle_intent(Intent.FIRE)
    events = game.update(16)
    assert [e.kind for e in events].count(EventType.SHOT_FIRED) == 1
    events = game.update(32)
    assert EventType.SHOT_FIRED not in [e.kind for e in events]


def test_clock_going_backwards_does_not_reverse_motion(game):
    start(game)
    game.session.enemies = [make_enemy(x=100, y=100, speed=3.0)]
    game.update(0)
    game.update(1000)
    x = game.session.enemies[0].x
    assert x > 100
    game.update(500)
    assert game.session.enemies[0].x == x


def test_game_over_records_score_and_is_idempotent(game, tmp_path):
    received = []
    game.subscribe(received.append)
    start(game)
    game.update(0)
    game.session.score = 120

    events = lose_last_life(game)
    assert game.state is GameState.GAME_OVER
    assert [e.kind for e in events].count(EventType.GAME_OVER) == 1
    assert [e.kind for e in received].count(EventType.GAME_OVER) == 1
    assert game.last_result == {"score": 120, "levels_completed": 0}

    assert game.update(32) == []
    assert len(game.high_scores) == 1

    with open(tmp_path / "scores.json") as f:
        assert json.load(f) == [{"name": "PLAYER", "score": 120}]

    game.handle_intent(Intent.CONFIRM)
    assert game.state is GameState.MENU


def test_every_game_starts_from_scratch(game):
    start(game)
    game.update(0)
    game.session.score = 50
    game.session.level = 4
    lose_last_life(game)
    game.handle_intent(Intent.CONFIRM)

    start(game)
    s = game.session
    assert (s.score, s.level, s.lives, s.active_power_up) == (0, 1, 3, None)


def test_snapshot_is_json_serializable(game):
    assert json.loads(json.dumps(game.snapshot()))["game_state"] == "menu"
    start(game)
    game.update(0)
    view = json.loads(json.dumps(game.snapshot()))
    assert view["game_state"] == "playing"
    assert view["lives"] == 3
    assert view["player"]["width"] == 50
