"""
Arcade window: draws snapshots and turns keyboard events into intents.

Everything here is presentation. Entities are drawn as solid rectangles, so
there are no assets that could fail to load.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import arcade

from .configs.game_config import GAME_CONFIG
from .session import GameEvent
from .state_machine import Game, Intent

logger = logging.getLogger(__name__)

TITLE = "Malakai Cabal Invadooorz"

KEY_INTENTS = {
    arcade.key.LEFT: Intent.MOVE_LEFT,
    arcade.key.A: Intent.MOVE_LEFT,
    arcade.key.RIGHT: Intent.MOVE_RIGHT,
    arcade.key.D: Intent.MOVE_RIGHT,
    arcade.key.SPACE: Intent.FIRE,
    arcade.key.UP: Intent.NAVIGATE_UP,
    arcade.key.DOWN: Intent.NAVIGATE_DOWN,
    arcade.key.ENTER: Intent.CONFIRM,
    arcade.key.RETURN: Intent.CONFIRM,
}


class SnapshotWindow(arcade.Window):
    """Arcade window that renders a simulation snapshot"""

    def __init__(self, width: int, height: int, title: str = TITLE):
        super().__init__(width, height, title)
        self.current_snapshot: Dict[str, Any] = {}

        # Colors
        self.BG = (18, 18, 22)
        self.PLAYER_C = (80, 160, 255)
        self.SHIELD_C = (80, 220, 255)
        self.BOSS_C = (200, 60, 200)
        self.ENEMY_C = (220, 80, 80)
        self.BULLET_C = (240, 230, 90)
        self.ENEMY_BULLET_C = (255, 120, 60)
        self.BARRIER_C = (90, 200, 110)
        self.POWERUP_C = {"shield": (80, 220, 255), "rapidFire": (255, 220, 60), "extraLife": (60, 220, 90)}
        self.HUD_C = (220, 220, 220)
        self.HIGHLIGHT_C = (255, 220, 60)
        self.background_color = self.BG

    def _rect(self, item: Dict[str, Any], color):
        # Simulation y grows downwards, Arcade y grows upwards
        top = self.height - item["y"]
        arcade.draw_lrbt_rectangle_filled(
            item["x"], item["x"] + item["width"], top - item["height"], top, color
        )

    def _centered(self, text: str, y: float, size: int = 24, color=None):
        arcade.draw_text(text, self.width / 2, y, color or self.HUD_C, size, anchor_x="center")

    def on_draw(self):
        self.clear()

        view = self.current_snapshot
        state = view.get("game_state", "playing")

        if state == "menu":
            self._draw_menu(TITLE, "Press ENTER to choose")
        elif state == "difficultySelect":
            self._draw_menu("Select difficulty", "UP/DOWN then ENTER")
        elif state == "highScores":
            self._draw_high_scores()
        elif state == "gameOver":
            self._draw_game_over()
        else:
            self._draw_playfield()

    def _draw_menu(self, heading: str, hint: str):
        view = self.current_snapshot
        self._centered(heading, self.height / 2 + 100, 36)
        for i, option in enumerate(view.get("menu_options", [])):
            color = self.HIGHLIGHT_C if i == view.get("menu_index") else self.HUD_C
            self._centered(option, self.height / 2 - i * 40, 24, color)
        self._centered(hint, 60, 16)

    def _draw_high_scores(self):
        self._centered("High Scores", self.height - 80, 36)
        for i, entry in enumerate(self.current_snapshot.get("high_scores", [])):
            self._centered(f"{i + 1:2d}. {entry['name']:<10} {entry['score']:>8}", self.height - 140 - i * 32, 20)
        self._centered("Press ENTER to return", 60, 16)

    def _draw_game_over(self):
        result = self.current_snapshot.get("last_result") or {}
        self._centered("Game Over", self.height / 2 + 40, 40)
        self._centered(f"Score: {result.get('score', 0)}", self.height / 2 - 10, 24)
        self._centered("Press ENTER to return", self.height / 2 - 60, 18)

    def _draw_playfield(self):
        view = self.current_snapshot
        if not view.get("player"):
            return

        for barrier in view["barriers"]:
            self._rect(barrier, self.BARRIER_C)
        for enemy in view["enemies"]:
            self._rect(enemy, self.BOSS_C if enemy["type"] == "boss" else self.ENEMY_C)
        for bullet in view["bullets"]:
            self._rect(bullet, self.ENEMY_BULLET_C if bullet["is_enemy_bullet"] else self.BULLET_C)
        for power_up in view["power_ups"]:
            self._rect(power_up, self.POWERUP_C.get(power_up["type"], self.HUD_C))

        player = view["player"]
        self._rect(player, self.SHIELD_C if player["shielded"] else self.PLAYER_C)

        # Text HUD
        txt = (f"Score: {view['score']}  "
               f"Level: {view['level']}  "
               f"Lives: {view['lives']}")
        if view["active_power_up"]:
            txt += f"  {view['active_power_up']}: {view['power_up_remaining'] / 1000:.1f}s"
        arcade.draw_text(txt, 12, self.height - 30, self.HUD_C, 14)


class PlayWindow(SnapshotWindow):
    """Interactive window hosting a :class:`Game`"""

    def __init__(self, game: Game, width: int = GAME_CONFIG["width"], height: int = GAME_CONFIG["height"]):
        super().__init__(width, height)
        self.game = game
        self._clock_ms = 0.0
        self.game.subscribe(self.on_game_event)
        self.current_snapshot = game.snapshot()

    def on_game_event(self, event: GameEvent):
        logger.debug("event %s %s", event.kind.value, event.data)

    def on_key_press(self, key: int, modifiers: int):
        if key == arcade.key.ESCAPE:
            self.close()
            return
        intent: Optional[Intent] = KEY_INTENTS.get(key)
        if intent is not None:
            self.game.handle_intent(intent, pressed=True)

    def on_key_release(self, key: int, modifiers: int):
        intent = KEY_INTENTS.get(key)
        if intent is not None:
            self.game.handle_intent(intent, pressed=False)

    def on_update(self, delta_time: float):
        self._clock_ms += delta_time * 1000.0
        self.game.update(self._clock_ms)
        self.current_snapshot = self.game.snapshot()
