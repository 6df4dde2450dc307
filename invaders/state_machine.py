"""
Game host: menu -> difficulty select -> playing -> game over -> menu,
plus menu -> high scores -> menu.

Screens change only on discrete input intents, except that losing the last
life ends a game. Entering ``playing`` always builds a brand new session.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from .configs.game_config import HIGHSCORE_CONFIG
from .engine import Intents, tick
from .entities import Difficulty, GameState
from .highscores import HighScoreTable
from .session import GameEvent, Session, new_session, snapshot

logger = logging.getLogger(__name__)

MENU_OPTIONS = ["Start Game", "High Scores"]
DIFFICULTY_OPTIONS = [Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD]


class Intent(str, Enum):
    MOVE_LEFT = "moveLeft"
    MOVE_RIGHT = "moveRight"
    FIRE = "fire"
    NAVIGATE_UP = "navigateUp"
    NAVIGATE_DOWN = "navigateDown"
    CONFIRM = "confirm"


class Game:
    """Owns the session and drives it from host timestamps and input intents"""

    def __init__(
        self,
        high_scores: Optional[HighScoreTable] = None,
        player_name: str = HIGHSCORE_CONFIG["default_name"],
        seed: Optional[int] = None,
    ):
        self.high_scores = high_scores if high_scores is not None else HighScoreTable()
        self.player_name = player_name
        self.seed = seed

        self.state = GameState.MENU
        self.menu_index = 0
        self.session: Optional[Session] = None
        self.intents = Intents()
        self.last_result: Optional[Dict[str, int]] = None

        self._last_timestamp: Optional[float] = None
        self._listeners: List[Callable[[GameEvent], None]] = []

    # ----------------------------
    # Collaborators
    # ----------------------------

    def subscribe(self, callback: Callable[[GameEvent], None]):
        self._listeners.append(callback)

    def _emit(self, events: List[GameEvent]):
        for event in events:
            for callback in self._listeners:
                callback(event)

    # ----------------------------
    # Input
    # ----------------------------

    def handle_intent(self, intent: Intent, pressed: bool = True):
        """Apply one press/release; what it means depends on the screen"""
        if self.state is GameState.PLAYING:
            self._playing_intent(intent, pressed)
            return

        if not pressed:
            return

        if self.state is GameState.MENU:
            self._menu_intent(intent, MENU_OPTIONS)
        elif self.state is GameState.DIFFICULTY_SELECT:
            self._menu_intent(intent, DIFFICULTY_OPTIONS)
        elif self.state in (GameState.GAME_OVER, GameState.HIGH_SCORES):
            if intent is Intent.CONFIRM:
                self._enter_menu()

    def _playing_intent(self, intent: Intent, pressed: bool):
        if intent is Intent.MOVE_LEFT:
            self.intents.move_left = pressed
        elif intent is Intent.MOVE_RIGHT:
            self.intents.move_right = pressed
        elif intent is Intent.FIRE and pressed:
            self.intents.fire = True

    def _menu_intent(self, intent: Intent, options: List):
        if intent is Intent.NAVIGATE_UP:
            self.menu_index = (self.menu_index - 1) % len(options)
        elif intent is Intent.NAVIGATE_DOWN:
            self.menu_index = (self.menu_index + 1) % len(options)
        elif intent is Intent.CONFIRM:
            self._confirm(options[self.menu_index])

    def _confirm(self, choice):
        if self.state is GameState.MENU:
            if choice == "Start Game":
                self.state = GameState.DIFFICULTY_SELECT
                self.menu_index = DIFFICULTY_OPTIONS.index(Difficulty.MEDIUM)
            else:
                self.state = GameState.HIGH_SCORES
        else:
            self.start_game(choice)

    # ----------------------------
    # Transitions
    # ----------------------------

    def _enter_menu(self):
        self.state = GameState.MENU
        self.menu_index = 0

    def start_game(self, difficulty: Difficulty):
        self.session = new_session(difficulty, seed=self.seed)
        self.intents = Intents()
        self.state = GameState.PLAYING
        self.menu_index = 0
        logger.info("Starting game on %s", difficulty.value)

    def _finish_game(self):
        score = self.session.score
        made_table = self.high_scores.record(self.player_name, score)
        # persistence failures are logged inside save()
        self.high_scores.save()
        self.last_result = {"score": score, "levels_completed": self.session.levels_completed}
        self.state = GameState.GAME_OVER
        logger.info("Final score %d (high score table: %s)", score, made_table)

    # ----------------------------
    # Frame loop
    # ----------------------------

    def update(self, now_ms: float) -> List[GameEvent]:
        """Host frame callback with a monotonically increasing timestamp"""
        if self._last_timestamp is None:
            delta = 0.0
        else:
            delta = max(0.0, now_ms - self._last_timestamp)
        self._last_timestamp = now_ms

        if self.state is not GameState.PLAYING:
            return []

        _, events = tick(self.session, delta, self.intents)
        self.intents.fire = False
        if self.session.game_over:
            self._finish_game()
        self._emit(events)
        return events

    def snapshot(self) -> Dict[str, Any]:
        view: Dict[str, Any] = snapshot(self.session) if self.session is not None else {}
        view.update({
            "game_state": self.state.value,
            "menu_index": self.menu_index,
            "menu_options": self.menu_options(),
            "high_scores": [dict(e) for e in self.high_scores],
            "last_result": self.last_result,
        })
        return view

    def menu_options(self) -> List[str]:
        if self.state is GameState.MENU:
            return list(MENU_OPTIONS)
        if self.state is GameState.DIFFICULTY_SELECT:
            return [d.value for d in DIFFICULTY_OPTIONS]
        return []
