"""
InvadersEnv - the arcade shooter simulation behind a Gymnasium API
------------------------------------------------------------------
- Headless: drives the same ``tick`` the interactive window uses
- Discrete MultiDiscrete action space: [move(3), shoot(2)]
- Vector observation: player state + top-K nearest enemies
  + top-M nearest enemy bullets + nearest power-up
- Reward: points scored this step, minus a penalty per life lost

Quick test:
    python -m invaders.shooter_env
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .configs.game_config import ENV_CONFIG, GAME_CONFIG, POWERUP_CONFIG
from .engine import Intents, tick
from .entities import Difficulty
from .session import EventType, Session, new_session, snapshot
from .utils import clamp, seed_everything

logger = logging.getLogger(__name__)


class InvadersEnv(gym.Env):
    """Arcade shooter environment for scripted or learning agents"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        difficulty: str = ENV_CONFIG["difficulty"],
        frame_ms: float = ENV_CONFIG["frame_ms"],
        max_steps: int = ENV_CONFIG["max_steps"],
        k_enemies: int = ENV_CONFIG["k_enemies"],
        m_bullets: int = ENV_CONFIG["m_bullets"],
        shoot_cooldown_steps: int = ENV_CONFIG["shoot_cooldown_steps"],
        life_penalty: float = ENV_CONFIG["life_penalty"],
    ):
        super().__init__()

        self.render_mode = render_mode
        self.difficulty = Difficulty(difficulty)
        self.frame_ms = frame_ms
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.m_bullets = m_bullets
        self.shoot_cooldown_steps = shoot_cooldown_steps
        self.life_penalty = life_penalty

        # move: 0 stay, 1 left, 2 right
        # shoot: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2])

        # Player: x(1) lives(1) shielded(1) rapid(1) effect time(1) cooldown(1)
        # Each enemy / bullet: rel pos(2); nearest power-up: rel pos(2)
        obs_dim = 6 + (self.k_enemies * 2) + (self.m_bullets * 2) + 2
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self.session: Session = None  # type: ignore
        self._step_count = 0
        self._cooldown = 0
        self._events: Dict[str, int] = {}

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        self.session = new_session(self.difficulty, seed=seed)
        self._step_count = 0
        self._cooldown = 0
        self._events = {}

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire = int(action[0]), int(action[1])

        intents = Intents(move_left=move == 1, move_right=move == 2)
        if fire and self._cooldown == 0:
            intents.fire = True
            self._cooldown = self.shoot_cooldown_steps
        elif self._cooldown > 0:
            self._cooldown -= 1

        score_before = self.session.score
        lives_before = self.session.lives

        _, events = tick(self.session, self.frame_ms, intents)

        self._events = {}
        for event in events:
            self._events[event.kind.value] = self._events.get(event.kind.value, 0) + 1

        lives_lost = max(0, lives_before - self.session.lives)
        reward = float(self.session.score - score_before) - self.life_penalty * lives_lost

        terminated = self.session.game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _rel(self, entity) -> List[float]:
        player = self.session.player
        px = player.x + player.width / 2
        py = player.y + player.height / 2
        dx = (entity.x + entity.width / 2 - px) / self.session.width
        dy = (entity.y + entity.height / 2 - py) / self.session.height
        return [clamp(dx, -1, 1), clamp(dy, -1, 1)]

    def _nearest(self, entities, count: int) -> List[float]:
        player = self.session.player
        ordered = sorted(
            entities,
            key=lambda e: (e.x - player.x) ** 2 + (e.y - player.y) ** 2
        )
        parts: List[float] = []
        for i in range(count):
            parts += self._rel(ordered[i]) if i < len(ordered) else [0.0, 0.0]
        return parts

    def _get_obs(self) -> np.ndarray:
        s = self.session
        player = s.player

        x = player.x / max(1.0, s.width - player.width)
        lives = s.lives / GAME_CONFIG["max_lives"]
        remaining = s.power_up_remaining / POWERUP_CONFIG["duration_ms"]
        cooldown = self._cooldown / max(1, self.shoot_cooldown_steps)

        obs_parts = [x * 2 - 1,  # map to [-1,1]
                     lives * 2 - 1,
                     1.0 if player.shielded else -1.0,
                     1.0 if player.rapid_fire else -1.0,
                     clamp(remaining * 2 - 1, -1, 1),
                     clamp(cooldown * 2 - 1, -1, 1)]

        obs_parts += self._nearest(s.enemies, self.k_enemies)
        obs_parts += self._nearest([b for b in s.bullets if b.is_enemy_bullet], self.m_bullets)
        obs_parts += self._nearest(s.power_ups, 1)

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.session.score,
            "level": self.session.level,
            "lives": self.session.lives,
            "num_enemies": len(self.session.enemies),
            "num_bullets": len(self.session.bullets),
            "enemies_killed": self._events.get(EventType.ENEMY_KILLED.value, 0),
            "power_ups_collected": self._events.get(EventType.POWER_UP_COLLECTED.value, 0),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode != "human":
            return None

        if self._window is None:
            # imported here so headless runs never open a GL context
            from .window import SnapshotWindow
            self._window = SnapshotWindow(int(self.session.width), int(self.session.height))

        self._window.current_snapshot = snapshot(self.session)
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = False, seed: Optional[int] = 42, difficulty: str = "medium") -> Dict[str, Any]:
    """Play one episode with uniformly random actions"""
    env = InvadersEnv(render_mode="human" if render else None, difficulty=difficulty)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    env.close()
    info["return"] = total
    return info


if __name__ == "__main__":
    result = run_random_episode(render=True)
    print(f"Random episode return: {result['return']}  score: {result['score']}  level: {result['level']}")
