"""
ShmupEnv - gymnasium adapter over the shmup Simulator
-----------------------------------------------------
- The Simulator owns all game rules; this module only translates actions
  into InputState and snapshots into vector observations
- Gymnasium API
- Discrete MultiDiscrete action space: [move(9), fire(2)]
- Vector observation: player state + top-K nearest enemies + top-M nearest
  enemy bullets + nearest laser
- Rendering with Arcade (imported lazily so headless runs never open a display)

Quick test:
    python -m game.shmup.shmup_env
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces
from loguru import logger

from .config import ENV_CONFIG, REWARD_CONFIG, SIM_CONFIG
from .constants import ENEMY, ENEMY_TYPES, FIRING, FPS, MULTISHOT_DURATION, SHIELD_DURATION
from .simulator import InputState, SimSnapshot, Simulator
from .utils import clamp, seed_everything

# move: 0 stay, then clockwise from up
_MOVES = (
    (),
    ("up",),
    ("up", "right"),
    ("right",),
    ("down", "right"),
    ("down",),
    ("down", "left"),
    ("left",),
    ("up", "left"),
)

MS_PER_TICK = 1000.0 / FPS


def action_to_input(move: int, fire: int) -> InputState:
    inp = InputState(fire=bool(fire))
    for key in _MOVES[move % len(_MOVES)]:
        setattr(inp, key, True)
    return inp


class ShmupEnv(gym.Env):
    """Side-scrolling shooter environment"""

    metadata = {"render_modes": ["human"], "render_fps": FPS}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        max_steps: int = ENV_CONFIG["max_steps"],
        k_enemies: int = ENV_CONFIG["k_enemies"],
        m_bullets: int = ENV_CONFIG["m_bullets"],
        reward_config: Optional[Dict[str, float]] = None,
        sim_config: Optional[Dict[str, Any]] = None,
    ):
        super().__init__()

        self.render_mode = render_mode
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.m_bullets = m_bullets
        self.reward_config = dict(REWARD_CONFIG, **(reward_config or {}))

        self.sim = Simulator(**dict(SIM_CONFIG, **(sim_config or {})))
        self.width = self.sim.width
        self.height = self.sim.height

        self.action_space = spaces.MultiDiscrete([len(_MOVES), 2])

        # Player: pos(2) hp(1) shield(1) multishot(1) invulnerable(1)
        # Each enemy: rel pos(2) type(1)
        # Each bullet: rel pos(2) vel(2)
        # Nearest laser: rel y(1) firing(1)
        obs_dim = 6 + self.k_enemies * 3 + self.m_bullets * 4 + 2
        self.observation_space = spaces.Box(low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32)

        self._window = None
        self._snapshot: Optional[SimSnapshot] = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        self._snapshot = self.sim.start(seed=seed)
        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire = int(action[0]), int(action[1])
        prev_score = self._snapshot.score

        # Wall clock is synthesized from the tick count
        now = (self.sim.tick_count + 1) * MS_PER_TICK
        self._snapshot = self.sim.tick(action_to_input(move, fire), now=now)

        reward = self._compute_reward(self._snapshot, prev_score)
        terminated = self._snapshot.game_over
        truncated = self._snapshot.tick >= self.max_steps

        if terminated:
            logger.info("episode terminated at tick {} (score {})", self._snapshot.tick, self._snapshot.score)

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        snap = self._snapshot
        p = snap.player
        pcx, pcy = p.x + p.width / 2, p.y + p.height / 2

        obs_parts = [
            pcx / self.width * 2 - 1,
            pcy / self.height * 2 - 1,
            snap.hp / max(1e-6, snap.max_hp) * 2 - 1,
            p.shield_time / SHIELD_DURATION * 2 - 1,
            p.multishot_time / MULTISHOT_DURATION * 2 - 1,
            1.0 if p.invulnerable_time > 0 else -1.0,
        ]

        def dist2(e):
            return (e.x - pcx) ** 2 + (e.y - pcy) ** 2

        enemies_sorted = sorted(snap.enemies, key=dist2)
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                obs_parts += [
                    clamp((e.x - pcx) / self.width, -1, 1),
                    clamp((e.y - pcy) / self.height, -1, 1),
                    (ENEMY_TYPES.index(e.type) + 1) / len(ENEMY_TYPES),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        bullets_sorted = sorted((b for b in snap.projectiles if b.owner == ENEMY), key=dist2)
        for i in range(self.m_bullets):
            if i < len(bullets_sorted):
                b = bullets_sorted[i]
                obs_parts += [
                    clamp((b.x - pcx) / self.width, -1, 1),
                    clamp((b.y - pcy) / self.height, -1, 1),
                    clamp(b.vx / 15.0, -1, 1),
                    clamp(b.vy / 15.0, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        if snap.lasers:
            laser = min(snap.lasers, key=lambda l: abs(l.y - pcy))
            obs_parts += [
                clamp((laser.y - pcy) / self.height, -1, 1),
                1.0 if laser.state == FIRING else -1.0,
            ]
        else:
            obs_parts += [0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, snap: SimSnapshot, prev_score: int) -> float:
        rc = self.reward_config
        ev = snap.events

        reward = 0.0
        reward += rc["R_SCORE"] * (snap.score - prev_score)
        reward -= rc["R_DAMAGE"] * ev.get("damage", 0.0)
        reward -= rc["R_SHOT"] * ev.get("player_shot", 0.0)
        reward += rc["R_TIME"]

        if snap.game_over:
            reward -= rc["R_DEATH"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        snap = self._snapshot
        return {
            "score": snap.score,
            "hp": snap.hp,
            "shield_seconds": snap.shield_seconds,
            "multishot_seconds": snap.multishot_seconds,
            "num_enemies": len(snap.enemies),
            "num_projectiles": len(snap.projectiles),
            "num_lasers": len(snap.lasers),
            "num_powerups": len(snap.powerups),
            "step": snap.tick,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .render import ShmupWindow

            self._window = ShmupWindow(self.width, self.height)

        self._window.draw_snapshot(self._snapshot)
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = False, seed: int = 42, max_steps: Optional[int] = None) -> float:
    """Run a random-action episode; returns the total reward"""
    env = ShmupEnv(render_mode="human" if render else None, max_steps=max_steps or ENV_CONFIG["max_steps"])
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render and env._window:
            env._window.dispatch_events()
            env._window.flip()
            time.sleep(1 / FPS)

    logger.info("random episode return {:.2f} (score {}, steps {})", total, info["score"], info["step"])
    env.close()
    return total


if __name__ == "__main__":
    logger.enable("game.shmup")
    run_random_episode(render=True)
