"""
ArenaEnv - the arena game as a Gymnasium environment
----------------------------------------------------
- Same `Arena` simulation the window plays, stepped with a fixed dt
- Actions stand in for the keyboard and mouse:
  MultiDiscrete [up(2), left(2), down(2), right(2), fire(2), aim(8)]
- Vector observation: player state + spawn cooldown + top-K nearest enemies
- Episode ends when the player loses the last life

Quick test:
    python -m shboot --random-episodes 1
"""

from __future__ import annotations

import math
import random
from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ArenaConfig, DEFAULT_CONFIG, ENV_CONFIG, REWARD_CONFIG
from .engine import MoveKeys
from .game import Arena, FrameInput, StepEvents
from .vector import clamp


class ArenaEnv(gym.Env):
    """Headless driver for the arena"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        config: ArenaConfig = DEFAULT_CONFIG,
        dt: float = ENV_CONFIG["dt"],
        max_steps: int = ENV_CONFIG["max_steps"],
        k_enemies: int = ENV_CONFIG["k_enemies"],
        aim_distance: float = ENV_CONFIG["aim_distance"],
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unknown render mode: {render_mode}")
        self.render_mode = render_mode

        self.config = config
        self.dt = dt
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.aim_distance = aim_distance
        self.rewards = dict(REWARD_CONFIG)
        if reward_config:
            self.rewards.update(reward_config)

        # up, left, down, right, fire, aim (8 directions)
        self.action_space = spaces.MultiDiscrete([2, 2, 2, 2, 2, 8])

        # Player: pos(2) health(1) cooldown(1)
        # Each enemy: rel pos(2)
        obs_dim = 2 + 1 + 1 + self.k_enemies * 2
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.rng = random.Random()
        self.arena = Arena(config, self.rng)
        self._window = None
        self._step_count = 0

        # Precompute aim directions (8-way)
        self._aim_dirs = []
        for i in range(8):
            ang = (math.pi * 2) * (i / 8.0)
            self._aim_dirs.append((math.cos(ang), math.sin(ang)))

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        if seed is not None:
            self.rng.seed(seed)

        self._step_count = 0
        self.arena.reset()

        return self._get_obs(), self._get_info()

    def step(self, action):
        inputs = self.action_to_input(action)
        events = self.arena.step(inputs, self.dt)

        reward = self._compute_reward(events)

        terminated = events.died
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()
        info["events"] = events

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    def action_to_input(self, action) -> FrameInput:
        up, left, down, right, fire, aim = (int(a) for a in action)

        dx, dy = self._aim_dirs[aim % 8]
        px, py = self.arena.player.origin
        pointer = (px + dx * self.aim_distance, py + dy * self.aim_distance)

        return FrameInput(
            keys=MoveKeys(up=bool(up), left=bool(left), down=bool(down), right=bool(right)),
            fire=bool(fire),
            pointer=pointer,
            width=self.config.screen_width,
            height=self.config.screen_height,
        )

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        width = self.config.screen_width
        height = self.config.screen_height
        player = self.arena.player

        px, py = player.origin
        health = player.health / self.config.player_health
        cooldown = self.arena.spawner.cooldown / self.config.spawn_rate

        obs_parts: List[float] = [
            px / width * 2 - 1, py / height * 2 - 1,  # map to [-1,1]
            clamp(health * 2 - 1, -1, 1),
            clamp(cooldown * 2 - 1, -1, 1),
        ]

        # Enemies: top-K nearest
        enemies_sorted = sorted(
            self.arena.enemies,
            key=lambda e: (e.origin[0] - px) ** 2 + (e.origin[1] - py) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                ex, ey = enemies_sorted[i].origin
                obs_parts += [
                    clamp((ex - px) / width, -1, 1),
                    clamp((ey - py) / height, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, events: StepEvents) -> float:
        reward = 0.0
        reward += self.rewards["R_KILL"] * events.kills
        reward -= self.rewards["R_HIT"] * events.hits
        reward -= self.rewards["R_TIME"]
        if events.died:
            reward -= self.rewards["R_DEATH"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "health": self.arena.player.health,
            "score": self.arena.state.score,
            "high_score": self.arena.state.high_score,
            "num_enemies": len(self.arena.enemies),
            "num_bullets": len(self.arena.bullets),
            "spawn_rate": self.arena.spawner.spawn_rate,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # Imported here so the environment runs without a display
            from .window import ArenaWindow
            self._window = ArenaWindow(arena=self.arena, interactive=False)

        self._window.arena = self.arena
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def run_random_episode(
    render: bool = False,
    seed: Optional[int] = 42,
    max_steps: Optional[int] = None,
    config: ArenaConfig = DEFAULT_CONFIG,
) -> Dict[str, Any]:
    """Run a random-policy episode and return its summary"""
    kwargs = {}
    if max_steps is not None:
        kwargs["max_steps"] = max_steps
    env = ArenaEnv(render_mode="human" if render else None, config=config, **kwargs)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0
    steps = 0
    kills = 0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        steps += 1
        kills += info["events"].kills

    env.close()

    return {
        "return": total,
        "steps": steps,
        "kills": kills,
        "high_score": info["high_score"],
        "died": terminated,
    }
