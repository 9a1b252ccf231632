"""
Game configuration for the arena
All gameplay constants live here and are passed into the simulation at construction.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int, int]


@dataclass(frozen=True)
class RoleConfig:
    """Fixed parameters of one circle role"""
    radius: float
    velocity: float  # px/s
    color: Color


@dataclass(frozen=True)
class ArenaConfig:
    """Immutable arena parameters"""

    # Window
    screen_width: int = 1080
    screen_height: int = 720
    fps: int = 360
    title: str = "Shboot"
    background_color: Color = (30, 30, 30, 255)
    text_color: Color = (255, 255, 255, 255)
    font_size: int = 20

    # Roles
    player: RoleConfig = RoleConfig(radius=30.0, velocity=200.0, color=(255, 0, 0, 255))
    enemy: RoleConfig = RoleConfig(radius=20.0, velocity=20.0, color=(255, 255, 255, 255))
    bullet: RoleConfig = RoleConfig(radius=10.0, velocity=200.0, color=(255, 0, 0, 255))

    player_health: int = 5
    player_start: Tuple[float, float] = (400.0, 300.0)

    # Spawning
    enemy_spawn_offset: int = 100  # enemies appear offset..2*offset px away per axis
    spawn_rate: float = 5.0  # seconds
    spawn_rate_step: float = 0.5
    spawn_rate_floor: float = 0.5

    # Scoring
    health_bonus_every: int = 10

    def __post_init__(self):
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError(
                f"Screen size must be positive, got {self.screen_width}x{self.screen_height}"
            )
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        for name in ("player", "enemy", "bullet"):
            role = getattr(self, name)
            if role.radius <= 0:
                raise ValueError(f"{name} radius must be positive, got {role.radius}")
        if self.player_health <= 0:
            raise ValueError(f"player_health must be positive, got {self.player_health}")
        if self.enemy_spawn_offset <= 0:
            raise ValueError(f"enemy_spawn_offset must be positive, got {self.enemy_spawn_offset}")
        if not 0 < self.spawn_rate_floor <= self.spawn_rate:
            raise ValueError(
                f"Need 0 < spawn_rate_floor <= spawn_rate, got "
                f"{self.spawn_rate_floor} and {self.spawn_rate}"
            )
        if self.spawn_rate_step < 0:
            raise ValueError(f"spawn_rate_step must be >= 0, got {self.spawn_rate_step}")
        if self.health_bonus_every <= 0:
            raise ValueError(f"health_bonus_every must be positive, got {self.health_bonus_every}")

    def replace(self, **changes) -> "ArenaConfig":
        """Return a copy with some fields changed"""
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = ArenaConfig()


# Headless environment parameters
ENV_CONFIG = {
    "dt": 1 / 60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 5,
    "aim_distance": 100.0,
}

# Reward shaping for the headless environment
REWARD_CONFIG = {
    "R_KILL": 1.0,       # Reward for shooting an enemy
    "R_HIT": 1.0,        # Penalty for being touched by an enemy
    "R_DEATH": 5.0,      # Penalty for losing the last life
    "R_TIME": 0.001,     # Small time penalty
}
