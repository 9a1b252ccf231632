"""
Enemy spawner with a decaying cooldown
"""

from __future__ import annotations

import random
from typing import Optional

from .config import ArenaConfig, DEFAULT_CONFIG
from .entities import Circle, create_enemy
from .vector import Vec2

# Sign of the (x, y) offset for each quadrant
QUADRANTS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class Spawner:
    """
    Emits one enemy whenever the cooldown runs out.

    Each spawn shortens the next interval by `spawn_rate_step` seconds until it
    reaches `spawn_rate_floor`.
    """

    def __init__(self, config: ArenaConfig = DEFAULT_CONFIG, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.spawn_rate = config.spawn_rate
        self.cooldown = self.spawn_rate

    def reset(self):
        self.reset_rate()
        self.cooldown = self.spawn_rate

    def reset_rate(self):
        """Back to the starting interval; a spawn already counting down still lands on time"""
        self.spawn_rate = self.config.spawn_rate

    def spawn_point(self, player_origin: Vec2) -> Vec2:
        """Random point 100-200 px away from the player on both axes"""
        offset = self.config.enemy_spawn_offset
        dx = self.rng.randrange(offset, 2 * offset)
        dy = self.rng.randrange(offset, 2 * offset)
        sx, sy = QUADRANTS[self.rng.randrange(len(QUADRANTS))]

        return player_origin[0] + sx * dx, player_origin[1] + sy * dy

    def update(self, dt: float, player: Circle) -> Optional[Circle]:
        self.cooldown -= dt
        if self.cooldown > 0:
            return None

        x, y = self.spawn_point(player.origin)
        enemy = create_enemy(x, y, self.config)

        self.spawn_rate = max(self.config.spawn_rate_floor, self.spawn_rate - self.config.spawn_rate_step)
        self.cooldown = self.spawn_rate
        return enemy
