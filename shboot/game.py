"""
One frame of arena simulation

`Arena` owns every entity and advances them from a `FrameInput` sample. It does
no drawing and reads no devices, so the same arena runs under the arcade window
and under the headless Gymnasium environment.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import ArenaConfig, DEFAULT_CONFIG
from .engine import (
    MoveKeys,
    move_bullet,
    move_enemy,
    move_player,
    prune_bullets,
    resolve_collisions,
)
from .entities import Circle, create_bullet, create_player
from .spawner import Spawner
from .state import GameState, reset_player
from .vector import Vec2, normalize, subtract


@dataclass
class FrameInput:
    """Input sampled once per frame by the presentation layer"""
    keys: MoveKeys = field(default_factory=MoveKeys)
    fire: bool = False  # pressed this frame, not held
    pointer: Vec2 = (0.0, 0.0)
    width: Optional[float] = None  # current screen size; config size if unset
    height: Optional[float] = None


@dataclass
class StepEvents:
    """What changed during one `Arena.step`"""
    spawned: bool = False
    fired: bool = False
    hits: int = 0
    kills: int = 0
    died: bool = False


class Arena:
    """The whole game state for one run"""

    def __init__(self, config: ArenaConfig = DEFAULT_CONFIG, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.spawner = Spawner(config, self.rng)
        self.state = GameState(health_bonus_every=config.health_bonus_every)

        self.player: Circle = create_player(*config.player_start, config=config)
        self.enemies: List[Circle] = []
        self.bullets: List[Circle] = []

        self.frame = 0

    def reset(self):
        """Start a fresh run: new player, empty arena, zeroed scores"""
        self.spawner.reset()
        self.state = GameState(health_bonus_every=self.config.health_bonus_every)
        self.player = create_player(*self.config.player_start, config=self.config)
        self.enemies = []
        self.bullets = []
        self.frame = 0

    def screen_size(self, inputs: FrameInput) -> Tuple[float, float]:
        width = inputs.width if inputs.width is not None else self.config.screen_width
        height = inputs.height if inputs.height is not None else self.config.screen_height
        return width, height

    def fire(self, pointer: Vec2) -> Circle:
        direction = normalize(subtract(self.player.origin, pointer))
        bullet = create_bullet(self.player, direction, self.config)
        self.bullets.append(bullet)
        return bullet

    def step(self, inputs: FrameInput, dt: float) -> StepEvents:
        events = StepEvents()
        width, height = self.screen_size(inputs)
        self.frame += 1

        # Spawn logic
        enemy = self.spawner.update(dt, self.player)
        if enemy is not None:
            self.enemies.append(enemy)
            events.spawned = True

        # Player
        move_player(self.player, inputs.keys, dt, width, height)

        # Bullets
        if inputs.fire:
            self.fire(inputs.pointer)
            events.fired = True
        for bullet in self.bullets:
            move_bullet(bullet, dt)
        self.bullets = prune_bullets(self.bullets, width, height)

        # Enemies
        for enemy in self.enemies:
            move_enemy(enemy, self.player, dt)

        collisions = resolve_collisions(self.player, self.enemies, self.bullets, self.state)
        events.hits = collisions.hits
        events.kills = collisions.kills

        if collisions.died:
            events.died = True
            reset_player(self.player, self.enemies, self.config, width, height)
            self.state.restart()
            self.spawner.reset_rate()

        return events

    def hud(self) -> Tuple[str, str, str]:
        """Health, score and high score labels"""
        return (
            str(self.player.health),
            f"SCORE: {self.state.score}",
            f"HIGH SCORE: {self.state.high_score}",
        )
