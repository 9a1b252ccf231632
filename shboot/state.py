"""
Health, score and reset-on-death rules
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .config import ArenaConfig, DEFAULT_CONFIG
from .entities import Circle


@dataclass
class GameState:
    """Score bookkeeping for one run; the high score survives deaths"""
    score: int = 0
    high_score: int = 0
    deaths: int = 0
    health_bonus_every: int = DEFAULT_CONFIG.health_bonus_every

    def hit_player(self, player: Circle) -> bool:
        """Take one life from the player. Returns True when the player is out of health."""
        player.health -= 1
        return player.health <= 0

    def score_kill(self, player: Circle):
        self.score += 1
        if self.score % self.health_bonus_every == 0:
            player.health += 1
        if self.score > self.high_score:
            self.high_score = self.score

    def restart(self):
        self.score = 0
        self.deaths += 1


def reset_player(
    player: Circle,
    enemies: List[Circle],
    config: ArenaConfig = DEFAULT_CONFIG,
    width: Optional[float] = None,
    height: Optional[float] = None,
):
    """
    Respawn the player in the middle of the screen and clear all enemies.

    Score and spawn rate are left alone; the caller resets those.
    """
    if width is None:
        width = config.screen_width
    if height is None:
        height = config.screen_height

    player.health = config.player_health
    player.origin = (width / 2.0, height / 2.0)
    player.color = config.player.color
    enemies.clear()
