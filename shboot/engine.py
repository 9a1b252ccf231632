"""
Motion and collision rules for the arena

All positions are screen coordinates with y growing downward.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple

from .entities import Circle
from .state import GameState
from .vector import clamp, circles_collide, normalize, subtract


class MoveKeys(NamedTuple):
    """Movement keys held this frame"""
    up: bool = False
    left: bool = False
    down: bool = False
    right: bool = False


@dataclass
class Collisions:
    """What happened during one collision pass"""
    hits: int = 0
    kills: int = 0
    died: bool = False


# ----------------------------
# Motion
# ----------------------------

def move_player(player: Circle, keys: MoveKeys, dt: float, width: float, height: float):
    """
    Move the player along every held key's axis and keep the circle on screen.

    Diagonals are not normalized, so moving diagonally is sqrt(2) times faster.
    """
    dx, dy = 0.0, 0.0
    x, y = player.origin
    step = player.velocity * dt

    if keys.up:
        dy = -1.0
        y -= step
    if keys.left:
        dx = -1.0
        x -= step
    if keys.down:
        dy = 1.0
        y += step
    if keys.right:
        dx = 1.0
        x += step

    # Keep in bounds
    r = player.radius
    player.direction = (dx, dy)
    player.origin = (clamp(x, r, width - r), clamp(y, r, height - r))


def move_enemy(enemy: Circle, player: Circle, dt: float):
    # direction points from the player to the enemy, so step against it
    enemy.direction = normalize(subtract(player.origin, enemy.origin))
    step = enemy.velocity * dt
    enemy.origin = (
        enemy.origin[0] - enemy.direction[0] * step,
        enemy.origin[1] - enemy.direction[1] * step,
    )


def move_bullet(bullet: Circle, dt: float):
    step = bullet.velocity * dt
    bullet.origin = (
        bullet.origin[0] + bullet.direction[0] * step,
        bullet.origin[1] + bullet.direction[1] * step,
    )


def is_offscreen(circle: Circle, width: float, height: float) -> bool:
    x, y = circle.origin
    return x <= 0 or x > width or y <= 0 or y > height


def prune_bullets(bullets: List[Circle], width: float, height: float) -> List[Circle]:
    """Bullets whose centre is still on screen"""
    return [b for b in bullets if not is_offscreen(b, width, height)]


# ----------------------------
# Collisions
# ----------------------------

def collide(a: Circle, b: Circle) -> bool:
    return circles_collide(a.origin, a.radius, b.origin, b.radius)


def resolve_collisions(
    player: Circle,
    enemies: List[Circle],
    bullets: List[Circle],
    state: GameState,
) -> Collisions:
    """
    Resolve enemy-vs-player and enemy-vs-bullet contacts for one frame.

    Enemies are handled in order. For each one, touching the player is checked
    first; only an enemy that missed the player can be shot. A bullet is used
    up by the first enemy it hits. The pass stops as soon as the player runs
    out of health; resetting the run is up to the caller.

    Removed enemies and bullets are compacted out of both lists in place.
    """
    result = Collisions()
    dead_enemies = set()
    spent_bullets = set()

    for ei, enemy in enumerate(enemies):
        if collide(player, enemy):
            dead_enemies.add(ei)
            result.hits += 1
            if state.hit_player(player):
                result.died = True
                break
            continue

        for bi, bullet in enumerate(bullets):
            if bi in spent_bullets:
                continue
            if collide(enemy, bullet):
                dead_enemies.add(ei)
                spent_bullets.add(bi)
                result.kills += 1
                state.score_kill(player)
                break

    enemies[:] = [e for i, e in enumerate(enemies) if i not in dead_enemies]
    bullets[:] = [b for i, b in enumerate(bullets) if i not in spent_bullets]
    return result
