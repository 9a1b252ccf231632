"""
Game entity dataclasses
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import List, NamedTuple, Optional

from .config import ArenaConfig, Color, DEFAULT_CONFIG
from .vector import Vec2, ZERO, add, angle, inverse, scale


class Role(enum.Enum):
    PLAYER = "player"
    ENEMY = "enemy"
    BULLET = "bullet"


@dataclass
class Circle:
    """Player, enemy or bullet; the role decides which fields matter"""
    role: Role
    origin: Vec2
    radius: float
    velocity: float  # px/s
    color: Color
    direction: Vec2 = ZERO
    health: int = 0  # player only


class Tail(NamedTuple):
    """Motion trail rectangle, rotated `angle` degrees about its top-left corner"""
    x: float
    y: float
    width: float
    height: float
    angle: float


def create_player(x: float, y: float, config: ArenaConfig = DEFAULT_CONFIG) -> Circle:
    role = config.player
    return Circle(
        role=Role.PLAYER,
        origin=(float(x), float(y)),
        radius=role.radius,
        velocity=role.velocity,
        color=role.color,
        health=config.player_health,
    )


def create_enemy(x: float, y: float, config: ArenaConfig = DEFAULT_CONFIG) -> Circle:
    role = config.enemy
    return Circle(
        role=Role.ENEMY,
        origin=(float(x), float(y)),
        radius=role.radius,
        velocity=role.velocity,
        color=role.color,
    )


def create_bullet(player: Circle, direction: Vec2, config: ArenaConfig = DEFAULT_CONFIG) -> Circle:
    """Spawn a bullet on the player's rim so it does not start inside the player"""
    role = config.bullet
    return Circle(
        role=Role.BULLET,
        origin=add(player.origin, scale(direction, player.radius)),
        radius=role.radius,
        velocity=role.velocity,
        color=role.color,
        direction=direction,
    )


def trail_heading(circle: Circle) -> Vec2:
    """Direction the tail points: behind the player, away from the player for enemies"""
    if circle.role is Role.PLAYER:
        return inverse(circle.direction)
    if circle.role is Role.ENEMY:
        return circle.direction
    return ZERO


def tail_for(circle: Circle) -> Optional[Tail]:
    heading = trail_heading(circle)
    if heading == ZERO:
        return None

    x, y = circle.origin
    size = circle.radius
    return Tail(
        x=x,
        y=y,
        width=size,
        height=size,
        angle=angle(heading, (x + size, y + size)),
    )


def tail_corners(tail: Tail) -> List[Vec2]:
    """Corners of the rotated tail rectangle, clockwise on screen from the pivot"""
    rad = math.radians(tail.angle)
    cos_a, sin_a = math.cos(rad), math.sin(rad)

    corners = []
    for px, py in ((0.0, 0.0), (tail.width, 0.0), (tail.width, tail.height), (0.0, tail.height)):
        corners.append((
            tail.x + px * cos_a - py * sin_a,
            tail.y + px * sin_a + py * cos_a,
        ))
    return corners
