"""
Arcade window: input sampling, frame pacing and drawing for the arena

The simulation works in screen coordinates (origin top-left, y down); arcade
draws with the origin bottom-left, so every position is flipped on the way in
and on the way out.
"""

from __future__ import annotations

import math
from typing import List, Optional

import arcade

from .config import ArenaConfig, DEFAULT_CONFIG
from .engine import MoveKeys
from .entities import Circle, tail_corners, tail_for
from .game import Arena, FrameInput
from .vector import Vec2

MOVE_KEYS = {
    arcade.key.W: "up",
    arcade.key.A: "left",
    arcade.key.S: "down",
    arcade.key.D: "right",
}

FPS_COLOR = (0, 228, 48, 255)


def min_window_size(config: ArenaConfig):
    """Smallest window the player circle still fits in"""
    side = int(math.ceil(2 * config.player.radius))
    return side, side


def draw_order(arena: Arena) -> List[Circle]:
    """Player first, then bullets, then enemies on top"""
    return [arena.player] + list(arena.bullets) + list(arena.enemies)


def fps_label() -> str:
    return f"{arcade.get_fps():.0f} FPS"


class ArenaWindow(arcade.Window):
    """
    Arcade window that plays an `Arena`.

    With `interactive=False` the window only draws; something else (the
    headless environment) steps the arena.
    """

    def __init__(
        self,
        arena: Optional[Arena] = None,
        config: ArenaConfig = DEFAULT_CONFIG,
        interactive: bool = True,
    ):
        if arena is not None:
            config = arena.config
        super().__init__(
            config.screen_width,
            config.screen_height,
            config.title,
            resizable=interactive,
            update_rate=1 / config.fps,
            draw_rate=1 / config.fps,
        )
        self.config = config
        self.arena = arena if arena is not None else Arena(config)
        self.interactive = interactive

        self.background_color = config.background_color
        self.set_minimum_size(*min_window_size(config))
        if not arcade.timings_enabled():
            arcade.enable_timings()

        self._held = set()
        self._fire = False
        self._pointer: Vec2 = (0.0, 0.0)

    # ----------------------------
    # Coordinates
    # ----------------------------

    def to_screen(self, x: float, y: float) -> Vec2:
        """Arcade window coordinates -> simulation coordinates (and back)"""
        return x, self.height - y

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
            return
        if symbol in MOVE_KEYS:
            self._held.add(MOVE_KEYS[symbol])

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in MOVE_KEYS:
            self._held.discard(MOVE_KEYS[symbol])

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        self._pointer = self.to_screen(x, y)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if button == arcade.MOUSE_BUTTON_LEFT:
            self._pointer = self.to_screen(x, y)
            self._fire = True

    def sample_input(self) -> FrameInput:
        """Read the input state for this frame and consume the fire event"""
        keys = MoveKeys(
            up="up" in self._held,
            left="left" in self._held,
            down="down" in self._held,
            right="right" in self._held,
        )
        fire, self._fire = self._fire, False
        return FrameInput(
            keys=keys,
            fire=fire,
            pointer=self._pointer,
            width=self.width,
            height=self.height,
        )

    # ----------------------------
    # Loop
    # ----------------------------

    def on_update(self, delta_time: float):
        if not self.interactive:
            return
        self.arena.step(self.sample_input(), delta_time)

    def on_draw(self):
        """Draw the current game state"""
        self.clear()

        health, score, high_score = self.arena.hud()
        size = self.config.font_size
        color = self.config.text_color
        player = self.arena.player

        for circle in draw_order(self.arena):
            self.draw_tail(circle)
            self.draw_circle(circle)
            if circle is player:
                self.draw_label(health, player.origin[0] - 5, player.origin[1] - 5, size, color)

        self.draw_label(score, self.width / 2 - 15, 20, size, color)
        self.draw_label(high_score, self.width - 200, 20, size, color)
        self.draw_label(fps_label(), 10, 10, size, FPS_COLOR)

    # ----------------------------
    # Primitives
    # ----------------------------

    def draw_circle(self, circle: Circle):
        x, y = self.to_screen(*circle.origin)
        arcade.draw_circle_filled(x, y, circle.radius, circle.color)

    def draw_tail(self, circle: Circle):
        tail = tail_for(circle)
        if tail is None:
            return
        points = [self.to_screen(x, y) for x, y in tail_corners(tail)]
        arcade.draw_polygon_filled(points, circle.color)

    def draw_label(self, text: str, x: float, y: float, size: int, color):
        """Text anchored at its top-left corner, in simulation coordinates"""
        sx, sy = self.to_screen(x, y)
        arcade.draw_text(text, sx, sy, color, size, anchor_y="top")


def play(config: ArenaConfig = DEFAULT_CONFIG, arena: Optional[Arena] = None):
    """Open the window and run the game until it is closed"""
    window = ArenaWindow(arena=arena, config=config)
    arcade.run()
    return window.arena
