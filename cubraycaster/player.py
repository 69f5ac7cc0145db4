"""The player: spawn position, keyboard state and movement through the grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from .constants import (
    KEY_DOWN,
    KEY_DOWN_ARROW,
    KEY_ESC,
    KEY_LEFT,
    KEY_LEFT_ARROW,
    KEY_RIGHT,
    KEY_RIGHT_ARROW,
    KEY_UP,
    KEY_UP_ARROW,
    PI,
    PLAYER_SPEED,
    TILE_SIZE,
    TURN_SPEED,
)
from .scene import CubError, Scene


class Key(IntEnum):
    """Key codes understood by the player."""

    LEFT = KEY_LEFT
    DOWN = KEY_DOWN
    RIGHT = KEY_RIGHT
    UP = KEY_UP
    ESC = KEY_ESC
    LEFT_ARROW = KEY_LEFT_ARROW
    RIGHT_ARROW = KEY_RIGHT_ARROW
    DOWN_ARROW = KEY_DOWN_ARROW
    UP_ARROW = KEY_UP_ARROW


def _cell(grid: Sequence[str], col: int, row: int) -> str:
    """Return a map cell; anything outside the grid counts as a wall."""
    if row < 0 or row >= len(grid) or col < 0:
        return "1"
    line = grid[row]
    if col >= len(line):
        return " " if col == len(line) else "1"
    return line[col]


def hits_wall(grid: Sequence[str], x: float, y: float) -> bool:
    """True when the point (or the point one unit to its right) is in a wall."""
    col = math.floor(x / TILE_SIZE)
    col_check = math.floor((x + 1) / TILE_SIZE)
    row = math.floor(y / TILE_SIZE)
    return _cell(grid, col, row) == "1" or _cell(grid, col_check, row) == "1"


@dataclass
class Player:
    """Position in world units, view angle in degrees and input state."""

    x: float
    y: float
    angle: float
    walk: int = 0
    turn: int = 0
    rotate: float = 0
    walk_speed: float = PLAYER_SPEED
    turn_speed: float = TURN_SPEED

    def press(self, key: int) -> bool:
        """Apply a key press; return False when the key asks to quit."""
        try:
            key = Key(key)
        except ValueError:
            return True
        if key in (Key.UP, Key.UP_ARROW):
            self.walk = -1
        elif key in (Key.DOWN, Key.DOWN_ARROW):
            self.walk = 1
        elif key is Key.RIGHT:
            self.turn = 1
        elif key is Key.LEFT:
            self.turn = -1
        elif key is Key.LEFT_ARROW:
            self.rotate = -self.turn_speed
        elif key is Key.RIGHT_ARROW:
            self.rotate = self.turn_speed
        elif key is Key.ESC:
            return False
        return True

    def release(self, key: int) -> None:
        """Apply a key release."""
        try:
            key = Key(key)
        except ValueError:
            return
        if key in (Key.UP, Key.UP_ARROW, Key.DOWN, Key.DOWN_ARROW):
            self.walk = 0
        elif key in (Key.RIGHT, Key.LEFT):
            self.turn = 0
        elif key in (Key.LEFT_ARROW, Key.RIGHT_ARROW):
            self.rotate = 0

    def move_towards(self, grid: Sequence[str], angle: float) -> None:
        """Walk up to ``walk_speed`` units backwards along ``angle``, stopping at walls."""
        rad = angle * (PI / 180.0)
        y_sin = math.sin(rad)
        x_cos = math.cos(rad)
        steps = 0
        while (
            not hits_wall(grid, self.x - steps * x_cos, self.y - steps * y_sin)
            and steps < self.walk_speed
        ):
            steps += 1
        if not hits_wall(grid, self.x - steps * x_cos, self.y - steps * y_sin):
            self.x -= steps * x_cos
            self.y -= steps * y_sin

    def step(self, grid: Sequence[str]) -> None:
        """Advance one frame: rotate, then move according to the held keys."""
        self.angle += self.rotate
        if self.walk == -1:
            self.move_towards(grid, self.angle)
        if self.walk == 1:
            self.move_towards(grid, self.angle + 180.0)
        if self.turn == 1:
            self.move_towards(grid, self.angle + 90.0)
        if self.turn == -1:
            self.move_towards(grid, self.angle - 90.0)


def spawn_player(scene: Scene) -> Player:
    """Place a player at the centre of the scene's start cell."""
    for row, line in enumerate(scene.rows):
        col = line.find(scene.player)
        if col != -1:
            return Player(
                x=float(TILE_SIZE * col + TILE_SIZE // 2),
                y=float(TILE_SIZE * row + TILE_SIZE // 2),
                angle=scene.angle,
            )
    raise CubError("Invalid position")