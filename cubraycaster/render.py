"""Ray casting and drawing of a frame as a numpy array of 0xRRGGBB pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional, Sequence

import numpy as np

from .constants import (
    EA,
    FIELD_OF_VIEW,
    NO,
    PI,
    SO,
    TILE_SIZE,
    WE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .player import Player, hits_wall


@dataclass
class Texture:
    """A wall texture: a 2-D array of 0xRRGGBB pixels, indexed [row, column]."""

    pixels: np.ndarray

    def __post_init__(self) -> None:
        self.pixels = np.asarray(self.pixels, dtype=np.uint32)
        if self.pixels.ndim != 2 or self.pixels.size == 0:
            raise ValueError("texture pixels must be a non-empty 2-D array")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


@dataclass(frozen=True)
class Ray:
    """Where a ray from (origin_x, origin_y) stopped, and how it advanced."""

    x: float
    y: float
    angle: float
    x_inc: float
    y_inc: float
    origin_x: float
    origin_y: float
    side: Optional[int] = None


def new_frame(width: int, height: int) -> np.ndarray:
    """Return a black frame of the given size."""
    return np.zeros((height, width), dtype=np.uint32)


def cast_ray(grid: Sequence[str], x: float, y: float, angle: float) -> Ray:
    """March from (x, y) against ``angle`` until a wall is reached."""
    rad = angle * (PI / 180.0)
    dif_x = -float(math.floor(1_000_000_000 * math.cos(rad)))
    dif_y = -float(math.floor(1_000_000_000 * math.sin(rad)))
    steps = max(abs(int(dif_x)), abs(int(dif_y)))
    x_inc = dif_x / steps
    y_inc = dif_y / steps
    ray_x, ray_y = x, y
    while not hits_wall(grid, ray_x, ray_y):
        ray_y += y_inc
        ray_x += x_inc
    return Ray(
        x=ray_x,
        y=ray_y,
        angle=angle,
        x_inc=x_inc,
        y_inc=y_inc,
        origin_x=x,
        origin_y=y,
    )


def wall_side(grid: Sequence[str], ray: Ray) -> Optional[int]:
    """Which side of a wall the ray hit, or None when it cannot be told."""
    y = ray.y - ray.y_inc
    x = ray.x - ray.x_inc
    if hits_wall(grid, x, y + ray.y_inc) and ray.y_inc <= 0:
        return NO
    if hits_wall(grid, x + ray.x_inc, y) and ray.x_inc <= 0:
        return WE
    if hits_wall(grid, x, y + ray.y_inc):
        return SO
    if hits_wall(grid, x + ray.x_inc, y):
        return EA
    return None


def draw_floor_sky(frame: np.ndarray, ceiling: int, floor: int) -> None:
    """Paint the upper half with ``ceiling`` and the lower half with ``floor``.

    The middle row is left as it was.
    """
    half = frame.shape[0] // 2
    frame[:half, :] = ceiling
    frame[half + 1 :, :] = floor


def draw_wall_column(
    frame: np.ndarray,
    ray: Ray,
    column: int,
    player_angle: float,
    textures: Sequence[Texture],
) -> None:
    """Draw the textured wall slice that ``ray`` hit into one frame column."""
    if ray.side is None:
        return
    height = frame.shape[0]
    dx = ray.x - ray.origin_x
    dy = ray.y - ray.origin_y
    dist = math.sqrt(int(dx * dx) + int(dy * dy))
    dist *= math.cos(player_angle * (PI / 180.0) - ray.angle * (PI / 180.0))
    if dist <= 0:
        dist = 1e-6
    wall_len = (TILE_SIZE * height) / dist
    real_wall_len = wall_len
    wall_len = min(wall_len, float(height))
    start_y = int((height - wall_len) / 2.0)
    text_start = int((height - real_wall_len) / 2.0)
    count = math.ceil(wall_len)
    if count <= 0:
        return

    texture = textures[ray.side]
    offset = ray.x if ray.side in (NO, SO) else ray.y
    tex_col = int(offset) % TILE_SIZE

    rows = np.arange(start_y, start_y + count, dtype=np.int64)
    rows = rows[(rows >= 0) & (rows < height)]
    if rows.size == 0:
        return
    tex_rows = ((rows - text_start) * (texture.height / real_wall_len)).astype(np.int64)
    flat = texture.pixels.reshape(-1)
    index = np.clip(texture.width * tex_rows + tex_col, 0, flat.size - 1)
    frame[rows, column] = flat[index]


def render_frame(
    grid: Sequence[str],
    player: Player,
    textures: Sequence[Texture],
    ceiling: int,
    floor: int,
) -> np.ndarray:
    """Render the player's view of the grid into a new window-sized frame."""
    frame = new_frame(WINDOW_WIDTH, WINDOW_HEIGHT)
    draw_floor_sky(frame, ceiling, floor)
    angle = player.angle - FIELD_OF_VIEW / 2
    side: Optional[int] = None
    for column in range(WINDOW_WIDTH):
        ray = cast_ray(grid, player.x, player.y, angle)
        found = wall_side(grid, ray)
        if found is not None:
            side = found
        draw_wall_column(frame, replace(ray, side=side), column, player.angle, textures)
        angle += FIELD_OF_VIEW / WINDOW_WIDTH
    return frame