"""The game window: texture loading, the main loop and the command entry point."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .constants import TEXTURE_IDS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH  # noqa: E402
from .player import Key, spawn_player  # noqa: E402
from .render import Texture, render_frame  # noqa: E402
from .scene import CubError, Scene, check_args, load_scene  # noqa: E402

_KEYMAP = {
    pygame.K_w: Key.UP,
    pygame.K_UP: Key.UP_ARROW,
    pygame.K_s: Key.DOWN,
    pygame.K_DOWN: Key.DOWN_ARROW,
    pygame.K_d: Key.RIGHT,
    pygame.K_a: Key.LEFT,
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_RIGHT: Key.RIGHT_ARROW,
    pygame.K_LEFT: Key.LEFT_ARROW,
}

_FRAMES_PER_SECOND = 60


def _surface_to_texture(surface: pygame.Surface) -> Texture:
    rgb = pygame.surfarray.array3d(surface).astype(np.uint32)
    packed = (rgb[:, :, 0] << 16) | (rgb[:, :, 1] << 8) | rgb[:, :, 2]
    return Texture(packed.T.copy())


def _frame_to_rgb(frame: np.ndarray) -> np.ndarray:
    rgb = np.stack(
        [(frame >> 16) & 0xFF, (frame >> 8) & 0xFF, frame & 0xFF], axis=-1
    ).astype(np.uint8)
    return rgb.transpose(1, 0, 2)


def load_textures(scene: Scene) -> list[Texture]:
    """Load the NO, EA, SO and WE wall textures of a scene, in that order."""
    textures: list[Texture] = []
    for ident in TEXTURE_IDS:
        path = scene.info(ident)
        if path is None:
            raise CubError("invalid texture")
        try:
            surface = pygame.image.load(path)
            textures.append(_surface_to_texture(surface))
        except (pygame.error, OSError, ValueError) as exc:
            raise CubError("invalid texture") from exc
    return textures


def run(scene: Scene) -> None:
    """Open the window and play the scene until it is closed or Esc is pressed."""
    textures = load_textures(scene)
    player = spawn_player(scene)
    grid = scene.rows
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in _KEYMAP:
                    if not player.press(_KEYMAP[event.key]):
                        running = False
                elif event.type == pygame.KEYUP and event.key in _KEYMAP:
                    player.release(_KEYMAP[event.key])
            if not running:
                break
            player.step(grid)
            frame = render_frame(grid, player, textures, scene.ceiling, scene.floor)
            pygame.surfarray.blit_array(screen, _frame_to_rgb(frame))
            pygame.display.flip()
            clock.tick(_FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def _report(message: str) -> None:
    sys.stderr.write(f"\033[0;31mError\n{message}\n\033[0;37m")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the scene file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_args(args)
        scene = load_scene(path)
        run(scene)
    except CubError as exc:
        _report(str(exc))
        return 1
    return 0