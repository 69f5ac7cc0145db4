"""Textured raycasting engine: .cub scene loading, player movement, rendering and a pygame window."""

__version__ = "0.1.0"
__all__ = ["constants", "textutil", "scene", "player", "render", "app"]