"""Tile maps, reachability, sprite placement, a pixel buffer and game state for a maze game."""

__version__ = "0.1.0"
__all__ = ["grid", "reach", "framebuffer", "placement", "game"]