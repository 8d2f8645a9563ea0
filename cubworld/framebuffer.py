"""An in-memory 32-bit pixel buffer."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


class FrameBuffer:
    """A width-by-height image of 32-bit colour values, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} buffer")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (truncated to 32 bits) at (x, y)."""
        self._pixels[self._index(x, y)] = color & _MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour stored at (x, y)."""
        return self._pixels[self._index(x, y)]

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        self._pixels = [color & _MASK] * (self.width * self.height)

    def to_bytes(self) -> bytes:
        """Return the pixels row by row as little-endian 32-bit words."""
        return b"".join(p.to_bytes(4, "little") for p in self._pixels)