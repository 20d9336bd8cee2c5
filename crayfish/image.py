"""An RGB pixel buffer sized from an aspect ratio and a width."""

from __future__ import annotations

import math
import os

from PIL import Image as _PILImage


class Image:
    """An 8-bit RGB image whose height follows from its aspect ratio."""

    def __init__(self, aspect_ratio: float, width: int) -> None:
        if width < 0:
            raise ValueError(f"image width must not be negative, got {width}")
        if aspect_ratio == 0:
            raise ValueError("aspect ratio must not be zero")
        raw_height = width / aspect_ratio
        whole = int(raw_height) if math.isfinite(raw_height) and raw_height > 0 else 0
        self.aspect_ratio = aspect_ratio
        self.width = int(width)
        self.height = max(whole, 1)
        self.buffer = _PILImage.new("RGB", (self.width, self.height))

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside image of size {self.width}x{self.height}"
            )

    def set_pixel(self, x: int, y: int, rgb: tuple[int, int, int]) -> None:
        """Store an RGB triple of bytes at column ``x``, row ``y``."""
        self._check_bounds(x, y)
        values = tuple(int(c) for c in rgb)
        if len(values) != 3 or not all(0 <= c <= 255 for c in values):
            raise ValueError(f"pixel must be three bytes, got {rgb!r}")
        self.buffer.putpixel((x, y), values)

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the RGB triple at column ``x``, row ``y``."""
        self._check_bounds(x, y)
        r, g, b = self.buffer.getpixel((x, y))
        return (r, g, b)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the image; the format follows from the file extension."""
        self.buffer.save(path)