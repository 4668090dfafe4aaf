"""
Bitmap drawing utilities using a simple 1D pixel buffer.

`PixelCanvas` treats `array` as a flat, mutable 1D buffer representing a
`w` by `h` bitmap in row-major order. Pixels are addressed at index
`y * w + x` and hold packed `0xRRGGBBAA` colours.
"""

import array
from logging import getLogger
from pathlib import Path
from typing import Final

from PIL import Image

from . import raster
from .raster import PixelPoint, Point

logger = getLogger(__name__)


def rgba(r: int, g: int, b: int, a: int = 0xFF) -> int:
    return (r & 0xFF) << 24 | (g & 0xFF) << 16 | (b & 0xFF) << 8 | (a & 0xFF)


def is_color(col: int) -> bool:
    return 0 <= col <= 0xFFFFFFFF


def to_rgba_tuple(col: int) -> tuple[int, int, int, int]:
    return (col >> 24 & 0xFF, col >> 16 & 0xFF, col >> 8 & 0xFF, col & 0xFF)


TRANSPARENT: Final = 0x00000000
BLACK: Final = rgba(0, 0, 0)
WHITE: Final = rgba(255, 255, 255)


class PixelCanvas:
    """A minimal bitmap canvas backed by a 1D pixel buffer.

    - `array` is modified in-place.
    - Coordinates are 0-based, with origin at top-left.
    """

    def __init__(self, w: int, h: int, background: int = TRANSPARENT) -> None:
        if w <= 0 or h <= 0:
            raise ValueError(f"canvas size must be positive, got {w}x{h}")
        if not is_color(background):
            raise ValueError(f"background is not an RGBA colour: {background:#x}")
        self.array: Final = array.array("I", [background]) * (w * h)
        self.width: int = w
        self.height: int = h

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        return y * self.width + x

    def clear(self, color: int):
        for i in range(len(self.array)):
            self.array[i] = color

    def get_pixel(self, x: int, y: int) -> int:
        return self.array[self._index(x, y)]

    def set_pixel(self, x: int, y: int, col: int) -> None:
        if self._in_bounds(x, y):
            self.array[self._index(x, y)] = col

    def stroke_segment(self, start: Point, end: Point, stroke_width: float, col: int) -> None:
        raster.stroke_segment(
            self.array, self.width, self.height, start, end, stroke_width, col
        )

    def fill_polygon(self, path: list[PixelPoint], col: int) -> None:
        raster.fill_polygon(self.array, self.width, self.height, path, col)

    def to_image(self) -> Image.Image:
        image = Image.new("RGBA", (self.width, self.height))
        image.putdata([to_rgba_tuple(p) for p in self.array])  # pyright: ignore[reportUnknownMemberType]
        return image

    def save_png(self, path: Path | str) -> Path:
        path = Path(path)
        self.to_image().save(path, format="PNG")
        logger.debug(f"Wrote {self.width}x{self.height} canvas to {path}")
        return path
