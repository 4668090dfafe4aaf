"""
Turtle graphics on top of `PixelCanvas`.

The turtle lives in logical coordinates: origin at the canvas centre, +y up,
heading in degrees with 0 pointing east and positive angles turning
counter-clockwise.
"""

import math
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path

from .draw import BLACK, TRANSPARENT, PixelCanvas, is_color
from .mapping import map_to_pixel
from .raster import PixelPoint

logger = getLogger(__name__)

DEFAULT_WIDTH = 2.0


@dataclass
class _Snapshot:
    x: float
    y: float
    heading: float


class Turtle:
    """A pen-carrying cursor drawing onto a `w` by `h` canvas.

    Starts at (0, 0) facing east with the pen down, black ink, 2px wide.
    """

    def __init__(self, w: int, h: int, background: int | None = None) -> None:
        self.background: int = TRANSPARENT if background is None else background
        self.canvas: PixelCanvas = PixelCanvas(w, h, self.background)
        self.width: int = w
        self.height: int = h

        self.x: float = 0.0
        self.y: float = 0.0
        self.heading: float = 0.0
        self.is_down: bool = True
        self.pen_color: int = BLACK
        self.pen_width: float = DEFAULT_WIDTH

        self.filling: bool = False
        self.fill_col: int = TRANSPARENT
        self.fill_path: list[PixelPoint] = []

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    def image(self) -> PixelCanvas:
        return self.canvas

    def save_png(self, path: Path | str) -> Path:
        return self.canvas.save_png(path)

    # Pen state

    def pen_up(self):
        self.is_down = False

    def pen_down(self):
        self.is_down = True

    def set_color(self, col: int | None):
        if col is not None and is_color(col):
            self.pen_color = col

    def set_width(self, w: float):
        if w > 0:
            self.pen_width = w

    def set_heading(self, deg: float):
        self.heading = deg

    def left(self, deg: float):
        self.heading += deg

    def right(self, deg: float):
        self.heading -= deg

    def home(self):
        """Go to (0, 0) and face east. Draws if the pen is down."""
        self.goto(0, 0)
        self.heading = 0.0

    def clear(self):
        """Repaint the background, keeping the turtle where it is."""
        self.canvas.clear(self.background)

    def reset(self):
        self.canvas.clear(self.background)
        self.x, self.y = 0.0, 0.0
        self.heading = 0.0
        self.is_down = True
        self.pen_color = BLACK
        self.pen_width = DEFAULT_WIDTH

    # Movement

    def forward(self, d: float):
        rad = math.radians(self.heading)
        self.goto(self.x + d * math.cos(rad), self.y + d * math.sin(rad))

    def backward(self, d: float):
        self.forward(-d)

    def goto(self, x: float, y: float):
        if self.is_down:
            self.canvas.stroke_segment(
                (self.x, self.y), (x, y), self.pen_width, self.pen_color
            )
        self._record_fill_vertex(x, y)
        self.x, self.y = x, y

    # Shapes, drawn from the current position along the current heading.
    # Each one restores position and heading when done.

    def rect(self, w: float, h: float):
        orig = self._snapshot()
        for side in (w, h, w):
            self.forward(side)
            self.left(90)
        self.forward(h)
        self._restore(orig)

    def polygon(self, n: int, side: float):
        """Regular polygon with `n` sides of length `side`."""
        if n < 3:
            return
        orig = self._snapshot()
        turn = 360.0 / n
        for _ in range(n):
            self.forward(side)
            self.left(turn)
        self._restore(orig)

    def circle(self, r: float):
        """Approximate circle of radius `r` to the left of the heading.

        Negative `r` walks clockwise. Segments are about 3px long, at least 12.
        """
        circ = 2 * math.pi * abs(r)
        segments = int(max(12, circ / 3))
        step = circ / segments
        turn = 360.0 / segments
        if r < 0:
            turn = -turn
        orig = self._snapshot()
        for _ in range(segments):
            self.forward(step)
            self.left(turn)
        self._restore(orig)

    # Filling

    def begin_fill(self):
        self.filling = True
        self.fill_path = []

    def fill_color(self, col: int | None):
        if col is not None and is_color(col):
            self.fill_col = col

    def end_fill(self):
        path = self.fill_path
        filling = self.filling
        self.filling = False
        self.fill_path = []

        if not filling or len(path) < 3:
            logger.debug(f"Skipping fill with {len(path)} points")
            return

        if path[0] != path[-1]:
            path.append(path[0])
        self.canvas.fill_polygon(path, self.fill_col)

    def _record_fill_vertex(self, x: float, y: float):
        if self.filling:
            self.fill_path.append(map_to_pixel(self.width, self.height, x, y))

    def _snapshot(self) -> _Snapshot:
        return _Snapshot(self.x, self.y, self.heading)

    def _restore(self, s: _Snapshot):
        self.x, self.y = s.x, s.y
        self.heading = s.heading
