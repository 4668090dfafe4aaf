"""
Rasterization into a flat pixel buffer.

The buffer is any mutable sequence of `width * height` colour values in
row-major order; pixel (x, y) lives at index `y * width + x`. Nothing here
allocates or resizes the buffer, and every write is kept inside
`[0, width) x [0, height)`.

Strokes are made by stamping filled discs along the segment. Polygons are
filled with an even-odd scanline rule. Both overwrite pixels without
blending, so the last call to touch a pixel decides its colour.
"""

import math
from collections.abc import Iterator, MutableSequence, Sequence

from .mapping import map_to_pixel

Point = tuple[float, float]
PixelPoint = tuple[int, int]


def stamp_disc(
    buffer: MutableSequence[int],
    width: int,
    height: int,
    cx: float,
    cy: float,
    radius: float,
    color: int,
) -> None:
    """Fill a disc of `radius` pixels centred on logical `(cx, cy)`.

    - A radius <= 0 leaves the buffer untouched.
    - A pixel is inside when its centre is within `radius` of the mapped
      disc centre.
    """

    if radius <= 0:
        return

    px, py = map_to_pixel(width, height, cx, cy)
    rr = math.ceil(radius)
    min_x = max(px - rr, 0)
    max_x = min(px + rr, width - 1)
    min_y = max(py - rr, 0)
    max_y = min(py + rr, height - 1)

    r2 = radius * radius
    for y in range(min_y, max_y + 1):
        dy = y - py + 0.5
        dy2 = dy * dy
        row = y * width
        for x in range(min_x, max_x + 1):
            dx = x - px + 0.5
            if dx * dx + dy2 <= r2:
                buffer[row + x] = color


def segment_samples(start: Point, end: Point, steps: int | None = None) -> Iterator[Point]:
    """Yield the disc centres used to stroke `start` -> `end`.

    By default there is roughly one sample per pixel of travel, both
    endpoints included. A zero-length segment yields `start` once.
    """

    x0, y0 = start
    dx = end[0] - x0
    dy = end[1] - y0
    dist = math.hypot(dx, dy)
    if dist == 0:
        yield x0, y0
        return

    if steps is None:
        steps = math.ceil(dist) + 1
    for i in range(steps + 1):
        t = i / steps
        yield x0 + t * dx, y0 + t * dy


def stroke_segment(
    buffer: MutableSequence[int],
    width: int,
    height: int,
    start: Point,
    end: Point,
    stroke_width: float,
    color: int,
) -> None:
    """Draw a round-capped line of `stroke_width` pixels between two logical points."""

    radius = stroke_width / 2
    for x, y in segment_samples(start, end):
        stamp_disc(buffer, width, height, x, y, radius, color)


def _trunc_div(n: int, d: int) -> int:
    # Integer division rounding toward zero
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def scanline_crossings(path: Sequence[PixelPoint], y: int) -> list[int]:
    """Sorted x positions where the closed polygon `path` crosses row `y`.

    An edge crosses when exactly one endpoint has its y <= `y`; horizontal
    edges never cross.
    """

    crossings: list[int] = []
    n = len(path)
    for i in range(n):
        x0, y0 = path[i]
        x1, y1 = path[(i + 1) % n]
        if (y0 <= y < y1) or (y1 <= y < y0):
            crossings.append(x0 + _trunc_div((y - y0) * (x1 - x0), y1 - y0))
    crossings.sort()
    return crossings


def scanline_spans(path: Sequence[PixelPoint], y: int) -> list[tuple[int, int]]:
    """Inside spans `[start, stop)` of row `y` under the even-odd rule.

    Spans are not clamped to any canvas.
    """

    crossings = scanline_crossings(path, y)
    return [(crossings[i], crossings[i + 1]) for i in range(0, len(crossings) - 1, 2)]


def fill_polygon(
    buffer: MutableSequence[int],
    width: int,
    height: int,
    path: Sequence[PixelPoint],
    color: int,
) -> None:
    """Fill the polygon `path` (pixel coordinates) with `color`.

    - Paths with fewer than 3 points are ignored.
    - The last point connects back to the first.
    - Self-intersecting paths fill whatever the even-odd rule gives.
    """

    if len(path) < 3:
        return

    ys = [p[1] for p in path]
    first_row = max(min(ys), 0)
    last_row = min(max(ys), height)
    for y in range(first_row, last_row):
        row = y * width
        for start, stop in scanline_spans(path, y):
            start = max(start, 0)
            stop = min(stop, width)
            for x in range(start, stop):
                buffer[row + x] = color
