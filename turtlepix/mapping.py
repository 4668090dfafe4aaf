"""
Conversion between logical turtle coordinates and canvas pixels.

Logical space has its origin at the canvas centre with +y pointing up.
Pixel space has its origin at the top-left corner with +row pointing down.

All rounding goes through `round_half_away`, so a logical coordinate that
lands exactly on a half pixel always moves away from zero (2.5 -> 3,
-2.5 -> -3). The builtin `round` rounds half to even and is not used here.
"""

import math


def round_half_away(v: float) -> int:
    # a - f is exact, a + 0.5 is not
    a = abs(v)
    f = math.floor(a)
    r = f + 1 if a - f >= 0.5 else f
    return -r if v < 0 else r


def map_to_pixel(width: int, height: int, x: float, y: float) -> tuple[int, int]:
    """Map logical `(x, y)` to pixel `(col, row)`.

    The result is not clamped and may fall outside the canvas.
    """
    col = round_half_away(x + width / 2)
    row = round_half_away(height / 2 - y)
    return col, row


def map_to_logical(width: int, height: int, col: int, row: int) -> tuple[float, float]:
    """Inverse of `map_to_pixel` for integral pixel positions."""
    return col - width / 2, height / 2 - row
