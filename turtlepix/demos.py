"""Built-in drawings, selectable from the command line with `--demo`."""

import math
from collections.abc import Callable

from .draw import BLACK, rgba
from .turtle import Turtle


def shapes(t: Turtle):
    """Axes, a square, a triangle, a circle, a spiral and a sine wave.

    Laid out for a 1024x768 canvas.
    """
    t.set_color(BLACK)
    t.set_width(3)

    # Axes
    t.pen_up()
    t.goto(-480, 0)
    t.pen_down()
    t.forward(960)
    t.pen_up()
    t.goto(0, -340)
    t.set_heading(90)
    t.pen_down()
    t.forward(680)

    t.pen_up()
    t.goto(-200, -200)
    t.set_heading(0)
    t.pen_down()
    t.rect(200, 200)

    t.pen_up()
    t.goto(200, -200)
    t.set_heading(0)
    t.pen_down()
    t.polygon(3, 180)

    t.pen_up()
    t.goto(0, 150)
    t.set_heading(0)
    t.pen_down()
    t.set_width(5)
    t.set_color(rgba(30, 144, 255))
    t.circle(100)

    t.pen_up()
    t.goto(0, 0)
    t.set_heading(0)
    t.pen_down()
    t.set_color(rgba(220, 20, 60))
    t.set_width(2)
    step = 4.0
    for _ in range(120):
        t.forward(step)
        t.left(15)
        step *= 1.02

    t.set_color(rgba(34, 139, 34))
    t.pen_up()
    t.goto(-480, 250)
    t.pen_down()
    x = -480.0
    while x <= 480.0:
        t.goto(x, 250 + 40 * math.sin(x * math.pi / 120))
        x += 2


def filled(t: Turtle):
    """A red triangle, a blue rectangle and a green circle, all filled."""
    t.begin_fill()
    t.fill_color(rgba(255, 0, 0))
    t.forward(100)
    t.left(120)
    t.forward(100)
    t.left(120)
    t.forward(100)
    t.end_fill()

    t.pen_up()
    t.right(90)
    t.forward(150)
    t.pen_down()
    t.begin_fill()
    t.fill_color(rgba(0, 128, 255))
    t.rect(120, 80)
    t.end_fill()

    t.pen_up()
    t.home()
    t.forward(150)
    t.pen_down()
    t.begin_fill()
    t.fill_color(rgba(0, 200, 0))
    t.circle(60)
    t.end_fill()


DEMOS: dict[str, Callable[[Turtle], None]] = {
    "demo": shapes,
    "demo2": filled,
}
