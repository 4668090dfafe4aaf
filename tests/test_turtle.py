import pytest
from PIL import Image

from turtlepix.draw import BLACK, TRANSPARENT, WHITE, rgba
from turtlepix.turtle import Turtle

RED = rgba(255, 0, 0)
W = H = 100


@pytest.fixture
def turtle() -> Turtle:
    return Turtle(W, H, WHITE)


def pixels_of(t: Turtle, col: int) -> set[tuple[int, int]]:
    return {(i % t.width, i // t.width) for i, p in enumerate(t.canvas.array) if p == col}


def test_initial_state(turtle: Turtle) -> None:
    assert turtle.position == (0, 0)
    assert turtle.heading == 0
    assert turtle.is_down
    assert turtle.pen_color == BLACK
    assert turtle.pen_width == 2
    assert turtle.fill_col == TRANSPARENT
    assert all(p == WHITE for p in turtle.canvas.array)


def test_no_background_means_transparent() -> None:
    t = Turtle(4, 4)
    assert all(p == TRANSPARENT for p in t.image().array)


def test_forward_follows_heading(turtle: Turtle) -> None:
    turtle.forward(10)
    assert turtle.position == pytest.approx((10, 0))

    turtle.left(90)
    turtle.forward(10)
    assert turtle.position == pytest.approx((10, 10))

    turtle.backward(20)
    assert turtle.position == pytest.approx((10, -10))


def test_turning(turtle: Turtle) -> None:
    turtle.left(30)
    turtle.right(10)
    assert turtle.heading == 20

    turtle.set_heading(270)
    assert turtle.heading == 270


def test_pen_up_does_not_draw(turtle: Turtle) -> None:
    turtle.pen_up()
    turtle.forward(30)
    turtle.goto(-20, 15)

    assert pixels_of(turtle, BLACK) == set()
    assert turtle.position == (-20, 15)


def test_pen_down_draws_segment(turtle: Turtle) -> None:
    turtle.forward(20)

    drawn = pixels_of(turtle, BLACK)
    assert (60, 50) in drawn
    assert (60, 40) not in drawn


def test_move_in_place_leaves_a_dot(turtle: Turtle) -> None:
    turtle.goto(0, 0)
    assert pixels_of(turtle, BLACK) == {(49, 49), (50, 49), (49, 50), (50, 50)}


def test_invalid_pen_settings_are_ignored(turtle: Turtle) -> None:
    turtle.set_width(0)
    turtle.set_width(-3)
    turtle.set_color(None)
    turtle.fill_color(None)

    assert turtle.pen_width == 2
    assert turtle.pen_color == BLACK
    assert turtle.fill_col == TRANSPARENT

    turtle.set_width(5)
    turtle.set_color(RED)
    assert turtle.pen_width == 5
    assert turtle.pen_color == RED


def test_home_returns_and_faces_east(turtle: Turtle) -> None:
    turtle.pen_up()
    turtle.goto(30, 30)
    turtle.set_heading(45)

    turtle.home()

    assert turtle.position == (0, 0)
    assert turtle.heading == 0


def test_clear_keeps_turtle_state(turtle: Turtle) -> None:
    turtle.forward(20)
    turtle.left(90)

    turtle.clear()

    assert all(p == WHITE for p in turtle.canvas.array)
    assert turtle.position == pytest.approx((20, 0))
    assert turtle.heading == 90


def test_reset_restores_defaults(turtle: Turtle) -> None:
    turtle.set_color(RED)
    turtle.set_width(7)
    turtle.forward(20)
    turtle.left(90)
    turtle.pen_up()

    turtle.reset()

    assert all(p == WHITE for p in turtle.canvas.array)
    assert turtle.position == (0, 0)
    assert turtle.heading == 0
    assert turtle.is_down
    assert turtle.pen_color == BLACK
    assert turtle.pen_width == 2


def test_rect_restores_position(turtle: Turtle) -> None:
    turtle.set_heading(10)
    turtle.rect(20, 10)

    assert turtle.position == (0, 0)
    assert turtle.heading == 10
    assert pixels_of(turtle, BLACK)


def test_polygon_needs_three_sides(turtle: Turtle) -> None:
    turtle.polygon(2, 10)

    assert pixels_of(turtle, BLACK) == set()
    assert turtle.position == (0, 0)


def test_polygon_draws_and_restores(turtle: Turtle) -> None:
    turtle.polygon(6, 15)

    assert turtle.position == (0, 0)
    assert turtle.heading == 0
    assert (57, 50) in pixels_of(turtle, BLACK)


def test_circle_is_left_of_heading(turtle: Turtle) -> None:
    turtle.circle(20)

    rows = {y for _, y in pixels_of(turtle, BLACK)}
    assert min(rows) <= 12
    assert max(rows) <= 51
    assert turtle.position == (0, 0)


def test_negative_circle_goes_clockwise(turtle: Turtle) -> None:
    turtle.circle(-20)

    rows = {y for _, y in pixels_of(turtle, BLACK)}
    assert min(rows) >= 48
    assert max(rows) >= 88


def test_fill_square(turtle: Turtle) -> None:
    turtle.pen_up()
    turtle.begin_fill()
    turtle.fill_color(RED)
    turtle.goto(40, 0)
    turtle.goto(40, 40)
    turtle.goto(0, 40)
    turtle.goto(0, 0)
    turtle.end_fill()

    expected = {(x, y) for x in range(50, 90) for y in range(10, 50)}
    assert pixels_of(turtle, RED) == expected
    assert not turtle.filling
    assert turtle.fill_path == []


def test_fill_records_shape_moves(turtle: Turtle) -> None:
    turtle.pen_up()
    turtle.fill_color(RED)
    turtle.begin_fill()
    turtle.rect(40, 40)
    turtle.end_fill()

    expected = {(x, y) for x in range(50, 90) for y in range(10, 50)}
    assert pixels_of(turtle, RED) == expected


def test_fill_covers_outline_drawn_before_it(turtle: Turtle) -> None:
    turtle.fill_color(RED)
    turtle.begin_fill()
    turtle.rect(40, 40)
    turtle.end_fill()

    # The outline along y=0 sits on rows 49 and 50; the fill replaces row 49
    assert turtle.canvas.get_pixel(70, 49) == RED
    assert turtle.canvas.get_pixel(70, 50) == BLACK


def test_fill_with_too_few_points_is_discarded(turtle: Turtle) -> None:
    turtle.pen_up()
    turtle.fill_color(RED)
    turtle.begin_fill()
    turtle.goto(30, 0)
    turtle.goto(30, 30)
    turtle.end_fill()

    assert pixels_of(turtle, RED) == set()
    assert not turtle.filling
    assert turtle.fill_path == []


def test_end_fill_without_begin_does_nothing(turtle: Turtle) -> None:
    turtle.pen_up()
    turtle.fill_color(RED)
    turtle.goto(30, 0)
    turtle.goto(30, 30)
    turtle.goto(0, 30)
    turtle.end_fill()

    assert pixels_of(turtle, RED) == set()


def test_save_png(turtle: Turtle, tmp_path) -> None:
    turtle.forward(20)
    path = turtle.save_png(tmp_path / "turtle.png")

    with Image.open(path) as img:
        assert img.size == (W, H)
        assert img.convert("RGBA").getpixel((60, 50)) == (0, 0, 0, 255)


@pytest.mark.parametrize("col", [-1, 0x1_0000_0000])
def test_out_of_range_colors_are_ignored(turtle: Turtle, col: int) -> None:
    turtle.set_color(col)
    turtle.fill_color(col)

    assert turtle.pen_color == BLACK
    assert turtle.fill_col == TRANSPARENT

    turtle.forward(10)
    assert (55, 50) in pixels_of(turtle, BLACK)
