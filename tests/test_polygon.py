import io

import pytest

from turbograph.canvas import Canvas, Color
from turbograph.polygon import (
    drawpoly,
    fillpoly,
    polygon_bounds,
    read_polygon,
    scanlines,
)
from turbograph.shapes import Pen

SQUARE = [(2, 2), (10, 2), (10, 10), (2, 10), (2, 2)]


@pytest.fixture
def pen():
    return Pen(Canvas(20, 20))


def test_bounds_of_vertices():
    assert polygon_bounds([(1, 2), (5, -3), (0, 4)]) == (0, -3, 5, 4)


def test_bounds_of_empty_polygon_raises():
    with pytest.raises(ValueError):
        polygon_bounds([])


def test_scanlines_of_square():
    rows = scanlines(SQUARE, 20)
    assert len(rows) == 20
    for row in range(2, 11):
        assert rows[row] == [2, 10]
    assert rows[0] == [] and rows[11] == []


def test_scanlines_rows_are_sorted_and_within_bounds():
    triangle = [(3, 1), (15, 8), (1, 14), (3, 1)]
    rows = scanlines(triangle, 20)
    xmin, ymin, xmax, ymax = polygon_bounds(triangle)
    for index, crossings in enumerate(rows):
        assert crossings == sorted(crossings)
        if crossings:
            assert ymin <= index <= ymax
            assert all(xmin <= x <= xmax for x in crossings)
    assert all(rows[row] for row in range(ymin, ymax + 1))


def test_scanlines_drop_rows_off_the_canvas():
    rows = scanlines([(0, -5), (5, 30), (0, -5)], 10)
    assert len(rows) == 10
    assert all(rows[row] for row in range(10))


def test_fillpoly_fills_interior(pen):
    fillpoly(pen, SQUARE)
    canvas = pen.canvas
    assert canvas.get_pixel(6, 6) == Color.WHITE
    assert canvas.get_pixel(2, 2) == Color.WHITE
    assert canvas.get_pixel(10, 10) == Color.WHITE
    assert canvas.get_pixel(11, 6) == Color.BLACK
    assert canvas.get_pixel(1, 6) == Color.BLACK


def test_fillpoly_uses_drawing_colour(pen):
    pen.canvas.set_color(Color.RED)
    fillpoly(pen, SQUARE)
    assert pen.canvas.get_pixel(5, 8) == Color.RED


def test_drawpoly_draws_only_edges(pen):
    drawpoly(pen, SQUARE)
    canvas = pen.canvas
    assert canvas.get_pixel(6, 2) == Color.WHITE
    assert canvas.get_pixel(10, 6) == Color.WHITE
    assert canvas.get_pixel(2, 7) == Color.WHITE
    assert canvas.get_pixel(6, 6) == Color.BLACK


def test_read_polygon_closes_the_shape():
    out = io.StringIO()
    points = read_polygon(io.StringIO("3\n0 0\n4 0\n0 3\n"), out)
    assert points == [(0, 0), (4, 0), (0, 3), (0, 0)]
    text = out.getvalue()
    assert text.startswith("Enter the number of vertices : ")
    assert "Vertex 2 => " in text


def test_read_polygon_without_prompt():
    assert read_polygon(io.StringIO("1 7 8")) == [(7, 8), (7, 8)]


def test_read_polygon_truncated_input_raises():
    with pytest.raises(ValueError):
        read_polygon(io.StringIO("2\n1 1\n"))


def test_read_polygon_bad_number_raises():
    with pytest.raises(ValueError):
        read_polygon(io.StringIO("x"))


def test_read_polygon_rejects_zero_vertices():
    with pytest.raises(ValueError):
        read_polygon(io.StringIO("0"))