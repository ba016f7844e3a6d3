import pytest

from turbograph.canvas import Canvas, Color, GraphicsError
from turbograph.shapes import (
    ArcCoords,
    LineSettings,
    LineStyle,
    LineWidth,
    Pen,
    rotate_pattern,
)


@pytest.fixture
def pen():
    return Pen(Canvas(40, 40))


def lit(canvas):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.get_raw(x, y) != 0
    }


def test_rotate_pattern_full_turn_is_identity():
    pattern = 0x0C3F
    rotated = pattern
    for _ in range(16):
        rotated = rotate_pattern(rotated)
    assert rotated == pattern


def test_rotate_pattern_keeps_bit_count():
    assert bin(rotate_pattern(0x1F1F)).count("1") == bin(0x1F1F).count("1")
    assert rotate_pattern(0xFFFF) == 0xFFFF


def test_default_line_settings(pen):
    settings = pen.getlinesettings()
    assert settings == LineSettings(LineStyle.SOLID_LINE, 0xFFFF, LineWidth.NORM_WIDTH)


def test_setlinestyle_patterns(pen):
    pen.setlinestyle(LineStyle.DOTTED_LINE, 0, 1)
    assert pen.getlinesettings().upattern == 0x3333
    pen.setlinestyle(LineStyle.DASHED_LINE, 0, 1)
    assert pen.getlinesettings().upattern == 0x1F1F
    pen.setlinestyle(LineStyle.USERBIT_LINE, 0x1234, 1)
    assert pen.getlinesettings().upattern == 0x1234


def test_setlinestyle_clamps_thickness(pen):
    pen.setlinestyle(LineStyle.SOLID_LINE, 0, 0)
    assert pen.getlinesettings().thickness == 1


def test_getlinesettings_returns_copy(pen):
    copy = pen.getlinesettings()
    copy.thickness = 9
    assert pen.getlinesettings().thickness == LineWidth.NORM_WIDTH


def test_moveto_clamps_negative(pen):
    pen.moveto(-5, 7)
    assert (pen.getx(), pen.gety()) == (0, 7)
    pen.moverel(3, -20)
    assert (pen.getx(), pen.gety()) == (3, 0)


def test_horizontal_line(pen):
    pen.line(8, 5, 2, 5)
    assert lit(pen.canvas) == {(x, 5) for x in range(2, 9)}


def test_vertical_line(pen):
    pen.line(4, 3, 4, 12)
    assert lit(pen.canvas) == {(4, y) for y in range(3, 13)}


def test_diagonal_line_is_direction_independent():
    a = Pen(Canvas(40, 40))
    b = Pen(Canvas(40, 40))
    a.line(0, 0, 10, 4)
    b.line(10, 4, 0, 0)
    pixels = lit(a.canvas)
    assert pixels == lit(b.canvas)
    assert (0, 0) in pixels and (10, 4) in pixels
    assert len({x for x, _ in pixels}) == len(pixels)


def test_dotted_line_lights_pattern_bits(pen):
    pen.setlinestyle(LineStyle.DOTTED_LINE, 0, 1)
    pen.line(0, 0, 15, 0)
    row = {p for p in lit(pen.canvas) if p[1] == 0}
    assert len(row) == bin(0x3333).count("1")
    assert (0, 0) in row


def test_thick_horizontal_line(pen):
    pen.setlinestyle(LineStyle.SOLID_LINE, 0, LineWidth.THICK_WIDTH)
    pen.line(5, 10, 15, 10)
    pixels = lit(pen.canvas)
    for row in (9, 10, 11):
        assert all((x, row) in pixels for x in range(5, 16))
    assert not any(p[1] in (8, 12) for p in pixels)


def test_lineto_and_linerel_move_position(pen):
    pen.moveto(2, 2)
    pen.lineto(10, 2)
    assert (pen.getx(), pen.gety()) == (10, 2)
    pen.linerel(0, 5)
    assert (pen.getx(), pen.gety()) == (10, 7)
    assert (10, 7) in lit(pen.canvas)


def test_circle_is_symmetric(pen):
    pen.circle(20, 20, 5)
    pixels = lit(pen.canvas)
    assert {(25, 20), (15, 20), (20, 25), (20, 15)} <= pixels
    assert (20, 20) not in pixels
    assert pixels == {(40 - x, y) for x, y in pixels}
    assert pixels == {(x, 40 - y) for x, y in pixels}


def test_rectangle_and_floodfill(pen):
    pen.rectangle(5, 5, 15, 15)
    pixels = lit(pen.canvas)
    assert {(5, 5), (15, 5), (5, 15), (15, 15)} <= pixels
    assert (10, 10) not in pixels
    pen.floodfill(10, 10, Color.WHITE)
    filled = lit(pen.canvas)
    assert all((x, y) in filled for x in range(5, 16) for y in range(5, 16))
    assert (20, 20) not in filled


def test_bar_fills_rectangle(pen):
    pen.bar(3, 4, 9, 8)
    assert lit(pen.canvas) == {(x, y) for x in range(3, 10) for y in range(4, 9)}


def test_bar3d_final_position_with_zero_depth(pen):
    pen.bar3d(5, 5, 15, 20, 0, 1)
    assert (pen.getx(), pen.gety()) == (15, 5)


def test_arc_records_centre(pen):
    pen.arc(20, 20, 0, 90, 8)
    coords = pen.getarccoords()
    assert isinstance(coords, ArcCoords)
    assert (coords.x, coords.y) == (20, 20)


def test_pieslice_draws_centre(pen):
    pen.pieslice(20, 20, 0, 90, 10)
    pixels = lit(pen.canvas)
    assert (20, 20) in pixels
    assert (30, 20) in pixels


def test_fillellipse_covers_centre_and_axis(pen):
    pen.fillellipse(20, 20, 6, 4)
    pixels = lit(pen.canvas)
    assert {(20, 20), (20, 24), (20, 16)} <= pixels
    assert (28, 20) not in pixels


def test_genellipse_unrotated_axis_points(pen):
    pen.genellipse(20, 20, 5, 3, 0)
    pixels = lit(pen.canvas)
    assert {(20, 23), (20, 17)} <= pixels
    assert (20, 20) not in pixels


def test_ellipse_zero_radius_raises(pen):
    with pytest.raises(GraphicsError):
        pen.ellipse(20, 20, 0, 360, 0, 5)


def test_cleardevice_resets(pen):
    pen.line(0, 0, 10, 0)
    pen.moveto(5, 5)
    pen.cleardevice()
    assert lit(pen.canvas) == set()
    assert (pen.getx(), pen.gety()) == (0, 0)