import pytest

from turbograph.canvas import Canvas, GraphicsError
from turbograph.text import FontStrip, TextWriter

MARKER = 99
INK = 7
HEIGHT = 5
WIDTHS = [2, 3]  # glyphs for '!' and '"'


def build_font(widths=WIDTHS, height=HEIGHT):
    top = [MARKER]
    body = [0]
    for width in widths:
        top += [0] * width
        body += [INK] * width
        top.append(MARKER)
        body.append(0)
    return [top] + [list(body) for _ in range(height - 1)]


@pytest.fixture
def font():
    return FontStrip.from_rows(build_font(), MARKER)


@pytest.fixture
def writer(font):
    return TextWriter(Canvas(60, 40), font, 10, 10)


def test_advances_match_glyph_widths(font):
    assert font.char_span("!")[2] == WIDTHS[0]
    assert font.char_span('"')[2] == WIDTHS[1]
    assert font.space_width() == WIDTHS[0]


def test_font_metrics(font):
    assert font.height == HEIGHT
    assert font.colorkey == 0
    assert font.char_span("!")[0] == 0


def test_unknown_character_raises(font):
    with pytest.raises(GraphicsError):
        font.char_span("A")
    with pytest.raises(GraphicsError):
        font.char_span("\r")


def test_empty_font_raises():
    with pytest.raises(GraphicsError):
        FontStrip.from_rows([], MARKER)


def test_ragged_font_raises():
    with pytest.raises(GraphicsError):
        FontStrip.from_rows([[MARKER, 0], [0]], MARKER)


def test_put_string_draws_ink_and_advances(writer):
    writer.put_string("!")
    canvas = writer.canvas
    assert canvas.get_raw(10, 10) == INK
    assert canvas.get_raw(11, 10 + HEIGHT - 2) == INK
    assert canvas.get_raw(9, 10) == 0
    assert canvas.get_raw(10, 10 + HEIGHT - 1) == 0
    assert writer.x == 10 + WIDTHS[0]
    assert writer.y == 10


def test_blank_and_tab_move_without_drawing(writer):
    before = bytes(writer.canvas.pixels)
    writer.put_string(" \t")
    assert writer.x == 10 + 9 * WIDTHS[0]
    assert bytes(writer.canvas.pixels) == before


def test_newline_resets_column(writer):
    writer.put_string("!\n")
    assert writer.x == 0
    assert writer.y == 10 + HEIGHT - 1


def test_erase_char_restores_background(writer):
    writer.put_string('"')
    writer.erase_char('"')
    assert writer.x == 10
    assert all(value == 0 for value in writer.canvas.pixels)


def test_outtextxy_keeps_text_position(writer):
    writer.outtextxy(30, 20, "!!")
    assert (writer.x, writer.y) == (10, 10)
    assert writer.canvas.get_raw(30, 20) == INK


def test_textwidth_and_height(writer):
    assert writer.textwidth('!"') == sum(WIDTHS) + 5
    assert writer.textwidth("") == 5
    assert writer.textwidth("\n") == writer.textwidth("")
    assert writer.textheight("anything") == HEIGHT


def test_full_page_waits_and_clears(font):
    waits = []
    canvas = Canvas(40, 8)
    canvas.set_raw(0, 0, INK)
    writer = TextWriter(canvas, font, 10, 5, page_wait=lambda: waits.append(True))
    writer.put_string("!")
    assert waits == [True]
    assert canvas.get_raw(0, 0) == 0
    assert writer.y < 5
    assert INK in canvas.pixels