"""The two-page shapes and colours demonstration."""

from __future__ import annotations

from turbograph.canvas import Canvas, Color, Driver, GraphMode
from turbograph.polygon import drawpoly, fillpoly
from turbograph.shapes import Pen

OUTLINE_POLYGON = [(200, 150), (300, 250), (400, 150), (425, 350),
                   (300, 275), (150, 350), (200, 150)]
FILLED_POLYGON = [(500, 150), (600, 250), (700, 150), (725, 350),
                  (600, 275), (450, 350), (500, 150)]


def _use(pen: Pen, color: Color, font: bool = True) -> None:
    pen.canvas.set_color(color)
    if font:
        pen.canvas.set_font_color(color)


def shapes_page(pen: Pen) -> None:
    """Draw the first page: a line, circles, arcs, slices, ellipses and sectors."""
    _use(pen, Color.RED)
    pen.line(200, 20, 700, 100)

    _use(pen, Color.BLUE)
    pen.circle(300, 200, 50)
    pen.arc(500, 200, 180, 280, 50)
    pen.pieslice(680, 200, 0, 110, 50)
    _use(pen, Color.LIGHTGREEN, font=False)
    pen.pieslice(680, 200, 111, 210, 50)
    _use(pen, Color.LIGHTRED, font=False)
    pen.pieslice(680, 200, 210, 360, 50)

    _use(pen, Color.YELLOW)
    pen.ellipse(300, 400, 0, 360, 100, 50)
    pen.fillellipse(500, 400, 50, 110)
    pen.sector(680, 400, 0, 110, 100, 50)
    _use(pen, Color.LIGHTGRAY, font=False)
    pen.sector(680, 400, 111, 210, 100, 50)
    _use(pen, Color.MAGENTA, font=False)
    pen.sector(680, 400, 211, 360, 100, 50)


def polygons_page(pen: Pen) -> None:
    """Clear the screen and draw the second page: rectangle, polygons and bars."""
    pen.cleardevice()
    pen.canvas.set_font_color(Color.WHITE)

    _use(pen, Color.GREEN)
    pen.rectangle(200, 40, 600, 130)

    _use(pen, Color.CYAN)
    drawpoly(pen, OUTLINE_POLYGON)
    fillpoly(pen, FILLED_POLYGON)

    _use(pen, Color.LIGHTBLUE)
    pen.bar(200, 350, 270, 525)
    pen.bar3d(500, 350, 570, 525, 30, 1)


def render_demo() -> list[bytes]:
    """Render both demo pages on an 800x600 canvas and return their pixels."""
    canvas = Canvas.open(Driver.VGA, GraphMode.VGAMAX)
    pen = Pen(canvas)
    pages = []
    shapes_page(pen)
    pages.append(bytes(canvas.pixels))
    polygons_page(pen)
    pages.append(bytes(canvas.pixels))
    return pages