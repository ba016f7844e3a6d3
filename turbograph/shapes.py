"""Lines, arcs, ellipses, bars and fills drawn onto a :class:`Canvas`."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Callable, Iterator

from turbograph.canvas import Canvas, GraphicsError

_PATTERN_MASK = 0xFFFF


class LineStyle(IntEnum):
    """Predefined line styles."""

    SOLID_LINE = 0
    DOTTED_LINE = 1
    CENTER_LINE = 2
    DASHED_LINE = 3
    USERBIT_LINE = 4


class LineWidth(IntEnum):
    """Predefined line widths."""

    NORM_WIDTH = 1
    THICK_WIDTH = 3


_STYLE_PATTERNS = {
    LineStyle.SOLID_LINE: 0xFFFF,
    LineStyle.DOTTED_LINE: 0x3333,
    LineStyle.CENTER_LINE: 0x0C3F,
    LineStyle.DASHED_LINE: 0x1F1F,
}


@dataclass
class LineSettings:
    """The current line style, its 16-bit pattern and its thickness."""

    linestyle: int = LineStyle.SOLID_LINE
    upattern: int = 0xFFFF
    thickness: int = LineWidth.NORM_WIDTH


@dataclass
class ArcCoords:
    """Centre and end points recorded by the last :meth:`Pen.arc` call."""

    x: int = 0
    y: int = 0
    xstart: int = 0
    ystart: int = 0
    xend: int = 0
    yend: int = 0


def rotate_pattern(pattern: int) -> int:
    """Rotate a 16-bit line pattern one bit to the right."""
    pattern &= _PATTERN_MASK
    return ((pattern >> 1) | (pattern << 15)) & _PATTERN_MASK


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _bresenham(x1: int, y1: int, x2: int, y2: int) -> Iterator[tuple[int, int]]:
    """Yield the points of a line that is neither horizontal nor vertical."""
    dx, dy = abs(x1 - x2), abs(y1 - y2)
    if dx >= dy:
        p = 2 * dy - dx
        if x1 >= x2:
            x1, x2, y1, y2 = x2, x1, y2, y1
        inc = 1 if y2 >= y1 else -1
        yield x1, y1
        while x1 < x2:
            x1 += 1
            if p < 0:
                p += 2 * dy
            else:
                y1 += inc
                p += 2 * (dy - dx)
            yield x1, y1
    else:
        p = 2 * dx - dy
        if y1 >= y2:
            x1, x2, y1, y2 = x2, x1, y2, y1
        inc = 1 if x2 >= x1 else -1
        yield x1, y1
        while y1 < y2:
            y1 += 1
            if p < 0:
                p += 2 * dx
            else:
                x1 += inc
                p += 2 * (dx - dy)
            yield x1, y1


class Pen:
    """Draws shapes on a canvas, tracking the current position and line style."""

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas
        self._x = 0
        self._y = 0
        self._settings = LineSettings()
        self._last_arc = ArcCoords()

    # Position -------------------------------------------------------------

    def cleardevice(self) -> None:
        """Clear the screen to the background colour and home the position."""
        self.canvas.clear()
        self._x = 0
        self._y = 0

    def getx(self) -> int:
        return self._x

    def gety(self) -> int:
        return self._y

    def moveto(self, x: int, y: int) -> None:
        """Move the current position; negative coordinates become zero."""
        self._x = max(x, 0)
        self._y = max(y, 0)

    def moverel(self, dx: int, dy: int) -> None:
        self.moveto(self._x + dx, self._y + dy)

    # Lines ----------------------------------------------------------------

    def line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a line using the current line style and thickness."""
        canvas = self.canvas
        settings = self._settings
        styled = settings.linestyle != LineStyle.SOLID_LINE
        thick = settings.thickness != LineWidth.NORM_WIDTH
        width = settings.thickness
        dx, dy = abs(x1 - x2), abs(y1 - y2)

        if not dy:
            left, right = min(x1, x2), max(x1, x2)
            if not styled and not thick:
                canvas.map_word(left, y1, dx)
            elif not styled:
                for row in range(y1 - width // 2, y2 + width // 2 + 1):
                    canvas.map_word(left, row, dx)
            else:
                row = y1 - width // 2 if thick else y1
                pattern = settings.upattern
                for column in range(left, right + 1):
                    if pattern & 0x1:
                        if thick:
                            canvas.map_vword(column, row, width)
                        else:
                            canvas.map_pixel(column, row)
                    pattern = rotate_pattern(pattern)
        elif not dx:
            top, bottom = min(y1, y2), max(y1, y2)
            if not styled and not thick:
                canvas.map_vword(x1, top, dy)
            elif not styled:
                for column in range(x1 - width // 2, x2 + width // 2 + 1):
                    canvas.map_vword(column, top, dy)
            else:
                column = x1 - width // 2 if thick else x1
                pattern = settings.upattern
                for row in range(top, bottom + 1):
                    if pattern & 0x1:
                        if thick:
                            canvas.map_word(column, row, width)
                        else:
                            canvas.map_pixel(column, row)
                    pattern = rotate_pattern(pattern)
        else:
            self._diagonal(x1, y1, x2, y2, dx, dy, thick, styled)

    def _diagonal(self, x1: int, y1: int, x2: int, y2: int,
                  dx: int, dy: int, thick: bool, styled: bool) -> None:
        canvas = self.canvas
        x_major = dx >= dy
        stamp: Callable[[int, int], None]
        if thick:
            major = dx if x_major else dy
            width = round(self._settings.thickness * major / math.sqrt(dx * dx + dy * dy))
            half = width // 2

            if x_major:
                y1 -= half
                y2 -= half

                def stamp(x: int, y: int) -> None:
                    canvas.map_vword(x, y, width)
            else:
                x1 -= half
                x2 -= half

                def stamp(x: int, y: int) -> None:
                    canvas.map_word(x, y, width)
        else:
            stamp = canvas.map_pixel

        pattern = self._settings.upattern
        for step, (x, y) in enumerate(_bresenham(x1, y1, x2, y2)):
            if step:
                pattern = rotate_pattern(pattern)
            if step == 0 or not styled or pattern & 0x1:
                stamp(x, y)

    def _fastline(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """A solid one-pixel line regardless of the current style."""
        dx, dy = abs(x1 - x2), abs(y1 - y2)
        if not dy:
            self.canvas.map_word(min(x1, x2), y1, dx)
        elif not dx:
            self.canvas.map_vword(x1, min(y1, y2), dy)
        else:
            for x, y in _bresenham(x1, y1, x2, y2):
                self.canvas.map_pixel(x, y)

    def linerel(self, dx: int, dy: int) -> None:
        """Draw from the current position by an offset and move there."""
        self.line(self._x, self._y, self._x + dx, self._y + dy)
        self._x += dx
        self._y += dy

    def lineto(self, x: int, y: int) -> None:
        """Draw from the current position to a point and move there."""
        self.line(self._x, self._y, x, y)
        self._x = x
        self._y = y

    # Curves ---------------------------------------------------------------

    def _sym_pixels(self, x: int, y: int, xc: int, yc: int, symnum: int) -> None:
        points: list[tuple[int, int]] = []
        if symnum == 8:
            points += [(y + xc, x + yc), (y + xc, -x + yc),
                       (-y + xc, x + yc), (-y + xc, -x + yc)]
        if symnum in (8, 4):
            points += [(-x + xc, -y + yc), (-x + xc, y + yc)]
        if symnum in (8, 4, 2):
            points += [(x + xc, -y + yc), (x + xc, y + yc)]
        elif symnum == 1:
            points += [(-x + xc, y + yc), (x + xc, y + yc)]
        for px, py in points:
            self.canvas.map_pixel(px, py)

    def circle(self, xc: int, yc: int, radius: int) -> None:
        """Draw a circle with the midpoint algorithm."""
        x, y, p = 0, radius, 1 - radius
        while x <= y:
            self._sym_pixels(x, y, xc, yc, 8)
            if p >= 0:
                p += 2 * x - 2 * y + 1
                y -= 1
            else:
                p += 2 * x + 3
            x += 1

    def arc(self, xc: int, yc: int, stangle: int, endangle: int, radius: int) -> None:
        """Draw a circular arc between two angles given in degrees."""
        self._last_arc.x = xc
        self._last_arc.y = yc
        xold = radius * math.cos(math.pi * stangle / 180.0)
        yold = radius * math.sin(math.pi * stangle / 180.0)
        self._last_arc.xstart = int(xold)
        self._last_arc.ystart = int(yold)
        if radius:
            theta = max(1.0 / radius, 0.001)
            num = round(math.pi * abs(endangle - stangle) / 180.0 / theta)
            sintheta, costheta = math.sin(theta), math.cos(theta)
            for _ in range(num):
                xnew = xold * costheta - yold * sintheta
                ynew = xold * sintheta + yold * costheta
                self.canvas.map_pixel(round(xnew + xc), round(ynew + yc))
                xold, yold = xnew, ynew
        self._last_arc.xstart = int(xold)
        self._last_arc.ystart = int(yold)

    def getarccoords(self) -> ArcCoords:
        """Return a copy of the coordinates recorded by the last arc."""
        return replace(self._last_arc)

    def pieslice(self, xc: int, yc: int, stangle: int, endangle: int, radius: int) -> None:
        """Draw and fill a circular pie slice."""
        self.arc(xc, yc, stangle, endangle, radius)
        for angle in (stangle, endangle):
            x = round(xc + radius * math.cos(angle * math.pi / 180))
            y = round(yc + radius * math.sin(angle * math.pi / 180))
            self._fastline(xc, yc, x, y)
        middle = _trunc_div(stangle + endangle, 2)
        x = round(xc + radius / 2.0 * math.cos(middle * math.pi / 180))
        y = round(yc + radius / 2.0 * math.sin(middle * math.pi / 180))
        self._boundary_fill(x, y, self.canvas.get_color())

    def rectangle(self, left: int, top: int, right: int, bottom: int) -> None:
        self.line(left, top, right, top)
        self.line(right, top, right, bottom)
        self.line(right, bottom, left, bottom)
        self.line(left, bottom, left, top)

    def _ellipse_steps(self, stangle: int, endangle: int, rx: int, ry: int,
                       absolute: bool) -> tuple[int, float, float, float, float, float]:
        if not rx or not ry:
            raise GraphicsError(f"ellipse radii must be non-zero: ({rx}, {ry})")
        theta = max(1.0 / max(rx, ry), 0.001)
        span = abs(endangle - stangle) if absolute else endangle - stangle
        num = max(round(math.pi * span / 180.0 / theta), 0)
        sin_rxbyry = rx / ry * math.sin(theta)
        sin_rybyrx = ry / rx * math.sin(theta)
        xold = rx * math.cos(math.pi * stangle / 180.0)
        yold = ry * math.sin(math.pi * stangle / 180.0)
        return num, sin_rxbyry, sin_rybyrx, math.cos(theta), xold, yold

    def ellipse(self, xc: int, yc: int, stangle: int, endangle: int, rx: int, ry: int) -> None:
        """Draw an elliptical arc between two angles given in degrees."""
        num, s_xy, s_yx, cos_t, xold, yold = self._ellipse_steps(stangle, endangle, rx, ry, True)
        for _ in range(num):
            xnew = xold * cos_t - yold * s_xy
            ynew = xold * s_yx + yold * cos_t
            self.canvas.map_pixel(round(xnew + xc), round(ynew + yc))
            xold, yold = xnew, ynew

    def sector(self, xc: int, yc: int, stangle: int, endangle: int, rx: int, ry: int) -> None:
        """Draw and fill an elliptical sector."""
        num, s_xy, s_yx, cos_t, xold, yold = self._ellipse_steps(stangle, endangle, rx, ry, False)
        self.line(xc, yc, int(xold + xc), int(yold + yc))
        xnew, ynew = xold, yold
        for _ in range(num):
            xnew = xold * cos_t - yold * s_xy
            ynew = xold * s_yx + yold * cos_t
            self.canvas.map_pixel(round(xnew + xc), round(ynew + yc))
            xold, yold = xnew, ynew
        self.line(xc, yc, int(xnew + xc), int(ynew + yc))
        middle = (stangle + endangle) / 2.0
        fx = round(xc + rx / 2.0 * math.cos(middle * math.pi / 180))
        fy = round(yc + rx / 2.0 * math.sin(middle * math.pi / 180))
        self._boundary_fill(fx, fy, self.canvas.get_color())

    # Fills ----------------------------------------------------------------

    def _boundary_fill(self, x: int, y: int, color: int) -> None:
        """Fill the 4-connected region bounded by the drawing colour or ``color``."""
        canvas = self.canvas
        stack = [(x, y)]
        while stack:
            px, py = stack.pop()
            if px > canvas.width or px < 0 or py > canvas.height or py < 0:
                continue
            current = canvas.get_pixel(px, py)
            if current != canvas.get_color() and current != color:
                canvas.map_pixel(px, py)
                stack.extend(((px, py - 1), (px, py + 1), (px - 1, py), (px + 1, py)))

    def floodfill(self, x: int, y: int, color: int) -> None:
        """Fill with the drawing colour from a seed point up to a border colour."""
        self._boundary_fill(x, y, color)

    def fillellipse(self, xc: int, yc: int, rx: int, ry: int) -> None:
        """Draw a filled ellipse with the midpoint algorithm."""
        canvas = self.canvas
        rx2, ry2 = rx * rx, ry * ry
        x, y = 0, ry
        self._sym_pixels(x, y, xc, yc, 2)
        p1 = ry2 - rx2 * ry + rx2 // 4
        while True:
            x += 1
            if p1 < 0:
                p1 += 2 * ry2 * x + ry2
            else:
                y -= 1
                p1 += 2 * ry2 * x - 2 * rx2 * y + 1 + ry2
            canvas.map_word(-x + xc, y + yc, 2 * x)
            canvas.map_word(-x + xc, -y + yc, 2 * x)
            if not ry2 * x < rx2 * y:
                break
        p2 = ry2 * x * x + rx2 * (y - 1) * (y - 1) - rx2 * ry2
        while True:
            y -= 1
            if p2 > 0:
                p2 += -2 * rx2 * y + rx2
            else:
                x += 1
                p2 += 2 * ry2 * x - 2 * rx2 * y + rx2
            canvas.map_word(-x + xc, y + yc, 2 * x)
            canvas.map_word(-x + xc, -y + yc, 2 * x)
            if y < 0:
                break

    def genellipse(self, xc: int, yc: int, rx: int, ry: int, angle: int) -> None:
        """Draw an ellipse outline rotated by ``angle`` degrees."""
        theta = angle * math.pi / 180
        cost, sint = math.cos(theta), math.sin(theta)
        ry = max(ry, 1)
        rx = max(rx, 1)
        rx2, ry2 = rx * rx, ry * ry
        x, y = 0, ry
        plot = self.canvas.map_pixel

        def plot_pair(x: int, y: int) -> None:
            plot(round(x * cost - y * sint + xc), round(x * sint + y * cost + yc))
            plot(round(-x * cost + y * sint + xc), round(-x * sint - y * cost + yc))

        def plot_four(x: int, y: int) -> None:
            plot_pair(x, y)
            plot(round(x * cost + y * sint + xc), round(x * sint - y * cost + yc))
            plot(round(-x * cost - y * sint + xc), round(-x * sint + y * cost + yc))

        plot_pair(x, y)
        p1 = ry2 - rx2 * ry + rx2 // 4
        while True:
            x += 1
            if p1 < 0:
                p1 += 2 * ry2 * x + ry2
            else:
                y -= 1
                p1 += 2 * ry2 * x - 2 * rx2 * y + 1 + ry2
            plot_four(x, y)
            if not ry2 * x < rx2 * y:
                break
        p2 = ry2 * x * x + rx2 * (y - 1) * (y - 1) - rx2 * ry2
        while True:
            y -= 1
            if p2 > 0:
                p2 += -2 * rx2 * y + rx2
            else:
                x += 1
                p2 += 2 * ry2 * x - 2 * rx2 * y + rx2
            plot_four(x, y)
            if y < 0:
                break

    def bar(self, left: int, top: int, right: int, bottom: int) -> None:
        """Fill a rectangle with the drawing colour."""
        for row in range(top, bottom + 1):
            self.canvas.map_word(left, row, right - left)

    def bar3d(self, left: int, top: int, right: int, bottom: int,
              depth: int, topflag: int) -> None:
        """Draw a filled bar with a receding side and, optionally, a top."""
        ddx = int(depth * math.cos(math.pi / 6))
        ddy = int(-depth * math.sin(math.pi / 6))
        self.bar(left, top, right, bottom)
        self.moveto(right, bottom)
        self.linerel(ddx, ddy)
        self.linerel(0, top - bottom)
        if topflag:
            self.linerel(left - right, 0)
            self.lineto(left, top)
            self.moveto(right, top)
            self.linerel(ddx, ddy)

    # Line settings --------------------------------------------------------

    def getlinesettings(self) -> LineSettings:
        """Return a copy of the current line settings."""
        return replace(self._settings)

    def setlinestyle(self, linestyle: int, upattern: int, thickness: int) -> None:
        """Choose a line style; ``upattern`` is used only for user-defined lines."""
        self._settings.linestyle = linestyle
        if linestyle == LineStyle.USERBIT_LINE:
            self._settings.upattern = upattern & _PATTERN_MASK
        else:
            self._settings.upattern = _STYLE_PATTERNS.get(linestyle, 0xFFFF)
        self._settings.thickness = 1 if thickness <= 0 else thickness