"""Drawing, scan-line filling and reading of polygons."""

from __future__ import annotations

import bisect
from collections.abc import Iterator, Sequence
from itertools import pairwise
from typing import TextIO

from turbograph.shapes import Pen

Point = tuple[int, int]


def drawpoly(pen: Pen, points: Sequence[Point]) -> None:
    """Draw lines joining consecutive points with the pen's current style."""
    for (x1, y1), (x2, y2) in pairwise(points):
        pen.line(x1, y1, x2, y2)


def _dda(rows: list[list[int]], x1: int, y1: int, x2: int, y2: int) -> None:
    """Record one crossing per row for a non-horizontal edge."""
    dx, dy = x2 - x1, y2 - y1
    steps = max(abs(dx), abs(dy))
    xinc, yinc = dx / steps, dy / steps
    yold = y1 - 1 if y1 < y2 else y1 + 1
    x, y = float(x1), float(y1)
    for _ in range(steps):
        row = round(y)
        if row != yold:
            _insert(rows, round(x), row)
            yold = row
        x += xinc
        y += yinc
    if y2 != yold:
        _insert(rows, x2, y2)


def _insert(rows: list[list[int]], x: int, row: int) -> None:
    if 0 <= row < len(rows):
        bisect.insort(rows[row], x)


def scanlines(points: Sequence[Point], height: int) -> list[list[int]]:
    """Return, for each of ``height`` rows, the sorted x crossings of the polygon.

    Crossings on rows outside ``0..height-1`` are dropped.
    """
    rows: list[list[int]] = [[] for _ in range(height)]
    count = len(points)
    for i in range(count - 1):
        x1, y1 = points[i]
        x2, y2 = points[i + 1]
        if y1 != y2:
            _dda(rows, x1, y1, x2, y2)
        if i < count - 2:
            next_y = points[i + 2][1]
            if (y1 < y2 < next_y) or (y1 > y2 > next_y):
                _insert(rows, x2, y2)
    return rows


def fillpoly(pen: Pen, points: Sequence[Point]) -> None:
    """Fill a polygon in the drawing colour by joining crossings pairwise."""
    canvas = pen.canvas
    for row, crossings in enumerate(scanlines(points, canvas.height)):
        spans = iter(crossings)
        for start in spans:
            end = next(spans, None)
            if end is None:
                canvas.map_pixel(start, row)
            else:
                canvas.map_word(start, row, end - start)


def polygon_bounds(points: Sequence[Point]) -> tuple[int, int, int, int]:
    """Return ``(xmin, ymin, xmax, ymax)`` of a list of vertices."""
    if not points:
        raise ValueError("a polygon needs at least one vertex")
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    return min(xs), min(ys), max(xs), max(ys)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input while reading a polygon")
    return int(token)


def read_polygon(stream: TextIO, prompt: TextIO | None = None) -> list[Point]:
    """Read a vertex count and that many vertices; return them closed.

    Prompts are written to ``prompt`` when it is given.  The first vertex is
    repeated at the end so the result can be passed straight to
    :func:`drawpoly` or :func:`fillpoly`.
    """
    tokens = _tokens(stream)
    if prompt is not None:
        prompt.write("Enter the number of vertices : ")
    count = _read_int(tokens)
    if count < 1:
        raise ValueError(f"a polygon needs at least one vertex, got {count}")
    vertices: list[Point] = []
    for index in range(count):
        if prompt is not None:
            prompt.write(f"Vertex {index} => ")
        x = _read_int(tokens)
        y = _read_int(tokens)
        vertices.append((x, y))
    vertices.append(vertices[0])
    return vertices