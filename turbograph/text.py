"""Bitmap-strip fonts and text output onto a :class:`Canvas`."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from turbograph.canvas import Canvas, GraphicsError

_FIRST_GLYPH = 33
_TAB_SPACES = 8
_WIDTH_MARGIN = 5


class FontStrip:
    """A font stored as one strip of glyphs separated by marker pixels in row 0.

    Glyphs start at ``'!'``.  The pixel in the bottom-left corner gives the
    transparent colour used when glyphs are drawn.
    """

    def __init__(self, rows: Sequence[Sequence[int]], char_pos: list[int]) -> None:
        self.rows = [list(row) for row in rows]
        self.char_pos = char_pos
        self.height = len(self.rows)
        self.width = len(self.rows[0]) if self.rows else 0
        self.colorkey = self.rows[-1][0] if self.rows else 0

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], marker: int) -> FontStrip:
        """Build a font from pixel rows, finding glyph bounds by ``marker`` runs."""
        if not rows or not rows[0]:
            raise GraphicsError("The font has not been loaded!")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise GraphicsError("font rows must all have the same width")
        top = rows[0]
        char_pos: list[int] = []
        x = 0
        while x < width:
            if top[x] == marker:
                char_pos.append(x)
                while x < width - 1 and top[x] == marker:
                    x += 1
                char_pos.append(x)
            x += 1
        return cls(rows, char_pos)

    def char_span(self, ch: str) -> tuple[int, int, int, float]:
        """Return ``(source_x, source_width, advance, lead)`` for a glyph."""
        offset = (ord(ch) - _FIRST_GLYPH) * 2 + 1
        if offset < 1 or offset + 2 >= len(self.char_pos):
            raise GraphicsError(f"character {ch!r} is not in the font")
        pos = self.char_pos
        source_x = (pos[offset] + pos[offset - 1]) // 2
        source_width = (pos[offset + 2] + pos[offset + 1]) // 2 - source_x
        advance = pos[offset + 1] - pos[offset]
        lead = (pos[offset] - pos[offset - 1]) / 2
        return source_x, source_width, advance, lead

    def space_width(self) -> int:
        """Width of a blank, taken from the first glyph."""
        if len(self.char_pos) < 3:
            raise GraphicsError("the font has no glyphs")
        return self.char_pos[2] - self.char_pos[1]


class TextWriter:
    """Writes text onto a canvas at a text position that advances as it goes."""

    def __init__(self, canvas: Canvas, font: FontStrip, x: int = 0, y: int = 0,
                 page_wait: Callable[[], None] | None = None) -> None:
        self.canvas = canvas
        self.font = font
        self.x = x
        self.y = y
        self.page_wait = page_wait

    def _blit(self, source_x: int, width: int, dest_x: int, dest_y: int) -> None:
        canvas = self.canvas
        font = self.font
        for row_offset, source_row in enumerate(font.rows[1:]):
            y = dest_y + row_offset
            if not 0 <= y < canvas.height:
                continue
            for column in range(width):
                sx = source_x + column
                x = dest_x + column
                if not (0 <= sx < font.width and 0 <= x < canvas.width):
                    continue
                value = source_row[sx]
                if value != font.colorkey:
                    canvas.set_raw(x, y, value)

    def _new_page(self) -> None:
        if self.page_wait is not None:
            self.page_wait()
        canvas = self.canvas
        canvas.pixels[:] = bytes([canvas.bgcolor]) * len(canvas.pixels)
        self.y = canvas.height - self.y

    def put_string(self, text: str) -> None:
        """Draw text at the text position, handling blanks, tabs and newlines."""
        font = self.font
        line_height = font.height - 1
        for ch in text:
            if ch == " ":
                self.x += font.space_width()
            elif ch == "\n":
                self.x = 0
                self.y += line_height
            elif ch == "\t":
                self.x += _TAB_SPACES * font.space_width()
            else:
                source_x, width, advance, lead = font.char_span(ch)
                if self.canvas.width - self.x <= width:
                    self.x = self.canvas.width - self.x
                    self.y += line_height
                if self.canvas.height - self.y <= line_height:
                    self._new_page()
                self._blit(source_x, width, int(self.x - lead), self.y)
                self.x += advance

    def erase_char(self, ch: str) -> None:
        """Step back over ``ch`` and paint its cell in the background colour."""
        font = self.font
        if ch == " ":
            width = font.space_width()
            self.x = max(self.x - width, 0)
        else:
            _, width, advance, _ = font.char_span(ch)
            self.x = max(self.x - advance, 0)
        canvas = self.canvas
        for x in range(self.x, self.x + width):
            for y in range(self.y, self.y + font.height):
                if 0 <= x < canvas.width and 0 <= y < canvas.height:
                    canvas.set_raw(x, y, canvas.bgcolor)

    def outtextxy(self, x: int, y: int, text: str) -> None:
        """Draw text at a point, leaving the text position unchanged."""
        saved = self.x, self.y
        self.x, self.y = x, y
        try:
            self.put_string(text)
        finally:
            self.x, self.y = saved

    def textwidth(self, text: str) -> int:
        """Width in pixels the text would take, plus a small margin."""
        font = self.font
        count = 0
        for ch in text:
            if ch == " ":
                count += font.space_width()
            elif ch == "\t":
                count += _TAB_SPACES * font.space_width()
            elif ch != "\n":
                count += font.char_span(ch)[2]
        return count + _WIDTH_MARGIN

    def textheight(self, text: str) -> int:
        """Height of a line of text in pixels."""
        return self.font.height