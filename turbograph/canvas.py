"""An 8-bit in-memory drawing surface with a 16-colour palette."""

from __future__ import annotations

import logging
from enum import IntEnum

_log = logging.getLogger(__name__)

MAX_COLOR = 15
DRIVER_NAME = "EGAVGA"


class GraphicsError(Exception):
    """Raised when the graphics system is asked for something it cannot do."""


class Color(IntEnum):
    """The sixteen classic palette colours."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    LIGHTGRAY = 7
    DARKGRAY = 8
    LIGHTBLUE = 9
    LIGHTGREEN = 10
    LIGHTCYAN = 11
    LIGHTRED = 12
    LIGHTMAGENTA = 13
    YELLOW = 14
    WHITE = 15


class GraphMode(IntEnum):
    """Screen modes; the last four VGA entries are extensions."""

    VGALO = 0
    VGAMED = 1
    VGAHI = 2
    VGAMAX = 3
    VGA640 = 4
    VGA800 = 5
    VGA1024 = 6
    USERMODE = 7


class Driver(IntEnum):
    """Graphics drivers understood by :meth:`Canvas.open`."""

    CURRENT_DRIVER = -1
    DETECT = 0
    VGA = 9
    USER = 10


_PALETTE = (0, 3, 28, 31, 224, 227, 136, 219, 73, 143, 158, 191, 237, 247, 252, 255)
_REVERSE_PALETTE = {value: Color(index) for index, value in enumerate(_PALETTE)}

_MODE_GEOMETRY = {
    GraphMode.VGALO: (640, 200, False),
    GraphMode.VGAMED: (640, 350, False),
    GraphMode.VGAHI: (640, 480, False),
    GraphMode.VGAMAX: (800, 600, False),
    GraphMode.VGA640: (640, 480, True),
    GraphMode.VGA800: (800, 600, True),
    GraphMode.VGA1024: (1024, 768, True),
}

_MODE_NAMES = {
    GraphMode.VGALO: "640 x 200 VGA",
    GraphMode.VGAMED: "640 x 350 VGA",
    GraphMode.VGAHI: "640 x 480 VGA",
    GraphMode.VGAMAX: "800 x 600 VGA",
    GraphMode.VGA640: "640 x 480 VGA - fullscreen",
    GraphMode.VGA800: "800 x 600 VGA - fullscreen",
    GraphMode.VGA1024: "1024 x 800 VGA - fullscreeen",
}

_MODE_BY_MAXY = {
    199: GraphMode.VGALO,
    349: GraphMode.VGAMED,
    479: GraphMode.VGAHI,
    599: GraphMode.VGAMAX,
    767: GraphMode.VGA1024,
}

_FONT_COLORS = frozenset(Color) - {Color.LIGHTCYAN}


def color_to_index(color: int) -> int:
    """Return the 8-bit palette value for a colour; unknown colours map to white."""
    if 0 <= color < len(_PALETTE):
        return _PALETTE[color]
    return _PALETTE[Color.WHITE]


def index_to_color(index: int) -> Color:
    """Return the colour for an 8-bit palette value; unknown values give white."""
    return _REVERSE_PALETTE.get(index, Color.WHITE)


def mode_dimensions(driver: int, mode: int) -> tuple[int, int, bool, GraphMode]:
    """Resolve a driver and mode into ``(width, height, fullscreen, mode)``.

    With :attr:`Driver.USER` the mode encodes the size as ``width * 1000 + height``.
    """
    if driver == Driver.DETECT:
        mode = GraphMode.VGAHI
    if driver == Driver.USER:
        height = mode % 1000
        width = (mode // 1000) % 1000
        return width, height, False, GraphMode.USERMODE
    try:
        resolved = GraphMode(mode)
    except ValueError:
        resolved = None
    width, height, fullscreen = _MODE_GEOMETRY.get(resolved, (640, 480, False))
    return width, height, fullscreen, resolved if resolved is not None else GraphMode.VGAHI


def mode_name(mode: int) -> str:
    """Return the descriptive name of a graphics mode."""
    try:
        return _MODE_NAMES.get(GraphMode(mode), "User specified")
    except ValueError:
        return "User specified"


def mode_range(driver: int) -> tuple[int, int]:
    """Return the lowest and highest mode of a driver, or ``(-1, -1)``."""
    if driver in (Driver.VGA, Driver.CURRENT_DRIVER):
        return GraphMode.VGALO, GraphMode.VGA1024
    return -1, -1


class Canvas:
    """A framebuffer of 8-bit palette values with current drawing colours."""

    def __init__(self, width: int, height: int, fullscreen: bool = False) -> None:
        if width <= 0 or height <= 0:
            raise GraphicsError(f"Unable to set video: invalid size {width}x{height}")
        self.width = width
        self.height = height
        self.fullscreen = fullscreen
        self.pixels = bytearray(width * height)
        self.fgcolor = color_to_index(Color.WHITE)
        self.bgcolor = color_to_index(Color.BLACK)
        self.font_color = Color.WHITE

    @classmethod
    def open(cls, driver: int = Driver.DETECT, mode: int = GraphMode.VGAHI) -> Canvas:
        """Create a canvas sized for the given driver and mode."""
        width, height, fullscreen, _ = mode_dimensions(driver, mode)
        return cls(width, height, fullscreen)

    def maxx(self) -> int:
        return self.width - 1

    def maxy(self) -> int:
        return self.height - 1

    def graph_mode(self) -> GraphMode:
        """Guess the current mode from the screen height."""
        return _MODE_BY_MAXY.get(self.maxy(), GraphMode.USERMODE)

    def set_color(self, color: int) -> None:
        self.fgcolor = color_to_index(color)

    def get_color(self) -> Color:
        return index_to_color(self.fgcolor)

    def set_bk_color(self, color: int) -> None:
        """Set the background colour and paint the whole screen with it."""
        self.bgcolor = color_to_index(color)
        self.pixels[:] = bytes([self.bgcolor]) * len(self.pixels)

    def get_bk_color(self) -> Color:
        return index_to_color(self.bgcolor)

    def set_font_color(self, color: int) -> None:
        """Select the text colour; light cyan has no font and is refused."""
        if color not in _FONT_COLORS:
            raise GraphicsError(f"Font color requested is unavailable -- {color}")
        self.font_color = Color(color)

    def get_font_color(self) -> Color:
        return self.font_color

    def _outside(self, x: int, y: int) -> bool:
        if x > self.width or y > self.height or x < 0 or y < 0:
            _log.warning("Pixel request out of range!!\t(%d,%d)", x, y)
            return True
        return False

    def map_pixel(self, x: int, y: int) -> None:
        """Plot one pixel in the drawing colour, ignoring points off the screen."""
        if self._outside(x, y) or x >= self.width or y >= self.height:
            return
        self.pixels[y * self.width + x] = self.fgcolor

    def map_word(self, x: int, y: int, word: int) -> None:
        """Plot a horizontal run of ``word + 1`` pixels starting at ``(x, y)``."""
        if x + word < 0:
            x -= word
        if self._outside(x, y):
            return
        if x + word > self.width:
            word = self.width - x
        if word < 0 or x >= self.width or y >= self.height:
            return
        end = min(x + word, self.width - 1)
        count = end - x + 1
        start = y * self.width + x
        self.pixels[start:start + count] = bytes([self.fgcolor]) * count

    def map_vword(self, x: int, y: int, word: int) -> None:
        """Plot a vertical run of ``word + 1`` pixels starting at ``(x, y)``."""
        if word < 0:
            y -= word
        if self._outside(x, y):
            return
        if y + word > self.height:
            word = self.height - y
        if word < 0 or x >= self.width or y >= self.height:
            return
        last = min(y + word, self.height - 1)
        for row in range(y, last + 1):
            self.pixels[row * self.width + x] = self.fgcolor

    def clip(self, x: int, y: int) -> tuple[int, int]:
        """Clamp a point to the range ``0..width`` by ``0..height``."""
        return min(max(x, 0), self.width), min(max(y, 0), self.height)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Plot one pixel in ``color`` without changing the drawing colour."""
        saved = self.fgcolor
        self.set_color(color)
        try:
            self.map_pixel(x, y)
        finally:
            self.fgcolor = saved

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the colour at a point; off-screen points report the drawing colour."""
        if x > self.width or y > self.height or x < 0 or y < 0:
            _log.warning("getpixel() request out of range!!\t(%d,%d)", x, y)
            return index_to_color(self.fgcolor)
        if x >= self.width or y >= self.height:
            return index_to_color(self.fgcolor)
        return index_to_color(self.pixels[y * self.width + x])

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return y * self.width + x

    def get_raw(self, x: int, y: int) -> int:
        """Return the 8-bit palette value stored at a point."""
        return self.pixels[self._offset(x, y)]

    def set_raw(self, x: int, y: int, value: int) -> None:
        """Store an 8-bit palette value at a point."""
        self.pixels[self._offset(x, y)] = value

    def clear(self) -> None:
        """Repaint the whole screen in the background colour."""
        self.set_bk_color(self.get_bk_color())