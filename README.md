# turbograph

A small raster graphics toolkit in the spirit of the classic Turbo C BGI
interface. Everything draws into an in-memory canvas of 8-bit palette
values, so it runs anywhere and the result is easy to inspect and test.
It has no dependencies beyond the standard library.

## Modules

- `turbograph.canvas`
  - `Canvas`: a framebuffer (`pixels` is a `bytearray`). Create one with
    `Canvas.open(driver, mode)` or `Canvas(width, height)`.
  - Colours: `set_color`/`get_color`, `set_bk_color`/`get_bk_color` (setting
    the background repaints the screen), and `set_font_color`/`get_font_color`.
    `Color.LIGHTCYAN` is refused as a font colour.
  - Plotting: `map_pixel`, `map_word` (horizontal run), `map_vword`
    (vertical run), `put_pixel`, `get_pixel`, `get_raw`/`set_raw`, `clip`
    and `clear`.
  - Mode queries: `maxx`, `maxy` and `graph_mode`.
  - Module helpers: the enums `Color`, `GraphMode` and `Driver`, and the
    functions `color_to_index`, `index_to_color`, `mode_dimensions`,
    `mode_name` and `mode_range`.
  - `GraphicsError` is raised for impossible requests, such as an invalid
    size or an unavailable font colour.
- `turbograph.shapes`
  - `Pen(canvas)` draws shapes and keeps a current position.
  - Position: `moveto`, `moverel`, `getx`, `gety` and `cleardevice`.
  - Lines: `line`, `lineto`, `linerel` and `rectangle`. Lines honour the
    settings from `setlinestyle(linestyle, upattern, thickness)`;
    `getlinesettings()` returns them as a `LineSettings`. The styles come
    from `LineStyle`, the widths from `LineWidth`, and `rotate_pattern`
    rotates a 16-bit line pattern.
  - Curves and fills: `circle`, `arc` (read its end points back with
    `getarccoords()`, which returns an `ArcCoords`), `pieslice`, `ellipse`,
    `sector`, `fillellipse`, `genellipse` (a rotated ellipse) and `floodfill`.
  - Bars: `bar` and `bar3d`.
- `turbograph.polygon`
  - Drawing: `drawpoly(pen, points)` and `fillpoly(pen, points)`, a
    scan-line fill.
  - Helpers: `scanlines(points, height)` gives the sorted crossings per row,
    and `polygon_bounds(points)` gives the bounds.
  - `read_polygon(stream, prompt=None)` reads a vertex count followed by the
    vertices and returns them as a closed list.
- `turbograph.text`
  - `FontStrip.from_rows(rows, marker)` builds a font from a strip of glyph
    pixels. The glyphs start at `'!'` and are separated by runs of `marker`
    in the top row.
  - `TextWriter(canvas, font, x=0, y=0, page_wait=None)` provides
    `put_string`, `outtextxy`, `erase_char`, `textwidth` and `textheight`.
    It handles blanks, tabs and newlines. When the text reaches the bottom
    of the screen it calls `page_wait` and clears the page.
- `turbograph.demo`
  - `shapes_page(pen)` and `polygons_page(pen)` draw the two demonstration
    pages.
  - `render_demo()` renders both pages on an 800x600 canvas and returns
    their pixels as a list of two `bytes` objects.
- `turbograph.exercises`
  - Small console exercises: `repeated_digits`, `reverse_two_digits`,
    `reversed_sequence`, `seven_segment`, `simple_digit_art`,
    `reverse_message`, `planet_reports`, `decompose`, `swap` and `max_min`.

## Install

```
pip install .
```

## Example

```python
from turbograph.canvas import Canvas, Color, Driver, GraphMode
from turbograph.shapes import Pen
from turbograph.polygon import fillpoly

canvas = Canvas.open(Driver.VGA, GraphMode.VGAMAX)   # 800 x 600
pen = Pen(canvas)
canvas.set_color(Color.RED)
pen.circle(300, 200, 50)
canvas.set_color(Color.CYAN)
fillpoly(pen, [(500, 150), (600, 250), (700, 150), (725, 350), (500, 150)])
print(canvas.get_pixel(600, 200))
```

```python
from turbograph.exercises import seven_segment, max_min

print(seven_segment(8))
print(max_min([4, 9, 1, 7]))   # (9, 1)
```

## Command line

`turbograph-exercises` prints, for each name given on the command line,
whether it is a planet and its position:

```
$ turbograph-exercises Earth Pluto Vulcan
Earth is planet 3
Pluto is planet 9
Vulcan is not a planet
```

## What it does not do

- It does not open a window or show anything on screen. Drawing goes only
  into `Canvas.pixels`. Saving or displaying those pixels is left to you.
- It reads no keyboard or mouse input. There are no interactive `getch`,
  `kbhit` or `scanf`-style functions. `read_polygon` reads from a text
  stream that you pass in.
- It loads no font files. A `FontStrip` is built from pixel rows that you
  supply, and the demo draws no text labels.