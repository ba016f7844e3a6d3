"""Small exercises: digit handling, seven-segment art, planets and helpers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

PLANETS = ("Mercury", "Venus ", "Earth", "Mars", "Jupiter", "Saturn",
           "Uranus", "Neptune", "Pluto")

MESSAGE_LIMIT = 20

# Segments a..g for each digit: top, upper right, lower right, bottom,
# lower left, upper left, middle.
SEGMENTS = (
    (1, 1, 1, 1, 1, 1, 0),
    (0, 1, 1, 0, 0, 0, 0),
    (1, 1, 0, 1, 1, 0, 1),
    (1, 1, 1, 1, 0, 0, 1),
    (0, 1, 1, 0, 0, 1, 1),
    (1, 0, 1, 1, 0, 1, 1),
    (1, 0, 1, 1, 1, 1, 1),
    (1, 1, 1, 0, 0, 0, 0),
    (1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 0, 1, 1),
)

_SIMPLE_ART = {
    0: "---\n|  |\n---\n",
    1: "|\n|\n",
    2: "__\n _|\n|__\n",
}


def repeated_digits(text: str) -> tuple[int, list[int]]:
    """Count the characters of the first line and list its repeated digits.

    Repeated digits are given in the order in which they first appear.
    Characters that are not digits are counted but never repeat.
    """
    line = text.split("\n", 1)[0]
    digits = [int(ch) if ch in "0123456789" else None for ch in line]
    repeated: list[int] = []
    for index, digit in enumerate(digits):
        if digit is None or digit in repeated:
            continue
        if digit in digits[index + 1:]:
            repeated.append(digit)
    return len(line), repeated


def reverse_two_digits(number: int) -> str:
    """Write the units digit and then the tens part of a two-digit number."""
    first = abs(number) // 10
    second = abs(number) % 10
    if number < 0:
        first, second = -first, -second
    return f"{second}{first}"


def reversed_sequence(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(values)[::-1]


def seven_segment(digit: int) -> str:
    """Draw a single digit in seven-segment style."""
    if not 0 <= digit <= 9:
        raise ValueError("Error invalid number")
    seg = SEGMENTS[digit]
    is_seven = seg == SEGMENTS[7]
    is_zero = seg == SEGMENTS[0]
    out = []
    if seg[0]:
        out.append("___\n")
    if seg[1] or seg[5] or seg[6]:
        if seg[5]:
            out.append("|")
        if seg[6]:
            out.append("__")
        if seg[1]:
            out.append("  |" if is_seven or is_zero else "|")
        out.append("\n")
    if seg[2] or seg[3] or seg[4]:
        if seg[4]:
            out.append("|")
        if seg[3]:
            out.append("__")
        if seg[2]:
            out.append("  |" if is_seven else "|")
        out.append("\n")
    return "".join(out)


def simple_digit_art(digits: Iterable[int]) -> str:
    """Draw digits with the simple pictures known for 0, 1 and 2."""
    out = []
    for digit in digits:
        if digit > 9:
            out.append("Error invalid number\n")
        else:
            out.append(_SIMPLE_ART.get(digit, ""))
    return "".join(out)


def reverse_message(text: str) -> str:
    """Reverse the first line of a message, read up to twenty characters."""
    line = text.split("\n", 1)[0][:MESSAGE_LIMIT]
    return line[::-1]


def planet_reports(names: Iterable[str]) -> list[str]:
    """Report for each name whether it is a planet and its position."""
    reports = []
    for name in names:
        if name in PLANETS:
            reports.append(f"{name} is planet {PLANETS.index(name) + 1}")
        else:
            reports.append(f"{name} is not a planet")
    return reports


def decompose(x: float) -> tuple[int, float]:
    """Split a number into its integer part and its fractional part."""
    int_part = int(x)
    return int_part, x - int_part


def swap(first, second):
    """Return the two values the other way round."""
    return second, first


def max_min(values: Sequence[int]) -> tuple[int, int]:
    """Return the largest and the smallest of the values."""
    if not values:
        raise ValueError("max_min() needs at least one value")
    return max(values), min(values)


def main(argv: list[str] | None = None) -> int:
    """Print a planet report for each command-line argument."""
    names = sys.argv[1:] if argv is None else argv
    for report in planet_reports(names):
        print(report)
    return 0