"""SVG drawing of an analogue clock face showing a given time."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

PI = 3.1415926536
CENTER = 100.0

_HEADER = (
    '<svg width="200" height="200" xmlns="http://www.w3.org/2000/svg" version="1.1">'
    '<circle cx="100" cy="100" r="100" stroke="black" fill="#cccccc"/>'
    '<circle cx="100" cy="100" r="70" stroke="black" fill="#eeeeee"/>'
    '<circle cx="100" cy="100" r="40" stroke="black" fill="#dddddd"/>'
)


def _point(angle, radius):
    return CENTER + math.cos(angle) * radius, CENTER + math.sin(angle) * radius


def _ticks():
    for i in range(12):
        angle = PI / 6 * i
        x1, y1 = _point(angle, 50)
        x2, y2 = _point(angle, 100)
        yield (
            f'<line x1="{x1:f}" y1="{y1:f}" x2="{x2:f}" y2="{y2:f}" '
            'stroke-width="2" stroke-linecap="round" stroke="blue"/>'
        )
        for j in range(1, 5):
            minute_angle = PI / 6 * i + PI / 30 * j
            x1, y1 = _point(minute_angle, 70)
            x2, y2 = _point(minute_angle, 90)
            yield f'<line x1="{x1:f}" y1="{y1:f}" x2="{x2:f}" y2="{y2:f}" stroke="black"/>'


def _hand(angle, radius, width, colour):
    x, y = _point(angle, radius)
    return (
        f'<line x1="100" y1="100" x2="{x:f}" y2="{y:f}" '
        f'stroke-width="{width}" stroke-linecap="round" stroke="{colour}"/>'
    )


def clock_svg(hour, minute, second):
    """Return the SVG document of a clock face showing the given time."""
    hour_angle = (PI / 6) * (hour - 3) + PI / 360 * minute + PI / 21600 * second
    minute_angle = PI / 30 * (minute - 15) + PI / 1800 * second
    second_angle = PI / 30 * (second - 15)
    parts = [_HEADER, *_ticks()]
    parts.append(_hand(hour_angle, 100, 6, "red"))
    parts.append(_hand(minute_angle, 70, 4, "green"))
    parts.append(_hand(second_angle, 90, 3, "black"))
    parts.append("</svg>")
    return "".join(parts)


def _ask(prompt):
    try:
        return float(input(prompt))
    except (ValueError, EOFError):
        return 0.0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Draw a clock face as SVG.")
    parser.add_argument("hour", nargs="?", type=float)
    parser.add_argument("minute", nargs="?", type=float)
    parser.add_argument("second", nargs="?", type=float)
    parser.add_argument("-o", "--output", default="clock.svg")
    args = parser.parse_args(argv)
    if args.hour is None:
        print("Enter the time to draw on the clock.")
        hour = _ask("Hour: ")
    else:
        hour = args.hour
    minute = _ask("Minute: ") if args.minute is None else args.minute
    second = _ask("Second: ") if args.second is None else args.second
    Path(args.output).write_text(clock_svg(hour, minute, second), encoding="utf-8")
    return 0