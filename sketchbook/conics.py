"""Raster drawing of a circle, an ellipse, a hyperbola and a parabola from their focal definitions."""

from __future__ import annotations

import argparse
import math

from PIL import Image, ImageDraw

WIDTH = 640
HEIGHT = 480
EPSILON = 1.0

BACKGROUND = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)

LABEL = "Shapes: red circle, green ellipse, white parabola, blue hyperbola"

_CIRCLE_CENTER = (320, 240)
_CIRCLE_RADIUS = 200.0
_ELLIPSE_FOCI = ((240, 200), (400, 280))
_ELLIPSE_SUM = 250.0
_HYPERBOLA_FOCI = ((240, 240), (400, 240))
_HYPERBOLA_DIFFERENCE = 100.0
_PARABOLA_FOCUS = (320, 240)
_PARABOLA_DIRECTRIX_X = 400


def distance(x1, y1, x2, y2):
    """Euclidean distance between two points."""
    return math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)


def classify_pixel(x, y):
    """Return the colour of the curve passing through ``(x, y)``, or None."""
    if abs(distance(*_CIRCLE_CENTER, x, y) - _CIRCLE_RADIUS) < EPSILON:
        return RED
    (f1, f2) = _ELLIPSE_FOCI
    if abs(distance(*f1, x, y) + distance(*f2, x, y) - _ELLIPSE_SUM) < EPSILON:
        return GREEN
    (h1, h2) = _HYPERBOLA_FOCI
    if abs(abs(distance(*h1, x, y) - distance(*h2, x, y)) - _HYPERBOLA_DIFFERENCE) < EPSILON:
        return BLUE
    to_line = abs(_PARABOLA_DIRECTRIX_X - x)
    if abs(to_line - distance(*_PARABOLA_FOCUS, x, y)) < EPSILON:
        return WHITE
    return None


def render_conics(width=WIDTH, height=HEIGHT):
    """Return an RGB image of the four curves with a caption in the top-left corner."""
    image = Image.new("RGB", (width, height), BACKGROUND)
    image.putdata([
        classify_pixel(x, y) or BACKGROUND
        for y in range(height)
        for x in range(width)
    ])
    ImageDraw.Draw(image).text((10, 3), LABEL, fill=WHITE)
    return image


def main(argv=None):
    parser = argparse.ArgumentParser(description="Draw conic sections into an image.")
    parser.add_argument("-o", "--output", default="conics.png")
    args = parser.parse_args(argv)
    render_conics().save(args.output)
    return 0