"""World map drawn from coastline and lake outlines, with a coordinate grid and a marked location."""

from __future__ import annotations

import argparse
from itertools import chain

from PIL import Image, ImageDraw

from sketchbook import coast_data_1, coast_data_2, lake_data

SCREEN_WIDTH = 1080
SCREEN_HEIGHT = 540
GRID_DEGREES = 15
LINE_SPACING = SCREEN_WIDTH // (360 // GRID_DEGREES)

MARKER_LON = 19.05903
MARKER_LAT = 47.47341
MARKER_RADIUS = 5

OCEAN = (0, 0, 255)
LAND = (0, 255, 0)
LAKE = (0, 0, 255)
OUTLINE = (0, 0, 0)
GRID = (0, 0, 0, 156)
MARKER = (200, 0, 0)

_SEPARATOR = (0, 0)
_TERMINATOR = (-1, -1)


def gps_to_screen(lon, lat):
    """Map longitude/latitude degrees to screen coordinates of the equirectangular map."""
    x = (lon + 180.0) / 360.0 * SCREEN_WIDTH
    y = SCREEN_HEIGHT - (lat + 90.0) / 180.0 * SCREEN_HEIGHT
    return x, y


def split_polygons(flat):
    """Split a flat coordinate sequence into polygons.

    A ``0, 0`` pair closes the current polygon and a ``-1, -1`` pair ends the data.
    Points after the last closing pair are not part of any polygon.
    """
    values = iter(flat)
    polygons = []
    current = []
    for lon, lat in zip(values, values):
        if (lon, lat) == _TERMINATOR:
            break
        if (lon, lat) == _SEPARATOR:
            polygons.append(tuple(current))
            current = []
            continue
        current.append((float(lon), float(lat)))
    return tuple(polygons)


def _screen_points(polygon):
    return [tuple(int(coordinate) for coordinate in gps_to_screen(lon, lat)) for lon, lat in polygon]


def draw_polygons(draw, polygons, fill):
    """Fill each polygon with ``fill`` and outline it in black; polygons of fewer than three points are skipped."""
    for polygon in polygons:
        if len(polygon) < 3:
            continue
        draw.polygon(_screen_points(polygon), fill=fill, outline=OUTLINE)


def draw_grid(draw):
    """Draw translucent grid lines every fifteen degrees."""
    for x in range(0, SCREEN_WIDTH, LINE_SPACING):
        draw.line([(x, 0), (x, SCREEN_HEIGHT)], fill=GRID)
    for y in range(0, SCREEN_HEIGHT, LINE_SPACING):
        draw.line([(0, y), (SCREEN_WIDTH, y)], fill=GRID)


def render_map():
    """Return the world map image with land, lakes, the grid and the marked location."""
    image = Image.new("RGB", (SCREEN_WIDTH, SCREEN_HEIGHT), OCEAN)
    draw = ImageDraw.Draw(image, "RGBA")
    land = chain(coast_data_1.polygons(), coast_data_2.polygons())
    draw_polygons(draw, land, LAND)
    draw_polygons(draw, lake_data.polygons(), LAKE)
    draw_grid(draw)
    x, y = (int(coordinate) for coordinate in gps_to_screen(MARKER_LON, MARKER_LAT))
    draw.ellipse(
        (x - MARKER_RADIUS, y - MARKER_RADIUS, x + MARKER_RADIUS, y + MARKER_RADIUS),
        fill=MARKER,
    )
    return image


def main(argv=None):
    parser = argparse.ArgumentParser(description="Draw a world map into an image.")
    parser.add_argument("-o", "--output", default="earthmap.png")
    args = parser.parse_args(argv)
    render_map().save(args.output)
    return 0