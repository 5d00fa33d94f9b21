"""Outlines of the large lakes drawn over the land.

Each outline is a sequence of longitude/latitude degree pairs, kept in drawing order.
"""

from __future__ import annotations

_OUTLINES = (
    (
        48.6, 41.8, 47.6, 43.7, 46.7, 44.6, 48.6, 45.8, 50, 46.6, 51.2, 47,
        53, 46.9, 53, 45.3, 51.3, 45.2, 50.3, 44.3, 51.3, 43.1, 52.7, 42.4,
        52.8, 41.1, 53.7, 42.1, 53.9, 40.6, 52.7, 40, 53.9, 39, 53.8, 37,
        52.3, 36.7, 50.8, 36.9, 49.2, 37.6, 49.4, 39.4, 50.1, 40.5,
    ),
    (
        107.3, 53.4, 108.4, 54.3, 109.7, 55, 109, 53.8, 108.2, 52.8, 106.6, 52.3,
        105.2, 51.5, 103.9, 51.9, 105.5, 52.3,
    ),
    (-99, 53.9, -97.6, 53.4, -96.9, 50.8, -98.2, 52.2),
    (
        -115.8, 62.8, -113.4, 62, -111, 62.9, -109.1, 62.7, -111.3, 62.3, -113.6, 61.1,
        -116.4, 60.9, -118.2, 61.6, -116.8, 61.3,
    ),
    (-79.2, 43.8, -77.6, 44, -76.2, 43.6, -77.7, 43.3),
    (-82.6, 42, -81.1, 42.7, -79.8, 42.3, -81.6, 41.6),
    (
        -88.6, 48.6, -87.2, 48.7, -86, 48, -85.1, 46.8, -87, 46.5, -87.9, 47.5,
        -89.6, 46.8, -91.3, 47.3,
    ),
    (34.1, -1, 33, -2.4, 31.8, -1.6, 32.3, 0, 33.9, 0),
    (30.9, 61.8, 32.6, 60.2, 31.1, 60.1),
    (78.4, 46.3, 77.2, 46.4, 74.8, 46.1, 74.1, 45, 73.7, 46.2, 74.9, 46.8, 77.2, 46.6),
    (30.5, -8.5, 30.1, -7.3, 29.4, -5.6, 29.7, -4.4, 30, -5.9, 30.5, -6.9),
    (34.7, -14.3, 34.3, -12.9, 34.3, -11.7, 34, -9.5, 34.6, -11.1, 34.7, -12.4),
    (59.4, 45.2, 58.3, 44.5, 58.8, 45.9, 60.1, 45.6),
    (35.7, 62.3, 36.1, 61, 34.9, 61.6, 34.6, 62.8),
    (-118.1, 65.8, -119.7, 65.4, -121.1, 65.4, -122.4, 65.9, -124.9, 66.2, -120.2, 66.5),
    (-109.7, 59, -111.2, 58.8, -109.1, 59.6, -106.5, 59.3),
    (
        -79.8, 44.8, -81.3, 44.6, -82.7, 44, -83.9, 43.9, -83.3, 45.2, -84.7, 45.9,
        -83.2, 46.2, -81.6, 46.1,
    ),
    (
        -84.9, 45.8, -86, 44.9, -86.5, 43.7, -86.2, 42.4, -87.5, 41.7, -87.9, 43.2,
        -88, 44.7, -87, 45.7,
    ),
)


def _pairs(flat):
    coordinates = iter(flat)
    return tuple((float(lon), float(lat)) for lon, lat in zip(coordinates, coordinates))


def polygons():
    """Return the lake outlines as tuples of ``(longitude, latitude)`` points, in drawing order."""
    return tuple(_pairs(outline) for outline in _OUTLINES)