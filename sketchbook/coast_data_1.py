"""Coastline outlines, first part: Antarctica, the southern and Pacific islands, Japan and the North Atlantic islands.

Each outline is a sequence of longitude/latitude degree pairs, kept in drawing order.
"""

from __future__ import annotations

_OUTLINES = (
    (-60.2, -81, -62.3, -80.9, -64.5, -80.9, -66.3, -80.3, -64, -80.3, -61.1, -80),
    (-159.2, -79.5, -161.1, -79.6, -162.4, -79.3, -163.1, -78.2, -160.2, -78.7),
    (
        -45.2, -78, -43.9, -78.5, -43.3, -80, -44.9, -80.3, -46.5, -80.6, -48.4, -80.8,
        -50.5, -81, -52.9, -81, -54, -80.2, -51.9, -79.9, -50.4, -79.2, -49.3, -78.5,
        -48.2, -78, -46.7, -77.8,
    ),
    (-121.2, -73.5, -119.9, -73.7, -118.7, -73.5, -120.2, -74.1, -122.4, -73.3),
    (-124.6, -73.8, -125.9, -73.7, -127.3, -73.5),
    (-99, -71.9, -97, -72.4, -98.2, -72.5, -99.4, -72.4, -100.8, -72.5, -101.7, -71.7, -100.4, -71.9),
    (
        -68.5, -71, -68.8, -72.2, -71.1, -72.5, -73.1, -72.2, -75, -71.7, -73.2, -71.2,
        -71.7, -70.3, -71.2, -69, -69.5, -69.6,
    ),
    (
        -59, -64.4, -60.6, -64.3, -62, -64.8, -62.1, -66.2, -63.7, -66.5, -64.9, -67.2,
        -65.3, -68.4, -64, -68.9, -62.6, -70, -61.5, -71.1, -61.1, -72.4, -60.8, -73.7,
        -62, -74.4, -63.3, -74.6, -64.4, -75.3, -65.9, -75.6, -67.2, -75.8, -68.4, -76,
        -70.6, -76.6, -72.2, -76.7, -74, -76.6, -75.6, -76.7, -76.9, -77.1, -74.8, -78.2,
        -76.5, -78.1, -78, -79.2, -76.6, -79.9, -75.4, -80.3, -73.2, -80.4, -71.4, -80.7,
        -70, -81, -68.2, -81.3, -65.7, -81.5, -63.3, -81.7, -61.6, -82, -59.7, -82.4,
        -58.2, -83.2, -57, -82.9, -55.4, -82.6, -53.6, -82.3, -51.5, -82, -49.8, -81.7,
        -47.3, -81.7, -44.8, -81.8, -42.2, -81.7, -40.8, -81.4, -38.2, -81.3, -36.3, -81.1,
        -34.4, -80.9, -32.3, -80.8, -30.1, -80.6, -28.5, -80.3, -29.7, -79.3, -31.6, -79.3,
        -33.7, -79.5, -35.6, -79.5, -35.3, -78.1, -33.9, -77.9, -32.2, -77.7, -31, -77.4,
        -28.9, -76.7, -27.5, -76.5, -25.5, -76.3, -23.9, -76.2, -22.5, -76.1, -21.2, -75.9,
        -18.9, -75.4, -17.5, -75.1, -16.5, -73.9, -15.4, -73.1, -13.3, -72.7, -11.5, -72,
        -10.3, -71.3, -8.6, -71.7, -7.4, -71.3, -5.8, -71, -4.3, -71.5, -3, -71.3,
        -0.7, -71.2, 0.9, -71.3, 3, -71, 5.2, -70.6, 7.1, -70.2, 8.5, -70.1,
        10.2, -70.5, 12, -70.6, 13.4, -70, 15.1, -70.4, 17, -69.9, 19.3, -69.9,
        21.5, -70.1, 22.6, -70.7, 24.8, -70.5, 27.1, -70.5, 29.2, -70.2, 31, -69.8,
        32.8, -69.4, 33.9, -68.5, 35.3, -69, 37.2, -69.2, 38.6, -69.8, 40, -69.1,
        42, -68.6, 44.1, -68.3, 45.7, -67.8, 47.4, -67.7, 49, -67.1, 50.8, -66.9,
        51.8, -66.2, 53.6, -65.9, 55.4, -65.9, 57.3, -66.7, 58.7, -67.3, 59.9, -67.4,
        61.4, -68, 63.2, -67.8, 65, -67.6, 66.9, -67.9, 68.9, -67.9, 69.6, -69.7,
        67.8, -70.3, 68.9, -71.1, 67.9, -71.9, 69.9, -72.3, 71.9, -71.3, 73.3, -70.4,
        74.5, -69.8, 76.6, -69.6, 78.4, -68.7, 80.1, -68.1, 81.5, -67.5, 82.8, -67.2,
        84.7, -67.2, 86.8, -67.2, 88.4, -66.5, 89.7, -67.2, 91.6, -67.1, 93.5, -67.2,
        95, -67.2, 96.7, -67.2, 98.7, -67.1, 100.4, -66.9, 101.6, -66.3, 103.5, -65.7,
        104.9, -66.3, 107.2, -67, 109.2, -66.8, 111.1, -66.4, 112.9, -66.1, 114.4, -66.1,
        115.6, -66.7, 117.4, -66.9, 118.6, -67.2, 120.9, -67.2, 122.3, -66.6, 124.1, -66.6,
        126.1, -66.6, 127.9, -66.7, 129.7, -66.6, 131.8, -66.4, 133.9, -66.3, 135.7, -65.6,
        136.6, -66.8, 138.6, -66.9, 140.8, -66.8, 143.1, -66.8, 145.5, -66.9, 146.6, -67.9,
        148.8, -68.4, 150.1, -68.6, 151.5, -68.7, 153.6, -68.9, 155.2, -68.8, 156.8, -69.4,
        159.2, -69.6, 160.8, -70.2, 162.7, -70.7, 164.9, -70.8, 167.3, -70.8, 169.5, -71.2,
        170.6, -72.4, 169.3, -73.7, 167.4, -74.2, 166.1, -74.4, 165, -75.1, 163.8, -75.9,
        163.5, -77.1, 164.7, -78.2, 167, -78.8, 165.2, -78.9, 163.7, -79.1, 161.8, -79.2,
        160.7, -80.2, 159.8, -80.9, 161.1, -81.3, 162.5, -82.1, 163.7, -82.4, 165.1, -82.7,
        166.6, -83, 169.4, -83.8, 173.2, -84.4, 176, -84.2, 178.3, -84.5, 180, -84.7,
        180, -90, -180, -90, -179.1, -84.1, -177.1, -84.4, -175.8, -84.1, -174.4, -84.5,
        -172.9, -84.1, -170, -83.9, -168.5, -84.2, -167, -84.6, -164.2, -84.8, -161.9, -85.1,
        -158.1, -85.4, -155.2, -85.1, -150.9, -85.3, -148.5, -85.6, -145.9, -85.3, -142.9, -84.6,
        -146.8, -84.5, -150.9, -83.9, -153.4, -83.2, -152.9, -82, -155.3, -81.4, -156.8, -81.1,
        -154.4, -81.2, -152.1, -81, -150.6, -81.3, -148.9, -81, -146.8, -79.9, -148.1, -79.7,
        -149.5, -79.4, -151.6, -79.3, -153.4, -79.2, -156, -78.7, -157.3, -78.4, -158.4, -76.9,
        -157, -77.3, -155.3, -77.2, -152.9, -77.5, -151.3, -77.4, -150, -77.2, -147.6, -76.6,
        -146.2, -75.4, -144.3, -75.5, -141.6, -75.1, -140.2, -75.1, -138.9, -75, -136.4, -74.5,
        -135.2, -74.3, -133.7, -74.4, -132.3, -74.3, -130.9, -74.5, -129.6, -74.5, -128.2, -74.3,
        -126.9, -74.4, -125.4, -74.5, -124, -74.5, -122.6, -74.5, -121.1, -74.5, -118.7, -74.2,
        -117.5, -74, -116.2, -74.2, -113.9, -73.7, -112.9, -74.4, -111.3, -74.4, -110.1, -74.8,
        -107.6, -75.2, -106.1, -75.1, -104.9, -74.9, -103.4, -75, -102, -75.1, -100.1, -74.9,
        -101.3, -74.2, -102.5, -74.1, -102.9, -72.8, -101.6, -72.8, -99.1, -72.9, -97.7, -73.6,
        -96.3, -73.6, -95, -73.5, -93.7, -73.3, -91.4, -73.4, -89.2, -72.6, -87.3, -73.2,
        -85.2, -73.5, -83.9, -73.5, -82.7, -73.6, -80.7, -73.5, -79.3, -73.5, -77.9, -73.4,
        -76.2, -74, -74.9, -73.9, -72.8, -73.4, -71.6, -73.3, -70.2, -73.1, -68.9, -73,
        -67.1, -72, -67.9, -70.9, -68.5, -69.7, -67.6, -68.5, -67.7, -67.3, -66.7, -66.6,
        -65.4, -65.9, -64.2, -65.2, -63, -64.6, -61.4, -64.3, -59.9, -64, -58.6, -63.4,
        -57.2, -63.5,
    ),
    (
        -67.8, -53.9, -66.5, -54.5, -65.5, -55.2, -67.3, -55.3, -69.2, -55.5, -71, -55.1,
        -72.3, -54.5, -73.8, -53, -72.4, -53.7, -71.1, -54.1, -70.3, -52.9, -68.6, -52.6,
    ),
    (-58.1, -51.9, -59.9, -51.9, -61.2, -51.9, -60, -51.3),
    (145.4, -40.8, 146.9, -41, 148.3, -40.9, 147.6, -42.9, 146, -43.5, 145.3, -42),
    (
        174, -40.9, 173.9, -42.2, 173.1, -43.9, 171.5, -44.2, 170.6, -45.9, 169.3, -46.6,
        167.8, -46.3, 167, -45.1, 168.3, -44.1, 169.7, -43.6, 171.1, -42.5, 171.9, -41.5,
    ),
    (
        174.6, -36.2, 175.8, -36.8, 176.8, -37.9, 178.5, -37.7, 178, -39.2, 176.9, -40.1,
        176, -41.3, 174.7, -41.3, 174.9, -39.9, 173.9, -39.1, 174.7, -38, 174.3, -36.5,
        173.6, -35,
    ),
    (166.7, -22.4, 165.5, -21.7, 164.5, -20.1, 165.8, -21.1),
    (
        50.1, -13.6, 50.5, -15.2, 49.9, -16.5, 49.4, -18, 49, -19.1, 48.5, -20.5,
        47.9, -22.4, 47.5, -23.8, 46.3, -25.2, 44.8, -25.3, 43.8, -24.5, 43.3, -22.8,
        43.4, -21.3, 44.4, -20.1, 44, -18.3, 44.3, -16.9, 45.5, -16, 46.9, -15.2,
        48.3, -13.8, 49.5, -12.5,
    ),
    (
        143.9, -14.5, 145.4, -15, 145.5, -16.3, 146.2, -17.8, 146.4, -19, 148.2, -20,
        149.3, -21.3, 150.7, -22.4, 151.6, -24.1, 152.9, -25.3, 153.2, -26.6, 153.6, -28.1,
        153.3, -29.5, 153.1, -30.9, 152.5, -32.6, 151.3, -33.8, 150.7, -35.2, 150.1, -36.4,
        149.4, -37.8, 147.4, -38.2, 146.3, -39, 145, -37.9, 143.6, -38.8, 141.6, -38.3,
        140, -37.4, 139.6, -36.1, 138.1, -35.6, 138.2, -34.4, 136.8, -35.3, 137, -33.8,
        136, -34.9, 135.2, -33.9, 134.3, -32.6, 133, -32, 131.3, -31.5, 129.5, -31.6,
        127.1, -32.3, 125.1, -32.7, 123.7, -33.9, 122.2, -34, 120.6, -33.9, 119.3, -34.5,
        118, -35.1, 116.6, -35, 115, -34.2, 115.7, -32.9, 115.7, -31.6, 115, -29.5,
        114.2, -28.1, 114.2, -26.3, 113.7, -25, 113.5, -23.8, 114.2, -22.5, 115.5, -21.5,
        116.7, -20.7, 118.2, -20.4, 119.8, -20, 121.4, -19.2, 122.3, -17.8, 123.4, -17.3,
        124.3, -16.3, 125.2, -14.7, 126.6, -14, 127.8, -14.3, 129.4, -14.4, 130.2, -13.1,
        131.7, -12.3, 132.4, -11.1, 133.6, -11.8, 135.3, -12.2, 137, -12.4, 136, -13.3,
        135.4, -14.7, 136.3, -15.6, 137.6, -16.2, 139.1, -17.1, 140.2, -17.7, 141.3, -16.4,
        141.7, -15, 141.5, -13.7, 141.7, -12.4, 142.8, -11.2, 143.2, -12.3,
    ),
    (124, -9.3, 125.9, -8.4, 127.3, -8.4, 125.9, -9.1),
    (122.8, -8.6, 121.3, -8.9, 119.9, -8.4, 121.3, -8.5),
    (
        108.6, -6.8, 110.8, -6.5, 113, -7.6, 114.5, -7.8, 115.7, -8.4, 114.6, -8.8,
        112.6, -8.4, 110.6, -8.1, 108.3, -7.8, 106.5, -7.4, 106.1, -5.9, 107.3, -6,
    ),
    (151.3, -5.8, 149.7, -6.3, 148.4, -5.4, 149.8, -5.5, 151.1, -5.1, 152.3, -4.3),
    (152.8, -4.8, 152, -3.5, 150.9, -2.5, 152.2, -3.2),
    (
        130.5, -1, 132.4, -0.4, 134.1, -1.2, 135.5, -3.4, 136.3, -2.3, 137.4, -1.7,
        139.2, -2.1, 141, -2.6, 142.7, -3.3, 145.3, -4.4, 146, -5.5, 147, -6.7,
        148.1, -8, 149.3, -9.5, 150.7, -10.6, 148.9, -10.3, 147.1, -9.5, 146, -8.1,
        144.7, -7.6, 143.3, -8.2, 142.6, -9.3, 141, -9.1, 140.1, -8.3, 138.9, -8.4,
        137.6, -8.4, 138.7, -7.3, 137.9, -5.4, 135.2, -4.5, 132.8, -3.7, 132, -2.8,
        133.7, -2.2, 131.8, -1.6,
    ),
    (
        121.5, -1, 122.8, -1, 121.5, -1.9, 122.3, -3.5, 122.2, -5.3, 121.6, -4.2,
        121, -2.6, 120.4, -4.1, 119.8, -5.7, 119.7, -4.5, 118.8, -2.8, 119.3, -1.4,
        120, 0.6, 121.7, 1, 124.1, 0.9, 125.2, 1.4, 124.4, 0.4, 122.7, 0.4,
        121.1, 0.4, 120, -0.5,
    ),
    (128.7, 1.1, 127.7, -0.3, 127.4, 1, 127.9, 2.2),
    (
        104.4, -1, 104.9, -2.3, 106.1, -3.1, 105.9, -4.3, 105.8, -5.9, 103.9, -5,
        102.2, -3.6, 100.9, -2.1, 100.1, -0.7, 99, 1, 97.7, 2.5, 96.4, 3.9,
        95.9, 5.4, 97.5, 5.2, 98.4, 4.3, 99.7, 3.2, 100.6, 2.1, 102.5, 1.4,
        103.8, 0,
    ),
    (
        117.8, 0.8, 117.5, -0.8, 116.5, -2.5, 116, -3.7, 114.5, -3.5, 113.3, -3.1,
        111.7, -3, 110.2, -2.9, 109.6, -1.3, 109, 0.4, 109.7, 2, 111.2, 1.9,
        111.8, 2.9, 113.7, 3.9, 114.6, 4.9, 116.2, 6.1, 117.1, 6.9, 118.3, 5.7,
        118.6, 4.5, 117.3, 3.2,
    ),
    (
        126.4, 8.4, 126.5, 7.2, 125.4, 6.8, 125.4, 5.6, 124.2, 6.2, 123.3, 7.4,
        121.9, 7.2, 122.9, 8.3, 124.6, 8.5, 125.4, 9.8,
    ),
    (81.2, 6.2, 79.9, 6.8, 79.7, 8.2, 80.8, 9.3, 81.8, 7.5),
    (118.5, 9.3, 117.2, 8.4, 118.4, 9.7, 119.7, 10.6),
    (121.9, 11.9, 123.1, 11.2, 122, 10.4),
    (125.8, 11, 124.8, 10.1, 124.9, 11.4, 124.3, 12.6),
    (
        122.2, 17.8, 122.3, 16.3, 121.5, 15.1, 122.7, 14.3, 123.3, 13, 122, 13.8,
        120.6, 14.4, 120.3, 16, 120.4, 17.6,
    ),
    (
        -71.6, 19.9, -70, 19.6, -69.2, 18.4, -70.5, 18.2, -71.7, 17.8, -72.8, 18.1,
        -74.4, 18.7, -72.3, 18.7,
    ),
    (110.3, 18.7, 108.7, 18.5, 109.1, 19.8, 111, 19.7),
    (
        -79.7, 22.8, -78.3, 22.5, -77.1, 21.7, -75.6, 21, -75, 19.9, -76.3, 20,
        -78.1, 20.7, -79.3, 21.6, -80.5, 22, -82.8, 22.7, -84.4, 22.2, -83.3, 23,
        -81.4, 23.1,
    ),
    (120.7, 22, 120.1, 23.6, 121.8, 24.4),
    (133.8, 33.5, 132.4, 33, 132.9, 34.1),
    (23.7, 35.7, 25, 35.4, 26.2, 35, 24.7, 35.1),
    (15.5, 38.2, 15.1, 36.6, 13.8, 37.1, 12.4, 37.6, 13.7, 38),
    (9.8, 40.5, 9.7, 39.2, 8.4, 39.2),
    (
        140.6, 36.3, 140.3, 35.1, 139, 34.7, 137.2, 34.6, 135.8, 33.5, 135.1, 34.6,
        133.3, 34.4, 131, 33.9, 132, 33.1, 130.7, 31, 130.4, 32.3, 129.4, 33.3,
        130.9, 34.2, 132.6, 35.4, 135.7, 35.5, 137.4, 36.8, 139.4, 38.2, 139.9, 40.6,
        141.4, 41.4, 141.9, 39.2,
    ),
    (
        143.9, 44.2, 145.5, 43.3, 144.1, 43, 143.2, 42, 141.6, 42.7, 141.1, 41.6,
        139.8, 42.6, 141.4, 43.4, 142, 45.6,
    ),
    (-62.3, 49.1, -64.2, 50, -62.9, 49.7),
    (-124, 48.4, -126, 49.2, -127, 49.8, -128.4, 50.8, -126.7, 50.4, -124.9, 49.5),
    (
        -56.1, 50.2, -54.9, 49.3, -53.5, 49.2, -53, 48.2, -53.1, 46.7, -54, 47.6,
        -55.3, 47.4, -57.3, 47.6, -59.4, 47.9, -58.4, 49.1, -57.4, 50.7,
    ),
    (
        143.6, 50.7, 144.7, 49, 143.2, 49.3, 142.6, 47.9, 143.5, 46.1, 142.1, 46,
        142, 47.8, 142.1, 49.6, 141.6, 51.9, 141.7, 53.3, 142.7, 54.4, 143.3, 52.7,
    ),
    (-6.8, 52.3, -8.6, 51.7, -10, 51.8, -9.7, 53.9, -8.3, 54.7, -6.7, 55.2, -6.2, 53.9),
    (
        -3, 58.6, -4.1, 57.6, -2, 57.7, -2.1, 55.9, -0.4, 54.5, 0.5, 52.9,
        1.6, 52.1, 0.6, 50.8, -0.8, 50.8, -3, 50.7, -4.5, 50.3, -5.8, 50.2,
        -4.2, 52.3, -4.6, 53.5, -3.1, 53.4, -3.6, 54.6, -4.7, 55.5, -5.6, 56.3,
        -5.8, 57.8, -4.2, 58.6,
    ),
    (-171.7, 63.8, -170.5, 63.7, -168.8, 63.2, -170.3, 63.2),
    (
        -85.2, 65.7, -83.9, 65.1, -81.6, 64.5, -81, 63.4, -82.5, 63.7, -84.1, 63.6,
        -85.9, 63.6, -87.2, 63.5, -86.2, 64.8,
    ),
    (
        -14.7, 65.8, -13.6, 65.1, -14.9, 64.4, -18.7, 63.5, -20, 63.6, -21.8, 64.4,
        -24, 64.9, -22.2, 65.4, -23.7, 66.3, -22.1, 66.4, -20.6, 65.7, -19.1, 66.3,
        -17.8, 66, -16.2, 66.5,
    ),
    (
        -174.6, 67.1, -171.9, 66.9, -170.9, 65.5, -172.5, 65.4, -173, 64.3, -174.7, 64.6,
        -176, 64.9, -177.2, 65.5, -178.7, 66.1, -180, 65, -180, 69, -177.6, 68.2,
    ),
    (-96.3, 68.8, -97.6, 69.1, -98.9, 69.7, -97.2, 69.9),
)


def _pairs(flat):
    coordinates = iter(flat)
    return tuple((float(lon), float(lat)) for lon, lat in zip(coordinates, coordinates))


def polygons():
    """Return the outlines as tuples of ``(longitude, latitude)`` points, in drawing order."""
    return tuple(_pairs(outline) for outline in _OUTLINES)