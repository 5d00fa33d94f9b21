"""Coastline outlines, second part: the Americas, the Arctic islands, Eurasia with Africa, and Greenland.

Each outline is a sequence of longitude/latitude degree pairs, kept in drawing order.
"""

from __future__ import annotations

_OUTLINES = (
    (
        -46.6, -1, -44.6, -2.7, -43.4, -2.4, -41.5, -2.9, -40, -2.9, -38.5, -3.7,
        -36.5, -5.1, -35.2, -5.5, -34.7, -7.3, -35.6, -9.6, -37, -11, -37.7, -12.2,
        -39, -13.8, -38.9, -15.7, -39.6, -18.3, -39.8, -19.6, -40.8, -20.9, -41.8, -22.4,
        -43.1, -23, -44.6, -23.4, -46.5, -24.1, -47.6, -24.9, -48.6, -26.6, -48.7, -28.2,
        -49.6, -29.2, -51.6, -31.8, -52.7, -33.2, -53.8, -34.4, -55.7, -34.8, -57.1, -34.4,
        -58.5, -34.4, -57.2, -35.3, -56.8, -36.9, -57.7, -38.2, -59.2, -38.7, -62.1, -39.4,
        -62.1, -40.7, -63.8, -41.2, -65.1, -41.1, -64.4, -42.9, -65.3, -44.5, -66.5, -45,
        -67.6, -46.3, -66.6, -47, -66, -48.1, -67.2, -48.7, -67.8, -49.9, -69.1, -50.7,
        -68.6, -52.3, -69.9, -52.5, -71, -53.8, -72.6, -53.5, -73.7, -52.8, -75.3, -51.6,
        -75.5, -50.4, -75.2, -47.7, -74.1, -46.9, -75.6, -46.6, -74.7, -45.8, -73.2, -44.5,
        -73.4, -42.1, -74.3, -43.2, -74, -41.8, -73.7, -39.9, -73.5, -38.3, -73.2, -37.1,
        -72.6, -35.5, -71.9, -33.9, -71.4, -32.4, -71.4, -30.1, -71.5, -28.9, -70.9, -27.6,
        -70.7, -25.7, -70.4, -23.6, -70.1, -21.4, -70.2, -19.8, -70.4, -18.3, -71.5, -17.4,
        -73.4, -16.4, -75.2, -15.3, -76.3, -13.5, -77.1, -12.2, -78.1, -10.4, -79, -8.4,
        -79.8, -7.2, -80.9, -5.7, -81.1, -4, -79.8, -2.7, -81, -2.2, -80.6, -1,
        -80.1, 0.8, -79, 1.7, -77.9, 2.7, -77.5, 4.1, -77.3, 5.8, -78.2, 7.5,
        -79.1, 9, -80.2, 8.3, -80.9, 7.2, -81.7, 8.1, -83, 8.2, -83.9, 9.3,
        -85.3, 9.8, -85.7, 11.1, -86.7, 12.1, -87.9, 13.1, -89.3, 13.5, -90.6, 13.9,
        -92.2, 14.5, -93.9, 15.9, -95.3, 16.1, -96.6, 15.7, -98, 16.1, -99.7, 16.7,
        -100.8, 17.2, -102.5, 18, -103.9, 18.7, -105.5, 19.9, -105.3, 21.4, -106, 22.8,
        -106.9, 23.8, -107.9, 24.5, -109.3, 25.6, -109.8, 26.7, -111.2, 27.9, -112.3, 29.3,
        -113.1, 31.2, -114.8, 30.9, -114.3, 29.8, -113.3, 28.8, -112.5, 27.5, -111.6, 26.7,
        -111, 25.3, -110.2, 24.3, -110, 22.8, -110.9, 24, -112.2, 24.7, -112.8, 26.3,
        -113.8, 26.9, -115.1, 27.7, -114.2, 28.6, -115.5, 29.6, -116.3, 30.8, -117.1, 32.5,
        -117.9, 33.6, -119.4, 34.3, -120.7, 35.2, -121.7, 36.2, -122.5, 37.8, -123.7, 39,
        -124.4, 40.3, -124.2, 42, -124.1, 43.7, -123.9, 45.5, -124.1, 46.9, -124.6, 48.4,
        -122.3, 47.4, -123, 49, -125.6, 50.4, -127.4, 50.8, -127.9, 52.3, -129.3, 53.6,
        -131.1, 55.2, -132.3, 56.4, -133.5, 57.2, -135, 58.2, -136.6, 58.2, -137.8, 58.5,
        -140.8, 59.7, -142.6, 60.1, -144, 60, -145.9, 60.5, -147.1, 60.9, -148.6, 59.9,
        -150.6, 59.4, -151.9, 59.7, -150.6, 61.3, -152.6, 60.1, -153.3, 58.9, -155.3, 57.7,
        -156.6, 57, -158.4, 56, -160.3, 55.6, -162.2, 55, -163.8, 55, -161.8, 55.9,
        -160.1, 56.4, -157.7, 57.6, -157, 58.9, -159.1, 58.4, -160.4, 59.1, -162, 58.7,
        -162.5, 60, -163.8, 59.8, -165.3, 60.5, -165.7, 62.1, -164.6, 63.1, -163.1, 63.1,
        -161.5, 63.5, -161.4, 64.8, -163.5, 64.6, -165, 64.4, -166.8, 65.1, -168.1, 65.7,
        -166.7, 66.1, -163.8, 66.1, -162.5, 66.7, -164.4, 67.6, -166.2, 68.9, -164.4, 68.9,
        -162.9, 69.9, -160.9, 70.4, -158.1, 70.8, -156.6, 71.4, -153.9, 70.9, -152.3, 70.6,
        -149.7, 70.5, -147.6, 70.2, -144.9, 70, -143.6, 70.2, -141, 69.7, -139.1, 69.5,
        -137.5, 69, -135.6, 69.3, -134.4, 69.6, -132.9, 69.5, -131.4, 69.9, -129.1, 69.8,
        -127.4, 70.4, -125.8, 69.5, -124.3, 69.4, -122.7, 69.9, -121.5, 69.8, -119.9, 69.4,
        -117.6, 69, -115.2, 68.9, -113.9, 68.4, -115.3, 67.9, -113.5, 67.7, -109.9, 68,
        -108.9, 67.4, -108.2, 68.7, -107, 68.7, -105.3, 68.6, -103.2, 68.1, -101.5, 67.6,
        -99.9, 67.8, -97.7, 68.6, -95.5, 68.1, -94.2, 69.1, -95.3, 69.7, -96.4, 71.2,
        -95.2, 71.9, -92.9, 71.3, -92.4, 69.7, -90.6, 68.5, -89.2, 69.3, -88, 68.6,
        -87.4, 67.2, -86.3, 67.9, -85.5, 69.9, -84.1, 69.8, -82.6, 69.7, -81.2, 68.7,
        -81.4, 67.1, -83.3, 66.4, -84.7, 66.3, -86.1, 66.1, -87.3, 64.8, -88.5, 64.1,
        -90.7, 63.6, -91.9, 62.8, -93.2, 62, -94.2, 60.9, -94.7, 58.9, -93.2, 58.8,
        -92.3, 57.1, -90.9, 57.3, -89, 56.9, -87.3, 56, -85, 55.3, -82.3, 55.1,
        -82.1, 53.3, -81.4, 52.2, -79.9, 51.2, -78.6, 52.6, -79.8, 54.7, -78.2, 55.1,
        -76.5, 56.5, -77.3, 58.1, -78.5, 58.8, -77.8, 60.8, -77.4, 62.6, -74.7, 62.2,
        -72.9, 62.1, -71.4, 61.1, -69.6, 60.2, -69.3, 59, -67.6, 58.2, -66.2, 58.8,
        -65.2, 59.9, -63.8, 59.4, -62.5, 58.2, -61.8, 56.3, -59.6, 55.2, -57.3, 54.6,
        -56.2, 53.6, -55.7, 52.1, -57.1, 51.4, -58.8, 51.1, -60, 50.2, -61.7, 50.1,
        -63.9, 50.3, -65.4, 50.3, -67.2, 49.5, -68.5, 49.1, -70.3, 47, -68.7, 48.3,
        -66.6, 49.1, -65.1, 48.1, -64.5, 46.2, -63.2, 45.7, -61.5, 45.9, -60.5, 47,
        -59.8, 45.9, -61, 45.3, -64.2, 44.3, -65.4, 43.5, -66.2, 44.5, -64.4, 45.3,
        -67, 44.8, -69.1, 44, -70.8, 42.9, -70.6, 41.5, -72.3, 41.3, -73.7, 40.9,
        -71.9, 40.9, -73.3, 40.6, -74.2, 39.7, -75.5, 39.5, -75.7, 37.9, -76.3, 39.2,
        -76.3, 37.9, -75.9, 36.6, -76.4, 34.8, -78.1, 33.9, -79.2, 33.2, -80.9, 32,
        -81.5, 30.7, -81, 29.2, -80.5, 28, -80.1, 25.8, -81.3, 25.6, -82.2, 26.7,
        -82.9, 27.9, -82.9, 29.1, -84.1, 30.1, -85.8, 30.2, -87.5, 30.3, -89.2, 30.3,
        -90.2, 29.1, -91.6, 29.7, -93.2, 29.8, -94.7, 29.5, -96.6, 28.3, -97.4, 27.4,
        -97.1, 25.9, -97.7, 24.3, -97.7, 21.9, -97.2, 20.6, -96.3, 19.3, -94.8, 18.6,
        -93.5, 18.4, -92, 18.7, -90.8, 19.3, -90.3, 21, -88.5, 21.5, -86.8, 20.8,
        -87.4, 19.5, -88.1, 18.3, -88.2, 17, -88.1, 15.7, -86.9, 15.8, -85.7, 16,
        -84.4, 15.8, -83.2, 14.9, -83.5, 13.6, -83.6, 12.3, -83.7, 10.9, -82.5, 9.6,
        -81.4, 8.8, -79.9, 9.3, -78.5, 9.4, -77.4, 8.7, -76.1, 9.3, -75.5, 10.6,
        -74.2, 11.3, -72.6, 11.7, -71.3, 11.8, -71.6, 10.4, -71.3, 9.1, -71.4, 11,
        -69.9, 12.2, -68.9, 11.4, -67.3, 10.5, -65.7, 10.2, -64.3, 10.6, -62.7, 10.4,
        -61.6, 9.9, -60.2, 8.6, -59.1, 8, -58.1, 6.8, -57.1, 6, -55, 6,
        -52.9, 5.4, -51.1, 3.7, -49.9, 1, -50.4, 0, -47.8, -0.6,
    ),
    (
        -114.7, 72.7, -112.4, 73, -111.1, 72.5, -109, 72.6, -108.2, 71.7, -107.5, 73.2,
        -105.4, 72.7, -104.5, 71, -102.8, 70.5, -101.1, 69.6, -102.4, 68.8, -104.2, 68.9,
        -107.1, 69.1, -109, 68.8, -112, 68.6, -113.9, 69, -115.2, 69.3, -116.7, 70.1,
        -115.1, 70.2, -113.7, 70.2, -112.4, 70.4, -114.4, 70.6, -116.5, 70.5, -118.4, 70.9,
        -116.1, 71.3, -117.7, 71.3, -119.4, 71.6, -117.9, 72.7,
    ),
    (-77.3, 72.9, -79.5, 72.7, -80.4, 73.8, -78.1, 73.7),
    (
        -85.8, 72.5, -84.9, 73.3, -82.3, 73.8, -80.7, 72.1, -77.8, 72.7, -75.6, 72.2,
        -74.1, 71.3, -72.2, 71.6, -71.2, 70.9, -67.9, 70.1, -67, 69.2, -68.8, 68.7,
        -66.4, 68.1, -64.9, 67.8, -63.4, 66.9, -62.2, 66.2, -63.9, 65, -65.1, 65.4,
        -66.7, 66.4, -68.1, 65.7, -67.1, 65.1, -65.3, 64.4, -65, 62.7, -66.3, 62.9,
        -68.8, 63.7, -67.4, 62.9, -66.2, 61.9, -68.9, 62.3, -71.9, 63.7, -73.4, 64.2,
        -74.8, 64.4, -77.9, 65.3, -76, 65.3, -73.9, 66.3, -73.3, 68.1, -74.8, 68.6,
        -76.2, 69.1, -78.2, 69.8, -79.5, 69.9, -81.3, 69.7, -84.9, 70, -87.1, 70.3,
        -88.5, 71.2, -90.2, 72.2, -88.4, 73.5,
    ),
    (
        -100.4, 73.8, -99.2, 73.6, -98.1, 73, -96.7, 71.7, -98.4, 71.3, -100, 71.7,
        -102.5, 72.8, -100.4, 72.7, -101.5, 73.4,
    ),
    (143.6, 73.2, 142.1, 73.2, 140.8, 73.8, 142.1, 73.9),
    (-93.2, 72.8, -95.4, 72.1, -96, 73.4, -94.5, 74.1, -92.4, 74.1, -90.5, 73.9, -92, 73),
    (
        -120.5, 71.4, -123.6, 71.3, -125.9, 71.9, -124.8, 73, -124.9, 74.3, -121.5, 74.4,
        -120.1, 74.2, -117.6, 74.2, -115.5, 73.5, -116.8, 73.2, -119.2, 72.5,
    ),
    (150.7, 75.1, 149.6, 74.7, 148, 74.8, 146.4, 75.5, 148.2, 75.3),
    (-94.2, 74.6, -96.3, 75.4, -94.9, 75.6),
    (144.3, 74.8, 140.6, 74.8, 139, 74.6, 137.5, 75.9, 138.8, 76.1, 141.5, 76.1),
    (
        -97.7, 76.3, -98.2, 75, -99.8, 74.9, -100.9, 75.6, -102.5, 75.6, -101.5, 76.3,
        -100, 76.6,
    ),
    (
        -107.8, 75.8, -106.3, 75, -109.7, 74.9, -112.2, 74.4, -113.9, 74.7, -111.8, 75.2,
        -116.3, 75, -117.7, 75.2, -115.4, 76.5, -112.6, 76.1, -110.8, 75.5, -109.1, 75.5,
        -109.6, 76.8,
    ),
    (
        56.9, 70.6, 53.4, 71.2, 51.5, 72, 52.4, 72.8, 53.5, 73.7, 55.6, 75.1,
        57.9, 75.6, 61.2, 76.3, 64.5, 76.4, 66.2, 76.8, 68.2, 76.2, 64.6, 75.7,
        61.6, 75.3, 58.5, 74.3, 57, 73.3, 55.6, 71.5,
    ),
    (
        -93.6, 76.8, -91, 76.1, -89.2, 75.6, -87.8, 75.6, -86.4, 75.5, -84.8, 75.7,
        -82.8, 75.8, -81.1, 75.7, -80.5, 74.7, -81.9, 74.4, -83.2, 74.6, -86.1, 74.4,
        -88.2, 74.4, -89.8, 74.5, -92.8, 75.4, -93.9, 76.3, -96.7, 77.2,
    ),
    (
        -116.3, 76.9, -118, 76.5, -119.9, 76.1, -121.5, 75.9, -122.9, 76.1, -121.2, 76.9,
        -119.1, 77.5, -117.6, 77.5,
    ),
    (
        -1, 49.3, 1.3, 50.1, 2.5, 51.1, 3.8, 51.6, 4.7, 53.1, 7.1, 53.7,
        8.6, 54.4, 8.1, 55.5, 8.3, 56.8, 9.4, 57.2, 10.6, 57.7, 10.4, 56.2,
        9.9, 55, 10.9, 54, 12.5, 54.5, 14.8, 54.1, 16.4, 54.5, 18.7, 54.4,
        19.9, 54.9, 21.3, 55.2, 21.1, 56.8, 22.5, 57.8, 24.1, 57, 24.4, 58.4,
        23.3, 59.2, 24.6, 59.5, 26.9, 59.4, 28.1, 60.5, 26.3, 60.4, 24.5, 60.1,
        22.9, 59.8, 21.3, 60.7, 21.1, 62.6, 22.4, 63.8, 25.3, 65.5, 23.9, 66,
        22.2, 65.7, 21.4, 64.4, 19.8, 63.6, 17.8, 62.7, 17.1, 61.3, 18.8, 60.1,
        16.8, 58.7, 15.9, 56.1, 14.1, 55.4, 12.6, 56.3, 11.8, 57.4, 10.4, 59.5,
        8.4, 58.3, 7, 58.1, 5.3, 59.7, 5.9, 62.6, 8.6, 63.5, 10.5, 64.5,
        12.4, 65.9, 14.8, 67.8, 16.4, 68.6, 19.2, 69.8, 21.4, 70.3, 23, 70.2,
        24.5, 71, 26.4, 71, 28.2, 71.2, 31.3, 70.5, 30, 70.2, 32.1, 69.9,
        33.8, 69.3, 36.5, 69.1, 40.3, 67.9, 41.1, 66.8, 40, 66.3, 38.4, 66,
        33.2, 66.6, 34.8, 65.9, 34.9, 64.4, 37, 63.8, 37.2, 65.1, 39.8, 65.5,
        42.1, 66.5, 43.9, 66.1, 43.7, 67.4, 43.5, 68.6, 46.3, 68.3, 46.3, 66.7,
        48.1, 67.5, 50.2, 68, 53.5, 68.2, 55.4, 68.4, 57.3, 68.5, 58.8, 68.9,
        59.9, 68.3, 60.6, 69.9, 63.5, 69.5, 64.9, 69.2, 69.2, 68.6, 67.3, 69.9,
        66.7, 71, 68.5, 71.9, 69.9, 73, 72.8, 72.2, 71.8, 71.4, 72.8, 70.4,
        72.6, 69, 73.2, 67.7, 72.4, 66.2, 73.9, 66.8, 75.1, 67.8, 74.9, 69,
        73.6, 69.6, 74.4, 70.6, 73.1, 71.4, 75.2, 72.9, 75.9, 71.9, 77.6, 72.3,
        79.7, 72.3, 81.5, 71.8, 80.5, 73.6, 82.3, 73.9, 84.7, 73.8, 86, 74.5,
        88.3, 75.1, 90.3, 75.6, 93.2, 76, 96.7, 75.9, 98.9, 76.4, 100.8, 76.4,
        102, 77.3, 104.4, 77.7, 106.1, 77.4, 104.7, 77.1, 107, 77, 108.2, 76.7,
        111.1, 76.7, 114.1, 75.8, 112.8, 75, 109.4, 74.2, 110.6, 74, 112.1, 73.8,
        114, 73.6, 115.6, 73.8, 119, 73.1, 123.3, 73.7, 125.4, 73.6, 127, 73.6,
        128.5, 72, 129.7, 71.2, 131.3, 70.8, 132.3, 71.8, 133.9, 71.4, 135.6, 71.7,
        138.2, 71.6, 139.1, 72.4, 140.5, 72.8, 150.4, 71.6, 153, 70.8, 157, 71,
        159, 70.9, 159.7, 69.7, 160.9, 69.4, 162.3, 69.6, 164.1, 69.7, 165.9, 69.5,
        167.8, 69.6, 169.6, 68.7, 170.5, 70.1, 173.6, 69.8, 175.7, 69.9, 178.6, 69.4,
        180, 69, 180, 65, 178.3, 64.1, 179.2, 62.3, 177.4, 62.5, 173.7, 61.7,
        172.2, 61, 170.3, 59.9, 168.9, 60.6, 166.3, 59.8, 164.9, 59.7, 163.2, 59.2,
        162, 58.2, 163.2, 57.6, 162.1, 56.1, 162.1, 54.9, 160, 53.2, 158.2, 51.9,
        156.4, 51.7, 156, 53.2, 155.4, 55.4, 155.9, 56.8, 156.8, 57.8, 158.4, 58.1,
        160.2, 59.3, 161.9, 60.3, 163.7, 61.1, 164.5, 62.6, 162.7, 61.6, 160.1, 60.5,
        159.3, 61.8, 156.7, 61.4, 155, 59.1, 152.8, 58.9, 151.3, 59.5, 149.8, 59.7,
        148.5, 59.2, 145.5, 59.3, 142.2, 59, 139, 57.1, 135.1, 54.7, 136.7, 54.6,
        138.2, 53.8, 139.9, 54.2, 141.4, 52.2, 140.5, 50, 140.1, 48.4, 138.2, 46.3,
        136.9, 45.1, 134.9, 43.4, 133.5, 42.8, 132.3, 43.3, 130.8, 42.2, 129.7, 41.6,
        129, 40.5, 127.5, 39.8, 128.3, 38.6, 129.2, 37.4, 129.5, 35.6, 128.2, 34.9,
        126.5, 34.4, 126.6, 35.7, 126.2, 37.7, 124.7, 38.1, 125.4, 39.4, 124.3, 39.9,
        122.9, 39.6, 121.6, 39.4, 122.2, 40.4, 120.8, 40.6, 119, 39.3, 118.1, 38.1,
        119.7, 37.2, 120.8, 37.9, 122.5, 36.9, 120.6, 36.1, 119.2, 34.9, 120.6, 33.4,
        121.9, 31.7, 122.1, 29.8, 121.1, 28.1, 120.4, 27.1, 119.6, 25.7, 118.7, 24.5,
        117.3, 23.6, 114.8, 22.7, 113.2, 22.1, 111.8, 21.6, 110.4, 20.3, 109.9, 21.4,
        108.1, 21.6, 106.7, 20.7, 105.7, 19.1, 106.4, 18, 107.4, 16.7, 108.9, 15.3,
        109.3, 13.4, 108.4, 11, 106.4, 9.5, 105.2, 8.6, 105.1, 9.9, 103.5, 10.6,
        102.6, 12.2, 101, 13.4, 100, 12.3, 99.5, 10.8, 99.9, 9.2, 100.5, 7.4,
        101.6, 6.7, 103, 5.5, 103.3, 3.7, 103.9, 2.5, 103.5, 1.2, 102.6, 2,
        101.4, 2.8, 100.7, 3.9, 100.2, 5.3, 99.7, 6.8, 99, 7.9, 98.3, 9,
        98.5, 10.7, 98.4, 12, 98.1, 13.6, 97.8, 14.8, 96.5, 16.4, 95.4, 15.7,
        94.2, 16, 94.3, 18.2, 93.7, 19.7, 92.4, 20.7, 91.8, 22.2, 90.6, 22.4,
        89.4, 22, 88.2, 21.7, 87, 21.5, 86.5, 20.2, 85.1, 19.5, 83.2, 17.7,
        81.7, 16.3, 80, 15.1, 80.2, 13.8, 79.9, 12.1, 79.3, 10.3, 78.3, 8.9,
        77.5, 8, 76.6, 8.9, 75.7, 11.3, 74.9, 12.7, 74.4, 14.6, 73.5, 16,
        73.1, 17.9, 72.8, 19.2, 72.6, 21.4, 70.5, 20.9, 69.3, 22.8, 67.4, 23.9,
        66.4, 25.4, 64.5, 25.2, 62.9, 25.2, 61.5, 25.1, 59.6, 25.4, 57.4, 25.7,
        56.5, 27.1, 54.7, 26.5, 53.5, 26.8, 52.5, 27.6, 50.9, 28.8, 49.6, 30,
        48, 30, 48.4, 28.6, 49.5, 27.1, 50.1, 25.9, 50.8, 24.8, 51.3, 26.1,
        51.4, 24.6, 52.6, 24.2, 54, 24.1, 55.4, 25.4, 56.5, 26.3, 56.4, 24.9,
        57.4, 23.9, 58.7, 23.6, 59.8, 22.3, 58.9, 21.1, 57.8, 20.2, 57.2, 18.9,
        55.7, 17.9, 54.8, 17, 53.6, 16.7, 52.2, 15.9, 51.2, 15.2, 48.7, 14,
        47.4, 13.6, 45.6, 13.3, 44.5, 12.7, 43.2, 13.2, 42.9, 14.8, 42.8, 16.3,
        42.3, 17.5, 41.2, 18.7, 40.2, 20.2, 39.1, 21.3, 39.1, 22.6, 37.5, 24.3,
        36.6, 25.8, 35.6, 27.4, 34.6, 28.1, 34.9, 29.5, 34.4, 28.3, 33.1, 28.4,
        32.3, 29.8, 33.3, 27.7, 34.1, 26.1, 34.8, 25, 35.5, 23.1, 36.7, 22.2,
        37.2, 21, 37.1, 19.8, 38.4, 18, 39, 16.8, 39.8, 15.4, 41.7, 13.9,
        43.1, 12.7, 43.5, 11.3, 44.6, 10.4, 46.6, 10.8, 48.4, 11.4, 49.7, 11.6,
        51.1, 12, 51, 10.6, 50.6, 9.2, 50.1, 8.1, 49.5, 6.8, 48.6, 5.3,
        47.7, 4.2, 46.6, 2.9, 45.6, 2, 44.1, 1.1, 43.1, 0.3, 42, -1,
        40.9, -2.1, 40.1, -3.3, 39.2, -4.7, 38.8, -6.5, 39.2, -7.7, 39.5, -9.1,
        40.5, -10.8, 40.6, -12.6, 40.8, -14.7, 40.1, -16.1, 38.5, -17.1, 37.4, -17.6,
        35.9, -18.8, 34.7, -20.5, 35.6, -22.1, 35.5, -24.1, 34.2, -24.8, 32.9, -26.2,
        32.6, -27.5, 32.2, -28.8, 30.9, -29.9, 30.1, -31.1, 28.9, -32.2, 27.5, -33.2,
        25.9, -33.7, 24.7, -34, 23, -33.9, 21.5, -34.3, 20.1, -34.8, 18.9, -34.4,
        18.3, -33.3, 18.2, -31.7, 17.1, -29.9, 16.3, -28.6, 15.2, -27.1, 14.7, -25.4,
        14.4, -23.9, 14.3, -22.1, 13.4, -20.9, 12.6, -19, 11.7, -17.3, 11.8, -15.8,
        12.2, -14.4, 12.7, -13.1, 13.6, -12, 13.4, -10.4, 12.9, -9, 12.9, -7.6,
        12.2, -6.3, 11.9, -5, 11.1, -4, 9.4, -2.1, 9, -0.5, 9.5, 1,
        9.6, 2.3, 9.4, 3.7, 8.5, 4.8, 6.7, 4.2, 5.4, 4.9, 4.3, 6.3,
        2.7, 6.3, 1.1, 5.9, -0.5, 5.3, -2, 4.7, -3.3, 5, -4.6, 5.2,
        -6.5, 4.7, -8, 4.4, -9.9, 5.6, -11.7, 6.9, -13.1, 8.2, -13.7, 9.5,
        -14.7, 10.7, -15.7, 11.5, -16.7, 12.4, -16.7, 13.6, -17.6, 14.7, -16.7, 15.6,
        -16.3, 17.2, -16.3, 19.1, -16.5, 20.6, -17, 21.9, -16.3, 23, -15.4, 24.4,
        -14.8, 25.6, -13.8, 26.6, -12.6, 28, -10.9, 28.8, -9.6, 29.9, -9.4, 32,
        -8.7, 33.2, -6.9, 34.1, -6.2, 35.1, -5.2, 35.8, -3.6, 35.4, -2.2, 35.2,
        0, 35.9, 1.5, 36.6, 3.2, 36.8, 4.8, 36.9, 6.3, 37.1, 7.7, 36.9,
        9.5, 37.4, 11.1, 36.9, 10.9, 35.7, 10.3, 33.8, 11.5, 33.1, 12.7, 32.8,
        13.9, 32.7, 15.2, 32.3, 16.6, 31.2, 19.1, 30.3, 20.1, 31, 20.1, 32.2,
        21.5, 32.8, 22.9, 32.6, 23.9, 32, 25.2, 31.6, 26.5, 31.6, 28.5, 31,
        29.7, 31.2, 31, 31.6, 32.2, 31.3, 33.8, 31, 34.8, 32.1, 35.5, 33.9,
        35.9, 35.4, 35.6, 36.6, 34, 36.2, 31.7, 36.6, 29.7, 36.1, 27.6, 36.7,
        26.3, 38.2, 26.2, 39.5, 27.3, 40.4, 29.2, 41.2, 31.1, 41.1, 33.5, 42,
        35.2, 42, 36.9, 41.3, 38.3, 40.9, 40.4, 41, 41.5, 42.6, 40, 43.4,
        38.7, 44.3, 37.4, 45.4, 37.7, 46.6, 39.1, 47.3, 37.4, 47, 35.8, 46.6,
        35, 45.7, 36.5, 45.5, 35.2, 44.9, 33.3, 44.6, 33.3, 46.1, 31.7, 46.7,
        30.4, 46, 28.8, 44.9, 28, 43.3, 28, 42, 29, 41.3, 27.6, 41,
        26.4, 40.2, 24.9, 40.9, 23.9, 40, 22.6, 40.3, 23.4, 39.2, 23.1, 37.9,
        23.2, 36.4, 21.7, 36.8, 21.1, 38.3, 20, 39.7, 19.3, 40.7, 18.9, 42.3,
        17.5, 42.9, 16, 43.5, 14.9, 44.7, 13.9, 45.6, 12.3, 45.4, 12.6, 44.1,
        14, 42.8, 15.9, 41.5, 17.5, 40.9, 18.3, 39.8, 16.9, 40.4, 17.1, 38.9,
        15.7, 38.2, 15.7, 39.5, 14.7, 40.6, 13.6, 41.2, 12.1, 41.7, 10.5, 42.9,
        9.7, 44, 7.9, 43.8, 6.5, 43.1, 4.6, 43.4, 3, 42.5, 2.1, 41.2,
        0, 40.1, 0, 38.7, -0.7, 37.6, -2.1, 36.7, -4.4, 36.7, -5.4, 35.9,
        -6.5, 36.9, -7.9, 36.8, -8.7, 37.7, -9.5, 38.7, -9, 40.2, -9, 41.9,
        -9.4, 43, -8, 43.7, -6.8, 43.6, -5.4, 43.6, -3.5, 43.5, -1.4, 44,
        -1.2, 46, -3, 47.6, -4.6, 48.7, -3.3, 48.9,
    ),
    (24.7, 77.9, 22.5, 77.4, 20.8, 78.3, 23.3, 78.1),
    (-109.7, 78.6, -110.9, 78.4, -112.5, 78.6, -111, 78.8),
    (-95.8, 78.1, -97.3, 77.9, -98.6, 78.9, -97.3, 78.8),
    (-99.7, 77.9, -101.3, 78, -102.9, 78.3, -104.2, 78.7, -105.5, 79.3, -103.5, 79.2),
    (105.1, 78.3, 99.4, 77.9, 101.3, 79.2, 102.8, 79.3),
    (
        18.3, 79.7, 21.5, 79, 18.5, 77.8, 17.1, 76.8, 15.9, 76.8, 14.7, 77.7,
        13.2, 78, 10.4, 79.7, 13.7, 79.7, 15.5, 80, 17, 80.1,
    ),
    (25.4, 80.4, 27.4, 80.1, 25.9, 79.5, 23, 79.4, 19.9, 79.8, 17.4, 80.3, 20.5, 80.6, 22.9, 80.7),
    (51.1, 80.5, 48.8, 80.2, 47.1, 80.6, 44.8, 80.6, 46.8, 80.8, 49.1, 80.8),
    (99.9, 78.9, 97.8, 78.8, 95, 79, 92.5, 80.1, 91.2, 80.3, 93.8, 81, 95.9, 81.3, 97.9, 80.7),
    (
        -87, 79.7, -85.8, 79.3, -87.2, 79, -89, 78.3, -90.8, 78.2, -93.1, 79.4,
        -95, 79.4, -96, 80.6, -94.7, 81.2, -92.4, 81.3, -91.1, 80.7, -89.5, 80.5,
    ),
    (
        -68.5, 83.1, -65.8, 83, -63.7, 82.9, -61.9, 82.4, -64.3, 81.9, -67.7, 81.5,
        -65.5, 81.5, -67.8, 80.9, -69.5, 80.6, -71.2, 79.8, -73.9, 79.4, -76.9, 79.3,
        -75.5, 79.2, -76.3, 78.2, -78.4, 77.5, -79.6, 77, -77.9, 76.8, -80.6, 76.2,
        -83.2, 76.5, -86.1, 76.3, -87.6, 76.4, -89.6, 77, -87.7, 78, -85, 77.5,
        -87.2, 78.8, -85.1, 79.3, -86.9, 80.3, -83.4, 80.1, -81.8, 80.5, -84.1, 80.6,
        -87.6, 80.5, -90.2, 81.3, -91.6, 81.9, -88.9, 82.1, -87, 82.3, -85.5, 82.7,
        -84.3, 82.6, -82.4, 82.9, -81.1, 83, -79.3, 83.1, -75.7, 83.1, -72.8, 83.2,
        -70.7, 83.2,
    ),
    (
        -27.1, 83.5, -20.8, 82.7, -22.7, 82.3, -26.5, 82.3, -31.4, 82, -27.9, 82.1,
        -24.8, 81.8, -22.1, 81.7, -23.2, 81.2, -20.6, 81.5, -15.8, 81.9, -12.2, 81.3,
        -16.9, 80.4, -20, 80.2, -17.7, 80.1, -18.9, 79.4, -19.7, 77.6, -18.5, 77,
        -20, 76.9, -21.7, 76.6, -19.8, 76.1, -20.7, 75.2, -19.4, 74.3, -20.8, 73.5,
        -22.2, 73.3, -23.6, 73.3, -22.3, 72.2, -24.8, 72.3, -23.4, 72.1, -21.8, 70.7,
        -23.5, 70.5, -25.2, 70.8, -26.4, 70.2, -23.7, 70.2, -22.3, 70.1, -25, 69.3,
        -27.7, 68.5, -30.7, 68.1, -32.8, 67.7, -34.2, 66.7, -37, 65.9, -38.4, 65.7,
        -40.7, 64.8, -41.2, 63.5, -42.4, 61.9, -43.4, 60.1, -44.8, 60, -46.3, 60.9,
        -48.3, 60.9, -49.9, 62.4, -51.6, 63.6, -52.3, 65.2, -54, 67.2, -53, 68.4,
        -52, 69.6, -53.5, 69.3, -54.8, 70.3, -53.4, 70.8, -51.4, 70.6, -54, 71.5,
        -55.8, 71.7, -54.7, 72.6, -56.1, 73.6, -57.3, 74.7, -58.6, 75.5, -61.3, 76.1,
        -63.4, 76.2, -66.1, 76.1, -68.5, 76.1, -69.7, 76.4, -71.4, 77, -68.8, 77.3,
        -66.8, 77.4, -71, 77.6, -73.2, 78.4, -69.4, 78.9, -65.3, 79.8, -67.2, 80.5,
        -62.7, 81.8, -60.3, 82, -57.2, 82.2, -53, 81.9, -50.4, 82.4, -48, 82.1,
        -46.6, 82, -44.5, 81.7, -46.8, 82.6, -43.4, 83.2, -39.9, 83.2, -38.6, 83.5,
        -35.1, 83.6,
    ),
)


def _pairs(flat):
    coordinates = iter(flat)
    return tuple((float(lon), float(lat)) for lon, lat in zip(coordinates, coordinates))


def polygons():
    """Return the outlines as tuples of ``(longitude, latitude)`` points, in drawing order."""
    return tuple(_pairs(outline) for outline in _OUTLINES)