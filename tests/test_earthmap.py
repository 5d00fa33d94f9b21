import pytest
from PIL import Image, ImageDraw

from sketchbook import earthmap


@pytest.fixture(scope="module")
def world():
    return earthmap.render_map()


def _pixel_at(image, lon, lat):
    x, y = (int(c) for c in earthmap.gps_to_screen(lon, lat))
    return image.getpixel((x, y))


def test_gps_to_screen_corners():
    assert earthmap.gps_to_screen(-180, 90) == (0.0, 0.0)
    assert earthmap.gps_to_screen(180, -90) == (earthmap.SCREEN_WIDTH, earthmap.SCREEN_HEIGHT)


def test_gps_to_screen_centre():
    assert earthmap.gps_to_screen(0, 0) == (earthmap.SCREEN_WIDTH / 2, earthmap.SCREEN_HEIGHT / 2)


def test_gps_to_screen_is_monotonic():
    x1, y1 = earthmap.gps_to_screen(10, 10)
    x2, y2 = earthmap.gps_to_screen(20, 20)
    assert x2 > x1
    assert y2 < y1


def test_split_polygons_on_separators():
    flat = [1, 2, 3, 4, 5, 6, 0, 0, 7, 8, 9, 10, 0, 0, -1, -1]
    assert earthmap.split_polygons(flat) == (
        ((1.0, 2.0), (3.0, 4.0), (5.0, 6.0)),
        ((7.0, 8.0), (9.0, 10.0)),
    )


def test_split_polygons_stops_at_terminator():
    flat = [1, 2, 0, 0, -1, -1, 3, 4, 0, 0]
    assert earthmap.split_polygons(flat) == (((1.0, 2.0),),)


def test_split_polygons_drops_unclosed_tail():
    flat = [1, 2, 0, 0, 3, 4, 5, 6, -1, -1]
    assert earthmap.split_polygons(flat) == (((1.0, 2.0),),)


def test_split_polygons_keeps_single_minus_one():
    flat = [-1, 5, 2, -1, 0, 0, -1, -1]
    assert earthmap.split_polygons(flat) == (((-1.0, 5.0), (2.0, -1.0)),)


def test_split_polygons_empty():
    assert earthmap.split_polygons([-1, -1]) == ()


def test_draw_polygons_fills_and_outlines():
    image = Image.new("RGB", (earthmap.SCREEN_WIDTH, earthmap.SCREEN_HEIGHT), earthmap.OCEAN)
    draw = ImageDraw.Draw(image, "RGBA")
    square = ((-10.0, -10.0), (10.0, -10.0), (10.0, 10.0), (-10.0, 10.0))
    earthmap.draw_polygons(draw, [square], earthmap.LAND)
    assert _pixel_at(image, 0, 0) == earthmap.LAND
    corner = tuple(int(c) for c in earthmap.gps_to_screen(-10.0, 10.0))
    assert image.getpixel(corner) == earthmap.OUTLINE
    assert _pixel_at(image, 50, 50) == earthmap.OCEAN


def test_draw_polygons_skips_degenerate():
    image = Image.new("RGB", (earthmap.SCREEN_WIDTH, earthmap.SCREEN_HEIGHT), earthmap.OCEAN)
    before = image.tobytes()
    draw = ImageDraw.Draw(image, "RGBA")
    earthmap.draw_polygons(draw, [((0.0, 0.0), (10.0, 10.0)), ()], earthmap.LAND)
    assert image.tobytes() == before


def test_draw_grid_darkens_lines_only():
    image = Image.new("RGB", (earthmap.SCREEN_WIDTH, earthmap.SCREEN_HEIGHT), earthmap.OCEAN)
    draw = ImageDraw.Draw(image, "RGBA")
    earthmap.draw_grid(draw)
    step = earthmap.LINE_SPACING
    on_vertical = image.getpixel((step, step // 2))
    on_horizontal = image.getpixel((step // 2, step))
    for pixel in (on_vertical, on_horizontal):
        assert pixel[0] == 0 and pixel[1] == 0
        assert pixel[2] < earthmap.OCEAN[2]
    assert image.getpixel((step // 2, step // 2)) == earthmap.OCEAN


def test_render_map_size(world):
    assert world.size == (earthmap.SCREEN_WIDTH, earthmap.SCREEN_HEIGHT)


def test_render_map_marker(world):
    assert _pixel_at(world, earthmap.MARKER_LON, earthmap.MARKER_LAT) == earthmap.MARKER


def test_render_map_land_and_ocean(world):
    assert _pixel_at(world, 20, 20) == earthmap.LAND
    assert _pixel_at(world, -140, 5) == earthmap.OCEAN


def test_render_map_lake_over_land(world):
    assert _pixel_at(world, 51, 41) == earthmap.LAKE


def test_main_writes_image(tmp_path):
    target = tmp_path / "map.png"
    assert earthmap.main(["-o", str(target)]) == 0
    with Image.open(target) as saved:
        assert saved.size == (earthmap.SCREEN_WIDTH, earthmap.SCREEN_HEIGHT)