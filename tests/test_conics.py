import math

import pytest

from sketchbook.conics import (
    BACKGROUND,
    BLUE,
    GREEN,
    HEIGHT,
    RED,
    WHITE,
    WIDTH,
    classify_pixel,
    distance,
    main,
    render_conics,
)


@pytest.fixture(scope="module")
def image():
    return render_conics(WIDTH, HEIGHT)


def test_distance_is_symmetric_and_euclidean():
    assert distance(1, 2, 4, 6) == distance(4, 6, 1, 2)
    assert distance(0, 0, 3, 4) == math.hypot(3, 4)
    assert distance(7, 7, 7, 7) == 0


def test_circle_points():
    assert classify_pixel(520, 240) == RED
    assert classify_pixel(320, 40) == RED


def test_hyperbola_vertex():
    assert classify_pixel(370, 240) == BLUE


def test_parabola_vertex():
    assert classify_pixel(360, 240) == WHITE


def test_empty_point():
    assert classify_pixel(0, 0) is None


@pytest.mark.parametrize("y", [100, 200, 240, 300, 400])
def test_classified_points_satisfy_definitions(y):
    for x in range(WIDTH):
        colour = classify_pixel(x, y)
        if colour == RED:
            assert abs(distance(320, 240, x, y) - 200) < 1
        elif colour == GREEN:
            assert abs(distance(240, 200, x, y) + distance(400, 280, x, y) - 250) < 1
        elif colour == BLUE:
            assert abs(abs(distance(240, 240, x, y) - distance(400, 240, x, y)) - 100) < 1
        elif colour == WHITE:
            assert abs(abs(400 - x) - distance(320, 240, x, y)) < 1


def test_image_size(image):
    assert image.size == (WIDTH, HEIGHT)
    assert render_conics(32, 24).size == (32, 24)


def test_pixels_match_classification(image):
    for y in range(30, HEIGHT, 7):
        for x in range(0, WIDTH, 5):
            assert image.getpixel((x, y)) == (classify_pixel(x, y) or BACKGROUND)


def test_all_curves_present(image):
    colours = {colour for _, colour in image.getcolors(maxcolors=WIDTH * HEIGHT)}
    assert {RED, GREEN, BLUE, WHITE, BACKGROUND} <= colours


def test_caption_is_drawn(image):
    caption = image.crop((10, 3, 200, 16))
    assert WHITE in {colour for _, colour in caption.getcolors(maxcolors=4096)}


def test_main_saves_png(tmp_path):
    target = tmp_path / "conics.png"
    assert main(["--output", str(target)]) == 0
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"