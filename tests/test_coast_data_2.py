import pytest

from sketchbook import coast_data_1, coast_data_2


@pytest.fixture(scope="module")
def outlines():
    return coast_data_2.polygons()


def test_number_of_outlines(outlines):
    assert len(outlines) == 29


def test_first_point_of_first_outline(outlines):
    assert outlines[0][0] == (-46.6, -1.0)


def test_last_point_of_last_outline(outlines):
    assert outlines[-1][-1] == (-35.1, 83.6)


def test_every_outline_is_a_polygon(outlines):
    assert all(len(outline) >= 3 for outline in outlines)


def test_points_are_float_pairs(outlines):
    for outline in outlines:
        for point in outline:
            assert len(point) == 2
            assert all(isinstance(value, float) for value in point)


def test_points_lie_on_the_globe(outlines):
    for outline in outlines:
        for lon, lat in outline:
            assert -180.0 <= lon <= 180.0
            assert -90.0 <= lat <= 90.0


def test_no_separator_points_remain(outlines):
    assert all((0.0, 0.0) not in outline for outline in outlines)


def test_repeated_calls_agree(outlines):
    assert coast_data_2.polygons() == outlines


def test_no_outline_repeats_the_first_part(outlines):
    first_part = set(coast_data_1.polygons())
    assert first_part.isdisjoint(outlines)