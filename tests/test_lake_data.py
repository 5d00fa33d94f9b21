import pytest

from sketchbook import lake_data


@pytest.fixture(scope="module")
def lakes():
    return lake_data.polygons()


def test_number_of_lakes(lakes):
    assert len(lakes) == 18


def test_first_point_of_first_lake(lakes):
    assert lakes[0][0] == (48.6, 41.8)


def test_last_point_of_last_lake(lakes):
    assert lakes[-1][-1] == (-87.0, 45.7)


def test_every_lake_is_a_polygon(lakes):
    assert all(len(lake) >= 3 for lake in lakes)


def test_points_are_float_pairs(lakes):
    for lake in lakes:
        for point in lake:
            assert len(point) == 2
            assert all(isinstance(value, float) for value in point)


def test_points_lie_on_the_globe(lakes):
    for lake in lakes:
        for lon, lat in lake:
            assert -180.0 <= lon <= 180.0
            assert -90.0 <= lat <= 90.0


def test_no_separator_points_remain(lakes):
    assert all((0.0, 0.0) not in lake for lake in lakes)


def test_lakes_start_at_distinct_points(lakes):
    starts = [lake[0] for lake in lakes]
    assert len(set(starts)) == len(starts)


def test_repeated_calls_agree(lakes):
    assert lake_data.polygons() == lakes