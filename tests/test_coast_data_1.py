from sketchbook.coast_data_1 import polygons


def test_first_outline_starts_where_the_data_starts():
    first = polygons()[0]
    assert first[0] == (-60.2, -81.0)
    assert first[-1] == (-61.1, -80.0)


def test_last_outline_ends_where_this_part_ends():
    last = polygons()[-1]
    assert last[0] == (-96.3, 68.8)
    assert last[-1] == (-97.2, 69.9)


def test_every_point_is_a_valid_coordinate_pair():
    for outline in polygons():
        for point in outline:
            assert len(point) == 2
            lon, lat = point
            assert -180.0 <= lon <= 180.0
            assert -90.0 <= lat <= 90.0


def test_no_outline_contains_the_separator_point():
    for outline in polygons():
        assert (0.0, 0.0) not in outline


def test_every_outline_is_at_least_a_triangle():
    assert all(len(outline) >= 3 for outline in polygons())


def test_antarctica_reaches_the_south_pole_edges():
    outlines = polygons()
    antarctica = max(outlines, key=len)
    assert (180.0, -90.0) in antarctica
    assert (-180.0, -90.0) in antarctica
    assert antarctica.index((180.0, -90.0)) + 1 == antarctica.index((-180.0, -90.0))


def test_whole_number_coordinates_are_stored_as_floats():
    first = polygons()[0]
    assert repr(first[0][1]) == "-81.0"
    assert repr(first[-1][1]) == "-80.0"
    last = polygons()[-1]
    assert repr(last[0]) == "(-96.3, 68.8)"


def test_repeated_calls_return_equal_data():
    assert polygons() == polygons()
    assert len(polygons()) > 1