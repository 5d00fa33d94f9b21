import math
import re
import xml.etree.ElementTree as ET

import pytest

from sketchbook.clock import clock_svg, main

NS = "{http://www.w3.org/2000/svg}"


def parse(svg):
    return ET.fromstring(svg)


def hands(svg):
    return parse(svg).findall(f"{NS}line")[-3:]


def test_document_shape():
    root = parse(clock_svg(10, 20, 30))
    assert root.tag == f"{NS}svg"
    assert root.get("width") == "200"
    assert len(root.findall(f"{NS}circle")) == 3


def test_hour_ticks():
    lines = parse(clock_svg(0, 0, 0)).findall(f"{NS}line")
    assert sum(line.get("stroke") == "blue" for line in lines) == 12


def test_minute_ticks_lie_between_rings():
    lines = parse(clock_svg(0, 0, 0)).findall(f"{NS}line")
    ticks = [line for line in lines if line.get("stroke-width") is None]
    assert len(ticks) == 48
    for tick in ticks:
        inner = math.hypot(float(tick.get("x1")) - 100, float(tick.get("y1")) - 100)
        outer = math.hypot(float(tick.get("x2")) - 100, float(tick.get("y2")) - 100)
        assert inner == pytest.approx(70, abs=1e-5)
        assert outer == pytest.approx(90, abs=1e-5)


@pytest.mark.parametrize("time", [(0, 0, 0), (3, 15, 45), (11, 59, 59), (7.5, 12, 3)])
def test_hand_lengths_and_colours(time):
    hour, minute, second = hands(clock_svg(*time))
    for hand, colour, length in ((hour, "red", 100), (minute, "green", 70), (second, "black", 90)):
        assert hand.get("stroke") == colour
        assert hand.get("x1") == "100"
        radius = math.hypot(float(hand.get("x2")) - 100, float(hand.get("y2")) - 100)
        assert radius == pytest.approx(length, abs=1e-5)


def test_hour_hand_at_three():
    hour = hands(clock_svg(3, 0, 0))[0]
    assert float(hour.get("x2")) == pytest.approx(200, abs=1e-6)
    assert float(hour.get("y2")) == pytest.approx(100, abs=1e-6)


def test_twelve_hour_period():
    assert hands(clock_svg(2, 10, 5))[0].attrib == hands(clock_svg(14, 10, 5))[0].attrib


def test_coordinates_use_six_decimals():
    svg = clock_svg(4, 5, 6)
    values = re.findall(r'x2="([^"]+)"', svg)
    assert values
    assert all(re.fullmatch(r"-?\d+\.\d{6}", value) for value in values)


def test_main_writes_file(tmp_path):
    target = tmp_path / "face.svg"
    assert main(["1", "2", "3", "--output", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == clock_svg(1, 2, 3)