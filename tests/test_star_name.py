import unicodedata

import pytest

from edhighway.star_name import split_filter, try_detect_star_from_map_popup


def test_line_before_distance_marker():
    lines = ["SOME HEADER", "COLONIA", "DISTANCE: 22000 LY", "PHROI PRI NX-A D1-785"]
    assert try_detect_star_from_map_popup(lines) == "COLONIA"


def test_line_before_arrival_point_marker():
    lines = ["SHINRARTA DEZHRA", "ARRIVAL POINT: 12 LS"]
    assert try_detect_star_from_map_popup(lines) == "SHINRARTA DEZHRA"


def test_marker_on_first_line_falls_back_to_pattern():
    lines = ["DISTANCE: 5 LY", "PYRIE THAE XO-Z D13-12"]
    assert try_detect_star_from_map_popup(lines) == "PYRIE THAE XO-Z D13-12"


@pytest.mark.parametrize(
    "name",
    ["PHROI PRI NX-A D1-785", "Pyrie Thae XO-Z D13-12", "Suvaa LM-W F1-0"],
)
def test_generated_names_are_detected(name):
    assert try_detect_star_from_map_popup(["NOISE", name, "MORE NOISE"]) == name


def test_planet_name_is_detected():
    name = "HYPOE FLYI QB-N C23-3651 1"
    assert try_detect_star_from_map_popup([name]) == name


def test_last_matching_line_wins():
    lines = ["HYPOE FLYI LA-P C22-1092", "HYPOE FLYI FN-H D11-1555"]
    assert try_detect_star_from_map_popup(lines) == "HYPOE FLYI FN-H D11-1555"


def test_exclamation_mark_read_as_i():
    assert try_detect_star_from_map_popup(["PHRO! PR! NX-A D1-785"]) == "PHROI PRI NX-A D1-785"


@pytest.mark.parametrize(
    "lines",
    [[], ["JUST TEXT"], ["TWO PARTS"], ["NX-A D1-785"], ["PHROI PRI NX-A Z1-785"]],
)
def test_nothing_found(lines):
    assert try_detect_star_from_map_popup(lines) == ""


def test_split_filter_trims_uppercases_and_drops_short_lines():
    text = "  phroi pri nx-a d1-785 \r\nab\n\n   \nDistance: 5"
    assert split_filter(text) == ["PHROI PRI NX-A D1-785", "DISTANCE: 5"]


def test_split_filter_decomposes_accents():
    result = split_filter("café")
    assert result == [unicodedata.normalize("NFD", "CAFÉ")]
    assert unicodedata.is_normalized("NFD", result[0])


def test_split_filter_empty():
    assert split_filter("") == []
    assert split_filter("\n\r\nabc\n") == []