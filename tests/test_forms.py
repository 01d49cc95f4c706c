"""Tests for city-name and distance parsing at the input boundary."""

import pytest

from ui import InvalidInput, normalize_city, parse_distance


@pytest.mark.parametrize("raw, expected", [("nyc", "NYC"), ("  Boston ", "BOSTON"), ("a", "A")])
def test_normalize_city(raw, expected):
    assert normalize_city(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_blank_city_is_rejected(raw):
    with pytest.raises(InvalidInput) as exc_info:
        normalize_city(raw, field="from")
    assert exc_info.value.field == "from"


@pytest.mark.parametrize("raw, expected", [("5", 5), (" 12 ", 12), (7, 7), (3.0, 3), ("0", 0)])
def test_parse_distance(raw, expected):
    assert parse_distance(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "2.5", 2.5, None, True])
def test_non_whole_distance_is_rejected(raw):
    with pytest.raises(InvalidInput):
        parse_distance(raw)


@pytest.mark.parametrize("raw", ["-1", -4])
def test_negative_distance_is_rejected(raw):
    with pytest.raises(InvalidInput, match="negative"):
        parse_distance(raw)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        parse_distance("ten")
