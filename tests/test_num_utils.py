import pytest

from colorkit.utils import clamp, format_number, is_close_to_int, round_half_up, round_to_int


def test_is_close_to_int():
    assert is_close_to_int(3.0000000001)
    assert not is_close_to_int(3.1)
    assert is_close_to_int(2.0, 0.0)


def test_clamp():
    assert clamp(1.5) == 1.0
    assert clamp(-1) == 0.0
    assert clamp(300, 0, 255) == 255
    assert clamp(0.5) == 0.5


@pytest.mark.parametrize("value, expected", [
    (76.5, 77),
    (127.5, 128),
    (0.5, 1),
    (2.4999, 2),
    (-0.5, 0),
])
def test_round_to_int_ties_go_up(value, expected):
    assert round_to_int(value) == expected


def test_round_half_up_digits():
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(12.25, 1) == 12.3


@pytest.mark.parametrize("value, ndigits, expected", [
    (50.0, None, "50"),
    (0.5, None, "0.5"),
    (0.6, None, "0.6"),
    (359.94, 1, "359.9"),
    (12.0, 1, "12"),
    (0.5, 3, "0.5"),
    (0.50049, 3, "0.5"),
    (-0.01, 1, "0"),
    (1 / 3, 3, "0.333"),
])
def test_format_number(value, ndigits, expected):
    assert format_number(value, ndigits) == expected
