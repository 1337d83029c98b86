import pytest

from raygames.shooter.app import format_with_leading_zeros


def test_pads_with_zeros():
    assert format_with_leading_zeros(42, 5) == "00042"
    assert format_with_leading_zeros(0, 5) == "00000"


@pytest.mark.parametrize("number", [0, 7, 100, 4321, 99999])
def test_round_trip_and_width(number):
    text = format_with_leading_zeros(number, 5)
    assert len(text) == 5
    assert int(text) == number


def test_exact_width_unchanged():
    assert format_with_leading_zeros(12345, 5) == "12345"


def test_too_wide_raises():
    with pytest.raises(ValueError):
        format_with_leading_zeros(123456, 5)