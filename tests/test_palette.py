import pytest

from raygames.palette import (
    BLANK,
    NAMED_COLORS,
    RAYWHITE,
    RED,
    Color,
    color_alpha,
)


def test_raywhite_channels():
    assert RAYWHITE == Color(245, 245, 245, 255)


def test_blank_is_transparent():
    assert BLANK == Color(0, 0, 0, 0)
    assert color_alpha(BLANK, 0.0).rgba == (0, 0, 0, 0)


def test_default_alpha_is_opaque():
    assert Color(131, 135, 49).a == 255


@pytest.mark.parametrize("bad", [(-1, 0, 0, 0), (0, 256, 0, 0), (0, 0, 0, 300)])
def test_out_of_range_channel_rejected(bad):
    with pytest.raises(ValueError):
        Color(*bad)


def test_with_alpha_keeps_rgb():
    faded = RED.with_alpha(0.3)
    assert faded.rgba[:3] == RED.rgba[:3]
    assert 0 < faded.a < 255


@pytest.mark.parametrize("alpha, expected", [(1.0, 255), (0.0, 0), (2.5, 255), (-1.0, 0)])
def test_with_alpha_clamps(alpha, expected):
    assert RED.with_alpha(alpha).a == expected


def test_color_alpha_matches_method():
    assert color_alpha(RED, 0.3) == RED.with_alpha(0.3)


def test_named_colors_all_opaque_except_blank():
    translucent = {name for name, color in NAMED_COLORS.items() if color.a != 255}
    assert translucent == {"BLANK"}