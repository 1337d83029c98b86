import pytest

from raygames.tetris.app import score_text_x


def test_full_width_text_starts_at_panel_edge():
    assert score_text_x(170) == 320


@pytest.mark.parametrize("width", [0, 10, 55, 100, 169])
def test_text_is_centred_in_panel(width):
    x = score_text_x(width)
    left_margin = x - 320
    right_margin = (320 + 170) - (x + width)
    assert left_margin == pytest.approx(right_margin)


def test_wider_text_starts_further_left():
    assert score_text_x(80) < score_text_x(40)