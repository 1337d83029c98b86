from raygames.palette import Color
from raygames.tetris.colors import DARK_GREY, GREEN, cell_colors


def test_cell_colors_has_empty_plus_seven_pieces():
    assert len(cell_colors()) == 8


def test_empty_cell_is_dark_grey():
    assert cell_colors()[0] == DARK_GREY


def test_first_piece_colour_is_green():
    assert cell_colors()[1] == GREEN == Color(47, 230, 23, 255)


def test_cell_colors_returns_fresh_list():
    colors = cell_colors()
    colors.clear()
    assert len(cell_colors()) == 8