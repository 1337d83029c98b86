import pygame
import pytest

from raygames.demos.gallery import (
    CUSTOM_COLOR,
    delay,
    render_scene,
    scene_names,
)
from raygames.palette import BLACK, BLUE, MAGENTA, RAYWHITE, WHITE


def _clock(readings):
    calls = []
    values = iter(readings)

    def clock():
        value = next(values)
        calls.append(value)
        return value

    return clock, calls


def test_delay_waits_until_time_has_passed():
    clock, calls = _clock([0.0, 0.5, 1.0, 1.9, 2.0, 5.0])
    elapsed = delay(2.0, clock)
    assert elapsed == 2.0
    assert calls == [0.0, 0.5, 1.0, 1.9, 2.0]


def test_delay_of_zero_returns_at_once():
    clock, calls = _clock([3.0, 4.0])
    assert delay(0.0, clock) == 0.0
    assert calls == [3.0]


def test_scene_names_are_unique_and_cover_demos():
    names = scene_names()
    assert len(names) == len(set(names))
    for expected in ("text", "shapes", "colors", "face", "fps", "mouse", "delay"):
        assert expected in names


def test_unknown_scene_raises():
    with pytest.raises(ValueError):
        render_scene("nope", pygame.Surface((10, 10)), {})


def test_structure_draws_nothing():
    surface = pygame.Surface((600, 500))
    assert render_scene("structure", surface, {}) == []
    assert surface.get_at((300, 250)) == BLACK.rgba


def test_text_scene_reports_text():
    surface = pygame.Surface((600, 500))
    assert render_scene("text", surface) == ["This is a text sample"]


def test_shapes_are_drawn():
    surface = pygame.Surface((600, 500))
    render_scene("shapes", surface, {})
    assert surface.get_at((50, 50)) == BLUE.rgba
    assert surface.get_at((125, 125)) == BLUE.rgba
    assert surface.get_at((150, 200)) == BLUE.rgba
    assert surface.get_at((300, 300)) == MAGENTA.rgba
    assert surface.get_at((500, 300)) == BLACK.rgba
    assert surface.get_at((310, 320)) == BLACK.rgba


def test_colors_scene_uses_custom_color():
    surface = pygame.Surface((600, 500))
    render_scene("colors", surface, {})
    assert surface.get_at((100, 200)) == CUSTOM_COLOR.rgba
    assert surface.get_at((599, 499)) == WHITE.rgba


def test_face_is_outlines_only():
    surface = pygame.Surface((400, 400))
    render_scene("face", surface, {})
    assert surface.get_at((200, 200)) == BLACK.rgba
    assert surface.get_at((130, 130)) == BLACK.rgba
    column = [surface.get_at((130, y)) for y in range(76, 85)]
    assert MAGENTA.rgba in column


def test_fps_text_and_background():
    surface = pygame.Surface((600, 500))
    surface.fill(WHITE.rgba)
    assert render_scene("fps", surface, {"fps": 42}) == ["FPS: 42"]
    assert surface.get_at((599, 499)) == BLACK.rgba


def test_refresh_rate_text():
    surface = pygame.Surface((500, 500))
    assert render_scene("refresh_rate", surface, {"refresh_rate": 60}) == [
        "Refresh Rate: 60 Hz"
    ]


@pytest.mark.parametrize(
    ("waiting", "message"),
    [(True, "Waiting for 2 seconds..."), (False, "2 seconds passed!")],
)
def test_delay_scene_messages(waiting, message):
    surface = pygame.Surface((600, 500))
    assert render_scene("delay", surface, {"waiting": waiting}) == [message]
    assert surface.get_at((0, 0)) == RAYWHITE.rgba


def test_mouse_scene_draws_circle_at_cursor():
    surface = pygame.Surface((600, 500))
    render_scene("mouse", surface, {"mouse": (300, 200)})
    assert surface.get_at((300, 200)) == BLUE.rgba
    assert surface.get_at((0, 0)) == RAYWHITE.rgba


def _white_image(size=(10, 10)):
    image = pygame.Surface(size)
    image.fill(WHITE.rgba)
    return image


def test_image_scene_depends_on_keys():
    surface = pygame.Surface((800, 600))
    image = _white_image()

    render_scene("image", surface, {"image": image})
    assert surface.get_at((5, 5)) == BLACK.rgba

    render_scene("image", surface, {"image": image, "left": True})
    assert surface.get_at((5, 5)) == WHITE.rgba

    render_scene("image", surface, {"image": image, "right": True})
    assert surface.get_at((5, 5)) == BLUE.rgba


def test_resized_image_fills_its_area():
    surface = pygame.Surface((600, 500))
    render_scene("resized_image", surface, {"image": _white_image()})
    assert surface.get_at((100, 100)) == WHITE.rgba
    assert surface.get_at((399, 399)) == WHITE.rgba
    assert surface.get_at((99, 99)) == BLACK.rgba
    assert surface.get_at((400, 400)) == BLACK.rgba