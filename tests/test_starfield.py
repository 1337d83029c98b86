import random

import pygame
import pytest

from raygames.demos.starfield import MAX_SPEED, Star, Starfield
from raygames.palette import ORANGE


def make_field(count=200, width=40, height=30, seed=1):
    return Starfield(count, width, height, random.Random(seed))


def test_creates_requested_number_of_stars():
    field = make_field(count=123)
    assert len(field.stars) == 123


def test_initial_stars_lie_on_screen_with_valid_speed():
    field = make_field()
    for star in field.stars:
        assert 0 <= star.x < field.width
        assert 0 <= star.y < field.height
        assert 1 <= star.speed <= MAX_SPEED


def test_update_moves_each_star_down_by_its_speed():
    field = make_field()
    field.stars = [Star(5.0, 2.0, 3.0)]
    field.update()
    assert field.stars[0].y == pytest.approx(5.0)
    assert field.stars[0].x == 5.0


def test_star_past_bottom_restarts_at_top():
    field = make_field()
    field.stars = [Star(5.0, field.height - 1.0, 4.0)]
    field.update()
    star = field.stars[0]
    assert star.y == 0.0
    assert 0 <= star.x < field.width
    assert 1 <= star.speed <= MAX_SPEED


def test_stars_stay_within_bounds_over_many_frames():
    field = make_field()
    for _ in range(100):
        field.update()
    assert all(0 <= s.y <= field.height for s in field.stars)


def test_same_seed_gives_same_field():
    a = make_field(seed=7)
    b = make_field(seed=7)
    assert a.stars == b.stars


def test_negative_count_is_rejected():
    with pytest.raises(ValueError):
        Starfield(-1, 10, 10, random.Random(0))


def test_draw_sets_orange_pixel():
    field = make_field(count=0, width=10, height=10)
    field.stars = [Star(3.0, 4.0, 1.0)]
    surface = pygame.Surface((10, 10))
    field.draw(surface)
    assert tuple(surface.get_at((3, 4))) == ORANGE.rgba
    assert tuple(surface.get_at((0, 0))) != ORANGE.rgba