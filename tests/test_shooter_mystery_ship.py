import pygame

from raygames.geometry import Rectangle
from raygames.shooter.mystery_ship import MysteryShip


class _FixedRandom:
    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        assert low <= self.value <= high
        return self.value


def test_starts_dead_with_empty_rect():
    ship = MysteryShip(60, 30, 700, _FixedRandom(0))
    assert ship.alive is False
    rect = ship.rect()
    assert (rect.width, rect.height) == (0, 0)


def test_spawn_left_side():
    ship = MysteryShip(60, 30, 700, _FixedRandom(0))
    ship.spawn()
    assert ship.alive is True
    assert (ship.x, ship.y, ship.speed) == (25, 90, 3)
    assert ship.rect() == Rectangle(25, 90, 60, 30)


def test_spawn_right_side():
    ship = MysteryShip(60, 30, 700, _FixedRandom(1))
    ship.spawn()
    assert ship.x == 700 - 60 - 25
    assert ship.speed == -3


def test_flies_until_right_margin():
    ship = MysteryShip(60, 30, 700, _FixedRandom(0))
    ship.spawn()
    while ship.alive:
        ship.update()
    assert ship.x > 700 - 60 - 25
    assert ship.rect().width == 0


def test_flies_until_left_margin():
    ship = MysteryShip(60, 30, 700, _FixedRandom(1))
    ship.spawn()
    while ship.alive:
        ship.update()
    assert ship.x < 25


def test_update_does_nothing_when_dead():
    ship = MysteryShip(60, 30, 700, _FixedRandom(0))
    ship.update()
    assert ship.x == 0


def test_draw_only_when_alive():
    image = pygame.Surface((4, 4))
    image.fill((1, 2, 3))
    surface = pygame.Surface((200, 200))
    ship = MysteryShip(4, 4, 200, _FixedRandom(0))
    ship.draw(surface, image)
    assert tuple(surface.get_at((25, 90))) == (0, 0, 0, 255)
    ship.spawn()
    ship.draw(surface, image)
    assert tuple(surface.get_at((25, 90))) == (1, 2, 3, 255)