import pytest

from raygames.demos.chaser import Ball, KeyCircle
from raygames.geometry import Vector2


def test_ball_without_target_stays_put():
    ball = Ball(600, 500)
    start = ball.position
    ball.update(0.1)
    assert ball.position == start


def test_ball_moves_toward_target_at_constant_speed():
    ball = Ball(600, 500)
    start = ball.position
    target = Vector2(start.x + 150, start.y + 80)
    ball.set_target(target)
    ball.update(0.1)
    moved = ball.position - start
    assert moved.length() == pytest.approx(ball.move_speed * 0.1)
    assert (target - ball.position).length() < (target - start).length()


def test_ball_reaches_target_eventually():
    ball = Ball(600, 500)
    target = Vector2(100, 100)
    ball.set_target(target)
    for _ in range(200):
        ball.update(1 / 60)
    assert (ball.position - target).length() <= ball.move_speed / 60


def test_ball_clamped_inside_window():
    ball = Ball(600, 500)
    ball.set_target(Vector2(-1000, 250))
    ball.update(10.0)
    assert ball.position.x == ball.radius
    ball.set_target(Vector2(5000, 9000))
    ball.update(100.0)
    assert ball.position.x <= 600 - ball.radius
    assert ball.position.y <= 500 - ball.radius


def test_key_circle_moves_each_direction():
    circle = KeyCircle(600, 500)
    x, y = circle.x, circle.y
    circle.move(False, True, False, False)
    assert circle.x == x + circle.speed
    circle.move(False, False, False, True)
    assert circle.y == y + circle.speed
    circle.move(True, False, True, False)
    assert (circle.x, circle.y) == (x, y)


def test_key_circle_stops_at_right_edge():
    circle = KeyCircle(600, 500)
    circle.x = 600 - circle.radius
    circle.move(False, True, False, False)
    assert circle.x == 600 - circle.radius


def test_key_circle_stops_at_top_left():
    circle = KeyCircle(600, 500)
    circle.x = circle.radius
    circle.y = circle.radius
    circle.move(True, False, True, False)
    assert (circle.x, circle.y) == (circle.radius, circle.radius)