import random

import pytest

from raygames.geometry import Vector2
from raygames.shooter.enemy import Enemy
from raygames.shooter.game import Game, SpriteSizes, load_high_score, save_high_score
from raygames.shooter.laser import Laser
from raygames.shooter.obstacle import Obstacle

SIZES = SpriteSizes(
    ship=(60, 40),
    mystery_ship=(80, 40),
    enemies={1: (40, 30), 2: (40, 30), 3: (40, 30)},
)


@pytest.fixture
def high_path(tmp_path):
    return tmp_path / "high.txt"


@pytest.fixture
def make_game(high_path):
    def _make(sounds=None, seed=1):
        return Game(700, 700, SIZES, random.Random(seed), high_path, sounds)

    return _make


def _empty_field(game):
    game.enemies = []
    game.obstacles = []
    game.enemy_lasers = []
    game.spaceship.lasers.clear()


def test_initial_state(make_game):
    game = make_game()
    assert game.lives == 3
    assert game.run is True
    assert game.score == 0
    assert game.high_score == 0
    assert 10 <= game.mystery_ship_spawn_interval <= 20
    assert len(game.obstacles) == 4


def test_enemy_formation(make_game):
    game = make_game()
    enemies = game.create_enemies()
    assert (enemies[0].x, enemies[0].y) == (75, 110)
    assert all(e.kind == 3 for e in enemies if e.y == 110)
    assert all(e.kind == 2 for e in enemies if e.y in (110 + 55, 110 + 110))
    assert all(e.kind == 1 for e in enemies if e.y > 110 + 110)
    assert len({e.x for e in enemies}) == 11
    assert len({e.y for e in enemies}) == 5


def test_obstacles_evenly_spaced(make_game):
    game = make_game()
    xs = [o.position.x for o in game.obstacles]
    steps = {b - a for a, b in zip(xs, xs[1:])}
    assert len(steps) == 1
    gap = steps.pop() - Obstacle.width()
    assert xs[0] == gap
    assert all(o.position.y == 700 - 200 for o in game.obstacles)


def test_high_score_round_trip(high_path):
    save_high_score(high_path, 1234)
    assert load_high_score(high_path) == 1234


def test_load_high_score_missing_or_garbage(tmp_path):
    assert load_high_score(tmp_path / "absent.txt") == 0
    bad = tmp_path / "bad.txt"
    bad.write_text("abc")
    assert load_high_score(bad) == 0


def test_high_score_loaded_on_start(make_game, high_path):
    save_high_score(high_path, 900)
    assert make_game().high_score == 900


def test_player_laser_kills_enemy(make_game, high_path):
    calls = []
    game = make_game(sounds={"explosion": lambda: calls.append("explosion")})
    _empty_field(game)
    game.enemies = [Enemy(3, Vector2(100, 200), (40, 30))]
    laser = Laser(Vector2(110, 205), -6, 700)
    game.spaceship.lasers.append(laser)
    game.check_for_collisions()
    assert game.enemies == []
    assert game.score == 300
    assert laser.active is False
    assert calls == ["explosion"]
    assert game.high_score == 300
    assert load_high_score(high_path) == 300


def test_laser_breaks_shield(make_game):
    game = make_game()
    _empty_field(game)
    obstacle = Obstacle(Vector2(100, 300))
    before = len(obstacle.blocks)
    game.obstacles = [obstacle]
    laser = Laser(Vector2(112, 298), -6, 700)
    game.spaceship.lasers.append(laser)
    game.check_for_collisions()
    assert len(obstacle.blocks) < before
    assert laser.active is False


def test_mystery_ship_hit(make_game):
    game = make_game()
    _empty_field(game)
    game.mystery_ship.spawn()
    rect = game.mystery_ship.rect()
    laser = Laser(Vector2(rect.x + 5, rect.y + 5), -6, 700)
    game.spaceship.lasers.append(laser)
    game.check_for_collisions()
    assert game.mystery_ship.alive is False
    assert game.score == 500


def test_enemy_laser_costs_life_and_ends_game(make_game):
    game = make_game()
    _empty_field(game)
    ship = game.spaceship.rect()
    game.enemy_lasers = [Laser(Vector2(ship.x + 10, ship.y + 5), 6, 700)]
    game.check_for_collisions()
    assert game.lives == 2
    assert game.run is True
    game.lives = 1
    game.enemy_lasers = [Laser(Vector2(ship.x + 10, ship.y + 5), 6, 700)]
    game.check_for_collisions()
    assert game.lives == 0
    assert game.run is False


def test_enemy_touching_ship_ends_game(make_game):
    game = make_game()
    _empty_field(game)
    ship = game.spaceship.rect()
    game.enemies = [Enemy(1, Vector2(ship.x, ship.y), (40, 30))]
    game.check_for_collisions()
    assert game.run is False


def test_move_enemies_turns_at_right_edge(make_game):
    game = make_game()
    game.enemies = [Enemy(1, Vector2(640, 200), (40, 30))]
    game.move_enemies()
    assert game.enemy_direction == -1
    assert game.enemies[0].x == 640 - 1
    assert game.enemies[0].y == 200 + 1


def test_move_enemies_turns_at_left_edge(make_game):
    game = make_game()
    game.enemy_direction = -1
    game.enemies = [Enemy(1, Vector2(20, 200), (40, 30))]
    game.move_enemies()
    assert game.enemy_direction == 1
    assert game.enemies[0].x == 20 + 1
    assert game.enemies[0].y == 200 + 1


def test_enemy_shoot_interval(make_game):
    game = make_game()
    enemy = Enemy(2, Vector2(100, 200), (40, 30))
    game.enemies = [enemy]
    game.enemy_shoot_laser(0.35)
    assert len(game.enemy_lasers) == 1
    assert game.enemy_lasers[0].y == enemy.y + enemy.height
    assert game.enemy_lasers[0].speed == 6
    game.enemy_shoot_laser(0.4)
    assert len(game.enemy_lasers) == 1


def test_no_enemy_shot_without_enemies(make_game):
    game = make_game()
    game.enemies = []
    game.enemy_shoot_laser(10.0)
    assert game.enemy_lasers == []


def test_delete_inactive_lasers(make_game):
    game = make_game()
    dead = Laser(Vector2(10, 300), -6, 700)
    dead.active = False
    alive = Laser(Vector2(20, 300), -6, 700)
    game.spaceship.lasers[:] = [dead, alive]
    game.enemy_lasers = [dead]
    game.delete_inactive_lasers()
    assert game.spaceship.lasers == [alive]
    assert game.enemy_lasers == []


def test_handle_input(make_game):
    game = make_game()
    start = game.spaceship.x
    game.handle_input(True, False, True, 1.0)
    assert game.spaceship.x < start
    assert len(game.spaceship.lasers) == 1
    game.run = False
    x = game.spaceship.x
    game.handle_input(True, False, True, 5.0)
    assert game.spaceship.x == x
    assert len(game.spaceship.lasers) == 1


def test_update_spawns_mystery_ship(make_game):
    game = make_game()
    game.update(100.0)
    assert game.mystery_ship.alive is True
    assert game.time_last_spawn == 100.0
    assert 10 <= game.mystery_ship_spawn_interval <= 20


def test_update_frozen_when_over(make_game):
    game = make_game()
    game.run = False
    positions = [(e.x, e.y) for e in game.enemies]
    game.update(100.0)
    assert [(e.x, e.y) for e in game.enemies] == positions
    assert game.mystery_ship.alive is False


def test_restart(make_game):
    game = make_game()
    game.spaceship.fire_laser(1.0)
    game.enemies = []
    game.lives = 0
    game.run = False
    game.score = 700
    game.restart()
    assert game.run is True
    assert game.lives == 3
    assert game.score == 0
    assert len(game.enemies) == len(game.create_enemies())
    assert len(game.obstacles) == 4
    assert game.spaceship.lasers == []