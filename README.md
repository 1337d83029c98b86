# raygames

A collection of small 2D games and graphics sketches built on pygame:

- **Tetris**: seven tetromino shapes with rotation, line clearing, scoring and a
  "next block" preview.
- **Space shooter**: rows of enemy ships, destructible shields, a mystery ship
  that crosses the top of the screen, three lives and a high score kept on disk.
- **Walker**: a player character and an enemy that walks toward it, attacks,
  and wears down the player's health bar.
- **Demos**: a star field, collision checks, a firing animation, clickable
  buttons, circles moved by mouse or keys, a walking animation and a gallery
  of basic drawing scenes.

## Installation

```
pip install .
```

Python 3.10 or later is required. The only runtime dependency is pygame.

## Playing

Each game and demo has its own command. Escape or closing the window quits.

| Command                      | What it starts                                          |
|------------------------------|---------------------------------------------------------|
| `raygames-tetris`            | Tetris                                                  |
| `raygames-shooter`           | Space shooter                                           |
| `raygames-walker`            | Player and enemy with health bars                       |
| `raygames-walker-solo`       | A single character walking left and right               |
| `raygames-starfield`         | Falling star field                                      |
| `raygames-collision-rects`   | Rectangle collision check                               |
| `raygames-collision-circles` | Circle collision check                                  |
| `raygames-bullet`            | Stick figure firing a bullet                            |
| `raygames-button`            | Start and exit buttons                                  |
| `raygames-link-button`       | A button that prints a link when clicked                |
| `raygames-chaser`            | Circle that glides to where the mouse clicks            |
| `raygames-chaser-keys`       | Circle moved with the arrow keys                        |
| `raygames-walk`              | Walking animation that wraps around the screen          |
| `raygames-gallery`           | Basic shapes, text, colours, images and timing scenes   |

### Options

- `raygames-tetris --sound-dir DIR` (default `Sound`): reads `rotate.mp3`,
  `clear.mp3` and `music.mp3`.
- `raygames-shooter --assets DIR` (default `src`) for the sprites
  (`pixel_ship.png`, `pixel_ship_blue.png`, `pixel_ship_yellow.png`,
  `pixel_ship_red_small_2.png`, `pixel_ship3_green.png`) and sounds
  (`explosion.ogg`, `laser.ogg`, `music.ogg`); `--high-score FILE`
  (default `High_score.txt`).
- `raygames-walker --root DIR` (default `.`): reads `Images/background.png`,
  `Sprites/Player walking/`, `Sprites/Enemy walking/` and `Sprites/Enemy Attack/`.
- `raygames-walker-solo`, `raygames-walk` and `raygames-button` take
  `--images DIR` (default `Images`).
- `raygames-starfield --stars N` (default 9999).
- `raygames-link-button --image FILE --url URL`.
- `raygames-gallery [SCENE] [--images DIR]`, where `SCENE` is one of
  `structure`, `text`, `shapes`, `colors`, `face`, `fps`, `refresh_rate`,
  `fullscreen`, `image`, `resized_image`, `mouse`, `delay` (default `structure`).

A missing image is replaced by a plain coloured block and a missing sound is
simply not played, so every command runs without its asset files.

### Controls

- **Tetris**: left and right arrows move the falling block, up rotates it,
  down drops it one row (one point per press). The block also falls one row
  every second. Clearing one, two or three rows scores 100, 300 or 500. After
  the game is over, any key starts a new one.
- **Space shooter**: left and right arrows move the ship, space fires. Enemies
  are worth 100, 200 or 300 points by row, the mystery ship 500. Press **R**
  to restart once all lives are lost. The best score is written to the
  high-score file and read back on the next game.
- **Walker**: left and right arrows walk the player; the enemy hurts it for
  10 points at most once a second while they touch.
- The demos use the arrow keys, space or the left mouse button.

## Using the pieces in code

The game logic does not need a window, so it can be driven directly:

```python
import random

from raygames.tetris.grid import Grid
from raygames.tetris.block import TBlock
from raygames.tetris.game import Game

grid = Grid()
block = TBlock()
block.rotate()
print(block.cell_positions())
print(grid.render_text())

game = Game(rng=random.Random(1), sounds=None)
game.move_block_down()
print(game.score)
```

Shared helpers:

- `raygames.geometry`: `Vector2`, `Rectangle`, `check_collision_recs`,
  `check_collision_circles`, `check_collision_point_rec`.
- `raygames.palette`: `Color`, `color_alpha` and the named colours.
- `raygames.shooter.game`: `Game`, `SpriteSizes`, `load_high_score` and
  `save_high_score`.
- `raygames.shooter.app`: `format_with_leading_zeros`, which formats the score display.
- `raygames.walker.game`: `Game` with its `Player` and `Enemy`.

## What it does not do

- `raygames-link-button` does not open a web browser; it prints the link to
  the terminal.
- The space shooter has a single level; there is no level progression.

## Running the tests

```
pip install ".[test]"
pytest
```