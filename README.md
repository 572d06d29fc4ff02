# dashjumper

An endless side-scrolling runner. Your runner stays near the left edge of the
window, and obstacles slide in from the right. Some stand on the floor, and you
have to jump over them. Others hang from the top of the window, and you have to
duck under them. The round ends at the first collision.

Each new obstacle makes the game harder, up until 90 seconds have passed.
Obstacles move faster, get wider and arrive more often. After 90 seconds the
difficulty stops changing. The score shown in the top-left corner counts
10 points for every second you survive.

## Installation

```
pip install .
```

This also installs pygame.

## Playing

```
dashjumper
```

| Key           | Action                                        |
|---------------|-----------------------------------------------|
| `Space`       | Jump. This only works while running on the floor. |
| `S` or `Down` | Hold to duck. Release the key to stand up again.  |
| `Escape`      | End the round.                                |

Closing the window also ends the round.

When the round ends, the window shows "GAME OVER" for ten seconds and then
closes.

The game draws text with `fonts/DejaVuSansMono.ttf`, relative to the current
directory. If that file does not exist, it uses pygame's built-in font. The
`--font PATH` option chooses a different TrueType font.

## Using the pieces

The simulation does not need a display, and you can drive it yourself. A bare
`Game` does not create obstacles by itself. Only `dashjumper` starts the
background spawner thread. To add obstacles, take them from `game.spawner`:

```python
import random

from dashjumper.game import Game

game = Game(random.Random(42))
game.obstacles.append(game.spawner.next_obstacle(0.0))
still_playing = game.step(16.0)  # advance one frame of 16 ms
print(game.score.text(), game.jumper.state)
```

`Game.handle_key_down` and `Game.handle_key_up` take pygame key codes.
`Game.step` returns `False` once the runner has hit an obstacle.

The package contains these modules:

- `dashjumper.physics`: `Vector2D`, `Object2D` and `are_colliding`. They
  handle constant-acceleration movement and collisions between axis-aligned
  boxes. Boxes that only touch at an edge do not count as colliding.
- `dashjumper.entities`: `Jumper`, `JumperState` and `Obstacle`, together with
  the game's tuning constants.
- `dashjumper.score`: `Score`.
- `dashjumper.spawner`: `random_float_in_range`, `Difficulty` and
  `ObstacleSpawner`, which build obstacles and choose the spawn delays.
- `dashjumper.game`: `Game`, `draw_game_over` and the `main` entry point.

## What it does not do

There is no sound and no menu. The game cannot restart a round, and it does not
save high scores anywhere.

## Running the tests

```
pip install .[test]
pytest
```