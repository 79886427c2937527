# pong

A small Pong arena drawn with pygame. Two paddles sit at either end of a
walled arena and a ball bounces between them. Both paddles are driven by a
computer opponent at medium difficulty: every reaction interval it looks at
the ball's height, misjudges it by a small random margin, and moves towards
that point at paddle speed.

## Installing

```
pip install .
```

## Playing

Start the game with:

```
pong
```

A 1280×720 window opens showing the arena, both paddles and the ball. The
game advances in fixed steps of 1/64 s. The ball rebounds off the four walls
and off the paddles, and each paddle follows the ball on its own. Close the
window to quit.

## Using the pieces

The game logic runs without a window:

```python
from pong.app import Game

game = Game()
for _ in range(60):
    collisions = game.step(1 / 60, set())
```

`Game()` builds the arena with `pong.arena.setup`. Each `Game.step` runs, in
order: `apply_velocity`, `player_movement`, `update_computer_targets`,
`computer_movement` and `check_for_collisions`, and returns the list of
`pong.physics.Collision` sides the ball struck during that step.

Other parts:

- `pong.ai.Difficulty` (`EASY`, `MEDIUM`, `HARD`, `IMPOSSIBLE`) gives a
  paddle's reaction time and error margin; `pong.ai.ComputerState` holds its
  target and reaction `Timer`.
- `pong.physics.ball_collision` reports which side of a box a ball struck,
  or `None` when they do not touch.
- `pong.movement.move_paddle` moves a paddle vertically and keeps it within
  `pong.movement.paddle_bounds()`.
- `pong.geometry` holds `Vec2`, `Transform`, `Aabb2d` and `BoundingCircle`.

Collisions are reported through the standard `logging` module at INFO level.

## What it does not do

- There is no scoring: `Game.score` starts at 0 and nothing changes it.
- The arena has no player-controlled paddle. The window reads the arrow keys
  and W/S and passes them to `player_movement`, which only moves paddles
  marked as player paddles, and `setup` creates none, so the keys have no
  effect.
- The ball never leaves the arena or resets; it bounces off the walls
  indefinitely.
- There is no sound and no menu or difficulty setting on the command line.

## Running the tests

```
pip install .[test]
pytest
```