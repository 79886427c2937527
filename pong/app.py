"""The game loop and the command that starts it."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

from pong.ai import computer_movement, update_computer_targets
from pong.arena import setup
from pong.constants import BACKGROUND_COLOR, BALL_DIAMETER
from pong.movement import Key, player_movement
from pong.physics import Collision, World, apply_velocity, check_for_collisions

FIXED_TIMESTEP = 1.0 / 64.0
WINDOW_SIZE = (1280, 720)


class Game:
    """The world, the score and the fixed-step update schedule."""

    def __init__(self, world: World | None = None) -> None:
        if world is None:
            world = World()
            setup(world)
        self.world = world
        self.score = 0
        self.elapsed = 0.0
        self.clear_color = BACKGROUND_COLOR

    def step(self, delta: float, pressed_keys: Iterable[Key] = ()) -> list[Collision]:
        """Run every system once, in order; return the collisions."""
        self.elapsed += delta
        apply_velocity(self.world, delta)
        player_movement(self.world, delta, pressed_keys)
        update_computer_targets(self.world, delta, self.elapsed)
        computer_movement(self.world, delta)
        return check_for_collisions(self.world)


def _rgb(color: tuple[float, float, float]) -> tuple[int, ...]:
    return tuple(max(0, min(255, round(c * 255))) for c in color)


def run() -> None:
    """Open a window and play until it is closed."""
    import pygame

    key_map = {
        pygame.K_UP: Key.ARROW_UP,
        pygame.K_DOWN: Key.ARROW_DOWN,
        pygame.K_w: Key.KEY_W,
        pygame.K_s: Key.KEY_S,
    }
    width, height = WINDOW_SIZE

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("pong")
        clock = pygame.time.Clock()
        game = Game()
        accumulator = 0.0
        while not any(e.type == pygame.QUIT for e in pygame.event.get()):
            accumulator += clock.tick(60) / 1000.0
            state = pygame.key.get_pressed()
            pressed = {key for code, key in key_map.items() if state[code]}
            while accumulator >= FIXED_TIMESTEP:
                game.step(FIXED_TIMESTEP, pressed)
                accumulator -= FIXED_TIMESTEP

            screen.fill(_rgb(game.clear_color))
            for entity in game.world.entities:
                color = _rgb(entity.color or (1.0, 1.0, 1.0))
                pos, size = entity.transform.translation, entity.transform.scale
                if entity.ball:
                    centre = (pos.x + width / 2.0, height / 2.0 - pos.y)
                    pygame.draw.circle(screen, color, centre, BALL_DIAMETER)
                else:
                    left = pos.x - size.x / 2.0 + width / 2.0
                    top = height / 2.0 - pos.y - size.y / 2.0
                    pygame.draw.rect(screen, color, pygame.Rect(left, top, size.x, size.y))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    argparse.ArgumentParser(prog="pong", description="Play pong.").parse_args(argv)
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())