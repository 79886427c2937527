"""Computer-controlled paddles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum

from pong.constants import PADDLE_SPEED
from pong.movement import paddle_bounds
from pong.physics import World


class Difficulty(Enum):
    """How well a computer paddle plays."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    IMPOSSIBLE = "impossible"

    def accuracy_factor(self) -> float:
        return _ACCURACY[self]

    def reaction_time(self) -> float:
        return _REACTION[self]

    def error_margin(self) -> float:
        return _ERROR[self]

    def prediction_horizon(self) -> float:
        return _HORIZON[self]


_ACCURACY = {
    Difficulty.EASY: 0.6,
    Difficulty.MEDIUM: 0.75,
    Difficulty.HARD: 0.8,
    Difficulty.IMPOSSIBLE: 0.95,
}
_REACTION = {
    Difficulty.EASY: 1.0,
    Difficulty.MEDIUM: 0.4,
    Difficulty.HARD: 0.2,
    Difficulty.IMPOSSIBLE: 0.0,
}
_ERROR = {
    Difficulty.EASY: 0.4,
    Difficulty.MEDIUM: 0.25,
    Difficulty.HARD: 0.1,
    Difficulty.IMPOSSIBLE: 0.0,
}
_HORIZON = {
    Difficulty.EASY: 0.2,
    Difficulty.MEDIUM: 0.5,
    Difficulty.HARD: 1.0,
    Difficulty.IMPOSSIBLE: 1.5,
}


@dataclass
class Timer:
    """A countdown timer measured in seconds."""

    duration: float
    repeating: bool = True
    elapsed: float = 0.0
    finished: bool = False
    times_finished_this_tick: int = 0

    def tick(self, delta: float) -> bool:
        """Advance the timer; return whether it finished during this tick."""
        if self.finished and not self.repeating:
            self.times_finished_this_tick = 0
            return False

        self.elapsed += delta
        self.finished = self.elapsed >= self.duration
        if not self.finished:
            self.times_finished_this_tick = 0
        elif not self.repeating:
            self.elapsed = self.duration
            self.times_finished_this_tick = 1
        elif self.duration == 0.0:
            self.elapsed = 0.0
            self.times_finished_this_tick = 1
        else:
            self.times_finished_this_tick = int(self.elapsed // self.duration)
            self.elapsed %= self.duration
        return self.finished


@dataclass
class ComputerState:
    """What a computer paddle aims for and when it last looked."""

    difficulty: Difficulty
    target_y: float = 0.0
    perceived_ball_y: float = 0.0
    last_update_time: float = 0.0
    last_reaction_time: float = 0.0
    reaction_timer: Timer = field(init=False)
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def __post_init__(self) -> None:
        self.reaction_timer = Timer(self.difficulty.reaction_time(), repeating=True)

    def calculate_target(self, actual_y: float) -> float:
        """The ball height as perceived, off by up to the error margin.

        Raises ValueError when the margin is zero, as the offset range is empty.
        """
        margin = self.difficulty.error_margin()
        if margin <= 0.0:
            raise ValueError(f"cannot sample empty range for {self.difficulty.name}")
        offset = -margin + self.rng.random() * 2.0 * margin
        return actual_y + offset


def computer_movement(world: World, delta: float) -> None:
    """Move each computer paddle towards its target at paddle speed."""
    lower, upper = paddle_bounds()
    for entity in world.computers():
        current_y = entity.transform.translation.y
        difference = entity.computer_state.target_y - current_y
        direction = math.copysign(1.0, difference)
        movement = min(abs(difference), PADDLE_SPEED * delta)
        new_y = current_y + movement * direction
        entity.transform.set_y(min(max(new_y, lower), upper))


def update_computer_targets(world: World, delta: float, elapsed: float) -> None:
    """Let each computer paddle look at the ball when its reaction timer fires."""
    try:
        ball_y = world.ball().transform.translation.y
    except LookupError:
        return

    for entity in world.computers():
        state: ComputerState = entity.computer_state
        if state.reaction_timer.tick(delta):
            perceived = state.calculate_target(ball_y)
            state.perceived_ball_y = perceived
            state.target_y = perceived
            state.last_reaction_time = elapsed