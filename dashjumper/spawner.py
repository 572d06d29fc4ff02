"""Obstacle generation with difficulty that ramps up over time."""

from __future__ import annotations

import random
import threading
import time
from collections import deque
from dataclasses import dataclass

from dashjumper.entities import (
    DUCK_HEIGHT_DIVISOR,
    DUCK_OBSTACLE_PROPORTION,
    FLOOR_HEIGHT,
    INITIAL_OBSTACLE_SPAWN_INTERVAL_MS,
    INITIAL_OBSTACLE_VELOCITY,
    INITIAL_OBSTACLE_WIDTH_FACTOR_MAX,
    INITIAL_OBSTACLE_WIDTH_FACTOR_MIN,
    JUMPER_HEIGHT,
    JUMPER_HOME_Y,
    OBSTACLE_SPAWN_INTERVAL_DEVIATION_MS,
    OBSTACLE_SPAWN_INTERVAL_INCREMENT_MS,
    OBSTACLE_UNIT_WIDTH_PX,
    OBSTACLE_VELOCITY_INCREMENT,
    STEADY_STATE_TIME_ELAPSED_S,
    WIDTH_FACTOR_INCREMENT,
    Obstacle,
)
from dashjumper.physics import Vector2D


def random_float_in_range(rng: random.Random, low: float, high: float) -> float:
    """Return a uniformly distributed float between ``low`` and ``high``."""
    return low + rng.random() * (high - low)


@dataclass
class Difficulty:
    """Obstacle speed, width distribution and spawn interval."""

    velocity_x: float = INITIAL_OBSTACLE_VELOCITY
    width_factor_min: float = INITIAL_OBSTACLE_WIDTH_FACTOR_MIN
    width_factor_max: float = INITIAL_OBSTACLE_WIDTH_FACTOR_MAX
    spawn_interval_ms: int = INITIAL_OBSTACLE_SPAWN_INTERVAL_MS

    def advance(self, elapsed_s: float) -> None:
        """Step every setting once, unless the steady state has been reached."""
        if elapsed_s < STEADY_STATE_TIME_ELAPSED_S:
            self.velocity_x += OBSTACLE_VELOCITY_INCREMENT
            self.width_factor_min += WIDTH_FACTOR_INCREMENT
            self.width_factor_max += WIDTH_FACTOR_INCREMENT
            self.spawn_interval_ms += OBSTACLE_SPAWN_INTERVAL_INCREMENT_MS


class ObstacleSpawner:
    """Appends new obstacles to a shared deque at randomised intervals."""

    def __init__(
        self,
        obstacles: deque[Obstacle],
        lock: threading.Lock,
        rng: random.Random | None = None,
    ) -> None:
        self.obstacles = obstacles
        self.lock = lock
        self.rng = rng if rng is not None else random.Random()
        self.difficulty = Difficulty()

    def next_obstacle(self, elapsed_s: float) -> Obstacle:
        """Advance the difficulty and build the next obstacle.

        About a third of obstacles hang from the top of the screen and must be
        ducked under; the rest stand on the floor and must be jumped over.
        """
        self.difficulty.advance(elapsed_s)
        difficulty = self.difficulty

        width_factor = random_float_in_range(
            self.rng, difficulty.width_factor_min, difficulty.width_factor_max
        )
        width = width_factor * OBSTACLE_UNIT_WIDTH_PX

        if random_float_in_range(self.rng, 0.0, 1.0) < DUCK_OBSTACLE_PROPORTION:
            position_y = 0.0
            height = random_float_in_range(
                self.rng,
                JUMPER_HOME_Y,
                JUMPER_HOME_Y + JUMPER_HEIGHT * (1 - 1.0 / DUCK_HEIGHT_DIVISOR) - 2,
            )
        else:
            position_y = random_float_in_range(
                self.rng, JUMPER_HOME_Y - JUMPER_HEIGHT // 2, JUMPER_HOME_Y
            )
            height = FLOOR_HEIGHT - position_y

        return Obstacle(position_y, Vector2D(difficulty.velocity_x, 0.0), height, width)

    def next_delay_ms(self) -> int:
        """Return the wait before the next spawn, jittered around the interval."""
        deviation = random_float_in_range(
            self.rng,
            -OBSTACLE_SPAWN_INTERVAL_DEVIATION_MS,
            OBSTACLE_SPAWN_INTERVAL_DEVIATION_MS,
        )
        return self.difficulty.spawn_interval_ms + int(deviation)

    def run(self, stop_event: threading.Event, start_time: float) -> None:
        """Spawn obstacles until ``stop_event`` is set.

        ``start_time`` is a :func:`time.monotonic` reading taken when the game
        began.
        """
        while not stop_event.is_set():
            elapsed_s = time.monotonic() - start_time
            obstacle = self.next_obstacle(elapsed_s)
            with self.lock:
                self.obstacles.append(obstacle)
            stop_event.wait(max(self.next_delay_ms(), 0) / 1000.0)