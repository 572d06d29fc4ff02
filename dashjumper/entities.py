"""The player character, obstacles and the game's tuning constants."""

from __future__ import annotations

import enum

import pygame

from dashjumper.physics import Object2D, Vector2D

# Window
WINDOW_HEIGHT = 720
WINDOW_WIDTH = 1280

# Jumper size and position
JUMPER_HEIGHT = 125
DUCK_HEIGHT_DIVISOR = 2
DUCK_HEIGHT = JUMPER_HEIGHT // DUCK_HEIGHT_DIVISOR
JUMPER_WIDTH = 65
JUMPER_HOME_X = 100.0
JUMPER_HOME_Y = 550.0

# Movement; the origin is the top-left corner
FLOOR_HEIGHT = 550 + JUMPER_HEIGHT
GRAVITY = 0.005
JUMP_VELOCITY_Y = -1.75

# Obstacles
STEADY_STATE_TIME_ELAPSED_S = 90
DUCK_OBSTACLE_HEIGHT = 30
DUCK_OBSTACLE_PROPORTION = 0.3
INITIAL_OBSTACLE_VELOCITY = -0.8
OBSTACLE_VELOCITY_INCREMENT = -0.0125
INITIAL_OBSTACLE_WIDTH_FACTOR_MIN = 2.0
INITIAL_OBSTACLE_WIDTH_FACTOR_MAX = 4.0
WIDTH_FACTOR_INCREMENT = 0.01
OBSTACLE_UNIT_WIDTH_PX = 65
INITIAL_OBSTACLE_SPAWN_INTERVAL_MS = 1200
OBSTACLE_SPAWN_INTERVAL_INCREMENT_MS = -6
OBSTACLE_SPAWN_INTERVAL_DEVIATION_MS = 300

# Score
POINTS_PER_SECOND = 100

WHITE = (0xFF, 0xFF, 0xFF)


class JumperState(enum.Enum):
    RUNNING = enum.auto()
    JUMPING = enum.auto()
    DUCKING = enum.auto()


class Jumper(Object2D):
    """The player: runs in place, jumps under gravity and ducks."""

    def __init__(self) -> None:
        super().__init__(
            Vector2D(JUMPER_HOME_X, JUMPER_HOME_Y),
            Vector2D(0.0, 0.0),
            Vector2D(0.0, GRAVITY),
            JUMPER_HEIGHT,
            JUMPER_WIDTH,
        )
        self.state = JumperState.RUNNING

    def jump(self) -> None:
        self.velocity = Vector2D(self.velocity.x, JUMP_VELOCITY_Y)
        self.state = JumperState.JUMPING

    def duck(self) -> None:
        """Shrink to ducking height while keeping the feet on the floor."""
        self.height = DUCK_HEIGHT
        self.position = Vector2D(
            self.position.x, self.position.y + (JUMPER_HEIGHT - DUCK_HEIGHT)
        )
        self.state = JumperState.DUCKING

    def reset(self) -> None:
        """Return to the steady running state on the floor."""
        self.height = JUMPER_HEIGHT
        self.velocity = Vector2D(self.velocity.x, 0.0)
        self.position = Vector2D(self.position.x, JUMPER_HOME_Y)
        self.state = JumperState.RUNNING

    def update_motion(self, dt: float) -> None:
        """Move only while jumping, and land once back at floor level."""
        if self.state is JumperState.JUMPING:
            super().update_motion(dt)
            if self.position.y >= JUMPER_HOME_Y:
                self.reset()

    def rect(self) -> tuple[int, int, int, int]:
        return (int(JUMPER_HOME_X), int(self.position.y), JUMPER_WIDTH, self.height)

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, WHITE, self.rect())


class Obstacle(Object2D):
    """A block that enters at the right edge and slides left at constant speed."""

    def __init__(
        self, position_y: float, velocity: Vector2D, height: float, width: float
    ) -> None:
        super().__init__(
            Vector2D(float(WINDOW_WIDTH), position_y),
            velocity,
            Vector2D(0.0, 0.0),
            height,
            width,
        )

    def update_motion(self, dt: float) -> None:
        self.position = (
            self.position + self.velocity * dt + (self.acceleration / 2.0) * dt**2
        )

    def rect(self) -> tuple[int, int, int, int]:
        return (int(self.position.x), int(self.position.y), self.width, self.height)

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, WHITE, self.rect())