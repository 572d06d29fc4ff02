"""Two-dimensional vectors, moving rectangular bodies and their collisions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2D:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2D:
        if scalar == 0:
            raise ZeroDivisionError("cannot divide a vector by zero")
        return Vector2D(self.x / scalar, self.y / scalar)


class Object2D:
    """An axis-aligned rectangle that moves under constant acceleration.

    The origin is the top-left corner of the screen, so ``y`` grows downward.
    """

    def __init__(
        self,
        position: Vector2D,
        velocity: Vector2D,
        acceleration: Vector2D,
        height: float,
        width: float,
    ) -> None:
        self.position = position
        self.velocity = velocity
        self.acceleration = acceleration
        self.height = int(height)
        self.width = int(width)

    def left(self) -> int:
        return int(self.position.x)

    def right(self) -> int:
        return int(self.position.x + self.width)

    def top(self) -> int:
        return int(self.position.y)

    def bottom(self) -> int:
        return int(self.position.y + self.height)

    def update_motion(self, dt: float) -> None:
        """Advance velocity and position by ``dt`` time units."""
        self.velocity = self.velocity + self.acceleration * dt
        self.position = (
            self.position + self.velocity * dt + (self.acceleration / 2.0) * dt**2
        )

    def is_colliding(self, others: Iterable[Object2D]) -> bool:
        """Return True if this body overlaps any of ``others``."""
        return any(are_colliding(self, other) for other in others)


def are_colliding(first: Object2D, second: Object2D) -> bool:
    """Return True if the two bodies overlap; touching edges do not count."""
    if first.left() >= second.right():
        return False
    if first.right() <= second.left():
        return False
    if first.top() >= second.bottom():
        return False
    if first.bottom() <= second.top():
        return False
    return True