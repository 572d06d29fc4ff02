"""The on-screen score counter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dashjumper.physics import Vector2D

WHITE = (0xFF, 0xFF, 0xFF)


@dataclass
class Score:
    """A whole-number score drawn at a fixed screen position."""

    position: Vector2D
    value: int = 0

    def add(self, amount: int) -> None:
        self.value += amount

    def subtract(self, amount: int) -> None:
        self.value -= amount

    def text(self) -> str:
        return str(self.value)

    def draw(self, surface: Any, font: Any) -> Any:
        """Render the score in white with ``font`` and blit it onto ``surface``."""
        image = font.render(self.text(), False, WHITE)
        return surface.blit(image, (int(self.position.x), int(self.position.y)))