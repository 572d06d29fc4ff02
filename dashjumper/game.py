"""Game state, input handling, frame updates and the window loop."""

from __future__ import annotations

import argparse
import os
import random
import threading
import time
from collections import deque
from typing import Any

import pygame

from dashjumper.entities import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Jumper,
    JumperState,
    Obstacle,
)
from dashjumper.physics import Vector2D
from dashjumper.score import Score
from dashjumper.spawner import ObstacleSpawner

BLACK = (0x00, 0x00, 0x00)
WHITE = (0xFF, 0xFF, 0xFF)
DEFAULT_FONT_PATH = os.path.join("fonts", "DejaVuSansMono.ttf")
FONT_SIZE = 32
GAME_OVER_PAUSE_S = 10.0

_DUCK_KEYS = (pygame.K_s, pygame.K_DOWN)


class Game:
    """Everything that changes while a round is played."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.jumper = Jumper()
        self.obstacles: deque[Obstacle] = deque()
        self.lock = threading.Lock()
        self.score = Score(Vector2D(20, 20))
        self.elapsed_ms = 0.0
        self.running = True
        self.spawner = ObstacleSpawner(self.obstacles, self.lock, rng)

    def handle_key_down(self, key: int) -> None:
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            if self.jumper.state is JumperState.RUNNING:
                self.jumper.jump()
        elif key in _DUCK_KEYS:
            if self.jumper.state is JumperState.RUNNING:
                self.jumper.duck()

    def handle_key_up(self, key: int) -> None:
        if key in _DUCK_KEYS and self.jumper.state is JumperState.DUCKING:
            self.jumper.reset()

    def step(self, dt_ms: float) -> bool:
        """Advance one frame of ``dt_ms`` milliseconds; return whether play goes on."""
        self.score.value = int(self.elapsed_ms / 100)
        self.jumper.update_motion(dt_ms)

        with self.lock:
            if self.obstacles and self.obstacles[0].right() <= 0:
                self.obstacles.popleft()
            for obstacle in self.obstacles:
                obstacle.update_motion(dt_ms)
            if self.jumper.is_colliding(self.obstacles):
                self.running = False

        self.elapsed_ms += dt_ms
        return self.running

    def draw(self, surface: pygame.Surface, font: Any) -> None:
        surface.fill(BLACK)
        with self.lock:
            for obstacle in self.obstacles:
                obstacle.draw(surface)
        self.jumper.draw(surface)
        self.score.draw(surface, font)


def draw_game_over(surface: pygame.Surface, font: Any) -> pygame.Rect:
    """Write GAME OVER starting at the centre of the window."""
    image = font.render("GAME OVER", False, WHITE)
    return surface.blit(image, (WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2))


def _load_font(path: str) -> Any:
    if os.path.exists(path):
        return pygame.font.Font(path, FONT_SIZE)
    return pygame.font.Font(None, FONT_SIZE)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dashjumper", description="Jump and duck past obstacles.")
    parser.add_argument("--font", default=DEFAULT_FONT_PATH, help="TrueType font for text")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Jumper")
        font = _load_font(args.font)

        game = Game()
        stop = threading.Event()
        spawner_thread = threading.Thread(
            target=game.spawner.run, args=(stop, time.monotonic()), daemon=True
        )
        spawner_thread.start()

        dt_ms = 0.0
        while game.running:
            frame_start = time.perf_counter()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    game.handle_key_down(event.key)
                elif event.type == pygame.KEYUP:
                    game.handle_key_up(event.key)

            game.step(dt_ms)
            game.draw(screen, font)
            pygame.display.flip()
            dt_ms = (time.perf_counter() - frame_start) * 1000.0

        stop.set()
        spawner_thread.join()

        draw_game_over(screen, font)
        pygame.display.flip()
        time.sleep(GAME_OVER_PAUSE_S)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())