import pygame
import pytest

from dashjumper.entities import (
    DUCK_HEIGHT,
    FLOOR_HEIGHT,
    JUMPER_HEIGHT,
    JUMPER_HOME_X,
    JUMPER_HOME_Y,
    JUMPER_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Jumper,
    JumperState,
    Obstacle,
)
from dashjumper.physics import Vector2D

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def test_new_jumper_stands_at_home():
    jumper = Jumper()
    assert jumper.state is JumperState.RUNNING
    assert jumper.position == Vector2D(JUMPER_HOME_X, JUMPER_HOME_Y)
    assert jumper.height == JUMPER_HEIGHT
    assert jumper.width == JUMPER_WIDTH
    assert jumper.bottom() == FLOOR_HEIGHT


def test_running_jumper_does_not_move():
    jumper = Jumper()
    jumper.update_motion(16.0)
    assert jumper.position == Vector2D(JUMPER_HOME_X, JUMPER_HOME_Y)
    assert jumper.state is JumperState.RUNNING


def test_duck_keeps_feet_on_floor():
    jumper = Jumper()
    jumper.duck()
    assert jumper.state is JumperState.DUCKING
    assert jumper.height == DUCK_HEIGHT
    assert jumper.bottom() == FLOOR_HEIGHT
    assert jumper.top() > JUMPER_HOME_Y


def test_reset_after_duck_restores_full_height():
    jumper = Jumper()
    jumper.duck()
    jumper.reset()
    assert jumper.state is JumperState.RUNNING
    assert jumper.height == JUMPER_HEIGHT
    assert jumper.position.y == JUMPER_HOME_Y


def test_jump_rises_then_lands():
    jumper = Jumper()
    jumper.jump()
    assert jumper.state is JumperState.JUMPING
    jumper.update_motion(10.0)
    assert jumper.position.y < JUMPER_HOME_Y
    highest = jumper.position.y
    for _ in range(1000):
        if jumper.state is not JumperState.JUMPING:
            break
        jumper.update_motion(10.0)
        highest = min(highest, jumper.position.y)
    assert jumper.state is JumperState.RUNNING
    assert jumper.position.y == JUMPER_HOME_Y
    assert jumper.velocity.y == 0.0
    assert highest < JUMPER_HOME_Y - JUMPER_HEIGHT


def test_jumper_draw_fills_its_rect():
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    jumper = Jumper()
    jumper.draw(surface)
    assert surface.get_at((int(JUMPER_HOME_X), int(JUMPER_HOME_Y))) == WHITE
    assert surface.get_at((int(JUMPER_HOME_X) - 1, int(JUMPER_HOME_Y))) == BLACK
    assert jumper.rect() == (int(JUMPER_HOME_X), int(JUMPER_HOME_Y), JUMPER_WIDTH, JUMPER_HEIGHT)


def test_obstacle_starts_at_right_edge():
    obstacle = Obstacle(500.0, Vector2D(-1.0, 0.0), 175, 130)
    assert obstacle.left() == WINDOW_WIDTH
    assert obstacle.top() == 500
    assert obstacle.bottom() == 675


def test_obstacle_size_is_truncated():
    obstacle = Obstacle(500.0, Vector2D(-1.0, 0.0), 30.9, 65.5)
    assert obstacle.height == 30
    assert obstacle.width == 65


def test_obstacle_moves_at_constant_velocity():
    obstacle = Obstacle(500.0, Vector2D(-2.0, 0.0), 50, 65)
    obstacle.update_motion(10.0)
    assert obstacle.position.x == pytest.approx(WINDOW_WIDTH - 20.0)
    obstacle.update_motion(10.0)
    assert obstacle.position.x == pytest.approx(WINDOW_WIDTH - 40.0)
    assert obstacle.position.y == 500.0
    assert obstacle.velocity == Vector2D(-2.0, 0.0)


def test_obstacle_draw_after_entering_screen():
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    obstacle = Obstacle(600.0, Vector2D(-1.0, 0.0), 50, 65)
    obstacle.update_motion(100.0)
    obstacle.draw(surface)
    x, y, width, height = obstacle.rect()
    assert (width, height) == (65, 50)
    assert surface.get_at((x, y)) == WHITE
    assert surface.get_at((x, y - 1)) == BLACK


def test_jumper_collides_with_obstacle_in_its_path():
    jumper = Jumper()
    obstacle = Obstacle(600.0, Vector2D(-1.0, 0.0), 75, 65)
    assert not jumper.is_colliding([obstacle])
    obstacle.update_motion(WINDOW_WIDTH - JUMPER_HOME_X)
    assert jumper.is_colliding([obstacle])