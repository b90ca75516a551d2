"""Enemies that cross the screen horizontally."""

from __future__ import annotations

import random

import pygame

from .game import SCREEN_HEIGHT, SCREEN_WIDTH, Vec2

SPEED = 5.0
DEFAULT_RADIUS = 12.0
GRAPH_WIDTH = 32
GRAPH_HEIGHT = 34

_DEBUG_COLOR = (255, 0, 0)


class Enemy:
    """Enters from a random side and reappears once it leaves the screen."""

    def __init__(self, image: pygame.Surface, rng: random.Random | None = None) -> None:
        self.image = image
        self.rng = rng if rng is not None else random.Random()
        self.pos = Vec2()
        self.move_x = 0.0
        self.reset()

    def reset(self) -> None:
        """Place the enemy at a random side and height."""
        self.radius = DEFAULT_RADIUS
        if self.rng.randint(0, 1):
            self.pos.x = SCREEN_WIDTH + self.radius
            self.move_x = -SPEED
        else:
            self.pos.x = -self.radius
            self.move_x = SPEED
        span = int(SCREEN_HEIGHT - self.radius * 2)
        self.pos.y = float(self.rng.randint(0, span)) + self.radius

    def update(self) -> None:
        self.pos.x += self.move_x
        if self.move_x < 0.0 and self.pos.x < -self.radius:
            self.reset()
        elif self.move_x > 0.0 and self.pos.x > SCREEN_WIDTH + self.radius:
            self.reset()

    def draw(self, surface: pygame.Surface, debug: bool = False) -> None:
        cx, cy = int(self.pos.x), int(self.pos.y)
        src = pygame.Rect(0, 0, GRAPH_WIDTH, GRAPH_HEIGHT)
        surface.blit(self.image, (cx - GRAPH_WIDTH // 2, cy - GRAPH_HEIGHT // 2), src)
        if debug:
            pygame.draw.circle(surface, _DEBUG_COLOR, (cx, cy), int(self.radius), 1)