"""Collectable items."""

from __future__ import annotations

import random

import pygame

from .game import SCREEN_HEIGHT, SCREEN_WIDTH, Vec2

RADIUS = 16.0
SETTING_SPACE_X = 160
SETTING_SPACE_Y = 120
GRAPH_WIDTH = 32
GRAPH_HEIGHT = 32

_DEBUG_COLOR = (255, 0, 255)


class Item:
    """An item placed at a random spot, present until collected."""

    def __init__(self, image: pygame.Surface, rng: random.Random | None = None) -> None:
        self.image = image
        self.rng = rng if rng is not None else random.Random()
        self.pos = Vec2()
        self.reset()

    def reset(self) -> None:
        """Make the item present again at a fresh random position."""
        self.exists = True
        self.pos.x = float(self.rng.randint(0, SCREEN_WIDTH - SETTING_SPACE_X * 2) + SETTING_SPACE_X)
        self.pos.y = float(self.rng.randint(0, SCREEN_HEIGHT - SETTING_SPACE_Y * 2) + SETTING_SPACE_Y)
        self.radius = RADIUS

    def update(self) -> None:
        """Items stay where they are."""

    def draw(self, surface: pygame.Surface, debug: bool = False) -> None:
        if not self.exists:
            return
        dest = (int(self.pos.x - GRAPH_WIDTH / 2), int(self.pos.y - GRAPH_HEIGHT / 2))
        surface.blit(self.image, dest, pygame.Rect(0, 0, GRAPH_WIDTH, GRAPH_HEIGHT))
        if debug:
            center = (int(self.pos.x), int(self.pos.y))
            pygame.draw.circle(surface, _DEBUG_COLOR, center, int(self.radius), 1)