"""The player character."""

from __future__ import annotations

import pygame

from .game import Pad, Vec2

START_X = 256
START_Y = 128
GRAPH_WIDTH = 32
GRAPH_HEIGHT = 32
IDLE_ANIM_FRAMES = 11
ANIM_WAIT_FRAMES = 5
DEFAULT_RADIUS = 16.0
SPEED = 4

_DEBUG_COLOR = (255, 255, 0)


class Player:
    """Player moved by the pad, with a looping idle animation."""

    def __init__(self, image: pygame.Surface) -> None:
        self.image = image
        self.reset()

    def reset(self) -> None:
        """Return to the starting state."""
        self.is_dead = False
        self.pos = Vec2(START_X, START_Y)
        self.radius = DEFAULT_RADIUS
        self.turned = False
        self.anim_frame = 0

    def update(self, pad: Pad) -> None:
        self.anim_frame = (self.anim_frame + 1) % (IDLE_ANIM_FRAMES * ANIM_WAIT_FRAMES)
        if pad & Pad.UP:
            self.pos.y -= SPEED
        if pad & Pad.DOWN:
            self.pos.y += SPEED
        if pad & Pad.LEFT:
            self.pos.x -= SPEED
            self.turned = True
        if pad & Pad.RIGHT:
            self.pos.x += SPEED
            self.turned = False

    def anim_index(self) -> int:
        """Index of the animation cell currently shown."""
        return self.anim_frame // ANIM_WAIT_FRAMES

    def draw(self, surface: pygame.Surface, debug: bool = False) -> None:
        src = pygame.Rect(GRAPH_WIDTH * self.anim_index(), 0, GRAPH_WIDTH, GRAPH_HEIGHT)
        frame = pygame.Surface((GRAPH_WIDTH, GRAPH_HEIGHT), pygame.SRCALPHA)
        frame.blit(self.image, (0, 0), src)
        if self.turned:
            frame = pygame.transform.flip(frame, True, False)
        cx, cy = int(self.pos.x), int(self.pos.y)
        surface.blit(frame, (cx - GRAPH_WIDTH // 2, cy - GRAPH_HEIGHT // 2))
        if debug:
            pygame.draw.circle(surface, _DEBUG_COLOR, (cx, cy), int(self.radius), 1)