"""Screen constants, a small 2-D vector and controller input flags."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720


@dataclass
class Vec2:
    """A mutable 2-D position."""

    x: float = 0.0
    y: float = 0.0

    def distance_to(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


class Pad(enum.IntFlag):
    """Buttons held on the controller during one frame."""

    NONE = 0
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    A = enum.auto()
    X = enum.auto()


def circles_overlap(a_pos: Vec2, a_radius: float, b_pos: Vec2, b_radius: float) -> bool:
    """True when two circles intersect; merely touching does not count."""
    return a_pos.distance_to(b_pos) < a_radius + b_radius