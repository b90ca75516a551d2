"""Tile-map background drawn from a chip sheet."""

from __future__ import annotations

import pygame

from .game import SCREEN_HEIGHT, SCREEN_WIDTH

CHIP_WIDTH = 32
CHIP_HEIGHT = 32
CHIP_COLUMNS = SCREEN_WIDTH // CHIP_WIDTH
CHIP_ROWS = SCREEN_HEIGHT // CHIP_HEIGHT + 1

# Chip drawn under every cell before the layout itself, given as (column, row).
_BASE_CHIP = (1, 1)


def _build_layout() -> tuple[tuple[int, ...], ...]:
    rows = [[9] * CHIP_COLUMNS for _ in range(CHIP_ROWS)]
    for row in rows:
        row[20:24] = [4] * 4
    for row_no, chip in zip(range(6, 11), (86, 94, 102, 110, 118)):
        rows[row_no][24] = chip
        rows[row_no][35] = chip
    for row_no, first in ((9, 344), (10, 352), (11, 360)):
        rows[row_no][17:20] = range(first, first + 3)
    for row_no, first in ((14, 347), (15, 355), (16, 363)):
        rows[row_no][26:31] = range(first, first + 5)
    return tuple(tuple(row) for row in rows)


CHIP_LAYOUT = _build_layout()


class Background:
    """Draws the fixed chip layout using a tile sheet."""

    def __init__(self, tileset: pygame.Surface) -> None:
        self.tileset = tileset
        self.chips_per_row = tileset.get_width() // CHIP_WIDTH
        if self.chips_per_row == 0:
            raise ValueError("tile sheet is narrower than one chip")

    def chip_source(self, chip_no: int) -> tuple[int, int]:
        """Top-left pixel of chip number ``chip_no`` within the tile sheet."""
        row, column = divmod(chip_no, self.chips_per_row)
        return column * CHIP_WIDTH, row * CHIP_HEIGHT

    def update(self) -> None:
        """The background is static."""

    def draw(self, surface: pygame.Surface) -> None:
        base_x, base_y = _BASE_CHIP
        base_rect = pygame.Rect(base_x * CHIP_WIDTH, base_y * CHIP_HEIGHT, CHIP_WIDTH, CHIP_HEIGHT)
        cells = [
            ((column * CHIP_WIDTH, row_no * CHIP_HEIGHT), chip)
            for row_no, row in enumerate(CHIP_LAYOUT)
            for column, chip in enumerate(row)
        ]
        for dest, _ in cells:
            surface.blit(self.tileset, dest, base_rect)
        for dest, chip in cells:
            src = pygame.Rect(self.chip_source(chip), (CHIP_WIDTH, CHIP_HEIGHT))
            surface.blit(self.tileset, dest, src)