"""Window setup and the fixed-rate main loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence as SequenceABC

import pygame

from .game import SCREEN_HEIGHT, SCREEN_WIDTH, Pad
from .scene import SceneMain, load_assets

WINDOW_TITLE = "ゲーム名"
FPS = 60

KEY_BINDINGS = {
    pygame.K_UP: Pad.UP,
    pygame.K_DOWN: Pad.DOWN,
    pygame.K_LEFT: Pad.LEFT,
    pygame.K_RIGHT: Pad.RIGHT,
    pygame.K_z: Pad.A,
    pygame.K_c: Pad.X,
}


def pad_from_keys(keys) -> Pad:
    """Translate a key-state mapping (as from ``pygame.key.get_pressed``) to pad buttons."""
    pad = Pad.NONE
    for key, button in KEY_BINDINGS.items():
        if keys[key]:
            pad |= button
    return pad


def _parse_args(argv: SequenceABC[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="melonrun", description="Collect the melons, avoid the enemies.")
    parser.add_argument("--assets", default="data", help="directory holding images and sounds")
    parser.add_argument("--debug", action="store_true", help="show hit circles and enable the clear button")
    return parser.parse_args(argv)


def _run(scene: SceneMain, screen: pygame.Surface, clock: pygame.time.Clock) -> None:
    while True:
        if any(event.type == pygame.QUIT for event in pygame.event.get()):
            return
        screen.fill((0, 0, 0))
        keys = pygame.key.get_pressed()
        scene.update(pad_from_keys(keys))
        scene.draw(screen)
        pygame.display.flip()
        if keys[pygame.K_ESCAPE]:
            return
        clock.tick(FPS)


def main(argv: SequenceABC[str] | None = None) -> int:
    """Open the window and play until it is closed or Escape is pressed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            print(f"melonrun: cannot open window: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            assets = load_assets(args.assets)
        except (FileNotFoundError, pygame.error) as exc:
            print(f"melonrun: {exc}", file=sys.stderr)
            return 1
        scene = SceneMain(assets, debug=args.debug)
        try:
            _run(scene, screen, pygame.time.Clock())
        finally:
            scene.end()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())