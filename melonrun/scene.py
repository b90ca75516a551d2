"""The main game scene: sequencing, collisions, remaining-item count and music."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame

from .background import Background
from .enemy import Enemy
from .game import SCREEN_HEIGHT, SCREEN_WIDTH, Pad, circles_overlap
from .item import Item
from .player import Player

FADE_FRAMES = 30
ENEMY_COUNT = 16
ITEM_COUNT = 16
START_BGM_VOLUME = 170
MAX_BGM_VOLUME = 128
BLINK_FRAMES = 30

SCORE_FONT_NAME = "HGP創英角ﾎﾟｯﾌﾟ体"
SCORE_FONT_SIZE = 32
RESULT_FONT_NAME = "HGP行書体"
RESULT_FONT_SIZE = 96

SCORE_TEXT = "のこり{}個"
CLEAR_TEXT = "赤崎バゼル襲来 赤崎バゼル襲来"
GAMEOVER_TEXT = "赤崎バルス"
RETRY_TEXT = "A:リトライ"

_WHITE = (255, 255, 255)
_RESULT_COLOR = (240, 32, 32)
_RETRY_COLOR = (240, 32, 255)

_IMAGE_FILES = {
    "player": "Idle.png",
    "enemy": "Enemy.png",
    "item": "Melon.png",
    "background": "Mapchip.png",
}
_SOUND_FILES = {
    "item_get_se": "ItemGet.mp3",
    "main_bgm": "MainBgm.mp3",
    "gameover_bgm": "GameoverBgm.mp3",
}


class Sequence(enum.Enum):
    """Phases the scene moves through."""

    FADE_IN = enum.auto()
    GAME = enum.auto()
    CLEAR = enum.auto()
    GAMEOVER = enum.auto()


@dataclass
class Assets:
    """Images, sounds and fonts used by the scene; sounds and fonts are optional."""

    player: pygame.Surface
    enemy: pygame.Surface
    item: pygame.Surface
    background: pygame.Surface
    item_get_se: Any = None
    main_bgm: Any = None
    gameover_bgm: Any = None
    score_font: Any = None
    result_font: Any = None


def load_assets(directory: str | Path) -> Assets:
    """Load the game's images, and its sounds and fonts where those subsystems are running."""
    base = Path(directory)

    def require(name: str) -> Path:
        path = base / name
        if not path.is_file():
            raise FileNotFoundError(f"missing asset: {path}")
        return path

    images = {key: pygame.image.load(str(require(name))) for key, name in _IMAGE_FILES.items()}
    sounds: dict[str, Any] = {}
    if pygame.mixer.get_init():
        sounds = {key: pygame.mixer.Sound(str(require(name))) for key, name in _SOUND_FILES.items()}
    fonts: dict[str, Any] = {}
    if pygame.font.get_init():
        fonts = {
            "score_font": pygame.font.SysFont(SCORE_FONT_NAME, SCORE_FONT_SIZE),
            "result_font": pygame.font.SysFont(RESULT_FONT_NAME, RESULT_FONT_SIZE),
        }
    return Assets(**images, **sounds, **fonts)


def _play(sound: Any, loops: int = 0) -> None:
    if sound is not None:
        sound.play(loops=loops)


def _stop(sound: Any) -> None:
    if sound is not None:
        sound.stop()


def _set_volume(sound: Any, volume: int) -> None:
    if sound is not None:
        sound.set_volume(volume / 255)


def _draw_text(surface: pygame.Surface, font: Any, text: str, pos: tuple[int, int], color) -> None:
    if font is not None:
        surface.blit(font.render(text, True, color), pos)


def _text_width(font: Any, text: str) -> int:
    return font.size(text)[0] if font is not None else 0


class SceneMain:
    """Collect every item while dodging the enemies."""

    def __init__(self, assets: Assets, rng: random.Random | None = None, debug: bool = False) -> None:
        self.assets = assets
        self.rng = rng if rng is not None else random.Random()
        self.debug = debug
        self.sequence = Sequence.FADE_IN
        self.frame_count = 0
        self.fade_frame = 0

        self.main_volume = MAX_BGM_VOLUME
        self.gameover_volume = 0
        _play(assets.main_bgm, loops=-1)
        _set_volume(assets.main_bgm, START_BGM_VOLUME)

        self.player = Player(assets.player)
        self.enemies = [Enemy(assets.enemy, self.rng) for _ in range(ENEMY_COUNT)]
        self.items = [Item(assets.item, self.rng) for _ in range(ITEM_COUNT)]
        self.background = Background(assets.background)
        self._debug_font = pygame.font.Font(None, 20) if debug and pygame.font.get_init() else None

    def item_count(self) -> int:
        """Number of items still to collect."""
        return sum(1 for item in self.items if item.exists)

    def update(self, pad: Pad) -> None:
        """Advance one frame."""
        self.frame_count += 1
        handlers = {
            Sequence.FADE_IN: self._update_fade_in,
            Sequence.GAME: self._update_game,
            Sequence.CLEAR: self._update_clear,
            Sequence.GAMEOVER: self._update_gameover,
        }
        handlers[self.sequence](pad)

    def _update_fade_in(self, pad: Pad) -> None:
        self.fade_frame += 1
        if self.fade_frame > FADE_FRAMES:
            self.fade_frame = FADE_FRAMES
            self.sequence = Sequence.GAME
            self.frame_count = 0

    def _update_game(self, pad: Pad) -> None:
        if self.debug and pad & Pad.X:
            for item in self.items:
                item.exists = False

        self.player.update(pad)
        for enemy in self.enemies:
            enemy.update()
        for item in self.items:
            if item.exists:
                item.update()
        self.background.update()

        player = self.player
        for enemy in self.enemies:
            if circles_overlap(player.pos, player.radius, enemy.pos, enemy.radius):
                player.is_dead = True
                self.sequence = Sequence.GAMEOVER
                self.frame_count = 0
                self.gameover_volume = 0
                _play(self.assets.gameover_bgm, loops=-1)
                _set_volume(self.assets.gameover_bgm, self.gameover_volume)

        for item in self.items:
            if item.exists and circles_overlap(player.pos, player.radius, item.pos, item.radius):
                item.exists = False
                _play(self.assets.item_get_se)

        if self.item_count() == 0:
            self.sequence = Sequence.CLEAR
            self.frame_count = 0

    def _update_clear(self, pad: Pad) -> None:
        self.player.update(pad)

    def _update_gameover(self, pad: Pad) -> None:
        if pad & Pad.A:
            self.player.reset()
            for enemy in self.enemies:
                enemy.reset()
            for item in self.items:
                item.reset()
            self.main_volume = MAX_BGM_VOLUME
            self.gameover_volume = 0
            _set_volume(self.assets.main_bgm, self.main_volume)
            _stop(self.assets.gameover_bgm)
            self.sequence = Sequence.GAME
            self.frame_count = 0

        self.main_volume = max(self.main_volume - 1, 0)
        self.gameover_volume = min(self.gameover_volume + 1, MAX_BGM_VOLUME)
        _set_volume(self.assets.main_bgm, self.main_volume)
        _set_volume(self.assets.gameover_bgm, self.gameover_volume)

    def _fade_alpha(self) -> int:
        return int(255 * (1.0 - self.fade_frame / FADE_FRAMES))

    def draw(self, surface: pygame.Surface) -> None:
        """Render the scene onto ``surface``."""
        self.background.draw(surface)
        self.player.draw(surface, self.debug)
        for enemy in self.enemies:
            enemy.draw(surface, self.debug)
        for item in self.items:
            item.draw(surface, self.debug)

        score_font = self.assets.score_font
        result_font = self.assets.result_font
        remaining = self.item_count()
        score = SCORE_TEXT.format(remaining)
        _draw_text(surface, score_font, score, (SCREEN_WIDTH - _text_width(score_font, score), 16), _WHITE)

        result_y = SCREEN_HEIGHT // 2 - RESULT_FONT_SIZE // 2
        if remaining == 0:
            _draw_text(surface, result_font, CLEAR_TEXT, (-3, result_y), _RESULT_COLOR)
        elif self.player.is_dead:
            x = SCREEN_WIDTH // 2 - _text_width(result_font, GAMEOVER_TEXT) // 2
            _draw_text(surface, result_font, GAMEOVER_TEXT, (x, result_y), _RESULT_COLOR)
            if (self.frame_count // BLINK_FRAMES) % 2:
                x = SCREEN_WIDTH // 2 - _text_width(score_font, RETRY_TEXT) // 2
                _draw_text(surface, score_font, RETRY_TEXT, (x, SCREEN_HEIGHT // 2 + 64), _RETRY_COLOR)
            if self.debug:
                _draw_text(surface, self._debug_font, "SceneMain", (0, 0), _WHITE)
                _draw_text(surface, self._debug_font, "Xボタンでゲームクリア", (0, 16), _WHITE)
            alpha = self._fade_alpha()
            if alpha > 0:
                overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
                overlay.fill((0, 0, 0))
                overlay.set_alpha(alpha)
                surface.blit(overlay, (0, 0))

    def end(self) -> None:
        """Stop the music."""
        _stop(self.assets.main_bgm)
        _stop(self.assets.gameover_bgm)