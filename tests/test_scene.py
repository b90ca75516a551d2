import random

import pygame
import pytest

from melonrun.game import SCREEN_HEIGHT, SCREEN_WIDTH, Pad, Vec2
from melonrun.player import SPEED, START_X, START_Y
from melonrun.scene import (
    FADE_FRAMES,
    ITEM_COUNT,
    MAX_BGM_VOLUME,
    START_BGM_VOLUME,
    Assets,
    SceneMain,
    Sequence,
    load_assets,
)

BG_COLOR = (10, 20, 30)


class FakeSound:
    def __init__(self):
        self.calls = []

    def play(self, loops=0):
        self.calls.append(("play", loops))

    def stop(self):
        self.calls.append(("stop",))

    def set_volume(self, value):
        self.calls.append(("volume", value))


def _sheet(width, height, color):
    surface = pygame.Surface((width, height))
    surface.fill(color)
    return surface


def make_assets(with_sounds=False):
    assets = Assets(
        player=_sheet(352, 32, (0, 200, 0)),
        enemy=_sheet(32, 34, (200, 0, 0)),
        item=_sheet(32, 32, (0, 0, 200)),
        background=_sheet(256, 1536, BG_COLOR),
    )
    if with_sounds:
        assets.item_get_se = FakeSound()
        assets.main_bgm = FakeSound()
        assets.gameover_bgm = FakeSound()
    return assets


def make_scene(with_sounds=False, debug=False):
    return SceneMain(make_assets(with_sounds), random.Random(7), debug)


def start_game(scene):
    for _ in range(FADE_FRAMES + 1):
        scene.update(Pad.NONE)
    for item in scene.items:
        item.pos = Vec2(1000.0, 550.0)
    for enemy in scene.enemies:
        enemy.pos = Vec2(-100.0, 600.0)
        enemy.move_x = 0.0


def kill_player(scene):
    scene.enemies[0].pos = Vec2(scene.player.pos.x, scene.player.pos.y)
    scene.update(Pad.NONE)


def test_fade_in_then_game():
    scene = make_scene()
    for _ in range(FADE_FRAMES):
        scene.update(Pad.NONE)
    assert scene.sequence is Sequence.FADE_IN
    scene.update(Pad.NONE)
    assert scene.sequence is Sequence.GAME
    assert scene.frame_count == 0
    assert scene.fade_frame == FADE_FRAMES


def test_fade_in_does_not_move_anything():
    scene = make_scene()
    before = [(e.pos.x, e.pos.y) for e in scene.enemies]
    for _ in range(FADE_FRAMES):
        scene.update(Pad.RIGHT)
    assert [(e.pos.x, e.pos.y) for e in scene.enemies] == before
    assert scene.player.pos == Vec2(START_X, START_Y)


def test_starts_with_all_items():
    scene = make_scene()
    assert scene.item_count() == ITEM_COUNT
    assert scene.main_volume == MAX_BGM_VOLUME
    assert scene.gameover_volume == 0


def test_main_bgm_starts_looping():
    scene = make_scene(with_sounds=True)
    assert scene.assets.main_bgm.calls == [("play", -1), ("volume", START_BGM_VOLUME / 255)]


def test_enemy_hit_is_gameover():
    scene = make_scene(with_sounds=True)
    start_game(scene)
    kill_player(scene)
    assert scene.sequence is Sequence.GAMEOVER
    assert scene.player.is_dead
    assert scene.frame_count == 0
    assert ("play", -1) in scene.assets.gameover_bgm.calls


def test_collecting_an_item():
    scene = make_scene(with_sounds=True)
    start_game(scene)
    scene.items[0].pos = Vec2(scene.player.pos.x, scene.player.pos.y)
    scene.update(Pad.NONE)
    assert not scene.items[0].exists
    assert scene.item_count() == ITEM_COUNT - 1
    assert scene.assets.item_get_se.calls == [("play", 0)]
    assert scene.sequence is Sequence.GAME


def test_all_items_collected_is_clear():
    scene = make_scene()
    start_game(scene)
    for item in scene.items:
        item.exists = False
    scene.update(Pad.NONE)
    assert scene.sequence is Sequence.CLEAR
    assert scene.frame_count == 0


@pytest.mark.parametrize("debug, expected", [(True, Sequence.CLEAR), (False, Sequence.GAME)])
def test_debug_x_button_clears(debug, expected):
    scene = make_scene(debug=debug)
    start_game(scene)
    scene.update(Pad.X)
    assert scene.sequence is expected


def test_clear_still_moves_player():
    scene = make_scene()
    start_game(scene)
    for item in scene.items:
        item.exists = False
    scene.update(Pad.NONE)
    x = scene.player.pos.x
    scene.update(Pad.RIGHT)
    assert scene.player.pos.x == x + SPEED


def test_gameover_volumes_crossfade_and_clamp():
    scene = make_scene(with_sounds=True)
    start_game(scene)
    kill_player(scene)
    scene.update(Pad.NONE)
    assert scene.main_volume < MAX_BGM_VOLUME
    assert scene.gameover_volume > 0
    for _ in range(300):
        scene.update(Pad.NONE)
    assert scene.main_volume == 0
    assert scene.gameover_volume == MAX_BGM_VOLUME
    assert scene.assets.main_bgm.calls[-1] == ("volume", 0.0)


def test_retry_resets_everything():
    scene = make_scene(with_sounds=True)
    start_game(scene)
    scene.items[1].exists = False
    kill_player(scene)
    scene.update(Pad.A)
    assert scene.sequence is Sequence.GAME
    assert scene.frame_count == 0
    assert not scene.player.is_dead
    assert scene.player.pos == Vec2(START_X, START_Y)
    assert scene.item_count() == ITEM_COUNT
    assert ("stop",) in scene.assets.gameover_bgm.calls


def test_end_stops_music():
    scene = make_scene(with_sounds=True)
    scene.end()
    assert scene.assets.main_bgm.calls[-1] == ("stop",)
    assert scene.assets.gameover_bgm.calls == [("stop",)]


def test_draw_paints_background():
    scene = make_scene()
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    scene.draw(surface)
    assert tuple(surface.get_at((640, 715)))[:3] == BG_COLOR


def test_draw_after_gameover_has_no_dark_overlay():
    scene = make_scene()
    start_game(scene)
    kill_player(scene)
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    scene.draw(surface)
    assert tuple(surface.get_at((640, 715)))[:3] == BG_COLOR


def test_load_assets_reads_images(tmp_path):
    for name, size in [
        ("Idle.png", (352, 32)),
        ("Enemy.png", (32, 34)),
        ("Melon.png", (32, 32)),
        ("Mapchip.png", (256, 64)),
    ]:
        pygame.image.save(pygame.Surface(size), str(tmp_path / name))
    assets = load_assets(tmp_path)
    assert assets.player.get_size() == (352, 32)
    assert assets.enemy.get_size() == (32, 34)
    assert assets.background.get_size() == (256, 64)


def test_load_assets_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_assets(tmp_path)