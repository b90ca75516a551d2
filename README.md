# melonrun

A small 2D arcade game built on pygame. You move a character around a
1280×720 tiled field and collect all sixteen melons. Sixteen enemies keep
running across the screen from the left or the right edge. Touching any of
them ends the run.

## Installing

```
pip install .
```

## Playing

```
melonrun
```

Options:

- `--assets DIR`: the directory that holds the images and sounds. The default is `data`.
- `--debug`: draw the hit circles and turn on the instant-clear button.

The asset directory must contain `Idle.png`, `Enemy.png`, `Melon.png` and
`Mapchip.png`. When the pygame mixer is running, `ItemGet.mp3`,
`MainBgm.mp3` and `GameoverBgm.mp3` must also be there. If a file is
missing, or the window cannot be opened, `melonrun` prints an error and
exits with status 1.

Text is drawn with the system fonts that pygame finds for the configured
font names. If no such font is available, pygame uses its default font.

Controls:

- Arrow keys: move the player
- Z: retry after a game over
- C: clear the stage at once (only with `--debug`)
- Escape, or closing the window: quit

The counter in the top-right corner shows how many melons are left. When
it reaches zero the stage is cleared and a banner appears. After a game
over, a message and a blinking retry prompt appear. The main music fades
out while the game-over music fades in. A retry puts every melon and enemy
back at a new random position.

## Using it as a library

The game logic works on any pygame surface. It does not need a window.

- `melonrun.game` provides `SCREEN_WIDTH`, `SCREEN_HEIGHT`, `Vec2` (with
  `distance_to`), `Pad` (the set of held buttons: `UP`, `DOWN`, `LEFT`,
  `RIGHT`, `A`, `X`) and `circles_overlap`. `circles_overlap` is the hit
  test used throughout the game. Circles that only touch do not count as
  overlapping.
- `melonrun.player.Player`, `melonrun.enemy.Enemy` and `melonrun.item.Item`
  each have `reset()`, `update(...)` and `draw(surface, debug)`.
  `Enemy` and `Item` take an optional `random.Random` for their placement.
- `melonrun.background.Background` draws the fixed tile layout from a chip
  sheet. `chip_source(chip_no)` gives the position of a chip in that sheet.
- `melonrun.scene` provides the following:
  - `Assets`.
  - `load_assets(directory)`.
  - The `Sequence` states: `FADE_IN`, `GAME`, `CLEAR` and `GAMEOVER`.
  - `SceneMain(assets, rng=None, debug=False)`. `update(pad)` advances it by
    one frame and `draw(surface)` renders it. `item_count()` returns the
    number of melons still on the field, and `end()` stops the music.
- `melonrun.app` provides `pad_from_keys(keys)` and `main(argv=None)`.
  `pad_from_keys` turns a key-state mapping, such as the one from
  `pygame.key.get_pressed()`, into a `Pad`.

## Running the tests

```
pip install .[test]
pytest
```