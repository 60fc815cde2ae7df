# spaceinvaders

A compact take on the classic arcade shooter. Rows of invaders march back and
forth across the screen. They drop lower each time they reach an edge. You
shoot them down from behind four destructible barriers and dodge their
bullets. Now and then a UFO crosses the top of the screen, and you can pick it
off for bonus points.

## Installing

```
pip install .
```

This also installs `pygame`, which draws the window and reads the keyboard.

## Playing

```
spaceinvaders
```

The game opens an 800 × 600 window titled "Space Invaders". The command takes
no options apart from `--help`.

| Key                | Action                                      |
|--------------------|---------------------------------------------|
| Left arrow or `A`  | Move left                                   |
| Right arrow or `D` | Move right                                  |
| Space (hold)       | Fire; only one of your shots is on screen at a time |
| `R`                | Restart after game over                     |

Close the window to quit.

### Rules

- You start with three lives. Each hit from an invader's bullet costs one.
- An invader is worth 10 points times the current level. The UFO is worth
  100 points times the level.
- Clearing a wave starts the next level. Every second level adds another row
  of invaders: levels 1–2 have three rows, levels 3–4 four, and so on.
- The game ends when you run out of lives or when an invader gets down to
  your line. The final score is also printed to standard output.
- Bullets from both sides chip away the barriers one brick at a time.
- When you restart with `R`, the high score becomes the higher of the old
  high score and the score of the game that just ended.

Text is drawn with the font at `assets/fonts/DejaVuSans.ttf`, a path relative
to the current directory, when that file can be opened. Otherwise a simple
block lettering is used and a warning is logged.

## What it does not do

- There is no sound.
- Entities are drawn as plain coloured rectangles and lines. No sprite images
  are used.
- The high score lasts only for the running session. It is not saved to disk.
- There is no pause and no menu. The game starts straight away.

## Using the pieces

Most of the game runs without opening a window, which makes it easy to script
or test. The entities take a `Graphics` object wrapped around any pygame
surface. Where chance is involved, they also take a `random.Random` instance:

```python
import random
import pygame

from spaceinvaders.graphics import Graphics
from spaceinvaders.game import Game

graphics = Graphics(pygame.Surface((800, 600)))
game = Game(graphics, random.Random(1))
game.initialize()
game.update(0.016)
game.render()
```

The modules are:

- `spaceinvaders.geometry`: `Vec2`, `Rect` (with `intersects`) and
  `centered_rect`.
- `spaceinvaders.events`: the `Key` enum, the `KeyEvent` type, and
  `from_pygame`, which turns pygame key events into `KeyEvent` values.
  Other events give `None`.
- `spaceinvaders.graphics`: `Color` and `Graphics`. `Graphics` provides
  `clear`, `present`, `draw_rect`, `draw_line`, and `load_texture` with
  caching. `load_texture` raises `TextureLoadError` when the image cannot be
  loaded. `draw_texture` supports a source rectangle, rotation and flipping.
- `spaceinvaders.transform`: `Transform`, with its `position`, `rotation` in
  degrees, and `scale` combined into an affine `matrix`. The module also has
  `update_projection_matrix` and `projection_size`.
- `spaceinvaders.bullet`, `barrier`, `enemy`, `ufo` and `player`: the game
  entities.
- `spaceinvaders.text_renderer`: `TextRenderer`, with `load_font`,
  `draw_text` and `text_size`. `load_font` raises `FontLoadError` when the
  font cannot be opened.
- `spaceinvaders.game`: `Game`, with `initialize`, `handle_event`, `update`
  and `render`.
- `spaceinvaders.main`: `main` runs the window and the loop.
  `clamp_delta` caps each frame's time step at 0.05 seconds.

## Running the tests

```
pip install .[test]
pytest
```