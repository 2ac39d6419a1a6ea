# lcddino

A small dinosaur runner game built around a simulated 16x2 character LCD
and a 4x3 matrix keypad. The dinosaur stays at the left edge of the screen
and obstacles scroll in from the right. Cacti come along the bottom row and
birds along the top row. Press a key to move the dinosaur to the other row
and avoid them.

Two variants are included:

- **`lcddino`** (`lcddino.main`) is the main game. It loads custom LCD
  glyphs for the dinosaur, cactus and bird. It keeps a score shown at the
  right of the top row, speeds up every 50 points, and sends birds only
  once the score passes 100. A jump lasts a fixed time, then the dinosaur
  comes back down.
- **`lcddino-senha`** (`lcddino.senha`) is a simpler variant. It draws the
  dinosaur as `$`, cacti as `@` and birds as `#`, places an obstacle every
  tenth step (cactus and bird in turn), and each key press toggles the
  dinosaur between the rows.

## Installation

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
```

## Playing

```
lcddino [--max-ticks N] [--seed S]
lcddino-senha [--max-iterations N]
```

The game runs in the terminal. Both display rows are redrawn on one line,
separated by ` | `; in `lcddino` the dinosaur shows as `D`, cacti as `|`
and birds as `v`. Every line typed on standard input (press Enter) counts
as a key press. After a collision the screen shows "Game Over" and the
program waits for one more key press before it exits. `--max-ticks` /
`--max-iterations` stop the game after that many steps; `--seed` fixes the
obstacle placement of `lcddino`.

## Using the library

The display and keypad are plain Python objects. Both take a `delay`
callable, so a game can be run at full speed from code:

```python
import random

from lcddino.keypad import Keypad
from lcddino.lcd import Lcd
from lcddino.main import run_game

no_wait = lambda ms: None
lcd = Lcd(delay=no_wait)
keypad = Keypad(delay=no_wait)
game, score, game_over = run_game(lcd, keypad, random.Random(1), 10)
print("\n".join(lcd.lines()))
```

`run_game(lcd, keypad, rng, max_ticks)` returns `(game, score, game_over)`
and `run_senha(lcd, keypad, max_iterations)` returns `(game, game_over)`.
If the game ends in a collision, both calls block until a key is pressed.

The game state can be used on its own:

```python
from lcddino.game import DinoStatus, Game, int_to_str

game = Game()
crashed = game.update(" ", 0)          # True on a collision
game.set_dino_status(DinoStatus.UP)
print(int_to_str(42))                  # "42"
```

`Lcd` models the controller's display RAM, character-generator RAM and
cursor: `command`, `init`, `clear`, `send_char`, `send_string`,
`send_string_xy`, `go_to_position`, `create_custom_char`,
`define_custom_chars`, and `lines()` for the visible text of both rows.

Key presses are simulated with `Keypad.press(row, col)` and
`Keypad.release()`. `Keypad.get_key()` scans the rows in order and returns
the character of the first key held down, or `None`; a key that has been
read counts as released.

## What it does not do

There is no driver for a physical display or keypad: the LCD and keypad
exist only as in-memory models, and the commands play in a plain text
terminal. There is no high-score storage.

## Running the tests

```
pytest
```