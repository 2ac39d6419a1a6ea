"""Runner game that draws its playfield with printable characters."""

import argparse
import sys
import threading
from dataclasses import dataclass

from lcddino.game import DinoStatus
from lcddino.keypad import Keypad
from lcddino.lcd import Lcd
from lcddino.shared import LCD_LEN, delay_ms

DINO = "$"
CACTUS = "@"
BIRD = "#"
EMPTY = " "

OBSTACLE_INTERVAL = 10
KEY_POLLS_PER_STEP = 30
DEBOUNCE_MS = 40


@dataclass
class SenhaGame:
    """Both display rows and the dinosaur's row."""

    top: str = EMPTY * LCD_LEN
    bottom: str = DINO + EMPTY * (LCD_LEN - 1)
    dino_status: DinoStatus = DinoStatus.DOWN

    def __post_init__(self):
        for name in ("top", "bottom"):
            if len(getattr(self, name)) != LCD_LEN:
                raise ValueError(f"{name} row must be {LCD_LEN} characters long")
        self.dino_status = DinoStatus(self.dino_status)

    def update(self, new_item, row):
        """Scroll one cell left and append ``new_item``.

        ``row == 1`` puts the item on the top row, anything else on the bottom
        row. Returns True on a collision, leaving the field untouched.
        """
        if not isinstance(new_item, str) or len(new_item) != 1:
            raise ValueError(f"a playfield cell holds exactly one character, got {new_item!r}")
        down = self.dino_status is DinoStatus.DOWN
        if (down and self.bottom[1] == CACTUS) or (not down and self.top[1] == BIRD):
            return True

        top = self.top[1:] + EMPTY
        bottom = self.bottom[1:] + EMPTY
        if down:
            bottom = DINO + bottom[1:]
        else:
            top = DINO + top[1:]

        if row == 1:
            top = top[:-1] + new_item
        else:
            bottom = bottom[:-1] + new_item

        self.top, self.bottom = top, bottom
        return False

    def toggle_dino_status(self):
        """Jump up or come down; returns the new status."""
        self.dino_status = DinoStatus(not self.dino_status)
        return self.dino_status


def _draw(lcd, game):
    lcd.command(0x80)
    lcd.send_string(game.top)
    lcd.go_to_position(1, 0)
    lcd.send_string(game.bottom)


def run_senha(lcd, keypad, max_iterations=None):
    """Play until a collision (or ``max_iterations`` steps).

    Returns ``(game, game_over)``. After a collision the display shows
    "Game Over" and the call returns once a key is pressed.
    """
    if max_iterations is not None and max_iterations < 0:
        raise ValueError(f"max_iterations must not be negative, got {max_iterations}")

    lcd.init()
    game = SenhaGame()
    iteration = 0
    game_over = False

    while not game_over:
        _draw(lcd, game)
        if max_iterations is not None and iteration >= max_iterations:
            break

        if keypad.get_key() is not None:
            game.toggle_dino_status()

        iteration += 1
        if iteration % OBSTACLE_INTERVAL == 0:
            if (iteration // OBSTACLE_INTERVAL) % 2:
                game_over = game.update(CACTUS, 0)
            else:
                game_over = game.update(BIRD, 1)
        else:
            game_over = game.update(EMPTY, 0)

        for _ in range(KEY_POLLS_PER_STEP):
            delay_ms(1)
            if keypad.get_key() is not None:
                game.toggle_dino_status()

    if game_over:
        lcd.clear()
        lcd.send_string("Game Over")
        lcd.go_to_position(0, 1)
        while keypad.get_key() is None:
            delay_ms(1)

    return game, game_over


class _TerminalLcd(Lcd):
    """Display that mirrors its visible rows onto a text stream."""

    def __init__(self, stream):
        super().__init__()
        self._stream = stream

    def send_string(self, text):
        super().send_string(text)
        self._stream.write("\r" + " | ".join(self.lines()))
        self._stream.flush()


def _feed_keys(keypad, stream):
    try:
        for _ in stream:
            keypad.press(3, 2)
    except (OSError, ValueError):
        pass


def main(argv=None):
    """Play in the terminal; each line typed on standard input is a jump."""
    parser = argparse.ArgumentParser(
        prog="lcddino-senha",
        description="Two-row runner game; press Enter to jump.",
    )
    parser.add_argument("--max-iterations", type=int, default=None,
                        help="stop after this many steps")
    args = parser.parse_args(argv)

    lcd = _TerminalLcd(sys.stdout)
    keypad = Keypad(debounce_ms=DEBOUNCE_MS)
    threading.Thread(target=_feed_keys, args=(keypad, sys.stdin), daemon=True).start()
    try:
        run_senha(lcd, keypad, args.max_iterations)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        return 130
    sys.stdout.write("\n")
    return 0