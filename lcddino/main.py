"""Runner game with custom glyphs, a score and speed-ups."""

import argparse
import random
import sys
import threading

from lcddino.game import BIRD, CACTUS, DINO, EMPTY, DinoStatus, Game, int_to_str
from lcddino.keypad import Keypad
from lcddino.lcd import Lcd
from lcddino.shared import LCD_LEN, delay_ms

INITIAL_GAME_FREQ = 200
"""Key polls per game step; higher is slower."""

SPEEDUP_EVERY = 50
SPEEDUP_PERCENT = 70
SCORE_BEFORE_BIRDS = 100


def _draw(lcd, game, score):
    score_str = int_to_str(score)
    score_pos = LCD_LEN - len(score_str)
    lcd.send_string_xy(0, score_pos, score_str)
    lcd.send_string_xy(0, 0, game.top)
    lcd.send_string_xy(0, score_pos, score_str)
    lcd.send_string_xy(1, 0, game.bottom)


def run_game(lcd, keypad, rng=None, max_ticks=None):
    """Play until a collision (or ``max_ticks`` steps).

    ``rng`` needs a ``randrange`` method. Returns ``(game, score, game_over)``.
    After a collision the display shows "Game Over" and the call returns once
    a key is pressed.
    """
    if max_ticks is not None and max_ticks < 0:
        raise ValueError(f"max_ticks must not be negative, got {max_ticks}")
    rng = random.Random() if rng is None else rng

    lcd.init()
    game = Game()
    lcd.define_custom_chars()

    game_over = False
    update_freq = INITIAL_GAME_FREQ
    score = 0
    jump_counter = 0
    obstacle_cooldown = 0
    ticks = 0

    while not game_over:
        _draw(lcd, game, score)
        if max_ticks is not None and ticks >= max_ticks:
            break

        for _ in range(update_freq):
            key = keypad.get_key()
            if jump_counter == 0 and key is not None:
                game_over = game.set_dino_status(DinoStatus.UP)
                lcd.send_string_xy(0, 0, DINO)
                lcd.send_string_xy(1, 0, EMPTY)
                jump_counter = update_freq * 3
            elif jump_counter == 1:
                game_over = game.set_dino_status(DinoStatus.DOWN)
                lcd.send_string_xy(0, 0, EMPTY)
                lcd.send_string_xy(1, 0, DINO)
                jump_counter = 0
            elif jump_counter > 1:
                jump_counter -= 1

        if not game_over:
            if obstacle_cooldown <= 0:
                if rng.randrange(2) == 0 or score <= SCORE_BEFORE_BIRDS:
                    obstacle, row = CACTUS, 1
                else:
                    obstacle, row = BIRD, 0
                game_over = game.update(obstacle, row)
                obstacle_cooldown = rng.randrange(11) + 5
            else:
                obstacle_cooldown -= 1
                game_over = game.update(EMPTY, 0)
            if score % SPEEDUP_EVERY == 0:
                update_freq = update_freq * SPEEDUP_PERCENT // 100
            score += 1
        ticks += 1

    if game_over:
        lcd.clear()
        lcd.send_string("Game Over")
        while keypad.get_key() is None:
            delay_ms(1)

    return game, score, game_over


_GLYPHS = str.maketrans({DINO: "D", CACTUS: "|", BIRD: "v"})


class _TerminalLcd(Lcd):
    """Display that mirrors its visible rows onto a text stream."""

    def __init__(self, stream):
        super().__init__()
        self._stream = stream

    def send_string(self, text):
        super().send_string(text)
        rows = " | ".join(self.lines()).translate(_GLYPHS)
        self._stream.write("\r" + rows)
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
        prog="lcddino",
        description="Two-row runner game; press Enter to jump.",
    )
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="stop after this many steps")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for obstacle placement")
    args = parser.parse_args(argv)

    lcd = _TerminalLcd(sys.stdout)
    keypad = Keypad()
    threading.Thread(target=_feed_keys, args=(keypad, sys.stdin), daemon=True).start()
    try:
        run_game(lcd, keypad, random.Random(args.seed), args.max_ticks)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        return 130
    sys.stdout.write("\n")
    return 0