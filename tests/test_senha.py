import pytest

from lcddino.game import DinoStatus
from lcddino.keypad import Keypad
from lcddino.lcd import Lcd
from lcddino.senha import BIRD, CACTUS, DINO, SenhaGame, main, run_senha
from lcddino.shared import LCD_LEN


def _noop(ms):
    pass


class _KeyAfterGameOver:
    def __init__(self, lcd):
        self.lcd = lcd

    def get_key(self):
        return "#" if self.lcd.lines()[0].startswith("Game Over") else None


def test_initial_field():
    game = SenhaGame()
    assert game.top == " " * LCD_LEN
    assert game.bottom == DINO + " " * (LCD_LEN - 1)
    assert game.dino_status is DinoStatus.DOWN


def test_update_appends_on_bottom_for_row_zero():
    game = SenhaGame()
    assert game.update(CACTUS, 0) is False
    assert game.bottom[-1] == CACTUS
    assert game.bottom[0] == DINO
    assert game.top == " " * LCD_LEN


def test_update_appends_on_top_for_row_one():
    game = SenhaGame()
    assert game.update(BIRD, 1) is False
    assert game.top[-1] == BIRD
    assert game.bottom[-1] == " "


def test_items_scroll_left():
    game = SenhaGame()
    game.update(CACTUS, 0)
    game.update(" ", 0)
    assert game.bottom[-2] == CACTUS
    assert len(game.bottom) == LCD_LEN


def test_collision_with_cactus_when_down():
    bottom = DINO + CACTUS + " " * (LCD_LEN - 2)
    game = SenhaGame(bottom=bottom)
    assert game.update(" ", 0) is True
    assert game.bottom == bottom


def test_collision_with_bird_when_up():
    top = DINO + BIRD + " " * (LCD_LEN - 2)
    game = SenhaGame(top=top, bottom=" " * LCD_LEN, dino_status=DinoStatus.UP)
    assert game.update(" ", 0) is True
    assert game.top == top


def test_bird_does_not_hit_dino_on_ground():
    top = " " + BIRD + " " * (LCD_LEN - 2)
    game = SenhaGame(top=top)
    assert game.update(" ", 0) is False
    assert game.top[0] == BIRD


def test_toggle_alternates():
    game = SenhaGame()
    assert game.toggle_dino_status() is DinoStatus.UP
    assert game.toggle_dino_status() is DinoStatus.DOWN


def test_update_after_jump_moves_dino_to_top():
    game = SenhaGame()
    game.toggle_dino_status()
    game.update(" ", 0)
    assert game.top[0] == DINO
    assert DINO not in game.bottom


def test_bad_row_length_rejected():
    with pytest.raises(ValueError):
        SenhaGame(top="short")


def test_bad_item_rejected():
    with pytest.raises(ValueError):
        SenhaGame().update("ab", 0)


def test_run_stops_after_max_iterations():
    lcd = Lcd(delay=_noop)
    game, over = run_senha(lcd, Keypad(delay=_noop), 2)
    assert over is False
    assert lcd.lines() == (game.top, game.bottom)


def test_run_zero_iterations_shows_start():
    lcd = Lcd(delay=_noop)
    game, over = run_senha(lcd, Keypad(delay=_noop), 0)
    assert over is False
    assert lcd.lines() == (SenhaGame().top, SenhaGame().bottom)


def test_run_until_crash():
    lcd = Lcd(delay=_noop)
    game, over = run_senha(lcd, _KeyAfterGameOver(lcd), None)
    assert over is True
    assert lcd.lines()[0].startswith("Game Over")
    assert game.bottom[1] == CACTUS


def test_negative_iterations_rejected():
    with pytest.raises(ValueError):
        run_senha(Lcd(delay=_noop), Keypad(delay=_noop), -1)


def test_main_draws_field(capsys):
    assert main(["--max-iterations", "1"]) == 0
    out = capsys.readouterr().out
    assert DINO in out