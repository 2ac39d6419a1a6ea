"""Playfield model for the two-row runner game."""

from dataclasses import dataclass
from enum import IntEnum

from lcddino.shared import LCD_LEN

DINO = "\x01"
CACTUS = "\x02"
BIRD = "\x03"
EMPTY = " "


class DinoStatus(IntEnum):
    """Which row the dinosaur occupies."""

    DOWN = 0
    UP = 1


def int_to_str(num):
    """Render a score the way the display shows it.

    Zero becomes ``"0"``, negative numbers render as an empty string and only
    the five least significant digits are kept.
    """
    if num == 0:
        return "0"
    if num < 0:
        return ""
    return str(num)[-5:]


def _check_item(item):
    if not isinstance(item, str) or len(item) != 1:
        raise ValueError(f"a playfield cell holds exactly one character, got {item!r}")


@dataclass
class Game:
    """The two display rows and the dinosaur's position."""

    top: str = EMPTY * LCD_LEN
    bottom: str = DINO + EMPTY * (LCD_LEN - 1)
    dino_status: DinoStatus = DinoStatus.DOWN

    def __post_init__(self):
        for name in ("top", "bottom"):
            if len(getattr(self, name)) != LCD_LEN:
                raise ValueError(f"{name} row must be {LCD_LEN} characters long")
        self.dino_status = DinoStatus(self.dino_status)

    def _lane(self, status):
        if status is DinoStatus.UP:
            return self.top, BIRD
        return self.bottom, CACTUS

    def update(self, new_item, row):
        """Scroll the field one cell left and append ``new_item``.

        A truthy ``row`` places the item on the bottom row, otherwise on the
        top row. Returns True when the dinosaur collides, leaving the field
        untouched.
        """
        _check_item(new_item)
        lane, obstacle = self._lane(self.dino_status)
        if lane[1] == obstacle:
            return True

        top = self.top[1:] + EMPTY
        bottom = self.bottom[1:] + EMPTY
        if self.dino_status is DinoStatus.UP:
            top = DINO + top[1:]
        else:
            bottom = DINO + bottom[1:]

        if row:
            bottom = bottom[:-1] + new_item
        else:
            top = top[:-1] + new_item

        self.top, self.bottom = top, bottom
        return False

    def set_dino_status(self, status):
        """Move the dinosaur to another row.

        Returns True (and leaves the status unchanged) when the target cell
        already holds that row's obstacle.
        """
        status = DinoStatus(status)
        lane, obstacle = self._lane(status)
        if lane[0] == obstacle:
            return True
        self.dino_status = status
        return False