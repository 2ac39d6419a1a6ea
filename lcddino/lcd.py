"""Model of a two-row character LCD driven through its command set."""

from enum import Enum

from lcddino.shared import LCD_LEN, delay_ms

ROW_LENGTH = 40
ROW_BASES = (0x00, 0x40)
CGRAM_SIZE = 64

DINOSAUR_MAP = (0x04, 0x0E, 0x1F, 0x15, 0x1F, 0x04, 0x0A, 0x11)
CACTUS_MAP = (0x00, 0x04, 0x05, 0x05, 0x17, 0x1C, 0x04, 0x04)
BIRD_MAP = (0x00, 0x04, 0x09, 0x17, 0x04, 0x02, 0x00, 0x00)


class _Target(Enum):
    DDRAM = "ddram"
    CGRAM = "cgram"


def get_bit(c, bit_number):
    """Return bit ``bit_number`` of a byte or single character."""
    value = ord(c) if isinstance(c, str) else c
    return (value >> bit_number) & 1


def _to_byte(value):
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        value = ord(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value {value} does not fit in a byte")
    return value


class Lcd:
    """A character display with display RAM, character-generator RAM and a cursor."""

    def __init__(self, delay=delay_ms, width=LCD_LEN):
        self._delay = delay
        self.width = width
        self.ddram = [bytearray(b" " * ROW_LENGTH) for _ in ROW_BASES]
        self.cgram = bytearray(CGRAM_SIZE)
        self.address = 0
        self._target = _Target.DDRAM
        self._shift = 0
        self.increment = True
        self.shift_on_write = False
        self.display_on = False
        self.cursor_on = False
        self.blink_on = False
        self.eight_bit = True
        self.two_lines = False

    # -- addressing -------------------------------------------------------

    def _cell(self):
        row = 1 if self.address >= ROW_BASES[1] else 0
        col = (self.address - ROW_BASES[row]) % ROW_LENGTH
        return row, col

    def _step_address(self, delta):
        row, col = self._cell()
        linear = (row * ROW_LENGTH + col + delta) % (ROW_LENGTH * len(ROW_BASES))
        row, col = divmod(linear, ROW_LENGTH)
        self.address = ROW_BASES[row] + col

    def _write(self, value):
        if self._target is _Target.CGRAM:
            self.cgram[self.address] = value
            step = 1 if self.increment else -1
            self.address = (self.address + step) % CGRAM_SIZE
            return
        row, col = self._cell()
        self.ddram[row][col] = value
        self._step_address(1 if self.increment else -1)
        if self.shift_on_write:
            self._shift += 1 if self.increment else -1

    def _execute(self, cmd):
        if cmd & 0x80:
            self._target = _Target.DDRAM
            self.address = cmd & 0x7F
        elif cmd & 0x40:
            self._target = _Target.CGRAM
            self.address = cmd & 0x3F
        elif cmd & 0x20:
            self.eight_bit = bool(cmd & 0x10)
            self.two_lines = bool(cmd & 0x08)
        elif cmd & 0x10:
            right = bool(cmd & 0x04)
            if cmd & 0x08:
                self._shift += -1 if right else 1
            else:
                self._step_address(1 if right else -1)
        elif cmd & 0x08:
            self.display_on = bool(cmd & 0x04)
            self.cursor_on = bool(cmd & 0x02)
            self.blink_on = bool(cmd & 0x01)
        elif cmd & 0x04:
            self.increment = bool(cmd & 0x02)
            self.shift_on_write = bool(cmd & 0x01)
        elif cmd & 0x02:
            self._target = _Target.DDRAM
            self.address = 0
            self._shift = 0
        elif cmd & 0x01:
            for row in self.ddram:
                row[:] = b" " * ROW_LENGTH
            self._target = _Target.DDRAM
            self.address = 0
            self._shift = 0
            self.increment = True

    # -- public interface -------------------------------------------------

    def command(self, cmd):
        """Send an instruction byte to the controller."""
        value = _to_byte(cmd)
        for ms in (1, 2, 1, 5):
            self._delay(ms)
        self._execute(value)

    def init(self):
        """Bring the display up in 4-bit, two-line mode with a blank screen."""
        self._delay(50)
        for cmd in (0x02, 0x28, 0x0C, 0x06, 0x01, 0x80):
            self.command(cmd)

    def clear(self):
        """Blank the display and home the cursor."""
        self.command(0x01)

    def send_char(self, c):
        """Write one character (or raw byte) at the current address."""
        value = _to_byte(c)
        for ms in (1, 2, 1, 2):
            self._delay(ms)
        self._write(value)

    def send_string(self, text):
        """Write characters up to the first NUL."""
        terminator = b"\0" if isinstance(text, (bytes, bytearray)) else "\0"
        for ch in text.split(terminator, 1)[0]:
            self.send_char(ch)

    def send_string_xy(self, row, pos, text):
        """Write ``text`` starting at column ``pos`` of ``row`` (0 or 1)."""
        if row == 0:
            self.command((pos & 0x0F) | 0x80)
        elif row == 1:
            self.command((pos & 0x0F) | 0xC0)
        self.send_string(text)

    def go_to_position(self, row, pos):
        """Move the cursor; any row other than 0 means the second row."""
        base = 0x80 if row == 0 else 0xC0
        self.command((pos & 0x0F) | base)

    def create_custom_char(self, code, pattern):
        """Store an eight-row glyph under character code 0-7."""
        rows = list(pattern)
        if len(rows) != 8:
            raise ValueError(f"a glyph has 8 rows, got {len(rows)}")
        code &= 0x07
        self.command(0x40 | (code << 3))
        for bits in rows:
            self.send_char(bits)

    def define_custom_chars(self):
        """Load the dinosaur, cactus and bird glyphs as codes 1, 2 and 3."""
        self.create_custom_char(1, DINOSAUR_MAP)
        self.create_custom_char(2, CACTUS_MAP)
        self.create_custom_char(3, BIRD_MAP)
        self._delay(2)

    def lines(self):
        """Return the visible text of both rows."""
        return tuple(
            "".join(chr(row[(self._shift + i) % ROW_LENGTH]) for i in range(self.width))
            for row in self.ddram
        )