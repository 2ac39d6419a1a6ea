"""Model of a 4x3 matrix keypad scanned row by row."""

import threading

from lcddino.shared import delay_ms

KEYMAP = (
    ("1", "2", "3"),
    ("4", "5", "6"),
    ("7", "8", "9"),
    ("*", "0", "#"),
)
ROWS = len(KEYMAP)
COLS = len(KEYMAP[0])


class Keypad:
    """Keys are pressed with :meth:`press` and read back with :meth:`get_key`."""

    def __init__(self, delay=delay_ms, debounce_ms=10):
        self._delay = delay
        self.debounce_ms = debounce_ms
        self._pressed = set()
        self._lock = threading.Lock()

    def press(self, row, col):
        """Hold down the key at ``row``, ``col``."""
        if not (0 <= row < ROWS and 0 <= col < COLS):
            raise ValueError(f"no key at row {row}, column {col}")
        with self._lock:
            self._pressed.add((row, col))

    def release(self):
        """Let go of every key."""
        with self._lock:
            self._pressed.clear()

    def get_key(self):
        """Scan the rows in order and return the first key down, or None.

        A key that is read counts as released afterwards.
        """
        for row, keys in enumerate(KEYMAP):
            with self._lock:
                if not any(r == row for r, _ in self._pressed):
                    continue
            self._delay(self.debounce_ms)
            with self._lock:
                for col, key in enumerate(keys):
                    if (row, col) in self._pressed:
                        self._pressed.discard((row, col))
                        return key
        return None