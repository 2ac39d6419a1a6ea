"""Helpers shared by the display, keypad and game modules."""

import time

LCD_LEN = 16
"""Number of visible character cells on each display row."""


def delay_ms(ms):
    """Block for roughly ``ms`` milliseconds."""
    if ms < 0:
        raise ValueError(f"delay must not be negative, got {ms}")
    time.sleep(ms / 1000)