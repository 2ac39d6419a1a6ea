"""Dinosaur runner games for a simulated 16x2 character LCD and 4x3 matrix keypad."""

__version__ = "0.1.0"
__all__ = ["game", "keypad", "lcd", "main", "senha", "shared"]