"""Small 2D games and graphics demos built on pygame."""

__version__ = "0.1.0"