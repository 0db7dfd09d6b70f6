"""Characters, weapons, a factory, a random roster and a terminal duel for a small battle game."""

__version__ = "0.1.0"