"""Mystery Game: a text-driven Clue-style deduction game."""

__version__ = "0.1.0"
