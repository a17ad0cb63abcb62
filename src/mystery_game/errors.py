"""Exceptions raised while building or setting up a mystery game."""


class MysteryGameError(Exception):
    """Base class for mystery game errors."""


class InvalidEntityError(MysteryGameError, ValueError):
    """An entity was constructed with an unusable name."""


class GameSetupError(MysteryGameError, ValueError):
    """The game could not be set up (empty catalog, repeated setup, ...)."""
