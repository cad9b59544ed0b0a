"""Custom exceptions. Every layer raises a subclass of GameError, so callers can catch a single top-level type."""


class GameError(Exception):
    """Base class for all errors raised by the application."""


class GameStateError(GameError):
    """The game is not in a state that allows the requested action (or the stored state cannot be understood)."""


class InvalidDiagramError(GameError):
    """A board diagram does not describe a valid checkers position."""


class InvalidRequestError(GameError):
    """Request data from the presentation layer failed validation."""


class RepositoryError(GameError):
    """Something went wrong looking up / storing a game."""
