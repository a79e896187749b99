class TimelineTriviaError(Exception):
    """Base class for errors raised outside the pure domain layer."""


class CatalogError(TimelineTriviaError):
    pass


class GameNotFoundError(TimelineTriviaError):
    pass


class GameOverError(TimelineTriviaError):
    pass
