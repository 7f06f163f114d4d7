"""Exceptions raised by the engine layer."""


class InvalidConfigError(ValueError):
    """The requested code length / alphabet can't satisfy the no-repeat rule."""


class ScoreParseError(ValueError):
    """A textual score (e.g. '2W1B') could not be understood in strict mode."""
