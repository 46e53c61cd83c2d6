"""
Exception taxonomy.

Every failure is a caller contract violation raised at the offending call.
Each error also subclasses the builtin that best describes it, so callers
can catch either the library type or the standard one.
"""


class FretEngineError(Exception):
    """Base class for all library errors."""


class InvalidArgumentError(FretEngineError, ValueError):
    """A required value was missing or of the wrong kind."""


class InvalidPositionError(FretEngineError, ValueError):
    """A fret position is outside the playable range of a string."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position


class IncomparableNotesError(FretEngineError, TypeError):
    """Exactly one of two notes has an octave."""


class NoSuchNoteError(FretEngineError, LookupError):
    """A note cannot be produced anywhere on a string."""
