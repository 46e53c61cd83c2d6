"""
fret-engine - twelve-tone pitch arithmetic for fretted strings.
"""

from fret_engine.constants import Ordering
from fret_engine.core import InstrumentString, Note, PitchClass
from fret_engine.errors import (
    FretEngineError,
    IncomparableNotesError,
    InvalidArgumentError,
    InvalidPositionError,
    NoSuchNoteError,
)

__all__ = [
    # Core
    "PitchClass",
    "Note",
    "InstrumentString",
    "Ordering",
    # Errors
    "FretEngineError",
    "InvalidArgumentError",
    "InvalidPositionError",
    "IncomparableNotesError",
    "NoSuchNoteError",
]
