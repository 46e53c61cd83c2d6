"""
Constants and enums for the pitch engine.

No magic numbers - the twelve-tone system and MIDI anchors live here.
"""

from enum import IntEnum

# Twelve-tone equal temperament
SEMITONES_PER_OCTAVE = 12

# Scientific pitch notation anchors (C4 = middle C = MIDI 60)
MIDDLE_C_OCTAVE = 4
MIDI_MIDDLE_C = 60


class Ordering(IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left: int, right: int) -> "Ordering":
        """Compare two integers."""
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_PITCH_CLASS = "Unknown pitch class: '{name}'."
    UNPARSEABLE_NOTE = "Cannot parse note: '{text}'. Expected format like 'C#4', 'Eb' or 'A-1'."
    MISSING_PITCH_CLASS = "A note requires a pitch class."
    INVALID_PITCH_CLASS = "Invalid pitch class: {value!r}."
    INVALID_OCTAVE = "Octave must be an int or None, got {value!r}."
    NOT_A_NOTE = "Expected a Note, got {type_name}."
    MISSING_NOTE = "A note is required, got None."
    MIXED_OCTAVES = "Cannot measure between {first} and {second}: only one has an octave."
    NO_OCTAVE_FOR_MIDI = "Note {note} has no octave and cannot be converted to MIDI."
    NEGATIVE_LAST_POSITION = "Last position must be >= 0, got {last_position}."
    INVALID_POSITION = "Position {position} is not valid on {string}."
    REVERSED_RANGE = "Range start {start} is after range end {end}."
    NOTE_NOT_ON_STRING = "Note {note} cannot be played on {string}."
    NOT_A_STRING = "Expected an InstrumentString, got {type_name}."
    INVALID_CONFIG = "Invalid string configuration in {source}: {reason}"
