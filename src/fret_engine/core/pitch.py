"""
Pitch class primitive.

PitchClass represents the 12 chromatic pitches (octave-independent) and
owns the modular arithmetic every other type builds on.
"""

from __future__ import annotations

from enum import IntEnum

from fret_engine.constants import (
    MIDDLE_C_OCTAVE,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from fret_engine.errors import InvalidArgumentError

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# Unicode accidentals are folded onto their ASCII spellings before lookup
_ACCIDENTALS = str.maketrans({"♯": "#", "♭": "b"})


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Ordering follows scientific pitch notation: C is the lowest pitch
    class in an octave and B the highest. Ordering never wraps; only
    transposition does.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def sharpen(self, semitones: int) -> tuple[PitchClass, int]:
        """
        Raise by a number of semitones.

        Args:
            semitones: Any signed offset, including multiples of an octave

        Returns:
            (pitch class, octave shift) where the shift counts the octave
            boundaries crossed. Floored division keeps the shift negative
            for descending offsets: B.sharpen(1) is (C, 1) and
            C.sharpen(-1) is (B, -1).
        """
        octave_shift, index = divmod(self.value + semitones, SEMITONES_PER_OCTAVE)
        return PitchClass(index), octave_shift

    def flatten(self, semitones: int) -> tuple[PitchClass, int]:
        """Lower by a number of semitones. Same as sharpen(-semitones)."""
        return self.sharpen(-semitones)

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones, discarding the octave shift."""
        return self.sharpen(semitones)[0]

    def to_midi(self, octave: int = MIDDLE_C_OCTAVE) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * SEMITONES_PER_OCTAVE

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % SEMITONES_PER_OCTAVE)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db' or 'D♭'."""
        name = name.strip().translate(_ACCIDENTALS)

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise InvalidArgumentError(ErrorMessages.UNKNOWN_PITCH_CLASS.format(name=name))
