"""
Note primitive - a pitch class with an optional octave.

A Note with an octave is a concrete pitch (C4, A-1). A Note without one is
an abstract pitch class standing in for every octave at once. The two kinds
mix in a single total order: octave-less notes sort before all others.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

from fret_engine.constants import SEMITONES_PER_OCTAVE, ErrorMessages, Ordering
from fret_engine.core.pitch import PitchClass
from fret_engine.errors import IncomparableNotesError, InvalidArgumentError

# Letter with optional accidental (or enum-style 's'), then an optional signed octave
_NOTE_PATTERN = re.compile(r"\s*([A-Ga-g](?:#|b|♯|♭|s)?)\s*(-?\d+)?\s*")


def _require_note(value: object) -> Note:
    if value is None:
        raise InvalidArgumentError(ErrorMessages.MISSING_NOTE)
    if not isinstance(value, Note):
        raise InvalidArgumentError(ErrorMessages.NOT_A_NOTE.format(type_name=type(value).__name__))
    return value


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class Note:
    """
    An immutable pitch: PitchClass plus optional scientific-pitch octave.

    Transposition always builds a new Note. Equality requires the same
    pitch class and the same octave, so Note(C) != Note(C, 4).

    Examples:
        Note(PitchClass.A, 4) = A4 (440 Hz)
        Note(PitchClass.E, 2) = low E on a guitar
        Note(PitchClass.Fs) = any F#
    """

    pitch_class: PitchClass
    octave: int | None = None

    def __post_init__(self) -> None:
        if self.pitch_class is None:
            raise InvalidArgumentError(ErrorMessages.MISSING_PITCH_CLASS)
        if not isinstance(self.pitch_class, PitchClass):
            if isinstance(self.pitch_class, bool):
                raise InvalidArgumentError(
                    ErrorMessages.INVALID_PITCH_CLASS.format(value=self.pitch_class)
                )
            try:
                object.__setattr__(self, "pitch_class", PitchClass(self.pitch_class))
            except ValueError as e:
                raise InvalidArgumentError(
                    ErrorMessages.INVALID_PITCH_CLASS.format(value=self.pitch_class)
                ) from e
        if self.octave is not None and (
            isinstance(self.octave, bool) or not isinstance(self.octave, int)
        ):
            raise InvalidArgumentError(ErrorMessages.INVALID_OCTAVE.format(value=self.octave))

    @property
    def has_octave(self) -> bool:
        """True if this note is pinned to an octave."""
        return self.octave is not None

    # --- Transposition ---

    def sharpened(self, semitones: int) -> Note:
        """Return a new Note raised by the given number of semitones."""
        pitch_class, octave_shift = self.pitch_class.sharpen(semitones)
        return self._shifted(pitch_class, octave_shift)

    def flattened(self, semitones: int) -> Note:
        """Return a new Note lowered by the given number of semitones."""
        pitch_class, octave_shift = self.pitch_class.flatten(semitones)
        return self._shifted(pitch_class, octave_shift)

    def _shifted(self, pitch_class: PitchClass, octave_shift: int) -> Note:
        if self.octave is None:
            return Note(pitch_class)
        return Note(pitch_class, self.octave + octave_shift)

    def semitone_distance(self, other: Note) -> int:
        """
        Signed semitones needed to transpose this note into another.

        Both notes must agree on having an octave. Between octave-less
        notes the result is the pitch-class difference (-11 to 11).

        Raises:
            InvalidArgumentError: other is None or not a Note
            IncomparableNotesError: exactly one of the notes has an octave
        """
        other = _require_note(other)
        pitch_delta = other.pitch_class.value - self.pitch_class.value

        if self.octave is not None and other.octave is not None:
            return (other.octave - self.octave) * SEMITONES_PER_OCTAVE + pitch_delta
        if self.octave is None and other.octave is None:
            return pitch_delta
        raise IncomparableNotesError(ErrorMessages.MIXED_OCTAVES.format(first=self, second=other))

    # --- Equality and ordering ---

    def equals(self, other: object) -> bool:
        """True if other is a Note with the same pitch class and octave. Never raises."""
        if not isinstance(other, Note):
            return False
        return self.pitch_class == other.pitch_class and self.octave == other.octave

    def compare(self, other: Note | None, ignore_octave: bool = False) -> Ordering:
        """
        Three-way comparison against another note.

        Rules, in order:
        - None sorts before every note, so comparing against it is GREATER
        - ignore_octave compares pitch classes only
        - two octave-bearing notes compare by octave, then pitch class
        - two octave-less notes compare by pitch class
        - an octave-less note sorts before an octave-bearing one

        Raises:
            InvalidArgumentError: other is not a Note
        """
        if other is None:
            return Ordering.GREATER
        other = _require_note(other)

        by_pitch = Ordering.of(self.pitch_class.value, other.pitch_class.value)
        if ignore_octave:
            return by_pitch

        if self.octave is not None and other.octave is not None:
            by_octave = Ordering.of(self.octave, other.octave)
            return by_octave if by_octave != Ordering.EQUAL else by_pitch
        if self.octave is None and other.octave is None:
            return by_pitch
        # Exactly one side is abstract
        return Ordering.LESS if self.octave is None else Ordering.GREATER

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.compare(other) == Ordering.LESS

    def __hash__(self) -> int:
        return hash((self.pitch_class, self.octave))

    # --- Conversion ---

    def to_midi(self) -> int:
        """
        Convert to MIDI note number (C4 = 60).

        Raises:
            IncomparableNotesError: the note has no octave
        """
        if self.octave is None:
            raise IncomparableNotesError(ErrorMessages.NO_OCTAVE_FOR_MIDI.format(note=self))
        return self.pitch_class.to_midi(self.octave)

    @classmethod
    def from_midi(cls, midi_note: int) -> Note:
        """Build an octave-bearing note from a MIDI note number."""
        octave, index = divmod(midi_note, SEMITONES_PER_OCTAVE)
        return cls(PitchClass(index), octave - 1)

    @classmethod
    def parse(cls, text: str) -> Note:
        """
        Parse a note like 'C#4', 'Db', 'E2', 'Bb-1' or 'F♯3'.

        A missing octave number yields an octave-less note.
        """
        match = _NOTE_PATTERN.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidArgumentError(ErrorMessages.UNPARSEABLE_NOTE.format(text=text))
        name, octave = match.groups()
        pitch_class = PitchClass.parse(name[0].upper() + name[1:])
        return cls(pitch_class, int(octave) if octave is not None else None)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name, with octave when present."""
        name = self.pitch_class.spell(prefer_flats)
        return name if self.octave is None else f"{name}{self.octave}"

    def __str__(self) -> str:
        return self.spell()

    def __repr__(self) -> str:
        if self.octave is None:
            return f"Note(PitchClass.{self.pitch_class.name})"
        return f"Note(PitchClass.{self.pitch_class.name}, {self.octave})"
