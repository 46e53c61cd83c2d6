"""
InstrumentString - a tunable string on a fretted instrument.

Positions are frets counted in semitones from the open string. Position 0
sounds the root note; position n sounds the root sharpened by n.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from functools import total_ordering

from fret_engine.constants import SEMITONES_PER_OCTAVE, ErrorMessages, Ordering
from fret_engine.core.note import Note
from fret_engine.errors import (
    IncomparableNotesError,
    InvalidArgumentError,
    InvalidPositionError,
    NoSuchNoteError,
)

logger = logging.getLogger(__name__)


@total_ordering
class InstrumentString:
    """
    A physical string whose tuning can change while it stays the same string.

    Holds the root (open) note and an optional last fret. Every pitch lookup
    is delegated to Note, so strings with octave-less roots yield octave-less
    notes.

    Mutable and therefore unhashable. Not safe for concurrent retuning.

    Examples:
        InstrumentString(Note(PitchClass.E, 2)) = low E string, unbounded
        InstrumentString(Note(PitchClass.A, 2), last_position=22) = 22-fret A string
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, root_note: Note, last_position: int | None = None) -> None:
        """
        Create a string.

        Args:
            root_note: Note sounded by the open string
            last_position: Highest playable fret, or None for no limit

        Raises:
            InvalidArgumentError: root_note is missing or last_position is negative
        """
        if last_position is not None and last_position < 0:
            raise InvalidArgumentError(
                ErrorMessages.NEGATIVE_LAST_POSITION.format(last_position=last_position)
            )
        self.root_note = root_note
        self._last_position = last_position

    @property
    def root_note(self) -> Note:
        """Note sounded at position 0."""
        return self._root_note

    @root_note.setter
    def root_note(self, note: Note) -> None:
        if note is None:
            raise InvalidArgumentError(ErrorMessages.MISSING_NOTE)
        if not isinstance(note, Note):
            raise InvalidArgumentError(ErrorMessages.NOT_A_NOTE.format(type_name=type(note).__name__))
        self._root_note = note

    @property
    def last_position(self) -> int | None:
        """Highest playable fret (None = unbounded)."""
        return self._last_position

    # --- Tuning ---

    def sharpen(self, semitones: int) -> None:
        """Tune the string up by a number of semitones."""
        retuned = self._root_note.sharpened(semitones)
        logger.debug("Retuned string %s -> %s", self._root_note, retuned)
        self._root_note = retuned

    def flatten(self, semitones: int) -> None:
        """Tune the string down by a number of semitones."""
        retuned = self._root_note.flattened(semitones)
        logger.debug("Retuned string %s -> %s", self._root_note, retuned)
        self._root_note = retuned

    # --- Positions ---

    def is_valid_position(self, position: int) -> bool:
        """True if the position is a fret on this string."""
        if position < 0:
            return False
        return self._last_position is None or position <= self._last_position

    def _check_position(self, position: int) -> None:
        if not self.is_valid_position(position):
            raise InvalidPositionError(
                ErrorMessages.INVALID_POSITION.format(position=position, string=self),
                position,
            )

    def note_at(self, position: int) -> Note:
        """
        Get the note sounded at a fret position.

        Raises:
            InvalidPositionError: position is negative or past the last fret
        """
        self._check_position(position)
        return self._root_note.sharpened(position)

    def notes_in_range(self, start: int, end: int | None = None) -> Iterator[Note]:
        """
        Lazily yield the notes from start to end, inclusive.

        notes_in_range(end) is shorthand for notes_in_range(0, end).
        Bounds are checked immediately. The root note is read when iteration
        starts and held for the rest of that iteration, so retuning between
        this call and the first next() is reflected, but retuning mid-way
        is not.

        Raises:
            InvalidPositionError: either bound is not a valid position
            InvalidArgumentError: start is after end
        """
        if end is None:
            start, end = 0, start

        self._check_position(start)
        self._check_position(end)
        if start > end:
            raise InvalidArgumentError(ErrorMessages.REVERSED_RANGE.format(start=start, end=end))

        return self._iter_notes(start, end)

    def _iter_notes(self, start: int, end: int) -> Iterator[Note]:
        root = self._root_note
        for position in range(start, end + 1):
            yield root.sharpened(position)

    def position_of(self, note: Note) -> int:
        """
        Get the lowest fret position that sounds a note.

        For an octave-less string any octave-less note can be found within
        the first octave of frets.

        Raises:
            InvalidArgumentError: note is None or not a Note
            IncomparableNotesError: note and root disagree on having an octave
            NoSuchNoteError: note is below the root or past the last fret
        """
        position = self._root_note.semitone_distance(note)
        if not self._root_note.has_octave:
            position %= SEMITONES_PER_OCTAVE

        if not self.is_valid_position(position):
            raise NoSuchNoteError(ErrorMessages.NOTE_NOT_ON_STRING.format(note=note, string=self))
        return position

    def has_note(self, note: Note) -> bool:
        """
        True if some valid position sounds the note.

        Notes below the root, past the last fret, or disagreeing with the
        root on having an octave are simply absent.

        Raises:
            InvalidArgumentError: note is None or not a Note
        """
        try:
            self.position_of(note)
        except (NoSuchNoteError, IncomparableNotesError):
            return False
        return True

    # --- Equality and ordering (delegated to the root note) ---

    def equals(self, other: object) -> bool:
        """True if other is a string tuned to the same root note."""
        if not isinstance(other, InstrumentString):
            return False
        return self._root_note.equals(other._root_note)

    def compare(self, other: InstrumentString | None, ignore_octave: bool = False) -> Ordering:
        """
        Three-way comparison of root notes.

        Raises:
            InvalidArgumentError: other is not an InstrumentString
        """
        if other is None:
            return Ordering.GREATER
        if not isinstance(other, InstrumentString):
            raise InvalidArgumentError(
                ErrorMessages.NOT_A_STRING.format(type_name=type(other).__name__)
            )
        return self._root_note.compare(other._root_note, ignore_octave=ignore_octave)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InstrumentString):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: InstrumentString) -> bool:
        if not isinstance(other, InstrumentString):
            return NotImplemented
        return self.compare(other) == Ordering.LESS

    def __str__(self) -> str:
        return f"InstrumentString with root note {self._root_note}"

    def __repr__(self) -> str:
        if self._last_position is None:
            return f"InstrumentString({self._root_note!r})"
        return f"InstrumentString({self._root_note!r}, last_position={self._last_position})"
