"""
Core pitch primitives.

These are the invariants everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11) and modular transposition
- Note: Pitch class plus optional octave, with distance and ordering
- InstrumentString: Root note plus fret positions measured in semitones
"""

from fret_engine.core.instrument_string import InstrumentString
from fret_engine.core.note import Note
from fret_engine.core.pitch import PitchClass

__all__ = [
    "PitchClass",
    "Note",
    "InstrumentString",
]
