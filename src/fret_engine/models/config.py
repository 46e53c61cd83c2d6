"""
Configuration models for strings.

Configs are plain data (note text and fret counts) validated by pydantic
and turned into live InstrumentString objects on demand.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from fret_engine.core.instrument_string import InstrumentString
from fret_engine.core.note import Note


class StringConfig(BaseModel):
    """A single string: its open note and optional fret count."""

    root: str = Field(..., description="Open-string note, e.g. 'E2' or 'A'")
    last_position: int | None = Field(
        default=None,
        ge=0,
        description="Highest playable fret (None = unbounded)",
    )

    @field_validator("root")
    @classmethod
    def _root_is_note(cls, value: str) -> str:
        # InvalidArgumentError is a ValueError, which pydantic reports as a validation error
        Note.parse(value)
        return value.strip()

    @property
    def root_note(self) -> Note:
        """Parsed open-string note."""
        return Note.parse(self.root)

    def build(self) -> InstrumentString:
        """Create the string described by this config."""
        return InstrumentString(self.root_note, last_position=self.last_position)


class StringSetConfig(BaseModel):
    """A named set of strings, listed from first to last."""

    name: str = Field("untitled", description="Name of the string set")
    description: str = Field("", description="Human-readable description")
    strings: list[StringConfig] = Field(default_factory=list, description="String configs")

    def build_strings(self) -> list[InstrumentString]:
        """Create one InstrumentString per config, in order."""
        return [string.build() for string in self.strings]
