"""
Tests for string configuration models and the YAML loader.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from fret_engine import InvalidArgumentError, Note, PitchClass
from fret_engine.config import load_string_set, parse_string_set
from fret_engine.models import StringConfig, StringSetConfig


class TestStringConfig:
    """Tests for StringConfig model."""

    def test_build(self) -> None:
        """Builds a string with the parsed root and fret count."""
        config = StringConfig(root="E2", last_position=22)
        string = config.build()
        assert string.root_note == Note(PitchClass.E, 2)
        assert string.last_position == 22

    def test_defaults(self) -> None:
        """last_position defaults to unbounded."""
        config = StringConfig(root=" Bb ")
        assert config.root == "Bb"
        assert config.last_position is None
        assert config.root_note == Note(PitchClass.As)

    def test_invalid_root(self) -> None:
        """Unparseable roots fail validation."""
        with pytest.raises(ValidationError):
            StringConfig(root="H2")

    def test_negative_last_position(self) -> None:
        """Negative fret counts fail validation."""
        with pytest.raises(ValidationError):
            StringConfig(root="E2", last_position=-1)


class TestStringSetConfig:
    """Tests for StringSetConfig model."""

    def test_build_strings(self) -> None:
        """Builds strings in order."""
        config = StringSetConfig(
            name="ukulele",
            strings=[StringConfig(root="G4"), StringConfig(root="C4"), StringConfig(root="E4")],
        )
        roots = [string.root_note for string in config.build_strings()]
        assert roots == [Note(PitchClass.G, 4), Note(PitchClass.C, 4), Note(PitchClass.E, 4)]

    def test_empty(self) -> None:
        """An empty set builds no strings."""
        config = StringSetConfig()
        assert config.name == "untitled"
        assert config.build_strings() == []


class TestLoader:
    """Tests for YAML loading."""

    def test_load(self, string_set_path: Path) -> None:
        """Loads name, description and strings from YAML."""
        config = load_string_set(string_set_path)
        assert config.name == "bass-standard"
        assert len(config.strings) == 4
        strings = config.build_strings()
        assert strings[0].root_note == Note(PitchClass.E, 1)
        assert strings[0].last_position == 20
        assert strings[3].last_position is None
        assert strings[0].note_at(5) == strings[1].root_note

    def test_load_str_path(self, string_set_path: Path) -> None:
        """Accepts plain string paths."""
        assert load_string_set(str(string_set_path)).name == "bass-standard"

    def test_missing_file(self, temp_dir: Path) -> None:
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_string_set(temp_dir / "nope.yaml")

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """Malformed YAML raises InvalidArgumentError."""
        path = temp_dir / "broken.yaml"
        path.write_text("strings: [root: E2\n")
        with pytest.raises(InvalidArgumentError):
            load_string_set(path)

    def test_invalid_string(self, temp_dir: Path) -> None:
        """Bad string entries raise InvalidArgumentError naming the file."""
        path = temp_dir / "bad.yaml"
        path.write_text("strings:\n  - root: X9\n")
        with pytest.raises(InvalidArgumentError, match="bad.yaml"):
            load_string_set(path)

    def test_parse_non_mapping(self) -> None:
        """Top-level lists are rejected."""
        with pytest.raises(InvalidArgumentError):
            parse_string_set(["E2", "A2"])  # type: ignore[arg-type]

    def test_parse_mapping(self) -> None:
        """Already-loaded data validates directly."""
        config = parse_string_set({"strings": [{"root": "D3", "last_position": 5}]})
        assert config.strings[0].build().note_at(5) == Note(PitchClass.G, 3)
