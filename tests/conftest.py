"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def string_set_path(temp_dir: Path) -> Path:
    """YAML file describing a four-string bass."""
    path = temp_dir / "bass.yaml"
    path.write_text(
        "name: bass-standard\n"
        "description: Four-string bass in standard tuning\n"
        "strings:\n"
        "  - root: E1\n"
        "    last_position: 20\n"
        "  - root: A1\n"
        "    last_position: 20\n"
        "  - root: D2\n"
        "  - root: G2\n"
    )
    return path
