"""
Pydantic models for configuration data.
"""

from fret_engine.models.config import StringConfig, StringSetConfig

__all__ = [
    "StringConfig",
    "StringSetConfig",
]
