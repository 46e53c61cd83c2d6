"""
Configuration loading.
"""

from fret_engine.config.loader import load_string_set, parse_string_set

__all__ = [
    "load_string_set",
    "parse_string_set",
]
