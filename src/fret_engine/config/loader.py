"""
String set loader - reads string configurations from YAML.

Expected layout:

    name: guitar-standard
    description: Six-string standard tuning
    strings:
      - root: E2
        last_position: 22
      - root: A2
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fret_engine.constants import ErrorMessages
from fret_engine.errors import InvalidArgumentError
from fret_engine.models.config import StringSetConfig

logger = logging.getLogger(__name__)


def parse_string_set(data: dict[str, Any], source: str = "<data>") -> StringSetConfig:
    """
    Validate already-loaded config data.

    Args:
        data: Mapping as produced by yaml.safe_load
        source: Label used in error messages

    Raises:
        InvalidArgumentError: data is not a mapping or fails validation
    """
    if not isinstance(data, dict):
        raise InvalidArgumentError(
            ErrorMessages.INVALID_CONFIG.format(source=source, reason="expected a mapping")
        )
    try:
        return StringSetConfig.model_validate(data)
    except ValidationError as e:
        raise InvalidArgumentError(ErrorMessages.INVALID_CONFIG.format(source=source, reason=e)) from e


def load_string_set(path: Path | str) -> StringSetConfig:
    """
    Load a string set from a YAML file.

    Raises:
        FileNotFoundError: path does not exist
        InvalidArgumentError: the file is not valid YAML or fails validation
    """
    path = Path(path)
    logger.debug("Loading string set from %s", path)

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.exception("Failed to read string set %s", path)
        raise InvalidArgumentError(
            ErrorMessages.INVALID_CONFIG.format(source=path, reason=e)
        ) from e

    config = parse_string_set(data, source=str(path))
    logger.debug("Loaded string set '%s' with %d strings", config.name, len(config.strings))
    return config
