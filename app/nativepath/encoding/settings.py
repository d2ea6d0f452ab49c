"""Converter settings.

This module provides the settings model and loader for the default
encoding converter. Settings come from three layers, later ones winning:

1. Interpreter defaults (``sys.getfilesystemencoding()`` and
   ``sys.getfilesystemencodeerrors()``)
2. The ``[converter]`` table of ~/.config/nativepath/settings.toml
3. ``NATIVEPATH_ENCODING`` / ``NATIVEPATH_ENCODING_ERRORS`` environment variables

Settings are only read when a conversion first needs the default
converter, so a broken configuration surfaces as ConfigurationError at
that point rather than at import time.
"""

import codecs
import logging
import os
import sys
import tomllib
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from nativepath.core.errors import ConfigurationError
from nativepath.core.paths import get_settings_path

logger = logging.getLogger(__name__)

# Environment variables overriding the settings file
ENCODING_ENV_VAR = "NATIVEPATH_ENCODING"
ERRORS_ENV_VAR = "NATIVEPATH_ENCODING_ERRORS"

# TOML table holding converter settings
SETTINGS_TABLE = "converter"


class ConverterSettings(BaseModel):
    """Settings for the default encoding converter.

    Attributes:
        encoding: Codec name. If None, uses the interpreter's filesystem encoding.
        errors: Codec error handler. If None, uses the interpreter's
            filesystem error handler (``surrogateescape`` on POSIX).
    """

    model_config = ConfigDict(extra="forbid")

    encoding: Annotated[
        str | None,
        Field(description="Codec name (None = filesystem encoding)"),
    ] = None
    errors: Annotated[
        str | None,
        Field(description="Codec error handler (None = filesystem error handler)"),
    ] = None

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str | None) -> str | None:
        """Validate that the encoding names a known codec."""
        if v is None:
            return v
        try:
            codecs.lookup(v)
        except LookupError:
            msg = f"unknown encoding '{v}'"
            raise ValueError(msg) from None
        return v

    @field_validator("errors")
    @classmethod
    def validate_errors(cls, v: str | None) -> str | None:
        """Validate that the error handler is registered with codecs."""
        if v is None:
            return v
        try:
            codecs.lookup_error(v)
        except LookupError:
            msg = f"unknown error handler '{v}'"
            raise ValueError(msg) from None
        return v

    @property
    def effective_encoding(self) -> str:
        """Get the codec name to use, falling back to the filesystem encoding."""
        return self.encoding or sys.getfilesystemencoding()

    @property
    def effective_errors(self) -> str:
        """Get the error handler to use, falling back to the filesystem handler."""
        return self.errors or sys.getfilesystemencodeerrors()


def _read_settings_table(path: Path) -> dict[str, Any]:
    """Read the converter table from a TOML settings file.

    Args:
        path: Path to the settings file.

    Returns:
        The converter table, or an empty dict if the file does not exist.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or the
            converter entry is not a table.
    """
    if not path.exists():
        logger.debug("No settings file at %s, using defaults", path)
        return {}

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML syntax in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read settings {path}: {e}") from e

    table: object = data.get(SETTINGS_TABLE, {})
    if not isinstance(table, dict):
        msg = f"'{SETTINGS_TABLE}' in {path} must be a table"
        raise ConfigurationError(msg)
    logger.debug("Loaded converter settings from %s", path)
    return dict(table)


def load_settings(path: Path | None = None) -> ConverterSettings:
    """Load converter settings from file and environment.

    Args:
        path: Path to the settings file. If None, uses the default settings path.

    Returns:
        Validated ConverterSettings object.

    Raises:
        ConfigurationError: If the file is unreadable or the merged
            settings fail validation.
    """
    settings_path = path or get_settings_path()
    data = _read_settings_table(settings_path)

    for env_var, key in ((ENCODING_ENV_VAR, "encoding"), (ERRORS_ENV_VAR, "errors")):
        value = os.environ.get(env_var)
        if value is None:
            continue
        if not value.strip():
            logger.warning("Ignoring empty %s environment variable", env_var)
            continue
        logger.debug("Using %s=%s from environment", env_var, value)
        data[key] = value.strip()

    try:
        return ConverterSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid converter settings: {e}") from e
