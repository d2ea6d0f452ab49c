"""Encoding conversion module.

This module provides the converter interface, the codec-backed converter,
converter resolution (explicit, context-scoped, process default) and the
settings the default converter is built from.
"""

from nativepath.encoding.converter import (
    CodecConverter,
    Converter,
    get_converter,
    get_default_converter,
    imbue,
    reload_converter,
    using_converter,
)
from nativepath.encoding.settings import ConverterSettings, load_settings

__all__ = [
    "CodecConverter",
    "Converter",
    "ConverterSettings",
    "get_converter",
    "get_default_converter",
    "imbue",
    "load_settings",
    "reload_converter",
    "using_converter",
]
