"""Path value type module.

This module provides the path classes, their element iterator, the
comparison primitives, platform rules, source descriptions and quoted
stream formatting.
"""

from nativepath.path.base import (
    BasePath,
    Path,
    PosixPath,
    WindowsPath,
    dot_dot_path,
    dot_path,
    swap,
)
from nativepath.path.compare import compare, hash_value, lexicographical_compare
from nativepath.path.iterator import PathIterator
from nativepath.path.quoting import quoted, read_path, unquoted, write_path
from nativepath.path.rules import NATIVE_RULES, POSIX_RULES, WINDOWS_RULES, Flavour, PathRules
from nativepath.path.sources import CharRange, EncodedBytes, NativeText, NullTerminated

__all__ = [
    "NATIVE_RULES",
    "POSIX_RULES",
    "WINDOWS_RULES",
    "BasePath",
    "CharRange",
    "EncodedBytes",
    "Flavour",
    "NativeText",
    "NullTerminated",
    "Path",
    "PathIterator",
    "PathRules",
    "PosixPath",
    "WindowsPath",
    "compare",
    "dot_dot_path",
    "dot_path",
    "hash_value",
    "lexicographical_compare",
    "quoted",
    "read_path",
    "swap",
    "unquoted",
    "write_path",
]
