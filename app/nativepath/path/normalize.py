"""Lexical normalization.

Purely textual: the filesystem is never consulted, so symlinks are not
taken into account when "name/.." pairs are removed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from nativepath.path import decompose
from nativepath.path.compare import relative_elements
from nativepath.path.decompose import DOT, DOT_DOT

if TYPE_CHECKING:
    from nativepath.path.base import BasePath

P = TypeVar("P", bound="BasePath")


def lexically_normal(path: P) -> P:
    """Return the lexically normal form of a path.

    Rules:
    - every separator is spelled as the preferred separator, runs collapse
    - "." elements are dropped
    - "name/.." pairs are removed; ".." directly below a root-directory is dropped
    - a trailing separator is kept when the last element was "." or a removed ".."
    - an empty relative result becomes "."

    Args:
        path: Path to normalize.

    Returns:
        A new path of the same type.
    """
    rules, s = path.rules, path.native
    if not s:
        return type(path)()

    sep = rules.preferred_separator
    root_name = rules.to_preferred(decompose.root_name(rules, s))
    has_root_dir = decompose.root_directory_pos(rules, s) is not None

    parts: list[str] = []
    directory_like = False
    for element in relative_elements(path):
        directory_like = False
        if element == DOT:
            directory_like = True
        elif element == DOT_DOT:
            if parts and parts[-1] != DOT_DOT:
                parts.pop()
                directory_like = True
            elif not has_root_dir:
                parts.append(DOT_DOT)
        else:
            parts.append(element)

    result = root_name + (sep if has_root_dir else "") + sep.join(parts)
    if directory_like and parts:
        result += sep
    return type(path).from_native(result or DOT)
