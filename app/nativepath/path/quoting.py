"""Quoted stream formatting for paths.

Paths are written between double quotes, with the delimiter and the
escape character itself preceded by "&". Backslashes are written as is.
Reading reverses this exactly, so embedded spaces, quotes and ampersands
survive a write/read cycle.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, TextIO, TypeVar

if TYPE_CHECKING:
    from nativepath.path.base import BasePath

P = TypeVar("P", bound="BasePath")

DELIMITER = '"'
ESCAPE = "&"


def quoted(text: str, *, delimiter: str = DELIMITER, escape: str = ESCAPE) -> str:
    """Quote text, escaping the delimiter and the escape character.

    Example:
        >>> quoted('My "Docs"')
        '"My &"Docs&""'
    """
    parts = [delimiter]
    for ch in text:
        if ch == delimiter or ch == escape:
            parts.append(escape)
        parts.append(ch)
    parts.append(delimiter)
    return "".join(parts)


def read_quoted(stream: TextIO, *, delimiter: str = DELIMITER, escape: str = ESCAPE) -> str:
    """Read one quoted (or whitespace-delimited) token from a text stream.

    Leading whitespace is skipped. If the token does not start with the
    delimiter it runs to the next whitespace character, which is consumed.
    Otherwise characters are read up to the closing delimiter, with the
    escape character taking the following character literally. A missing
    closing delimiter ends the token at end of stream.

    Raises:
        EOFError: If the stream holds nothing but whitespace.
    """
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)
    if not ch:
        msg = "No path token before end of stream"
        raise EOFError(msg)

    chars: list[str] = []
    if ch != delimiter:
        while ch and not ch.isspace():
            chars.append(ch)
            ch = stream.read(1)
        return "".join(chars)

    while True:
        ch = stream.read(1)
        if not ch:
            break
        if ch == escape:
            ch = stream.read(1)
            if not ch:
                break
        elif ch == delimiter:
            break
        chars.append(ch)
    return "".join(chars)


def unquoted(text: str, *, delimiter: str = DELIMITER, escape: str = ESCAPE) -> str:
    """Parse the first quoted token of a string."""
    return read_quoted(io.StringIO(text), delimiter=delimiter, escape=escape)


def write_path(stream: TextIO, path: BasePath) -> None:
    """Write a path to a text stream in quoted form."""
    stream.write(quoted(path.string()))


def read_path(stream: TextIO, path_type: type[P] | None = None) -> P:
    """Read a quoted path from a text stream.

    Args:
        stream: Text stream positioned before the token.
        path_type: Path class to build (default: the native Path).

    Returns:
        The path read.

    Raises:
        EOFError: If the stream holds nothing but whitespace.
    """
    if path_type is None:
        from nativepath.path.base import Path

        path_type = Path  # type: ignore[assignment]
    return path_type.from_native(read_quoted(stream))  # type: ignore[union-attr]
