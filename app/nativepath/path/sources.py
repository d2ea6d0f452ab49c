"""Source descriptions for path construction.

Every value a path can be built from is first classified into one of a
closed set of source variants, then turned into native text. Native text
is copied verbatim; byte-oriented sources go through a Converter.

Variants:
- NativeText: a str, copied verbatim (embedded NULs preserved)
- EncodedBytes: bytes-like data, decoded (embedded NULs preserved)
- CharRange: a materialized iterable of 1-char strings or of byte values
- NullTerminated: str or bytes whose copy stops at the first NUL
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from nativepath.core.errors import EncodingError
from nativepath.encoding.converter import Converter, get_converter

if TYPE_CHECKING:
    from nativepath.path.base import BasePath

NUL = "\0"


@dataclass(frozen=True, slots=True)
class NativeText:
    """Text already in native form.

    Attributes:
        text: The native text.
    """

    text: str


@dataclass(frozen=True, slots=True)
class EncodedBytes:
    """Bytes in some encoding, decoded through a converter.

    Attributes:
        data: The encoded bytes.
        converter: Converter to decode with (None = resolve at conversion time).
    """

    data: bytes
    converter: Converter | None = None


@dataclass(frozen=True, slots=True)
class CharRange:
    """A range of characters of either width.

    Attributes:
        chars: The materialized items, all 1-char strings or all ints.
        converter: Converter used when the items are byte values.
    """

    chars: tuple[str, ...] | tuple[int, ...]
    converter: Converter | None = None

    @classmethod
    def of(cls, items: Iterable[str] | Iterable[int], converter: Converter | None = None) -> CharRange:
        """Materialize an iterable into a CharRange."""
        return cls(tuple(items), converter)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class NullTerminated:
    """A C-style string; only the part before the first NUL is used.

    Attributes:
        buffer: Native text or encoded bytes.
        converter: Converter used when the buffer is bytes.
    """

    buffer: str | bytes
    converter: Converter | None = None


PathSource = Union[NativeText, EncodedBytes, CharRange, NullTerminated]

# Anything accepted where a path source is expected
SourceLike = Union[
    "BasePath",
    PathSource,
    str,
    bytes,
    bytearray,
    memoryview,
    "os.PathLike[str]",
    "os.PathLike[bytes]",
    Iterable[str],
    Iterable[int],
]

_SOURCE_TYPES = (NativeText, EncodedBytes, CharRange, NullTerminated)


def describe_source(value: SourceLike) -> PathSource:
    """Classify a raw value into a source variant.

    Args:
        value: A path, source variant, str, bytes-like, os.PathLike or
            iterable of characters.

    Returns:
        The matching source variant.

    Raises:
        TypeError: If the value cannot describe a path.
    """
    from nativepath.path.base import BasePath

    if isinstance(value, _SOURCE_TYPES):
        return value
    if isinstance(value, BasePath):
        return NativeText(value.native)
    if isinstance(value, str):
        return NativeText(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return EncodedBytes(bytes(value))
    if isinstance(value, os.PathLike):
        return describe_source(os.fspath(value))
    if isinstance(value, Iterable):
        return CharRange.of(value)
    msg = f"Cannot build a path from {type(value).__name__}"
    raise TypeError(msg)


def _chars_to_native(source: CharRange, converter: Converter | None) -> str:
    chars = source.chars
    if not chars:
        return ""
    if all(isinstance(c, str) for c in chars):
        return "".join(chars)  # type: ignore[arg-type]
    if all(isinstance(c, int) and not isinstance(c, bool) for c in chars):
        try:
            data = bytes(chars)  # type: ignore[arg-type]
        except ValueError as e:
            raise EncodingError(f"Byte value out of range in character range: {e}") from e
        return get_converter(source.converter or converter).decode(data)
    msg = "Character range must contain only str items or only int items"
    raise TypeError(msg)


def to_native(value: SourceLike, converter: Converter | None = None) -> str:
    """Convert a source to native path text.

    The converter is only resolved for byte-oriented sources, so native
    text never depends on converter configuration.

    Args:
        value: Anything accepted by describe_source().
        converter: Converter for byte-oriented sources, unless the source
            carries its own.

    Returns:
        Native text.

    Raises:
        TypeError: If the value cannot describe a path.
        EncodingError: If byte-oriented data cannot be decoded.
        ConfigurationError: If the default converter is needed and broken.
    """
    source = describe_source(value)
    if isinstance(source, NativeText):
        return source.text
    if isinstance(source, EncodedBytes):
        if not source.data:
            return ""
        return get_converter(source.converter or converter).decode(source.data)
    if isinstance(source, CharRange):
        return _chars_to_native(source, converter)

    buffer = source.buffer
    if isinstance(buffer, str):
        return buffer.split(NUL, 1)[0]
    data = bytes(buffer).split(b"\0", 1)[0]
    if not data:
        return ""
    return get_converter(source.converter or converter).decode(data)
