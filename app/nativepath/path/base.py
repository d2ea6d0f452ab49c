"""Filesystem path value type.

A path owns one native string and derives everything else from it on
demand. The buffer is never normalized behind the caller's back: the
separators and redundant separators it was built with are kept until an
explicit mutation changes them.

Paths are mutable values. In-place mutators (``assign``, ``append``,
``concat``, ``remove_filename``, ``replace_extension``, ``make_preferred``,
``clear``, ``swap``) return the path itself for chaining, while ``/`` and
``+`` return new paths. There is no internal locking: concurrent readers
are fine, concurrent writers to the same instance are not.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, ClassVar, Self, overload

from nativepath.encoding.converter import Converter, get_converter
from nativepath.path import decompose
from nativepath.path.compare import compare as compare_paths
from nativepath.path.compare import hash_value
from nativepath.path.decompose import DOT, DOT_DOT
from nativepath.path.iterator import PathIterator
from nativepath.path.normalize import lexically_normal
from nativepath.path.rules import NATIVE_RULES, POSIX_RULES, WINDOWS_RULES, PathRules
from nativepath.path.sources import (
    CharRange,
    EncodedBytes,
    NullTerminated,
    SourceLike,
    describe_source,
    to_native,
)


class BasePath:
    """Path value type parameterized by platform rules.

    Use PosixPath, WindowsPath, or Path (the flavour of the running
    interpreter); BasePath itself cannot be instantiated.

    Example:
        >>> p = PosixPath("/usr/local") / "bin"
        >>> p.parent_path(), p.filename()
        (PosixPath('/usr/local'), PosixPath('bin'))
    """

    __slots__ = ("_pathname",)

    rules: ClassVar[PathRules]
    preferred_separator: ClassVar[str]

    _pathname: str

    def __new__(cls, *args: Any, **kwargs: Any) -> Self:
        if cls is BasePath:
            msg = "BasePath is abstract; use PosixPath, WindowsPath or Path"
            raise TypeError(msg)
        return super().__new__(cls)

    def __init__(self, source: SourceLike | None = None, converter: Converter | None = None) -> None:
        """Initialize a path.

        Args:
            source: str (copied verbatim), bytes-like (decoded), another
                path, os.PathLike, iterable of characters, or a source
                variant. None gives the empty path.
            converter: Converter for byte-oriented sources.

        Raises:
            TypeError: If the source cannot describe a path.
            EncodingError: If byte-oriented data cannot be decoded.
        """
        self._pathname = "" if source is None else to_native(source, converter)

    # ----- construction -----

    @classmethod
    def from_native(cls, text: str) -> Self:
        """Build a path from native text without any conversion."""
        path = cls.__new__(cls)
        path._pathname = text
        return path

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview, converter: Converter | None = None) -> Self:
        """Build a path from encoded bytes; embedded NULs are preserved."""
        return cls(EncodedBytes(bytes(data), converter))

    @classmethod
    def from_chars(cls, chars: Any, converter: Converter | None = None) -> Self:
        """Build a path from an iterable of 1-char strings or byte values."""
        return cls(CharRange.of(chars, converter))

    @classmethod
    def from_c_string(cls, buffer: str | bytes, converter: Converter | None = None) -> Self:
        """Build a path from a NUL-terminated buffer; the copy stops at the first NUL."""
        return cls(NullTerminated(buffer, converter))

    # ----- assignment -----

    def assign(self, source: SourceLike, converter: Converter | None = None) -> Self:
        """Replace the contents with a new source.

        The new text is computed completely before the buffer is replaced,
        so the source may be derived from this path.
        """
        self._pathname = to_native(source, converter)
        return self

    def clear(self) -> None:
        self._pathname = ""

    def swap(self, other: BasePath) -> None:
        """Exchange buffers with another path in constant time."""
        self._pathname, other._pathname = other._pathname, self._pathname

    def copy(self) -> Self:
        return self.from_native(self._pathname)

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.copy()

    def __reduce__(self) -> tuple[Any, tuple[str]]:
        return (type(self).from_native, (self._pathname,))

    # ----- appends -----

    def _append_text(self, text: str) -> None:
        if not text:
            return
        rules = self.rules
        s = self._pathname
        if s and not rules.is_separator(s[-1]) and not (rules.drive_root_names and s[-1] == ":"):
            s += rules.preferred_separator
        if s and rules.is_separator(s[-1]) and rules.is_separator(text[0]):
            text = text[1:]
        self._pathname = s + text

    def append(self, source: SourceLike, converter: Converter | None = None) -> Self:
        """Append a segment, inserting a preferred separator where needed.

        No separator is inserted when this path is empty, already ends in
        a separator, or (Windows rules) ends in ":". If the joint would
        then hold two separators, the segment's leading one is dropped.
        An empty segment leaves the path unchanged.
        """
        self._append_text(to_native(source, converter))
        return self

    def __truediv__(self, other: SourceLike) -> Self:
        try:
            text = to_native(other)
        except TypeError:
            return NotImplemented
        result = self.copy()
        result._append_text(text)
        return result

    def __rtruediv__(self, other: SourceLike) -> Self:
        try:
            result = type(self)(other)
        except TypeError:
            return NotImplemented
        result._append_text(self._pathname)
        return result

    def __itruediv__(self, other: SourceLike) -> Self:
        return self.append(other)

    # ----- concatenation -----

    def concat(self, source: SourceLike, converter: Converter | None = None) -> Self:
        """Append raw text with no separator handling."""
        self._pathname += to_native(source, converter)
        return self

    def __add__(self, other: SourceLike) -> Self:
        try:
            text = to_native(other)
        except TypeError:
            return NotImplemented
        return self.from_native(self._pathname + text)

    def __radd__(self, other: SourceLike) -> Self:
        try:
            text = to_native(other)
        except TypeError:
            return NotImplemented
        return self.from_native(text + self._pathname)

    def __iadd__(self, other: SourceLike) -> Self:
        return self.concat(other)

    # ----- modifiers -----

    def remove_filename(self) -> Self:
        """Truncate the path to its parent path."""
        self._pathname = self._pathname[: decompose.parent_path_end(self.rules, self._pathname)]
        return self

    def replace_extension(self, new_extension: SourceLike = "", converter: Converter | None = None) -> Self:
        """Replace the extension of the filename.

        The current extension, if any, is removed. A non-empty replacement
        is then appended, with a leading "." added if it lacks one.
        """
        ext = decompose.extension(self.rules, self._pathname)
        s = self._pathname[: len(self._pathname) - len(ext)]
        replacement = to_native(new_extension, converter)
        if replacement:
            if not replacement.startswith(DOT):
                s += DOT
            s += replacement
        self._pathname = s
        return self

    def make_preferred(self) -> Self:
        """Spell every separator as the preferred separator."""
        self._pathname = self.rules.to_preferred(self._pathname)
        return self

    def lexically_normal(self) -> Self:
        """Return a lexically normalized copy (see nativepath.path.normalize)."""
        return lexically_normal(self)

    # ----- native format observers -----

    @property
    def native(self) -> str:
        """The native buffer, unconverted."""
        return self._pathname

    def __str__(self) -> str:
        return self._pathname

    def __fspath__(self) -> str:
        return self._pathname

    def __bytes__(self) -> bytes:
        return self.string(bytes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pathname!r})"

    @overload
    def string(self, target: type[str] = ..., *, converter: Converter | None = ...) -> str: ...

    @overload
    def string(self, target: type[bytes], *, converter: Converter | None = ...) -> bytes: ...

    def string(self, target: type[str] | type[bytes] = str, *, converter: Converter | None = None) -> str | bytes:
        """Return the native form as the requested string type.

        Args:
            target: str for the native text, bytes for the encoded form.
            converter: Converter used when target is bytes.

        Returns:
            The native text, or its encoding.

        Raises:
            EncodingError: If the text cannot be encoded.
            TypeError: If target is neither str nor bytes.
        """
        return _as_target(self._pathname, target, converter)

    # ----- generic format observers -----

    @overload
    def generic_string(self, target: type[str] = ..., *, converter: Converter | None = ...) -> str: ...

    @overload
    def generic_string(self, target: type[bytes], *, converter: Converter | None = ...) -> bytes: ...

    def generic_string(
        self, target: type[str] | type[bytes] = str, *, converter: Converter | None = None
    ) -> str | bytes:
        """Return the path with every separator spelled "/" as the requested type."""
        return _as_target(self.rules.to_generic(self._pathname), target, converter)

    # ----- decomposition -----

    def root_name(self) -> Self:
        return self.from_native(decompose.root_name(self.rules, self._pathname))

    def root_directory(self) -> Self:
        return self.from_native(decompose.root_directory(self.rules, self._pathname))

    def root_path(self) -> Self:
        return self.from_native(decompose.root_path(self.rules, self._pathname))

    def relative_path(self) -> Self:
        return self.from_native(decompose.relative_path(self.rules, self._pathname))

    def parent_path(self) -> Self:
        return self.from_native(decompose.parent_path(self.rules, self._pathname))

    def filename(self) -> Self:
        return self.from_native(decompose.filename(self.rules, self._pathname))

    def stem(self) -> Self:
        return self.from_native(decompose.stem(self.rules, self._pathname))

    def extension(self) -> Self:
        return self.from_native(decompose.extension(self.rules, self._pathname))

    # ----- queries -----

    def is_empty(self) -> bool:
        return not self._pathname

    def __bool__(self) -> bool:
        return bool(self._pathname)

    def has_root_path(self) -> bool:
        return self.has_root_name() or self.has_root_directory()

    def has_root_name(self) -> bool:
        return decompose.root_name_end(self.rules, self._pathname) > 0

    def has_root_directory(self) -> bool:
        return decompose.root_directory_pos(self.rules, self._pathname) is not None

    def has_relative_path(self) -> bool:
        return decompose.relative_path_start(self.rules, self._pathname) < len(self._pathname)

    def has_parent_path(self) -> bool:
        return decompose.parent_path_end(self.rules, self._pathname) > 0

    def has_filename(self) -> bool:
        return decompose.filename_start(self.rules, self._pathname) < len(self._pathname)

    def has_stem(self) -> bool:
        return bool(decompose.stem(self.rules, self._pathname))

    def has_extension(self) -> bool:
        return bool(decompose.extension(self.rules, self._pathname))

    def is_absolute(self) -> bool:
        return decompose.is_absolute(self.rules, self._pathname)

    def is_relative(self) -> bool:
        return not self.is_absolute()

    # ----- iteration -----

    def begin(self) -> PathIterator[Self]:
        return PathIterator(self, 0)

    def end(self) -> PathIterator[Self]:
        return PathIterator(self, len(self._pathname))

    def __iter__(self) -> Iterator[Self]:
        return self.begin()

    def __reversed__(self) -> Iterator[Self]:
        it = self.end()
        while it != self.begin():
            it.decrement()
            yield it.element

    # ----- comparison -----

    def compare(self, other: SourceLike) -> int:
        """Compare element-wise with another path or path source.

        Returns:
            Negative if this path sorts first, zero if equal, positive otherwise.
        """
        if not (isinstance(other, BasePath) and other.rules == self.rules):
            other = type(self)(describe_source(other))
        return compare_paths(self, other)

    def _comparable(self, other: object) -> bool:
        return isinstance(other, BasePath) and other.rules == self.rules

    def __eq__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return compare_paths(self, other) == 0  # type: ignore[arg-type]

    def __lt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return compare_paths(self, other) < 0  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return compare_paths(self, other) <= 0  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return compare_paths(self, other) > 0  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return compare_paths(self, other) >= 0  # type: ignore[arg-type]

    def __hash__(self) -> int:
        return hash_value(self)


class PosixPath(BasePath):
    """Path using POSIX rules ("/" separator, "//host" network root-names)."""

    __slots__ = ()

    rules = POSIX_RULES
    preferred_separator = POSIX_RULES.preferred_separator


class WindowsPath(BasePath):
    """Path using Windows rules ("\\" and "/" separators, drive root-names)."""

    __slots__ = ()

    rules = WINDOWS_RULES
    preferred_separator = WINDOWS_RULES.preferred_separator


# Path flavour of the running interpreter
Path: type[PosixPath] | type[WindowsPath] = WindowsPath if NATIVE_RULES is WINDOWS_RULES else PosixPath


def _as_target(text: str, target: type[str] | type[bytes], converter: Converter | None) -> str | bytes:
    if target is str:
        return text
    if target is bytes:
        return get_converter(converter).encode(text)
    msg = f"Unsupported string type: {target!r}"
    raise TypeError(msg)


def swap(lhs: BasePath, rhs: BasePath) -> None:
    """Exchange the buffers of two paths."""
    lhs.swap(rhs)


def dot_path() -> BasePath:
    """Return a new "." path of the native flavour."""
    return Path.from_native(DOT)


def dot_dot_path() -> BasePath:
    """Return a new ".." path of the native flavour."""
    return Path.from_native(DOT_DOT)
