"""Bidirectional element iterator.

A PathIterator is a cursor over the elements of one path: the root-name,
the root-directory (one separator), each relative component, and an
implicit "." when the relative path ends in a separator.

The cursor state is the offset in the native buffer where the current
element begins. The implicit "." sits at the offset of the trailing
separator, and the end position is the buffer length. Mutating the path
while a cursor is in use leaves the cursor meaningless.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from nativepath.path import decompose
from nativepath.path.decompose import DOT

if TYPE_CHECKING:
    from nativepath.path.base import BasePath

P = TypeVar("P", bound="BasePath")


def element_text(path: BasePath, pos: int) -> str:
    """Return the text of the element starting at pos ("" at the end)."""
    rules, s = path.rules, path.native
    n = len(s)
    if pos >= n:
        return ""
    rn = decompose.root_name_end(rules, s)
    if pos == 0 and rn > 0:
        return s[:rn]
    if pos == decompose.root_directory_pos(rules, s):
        return s[pos]
    if rules.is_separator(s[pos]):
        return DOT
    end = pos
    while end < n and not rules.is_separator(s[end]):
        end += 1
    return s[pos:end]


def next_position(path: BasePath, pos: int) -> int:
    """Return the offset of the element after the one starting at pos."""
    rules, s = path.rules, path.native
    n = len(s)
    if pos >= n:
        return n

    rn = decompose.root_name_end(rules, s)
    root_dir = decompose.root_directory_pos(rules, s)
    if pos == 0 and rn > 0:
        return root_dir if root_dir is not None else rn
    if pos == root_dir:
        return decompose.relative_path_start(rules, s)
    if rules.is_separator(s[pos]):
        # implicit trailing "."
        return n

    end = pos
    while end < n and not rules.is_separator(s[end]):
        end += 1
    if end == n:
        return n
    while end < n and rules.is_separator(s[end]):
        end += 1
    if end == n:
        return n - 1
    return end


def previous_position(path: BasePath, pos: int) -> int:
    """Return the offset of the element before the one starting at pos."""
    rules, s = path.rules, path.native
    n = len(s)
    if pos <= 0:
        return 0
    pos = min(pos, n)

    rel = decompose.relative_path_start(rules, s)
    root_dir = decompose.root_directory_pos(rules, s)
    if pos == n and rel < n and rules.is_separator(s[-1]):
        return n - 1
    if pos == root_dir:
        return 0
    if pos <= rel:
        return root_dir if root_dir is not None else 0

    end = pos
    while end > rel and rules.is_separator(s[end - 1]):
        end -= 1
    start = end
    while start > rel and not rules.is_separator(s[start - 1]):
        start -= 1
    return start


class PathIterator(Generic[P]):
    """Cursor over the elements of a path.

    Two cursors are equal when they belong to the same path object and sit
    at the same offset. ``increment()`` at the end and ``decrement()`` at
    the beginning leave the cursor in place.

    Example:
        >>> it = PosixPath("/usr/bin").begin()
        >>> it.element, it.increment().element
        (PosixPath('/'), PosixPath('usr'))
    """

    __slots__ = ("_path", "_pos")

    def __init__(self, path: P, position: int = 0) -> None:
        """Initialize PathIterator.

        Args:
            path: Path to iterate over.
            position: Offset of the starting element (len(native) for end).
        """
        self._path = path
        self._pos = max(0, min(position, len(path.native)))

    @property
    def path(self) -> P:
        """The path being iterated over."""
        return self._path

    @property
    def position(self) -> int:
        """Offset in the native buffer where the current element begins."""
        return self._pos

    @property
    def at_end(self) -> bool:
        """Check if the cursor is past the last element."""
        return self._pos >= len(self._path.native)

    @property
    def element(self) -> P:
        """The current element as a path (empty at the end)."""
        return type(self._path).from_native(element_text(self._path, self._pos))

    def increment(self) -> PathIterator[P]:
        """Advance to the next element and return self."""
        self._pos = next_position(self._path, self._pos)
        return self

    def decrement(self) -> PathIterator[P]:
        """Step back to the previous element and return self."""
        self._pos = previous_position(self._path, self._pos)
        return self

    def copy(self) -> PathIterator[P]:
        return PathIterator(self._path, self._pos)

    def __iter__(self) -> PathIterator[P]:
        return self

    def __next__(self) -> P:
        if self.at_end:
            raise StopIteration
        current = self.element
        self.increment()
        return current

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathIterator):
            return NotImplemented
        return self._path is other._path and self._pos == other._pos

    def __hash__(self) -> int:
        return hash((id(self._path), self._pos))

    def __repr__(self) -> str:
        return f"PathIterator({self._path!r}, position={self._pos})"
