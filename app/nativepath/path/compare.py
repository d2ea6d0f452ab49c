"""Element-wise comparison and hashing.

Paths are ordered by their generic decomposition, not by their native
text: root-name first (by code point), then root-directory presence
(absent before present), then the relative elements in iteration order
with a shorter shared prefix first. Redundant separators and, under
Windows rules, the separator spelling do not affect the result. Hashing
uses the same key, so equal paths always hash equal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nativepath.path import decompose
from nativepath.path.iterator import PathIterator, element_text, next_position

if TYPE_CHECKING:
    from nativepath.path.base import BasePath

GenericKey = tuple[str, bool, tuple[str, ...]]


def relative_elements(path: BasePath) -> tuple[str, ...]:
    """Return the relative elements of a path as they are iterated."""
    rules, s = path.rules, path.native
    n = len(s)
    pos = decompose.relative_path_start(rules, s)
    elements: list[str] = []
    while pos < n:
        elements.append(element_text(path, pos))
        pos = next_position(path, pos)
    return tuple(elements)


def generic_key(path: BasePath) -> GenericKey:
    """Return the comparison key of a path."""
    rules, s = path.rules, path.native
    root_name = rules.to_preferred(decompose.root_name(rules, s))
    has_root_dir = decompose.root_directory_pos(rules, s) is not None
    return root_name, has_root_dir, relative_elements(path)


def _sign(a: object, b: object) -> int:
    if a < b:  # type: ignore[operator]
        return -1
    if b < a:  # type: ignore[operator]
        return 1
    return 0


def compare(lhs: BasePath, rhs: BasePath) -> int:
    """Compare two paths of the same flavour.

    Args:
        lhs: Left path.
        rhs: Right path.

    Returns:
        Negative if lhs sorts first, zero if equal, positive otherwise.

    Raises:
        TypeError: If the paths use different rules.
    """
    if lhs.rules != rhs.rules:
        msg = f"Cannot compare {type(lhs).__name__} with {type(rhs).__name__}"
        raise TypeError(msg)
    return _sign(generic_key(lhs), generic_key(rhs))


def hash_value(path: BasePath) -> int:
    """Hash a path consistently with compare()."""
    return hash((path.rules.flavour, generic_key(path)))


def lexicographical_compare(
    first1: PathIterator, last1: PathIterator, first2: PathIterator, last2: PathIterator
) -> int:
    """Compare two element ranges by element text.

    Elements are compared as strings by code point; when one range is a
    prefix of the other, the shorter one sorts first.

    Returns:
        Negative, zero or positive like compare().
    """
    it1, it2 = first1.copy(), first2.copy()

    def exhausted(it: PathIterator, last: PathIterator) -> bool:
        return it == last or it.at_end

    while not exhausted(it1, last1) and not exhausted(it2, last2):
        a = element_text(it1.path, it1.position)
        b = element_text(it2.path, it2.position)
        if a != b:
            return -1 if a < b else 1
        it1.increment()
        it2.increment()
    done1, done2 = exhausted(it1, last1), exhausted(it2, last2)
    if done1 and done2:
        return 0
    return -1 if done1 else 1
