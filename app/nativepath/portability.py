"""Name portability checks.

Predicates over a single file or directory name (not a whole path),
each telling whether the name satisfies one naming convention.
"""

import os

# Characters Windows rejects in names: control characters, NUL and <>:"/\|
WINDOWS_INVALID_CHARS: frozenset[str] = frozenset(
    [chr(c) for c in range(0x00, 0x20)] + list('<>:"/\\|')
)

# POSIX portable filename character set
VALID_POSIX_CHARS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789._-"
)


def portable_posix_name(name: str) -> bool:
    """Check if a name uses only the POSIX portable filename character set.

    Args:
        name: Candidate name.

    Returns:
        True if the name is non-empty and every character is portable.
    """
    return bool(name) and all(ch in VALID_POSIX_CHARS for ch in name)


def windows_name(name: str) -> bool:
    """Check if a name is acceptable to Windows.

    Rejects empty names, control characters and <>:"/\\|, a leading or
    trailing space, and a trailing dot (except the names "." and "..").
    """
    return (
        bool(name)
        and name[0] != " "
        and not any(ch in WINDOWS_INVALID_CHARS for ch in name)
        and name[-1] != " "
        and (name[-1] != "." or name in (".", ".."))
    )


def portable_name(name: str) -> bool:
    """Check if a name is portable to both POSIX and Windows.

    "." and ".." are portable; any other name must pass both checks and
    must not start with "." or "-".
    """
    return bool(name) and (
        name in (".", "..")
        or (windows_name(name) and portable_posix_name(name) and name[0] not in ".-")
    )


def portable_directory_name(name: str) -> bool:
    """Check if a name is a portable directory name (portable, no dots)."""
    return name in (".", "..") or (portable_name(name) and "." not in name)


def portable_file_name(name: str) -> bool:
    """Check if a name is a portable file name.

    A portable name other than "." and "..", with at most one dot,
    followed by at most three characters.
    """
    if not portable_name(name) or name in (".", ".."):
        return False
    pos = name.find(".")
    if pos == -1:
        return True
    return name.find(".", pos + 1) == -1 and pos + 5 > len(name)


def native_name(name: str) -> bool:
    """Check if a name is acceptable to the running platform.

    On Windows this is windows_name(); elsewhere the name must be
    non-empty, must not start with a space and must not contain "/".
    """
    if os.name == "nt":
        return windows_name(name)
    return bool(name) and name[0] != " " and "/" not in name
