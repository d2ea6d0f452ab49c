"""Decomposition engine.

Pure functions over a native path string that locate its parts. Every
function returns offsets or substrings of the input; nothing is cached, so
results can never go stale with respect to the buffer they came from.

Layout of a path string::

    //host/dir/name.ext
    ^^^^^^                root-name        [0, root_name_end)
          ^               root-directory   root_directory_pos (run of separators)
           ^^^^^^^^^^^^   relative path    [relative_path_start, len)
               ^^^^^^^^   filename         [filename_start, len)
"""

from nativepath.path.rules import PathRules

DOT = "."
DOT_DOT = ".."


def root_name_end(rules: PathRules, s: str) -> int:
    """Return the length of the root-name prefix (0 if there is none).

    A network root-name is exactly two separators followed by a
    non-separator run ("//host"), or a bare "//". With drive root-names
    enabled, a first element ending in ":" is also a root-name ("C:", "prn:").
    """
    n = len(s)
    if n >= 2 and rules.is_separator(s[0]) and rules.is_separator(s[1]):
        if n == 2:
            return 2
        if rules.is_separator(s[2]):
            return 0
        pos = 2
        while pos < n and not rules.is_separator(s[pos]):
            pos += 1
        return pos

    if rules.drive_root_names:
        for pos, ch in enumerate(s):
            if rules.is_separator(ch):
                break
            if ch == ":":
                return pos + 1
    return 0


def root_directory_pos(rules: PathRules, s: str) -> int | None:
    """Return the offset of the root-directory separator, or None."""
    pos = root_name_end(rules, s)
    if pos < len(s) and rules.is_separator(s[pos]):
        return pos
    return None


def relative_path_start(rules: PathRules, s: str) -> int:
    """Return the offset where the relative path begins.

    The whole separator run of the root-directory is skipped.
    """
    pos = root_name_end(rules, s)
    n = len(s)
    while pos < n and rules.is_separator(s[pos]):
        pos += 1
    return pos


def filename_start(rules: PathRules, s: str) -> int:
    """Return the offset of the filename (len(s) if the filename is empty)."""
    n = len(s)
    rel = relative_path_start(rules, s)
    if rel == n or rules.is_separator(s[-1]):
        return n
    pos = n
    while pos > rel and not rules.is_separator(s[pos - 1]):
        pos -= 1
    return pos


def parent_path_end(rules: PathRules, s: str) -> int:
    """Return the length of the parent path prefix.

    The separator run in front of the filename is trimmed, except for the
    root-directory separator itself. A path without a relative part has an
    empty parent.
    """
    rel = relative_path_start(rules, s)
    if rel == len(s):
        return 0
    end = filename_start(rules, s)
    root_dir = root_directory_pos(rules, s)
    while end > 0 and rules.is_separator(s[end - 1]) and end - 1 != root_dir:
        end -= 1
    return end


def root_name(rules: PathRules, s: str) -> str:
    return s[: root_name_end(rules, s)]


def root_directory(rules: PathRules, s: str) -> str:
    pos = root_directory_pos(rules, s)
    return "" if pos is None else s[pos]


def root_path(rules: PathRules, s: str) -> str:
    """Return root-name followed by the single root-directory character."""
    pos = root_directory_pos(rules, s)
    if pos is None:
        return root_name(rules, s)
    return s[: pos + 1]


def relative_path(rules: PathRules, s: str) -> str:
    return s[relative_path_start(rules, s) :]


def parent_path(rules: PathRules, s: str) -> str:
    return s[: parent_path_end(rules, s)]


def filename(rules: PathRules, s: str) -> str:
    return s[filename_start(rules, s) :]


def split_extension(name: str) -> tuple[str, str]:
    """Split a filename into (stem, extension).

    The split happens at the last dot, unless that dot is the first
    character or the name consists only of dots.

    Args:
        name: A filename (no separators).

    Returns:
        Tuple of (stem, extension); extension includes the dot or is empty.
    """
    if not name or name.strip(DOT) == "":
        return name, ""
    pos = name.rfind(DOT)
    if pos <= 0:
        return name, ""
    return name[:pos], name[pos:]


def stem(rules: PathRules, s: str) -> str:
    return split_extension(filename(rules, s))[0]


def extension(rules: PathRules, s: str) -> str:
    return split_extension(filename(rules, s))[1]


def is_absolute(rules: PathRules, s: str) -> bool:
    """Check if the path is anchored under these rules.

    Windows rules need both a root-name and a root-directory; POSIX rules
    only a root-directory.
    """
    has_root_dir = root_directory_pos(rules, s) is not None
    if rules.absolute_needs_root_name:
        return has_root_dir and root_name_end(rules, s) > 0
    return has_root_dir


def ends_with_separator(rules: PathRules, s: str) -> bool:
    return bool(s) and rules.is_separator(s[-1])
