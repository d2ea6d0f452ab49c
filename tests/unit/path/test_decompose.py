"""Unit tests for path decomposition.

Tests for root-name, root-directory, relative path, parent path,
filename, stem and extension under POSIX and Windows rules.
"""

import pytest
from nativepath.path.base import PosixPath, WindowsPath
from nativepath.path.decompose import split_extension

# (path, root_name, root_directory, root_path, relative_path, parent_path, filename)
POSIX_CASES = [
    ("", "", "", "", "", "", ""),
    ("/", "", "/", "/", "", "", ""),
    ("//", "//", "", "//", "", "", ""),
    ("///", "", "/", "/", "", "", ""),
    ("//net", "//net", "", "//net", "", "", ""),
    ("//net/", "//net", "/", "//net/", "", "", ""),
    ("//net/foo", "//net", "/", "//net/", "foo", "//net/", "foo"),
    ("///foo", "", "/", "/", "foo", "/", "foo"),
    ("/foo", "", "/", "/", "foo", "/", "foo"),
    ("/foo/", "", "/", "/", "foo/", "/foo", ""),
    ("/usr/local/bin", "", "/", "/", "usr/local/bin", "/usr/local", "bin"),
    ("foo", "", "", "", "foo", "", "foo"),
    ("foo/", "", "", "", "foo/", "foo", ""),
    ("foo//", "", "", "", "foo//", "foo", ""),
    ("foo//bar", "", "", "", "foo//bar", "foo", "bar"),
    ("foo/..", "", "", "", "foo/..", "foo", ".."),
    ("c:/foo", "", "", "", "c:/foo", "c:", "foo"),
]

WINDOWS_CASES = [
    ("c:", "c:", "", "c:", "", "", ""),
    ("c:/", "c:", "/", "c:/", "", "", ""),
    ("c:foo", "c:", "", "c:", "foo", "c:", "foo"),
    ("c:\\foo\\bar.txt", "c:", "\\", "c:\\", "foo\\bar.txt", "c:\\foo", "bar.txt"),
    ("C:\\foo\\bar.txt", "C:", "\\", "C:\\", "foo\\bar.txt", "C:\\foo", "bar.txt"),
    ("\\\\net", "\\\\net", "", "\\\\net", "", "", ""),
    ("\\\\net\\foo", "\\\\net", "\\", "\\\\net\\", "foo", "\\\\net\\", "foo"),
    ("//net/foo/", "//net", "/", "//net/", "foo/", "//net/foo", ""),
    ("\\foo", "", "\\", "\\", "foo", "\\", "foo"),
    ("foo/bar\\baz", "", "", "", "foo/bar\\baz", "foo/bar", "baz"),
    ("prn:", "prn:", "", "prn:", "", "", ""),
    ("a:b:c", "a:", "", "a:", "b:c", "a:", "b:c"),
    ("foo\\c:", "", "", "", "foo\\c:", "foo", "c:"),
]


def _decomposition(path: PosixPath | WindowsPath) -> tuple[str, ...]:
    return (
        path.root_name().native,
        path.root_directory().native,
        path.root_path().native,
        path.relative_path().native,
        path.parent_path().native,
        path.filename().native,
    )


class TestPosixDecomposition:
    """Tests for decomposition under POSIX rules."""

    @pytest.mark.parametrize(("text", "expected_parts"), [(case[0], case[1:]) for case in POSIX_CASES])
    def test_decomposition(self, text: str, expected_parts: tuple[str, ...]) -> None:
        """Each part matches the expected substring."""
        assert _decomposition(PosixPath(text)) == expected_parts

    def test_usr_local_bin(self) -> None:
        """filename and parent_path of an absolute path."""
        p = PosixPath("/usr/local/bin")

        assert str(p.filename()) == "bin"
        assert str(p.parent_path()) == "/usr/local"

    def test_trailing_separator_has_no_filename(self) -> None:
        """A trailing separator means the filename is empty."""
        p = PosixPath("/a/b/")

        assert str(p.filename()) == ""
        assert p.has_filename() is False
        assert p.has_parent_path() is True

    def test_backslash_is_ordinary_character(self) -> None:
        """POSIX rules treat backslash as part of a name."""
        p = PosixPath("a\\b")

        assert str(p.filename()) == "a\\b"
        assert p.has_parent_path() is False

    def test_results_keep_path_type(self) -> None:
        """Decomposition returns paths of the same flavour."""
        assert type(PosixPath("/a/b").parent_path()) is PosixPath
        assert type(WindowsPath("c:\\a").root_name()) is WindowsPath


class TestWindowsDecomposition:
    """Tests for decomposition under Windows rules."""

    @pytest.mark.parametrize(("text", "expected_parts"), [(case[0], case[1:]) for case in WINDOWS_CASES])
    def test_decomposition(self, text: str, expected_parts: tuple[str, ...]) -> None:
        """Each part matches the expected substring."""
        assert _decomposition(WindowsPath(text)) == expected_parts

    def test_drive_path(self) -> None:
        """Drive, root and filename parts of a typical Windows path."""
        p = WindowsPath("C:\\foo\\bar.txt")

        assert str(p.root_name()) == "C:"
        assert str(p.root_directory()) == "\\"
        assert str(p.filename()) == "bar.txt"
        assert str(p.stem()) == "bar"
        assert str(p.extension()) == ".txt"


class TestStemAndExtension:
    """Tests for stem and extension splitting."""

    @pytest.mark.parametrize(
        ("name", "stem", "extension"),
        [
            ("", "", ""),
            ("bar.txt", "bar", ".txt"),
            ("a.tar.gz", "a.tar", ".gz"),
            (".hidden", ".hidden", ""),
            (".hidden.txt", ".hidden", ".txt"),
            ("foo.", "foo", "."),
            (".", ".", ""),
            ("..", "..", ""),
            ("...", "...", ""),
            ("noext", "noext", ""),
        ],
    )
    def test_split_extension(self, name: str, stem: str, extension: str) -> None:
        """split_extension splits at the last dot unless it is leading."""
        assert split_extension(name) == (stem, extension)

    def test_stem_plus_extension_is_filename(self, sample_posix_paths: list[str]) -> None:
        """stem + extension always rebuilds the filename."""
        for text in sample_posix_paths:
            p = PosixPath(text)
            assert p.stem().native + p.extension().native == p.filename().native

    def test_extension_of_directory_path(self) -> None:
        """A path with a trailing separator has no extension."""
        p = PosixPath("dir.d/")

        assert p.has_extension() is False
        assert p.has_stem() is False


class TestQueries:
    """Tests for has_* predicates and absoluteness."""

    @pytest.mark.parametrize(
        ("text", "absolute"),
        [("", False), ("/", True), ("/foo", True), ("//net", False), ("//net/", True), ("foo", False)],
    )
    def test_posix_is_absolute(self, text: str, absolute: bool) -> None:
        """POSIX paths are absolute when they have a root-directory."""
        assert PosixPath(text).is_absolute() is absolute
        assert PosixPath(text).is_relative() is not absolute

    @pytest.mark.parametrize(
        ("text", "absolute"),
        [
            ("c:\\", True),
            ("c:/foo", True),
            ("c:", False),
            ("c:foo", False),
            ("\\foo", False),
            ("\\\\net\\foo", True),
            ("\\\\net", False),
        ],
    )
    def test_windows_is_absolute(self, text: str, absolute: bool) -> None:
        """Windows paths need both root-name and root-directory."""
        assert WindowsPath(text).is_absolute() is absolute

    def test_empty_path(self) -> None:
        """An empty path has nothing and is falsy."""
        p = PosixPath()

        assert p.is_empty() is True
        assert not p
        assert not any(
            [
                p.has_root_path(),
                p.has_root_name(),
                p.has_root_directory(),
                p.has_relative_path(),
                p.has_parent_path(),
                p.has_filename(),
                p.has_stem(),
                p.has_extension(),
            ]
        )

    def test_predicates_match_observers(self, sample_posix_paths: list[str], sample_windows_paths: list[str]) -> None:
        """Every has_x() agrees with x() being non-empty."""
        paths = [PosixPath(t) for t in sample_posix_paths] + [WindowsPath(t) for t in sample_windows_paths]
        for p in paths:
            assert p.has_root_path() == bool(p.root_path().native)
            assert p.has_root_name() == bool(p.root_name().native)
            assert p.has_root_directory() == bool(p.root_directory().native)
            assert p.has_relative_path() == bool(p.relative_path().native)
            assert p.has_parent_path() == bool(p.parent_path().native)
            assert p.has_filename() == bool(p.filename().native)
            assert p.has_stem() == bool(p.stem().native)
            assert p.has_extension() == bool(p.extension().native)

    def test_root_path_is_name_plus_directory(self, sample_windows_paths: list[str]) -> None:
        """root_path is root_name followed by root_directory."""
        for text in sample_windows_paths:
            p = WindowsPath(text)
            assert p.root_path().native == p.root_name().native + p.root_directory().native
