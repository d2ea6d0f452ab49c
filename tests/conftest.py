"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from nativepath.encoding.converter import CodecConverter, imbue
from nativepath.encoding.settings import ENCODING_ENV_VAR, ERRORS_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path) -> Iterator[Path]:
    """Point the settings lookup at an empty config dir and reset the default converter."""
    config_home = tmp_path / "xdg-config"
    with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(config_home)}):
        os.environ.pop(ENCODING_ENV_VAR, None)
        os.environ.pop(ERRORS_ENV_VAR, None)
        imbue(None)
        yield config_home
        imbue(None)


@pytest.fixture
def utf8() -> CodecConverter:
    """Strict UTF-8 converter."""
    return CodecConverter("utf-8")


@pytest.fixture
def latin1() -> CodecConverter:
    """Strict Latin-1 converter."""
    return CodecConverter("latin-1")


@pytest.fixture
def sample_posix_paths() -> list[str]:
    """POSIX path strings covering roots, trailing separators and dots."""
    return [
        "",
        ".",
        "..",
        "/",
        "//",
        "///",
        "//net",
        "//net/",
        "//net/foo",
        "///foo",
        "/foo",
        "/foo/",
        "/foo/bar",
        "/foo/bar/",
        "foo",
        "foo/",
        "foo//",
        "foo/bar",
        "foo/bar.txt",
        "foo/.bar",
        "foo/..",
        "a/b/c/",
        "./a",
        "../a/b",
    ]


@pytest.fixture
def sample_windows_paths() -> list[str]:
    """Windows path strings covering drives, UNC names and mixed separators."""
    return [
        "",
        "c:",
        "c:/",
        "c:\\",
        "c:foo",
        "c:/foo",
        "c:\\foo\\bar.txt",
        "c:foo\\",
        "\\\\net",
        "\\\\net\\foo",
        "//net/foo/",
        "\\foo",
        "foo\\bar",
        "foo/bar\\baz",
        "prn:",
        "a\\b\\..\\c",
    ]
