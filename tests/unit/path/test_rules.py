"""Unit tests for platform path rules."""

import os

import pytest
from nativepath.path.rules import NATIVE_RULES, POSIX_RULES, WINDOWS_RULES, Flavour, PathRules


class TestPathRules:
    """Tests for PathRules dataclass."""

    def test_posix_separators(self) -> None:
        """POSIX rules only recognise '/'."""
        assert POSIX_RULES.is_separator("/")
        assert not POSIX_RULES.is_separator("\\")
        assert POSIX_RULES.preferred_separator == "/"

    def test_windows_separators(self) -> None:
        """Windows rules recognise both slashes and prefer backslash."""
        assert WINDOWS_RULES.is_separator("/")
        assert WINDOWS_RULES.is_separator("\\")
        assert WINDOWS_RULES.preferred_separator == "\\"

    def test_is_separator_requires_single_character(self) -> None:
        """Strings longer than one character are never separators."""
        assert not POSIX_RULES.is_separator("//")
        assert not POSIX_RULES.is_separator("")

    def test_to_preferred(self) -> None:
        """to_preferred rewrites every accepted separator."""
        assert WINDOWS_RULES.to_preferred("a/b\\c/") == "a\\b\\c\\"
        assert POSIX_RULES.to_preferred("a\\b/c") == "a\\b/c"

    def test_to_generic(self) -> None:
        """to_generic spells separators as '/'."""
        assert WINDOWS_RULES.to_generic("c:\\a/b\\c") == "c:/a/b/c"

    def test_native_rules_match_platform(self) -> None:
        """NATIVE_RULES follows os.name."""
        expected = WINDOWS_RULES if os.name == "nt" else POSIX_RULES
        assert NATIVE_RULES is expected

    def test_rules_are_frozen(self) -> None:
        """Rule values cannot be modified."""
        with pytest.raises(AttributeError):
            POSIX_RULES.preferred_separator = "\\"  # type: ignore[misc]

    def test_preferred_must_be_a_separator(self) -> None:
        """Inconsistent rules are rejected at construction."""
        with pytest.raises(ValueError, match="must be one of the separators"):
            PathRules(Flavour.POSIX, ":", "/", drive_root_names=False, absolute_needs_root_name=False)

    def test_preferred_must_be_one_character(self) -> None:
        """A multi-character preferred separator is rejected."""
        with pytest.raises(ValueError, match="one character"):
            PathRules(Flavour.POSIX, "//", "//", drive_root_names=False, absolute_needs_root_name=False)

    def test_flavour_values(self) -> None:
        """Flavour is a str enum."""
        assert Flavour.POSIX == "posix"
        assert Flavour.WINDOWS.value == "windows"
