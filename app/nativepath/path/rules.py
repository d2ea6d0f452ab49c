"""Platform path rules.

This module defines the separator and root conventions that the
decomposition engine is parameterized by. Both rule sets are usable on
every host; NATIVE_RULES selects the one matching the running interpreter.
"""

import os
from dataclasses import dataclass
from enum import Enum


class Flavour(str, Enum):
    """Path syntax family.

    Attributes:
        POSIX: Single "/" separator, "//host" network root-names.
        WINDOWS: "\\" and "/" separators, drive and device root-names.
    """

    POSIX = "posix"
    WINDOWS = "windows"


@dataclass(frozen=True, slots=True)
class PathRules:
    """Separator and root conventions for one flavour.

    Attributes:
        flavour: Which syntax family these rules describe.
        preferred_separator: Separator written when one is inserted.
        separators: Every character accepted as a separator.
        drive_root_names: Whether "X:" style prefixes form a root-name.
        absolute_needs_root_name: Whether is_absolute requires a root-name
            in addition to a root-directory.
    """

    flavour: Flavour
    preferred_separator: str
    separators: str
    drive_root_names: bool
    absolute_needs_root_name: bool

    def __post_init__(self) -> None:
        """Validate rule consistency after initialization."""
        if len(self.preferred_separator) != 1:
            msg = f"Preferred separator must be one character, got {self.preferred_separator!r}"
            raise ValueError(msg)
        if self.preferred_separator not in self.separators:
            msg = "Preferred separator must be one of the separators"
            raise ValueError(msg)

    def is_separator(self, ch: str) -> bool:
        """Check if a single character is a separator under these rules."""
        return len(ch) == 1 and ch in self.separators

    def to_preferred(self, text: str) -> str:
        """Spell every separator in text as the preferred separator."""
        for sep in self.separators:
            if sep != self.preferred_separator:
                text = text.replace(sep, self.preferred_separator)
        return text

    def to_generic(self, text: str) -> str:
        """Spell every separator in text as "/"."""
        for sep in self.separators:
            if sep != "/":
                text = text.replace(sep, "/")
        return text


POSIX_RULES = PathRules(
    flavour=Flavour.POSIX,
    preferred_separator="/",
    separators="/",
    drive_root_names=False,
    absolute_needs_root_name=False,
)

WINDOWS_RULES = PathRules(
    flavour=Flavour.WINDOWS,
    preferred_separator="\\",
    separators="\\/",
    drive_root_names=True,
    absolute_needs_root_name=True,
)

NATIVE_RULES = WINDOWS_RULES if os.name == "nt" else POSIX_RULES
