"""Legal and license files that survive content-based pruning.

This module defines the name patterns for files that likely carry legal
significance (licenses, notices, author lists) and must be kept by the
non-Go file and unused package stages. The Go test file stage and the
nested vendor stage do not consult these patterns.
"""

from dataclasses import dataclass
from pathlib import PurePosixPath

# Name prefixes for license files.
LICENSE_FILE_PREFIXES: tuple[str, ...] = (
    "license",
    "licence",
    "copying",
    "unlicense",
    "copyright",
    "copyleft",
)

# Substrings that are likely part of a legal declaration file name.
LEGAL_FILE_SUBSTRINGS: tuple[str, ...] = (
    "authors",
    "contributors",
    "legal",
    "notice",
    "disclaimer",
    "patent",
    "third-party",
    "thirdparty",
)


@dataclass(frozen=True, slots=True)
class PreservationRule:
    """Decides whether a file name must be kept regardless of other filters.

    Patterns are compared against the lower-cased base name, extension
    included. No punctuation or extension normalization is applied.

    Attributes:
        prefixes: Lower-case name prefixes of license-like files.
        substrings: Lower-case substrings of legal declaration file names.
    """

    prefixes: tuple[str, ...] = LICENSE_FILE_PREFIXES
    substrings: tuple[str, ...] = LEGAL_FILE_SUBSTRINGS

    def __post_init__(self) -> None:
        """Normalize patterns to lower case."""
        object.__setattr__(self, "prefixes", tuple(p.lower() for p in self.prefixes))
        object.__setattr__(self, "substrings", tuple(s.lower() for s in self.substrings))

    def is_preserved(self, name: str) -> bool:
        """Check if a file name indicates the file should be preserved.

        Args:
            name: File name or slash-separated path; only the base name is used.

        Returns:
            True if the base name matches a license prefix or legal substring.
        """
        base = PurePosixPath(name).name.lower()

        if base.startswith(self.prefixes):
            return True

        return any(substring in base for substring in self.substrings)


DEFAULT_RULE = PreservationRule()


def is_preserved_file(name: str) -> bool:
    """Check a file name against the default preservation patterns.

    Args:
        name: File name or slash-separated path.

    Returns:
        True if the file should be preserved.
    """
    return DEFAULT_RULE.is_preserved(name)
