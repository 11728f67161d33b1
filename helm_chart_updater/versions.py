"""
Version Comparison Module

Pure functions for parsing and ordering chart versions. Versions follow
semantic versioning; missing minor/patch components default to zero and a
leading ``v`` is accepted, so ``v1.2`` and ``1.2.0`` compare equal.
"""

from dataclasses import dataclass

import semver

from .exceptions import VersionParseError


@dataclass(frozen=True)
class ChartVersion:
    """A parsed semantic version that remembers how it was written."""
    original: str
    parsed: semver.Version

    def __lt__(self, other: "ChartVersion") -> bool:
        return self.parsed < other.parsed

    def __str__(self) -> str:
        return self.original


def parse_version(text: str) -> ChartVersion:
    """Parse a version string.

    Args:
        text: Version as written in the manifest or by helm

    Returns:
        ChartVersion keeping ``text`` verbatim

    Raises:
        VersionParseError: If ``text`` is not a semantic version
    """
    if not isinstance(text, str):
        raise VersionParseError(f"Version must be a string, got {text!r}")

    candidate = text.strip()
    if candidate[:1] in ("v", "V"):
        candidate = candidate[1:]

    try:
        parsed = semver.Version.parse(candidate, optional_minor_and_patch=True)
    except ValueError as e:
        raise VersionParseError(f"Invalid semantic version '{text}': {e}") from e

    return ChartVersion(original=text, parsed=parsed)


def is_less_than(current: ChartVersion, candidate: ChartVersion) -> bool:
    """Return True if ``current`` has strictly lower precedence than ``candidate``.

    Build metadata does not take part in the comparison.
    """
    return current.parsed.compare(candidate.parsed) < 0
