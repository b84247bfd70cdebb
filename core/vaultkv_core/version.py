"""
version.py - Vault server version value type (pure stdlib)

Parses free-form dotted version strings such as "1.2.3", "0.10.0" or
"2.0.0.RELEASE" into an immutable four-component Version
(major, minor, bugfix, build) with a total order.

Typical use is feature detection against the server a client talks to:

    if server_version.is_greater_than_or_equal_to(Version.parse("0.10.0")):
        ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")

# Range placeholders; a version value never matches "any".
_WILDCARDS = frozenset({"x", "X", "*"})

_COMPONENTS = ("major", "minor", "bugfix", "build")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class VersionError(ValueError):
    """Base exception for version construction and parsing."""


class InvalidVersionError(VersionError):
    """Raised when a Version is built from an out-of-range component list."""


class MalformedVersionError(VersionError):
    """Raised when a version string cannot be parsed.

    Attributes:
        segment: The offending dot-separated segment, or None when the
                 input as a whole is blank or not a string.
        text: The original input.
    """

    def __init__(self, message, segment=None, text=None):
        super().__init__(message)
        self.segment = segment
        self.text = text


# ---------------------------------------------------------------------------
# Value type
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Version:
    """Version consisting of major, minor, bugfix and build parts.

    Version(1, 2) takes up to four positional components; a wrong argument
    count is a TypeError like any other call. Use Version.from_parts() to
    build from a list of unknown length: it raises InvalidVersionError for
    an empty list or more than four components.
    """

    major: int
    minor: int = 0
    bugfix: int = 0
    build: int = 0

    def __post_init__(self):
        for name in _COMPONENTS:
            value = getattr(self, name)
            # bool is an int subclass but never a version component
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidVersionError(
                    f"{name.capitalize()} version must be an integer, got {value!r}")
            if value < 0:
                raise InvalidVersionError(
                    f"{name.capitalize()} version must be greater or equal zero, got {value}")

    @classmethod
    def from_parts(cls, parts) -> Version:
        """Create a Version from one to four integers.

        Raises:
            InvalidVersionError: On an empty list, more than four parts,
                                 or a negative / non-integer part.
        """
        parts = list(parts)
        if not 0 < len(parts) < 5:
            raise InvalidVersionError(
                f"A version has 1 to 4 components, got {len(parts)}: {parts!r}")
        return cls(*parts)

    @classmethod
    def parse(cls, text) -> Version:
        """Parse a dotted version string. See the module-level parse()."""
        return parse(text)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.major, self.minor, self.bugfix, self.build)

    # -- ordering -----------------------------------------------------------

    def compare_to(self, other: Version | None) -> int:
        """Three-way compare: -1, 0 or 1. Anything is greater than None."""
        if other is None:
            return 1
        if not isinstance(other, Version):
            raise TypeError(f"Cannot compare Version with {type(other).__name__}")
        for mine, theirs in zip(self.as_tuple(), other.as_tuple()):
            if mine != theirs:
                return 1 if mine > theirs else -1
        return 0

    def is_greater_than(self, other: Version | None) -> bool:
        """Whether this version is newer than other."""
        return self.compare_to(other) > 0

    def is_greater_than_or_equal_to(self, other: Version | None) -> bool:
        """Whether this version is newer than or the same as other."""
        return self.compare_to(other) >= 0

    def is_less_than(self, other: Version | None) -> bool:
        """Whether this version is older than other."""
        return self.compare_to(other) < 0

    def is_less_than_or_equal_to(self, other: Version | None) -> bool:
        """Whether this version is older than or the same as other."""
        return self.compare_to(other) <= 0

    def is_(self, other: Version | None) -> bool:
        """Whether this version is the same as other."""
        return self == other

    def __eq__(self, other):
        if isinstance(other, Version):
            return self.as_tuple() == other.as_tuple()
        if other is None:
            return False
        return NotImplemented

    def __hash__(self):
        return hash(self.as_tuple())

    def __lt__(self, other):
        if other is not None and not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if other is not None and not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if other is not None and not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if other is not None and not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) >= 0

    # -- rendering ----------------------------------------------------------

    def __str__(self):
        digits = [self.major, self.minor]
        if self.bugfix != 0 or self.build != 0:
            digits.append(self.bugfix)
        if self.build != 0:
            digits.append(self.build)
        return ".".join(str(d) for d in digits)

    def __repr__(self):
        return f"Version({self.major}, {self.minor}, {self.bugfix}, {self.build})"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def _strip_qualifier(segment):
    """Truncate segment at its first non-digit character."""
    for i, ch in enumerate(segment):
        if ch not in _DIGITS:
            return segment[:i]
    return segment


def _is_number(segment):
    return all(ch in _DIGITS for ch in segment)


def parse(text) -> Version:
    """Parse a version string into a Version.

    Surrounding whitespace is ignored. A trailing qualifier glued to the
    last segment ("RELEASE", "-SNAPSHOT", "rc1") is discarded, an empty
    segment counts as 0, and missing trailing components default to 0.

    Args:
        text: Version string such as "1.2.3" or "2.0.0.RELEASE".

    Returns:
        Version

    Raises:
        MalformedVersionError: If text is blank or a segment is not a
                               non-negative integer.
        InvalidVersionError: If text has no segments or more than four.
    """
    if not isinstance(text, str) or not text.strip():
        raise MalformedVersionError(
            f"Invalid version string! Expected non-blank text, got {text!r}.",
            text=text)

    segments = text.strip().split(".")
    while segments and not segments[-1]:
        segments.pop()

    numbers = []
    last = len(segments) - 1
    for i, segment in enumerate(segments):
        if segment in _WILDCARDS:
            raise MalformedVersionError(
                f"Invalid version string! Could not parse segment {segment!r} "
                f"within {text!r}: wildcards are not versions.",
                segment=segment, text=text)

        cleaned = _strip_qualifier(segment) if i == last else segment
        if cleaned != segment:
            logger.debug("Discarded qualifier %r from version %r",
                         segment[len(cleaned):], text)

        if not cleaned:
            numbers.append(0)
        elif _is_number(cleaned):
            try:
                numbers.append(int(cleaned))
            except ValueError as e:
                # int() refuses digit strings past sys.get_int_max_str_digits()
                raise MalformedVersionError(
                    f"Invalid version string! Could not parse segment {cleaned!r} "
                    f"within {text!r}.",
                    segment=cleaned, text=text) from e
        else:
            raise MalformedVersionError(
                f"Invalid version string! Could not parse segment {cleaned!r} "
                f"within {text!r}.",
                segment=cleaned, text=text)

    return Version.from_parts(numbers)


def compare(a: Version | None, b: Version | None) -> int:
    """Three-way compare two versions; None sorts below every version.

    Usable as a sort comparator via functools.cmp_to_key.
    """
    if a is None:
        return 0 if b is None else -1
    return a.compare_to(b)


def to_string(version: Version) -> str:
    """Canonical form: major.minor[.bugfix[.build]]."""
    return str(version)
