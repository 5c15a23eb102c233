"""
Version utility module for version string operations.

Versions have up to five numeric segments
(``major.minor.patch.segment4.segment5``) followed by an optional
``-prerelease`` and ``+buildmetadata``. Parsing has two modes:

- clean: every segment is a non-negative integer
- legacy: some segment is not numeric (``1.0.beta.2``); such segments are
  marked absent and the raw tokens from the first absent segment onward are
  kept in ``pre_release_segments`` for comparison
"""

import logging
import re
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from manifestkit.constants import ABSENT_SEGMENT, MAX_VERSION_SEGMENT_COUNT

from .exceptions import VersionParseError, VersionSegmentCountError

logger = logging.getLogger(__name__)

_TOKEN_PATTERN = re.compile(r"[a-zA-Z]+|[0-9]+")


class VersionPolicy(str, Enum):
    """How two pre-release strings are ordered once everything before them ties."""

    # Plain string order: "rc.10" < "rc.9".
    STRICT = "strict"
    # Token order of the legacy pod dialect: "rc.9" < "rc.10".
    LEGACY = "legacy"


def version_segments(version: str) -> List[str]:
    """
    Split a version string into alphanumeric tokens.

    Maximal runs of ASCII letters and of digits become separate tokens, in
    the order they appear; any other character only separates tokens, so
    ``1.2.3`` and ``1_2_3`` tokenize identically and ``1.0b2`` becomes
    ``["1", "0", "b", "2"]``.

    Args:
        version: Version string without pre-release or build metadata

    Returns:
        List of tokens

    Raises:
        VersionSegmentCountError: If there are more than five tokens
    """
    tokens = _TOKEN_PATTERN.findall(version)
    if len(tokens) > MAX_VERSION_SEGMENT_COUNT:
        raise VersionSegmentCountError(version, len(tokens))
    return tokens


def _segment_value(token: Optional[str]) -> int:
    if token is None:
        return 0
    if token.isdigit():
        return int(token)
    return ABSENT_SEGMENT


class Version:
    """
    A version with five numeric segments, pre-release and build metadata.

    Equality is structural over the numeric segments, pre-release, build
    metadata and pre-release segments. Ordering is defined separately; it is
    a total order under either ``policy``, and the policy only changes how
    two pre-release strings compare. Versions of different policies are
    ordered as ``VersionPolicy.STRICT``.
    """

    MAX_SEGMENT_COUNT = MAX_VERSION_SEGMENT_COUNT
    LOWEST: "Version"

    def __init__(
        self,
        major: int,
        minor: int = 0,
        patch: int = 0,
        segment4: int = 0,
        segment5: int = 0,
        pre_release: Optional[str] = None,
        build_metadata: Optional[str] = None,
        pre_release_segments: Sequence[str] = (),
        value: Optional[str] = None,
        policy: VersionPolicy = VersionPolicy.STRICT,
    ):
        """
        Initialize a Version from its segments.

        Args:
            major: Major segment, a non-negative integer
            minor, patch, segment4, segment5: Lower segments; ``-1`` marks a
                segment that could not be parsed as an integer
            pre_release: Text after the first ``-``, kept verbatim
            build_metadata: Text after the first ``+``, kept verbatim
            pre_release_segments: Raw tokens of a legacy version
            value: Original string; defaults to the canonical rendering
            policy: Ordering policy

        Raises:
            ValueError: If a segment is out of range
        """
        if major < 0:
            raise ValueError(f"Major version segment must be non-negative, got {major}")
        for segment in (minor, patch, segment4, segment5):
            if segment < ABSENT_SEGMENT:
                raise ValueError(f"Invalid version segment: {segment}")

        self._segments: Tuple[int, int, int, int, int] = (
            major,
            minor,
            patch,
            segment4,
            segment5,
        )
        self._pre_release = pre_release
        self._build_metadata = build_metadata
        self._pre_release_segments: Tuple[str, ...] = tuple(pre_release_segments)
        self._policy = VersionPolicy(policy)
        self._value = value if value is not None else self.canonical

    # Parsing

    @classmethod
    def parse(
        cls, version_string: str, policy: VersionPolicy = VersionPolicy.STRICT
    ) -> Optional["Version"]:
        """
        Parse a version string, returning None if it is not a valid version.

        Args:
            version_string: Version string such as ``1.2.3-alpha+001``
            policy: Ordering policy of the parsed version

        Returns:
            The parsed Version, or None
        """
        try:
            return cls.from_string(version_string, policy)
        except VersionParseError as e:
            logger.debug(f"Could not parse version: {e}")
            return None

    @classmethod
    def from_string(
        cls, version_string: str, policy: VersionPolicy = VersionPolicy.STRICT
    ) -> "Version":
        """
        Parse a version string.

        The build metadata is everything after the first ``+`` and the
        pre-release everything after the first ``-`` of what remains; both are
        kept verbatim. The rest is split into tokens by ``version_segments``.
        A string that starts with ``-`` or ``+`` has no major segment and is
        rejected, so ``-1.0`` is not read as ``1.0``.

        Args:
            version_string: Version string such as ``1.2.3-alpha+001``
            policy: Ordering policy of the parsed version

        Returns:
            The parsed Version

        Raises:
            VersionParseError: If the major segment is missing or not numeric,
                or if there are more than five segments
        """
        if not isinstance(version_string, str):
            raise VersionParseError(str(version_string), "Version must be a string")

        remainder, _, build_metadata = version_string.partition("+")
        numeric, _, pre_release = remainder.partition("-")

        segments = version_segments(numeric)
        if not segments or not segments[0].isdigit():
            raise VersionParseError(version_string)

        major = int(segments[0])
        lower = [
            _segment_value(segments[i] if i < len(segments) else None)
            for i in range(1, MAX_VERSION_SEGMENT_COUNT)
        ]

        pre_release_segments: List[str] = []
        if ABSENT_SEGMENT in lower:
            first_absent = lower.index(ABSENT_SEGMENT) + 1
            pre_release_segments = segments[first_absent:]
            logger.debug(
                f"Version '{version_string}' has non-numeric segments "
                f"{pre_release_segments}"
            )

        return cls(
            major,
            *lower,
            pre_release=pre_release or None,
            build_metadata=build_metadata or None,
            pre_release_segments=pre_release_segments,
            value=version_string,
            policy=policy,
        )

    # Attributes

    @property
    def major(self) -> int:
        return self._segments[0]

    @property
    def minor(self) -> int:
        return self._segments[1]

    @property
    def patch(self) -> int:
        return self._segments[2]

    @property
    def segment4(self) -> int:
        return self._segments[3]

    @property
    def segment5(self) -> int:
        return self._segments[4]

    @property
    def segments(self) -> Tuple[int, int, int, int, int]:
        """All five numeric segments; ``-1`` marks an absent segment."""
        return self._segments

    @property
    def pre_release(self) -> Optional[str]:
        return self._pre_release

    @property
    def build_metadata(self) -> Optional[str]:
        return self._build_metadata

    @property
    def pre_release_segments(self) -> Tuple[str, ...]:
        return self._pre_release_segments

    @property
    def policy(self) -> VersionPolicy:
        return self._policy

    @property
    def value(self) -> str:
        """Original string for parsed versions, canonical form otherwise."""
        return self._value

    @property
    def is_clean(self) -> bool:
        """True if all five segments are integers and there is no legacy tail."""
        return not self._pre_release_segments and ABSENT_SEGMENT not in self._segments

    @property
    def canonical(self) -> str:
        """
        Canonical string form.

        ``major.minor`` is always shown; lower segments only when they or a
        segment after them is non-zero. Legacy versions render their numeric
        segments up to the first absent one, followed by the raw tokens.
        """
        if ABSENT_SEGMENT in self._segments:
            first_absent = self._segments.index(ABSENT_SEGMENT)
            parts = [str(s) for s in self._segments[:first_absent]]
            parts.extend(self._pre_release_segments)
        else:
            shown = 2
            for i in range(MAX_VERSION_SEGMENT_COUNT - 1, 1, -1):
                if self._segments[i] != 0:
                    shown = i + 1
                    break
            parts = [str(s) for s in self._segments[:shown]]

        result = ".".join(parts)
        if self._pre_release:
            result += f"-{self._pre_release}"
        if self._build_metadata:
            result += f"+{self._build_metadata}"
        return result

    # Derived versions

    def _base_segments(self) -> List[int]:
        # Absent segments count as zero once the legacy tail is dropped.
        return [max(s, 0) for s in self._segments]

    def bump(self) -> "Version":
        """Return the next version, incrementing the last segment."""
        major, minor, patch, segment4, segment5 = self._base_segments()
        return Version(major, minor, patch, segment4, segment5 + 1, policy=self._policy)

    def bump_minor(self) -> "Version":
        """Return ``major.(minor + 1)``."""
        major, minor = self._base_segments()[:2]
        return Version(major, minor + 1, policy=self._policy)

    def bump_major(self) -> "Version":
        """Return ``(major + 1).0``."""
        return Version(self.major + 1, policy=self._policy)

    # Comparison

    def _compare(self, other: "Version") -> int:
        if self._segments != other._segments:
            return -1 if self._segments < other._segments else 1

        if self._pre_release_segments != other._pre_release_segments:
            # Element-wise; a strict prefix sorts first.
            if self._pre_release_segments < other._pre_release_segments:
                return -1
            return 1

        # A version with a pre-release precedes the release it leads to.
        policy = self._policy if self._policy is other._policy else VersionPolicy.STRICT
        result = _compare_pre_release(self._pre_release, other._pre_release, policy)
        if result:
            return result

        # Build metadata follows the same rule, present before absent.
        return _compare_optional(self._build_metadata, other._build_metadata)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return (
            self._segments == other._segments
            and self._pre_release == other._pre_release
            and self._build_metadata == other._build_metadata
            and self._pre_release_segments == other._pre_release_segments
        )

    def __lt__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self._segments, self._pre_release, self._build_metadata))

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Version('{self._value}')"


Version.LOWEST = Version(0, 0, 0, 0, 1)


def _compare_optional(left: Optional[str], right: Optional[str]) -> int:
    if left == right:
        return 0
    if left is None:
        return 1
    if right is None:
        return -1
    return -1 if left < right else 1


def _pre_release_key(pre_release: str) -> Tuple[Tuple[int, Union[int, str]], ...]:
    # Letter tokens sort before numeric ones; numbers compare by value.
    return tuple(
        (1, int(token)) if token.isdigit() else (0, token)
        for token in _TOKEN_PATTERN.findall(pre_release)
    )


def _compare_pre_release(
    left: Optional[str], right: Optional[str], policy: VersionPolicy
) -> int:
    if policy is VersionPolicy.LEGACY and left is not None and right is not None:
        left_key = _pre_release_key(left)
        right_key = _pre_release_key(right)
        if left_key != right_key:
            return -1 if left_key < right_key else 1
    return _compare_optional(left, right)


def parse_version(
    version_string: str, policy: VersionPolicy = VersionPolicy.STRICT
) -> Version:
    """
    Parse a version string into a Version object.

    Args:
        version_string: Version string to parse
        policy: Ordering policy of the parsed version

    Returns:
        Version object

    Raises:
        VersionParseError: If version string is invalid
    """
    return Version.from_string(version_string, policy)


def increment_version(version: str, component: str = "minor") -> str:
    """
    Increment a version string.

    Args:
        version: Current version string
        component: Which component to increment ("major", "minor", or "segment")

    Returns:
        Incremented version string in canonical form

    Raises:
        VersionParseError: If version string is invalid
        ValueError: If component is unknown
    """
    v = Version.from_string(version)

    if component == "major":
        new_v = v.bump_major()
    elif component == "minor":
        new_v = v.bump_minor()
    elif component == "segment":
        new_v = v.bump()
    else:
        raise ValueError(f"Unknown version component: {component}")

    return str(new_v)


def compare_versions(
    version1: str, version2: str, policy: VersionPolicy = VersionPolicy.STRICT
) -> int:
    """
    Compare two version strings.

    Args:
        version1: First version string
        version2: Second version string
        policy: Ordering policy used for the comparison

    Returns:
        -1 if version1 < version2
         0 if they are equal
         1 if version1 > version2

    Raises:
        VersionParseError: If either version string is invalid
    """
    v1 = Version.from_string(version1, policy)
    v2 = Version.from_string(version2, policy)

    if v1 < v2:
        return -1
    elif v1 > v2:
        return 1
    else:
        return 0


def sort_versions(versions: Iterable[Version], reverse: bool = False) -> List[Version]:
    """Sort versions by their ordering policy; ties keep their input order."""
    return sorted(versions, reverse=reverse)


def max_version(versions: Iterable[Version]) -> Optional[Version]:
    """Return the greatest version, the first one on ties, or None if empty."""
    result: Optional[Version] = None
    for version in versions:
        if result is None or version > result:
            result = version
    return result
