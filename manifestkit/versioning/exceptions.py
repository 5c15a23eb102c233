"""
Exception classes for the versioning module.
"""

from manifestkit.constants import MAX_VERSION_SEGMENT_COUNT


class VersioningError(Exception):
    """Base exception for all versioning-related errors."""

    pass


class VersionParseError(VersioningError, ValueError):
    """Raised when a version string cannot be parsed."""

    def __init__(
        self,
        version_string: str,
        reason: str = "Major must be present and be an integer",
    ):
        self.version_string = version_string
        self.reason = reason
        super().__init__(f"Invalid version: '{version_string}'. {reason}")


class VersionSegmentCountError(VersionParseError):
    """Raised when a version has more segments than can be represented."""

    def __init__(self, version_string: str, segment_count: int):
        self.segment_count = segment_count
        super().__init__(
            version_string,
            f"Versions with segment count more than {MAX_VERSION_SEGMENT_COUNT} "
            f"are not supported (got {segment_count})",
        )
