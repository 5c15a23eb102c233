"""
Versioning module for manifestkit.

All version parsing, rendering and comparison lives here, so that lockfiles,
manifests and the dependency resolver share one set of rules.

CORE VERSION LOGIC (version.py):
================================

Version:
    Up to five numeric segments plus optional pre-release and build metadata
    (``1.2.3.4.5-beta+exp``). Versions whose segments are not all numeric are
    parsed in legacy mode and keep their raw tokens for comparison.
    Immutable; ``bump``, ``bump_minor`` and ``bump_major`` return new values.

VersionPolicy:
    Only changes how two pre-release strings compare. ``STRICT`` uses plain
    string order; ``LEGACY`` compares their letter and number tokens the way
    the legacy pod version dialect does, so ``rc.9`` precedes ``rc.10``.
    Both are total orders.

SYSTEM INTEGRATION:
==================

- A dependency resolver (outside this package) uses ``<`` and ``==`` as its
  comparison key and the bump methods to compute range upper bounds.
- ``manifestkit.model`` stores versions in lockfiles as their string form.

EXCEPTIONS (exceptions.py):
==========================

Parsing never aborts the process; it raises ``VersionParseError`` (a
``ValueError``) or, through ``Version.parse``, returns None.
"""

from .exceptions import (
    VersioningError,
    VersionParseError,
    VersionSegmentCountError,
)
from .version import (
    Version,
    VersionPolicy,
    version_segments,
    parse_version,
    increment_version,
    compare_versions,
    sort_versions,
    max_version,
)

__all__ = [
    # Core version utilities
    "Version",
    "VersionPolicy",
    "version_segments",
    "parse_version",
    "increment_version",
    "compare_versions",
    "sort_versions",
    "max_version",
    # Exceptions
    "VersioningError",
    "VersionParseError",
    "VersionSegmentCountError",
]
