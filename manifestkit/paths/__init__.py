"""
Syntactic path handling for manifests.

Paths in a manifest are plain strings on the wire. This module turns them
into normalized ``Path`` values that can be compared, hashed, concatenated
and made relative to each other without ever touching the file system:

- ``Path``: immutable absolute, relative or root-relative (``@/``) path
- ``PathType``: the kind of a path, derived from its prefix
- a small exception hierarchy rooted at ``PathError``; ``InvalidPath`` is the
  only error raised while turning strings into paths
"""

from manifestkit.constants import PathType

from .exceptions import (
    PathError,
    InvalidPath,
    StartsWithTildeError,
    InvalidAbsolutePathError,
    InvalidRelativePathError,
    PathOperandError,
)
from .path import Path

__all__ = [
    "Path",
    "PathType",
    # Exceptions
    "PathError",
    "InvalidPath",
    "StartsWithTildeError",
    "InvalidAbsolutePathError",
    "InvalidRelativePathError",
    "PathOperandError",
]
