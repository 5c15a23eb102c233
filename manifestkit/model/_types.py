"""Pydantic field types that carry paths and versions as plain strings."""

import warnings
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from manifestkit.paths import Path
from manifestkit.versioning import Version


def _to_path(value: Any) -> Path:
    """Validate a path field; strings are normalized, other types rejected."""
    if isinstance(value, Path):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Path must be a string, not {type(value).__name__}")
    return Path(value)


def _to_version(value: Any) -> Version:
    """Validate a version field.

    YAML turns an unquoted ``1.10`` into the float ``1.1``, so numeric values
    are accepted with a warning rather than silently trusted.
    """
    if isinstance(value, Version):
        return value
    if isinstance(value, (float, int)) and not isinstance(value, bool):
        warnings.warn(
            f"Version should be a string, not {type(value).__name__}. "
            f"Please quote it as '{value}' to keep all of its digits.",
            FutureWarning,
            stacklevel=2,
        )
        value = str(value)
    if not isinstance(value, str):
        raise ValueError(f"Version must be a string, not {type(value).__name__}")
    return Version.from_string(value)


ManifestPath = Annotated[
    Path, BeforeValidator(_to_path), PlainSerializer(str, return_type=str)
]
ManifestVersion = Annotated[
    Version, BeforeValidator(_to_version), PlainSerializer(str, return_type=str)
]
