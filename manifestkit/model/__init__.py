"""Pydantic models that store paths and versions in their string form."""

from manifestkit.model._types import ManifestPath, ManifestVersion
from manifestkit.model.lockfile import (
    SourceType,
    PodData,
    SourceData,
    Lockfile,
    LocalPodspecs,
)

__all__ = [
    # Field types
    "ManifestPath",
    "ManifestVersion",
    # Lockfile
    "SourceType",
    "PodData",
    "SourceData",
    "Lockfile",
    "LocalPodspecs",
]
