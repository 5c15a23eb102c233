"""Pydantic models for the pod lockfile written after dependency resolution."""

import logging
from enum import Enum
from pathlib import Path as FilePath
from typing import Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ._types import ManifestPath, ManifestVersion

logger = logging.getLogger(__name__)


class SourceType(str, Enum):
    """Where the pods of a source come from."""

    git = "git"
    cdn = "cdn"
    path = "path"
    git_repo = "gitRepo"


class PodData(BaseModel):
    """Locked state of a single pod."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    hash: Optional[str] = Field(None, description="Checksum of the pod contents")
    version: ManifestVersion = Field(..., description="Locked pod version")
    subspecs: Optional[List[str]] = Field(None, description="Enabled subspecs")


class SourceData(BaseModel):
    """Pods resolved from one source."""

    type: SourceType = Field(..., description="Source type")
    ref: Optional[str] = Field(None, description="Git ref or CDN revision")
    pods: Dict[str, PodData] = Field(default_factory=dict)


class Lockfile(BaseModel):
    """Resolved pods, grouped by source name."""

    model_config = ConfigDict(populate_by_name=True)

    pods_by_source: Dict[str, SourceData] = Field(
        default_factory=dict, alias="podsBySource"
    )

    @classmethod
    def from_yaml(cls, path_or_content: Union[str, FilePath]) -> "Lockfile":
        """Load a lockfile from a YAML file or string content."""
        if isinstance(path_or_content, FilePath) or "\n" not in path_or_content:
            with open(path_or_content, "r") as f:
                data = yaml.safe_load(f)
        else:
            data = yaml.safe_load(path_or_content)

        lockfile = cls.model_validate(data or {})
        logger.debug(
            f"Loaded lockfile with {len(lockfile.pods_by_source)} sources "
            f"and {len(lockfile.all_pods())} pods"
        )
        return lockfile

    def to_yaml(self) -> str:
        """Serialize to YAML; paths and versions are written as strings."""
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)

    def all_pods(self) -> Dict[str, PodData]:
        """Pods of all sources by name; the highest version wins on duplicates."""
        pods: Dict[str, PodData] = {}
        for source in self.pods_by_source.values():
            for name, pod in source.pods.items():
                if name not in pods or pod.version > pods[name].version:
                    pods[name] = pod
        return pods

    def changed_pods(self, other: "Lockfile") -> List[str]:
        """Names of pods that were added, removed or changed in ``other``."""
        mine = self.all_pods()
        theirs = other.all_pods()
        return sorted(
            name
            for name in set(mine) | set(theirs)
            if mine.get(name) != theirs.get(name)
        )


class LocalPodspecs(BaseModel):
    """Local podspec files, keyed by the directory that provides them."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    local_podspecs: Dict[ManifestPath, List[ManifestPath]] = Field(
        default_factory=dict, alias="localPodspecs"
    )

    def podspecs(self) -> List[ManifestPath]:
        """All podspec paths, sorted and without duplicates."""
        return sorted({p for paths in self.local_podspecs.values() for p in paths})
