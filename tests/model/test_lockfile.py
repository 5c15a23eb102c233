"""Tests for the lockfile and local podspec models."""

import warnings

import pytest
import yaml
from pydantic import ValidationError

from manifestkit.model import (
    LocalPodspecs,
    Lockfile,
    PodData,
    SourceData,
    SourceType,
)
from manifestkit.paths import Path
from manifestkit.versioning import Version

LOCKFILE_YAML = """
podsBySource:
  trunk:
    type: cdn
    ref: "2024-05-01"
    pods:
      Alamofire:
        hash: abc123
        version: "5.8.1"
      SnapKit:
        version: "5.7.1"
  internal:
    type: git
    ref: main
    pods:
      Alamofire:
        version: "5.9.0-beta"
        subspecs:
          - Core
      Analytics:
        version: "1.0b2"
"""


@pytest.fixture
def lockfile():
    return Lockfile.from_yaml(LOCKFILE_YAML)


class TestLockfile:
    @pytest.mark.short
    def test_load_from_content(self, lockfile):
        assert set(lockfile.pods_by_source) == {"trunk", "internal"}

        trunk = lockfile.pods_by_source["trunk"]
        assert trunk.type is SourceType.cdn
        assert trunk.ref == "2024-05-01"
        assert trunk.pods["Alamofire"].hash == "abc123"
        assert trunk.pods["Alamofire"].version == Version(5, 8, 1)
        assert trunk.pods["SnapKit"].subspecs is None

        internal = lockfile.pods_by_source["internal"]
        assert internal.type is SourceType.git
        assert internal.pods["Alamofire"].subspecs == ["Core"]

    @pytest.mark.short
    def test_legacy_version_is_kept(self, lockfile):
        analytics = lockfile.pods_by_source["internal"].pods["Analytics"]
        assert analytics.version.pre_release_segments == ("b", "2")
        assert str(analytics.version) == "1.0b2"

    @pytest.mark.short
    def test_load_from_file(self, tmp_path):
        lockfile_path = tmp_path / "Podfile.lock.yaml"
        lockfile_path.write_text(LOCKFILE_YAML)

        lockfile = Lockfile.from_yaml(lockfile_path)
        assert len(lockfile.all_pods()) == 3

    @pytest.mark.short
    def test_load_empty_content(self, tmp_path):
        lockfile_path = tmp_path / "empty.yaml"
        lockfile_path.write_text("")

        lockfile = Lockfile.from_yaml(lockfile_path)
        assert lockfile.pods_by_source == {}

    @pytest.mark.short
    def test_git_repo_source_type(self):
        source = SourceData.model_validate({"type": "gitRepo"})
        assert source.type is SourceType.git_repo
        assert source.pods == {}

    @pytest.mark.short
    def test_unknown_source_type(self):
        with pytest.raises(ValidationError):
            SourceData.model_validate({"type": "svn"})

    @pytest.mark.short
    def test_all_pods_highest_version_wins(self, lockfile):
        pods = lockfile.all_pods()
        assert sorted(pods) == ["Alamofire", "Analytics", "SnapKit"]
        assert str(pods["Alamofire"].version) == "5.9.0-beta"

    @pytest.mark.short
    def test_round_trip(self, lockfile):
        dumped = lockfile.to_yaml()
        data = yaml.safe_load(dumped)

        assert "podsBySource" in data
        trunk = data["podsBySource"]["trunk"]
        assert trunk["type"] == "cdn"
        assert trunk["pods"]["Alamofire"] == {"hash": "abc123", "version": "5.8.1"}
        assert data["podsBySource"]["internal"]["pods"]["Analytics"] == {
            "version": "1.0b2"
        }

        assert Lockfile.from_yaml(dumped) == lockfile

    @pytest.mark.short
    def test_populate_by_name(self):
        lockfile = Lockfile(
            pods_by_source={
                "local": SourceData(
                    type=SourceType.path,
                    pods={"Core": PodData(version="2.0")},
                )
            }
        )
        assert lockfile.all_pods()["Core"].version == Version(2)

    @pytest.mark.short
    def test_invalid_version_rejected(self):
        with pytest.raises(ValidationError):
            PodData(version="v1")

    @pytest.mark.short
    def test_non_string_version_rejected(self):
        with pytest.raises(ValidationError):
            PodData(version=["1", "0"])

    @pytest.mark.short
    def test_numeric_version_warns(self):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            pod = PodData(version=1.10)

        assert any(issubclass(warning.category, FutureWarning) for warning in w)
        assert str(pod.version) == "1.1"

    @pytest.mark.short
    def test_changed_pods(self, lockfile):
        updated = lockfile.model_copy(deep=True)
        updated.pods_by_source["trunk"].pods["SnapKit"] = PodData(version="5.7.2")
        updated.pods_by_source["trunk"].pods["Kingfisher"] = PodData(version="7.0")
        del updated.pods_by_source["internal"].pods["Analytics"]

        assert lockfile.changed_pods(updated) == ["Analytics", "Kingfisher", "SnapKit"]
        assert lockfile.changed_pods(lockfile) == []


class TestLocalPodspecs:
    @pytest.mark.short
    def test_paths_are_normalized(self):
        specs = LocalPodspecs.model_validate(
            {
                "localPodspecs": {
                    "/a/./b/": ["/a/b/X.podspec", "@/sub/../Y.podspec"],
                }
            }
        )
        assert list(specs.local_podspecs) == [Path("/a/b")]
        assert specs.local_podspecs[Path("/a/b")] == [
            Path("/a/b/X.podspec"),
            Path("@/Y.podspec"),
        ]

    @pytest.mark.short
    def test_dump(self):
        specs = LocalPodspecs(
            local_podspecs={"/a/b": ["/a/b/X.podspec", "@/Y.podspec"]}
        )
        data = specs.model_dump(mode="json", by_alias=True)
        assert data == {"localPodspecs": {"/a/b": ["/a/b/X.podspec", "@/Y.podspec"]}}

    @pytest.mark.short
    def test_tilde_rejected(self):
        with pytest.raises(ValidationError):
            LocalPodspecs.model_validate({"localPodspecs": {"~/x": []}})

    @pytest.mark.short
    def test_non_string_path_rejected(self):
        with pytest.raises(ValidationError):
            LocalPodspecs.model_validate({"localPodspecs": {"/a": [1]}})

    @pytest.mark.short
    def test_podspecs(self):
        specs = LocalPodspecs(
            local_podspecs={
                "/a": ["@/Y.podspec", "/a/b/X.podspec"],
                "/b": ["/a/b/X.podspec"],
            }
        )
        assert specs.podspecs() == [Path("/a/b/X.podspec"), Path("@/Y.podspec")]
