"""Tests for the version commands."""

import pytest
from click.testing import CliRunner

from manifestkit import __version__
from manifestkit.cli.main import cli
from manifestkit.config import POLICY_ENV_VAR


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def strict_policy(monkeypatch, tmp_path):
    monkeypatch.delenv(POLICY_ENV_VAR, raising=False)
    monkeypatch.setattr("manifestkit.config.config_dir", tmp_path)


@pytest.mark.short
def test_program_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


class TestVersionParse:
    @pytest.mark.short
    def test_parse(self, runner):
        result = runner.invoke(cli, ["version", "parse", "1.2.0-alpha+001"])

        assert result.exit_code == 0
        fields = dict(
            line.split(":", 1) for line in result.output.splitlines() if ":" in line
        )
        assert fields["value"].strip() == "1.2.0-alpha+001"
        assert fields["canonical"].strip() == "1.2-alpha+001"
        assert fields["segments"].strip() == "1.2.0.0.0"
        assert fields["pre-release"].strip() == "alpha"
        assert fields["build metadata"].strip() == "001"
        assert fields["clean"].strip() == "yes"

    @pytest.mark.short
    def test_parse_legacy(self, runner):
        result = runner.invoke(cli, ["version", "parse", "1.0b2"])

        assert result.exit_code == 0
        assert "1.0.-1.2.0" in result.output
        assert "b 2" in result.output
        assert "no" in result.output

    @pytest.mark.short
    @pytest.mark.parametrize("raw", ["v1.0", "1.2.3.4.5.6"])
    def test_parse_invalid(self, runner, raw):
        result = runner.invoke(cli, ["version", "parse", raw])
        assert result.exit_code == 1


class TestVersionCompare:
    @pytest.mark.short
    @pytest.mark.parametrize(
        "first, second, expected",
        [
            ("1.2", "1.2.0.0.1", "<"),
            ("1.10", "1.9", ">"),
            ("1.2", "1.2.0", "="),
            ("1.0.0-alpha", "1.0.0", "<"),
        ],
    )
    def test_compare(self, runner, first, second, expected):
        result = runner.invoke(cli, ["version", "compare", first, second])

        assert result.exit_code == 0
        assert result.output.strip() == expected

    @pytest.mark.short
    def test_compare_legacy_option(self, runner):
        result = runner.invoke(
            cli,
            ["version", "compare", "1.0.0-rc.10", "1.0.0-rc.9", "--policy", "legacy"],
        )

        assert result.exit_code == 0
        assert result.output.strip() == ">"

    @pytest.mark.short
    def test_compare_legacy_from_environment(self, runner):
        result = runner.invoke(
            cli,
            ["version", "compare", "1.0.0-rc.10", "1.0.0-rc.9"],
            env={POLICY_ENV_VAR: "legacy"},
        )

        assert result.exit_code == 0
        assert result.output.strip() == ">"

    @pytest.mark.short
    def test_compare_policy_option_overrides_environment(self, runner):
        result = runner.invoke(
            cli,
            ["version", "compare", "1.0.0-rc.10", "1.0.0-rc.9", "--policy", "strict"],
            env={POLICY_ENV_VAR: "legacy"},
        )

        assert result.exit_code == 0
        assert result.output.strip() == "<"

    @pytest.mark.short
    def test_compare_unknown_policy(self, runner):
        result = runner.invoke(
            cli, ["version", "compare", "1.0", "1.1", "--policy", "loose"]
        )
        assert result.exit_code == 2

    @pytest.mark.short
    def test_compare_invalid(self, runner):
        result = runner.invoke(cli, ["version", "compare", "1.0", "abc"])
        assert result.exit_code == 1


class TestVersionSort:
    @pytest.mark.short
    def test_sort(self, runner):
        result = runner.invoke(
            cli, ["version", "sort", "1.10", "1.2-beta", "0.9", "1.2", "1.2.0.0.1"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "0.9",
            "1.2-beta",
            "1.2",
            "1.2.0.0.1",
            "1.10",
        ]

    @pytest.mark.short
    def test_sort_reverse(self, runner):
        result = runner.invoke(cli, ["version", "sort", "-r", "1.0", "2.0", "1.5"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["2.0", "1.5", "1.0"]


class TestVersionBump:
    @pytest.mark.short
    @pytest.mark.parametrize(
        "component, expected",
        [
            ("segment", "1.2.3.0.1"),
            ("minor", "1.3"),
            ("major", "2.0"),
        ],
    )
    def test_bump(self, runner, component, expected):
        result = runner.invoke(
            cli, ["version", "bump", "1.2.3-rc1", "--component", component]
        )

        assert result.exit_code == 0
        assert result.output.strip() == expected

    @pytest.mark.short
    def test_bump_default_component(self, runner):
        result = runner.invoke(cli, ["version", "bump", "1.0b2"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.0.0.2.1"
