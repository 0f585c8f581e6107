"""Unit tests for confchain CLI commands."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from confchain.entrypoints.cli import cli
from tests.helpers import (
    assert_command_failed,
    assert_command_success,
    assert_output_contains,
)


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


class TestGet:
    """Tests for 'confchain get'."""

    def test_get_string(self, runner: CliRunner, sample_config_file: Path) -> None:
        result = runner.invoke(
            cli, ["get", "HOST", "--no-env", "-f", str(sample_config_file)], obj={}
        )
        assert_command_success(result)
        assert result.output.strip() == "localhost"

    def test_get_float(self, runner: CliRunner, sample_config_file: Path) -> None:
        result = runner.invoke(
            cli,
            ["get", "PORT", "--type", "float", "--no-env", "-f", str(sample_config_file)],
            obj={},
        )
        assert_command_success(result)
        assert result.output.strip() == "8080.0"

    def test_get_bool(self, runner: CliRunner, sample_config_file: Path) -> None:
        result = runner.invoke(
            cli,
            ["get", "DEBUG", "-t", "bool", "--no-env", "-f", str(sample_config_file)],
            obj={},
        )
        assert_command_success(result)
        assert result.output.strip() == "true"

    def test_relative_file_uses_base_dir(
        self, runner: CliRunner, sample_config_file: Path
    ) -> None:
        result = runner.invoke(
            cli,
            [
                "get",
                "HOST",
                "--no-env",
                "--base-dir",
                str(sample_config_file.parent),
                "-f",
                sample_config_file.name,
            ],
            obj={},
        )
        assert_command_success(result)
        assert result.output.strip() == "localhost"

    def test_file_precedence(self, runner: CliRunner, config_file_factory) -> None:
        local = config_file_factory("local.env", ["HOST=override"])
        base = config_file_factory("app.env", ["HOST=localhost", "PORT=80"])

        result = runner.invoke(
            cli, ["get", "HOST", "--no-env", "-f", str(local), "-f", str(base)], obj={}
        )
        assert_command_success(result)
        assert result.output.strip() == "override"

    def test_environment_overrides_files(
        self, runner: CliRunner, sample_config_file: Path
    ) -> None:
        result = runner.invoke(
            cli,
            ["get", "HOST", "--env-prefix", "CCTEST_", "-f", str(sample_config_file)],
            env={"CCTEST_HOST": "from-env"},
            obj={},
        )
        assert_command_success(result)
        assert result.output.strip() == "from-env"

    def test_env_prefix_from_environment(
        self, runner: CliRunner, sample_config_file: Path
    ) -> None:
        result = runner.invoke(
            cli,
            ["get", "HOST", "-f", str(sample_config_file)],
            env={"CONFCHAIN_ENV_PREFIX": "CCTEST_", "CCTEST_HOST": "prefixed"},
            obj={},
        )
        assert_command_success(result)
        assert result.output.strip() == "prefixed"

    def test_secrets_take_precedence(
        self, runner: CliRunner, secrets_dir: Path, config_file_factory
    ) -> None:
        path = config_file_factory("app.env", ["postgres-user=fromfile"])
        result = runner.invoke(
            cli,
            [
                "get",
                "postgres-user",
                "--no-env",
                "--secrets-dir",
                str(secrets_dir),
                "-f",
                str(path),
            ],
            obj={},
        )
        assert_command_success(result)
        assert result.output.strip() == "solvent"

    def test_unresolvable_key_fails_with_diagnostic(
        self, runner: CliRunner, sample_config_file: Path
    ) -> None:
        result = runner.invoke(
            cli, ["get", "MISSING", "--no-env", "-f", str(sample_config_file)], obj={}
        )
        assert_command_failed(result)
        assert_output_contains(result, "MISSING", "#0", "Hint:")

    def test_type_mismatch_fails(self, runner: CliRunner, sample_config_file: Path) -> None:
        result = runner.invoke(
            cli,
            ["get", "HOST", "-t", "float", "--no-env", "-f", str(sample_config_file)],
            obj={},
        )
        assert_command_failed(result)
        assert_output_contains(result, "float64")

    def test_no_providers(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["get", "HOST", "--no-env"], obj={})
        assert_command_failed(result)
        assert_output_contains(result, "no providers configured")

    def test_malformed_file_reported(self, runner: CliRunner, config_file_factory) -> None:
        path = config_file_factory("bad.env", ["NOT A RECORD"])
        result = runner.invoke(cli, ["get", "HOST", "--no-env", "-f", str(path)], obj={})
        assert_command_failed(result)
        assert_output_contains(result, "could not parse line 'NOT A RECORD'")


class TestCheck:
    """Tests for 'confchain check'."""

    def test_valid_file(self, runner: CliRunner, sample_config_file: Path) -> None:
        result = runner.invoke(cli, ["check", str(sample_config_file)], obj={})
        assert_command_success(result)
        assert_output_contains(result, "OK", "3 keys")

    def test_missing_file_is_not_an_error(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["check", str(tmp_path / "absent.env")], obj={})
        assert_command_success(result)
        assert_output_contains(result, "not found")

    def test_malformed_file(self, runner: CliRunner, config_file_factory) -> None:
        path = config_file_factory("bad.env", ["A=1", "B=2=3"])
        result = runner.invoke(cli, ["check", str(path)], obj={})
        assert_command_failed(result)
        assert_output_contains(result, "B=2=3", "Hint:")

    def test_quiet_suppresses_output(self, runner: CliRunner, sample_config_file: Path) -> None:
        result = runner.invoke(cli, ["--quiet", "check", str(sample_config_file)], obj={})
        assert_command_success(result)
        assert result.output == ""
