"""Tests for CLI commands."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from repo_cleaner import __version__
from repo_cleaner.cli import app
from repo_cleaner.models import (
    CleanupStatus,
    DeletionOutcome,
    DeletionStatus,
    FleetSummary,
    RepoCleanupResult,
    Repository,
)

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every command in an empty directory without REPO_CLEANER_ variables."""
    monkeypatch.chdir(tmp_path)
    for name in ("MAX_AGE_MONTHS", "REMOTE_NAME", "REPO_LIST_FILE", "CLONE_ROOT"):
        monkeypatch.delenv(f"REPO_CLEANER_{name}", raising=False)


def _summary_with_failure(tmp_path: Path) -> FleetSummary:
    repo = Repository(identifier=str(tmp_path), working_dir=tmp_path)
    return FleetSummary(
        results=[
            RepoCleanupResult(
                repository=repo,
                status=CleanupStatus.COMPLETED,
                stale_branches=["a", "b"],
                outcomes=[
                    DeletionOutcome(branch="a", status=DeletionStatus.DELETED),
                    DeletionOutcome(branch="b", status=DeletionStatus.FAILED),
                ],
            )
        ]
    )


class TestCleanCommand:
    """Tests for the clean command."""

    def test_missing_repo_list_exits_cleanly(self) -> None:
        """Test a missing repository list is informational, not an error."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "masterRepolist.txt file not found!" in result.output

    def test_empty_repo_list(self, tmp_path: Path) -> None:
        """Test an empty list ends the run early."""
        (tmp_path / "masterRepolist.txt").write_text("\n\n")

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "No repositories found in masterRepolist.txt" in result.output

    @patch("repo_cleaner.cli.FleetRunner")
    def test_runs_fleet_with_defaults(self, mock_runner_class: MagicMock, tmp_path: Path) -> None:
        """Test the default run reads masterRepolist.txt and uses 12 months."""
        (tmp_path / "masterRepolist.txt").write_text("/srv/a\nhttps://github.com/org/b.git\n")
        mock_runner_class.return_value.run.return_value = FleetSummary()

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        mock_runner_class.return_value.run.assert_called_once_with(["/srv/a", "https://github.com/org/b.git"])
        workflow, _cloner, clone_root, _console = mock_runner_class.call_args.args
        assert workflow.max_age_months == 12
        assert workflow.detector.registry.gateway.remote_name == "origin"
        assert clone_root == tmp_path.resolve()
        assert "Max age: 12 months" in result.output

    @patch("repo_cleaner.cli.FleetRunner")
    def test_options_override_config(self, mock_runner_class: MagicMock, tmp_path: Path) -> None:
        """Test command-line options take precedence."""
        repo_list = tmp_path / "lists" / "repos.txt"
        repo_list.parent.mkdir()
        repo_list.write_text("/srv/a\n")
        mock_runner_class.return_value.run.return_value = FleetSummary()

        result = runner.invoke(
            app,
            ["--repo-list", str(repo_list), "--max-age-months", "6", "--remote", "upstream", "--verbose"],
        )

        assert result.exit_code == 0
        workflow, _cloner, clone_root, _console = mock_runner_class.call_args.args
        assert workflow.max_age_months == 6
        assert workflow.detector.registry.gateway.remote_name == "upstream"
        assert clone_root == repo_list.parent.resolve()

    @patch("repo_cleaner.cli.FleetRunner")
    def test_deletion_failures_do_not_change_exit_code(self, mock_runner_class: MagicMock, tmp_path: Path) -> None:
        """Test per-branch failures are reported but exit code stays 0."""
        (tmp_path / "masterRepolist.txt").write_text(f"{tmp_path}\n")
        mock_runner_class.return_value.run.return_value = _summary_with_failure(tmp_path)

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "Branches deleted: 1" in result.output
        assert "Deletions failed: 1" in result.output

    def test_invalid_threshold_is_configuration_error(self, tmp_path: Path) -> None:
        """Test an invalid threshold exits with an error."""
        (tmp_path / "masterRepolist.txt").write_text("/srv/a\n")

        result = runner.invoke(app, ["--max-age-months", "0"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_malformed_env_value_is_configuration_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a non-numeric threshold from the environment exits with an error."""
        monkeypatch.setenv("REPO_CLEANER_MAX_AGE_MONTHS", "abc")

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Configuration error" in result.output
        assert "max_age_months" in result.output

    def test_missing_env_file_is_configuration_error(self, tmp_path: Path) -> None:
        """Test a missing custom env file exits with an error."""
        result = runner.invoke(app, ["--env-file", str(tmp_path / "missing.env")])

        assert result.exit_code == 1
        assert "Environment file not found" in result.output

    def test_env_file_configures_run(self, tmp_path: Path) -> None:
        """Test settings are read from a custom env file."""
        env_file = tmp_path / "custom.env"
        env_file.write_text("REPO_CLEANER_REPO_LIST_FILE=fleet.txt\n")

        result = runner.invoke(app, ["--env-file", str(env_file)])

        assert result.exit_code == 0
        assert "fleet.txt file not found!" in result.output

    def test_version(self) -> None:
        """Test --version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"repo-cleaner version {__version__}" in result.output


class TestEndToEnd:
    """Tests running the real workflow with a mocked gateway and prompt."""

    @patch("repo_cleaner.approval.prompter.Confirm.ask")
    @patch("repo_cleaner.cli.GitGateway")
    def test_approved_branch_is_deleted(
        self,
        mock_gateway_class: MagicMock,
        mock_ask: MagicMock,
        tmp_path: Path,
    ) -> None:
        """Test the full pass deletes only the approved stale branch."""
        work = tmp_path / "work"
        work.mkdir()
        (tmp_path / "masterRepolist.txt").write_text(f"{work}\n")

        gateway = mock_gateway_class.return_value
        gateway.remote_name = "origin"
        gateway.enumerate_remote_branches.return_value = "  origin/feature/a\n  origin/feature/b"
        gateway.last_commit_timestamp.side_effect = lambda _dir, branch: {
            "feature/a": "2001-01-01 00:00:00 +0000",
            "feature/b": "2001-02-01 00:00:00 +0000",
        }[branch]
        gateway.delete_remote_branch.return_value = True
        mock_ask.side_effect = [True, False]

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        gateway.delete_remote_branch.assert_called_once_with(work, "feature/a")
        assert "Found 2 stale branches older than 12 months:" in result.output
        assert "Branches deleted: 1" in result.output
