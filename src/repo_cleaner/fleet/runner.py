"""Sequential cleanup across a list of repositories."""

import logging
from datetime import UTC, datetime
from pathlib import Path

from rich.console import Console

from repo_cleaner.cleanup.workflow import RepoCleanupWorkflow
from repo_cleaner.fleet.repo_list import resolve_repository
from repo_cleaner.models import CleanupStatus, FleetSummary, RepoCleanupResult, Repository
from repo_cleaner.vcs.base import RepositoryCloner
from repo_cleaner.vcs.exceptions import NotARepositoryError, VCSError, VCSOperationError

logger = logging.getLogger(__name__)


class FleetRunner:
    """Runs the cleanup workflow once per repository, one at a time.

    A repository that cannot be prepared, or whose workflow fails
    unexpectedly, is reported as skipped and the pass continues with the
    next one.
    """

    def __init__(
        self,
        workflow: RepoCleanupWorkflow,
        cloner: RepositoryCloner,
        clone_root: Path,
        console: Console | None = None,
    ) -> None:
        """Initialize the fleet runner.

        Args:
            workflow: Per-repository workflow, reused for every repository
            cloner: Clone collaborator for URL repositories
            clone_root: Directory holding clones of URL repositories
            console: Console for progress output (default: new Console)
        """
        self.workflow = workflow
        self.cloner = cloner
        self.clone_root = clone_root
        self.console = console or Console()

    def run(self, identifiers: list[str], now: datetime | None = None) -> FleetSummary:
        """Clean up every repository in order.

        Args:
            identifiers: Repository paths or URLs
            now: Reference time shared by all repositories (default: current UTC time)

        Returns:
            FleetSummary with one result per identifier
        """
        reference = now or datetime.now(UTC)
        summary = FleetSummary()

        for identifier in identifiers:
            self.console.print(f"\n[bold cyan]Processing repository: {identifier}[/bold cyan]")
            repo = resolve_repository(identifier, self.clone_root)
            summary.results.append(self._process(repo, reference))

        return summary

    def _process(self, repo: Repository, now: datetime) -> RepoCleanupResult:
        try:
            self.prepare_working_copy(repo)
        except VCSError as e:
            self.console.print(f"[red]Skipping {repo.identifier}: {e}[/red]")
            return RepoCleanupResult(repository=repo, status=CleanupStatus.SKIPPED, error_message=str(e))

        try:
            return self.workflow.run(repo, now)
        except Exception as e:
            logger.exception(f"Cleanup failed for {repo.identifier}")
            return RepoCleanupResult(
                repository=repo,
                status=CleanupStatus.SKIPPED,
                error_message=f"Cleanup failed: {e}",
            )

    def prepare_working_copy(self, repo: Repository) -> None:
        """Make sure the repository has a local working copy.

        URL repositories are cloned once into the clone root; local paths
        must already exist.

        Args:
            repo: Repository to prepare

        Raises:
            VCSOperationError: If cloning fails
            NotARepositoryError: If the working directory does not exist
        """
        if repo.is_remote and not repo.working_dir.exists():
            self.console.print(f"Cloning repository: {repo.identifier}")
            if not self.cloner.clone(repo.identifier, repo.working_dir):
                msg = f"Failed to clone {repo.identifier}"
                raise VCSOperationError(msg)

        if not repo.working_dir.is_dir():
            msg = f"Repository directory not found: {repo.working_dir}"
            raise NotARepositoryError(msg)
