"""Per-repository cleanup workflow."""

import logging
from datetime import datetime

from rich.console import Console

from repo_cleaner.approval.prompter import ApprovalPrompter
from repo_cleaner.branches.detector import StaleBranchDetector
from repo_cleaner.branches.policy import StalenessPolicy
from repo_cleaner.branches.registry import BranchRegistry
from repo_cleaner.cleanup.deleter import BranchDeleter
from repo_cleaner.models import (
    ApprovalDecision,
    CleanupStatus,
    DeletionOutcome,
    RepoCleanupResult,
    Repository,
    WorkflowState,
)
from repo_cleaner.vcs.base import VersionControlGateway

logger = logging.getLogger(__name__)


class RepoCleanupWorkflow:
    """Orchestrates stale branch cleanup for one repository.

    Coordinates:
    - Detection of stale remote branches
    - Per-branch human approval
    - Deletion of approved branches

    States run forward only: Detecting, then AwaitingApproval and Deleting
    when there is something to do, then Done. The instance keeps no state
    between runs and can be reused for every repository in a fleet.
    """

    def __init__(
        self,
        detector: StaleBranchDetector,
        prompter: ApprovalPrompter,
        deleter: BranchDeleter,
        console: Console | None = None,
    ) -> None:
        """Initialize the workflow.

        Args:
            detector: Stale branch detector
            prompter: Source of approval decisions
            deleter: Remote branch deleter
            console: Console for progress output (default: new Console)
        """
        self.detector = detector
        self.prompter = prompter
        self.deleter = deleter
        self.console = console or Console()

    @classmethod
    def create(
        cls,
        gateway: VersionControlGateway,
        prompter: ApprovalPrompter,
        max_age_months: int,
        console: Console | None = None,
    ) -> "RepoCleanupWorkflow":
        """Wire a workflow from a gateway and a threshold.

        Args:
            gateway: Gateway shared by detection and deletion
            prompter: Source of approval decisions
            max_age_months: Staleness threshold in calendar months
            console: Console for progress output

        Returns:
            Ready-to-run workflow
        """
        console = console or Console()
        detector = StaleBranchDetector(BranchRegistry(gateway), StalenessPolicy(max_age_months))
        return cls(detector, prompter, BranchDeleter(gateway, console), console)

    @property
    def max_age_months(self) -> int:
        return self.detector.policy.threshold_months

    def run(self, repo: Repository, now: datetime | None = None) -> RepoCleanupResult:
        """Run detection, approval and deletion for a repository.

        Args:
            repo: Repository to clean up
            now: Reference time for staleness (default: current UTC time)

        Returns:
            RepoCleanupResult describing how the pass ended
        """
        states = [WorkflowState.DETECTING]
        stale_branches = self.detector.detect(repo, now)

        if not stale_branches:
            self.console.print("[green]No stale branches found.[/green]")
            return self._done(repo, CleanupStatus.NO_STALE_BRANCHES, states)

        self._display_stale_branches(stale_branches)

        states.append(WorkflowState.AWAITING_APPROVAL)
        decision = self.prompter.request_approval(stale_branches).restricted_to(stale_branches)

        if not decision.has_approvals:
            self.console.print("[yellow]No branches selected for deletion.[/yellow]")
            return self._done(
                repo,
                CleanupStatus.NOTHING_SELECTED,
                states,
                stale_branches=stale_branches,
                decision=decision,
            )

        states.append(WorkflowState.DELETING)
        outcomes = self.deleter.delete_approved(repo, decision)
        self._display_outcomes(outcomes)

        return self._done(
            repo,
            CleanupStatus.COMPLETED,
            states,
            stale_branches=stale_branches,
            decision=decision,
            outcomes=outcomes,
        )

    def _done(
        self,
        repo: Repository,
        status: CleanupStatus,
        states: list[WorkflowState],
        stale_branches: list[str] | None = None,
        decision: ApprovalDecision | None = None,
        outcomes: list[DeletionOutcome] | None = None,
    ) -> RepoCleanupResult:
        states.append(WorkflowState.DONE)
        logger.debug(f"{repo.identifier}: {' -> '.join(state.value for state in states)}")
        return RepoCleanupResult(
            repository=repo,
            status=status,
            stale_branches=stale_branches or [],
            decision=decision or ApprovalDecision(),
            outcomes=outcomes or [],
            states=states,
        )

    def _display_stale_branches(self, stale_branches: list[str]) -> None:
        self.console.print(
            f"[bold]Found {len(stale_branches)} stale branches older than {self.max_age_months} months:[/bold]"
        )
        for idx, branch in enumerate(stale_branches, 1):
            self.console.print(f"  {idx}. {branch}")

    def _display_outcomes(self, outcomes: list[DeletionOutcome]) -> None:
        """Display per-branch deletion results.

        Args:
            outcomes: Deletion outcomes to display
        """
        for outcome in outcomes:
            status = "[green]✓[/green]" if outcome.succeeded else "[red]✗[/red]"
            self.console.print(f"  {status} {outcome.branch}: {outcome.status.value}")
        self.console.print("[green]Branch cleanup completed.[/green]")
