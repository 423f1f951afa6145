"""Top-level models for repo-cleaner."""

from collections.abc import Iterable
from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

# Remote identifiers that trigger a clone when no working copy exists
REMOTE_PREFIXES = ("http://", "https://", "ssh://", "git://")


class Repository(BaseModel):
    """A repository from the fleet list and the working copy used for git calls."""

    identifier: str = Field(description="Local path or remote URL as listed")
    working_dir: Path = Field(description="Working directory for all gateway calls")

    @property
    def is_remote(self) -> bool:
        """Check if the identifier is a URL rather than a local path.

        Returns:
            True for http(s), ssh, git and scp-style identifiers
        """
        return is_remote_identifier(self.identifier)


def is_remote_identifier(identifier: str) -> bool:
    """Check whether a repository identifier is a clone URL."""
    if identifier.startswith(REMOTE_PREFIXES):
        return True
    # scp-style: git@github.com:org/repo.git
    head, sep, _ = identifier.partition(":")
    return bool(sep) and "@" in head and "/" not in head


class BranchActivity(BaseModel):
    """A remote branch and the time of its most recent commit.

    ``last_commit`` is None when the lookup failed or returned nothing.
    Unknown activity is never treated as stale.
    """

    branch: str
    last_commit: datetime | None = None

    @property
    def is_known(self) -> bool:
        return self.last_commit is not None


class ApprovalDecision(BaseModel):
    """Per-branch accept/reject verdicts, in prompt order.

    Branches without an entry are rejected.
    """

    decisions: dict[str, bool] = Field(default_factory=dict)

    @classmethod
    def reject_all(cls, branches: Iterable[str]) -> "ApprovalDecision":
        """Build a decision that rejects every branch.

        Args:
            branches: Branches to reject

        Returns:
            Decision with every branch set to False
        """
        return cls(decisions=dict.fromkeys(branches, False))

    def is_approved(self, branch: str) -> bool:
        return self.decisions.get(branch, False)

    @property
    def approved(self) -> list[str]:
        """Approved branches in their original order."""
        return [branch for branch, accepted in self.decisions.items() if accepted]

    @property
    def has_approvals(self) -> bool:
        return any(self.decisions.values())

    def restricted_to(self, branches: Iterable[str]) -> "ApprovalDecision":
        """Drop decisions for branches outside the given set.

        Args:
            branches: Branches the decision may cover (the stale set)

        Returns:
            New decision containing only entries for the given branches,
            ordered like ``branches``
        """
        return ApprovalDecision(
            decisions={branch: self.decisions[branch] for branch in branches if branch in self.decisions}
        )


class DeletionStatus(str, Enum):
    """Result of a single remote branch deletion."""

    DELETED = "deleted"
    FAILED = "failed"


class DeletionOutcome(BaseModel):
    """Outcome of deleting one approved branch."""

    branch: str
    status: DeletionStatus

    @property
    def succeeded(self) -> bool:
        return self.status == DeletionStatus.DELETED


class WorkflowState(str, Enum):
    """States of the per-repository cleanup workflow."""

    DETECTING = "detecting"
    AWAITING_APPROVAL = "awaiting_approval"
    DELETING = "deleting"
    DONE = "done"


class CleanupStatus(str, Enum):
    """How a repository's cleanup pass ended."""

    NO_STALE_BRANCHES = "no_stale_branches"
    NOTHING_SELECTED = "nothing_selected"
    COMPLETED = "completed"
    SKIPPED = "skipped"

    @property
    def display_name(self) -> str:
        """Get human-readable description.

        Returns:
            Message shown in summaries
        """
        return {
            CleanupStatus.NO_STALE_BRANCHES: "no stale branches",
            CleanupStatus.NOTHING_SELECTED: "nothing selected",
            CleanupStatus.COMPLETED: "completed",
            CleanupStatus.SKIPPED: "skipped",
        }[self]


class RepoCleanupResult(BaseModel):
    """Result of one repository's cleanup pass."""

    repository: Repository
    status: CleanupStatus
    stale_branches: list[str] = Field(default_factory=list)
    decision: ApprovalDecision = Field(default_factory=ApprovalDecision)
    outcomes: list[DeletionOutcome] = Field(default_factory=list)
    states: list[WorkflowState] = Field(default_factory=list)
    error_message: str | None = None

    @property
    def deleted_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.succeeded)


class FleetSummary(BaseModel):
    """Summary of a pass over every repository in the list."""

    results: list[RepoCleanupResult] = Field(default_factory=list)

    @property
    def repositories_processed(self) -> int:
        return len(self.results)

    @property
    def repositories_skipped(self) -> int:
        return sum(1 for result in self.results if result.status == CleanupStatus.SKIPPED)

    @property
    def branches_deleted(self) -> int:
        return sum(result.deleted_count for result in self.results)

    @property
    def branches_failed(self) -> int:
        """Count deletions that failed across all repositories.

        Returns:
            Number of failed deletions
        """
        return sum(result.failed_count for result in self.results)

    @property
    def has_failures(self) -> bool:
        return self.branches_failed > 0 or self.repositories_skipped > 0
