"""Deletion of approved remote branches."""

import logging

from rich.console import Console

from repo_cleaner.models import ApprovalDecision, DeletionOutcome, DeletionStatus, Repository
from repo_cleaner.vcs.base import VersionControlGateway

logger = logging.getLogger(__name__)


class BranchDeleter:
    """Deletes approved branches on the remote, one attempt each.

    A failed deletion is recorded and the batch carries on with the next
    branch.
    """

    def __init__(self, gateway: VersionControlGateway, console: Console | None = None) -> None:
        """Initialize the deleter.

        Args:
            gateway: Gateway used for remote deletions
            console: Console for progress output (default: new Console)
        """
        self.gateway = gateway
        self.console = console or Console()

    def delete_approved(self, repo: Repository, decision: ApprovalDecision) -> list[DeletionOutcome]:
        """Delete every approved branch in decision order.

        Args:
            repo: Repository whose remote is modified
            decision: Approval decision; only true-valued branches are deleted

        Returns:
            One outcome per approved branch, in the same order
        """
        outcomes: list[DeletionOutcome] = []

        for branch in decision.approved:
            self.console.print(f"Deleting branch: {branch}")
            if self.gateway.delete_remote_branch(repo.working_dir, branch):
                outcomes.append(DeletionOutcome(branch=branch, status=DeletionStatus.DELETED))
            else:
                logger.error(f"Failed to delete branch {branch} in {repo.identifier}")
                outcomes.append(DeletionOutcome(branch=branch, status=DeletionStatus.FAILED))

        return outcomes
