"""Human approval of stale branch deletions."""

import logging
from abc import ABC, abstractmethod

from rich.console import Console
from rich.prompt import Confirm

from repo_cleaner.models import ApprovalDecision

logger = logging.getLogger(__name__)


class ApprovalPrompter(ABC):
    """Abstract base class for collecting per-branch deletion approval."""

    @abstractmethod
    def request_approval(self, stale_branches: list[str]) -> ApprovalDecision:
        """Ask whether each stale branch may be deleted.

        Args:
            stale_branches: Stale branches in display order

        Returns:
            Decision for every branch; undecided branches are rejected
        """


class ConsoleApprovalPrompter(ApprovalPrompter):
    """Asks one independent yes/no question per branch on the terminal.

    Every question defaults to "no". If input ends (non-interactive stdin)
    or the user interrupts, the remaining branches are rejected instead of
    aborting the run.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the prompter.

        Args:
            console: Console used for prompts (default: new Console)
        """
        self.console = console or Console()

    def request_approval(self, stale_branches: list[str]) -> ApprovalDecision:
        """Prompt for each stale branch in order.

        Args:
            stale_branches: Stale branches in display order

        Returns:
            Decision mapping each branch to the user's answer
        """
        if not stale_branches:
            return ApprovalDecision()

        decision = ApprovalDecision.reject_all(stale_branches)

        for branch in stale_branches:
            try:
                decision.decisions[branch] = self._confirm(branch)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                logger.warning("Approval prompt cancelled; remaining branches will be kept")
                break

        return decision

    def _confirm(self, branch: str) -> bool:
        return Confirm.ask(
            f"Do you want to delete the branch '{branch}'?",
            default=False,
            console=self.console,
        )
