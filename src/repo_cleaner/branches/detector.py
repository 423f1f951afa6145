"""Stale branch detection for a single repository."""

import logging
from datetime import UTC, datetime

from repo_cleaner.branches.policy import StalenessPolicy
from repo_cleaner.branches.registry import BranchRegistry
from repo_cleaner.models import Repository

logger = logging.getLogger(__name__)


class StaleBranchDetector:
    """Finds remote branches whose last commit is older than the policy threshold.

    Output order is the gateway's enumeration order. That order is stable for
    one gateway implementation but may differ between implementations. Every
    call queries the gateway afresh.
    """

    def __init__(self, registry: BranchRegistry, policy: StalenessPolicy) -> None:
        """Initialize the detector.

        Args:
            registry: Source of remote branches and their activity
            policy: Staleness predicate with the configured threshold
        """
        self.registry = registry
        self.policy = policy

    def detect(self, repo: Repository, now: datetime | None = None) -> list[str]:
        """Detect stale remote branches.

        Args:
            repo: Repository to inspect
            now: Reference time (default: current UTC time)

        Returns:
            Stale branch names in enumeration order
        """
        reference = now or datetime.now(UTC)
        stale: list[str] = []

        for activity in self.registry.activities(repo):
            if not activity.is_known:
                logger.debug(f"{repo.identifier}: skipping {activity.branch}, last activity unknown")
                continue
            if self.policy.is_stale(activity.last_commit, reference):
                stale.append(activity.branch)

        logger.debug(f"{repo.identifier}: {len(stale)} stale branches")
        return stale
