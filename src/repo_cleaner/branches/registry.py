"""Remote branch enumeration and activity lookup."""

import logging
from datetime import datetime

from dateutil import parser as date_parser

from repo_cleaner.models import BranchActivity, Repository
from repo_cleaner.vcs.base import VersionControlGateway

logger = logging.getLogger(__name__)

# `git branch -r` lists symbolic refs as "origin/HEAD -> origin/main"
SYMBOLIC_REF_MARKER = " -> "


class BranchRegistry:
    """Reads remote branches and their last commit time through a gateway.

    Lookups never raise: a failed or empty gateway response becomes an
    empty branch list or an unknown (None) timestamp.
    """

    def __init__(self, gateway: VersionControlGateway) -> None:
        """Initialize the registry.

        Args:
            gateway: Gateway used for all git queries
        """
        self.gateway = gateway

    @property
    def remote_prefix(self) -> str:
        return f"{self.gateway.remote_name}/"

    def list_remote_branches(self, repo: Repository) -> list[str]:
        """List bare names of the remote's branches in enumeration order.

        Args:
            repo: Repository to inspect

        Returns:
            Branch names without the remote prefix; empty if enumeration failed
        """
        output = self.gateway.enumerate_remote_branches(repo.working_dir)
        if output is None:
            logger.warning(f"Could not list remote branches for {repo.identifier}")
            return []

        prefix = self.remote_prefix
        branches: list[str] = []
        for raw_line in output.split("\n"):
            line = raw_line.strip()
            if not line or not line.startswith(prefix):
                continue
            if SYMBOLIC_REF_MARKER in line:
                continue
            branches.append(line[len(prefix) :])

        logger.debug(f"{repo.identifier}: {len(branches)} remote branches")
        return branches

    def last_activity(self, repo: Repository, branch: str) -> datetime | None:
        """Get the time of a remote branch's most recent commit.

        Args:
            repo: Repository to inspect
            branch: Bare branch name

        Returns:
            Commit time, or None if it could not be determined
        """
        output = self.gateway.last_commit_timestamp(repo.working_dir, branch)
        if output is None or not output.strip():
            logger.debug(f"{repo.identifier}: no commit timestamp for {branch}")
            return None

        try:
            return date_parser.parse(output.strip())
        except (ValueError, OverflowError):
            logger.warning(f"{repo.identifier}: unparseable timestamp for {branch}: {output.strip()!r}")
            return None

    def activities(self, repo: Repository) -> list[BranchActivity]:
        """Pair every remote branch with its last commit time.

        Args:
            repo: Repository to inspect

        Returns:
            Branch activities in enumeration order
        """
        return [
            BranchActivity(branch=branch, last_commit=self.last_activity(repo, branch))
            for branch in self.list_remote_branches(repo)
        ]
