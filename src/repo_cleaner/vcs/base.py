"""Abstract base classes for version control system operations.

This module defines the narrow interface the cleanup core depends on. Every
operation is synchronous, takes the working directory it should run in, and
reports failure through its return value instead of raising, so the
detection and deletion logic can run against an in-memory fake.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class VersionControlGateway(ABC):
    """Abstract base class for remote branch queries and mutations.

    Implementations wrap a stateful working directory and are not assumed
    safe for concurrent use.
    """

    remote_name: str = "origin"

    @abstractmethod
    def enumerate_remote_branches(self, working_dir: Path) -> str | None:
        """List remote-tracking branches.

        Args:
            working_dir: Working copy to query

        Returns:
            Raw listing, one branch per line (e.g. ``origin/feature/a``),
            or None if the query failed
        """

    @abstractmethod
    def last_commit_timestamp(self, working_dir: Path, branch: str) -> str | None:
        """Get the committer timestamp of a remote branch's latest commit.

        Args:
            working_dir: Working copy to query
            branch: Bare branch name without the remote prefix

        Returns:
            Raw timestamp text, or None if the query failed
        """

    @abstractmethod
    def delete_remote_branch(self, working_dir: Path, branch: str) -> bool:
        """Delete a branch on the remote.

        Args:
            working_dir: Working copy whose remote is modified
            branch: Bare branch name without the remote prefix

        Returns:
            True if the remote accepted the deletion
        """


class RepositoryCloner(ABC):
    """Abstract base class for creating a local working copy of a remote repository."""

    @abstractmethod
    def clone(self, url: str, target_dir: Path) -> bool:
        """Clone a repository.

        Args:
            url: Remote repository URL
            target_dir: Directory to create the working copy in

        Returns:
            True if the working copy was created
        """
