"""Git implementation of the version control gateway."""

import logging
from pathlib import Path

import git

from repo_cleaner.vcs.base import VersionControlGateway

logger = logging.getLogger(__name__)


class GitGateway(VersionControlGateway):
    """Runs remote branch queries and deletions through the git CLI.

    Every call builds a fresh ``git.Git`` command wrapper for the working
    directory, so nothing is cached between repositories.
    """

    def __init__(self, remote_name: str = "origin") -> None:
        """Initialize the gateway.

        Args:
            remote_name: Remote whose branches are listed and deleted
        """
        self.remote_name = remote_name

    def enumerate_remote_branches(self, working_dir: Path) -> str | None:
        """List remote-tracking branches with ``git branch -r``.

        Args:
            working_dir: Working copy to query

        Returns:
            Raw ``git branch -r`` output, or None on failure
        """
        return self._run(working_dir, "branch", "-r")

    def last_commit_timestamp(self, working_dir: Path, branch: str) -> str | None:
        """Get the latest commit time of ``<remote>/<branch>``.

        Args:
            working_dir: Working copy to query
            branch: Bare branch name

        Returns:
            ISO-like committer date (``%ci``), or None on failure
        """
        return self._run(working_dir, "log", "-1", "--format=%ci", f"{self.remote_name}/{branch}")

    def delete_remote_branch(self, working_dir: Path, branch: str) -> bool:
        """Delete a branch with ``git push <remote> --delete <branch>``.

        Args:
            working_dir: Working copy whose remote is modified
            branch: Bare branch name

        Returns:
            True if the push succeeded
        """
        return self._run(working_dir, "push", self.remote_name, "--delete", branch) is not None

    def _run(self, working_dir: Path, command: str, *args: str) -> str | None:
        """Run a git subcommand, converting any git failure into None.

        Args:
            working_dir: Directory to run git in
            command: Git subcommand (e.g. ``log``)
            *args: Arguments for the subcommand

        Returns:
            Command stdout, or None if git could not run or exited non-zero
        """
        # GitPython falls back to the process cwd when the directory is missing
        if not working_dir.is_dir():
            logger.warning(f"Cannot run git {command}: {working_dir} is not a directory")
            return None

        try:
            runner = git.Git(str(working_dir))
            return getattr(runner, command)(*args)
        except git.GitError as e:
            logger.warning(f"Error executing git {command} in {working_dir}: {e}")
            return None
