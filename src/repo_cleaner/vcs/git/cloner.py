"""Git clone collaborator."""

import logging
from pathlib import Path

import git

from repo_cleaner.vcs.base import RepositoryCloner

logger = logging.getLogger(__name__)


class GitCloner(RepositoryCloner):
    """Creates working copies of remote repositories with GitPython."""

    def clone(self, url: str, target_dir: Path) -> bool:
        """Clone ``url`` into ``target_dir``.

        Args:
            url: Remote repository URL
            target_dir: Directory to create; its parent is created if missing

        Returns:
            True if the clone succeeded
        """
        try:
            target_dir.parent.mkdir(parents=True, exist_ok=True)
            git.Repo.clone_from(url, target_dir)
        except (git.GitError, OSError) as e:
            logger.warning(f"Failed to clone {url} into {target_dir}: {e}")
            return False
        return True
