"""Git VCS implementation for repo-cleaner."""

from repo_cleaner.vcs.git.cloner import GitCloner
from repo_cleaner.vcs.git.gateway import GitGateway

__all__ = [
    "GitCloner",
    "GitGateway",
]
