"""Version control abstraction for repo-cleaner.

The cleanup core only talks to ``VersionControlGateway``; the git
implementation lives in ``repo_cleaner.vcs.git``.
"""

from repo_cleaner.vcs.base import RepositoryCloner, VersionControlGateway
from repo_cleaner.vcs.exceptions import (
    NotARepositoryError,
    VCSError,
    VCSOperationError,
)

__all__ = [
    "NotARepositoryError",
    "RepositoryCloner",
    "VCSError",
    "VCSOperationError",
    "VersionControlGateway",
]
