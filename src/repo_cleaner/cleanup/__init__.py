"""Branch deletion and the per-repository cleanup workflow."""

from repo_cleaner.cleanup.deleter import BranchDeleter
from repo_cleaner.cleanup.workflow import RepoCleanupWorkflow

__all__ = [
    "BranchDeleter",
    "RepoCleanupWorkflow",
]
