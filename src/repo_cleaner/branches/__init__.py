"""Remote branch discovery and staleness detection."""

from repo_cleaner.branches.detector import StaleBranchDetector
from repo_cleaner.branches.policy import StalenessPolicy, is_stale, staleness_cutoff
from repo_cleaner.branches.registry import BranchRegistry

__all__ = [
    "BranchRegistry",
    "StaleBranchDetector",
    "StalenessPolicy",
    "is_stale",
    "staleness_cutoff",
]
