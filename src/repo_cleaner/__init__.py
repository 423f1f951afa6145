"""repo-cleaner: approval-gated removal of stale remote branches."""

__version__ = "0.1.0"
