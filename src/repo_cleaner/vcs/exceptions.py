"""Common VCS exceptions for repo-cleaner.

Gateways report command failures through return values, so these are only
raised where a caller asks for a hard failure (for example, opening a
directory that is not a repository).
"""


class VCSError(Exception):
    """Base exception for all VCS-related errors."""


class NotARepositoryError(VCSError):
    """Raised when a directory is not a valid repository."""


class VCSOperationError(VCSError):
    """Raised when a VCS operation fails."""
