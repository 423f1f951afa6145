"""Fleet-level exceptions."""


class FleetError(Exception):
    """Base exception for repository fleet errors."""


class RepoListNotFoundError(FleetError):
    """Raised when the repository list file does not exist."""
