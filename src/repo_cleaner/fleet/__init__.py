"""Fleet-wide cleanup driven by a repository list."""

from repo_cleaner.fleet.exceptions import FleetError, RepoListNotFoundError
from repo_cleaner.fleet.repo_list import clone_dir_name, load_repo_list, resolve_repository
from repo_cleaner.fleet.runner import FleetRunner

__all__ = [
    "FleetError",
    "FleetRunner",
    "RepoListNotFoundError",
    "clone_dir_name",
    "load_repo_list",
    "resolve_repository",
]
