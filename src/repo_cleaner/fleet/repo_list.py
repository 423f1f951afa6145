"""Repository list loading and identifier resolution."""

from pathlib import Path

from repo_cleaner.fleet.exceptions import RepoListNotFoundError
from repo_cleaner.models import Repository, is_remote_identifier

COMMENT_PREFIX = "#"


def load_repo_list(path: Path) -> list[str]:
    """Read repository identifiers from a newline-delimited file.

    Blank lines and lines starting with ``#`` are ignored.

    Args:
        path: Repository list file

    Returns:
        Identifiers in file order

    Raises:
        RepoListNotFoundError: If the file does not exist
    """
    if not path.is_file():
        raise RepoListNotFoundError(f"{path} file not found!")

    identifiers: list[str] = []
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if line and not line.startswith(COMMENT_PREFIX):
            identifiers.append(line)
    return identifiers


def clone_dir_name(url: str) -> str:
    """Derive the working copy directory name from a clone URL.

    ``https://github.com/org/tool.git`` and ``git@github.com:org/tool.git``
    both map to ``tool``.
    """
    tail = url.rstrip("/").rsplit("/", 1)[-1].rsplit(":", 1)[-1]
    return tail.removesuffix(".git")


def resolve_repository(identifier: str, clone_root: Path) -> Repository:
    """Map a list entry to a repository and its working directory.

    Args:
        identifier: Local path or remote URL
        clone_root: Directory holding clones of remote repositories

    Returns:
        Repository with its working directory resolved
    """
    if is_remote_identifier(identifier):
        working_dir = clone_root / clone_dir_name(identifier)
    else:
        working_dir = Path(identifier).expanduser()
    return Repository(identifier=identifier, working_dir=working_dir)
