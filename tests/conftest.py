"""Shared fixtures for repo-cleaner tests."""

from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from repo_cleaner.models import Repository
from repo_cleaner.vcs.base import VersionControlGateway

GatewayFactory = Callable[..., MagicMock]


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for staleness checks."""
    return datetime(2026, 6, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def repo(tmp_path: Path) -> Repository:
    """Create a repository whose working copy is a temp directory."""
    return Repository(identifier=str(tmp_path), working_dir=tmp_path)


@pytest.fixture
def make_gateway() -> GatewayFactory:
    """Build an in-memory gateway from branch name to ``%ci`` timestamp.

    A timestamp of None makes the lookup for that branch fail. Branches in
    ``failing_deletions`` fail to delete; others are removed from the listing
    once deleted.
    """

    def _make(
        branches: dict[str, str | None],
        failing_deletions: Iterable[str] = (),
        listing_fails: bool = False,
    ) -> MagicMock:
        remote_branches = dict(branches)
        failing = set(failing_deletions)
        gateway = MagicMock(spec=VersionControlGateway)
        gateway.remote_name = "origin"

        def enumerate_remote_branches(working_dir: Path) -> str | None:
            if listing_fails:
                return None
            lines = ["  origin/HEAD -> origin/main"]
            lines.extend(f"  origin/{name}" for name in remote_branches)
            return "\n".join(lines)

        def last_commit_timestamp(working_dir: Path, branch: str) -> str | None:
            return remote_branches.get(branch)

        def delete_remote_branch(working_dir: Path, branch: str) -> bool:
            if branch in failing or branch not in remote_branches:
                return False
            del remote_branches[branch]
            return True

        gateway.enumerate_remote_branches.side_effect = enumerate_remote_branches
        gateway.last_commit_timestamp.side_effect = last_commit_timestamp
        gateway.delete_remote_branch.side_effect = delete_remote_branch
        return gateway

    return _make
