"""
Pytest fixtures for gitolite-config testing.

Provides common fixtures and factories for testing code that builds or
consumes gitolite repo stanzas.
"""

from collections.abc import Iterable, Mapping
from typing import Any

import pytest

from gitolite_config.repo import Repo


# ============================================================================
# Helper Functions
# ============================================================================


def create_repo(
    name: str = "test-repo",
    rules: Iterable[tuple[str, str, Iterable[str]]] = (),
    config: Mapping[str, Any] | None = None,
    options: Mapping[str, Any] | None = None,
    owner: str | None = None,
    description: str | None = None,
) -> Repo:
    """
    Create a Repo populated with rules and settings.

    Args:
        name: Repository name
        rules: (permission, refex, users) triples, added in order
        config: Git config settings
        options: Gitolite options
        owner: Owner shown in the gitweb description
        description: Gitweb description

    Example:
        ```python
        repo = create_repo(
            "foo",
            rules=[("RW+", "", ["alice"]), ("-", "refs/tags/", ["bob"])],
            config={"core.sharedRepository": "group"},
        )
        ```
    """
    repo = Repo(name)

    for permission, refex, users in rules:
        repo.add_permission(permission, refex, list(users))

    for key, value in (config or {}).items():
        repo.set_git_config(key, value)

    for key, value in (options or {}).items():
        repo.set_gitolite_option(key, value)

    repo.owner = owner
    repo.description = description
    return repo


# ============================================================================
# Repo Fixtures
# ============================================================================


@pytest.fixture
def empty_repo() -> Repo:
    """Provide a Repo with no rules or settings."""
    return Repo("empty-repo")


@pytest.fixture
def sample_repo() -> Repo:
    """Provide a Repo with grants, a git config setting and an option."""
    return create_repo(
        "sample-repo",
        rules=[
            ("RW+", "", ["admin"]),
            ("RW", "refs/heads/dev/", ["alice", "bob"]),
            ("R", "", ["@all"]),
        ],
        config={"hooks.mailinglist": "dev@example.com"},
        options={"deny-rules": 1},
    )


@pytest.fixture
def repo_with_deny() -> Repo:
    """
    Provide a Repo whose rules span two groups.

    Example:
        ```python
        def test_groups(repo_with_deny):
            assert len(repo_with_deny.permission_groups) == 2
        ```
    """
    return create_repo(
        "deny-repo",
        rules=[
            ("RW", "", ["alice"]),
            ("-", "refs/heads/release", ["bob"]),
            ("R", "", ["carol"]),
        ],
    )


@pytest.fixture
def described_repo() -> Repo:
    """Provide a Repo with an owner and a gitweb description."""
    return create_repo(
        "described-repo",
        rules=[("R", "", ["gitweb"])],
        owner="Jane Doe",
        description="A repository shown in gitweb",
    )
