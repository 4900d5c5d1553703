"""Shared fixtures for the gitolite-config test suite."""

from gitolite_config.testing.conftest import (  # noqa: F401
    described_repo,
    empty_repo,
    repo_with_deny,
    sample_repo,
)
