"""
Pytest plugin for gitolite-config testing fixtures.

This module re-exports all fixtures from fixtures.py. Nothing is registered
automatically; opt in from your own conftest.py.

To use these fixtures in your tests, add this to your top-level conftest.py:

    pytest_plugins = ["gitolite_config.testing.conftest"]

Or import the fixtures directly:

    from gitolite_config.testing.fixtures import sample_repo
"""

# Re-export all fixtures for pytest auto-discovery
from gitolite_config.testing.fixtures import (
    described_repo,
    empty_repo,
    repo_with_deny,
    sample_repo,
)

__all__ = [
    "empty_repo",
    "sample_repo",
    "repo_with_deny",
    "described_repo",
]
