"""gitolite-config testing utilities.

Provides factories and fixtures for testing applications that build repo stanzas.
"""

from gitolite_config.testing.fixtures import create_repo

__all__ = [
    # Helper functions
    "create_repo",
]
