"""gitolite-config type definitions.

This module exports the read-only value types produced by the model.
"""

from gitolite_config.types.rules import GitwebDescription, PermissionRule

__all__ = [
    "PermissionRule",
    "GitwebDescription",
]
