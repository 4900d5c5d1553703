"""gitolite-config - Model and render gitolite repo stanzas."""

from gitolite_config.exceptions import (
    ConfigurationError,
    GitoliteConfigError,
    InvalidPermissionError,
)
from gitolite_config.logging import configure_logging, get_logger
from gitolite_config.permissions import (
    ALLOWED_PERMISSIONS,
    PermissionGroup,
    is_valid_permission,
    validate_permission,
)
from gitolite_config.render import RenderConfig
from gitolite_config.repo import Repo
from gitolite_config.types import GitwebDescription, PermissionRule

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "Repo",
    "PermissionGroup",
    # Permissions
    "ALLOWED_PERMISSIONS",
    "is_valid_permission",
    "validate_permission",
    # Types
    "PermissionRule",
    "GitwebDescription",
    # Rendering
    "RenderConfig",
    # Exceptions
    "GitoliteConfigError",
    "InvalidPermissionError",
    "ConfigurationError",
    # Logging
    "configure_logging",
    "get_logger",
]
