"""
gitolite-config logging utilities.

Provides configurable logging for changes made to repo permission models.
Nothing is configured on import; applications opt in with configure_logging().
"""

import logging
from collections.abc import Sequence

# Create package-specific loggers
_package_logger = logging.getLogger("gitolite_config")
_repo_logger = logging.getLogger("gitolite_config.repo")

# Maximum number of users shown in a single log line
_USER_PREVIEW_LENGTH = 8


def configure_logging(
    level: int = logging.INFO,
    repo_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure gitolite-config logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        repo_level: Log level for repo model changes (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from gitolite_config.logging import configure_logging

        # Trace every grant and deny rule
        configure_logging(level=logging.INFO, repo_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    # Configure main package logger
    _package_logger.setLevel(level)
    _package_logger.addHandler(handler)

    # Configure repo logger
    _repo_logger.setLevel(repo_level if repo_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a gitolite-config logger.

    Args:
        name: Logger name suffix (e.g., "repo"). If None, returns main package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _package_logger
    return logging.getLogger(f"gitolite_config.{name}")


def format_users(users: Sequence[str]) -> str:
    """
    Format a user list for logging, eliding long lists.

    Returns:
        Text like "alice bob" or "u1 u2 ... (+12 more)"
    """
    if len(users) <= _USER_PREVIEW_LENGTH:
        return " ".join(users)

    shown = " ".join(users[:_USER_PREVIEW_LENGTH])
    return f"{shown} ... (+{len(users) - _USER_PREVIEW_LENGTH} more)"


def log_permission_change(
    operation: str,
    repo: str,
    permission: str | None = None,
    refex: str | None = None,
    users: Sequence[str] | None = None,
) -> None:
    """
    Log a change to a repo's permissions at DEBUG level.

    Args:
        operation: Operation type (e.g., "grant", "deny", "clean")
        repo: Repository name
        permission: Permission token (optional)
        refex: Refex the rule applies to (optional)
        users: Users the rule applies to (optional)
    """
    if not _repo_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{operation}: repo={repo}"]

    if permission is not None:
        log_parts.append(f"permission={permission}")

    if refex is not None:
        log_parts.append(f"refex={refex or '<all>'}")

    if users is not None:
        log_parts.append(f"users={format_users(users)}")

    _repo_logger.debug(" | ".join(log_parts))


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "format_users",
    "log_permission_change",
]
