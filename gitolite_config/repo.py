"""
Repo stanza model.

Represents a repo inside the gitolite configuration. The name, permissions,
git config settings and gitolite options are all encapsulated here, and
rendered back into the block gitolite reads.
"""

from collections.abc import Iterable
from typing import Any

from gitolite_config.exceptions import InvalidPermissionError
from gitolite_config.logging import get_logger, log_permission_change
from gitolite_config.permissions import DENY, PermissionGroup, is_valid_permission
from gitolite_config.render import RenderConfig
from gitolite_config.types.rules import GitwebDescription, PermissionRule

logger = get_logger("repo")


def _flatten(users: Iterable[Any]) -> list[str]:
    flat: list[str] = []
    for user in users:
        if isinstance(user, (list, tuple)):
            flat.extend(_flatten(user))
        elif isinstance(user, str):
            flat.append(user)
        else:
            raise TypeError(f"users must be strings, got {type(user).__name__}")
    return flat


class Repo:
    """
    A repo entry of a gitolite config.

    Permissions are kept as a list of rule groups. Adding a deny rule ("-")
    starts a new group, since rules after a deny never apply before it.

    Example:
        ```python
        from gitolite_config import Repo

        repo = Repo("foo")
        repo.add_permission("RW+", "", "alice", "bob")
        repo.add_permission("-", "refs/heads/release", "bob")
        repo.add_permission("R", "", ["carol"])
        repo.set_git_config("hooks.mailinglist", "dev@example.com")
        print(repo.render())
        ```
    """

    def __init__(self, name: str) -> None:
        """
        Initialize an empty repo.

        Args:
            name: Repository name as it appears after "repo"
        """
        self.name = name
        self.owner: str | None = None
        self.description: str | None = None

        self._permissions: list[PermissionGroup] = [PermissionGroup()]
        self._config: dict[str, Any] = {}  # git config
        self._options: dict[str, Any] = {}  # gitolite options

    def __repr__(self) -> str:
        return f"Repo(name={self.name!r}, groups={len(self._permissions)})"

    def __str__(self) -> str:
        return self.render()

    @property
    def permission_groups(self) -> tuple[PermissionGroup, ...]:
        """Snapshots of the rule groups, in order."""
        return tuple(group.copy() for group in self._permissions)

    @property
    def config(self) -> dict[str, Any]:
        """Copy of the git config settings."""
        return dict(self._config)

    @property
    def options(self) -> dict[str, Any]:
        """Copy of the gitolite options."""
        return dict(self._options)

    def clean_permissions(self) -> None:
        """Drop every rule, leaving a single empty group."""
        self._permissions = [PermissionGroup()]
        log_permission_change("clean", self.name)

    reset_permissions = clean_permissions

    def add_permission(self, perm: str, refex: str = "", *users: Any) -> list[str]:
        """
        Add a permission rule.

        Users may be passed individually or as lists; nested lists are
        flattened. The user list of the (perm, refex) entry is deduplicated
        after every call.

        Args:
            perm: Permission token ("R", "RW+", "-", ...)
            refex: Ref pattern the rule applies to ("" means all refs)
            *users: Users or groups the rule applies to

        Returns:
            The accumulated user list for (perm, refex) in the current group

        Raises:
            InvalidPermissionError: If perm is not an allowed permission.
            TypeError: If a user is not a string.

        The repo is left untouched when either error is raised.
        """
        if not is_valid_permission(perm):
            logger.warning("Rejected permission %r for repo %s", perm, self.name)
            raise InvalidPermissionError(perm)

        flat_users = _flatten(users)

        # Deny rules open a new group
        if perm == DENY:
            self._permissions.append(PermissionGroup())

        entry = self._permissions[-1].add(perm, refex, flat_users)

        log_permission_change(
            "deny" if perm == DENY else "grant", self.name, perm, refex, flat_users
        )
        return list(entry)

    def rules(self) -> list[PermissionRule]:
        """Flattened, read-only view of every permission rule."""
        return [
            PermissionRule(group=index, permission=perm, refex=refex, users=tuple(users))
            for index, group in enumerate(self._permissions)
            for perm, refex, users in group
        ]

    def set_git_config(self, key: str, value: Any) -> None:
        self._config[key] = value

    def unset_git_config(self, key: str) -> None:
        self._config.pop(key, None)

    def set_gitolite_option(self, key: str, value: Any) -> None:
        self._options[key] = value

    def unset_gitolite_option(self, key: str) -> None:
        self._options.pop(key, None)

    def render(self, render_config: RenderConfig | None = None) -> str:
        """
        Render the repo stanza.

        Args:
            render_config: Column layout (default: gitolite's layout)

        Returns:
            The "repo" block, each line newline-terminated, without a
            trailing blank line
        """
        if render_config is None:
            render_config = RenderConfig()

        lines = [f"repo    {self.name}\n"]

        for group in self._permissions:
            for perm, refex, users in group:
                lines.append(render_config.permission_line(perm, refex, users))

        for key, value in self._config.items():
            lines.append(render_config.setting_line("config", key, value))

        for key, value in self._options.items():
            lines.append(render_config.setting_line("option", key, value))

        return "".join(lines)

    def gitweb_description(self) -> str | None:
        """
        Render the gitweb description line.

        Returns:
            'name "owner" = "description"' (owner part only when set),
            or None when no description is set
        """
        if self.description is None:
            return None

        return str(
            GitwebDescription(
                name=self.name, description=self.description, owner=self.owner
            )
        )

    description_line = gitweb_description
