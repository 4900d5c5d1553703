"""Rule-related data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PermissionRule:
    """A single rendered permission line of a repo stanza."""

    group: int  # index of the rule group, 0 for rules before any deny
    permission: str
    refex: str
    users: tuple[str, ...]


@dataclass(frozen=True)
class GitwebDescription:
    """A line of the gitweb description file."""

    name: str
    description: str
    owner: str | None = None

    def __str__(self) -> str:
        line = f"{self.name} "
        if self.owner is not None:
            line += f'"{self.owner}" '
        return line + f'= "{self.description}"'
