"""
Permission grammar and rule groups.

A gitolite repo stanza is a sequence of rule groups. Each group maps a
permission to its refexes, and each refex to the users it applies to. Both
levels keep insertion order so rendering is deterministic.
"""

import itertools
import re
from collections.abc import Iterator

from gitolite_config.exceptions import InvalidPermissionError

_PERMISSION_PATTERN = re.compile(r"-|C|R|RW\+?(?:C?D?|D?C?)M?")


def _enumerate_permissions() -> frozenset[str]:
    rw_variants = (
        "RW" + plus + create_delete + merge
        for plus, create_delete, merge in itertools.product(
            ("", "+"), ("", "C", "D", "CD", "DC"), ("", "M")
        )
    )
    return frozenset(("-", "C", "R", *rw_variants))


# Every token gitolite accepts as a permission
ALLOWED_PERMISSIONS = _enumerate_permissions()

DENY = "-"


def is_valid_permission(permission: str) -> bool:
    """Check whether a token is a valid gitolite permission."""
    if not isinstance(permission, str):
        return False
    return _PERMISSION_PATTERN.fullmatch(permission) is not None


def validate_permission(permission: str) -> str:
    """
    Validate a permission token.

    Args:
        permission: Token such as "R", "RW+", "RWCDM" or "-"

    Returns:
        The token, unchanged

    Raises:
        InvalidPermissionError: If the token is not in the allowed list
    """
    if not is_valid_permission(permission):
        raise InvalidPermissionError(permission)
    return permission


class PermissionGroup:
    """
    One block of rules evaluated together before the next deny boundary.

    Reading a missing permission or refex creates it::

        group = PermissionGroup()
        group["RW+"]["refs/heads/main"].append("alice")
    """

    def __init__(self) -> None:
        self._permissions: dict[str, dict[str, list[str]]] = {}

    def __getitem__(self, permission: str) -> dict[str, list[str]]:
        return self._permissions.setdefault(permission, _RefexMap())

    def __contains__(self, permission: object) -> bool:
        return permission in self._permissions

    def __iter__(self) -> Iterator[tuple[str, str, tuple[str, ...]]]:
        for permission, refexes in self._permissions.items():
            for refex, users in refexes.items():
                yield permission, refex, tuple(users)

    def __len__(self) -> int:
        return sum(len(refexes) for refexes in self._permissions.values())

    def __repr__(self) -> str:
        return f"PermissionGroup({dict(self._permissions)!r})"

    def copy(self) -> "PermissionGroup":
        """Return an independent copy of this group."""
        clone = PermissionGroup()
        for permission, refexes in self._permissions.items():
            clone_refexes = clone[permission]
            for refex, users in refexes.items():
                clone_refexes[refex] = list(users)
        return clone

    def permissions(self) -> list[str]:
        """Permissions in the order they were first used in this group."""
        return list(self._permissions)

    def add(self, permission: str, refex: str, users: list[str]) -> list[str]:
        """
        Append users to a (permission, refex) entry and deduplicate it.

        The accumulated list keeps the order in which each user was first
        seen.

        Returns:
            The updated user list
        """
        entry = self[permission][refex]
        entry.extend(users)
        entry[:] = list(dict.fromkeys(entry))
        return entry


class _RefexMap(dict):
    """Refex to users mapping that creates empty user lists on read."""

    def __missing__(self, refex: str) -> list[str]:
        users: list[str] = []
        self[refex] = users
        return users
