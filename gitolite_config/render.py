"""
Layout configuration for rendering repo stanzas.

The defaults reproduce the column layout gitolite's own tooling writes.
"""

import os
from collections.abc import Sequence
from dataclasses import dataclass

from gitolite_config.exceptions import ConfigurationError


@dataclass
class RenderConfig:
    """Column layout for permission lines."""

    indent: str = "  "
    permission_width: int = 6  # minimum width, longer tokens are never cut
    refex_width: int = 25

    @classmethod
    def from_env(cls) -> "RenderConfig":
        """
        Create a render configuration from environment variables.

        Environment variables:
            GITOLITE_CONFIG_INDENT: Leading indentation (optional, default: two spaces)
            GITOLITE_CONFIG_PERMISSION_WIDTH: Permission column width (optional, default: 6)
            GITOLITE_CONFIG_REFEX_WIDTH: Refex column width (optional, default: 25)

        Returns:
            Configured RenderConfig instance

        Raises:
            ConfigurationError: If a width is not a non-negative integer
        """
        indent = os.environ.get("GITOLITE_CONFIG_INDENT", cls.indent)
        permission_width = _width_from_env(
            "GITOLITE_CONFIG_PERMISSION_WIDTH", cls.permission_width
        )
        refex_width = _width_from_env("GITOLITE_CONFIG_REFEX_WIDTH", cls.refex_width)

        return cls(
            indent=indent,
            permission_width=permission_width,
            refex_width=refex_width,
        )

    def permission_line(
        self, permission: str, refex: str, users: Sequence[str]
    ) -> str:
        return (
            self.indent
            + permission.ljust(self.permission_width)
            + refex.ljust(self.refex_width)
            + "= "
            + " ".join(users)
            + "\n"
        )

    def setting_line(self, kind: str, key: str, value: object) -> str:
        return f"{self.indent}{kind} {key} = {value!s}\n"


def _width_from_env(variable: str, default: int) -> int:
    raw = os.environ.get(variable)
    if raw is None:
        return default

    try:
        width = int(raw)
    except ValueError:
        raise ConfigurationError(
            f"Invalid {variable}: {raw!r}. Must be an integer"
        ) from None

    if width < 0:
        raise ConfigurationError(f"Invalid {variable}: {width}. Must not be negative")

    return width
