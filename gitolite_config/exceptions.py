"""gitolite-config exception classes."""



class GitoliteConfigError(Exception):
    """Base exception for all gitolite-config errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GitoliteConfigError):
    """Raised when rendering configuration is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class InvalidPermissionError(GitoliteConfigError, ValueError):
    """Raised when a permission that isn't in the allowed list is passed in."""

    def __init__(self, permission: str) -> None:
        self.permission = permission
        super().__init__(
            "INVALID_PERMISSION",
            f"{permission!r} is not in the allowed list of permissions!",
        )
