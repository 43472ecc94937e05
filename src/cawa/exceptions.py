"""Custom exceptions for CAWA."""


class CawaError(Exception):
    """Base exception for cawa errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidConfigError(CawaError):
    """Raised when the alias file has invalid format or content."""

    def __init__(
        self,
        path: str,
        message: str = "Invalid config format",
        alias: str | None = None,
    ):
        full_message = f"Invalid config in {path}"
        if alias:
            full_message += f" (alias '{alias}')"
        full_message += f": {message}"
        super().__init__(full_message)
        self.path = path
        self.alias = alias


class ConfigSaveError(CawaError):
    """Raised when the alias file cannot be written."""

    def __init__(self, path: str, reason: str = ""):
        message = f"Failed to write config file {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
        self.reason = reason


class AliasNotFoundError(CawaError):
    """Raised when a requested alias is not stored."""

    def __init__(self, alias: str):
        super().__init__(f"Alias '{alias}' not found.")
        self.alias = alias


class InvalidAliasError(CawaError):
    """Raised when an alias would violate the single/parallel invariants."""


class ArgumentParseError(CawaError):
    """Raised when argument parsing fails."""

    def __init__(self, argument: str, message: str):
        super().__init__(f"Failed to parse argument '{argument}': {message}")
        self.argument = argument


class NotificationError(CawaError):
    """Raised when a desktop notification cannot be delivered."""


class SelectorError(CawaError):
    """Raised when the interactive selector cannot drive the terminal."""
