"""
Custom exceptions for uni.
"""


class UniError(Exception):
    """Base exception for all uni errors."""
    pass


class UnsupportedManager(UniError):
    """Raised when a package manager identifier is not in the registry."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Package manager '{identifier}' is not supported")


class UnsupportedOperation(UniError):
    """Raised when a verb has no mapping for the selected package manager."""

    def __init__(self, manager: str, operation: str):
        self.manager = manager
        self.operation = operation
        super().__init__(f"{manager} does not have a standard {operation} command")


class ExecutableNotFound(UniError):
    """Raised when a package manager executable is not on PATH."""

    def __init__(self, executable: str, manager: str = "", hint: str = ""):
        self.executable = executable
        self.manager = manager or executable
        self.hint = hint
        super().__init__(
            f"{self.manager} ({executable}) is not installed or not in your PATH"
        )


class SearchError(UniError):
    """Base exception for search failures."""
    pass


class NetworkFailed(SearchError):
    """Raised when a search endpoint cannot be reached or returns an error."""
    pass


class ParseFailed(SearchError):
    """Raised when a search response cannot be decoded."""
    pass


class ConfigError(UniError):
    """Raised when the configuration file is invalid."""
    pass
