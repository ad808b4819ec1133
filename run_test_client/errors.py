"""Errors raised while resolving configuration and invoking the test service."""

from pathlib import Path


class RunTestError(Exception):
    """Base class for every failure that aborts a run."""


class ConfigLoadError(RunTestError):
    """Raised when the properties file cannot be opened or parsed."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ConfigValidationError(RunTestError):
    """Raised when the properties file contains an unrecognized key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unrecognized property in property file - {key}")
        self.key = key


class MalformedEndpointError(RunTestError):
    """Raised when the server URL is missing or cannot form an endpoint."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class RemoteInvocationError(RunTestError):
    """Raised when the remote test service call fails."""
