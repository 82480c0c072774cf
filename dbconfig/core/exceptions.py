"""Base exceptions for the configuration layer."""

from __future__ import annotations

from typing import Iterable


class DomainError(Exception):
    """Base class for all domain level exceptions."""


class ConfigurationError(DomainError):
    """Raised when a configuration record cannot be used."""

    def __init__(self, message: str, missing: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.missing = tuple(missing)


class SecretFileUnreadableError(ConfigurationError):
    """Raised when a mounted secret file cannot be opened or decoded."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Secret file {path!r} is not readable")
        self.path = path


# Alias to keep a generic name for error type hints
Error = DomainError

__all__ = ["DomainError", "ConfigurationError", "SecretFileUnreadableError", "Error"]
