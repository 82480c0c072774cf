"""Core library exposing settings, models, exceptions and types."""

from .settings import Settings, get_settings
from .exceptions import (
    DomainError,
    ConfigurationError,
    SecretFileUnreadableError,
    Error,
)
from .models import ConfigRecord, REQUIRED_FIELDS
from .types import SecretValue, EnvironmentName, ENVIRONMENTS

__all__ = [
    "Settings",
    "get_settings",
    "DomainError",
    "ConfigurationError",
    "SecretFileUnreadableError",
    "Error",
    "ConfigRecord",
    "REQUIRED_FIELDS",
    "SecretValue",
    "EnvironmentName",
    "ENVIRONMENTS",
]
