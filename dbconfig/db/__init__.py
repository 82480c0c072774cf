"""Database configuration resolution and engine construction."""

from .config import (
    build_base_config,
    build_environment_configs,
    get_config,
    get_environment_configs,
    read_secret_file,
    resolve_secret,
)
from .database import (
    create_engine_from_config,
    create_session_factory,
    database_url,
    ensure_connectable,
    install_session_timezone,
    timezone_statement,
)

__all__ = [
    "build_base_config",
    "build_environment_configs",
    "get_config",
    "get_environment_configs",
    "read_secret_file",
    "resolve_secret",
    "create_engine_from_config",
    "create_session_factory",
    "database_url",
    "ensure_connectable",
    "install_session_timezone",
    "timezone_statement",
]
