"""Per-environment database configuration resolved from settings.

Credentials may come from a bare variable (``DB_USER``) or from a mounted
secret file named by its ``_FILE`` companion (``DB_USER_FILE``). The file
variant always wins when its variable is set. An unreadable secret file does
not stop the process: the value becomes ``None`` and the failure surfaces
when the connection layer checks the record.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from dbconfig.core.exceptions import ConfigurationError, SecretFileUnreadableError
from dbconfig.core.models import ConfigRecord
from dbconfig.core.settings import Settings, get_settings
from dbconfig.core.types import ENVIRONMENTS, SecretValue

logger = logging.getLogger(__name__)

DIALECT = "postgres"
TIMEZONE = "+03:00"

# Environments that keep SQL statement logging switched on
_LOGGING_ENVIRONMENTS = {"development"}


def read_secret_file(path: str) -> str:
    """Return the stripped first line of the secret file at ``path``."""

    try:
        with open(path, encoding="utf-8-sig") as fh:
            first_line = fh.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise SecretFileUnreadableError(path) from exc
    return first_line.strip()


def resolve_secret(value: SecretValue, file_path: Optional[str]) -> SecretValue:
    """Resolve a value that may be overridden by a secret file.

    When ``file_path`` is set the file is authoritative, even if it turns out
    to be unreadable; ``value`` is then ignored and ``None`` is returned.
    """

    if not file_path:
        return value
    try:
        return read_secret_file(file_path)
    except SecretFileUnreadableError as exc:
        logger.warning(
            "Secret file unreadable, value left unset",
            extra={"path": exc.path, "reason": str(exc.__cause__)},
        )
        return None


def build_base_config(settings: Optional[Settings] = None) -> ConfigRecord:
    """Resolve the connection fields shared by every environment."""

    settings = settings or get_settings()
    username = resolve_secret(settings.db_user, settings.db_user_file)
    password = resolve_secret(settings.db_password, settings.db_password_file)
    database = resolve_secret(settings.db_name, settings.db_name_file)
    return ConfigRecord(
        dialect=DIALECT,
        timezone=TIMEZONE,
        username=username,
        password=password,
        database=database,
        host=settings.db_host,
        port=settings.db_port,
        soft_delete_enabled=True,
        logging_enabled=True,
    )


def build_environment_configs(
    base: Optional[ConfigRecord] = None,
) -> Dict[str, ConfigRecord]:
    """Derive the development, test and production records from ``base``."""

    base = base or build_base_config()
    return {
        name: base.model_copy(
            update={"logging_enabled": name in _LOGGING_ENVIRONMENTS}
        )
        for name in ENVIRONMENTS
    }


@lru_cache
def get_environment_configs() -> Mapping[str, ConfigRecord]:
    """Return the process-wide records, resolving them on first use.

    The mapping is a read-only view so no caller can swap a record out.
    """
    configs = MappingProxyType(build_environment_configs(build_base_config()))
    logger.info(
        "Database configuration resolved",
        extra={"environments": sorted(configs)},
    )
    return configs


def get_config(environment: Optional[str] = None) -> ConfigRecord:
    """Return the record for ``environment`` (defaults to ``APP_ENV``)."""

    name = environment or get_settings().app_env
    configs = get_environment_configs()
    try:
        return configs[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown environment {name!r}; expected one of {', '.join(ENVIRONMENTS)}"
        ) from None


__all__ = [
    "DIALECT",
    "TIMEZONE",
    "read_secret_file",
    "resolve_secret",
    "build_base_config",
    "build_environment_configs",
    "get_environment_configs",
    "get_config",
]
