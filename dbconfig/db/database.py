"""Turn a resolved configuration record into a SQLAlchemy async engine."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

from sqlalchemy import event
from sqlalchemy.engine import URL, Engine
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from dbconfig.core.exceptions import ConfigurationError
from dbconfig.core.models import ConfigRecord

logger = logging.getLogger(__name__)

# SQLAlchemy driver names per configured dialect
DRIVERS = {"postgres": "postgresql+psycopg"}

_OFFSET_RE = re.compile(r"^[+-]\d{2}:\d{2}$")


def ensure_connectable(config: ConfigRecord) -> None:
    """Fail fast when required connection values are unavailable.

    Loading a record never rejects missing values, so every consumer must
    call this before attempting a connection.
    """

    missing = config.missing_fields()
    if missing:
        logger.error(
            "Database configuration incomplete", extra={"missing": missing}
        )
        raise ConfigurationError(
            "Database configuration is missing: " + ", ".join(missing),
            missing=missing,
        )


def database_url(config: ConfigRecord) -> URL:
    """Build the SQLAlchemy URL for ``config``."""
    return URL.create(
        drivername=DRIVERS[config.dialect],
        username=config.username,
        password=config.password,
        host=config.host,
        port=config.port,
        database=config.database,
    )


def timezone_statement(offset: str) -> str:
    """Return the SQL that pins a session to the UTC ``offset``.

    A bare ``+03:00`` in the ``TimeZone`` setting is read with POSIX sign
    rules (west of UTC), so the offset is sent as an interval instead.
    """

    if not _OFFSET_RE.match(offset):
        raise ConfigurationError(f"Timezone {offset!r} is not a [+-]HH:MM offset")
    return f"SET TIME ZONE INTERVAL '{offset}' HOUR TO MINUTE"


def install_session_timezone(sync_engine: Engine, offset: str) -> Callable[..., None]:
    """Run the timezone statement on every new DBAPI connection."""

    statement = timezone_statement(offset)

    def set_session_timezone(dbapi_connection: Any, connection_record: Any) -> None:
        # Outside a transaction, otherwise the pool's reset rolls the SET back
        autocommit = dbapi_connection.autocommit
        dbapi_connection.autocommit = True
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute(statement)
        finally:
            cursor.close()
            dbapi_connection.autocommit = autocommit

    event.listen(sync_engine, "connect", set_session_timezone)
    return set_session_timezone


def create_engine_from_config(config: ConfigRecord) -> AsyncEngine:
    """Create an async engine for ``config`` without opening a connection."""

    ensure_connectable(config)
    # Create async engine with resilient pool settings to survive Postgres restarts
    # - pool_pre_ping: validate connections before using
    # - pool_recycle: proactively recycle connections to avoid server-side timeouts
    engine = create_async_engine(
        database_url(config),
        echo=config.logging_enabled,
        pool_pre_ping=True,
        pool_recycle=1800,
    )
    install_session_timezone(engine.sync_engine, config.timezone)
    logger.info(
        "Database engine created",
        extra={"host": config.host, "port": config.port, "database": config.database},
    )
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Return a session factory bound to ``engine``."""
    return async_sessionmaker(engine, expire_on_commit=False)


__all__ = [
    "DRIVERS",
    "ensure_connectable",
    "database_url",
    "timezone_statement",
    "install_session_timezone",
    "create_engine_from_config",
    "create_session_factory",
]
