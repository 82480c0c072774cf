"""Pydantic models representing resolved configuration."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

REQUIRED_FIELDS = ("host", "port", "username", "password", "database")


class ConfigRecord(BaseModel):
    """Connection parameters for one runtime environment.

    ``None`` marks a value that could not be resolved. Such records are still
    valid to hold; :func:`dbconfig.db.database.ensure_connectable` rejects
    them before a connection is attempted.
    """

    model_config = ConfigDict(frozen=True)

    dialect: Literal["postgres"] = "postgres"
    timezone: str = Field(default="+03:00", description="UTC offset for sessions")
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    database: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = Field(default=5432)
    soft_delete_enabled: bool = Field(
        default=True, description="Rows are marked deleted, never removed"
    )
    logging_enabled: bool = Field(default=True, description="Echo SQL statements")

    def missing_fields(self) -> List[str]:
        """Return the required connection fields that are unavailable."""
        return [name for name in REQUIRED_FIELDS if getattr(self, name) is None]

    def masked(self) -> dict:
        """Dump the record with the password hidden."""
        data = self.model_dump()
        if data["password"] is not None:
            data["password"] = "***"
        return data


__all__ = ["ConfigRecord", "REQUIRED_FIELDS"]
