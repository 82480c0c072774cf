"""Commonly used typing helpers."""

from __future__ import annotations

from typing import Literal, Optional, TypeAlias

# A resolved value, or ``None`` when it is unavailable.
SecretValue: TypeAlias = Optional[str]

EnvironmentName: TypeAlias = Literal["development", "test", "production"]

ENVIRONMENTS: tuple[EnvironmentName, ...] = ("development", "test", "production")

__all__ = ["SecretValue", "EnvironmentName", "ENVIRONMENTS"]
