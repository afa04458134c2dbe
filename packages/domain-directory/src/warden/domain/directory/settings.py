"""Directory configuration using Pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DirectorySettings(BaseSettings):
    """Configuration for the directory record stores.

    Environment Variables:
        DIRECTORY_STORE_BACKEND: "memory" or "sql" (default: memory)
        DIRECTORY_PRINCIPAL_TABLE: Table holding principal documents
            (default: directory_principals)
        DIRECTORY_ROLE_TABLE: Table holding role documents
            (default: directory_roles)
        DIRECTORY_CREATE_TABLES: Create missing tables when a SQL store
            is built (default: true)

    The SQL connection itself is configured by ``DatabaseSettings``
    (``DATABASE_*`` variables).

    Example:
        >>> DirectorySettings(store_backend="sql").principal_table
        'directory_principals'
    """

    model_config = SettingsConfigDict(
        env_prefix="DIRECTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    store_backend: Literal["memory", "sql"] = Field(
        default="memory",
        description="Record store adapter",
    )
    principal_table: str = Field(
        default="directory_principals",
        min_length=1,
        max_length=63,
        pattern=r"^[a-z_][a-z0-9_]*$",
        description="Table holding principal documents",
    )
    role_table: str = Field(
        default="directory_roles",
        min_length=1,
        max_length=63,
        pattern=r"^[a-z_][a-z0-9_]*$",
        description="Table holding role documents",
    )
    create_tables: bool = Field(
        default=True,
        description="Create missing tables when a SQL store is built",
    )


@lru_cache(maxsize=1)
def get_directory_settings() -> DirectorySettings:
    """Get cached DirectorySettings instance.

    Clear cache with ``get_directory_settings.cache_clear()`` for testing.
    """
    return DirectorySettings()
