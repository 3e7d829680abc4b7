"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///storefront.db"
    # Upper bound, in seconds, on waiting for a lock or running a statement
    db_timeout: float = 5.0
    log_level: str = "INFO"
    sql_echo: bool = False

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return Settings(
            database_url=env.get("STOREFRONT_DATABASE_URL", Settings.database_url),
            db_timeout=float(env.get("STOREFRONT_DB_TIMEOUT", Settings.db_timeout)),
            log_level=env.get("STOREFRONT_LOG_LEVEL", Settings.log_level).upper(),
            sql_echo=env.get("STOREFRONT_SQL_ECHO", "").lower() in _TRUTHY,
        )
