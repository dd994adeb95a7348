"""
Environment-driven settings.

Readers fall back to the default when a variable is unset or fails to parse;
only the Postgres port is parsed strictly, so a typo there surfaces as a
degraded storage backend instead of silently pointing at the wrong port.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_HOST = "postgres"
DEFAULT_PORT = 5432
DEFAULT_USER = "postgres"
DEFAULT_PASSWORD = ""
DEFAULT_DBNAME = "postgres"
DEFAULT_SCHEMA = "bareretro"
DEFAULT_TABLE_BOARDS = "boards"
DEFAULT_TABLE_COLUMNS = "columns"
DEFAULT_POOL_MAX_SIZE = 10
DEFAULT_COMMAND_TIMEOUT_S = 30

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class ConfigError(RuntimeError):
    pass


def load_env_file(path: str = ".env") -> bool:
    """
    Read `KEY=value` lines from `path` into the environment.

    Variables already set in the process environment win over the file.
    """
    return load_dotenv(path, override=False)


def env_str(name: str, default: str) -> str:
    value = os.environ.get(name)
    return default if value is None else value


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class AppConfig:
    provider: str
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    @classmethod
    def from_env(cls) -> AppConfig:
        return cls(
            provider=env_str("STORAGE_PROVIDER", ""),
            log_level=env_str("LOG_LEVEL", "INFO").strip().upper() or "INFO",
            host=env_str("HOST", "0.0.0.0").strip() or "0.0.0.0",
            port=env_int("PORT", 8080),
        )


@dataclass(frozen=True)
class PostgresConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    user: str = DEFAULT_USER
    password: str = DEFAULT_PASSWORD
    dbname: str = DEFAULT_DBNAME
    schema: str = DEFAULT_SCHEMA
    table_boards: str = DEFAULT_TABLE_BOARDS
    table_columns: str = DEFAULT_TABLE_COLUMNS
    pool_max_size: int = DEFAULT_POOL_MAX_SIZE
    command_timeout_s: int = DEFAULT_COMMAND_TIMEOUT_S

    @classmethod
    def from_env(cls) -> PostgresConfig:
        raw_port = env_str("PG_PORT", str(DEFAULT_PORT)).strip()
        try:
            port = int(raw_port)
        except ValueError as exc:
            raise ConfigError(f"Port is not a valid number! {exc}") from exc
        if not 0 < port < 65536:
            raise ConfigError(f"Port is not a valid number! {port} is out of range")

        config = cls(
            host=env_str("PG_HOST", DEFAULT_HOST),
            port=port,
            user=env_str("PG_USER", DEFAULT_USER),
            password=env_str("PG_PASS", DEFAULT_PASSWORD),
            dbname=env_str("PG_DBNAME", DEFAULT_DBNAME),
            schema=env_str("PG_SCHEMA", DEFAULT_SCHEMA),
            table_boards=env_str("PG_TABLE_BOARDS", DEFAULT_TABLE_BOARDS),
            table_columns=env_str("PG_TABLE_COLUMNS", DEFAULT_TABLE_COLUMNS),
            pool_max_size=max(1, env_int("PG_POOL_MAX_SIZE", DEFAULT_POOL_MAX_SIZE)),
            command_timeout_s=max(1, env_int("PG_COMMAND_TIMEOUT", DEFAULT_COMMAND_TIMEOUT_S)),
        )
        config.check_identifiers()
        return config

    def check_identifiers(self) -> None:
        # Schema and table names are interpolated into SQL, never parameterized.
        for label, value in (
            ("schema", self.schema),
            ("boards table", self.table_boards),
            ("columns table", self.table_columns),
        ):
            if not _IDENTIFIER.match(value):
                raise ConfigError(f"Invalid {label} name '{value}'")

    def masked(self) -> dict:
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": "***" if self.password else "",
            "dbname": self.dbname,
            "schema": self.schema,
            "table_boards": self.table_boards,
            "table_columns": self.table_columns,
        }
