"""
Async database helpers (raw SQL) using asyncpg.

The pool itself is owned by `storage/postgres.py`, which creates it once per
process through `create_pool()` and closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core.config import PostgresConfig


async def create_pool(config: PostgresConfig) -> asyncpg.Pool:
    # min_size=0: no connection is opened until the first request needs one,
    # so an unreachable database does not abort startup.
    return await asyncpg.create_pool(
        host=config.host,
        port=config.port,
        user=config.user,
        password=config.password or None,
        database=config.dbname,
        min_size=0,
        max_size=config.pool_max_size,
        command_timeout=config.command_timeout_s,
    )


def placeholders(count: int) -> str:
    """
    `$1, $2, ..., $count`
    """
    return ", ".join(f"${n}" for n in range(1, count + 1))


def record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def affected_rows(status: str) -> int:
    """
    Row count from a command status tag ("DELETE 1", "INSERT 0 1", ...).
    """
    try:
        return int((status or "").rsplit(" ", 1)[-1])
    except ValueError:
        return 0
