"""
Postgres storage (raw SQL) using an asyncpg pool.

One statement per operation, autocommit, positional parameters ($1, $2, ...).
Schema and table names come from `PostgresConfig` and are checked as plain
identifiers before they are interpolated.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

import asyncpg
from pydantic import BaseModel, ValidationError

from boards.schemas import Board
from columns.schemas import Column
from core import db
from core.config import PostgresConfig
from core.errors import BackendError, ConflictError, InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)

FIELD_ID = "id"

# Driver, server and socket failures for a single statement.
_DB_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


@dataclass(frozen=True)
class Entity:
    single: str
    plural: str
    fields: tuple[str, ...]
    model: type[BaseModel]

    @property
    def field_list(self) -> str:
        return ", ".join(self.fields)


BOARD = Entity(
    single="Board",
    plural="Boards",
    fields=("id", "title", "owner", "created_at"),
    model=Board,
)

COLUMN = Entity(
    single="Column",
    plural="Columns",
    fields=("id", "board_id", "title", "created_at"),
    model=Column,
)


def _decode(entity: Entity, record: Any, *, label: str) -> Any:
    try:
        return entity.model.model_validate(db.record_to_dict(record))
    except (ValidationError, TypeError, ValueError) as exc:
        raise BackendError(f"Failed converting {label}: {exc}") from exc


class PostgresStorage:
    def __init__(self, pool: asyncpg.Pool, config: PostgresConfig) -> None:
        self._pool = pool
        self.config = config
        self.schema = config.schema
        self._tables = {
            BOARD.single: config.table_boards,
            COLUMN.single: config.table_columns,
        }
        # Waiting for a free connection is bounded like the statements are.
        self._acquire_timeout_s = float(config.command_timeout_s)

    @classmethod
    async def from_config(cls, config: PostgresConfig) -> PostgresStorage:
        config.check_identifiers()
        pool = await db.create_pool(config)
        return cls(pool, config)

    @property
    def name(self) -> str:
        return "Postgres"

    async def close(self) -> None:
        await self._pool.close()

    def table_name(self, entity: Entity) -> str:
        return f"{self.schema}.{self._tables[entity.single]}"

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[asyncpg.Connection]:
        try:
            conn = await self._pool.acquire(timeout=self._acquire_timeout_s)
        except _DB_ERRORS as exc:
            raise BackendError(f"Failed acquiring connection: {exc}") from exc
        try:
            yield conn
        finally:
            await self._pool.release(conn)

    # generic CRUD

    async def _add(self, entity: Entity, item: BaseModel) -> bool:
        sql = (
            f"INSERT INTO {self.table_name(entity)} ({entity.field_list}) "
            f"VALUES ({db.placeholders(len(entity.fields))})"
        )
        values = [getattr(item, field) for field in entity.fields]
        async with self._connection() as conn:
            try:
                await conn.execute(sql, *values)
            except asyncpg.UniqueViolationError as exc:
                raise ConflictError(f"Add {entity.single} failed: {exc}") from exc
            except asyncpg.DataError as exc:
                raise InvalidInputError(f"Add {entity.single} failed: {exc}") from exc
            except _DB_ERRORS as exc:
                logger.warning("add_failed entity=%s error=%s", entity.single, exc)
                raise BackendError(f"Add {entity.single} failed: {exc}") from exc
        return True

    async def _list(self, entity: Entity) -> list[Any]:
        sql = f"SELECT {entity.field_list} FROM {self.table_name(entity)}"
        async with self._connection() as conn:
            try:
                rows = await conn.fetch(sql)
            except _DB_ERRORS as exc:
                logger.warning("list_failed entity=%s error=%s", entity.plural, exc)
                raise BackendError(f"List {entity.plural} failed: {exc}") from exc
        # One bad row fails the whole listing.
        return [_decode(entity, row, label=entity.plural) for row in rows]

    async def _get(self, entity: Entity, id_: str) -> Any:
        sql = f"SELECT {entity.field_list} FROM {self.table_name(entity)} WHERE {FIELD_ID} = $1"
        async with self._connection() as conn:
            try:
                rows = await conn.fetch(sql, id_)
            except asyncpg.DataError as exc:
                raise InvalidInputError(f"Get {entity.single} failed: {exc}") from exc
            except _DB_ERRORS as exc:
                logger.warning("get_failed entity=%s id=%s error=%s", entity.single, id_, exc)
                raise BackendError(f"Get {entity.single} failed: {exc}") from exc

        if not rows:
            raise NotFoundError(f"No {entity.single} with id {id_}")
        if len(rows) > 1:
            raise BackendError(f"Get {entity.single} failed: expected exactly one row, got {len(rows)}")
        return _decode(entity, rows[0], label=entity.single)

    async def _delete(self, entity: Entity, id_: str) -> bool:
        sql = f"DELETE FROM {self.table_name(entity)} WHERE {FIELD_ID} = $1"
        async with self._connection() as conn:
            try:
                status = await conn.execute(sql, id_)
            except asyncpg.DataError as exc:
                raise InvalidInputError(f"Delete {entity.single} failed: {exc}") from exc
            except _DB_ERRORS as exc:
                logger.warning("delete_failed entity=%s id=%s error=%s", entity.single, id_, exc)
                raise BackendError(f"Delete {entity.single} failed: {exc}") from exc
        return db.affected_rows(status) > 0

    # boards

    async def add_board(self, item: Board) -> bool:
        return await self._add(BOARD, item)

    async def list_boards(self) -> list[Board]:
        return await self._list(BOARD)

    async def get_board(self, id_: str) -> Board:
        return await self._get(BOARD, id_)

    async def delete_board(self, id_: str) -> bool:
        return await self._delete(BOARD, id_)

    # columns

    async def add_column(self, item: Column) -> bool:
        return await self._add(COLUMN, item)

    async def list_columns(self) -> list[Column]:
        return await self._list(COLUMN)

    async def get_column(self, id_: str) -> Column:
        return await self._get(COLUMN, id_)

    async def delete_column(self, id_: str) -> bool:
        return await self._delete(COLUMN, id_)
