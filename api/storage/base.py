"""
Storage contract shared by every backend.

Failures are raised as `core.errors.StorageError` subclasses; a backend never
returns an error value.
"""

from __future__ import annotations

from typing import Protocol

from boards.schemas import Board
from columns.schemas import Column


class Storage(Protocol):
    @property
    def name(self) -> str: ...

    async def close(self) -> None: ...

    # boards
    async def add_board(self, item: Board) -> bool: ...

    async def list_boards(self) -> list[Board]: ...

    async def get_board(self, id_: str) -> Board: ...

    async def delete_board(self, id_: str) -> bool:
        """
        True when a row was deleted, False when nothing matched `id_`.
        """
        ...

    # columns
    async def add_column(self, item: Column) -> bool: ...

    async def list_columns(self) -> list[Column]: ...

    async def get_column(self, id_: str) -> Column: ...

    async def delete_column(self, id_: str) -> bool: ...
