"""
Placeholder backend used when no usable storage is configured.

Keeps the server reachable: every call fails with the configuration error
instead of the process dying at boot.
"""

from __future__ import annotations

from typing import NoReturn

from boards.schemas import Board
from columns.schemas import Column
from core.errors import BackendError


class InvalidStorage:
    def __init__(self, error: str) -> None:
        self.error = error

    @property
    def name(self) -> str:
        return "INVALID"

    async def close(self) -> None:
        return None

    def _fail(self) -> NoReturn:
        raise BackendError(self.error)

    async def add_board(self, item: Board) -> bool:
        self._fail()

    async def list_boards(self) -> list[Board]:
        self._fail()

    async def get_board(self, id_: str) -> Board:
        self._fail()

    async def delete_board(self, id_: str) -> bool:
        self._fail()

    async def add_column(self, item: Column) -> bool:
        self._fail()

    async def list_columns(self) -> list[Column]:
        self._fail()

    async def get_column(self, id_: str) -> Column:
        self._fail()

    async def delete_column(self, id_: str) -> bool:
        self._fail()
