from __future__ import annotations

import re

import pytest
from fastapi.testclient import TestClient

from boards.schemas import Board
from columns.schemas import Column
from core.clock import FixedClock
from core.config import AppConfig
from core.errors import ConflictError, NotFoundError
from core.service import Service
from main import create_app

NOW_MS = 1_600_000_000_000
ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")


class MemoryStorage:
    """In-memory storage double with the same contract as PostgresStorage."""

    def __init__(self) -> None:
        self.boards: dict[str, Board] = {}
        self.columns: dict[str, Column] = {}
        self.calls: list[str] = []

    @property
    def name(self) -> str:
        return "Memory"

    async def close(self) -> None:
        self.calls.append("close")

    async def add_board(self, item: Board) -> bool:
        self.calls.append("add_board")
        if item.id in self.boards:
            raise ConflictError(f"Add Board failed: duplicate id {item.id}")
        self.boards[item.id] = item
        return True

    async def list_boards(self) -> list[Board]:
        self.calls.append("list_boards")
        return list(self.boards.values())

    async def get_board(self, id_: str) -> Board:
        self.calls.append("get_board")
        if id_ not in self.boards:
            raise NotFoundError(f"No Board with id {id_}")
        return self.boards[id_]

    async def delete_board(self, id_: str) -> bool:
        self.calls.append("delete_board")
        return self.boards.pop(id_, None) is not None

    async def add_column(self, item: Column) -> bool:
        self.calls.append("add_column")
        self.columns[item.id] = item
        return True

    async def list_columns(self) -> list[Column]:
        self.calls.append("list_columns")
        return list(self.columns.values())

    async def get_column(self, id_: str) -> Column:
        self.calls.append("get_column")
        if id_ not in self.columns:
            raise NotFoundError(f"No Column with id {id_}")
        return self.columns[id_]

    async def delete_column(self, id_: str) -> bool:
        self.calls.append("delete_column")
        return self.columns.pop(id_, None) is not None


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def service(storage: MemoryStorage) -> Service:
    return Service(clock=FixedClock(NOW_MS), config=AppConfig(provider="memory"), storage=storage)


@pytest.fixture
def app(service: Service):
    return create_app(service)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
