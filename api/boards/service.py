"""
Board business logic: stamp server-assigned fields and hand off to storage.
"""

from __future__ import annotations

import logging

from core.ids import generate_id
from core.service import Service

from . import schemas

logger = logging.getLogger(__name__)


def new_board(payload: schemas.CreateBoard, *, now_ms: int) -> schemas.Board:
    return schemas.Board(
        id=generate_id(now_ms),
        title=payload.title,
        owner=payload.owner,
        created_at=now_ms,
    )


async def create_board(service: Service, payload: schemas.CreateBoard) -> schemas.Board:
    board = new_board(payload, now_ms=service.clock.now_ms())
    await service.storage.add_board(board)
    logger.info("board_added id=%s owner=%s", board.id, board.owner)
    return board
