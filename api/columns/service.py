"""
Column business logic. Same stamping rules as boards.
"""

from __future__ import annotations

import logging

from core.ids import generate_id
from core.service import Service

from . import schemas

logger = logging.getLogger(__name__)


def new_column(payload: schemas.CreateColumn, *, now_ms: int) -> schemas.Column:
    return schemas.Column(
        id=generate_id(now_ms),
        board_id=payload.board_id,
        title=payload.title,
        created_at=now_ms,
    )


async def create_column(service: Service, payload: schemas.CreateColumn) -> schemas.Column:
    column = new_column(payload, now_ms=service.clock.now_ms())
    await service.storage.add_column(column)
    logger.info("column_added id=%s board_id=%s", column.id, column.board_id)
    return column
