"""
FastAPI router for board endpoints.

Errors are raised as HTTPException with a plain-text detail; `main.py`
renders them as text/plain bodies.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from core import gate
from core.errors import NotFoundError, StorageError
from core.service import Service, get_service

from . import schemas, service

logger = logging.getLogger(__name__)

router = APIRouter()

# TODO: add oauth token exchange and take the owner from the token.


@router.get("/boards", response_model=list[schemas.Board])
async def list_boards(svc: Service = Depends(get_service)) -> list[schemas.Board]:
    logger.debug("list_boards")
    try:
        return await svc.storage.list_boards()
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"List boards failed! {exc}",
        ) from exc


@router.post(
    "/boards",
    response_model=schemas.Board,
    dependencies=[Depends(gate.check_rate_limit)],
)
async def add_board(
    payload: schemas.CreateBoard,
    svc: Service = Depends(get_service),
) -> schemas.Board:
    try:
        return await service.create_board(svc, payload)
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Add board failed! {exc}",
        ) from exc


@router.get(
    "/boards/{board_id}",
    response_model=schemas.Board,
    dependencies=[Depends(gate.check_rate_limit)],
)
async def get_board(board_id: str, svc: Service = Depends(get_service)) -> schemas.Board:
    try:
        return await svc.storage.get_board(board_id)
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find board for id {board_id}: {exc}",
        ) from exc


@router.delete(
    "/boards/{board_id}",
    response_class=PlainTextResponse,
    dependencies=[Depends(gate.check_rate_limit)],
)
async def delete_board(board_id: str, svc: Service = Depends(get_service)) -> PlainTextResponse:
    try:
        deleted = await svc.storage.delete_board(board_id)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find board for id {board_id}: {exc}",
        ) from exc
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Delete board failed! {exc}",
        ) from exc

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find board for id {board_id}",
        )
    logger.info("board_deleted id=%s", board_id)
    return PlainTextResponse("Board deleted")
