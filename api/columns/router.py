"""
FastAPI router for column endpoints (mirrors `boards/router.py`).
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


@router.get("/columns", response_model=list[schemas.Column])
async def list_columns(svc: Service = Depends(get_service)) -> list[schemas.Column]:
    try:
        return await svc.storage.list_columns()
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"List columns failed! {exc}",
        ) from exc


@router.post(
    "/columns",
    response_model=schemas.Column,
    dependencies=[Depends(gate.check_rate_limit)],
)
async def add_column(
    payload: schemas.CreateColumn,
    svc: Service = Depends(get_service),
) -> schemas.Column:
    try:
        return await service.create_column(svc, payload)
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Add column failed! {exc}",
        ) from exc


@router.get(
    "/columns/{column_id}",
    response_model=schemas.Column,
    dependencies=[Depends(gate.check_rate_limit)],
)
async def get_column(column_id: str, svc: Service = Depends(get_service)) -> schemas.Column:
    try:
        return await svc.storage.get_column(column_id)
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find column for id {column_id}: {exc}",
        ) from exc


@router.delete(
    "/columns/{column_id}",
    response_class=PlainTextResponse,
    dependencies=[Depends(gate.check_rate_limit)],
)
async def delete_column(column_id: str, svc: Service = Depends(get_service)) -> PlainTextResponse:
    try:
        deleted = await svc.storage.delete_column(column_id)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find column for id {column_id}: {exc}",
        ) from exc
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Delete column failed! {exc}",
        ) from exc

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find column for id {column_id}",
        )
    logger.info("column_deleted id=%s", column_id)
    return PlainTextResponse("Column deleted")
