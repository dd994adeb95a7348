"""
Board API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel


class CreateBoard(BaseModel):
    title: str
    owner: str


class Board(BaseModel):
    id: str
    title: str
    owner: str
    created_at: int
