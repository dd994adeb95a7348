"""
Column API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel


class CreateColumn(BaseModel):
    board_id: str
    title: str


class Column(BaseModel):
    id: str
    board_id: str
    title: str
    created_at: int
