from __future__ import annotations
from datetime import datetime
from typing import Any
from uuid import uuid4

from sqlalchemy import DateTime, Index, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from extensions import db


def _new_id() -> str:
    return uuid4().hex


class Room(db.Model):
    """Документ номера: произвольные поля лежат в data, number продублирован для поиска по номеру."""
    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_id)
    number: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_room_number", "number"),
    )

    def to_dict(self) -> dict[str, Any]:
        return {**(self.data or {}), "id": self.id}

    def __repr__(self):
        return f"<Room {self.number}>"
