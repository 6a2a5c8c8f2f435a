# blueprints/rooms/services.py
from __future__ import annotations
import logging
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models import Room

log = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Ошибка хранилища номеров; сообщение уходит клиенту как есть."""


class RoomNotFound(StorageError):
    def __init__(self, room_id: str):
        super().__init__(f"Room not found: {room_id}")
        self.room_id = room_id


# ----------------------- Helpers -----------------------
def _storage_error(ex: SQLAlchemyError) -> StorageError:
    db.session.rollback()
    msg = str(ex.orig) if getattr(ex, "orig", None) else str(ex)
    return StorageError(msg)

def _commit():
    try:
        db.session.commit()
    except SQLAlchemyError as ex:
        raise _storage_error(ex) from ex

def _get(room_id: str) -> Optional[Room]:
    try:
        return db.session.get(Room, room_id)
    except SQLAlchemyError as ex:
        raise _storage_error(ex) from ex

def _document(data: dict[str, Any]) -> dict[str, Any]:
    # id назначает хранилище, из тела запроса его не берём
    return {k: v for k, v in data.items() if k != "id"}

def _number_key(value: Any) -> str:
    return "" if value is None else str(value)

def _sort_key(doc: dict[str, Any]):
    # как orderBy в документных БД: сначала числа по значению, потом строки
    value = doc.get("number")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, value, "")
    return (1, 0, _number_key(value))


# ----------------------- Room store -----------------------
def get_rooms() -> list[dict[str, Any]]:
    try:
        rows = db.session.query(Room).order_by(Room.created_at).all()
    except SQLAlchemyError as ex:
        raise _storage_error(ex) from ex
    # sorted() стабилен: при равных номерах остаётся порядок создания
    return sorted((r.to_dict() for r in rows), key=_sort_key)


def add_room(data: dict[str, Any]) -> dict[str, Any]:
    doc = _document(data)
    room = Room(number=_number_key(doc.get("number")), data=doc)
    db.session.add(room)
    _commit()
    log.info("room created", extra={"event": "room_created", "room_id": room.id})
    return room.to_dict()


def update_room(room_id: str, data: dict[str, Any]) -> dict[str, Any]:
    """Слияние верхнеуровневых полей в документ (как updateDoc у документных БД)."""
    room = _get(room_id)
    if room is None:
        raise RoomNotFound(room_id)

    # новый dict, иначе JSON-колонка не увидит изменения
    merged = {**(room.data or {}), **_document(data)}
    room.data = merged
    room.number = _number_key(merged.get("number"))
    _commit()
    log.info("room updated", extra={"event": "room_updated", "room_id": room_id})
    return room.to_dict()


def delete_room(room_id: str) -> None:
    room = _get(room_id)
    if room is None:
        # удаление несуществующего документа не ошибка
        return
    db.session.delete(room)
    _commit()
    log.info("room deleted", extra={"event": "room_deleted", "room_id": room_id})
