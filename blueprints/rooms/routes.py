# blueprints/rooms/routes.py
from __future__ import annotations
import logging
from typing import Any

from flask import jsonify, request

from . import api_bp
from . import services as svc
from .schemas import RoomOut
from .validators import MissingFieldError, ensure_required_fields

log = logging.getLogger(__name__)

# ----------------------- Helpers -----------------------
def ok(data: Any, status: int = 200):
    return jsonify(data), status

def error(msg: str, status: int = 400):
    return jsonify({"error": msg}), status

def _out(doc: dict) -> dict:
    return RoomOut.model_validate(doc).model_dump(mode="json")

def _room_id() -> str | None:
    return request.args.get("id") or None

def _backend_failure(ex: Exception, action: str):
    log.exception("rooms %s failed", action)
    return error(str(ex), 500)

# ----------------------- API -----------------------
@api_bp.get("/rooms")
def list_rooms():
    if _room_id():
        return ok({"message": "Not implemented yet"}, 501)
    try:
        rooms = svc.get_rooms()
    except Exception as ex:
        return _backend_failure(ex, "list")
    return ok([_out(r) for r in rooms])

@api_bp.post("/rooms")
def create_room():
    try:
        # битый JSON или не тот Content-Type: BadRequest/UnsupportedMediaType → 500
        data = request.get_json()
        # не-объект (массив, число) считаем телом без полей
        fields = data if isinstance(data, dict) else {}
        try:
            ensure_required_fields(fields)
        except MissingFieldError as ex:
            return error(str(ex), 400)
        room = svc.add_room(fields)
    except Exception as ex:
        return _backend_failure(ex, "create")
    return ok(_out(room), 201)

@api_bp.put("/rooms")
def update_room():
    room_id = _room_id()
    if not room_id:
        return error("Room ID is required", 400)
    try:
        data = request.get_json()
        room = svc.update_room(room_id, data)
    except Exception as ex:
        return _backend_failure(ex, "update")
    return ok(_out(room))

@api_bp.delete("/rooms")
def delete_room():
    room_id = _room_id()
    if not room_id:
        return error("Room ID is required", 400)
    try:
        svc.delete_room(room_id)
    except Exception as ex:
        return _backend_failure(ex, "delete")
    return ok({"success": True})
