from __future__ import annotations
import pytest
from sqlalchemy.exc import OperationalError

from app import create_app
from extensions import db
from models import Room
from blueprints.rooms import services as svc
from blueprints.rooms.validators import MissingFieldError, ensure_required_fields
from seed import DEMO_ROOMS, seed_rooms

@pytest.fixture()
def app_ctx():
    app = create_app("dev")
    app.config.update(TESTING=True, SQLALCHEMY_DATABASE_URI="sqlite:///:memory:")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()

def test_add_and_list_ordered_by_number(app_ctx):
    svc.add_room({"number": "305", "type": "Suite", "price": 300, "status": "Available"})
    svc.add_room({"number": "104", "type": "Single", "price": 90, "status": "Available"})
    rooms = svc.get_rooms()
    assert [r["number"] for r in rooms] == ["104", "305"]
    assert len({r["id"] for r in rooms}) == 2

def test_numeric_numbers_sort_by_value_before_strings(app_ctx):
    for number in ("101", 10, 9, 2.5):
        svc.add_room({"number": number, "type": "Single", "price": 50, "status": "Available"})
    assert [r["number"] for r in svc.get_rooms()] == [2.5, 9, 10, "101"]

def test_number_column_follows_document(app_ctx):
    created = svc.add_room({"number": 7, "type": "Single", "price": 50, "status": "Available"})
    row = db.session.get(Room, created["id"])
    assert row.number == "7"
    assert row.data["number"] == 7

    svc.update_room(created["id"], {"number": "8"})
    row = db.session.get(Room, created["id"])
    assert row.number == "8"

def test_update_keeps_untouched_keys(app_ctx):
    created = svc.add_room({"number": "1", "type": "Single", "price": 50, "status": "Available", "amenities": ["TV"]})
    updated = svc.update_room(created["id"], {"id": "other", "amenities": ["TV", "WiFi"]})
    assert updated["id"] == created["id"]
    assert updated["amenities"] == ["TV", "WiFi"]
    assert updated["type"] == "Single"

def test_update_missing_raises(app_ctx):
    with pytest.raises(svc.RoomNotFound) as ei:
        svc.update_room("missing", {"status": "Occupied"})
    assert isinstance(ei.value, svc.StorageError)
    assert str(ei.value) == "Room not found: missing"

def test_delete_is_idempotent(app_ctx):
    created = svc.add_room({"number": "1", "type": "Single", "price": 50, "status": "Available"})
    svc.delete_room(created["id"])
    svc.delete_room(created["id"])
    assert svc.get_rooms() == []

def test_database_error_wrapped(app_ctx):
    db.drop_all()
    with pytest.raises(svc.StorageError) as ei:
        svc.get_rooms()
    assert isinstance(ei.value.__cause__, OperationalError)
    assert "room" in str(ei.value)

def test_ensure_required_fields():
    ensure_required_fields({"number": "1", "type": "Single", "price": 10, "status": "Available"})
    with pytest.raises(MissingFieldError) as ei:
        ensure_required_fields({"number": "1", "type": "", "price": 10, "status": "Available"})
    assert ei.value.field == "type"

def test_seed_rooms_idempotent(app_ctx):
    assert seed_rooms() == len(DEMO_ROOMS)
    assert seed_rooms() == 0
    numbers = [r["number"] for r in svc.get_rooms()]
    assert numbers == sorted(d["number"] for d in DEMO_ROOMS)
