from __future__ import annotations
from typing import Any

REQUIRED_ROOM_FIELDS = ("number", "type", "price", "status")

class MissingFieldError(ValueError):
    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}")
        self.field = field

def ensure_required_fields(data: dict[str, Any], fields=REQUIRED_ROOM_FIELDS):
    # пустые строки, 0, None, False считаются отсутствующими
    for field in fields:
        if not data.get(field):
            raise MissingFieldError(field)
