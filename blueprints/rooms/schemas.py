from __future__ import annotations
from pydantic import BaseModel, ConfigDict

# ---------- Rooms ----------
class RoomOut(BaseModel):
    """Документ номера в ответе API. Лишние атрибуты (amenities, floor, ...) отдаются как есть."""
    model_config = ConfigDict(extra="allow")

    id: str
