"""
Idempotent seed-скрипт для демо-номеров.
Запуск:
  python seed.py --reset   # дропнуть и пересоздать БД + демо-номера
  python seed.py           # мягкое наполнение недостающих номеров (по number)
"""
import argparse

from extensions import db
from models import Room

DEMO_ROOMS = [
    {
        "number": "101",
        "type": "Single",
        "price": 100,
        "status": "Available",
        "amenities": ["WiFi", "TV", "AC", "Mini Fridge", "Safe"],
        "description": "Cozy single room with city view, perfect for solo travelers.",
        "images": [],
        "floor": 1,
        "capacity": 1,
        "size": 25,
        "view": "City",
        "bedType": "Single",
        "rating": 4.5,
        "reviews": 12,
        "specialOffers": ["Early Bird Discount", "Extended Stay Deal"],
        "accessibility": True,
    },
    {
        "number": "102",
        "type": "Double",
        "price": 150,
        "status": "Occupied",
        "amenities": ["WiFi", "TV", "AC", "Mini Bar", "Balcony"],
        "description": "Spacious double room with mountain view and private balcony.",
        "images": [],
        "floor": 1,
        "capacity": 2,
        "size": 35,
        "view": "Mountain",
        "bedType": "Queen",
        "rating": 4.8,
        "reviews": 18,
        "specialOffers": ["Honeymoon Package"],
        "accessibility": True,
    },
    {
        "number": "201",
        "type": "Suite",
        "price": 250,
        "status": "Available",
        "amenities": ["WiFi", "Smart TV", "AC", "Mini Bar", "Jacuzzi", "Living Area"],
        "description": "Luxury suite with panoramic views and separate living area.",
        "images": [],
        "floor": 2,
        "capacity": 4,
        "size": 60,
        "view": "Ocean",
        "bedType": "King",
        "rating": 4.9,
        "reviews": 24,
        "specialOffers": ["Luxury Weekend Package"],
        "accessibility": True,
    },
    {
        "number": "202",
        "type": "Double",
        "price": 180,
        "status": "Maintenance",
        "amenities": ["WiFi", "TV", "AC", "Garden Access"],
        "description": "Deluxe room with direct garden access and sitting area.",
        "images": [],
        "floor": 2,
        "capacity": 2,
        "size": 40,
        "view": "Garden",
        "bedType": "Queen",
        "rating": 4.7,
        "reviews": 15,
        "specialOffers": ["Weekend Special"],
        "accessibility": False,
    },
]

def seed_rooms(rooms=DEMO_ROOMS) -> int:
    """Добавляет номера, которых ещё нет (по number). Возвращает число созданных."""
    existing = {n for (n,) in db.session.query(Room.number).all()}
    created = 0
    for doc in rooms:
        number = str(doc["number"])
        if number in existing:
            continue
        db.session.add(Room(number=number, data=dict(doc)))
        existing.add(number)
        created += 1
    if created:
        db.session.commit()
    return created

# ---- main ----
def main():
    from app import create_app

    parser = argparse.ArgumentParser()
    parser.add_argument("--reset", action="store_true", help="drop + create + demo rooms")
    args = parser.parse_args()

    app = create_app()
    with app.app_context():
        if args.reset:
            db.drop_all()
        db.create_all()
        created = seed_rooms()
        print(f"[seed] {'reset+seed' if args.reset else 'soft seed'} complete, rooms created: {created}")

if __name__ == "__main__":
    main()
