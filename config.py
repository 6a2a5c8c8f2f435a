from __future__ import annotations
import os
from pathlib import Path

class BaseConfig:
    BASE_DIR = Path(__file__).resolve().parent
    # SQLite file in project directory
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR / 'app.db'}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # контакты на странице окончания пробного периода
    SUPPORT_EMAIL = os.getenv("SUPPORT_EMAIL", "info@olexto.com")
    SUPPORT_PHONE = os.getenv("SUPPORT_PHONE", "+94714245192")
    RENEWAL_SUBJECT = os.getenv("RENEWAL_SUBJECT", "Subscription Renewal Request")

class DevConfig(BaseConfig):
    DEBUG = True
    SEED_DEMO_ROOMS = True

class ProdConfig(BaseConfig):
    DEBUG = False
    SEED_DEMO_ROOMS = False

config_map = {
    "dev": DevConfig,
    "prod": ProdConfig,
    "default": DevConfig,
}
