from __future__ import annotations
import os
from flask import Flask
from config import config_map
from extensions import db, migrate
from sqlalchemy import inspect

def _seed_from_config(app):
    if not app.config.get("SEED_DEMO_ROOMS"):
        return
    with app.app_context():
        # таблица room может ещё не быть создана (alembic upgrade и т.п.)
        if not inspect(db.engine).has_table("room"):
            return

        from seed import seed_rooms  # локальный импорт, чтобы избежать циклов
        seed_rooms()

def register_blueprints(app: Flask) -> None:
    from blueprints.core import bp as core_bp
    from blueprints.trial import bp as trial_bp
    from blueprints.rooms import api_bp as rooms_api_bp

    # core без префикса → '/health' в корне
    app.register_blueprint(core_bp)
    app.register_blueprint(trial_bp)
    app.register_blueprint(rooms_api_bp, url_prefix="/api/v1")

def create_app(config_name: str | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    cfg_name = config_name or os.getenv("FLASK_CONFIG", "default")
    app.config.from_object(config_map[cfg_name])
    # --- изоляция БД в тестах ---
    # pytest всегда выставляет переменную окружения PYTEST_CURRENT_TEST.
    # Делаем БД в памяти, чтобы никакие изменения из одного теста не протекали в другой.
    if os.environ.get("PYTEST_CURRENT_TEST"):
        app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite:///:memory:"
        app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", {"connect_args": {"check_same_thread": False}})

    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        pass
    db.init_app(app)
    migrate.init_app(app, db)
    register_blueprints(app)
    _seed_from_config(app)
    return app
