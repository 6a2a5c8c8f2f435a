# blueprints/trial/routes.py
from __future__ import annotations

from flask import current_app, render_template

from . import bp

@bp.get("/trial-expired")
def expired():
    # статичная страница: контакты берём из конфига, состояния нет
    cfg = current_app.config
    return render_template(
        "trial/expired.html",
        support_email=cfg["SUPPORT_EMAIL"],
        support_phone=cfg["SUPPORT_PHONE"],
        renewal_subject=cfg["RENEWAL_SUBJECT"],
    )
