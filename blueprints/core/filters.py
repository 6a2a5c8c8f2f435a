from __future__ import annotations
from urllib.parse import quote

def mailto(address: str | None, subject: str | None = None) -> str:
    if not address:
        return ""
    href = f"mailto:{address}"
    if subject:
        href += "?subject=" + quote(subject, safe="")
    return href

def tel(number: str | None) -> str:
    if not number:
        return ""
    digits = "".join(ch for ch in number if ch.isdigit() or ch == "+")
    return f"tel:{digits}"

def register_filters(app):
    app.add_template_filter(mailto, "mailto")
    app.add_template_filter(tel, "tel")
