from flask import Blueprint

bp = Blueprint("trial", __name__, template_folder="../../templates")
from . import routes  # noqa
