# File: wordstack_app/modules/practice/routes/__init__.py
from flask import Blueprint

practice_api_bp = Blueprint('practice_api', __name__)

from . import api  # noqa: E402,F401  (attaches the views)
