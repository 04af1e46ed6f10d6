"""
Auth Blueprint

Session login for users and the guard that gates admin routes.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from blogcms.auth import routes  # noqa: E402, F401
