"""
Admin Guard

Every admin-protected loader and action goes through require_admin_user
before it touches a post or reads the submitted form.
"""

import logging
from functools import wraps

from flask import abort, redirect, request, url_for
from flask_login import current_user

logger = logging.getLogger(__name__)


def get_optional_user():
    """Return the logged-in User, or None for anonymous sessions."""
    if not current_user.is_authenticated:
        return None
    return current_user._get_current_object()


def get_optional_admin_user():
    """Return the logged-in User if it is an admin, else None."""
    user = get_optional_user()
    if user is None or not user.is_admin:
        return None
    return user


def require_admin_user():
    """Resolve the session to an admin User or stop the request.
    
    - No session, or a session whose user no longer exists: redirect to
      the login page with ``next`` pointing back here.
    - Authenticated but not an admin: 403.
    
    Returns:
        The admin User.
    """
    user = get_optional_user()
    if user is None:
        logger.warning('Anonymous request to %s redirected to login', request.path)
        abort(redirect(url_for('auth.login', next=request.full_path.rstrip('?'))))
    
    if not user.is_admin:
        logger.warning('User %s denied admin access to %s', user.email, request.path)
        abort(403)
    
    return user


def admin_required(f):
    """Decorator running require_admin_user before the wrapped view."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        require_admin_user()
        return f(*args, **kwargs)
    return wrapper
