"""
Posts Blueprint

Public reading routes and the admin editor, all under /posts.
"""

from flask import Blueprint

posts_bp = Blueprint('posts', __name__, url_prefix='/posts')

from blogcms.posts import routes  # noqa: E402, F401
