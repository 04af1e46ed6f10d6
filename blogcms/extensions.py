"""
Flask Extensions

The session cookie is the only credential; Flask-Login maps it back to a
User row on every request.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager resolving the session to a User
login_manager = LoginManager()
