"""
User Model
"""

from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash

from blogcms.extensions import db
from blogcms.utils import utc_now


class User(UserMixin, db.Model):
    """User model for authentication"""
    __tablename__ = 'users'
    
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    # Role flag checked by the admin guard
    is_admin = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now)
    
    def set_password(self, password):
        self.password_hash = generate_password_hash(password, method='pbkdf2:sha256')
    
    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
    
    def to_dict(self):
        return {'id': self.id, 'email': self.email, 'is_admin': self.is_admin}
    
    def __repr__(self):
        return f'<User {self.email}>'
