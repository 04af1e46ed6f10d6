"""
Configuration settings for the Blog CMS
"""
import os
from datetime import timedelta


class Config:
    """Flask application configuration"""
    
    # Flask secret key for signing the session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    INSTANCE_DIR = os.path.join(basedir, 'instance')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(INSTANCE_DIR, 'blog.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Session cookie
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    REMEMBER_COOKIE_DURATION = timedelta(days=7)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    
    # Seeded admin account; an existing user with this email is promoted.
    # Nothing is seeded unless both are set.
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')
    
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    ADMIN_EMAIL = 'admin@example.com'
    ADMIN_PASSWORD = 'adminpass123'
    LOG_LEVEL = 'WARNING'
