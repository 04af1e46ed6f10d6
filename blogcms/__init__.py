"""
Blog CMS - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, jsonify, render_template
from werkzeug.exceptions import HTTPException
from blogcms.extensions import db, login_manager
from blogcms.config import Config

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    _configure_logging(app)
    
    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.session_protection = 'basic'
    
    # Register blueprints
    from blogcms.auth import auth_bp
    from blogcms.posts import posts_bp
    
    app.register_blueprint(auth_bp)
    app.register_blueprint(posts_bp)
    
    _register_error_handlers(app)
    
    # Context processor for the optional admin link
    @app.context_processor
    def inject_users():
        from blogcms.auth.guard import get_optional_user, get_optional_admin_user
        return dict(user=get_optional_user(), admin_user=get_optional_admin_user())
    
    # User loader for Flask-Login; a deleted user resolves to anonymous
    @login_manager.user_loader
    def load_user(user_id):
        from blogcms.models import User
        try:
            return db.session.get(User, int(user_id))
        except (TypeError, ValueError):
            return None
    
    @app.template_filter('markdown')
    def markdown_filter(text):
        from blogcms.services import render_markdown
        return render_markdown(text)
    
    # Create database tables
    with app.app_context():
        os.makedirs(app.config['INSTANCE_DIR'], exist_ok=True)
        db.create_all()
        _ensure_admin_user(app)
    
    return app


def _configure_logging(app):
    """Attach one stream handler to the package logger."""
    package_logger = logging.getLogger('blogcms')
    package_logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)


def _register_error_handlers(app):
    from blogcms.utils import wants_json
    
    def _http_error(error):
        if wants_json():
            return jsonify(error=error.description), error.code
        return render_template('errors/http.html', error=error), error.code
    
    for code in (400, 403, 404, 405):
        app.register_error_handler(code, _http_error)
    
    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        original = getattr(error, 'original_exception', None) or error
        if isinstance(original, HTTPException):
            message = original.description
        else:
            message = str(original) or 'Unknown error'
        if wants_json():
            return jsonify(error=message), 500
        return render_template('errors/500.html', message=message), 500


def _ensure_admin_user(app):
    """Create or promote the configured admin account."""
    from blogcms.models import User
    
    email = (app.config.get('ADMIN_EMAIL') or '').strip().lower()
    password = app.config.get('ADMIN_PASSWORD')
    if not email or not password:
        return
    
    user = User.query.filter_by(email=email).first()
    if user is None:
        user = User(email=email, is_admin=True)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        logger.info('Created admin user %s', email)
    elif not user.is_admin:
        user.is_admin = True
        db.session.commit()
        logger.info('Promoted %s to admin', email)
