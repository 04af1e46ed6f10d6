"""
Auth Routes

User authentication routes using Flask-Login.
"""

import logging

from flask import render_template, request, redirect, url_for, session
from flask_login import login_user, logout_user, current_user
from blogcms.auth import auth_bp
from blogcms.extensions import db
from blogcms.models import User

logger = logging.getLogger(__name__)

DEFAULT_REDIRECT = '/posts'
MIN_PASSWORD_LENGTH = 8


def safe_redirect(to, default=DEFAULT_REDIRECT):
    """Only follow local paths; anything else goes to ``default``."""
    if not to or not isinstance(to, str):
        return default
    if not to.startswith('/') or to.startswith('//') or to.startswith('/\\'):
        return default
    return to


def _validate_credentials(email, password):
    errors = {'email': None, 'password': None}
    if not email or '@' not in email:
        errors['email'] = 'Email is invalid'
    if not password:
        errors['password'] = 'Password is required'
    return errors


@auth_bp.route('/')
def index():
    return redirect(url_for('posts.index'))


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    next_url = safe_redirect(request.values.get('next'))
    if current_user.is_authenticated:
        return redirect(next_url)
    
    if request.method == 'POST':
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')
        remember = bool(request.form.get('remember'))
        
        errors = _validate_credentials(email, password)
        if any(errors.values()):
            return render_template('auth/login.html', errors=errors, email=email, next=next_url)
        
        user = User.query.filter_by(email=email).first()
        if user is None or not user.check_password(password):
            logger.warning('Failed login for %s', email)
            errors['email'] = 'Invalid email or password'
            return render_template('auth/login.html', errors=errors, email=email, next=next_url)
        
        session.clear()
        session.permanent = remember
        login_user(user, remember=remember)
        return redirect(next_url)
    
    return render_template('auth/login.html', errors={}, email='', next=next_url)


@auth_bp.route('/join', methods=['GET', 'POST'])
def register():
    """User registration route"""
    next_url = safe_redirect(request.values.get('next'))
    if current_user.is_authenticated:
        return redirect(next_url)
    
    if request.method == 'POST':
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')
        
        errors = _validate_credentials(email, password)
        if not errors['password'] and len(password) < MIN_PASSWORD_LENGTH:
            errors['password'] = 'Password is too short'
        if not errors['email'] and User.query.filter_by(email=email).first():
            errors['email'] = 'A user already exists with this email'
        if any(errors.values()):
            return render_template('auth/register.html', errors=errors, email=email, next=next_url)
        
        new_user = User(email=email, is_admin=False)
        new_user.set_password(password)
        db.session.add(new_user)
        db.session.commit()
        logger.info('Registered user %s', email)
        
        session.clear()
        login_user(new_user)
        return redirect(next_url)
    
    return render_template('auth/register.html', errors={}, email='', next=next_url)


@auth_bp.route('/logout', methods=['GET', 'POST'])
def logout():
    """User logout route"""
    logout_user()
    session.clear()
    return redirect(url_for('posts.index'))
