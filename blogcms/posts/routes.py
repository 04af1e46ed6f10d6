"""
Posts Routes

Loaders (GET) read posts; the admin action (POST) creates, updates or
deletes one. Admin handlers are gated by admin_required before the
request body is looked at.
"""

import re

from flask import abort, jsonify, redirect, render_template, request, url_for
from blogcms.auth.guard import admin_required
from blogcms.posts import posts_bp
from blogcms.services import (
    DuplicateSlugError,
    PostNotFoundError,
    create_post,
    delete_post,
    get_post,
    get_posts_listings,
    update_post,
)
from blogcms.utils import respond, wants_json

NEW_SLUG = 'new'
INTENTS = ('create', 'update', 'delete')
# "new" and "admin" collide with the admin routes
RESERVED_SLUGS = (NEW_SLUG, 'admin')
SLUG_RE = re.compile(r'[A-Za-z0-9_-]+')


@posts_bp.route('')
def index():
    """Public listing of all posts"""
    return respond('posts/index.html', {'posts': get_posts_listings()})


@posts_bp.route('/admin', methods=['GET', 'POST'])
@admin_required
def admin():
    """Admin listing; POST here creates a post like /admin/new."""
    if request.method == 'POST':
        return _post_action(NEW_SLUG)
    return respond('posts/admin/index.html', {'posts': get_posts_listings()})


@posts_bp.route('/admin/<slug>', methods=['GET', 'POST'])
@admin_required
def admin_post(slug):
    """Edit form for one post, or an empty form when slug is 'new'."""
    if request.method == 'POST':
        return _post_action(slug)
    
    if slug == NEW_SLUG:
        return _render_form(slug, post=None)
    
    post = get_post(slug)
    if post is None:
        abort(404)
    return _render_form(slug, post=post.to_dict())


@posts_bp.route('/<slug>')
def show_post(slug):
    """Single post rendered from markdown"""
    post = get_post(slug)
    if post is None:
        abort(404)
    return respond('posts/post.html', {'post': post.to_dict()})


def _post_action(slug):
    intent = request.form.get('intent') or ('create' if slug == NEW_SLUG else 'update')
    if intent not in INTENTS:
        abort(400, description=f'Unknown intent "{intent}"')
    
    if slug != NEW_SLUG and get_post(slug) is None:
        abort(404)
    
    if intent == 'delete':
        try:
            delete_post(slug)
        except PostNotFoundError:
            abort(404)
        return redirect(url_for('posts.admin'))
    
    values = {
        'title': request.form.get('title', '').strip(),
        'slug': request.form.get('slug', '').strip(),
        'markdown': request.form.get('markdown', ''),
    }
    errors = {
        'title': None if values['title'] else 'Title is required',
        'slug': _slug_error(values['slug']),
        'markdown': None if values['markdown'].strip() else 'Markdown is required',
    }
    if any(errors.values()):
        return _render_errors(slug, errors, values)
    
    try:
        if slug == NEW_SLUG:
            create_post(**values)
        else:
            update_post(slug, **values)
    except PostNotFoundError:
        abort(404)
    except DuplicateSlugError:
        errors['slug'] = 'A post with this slug already exists'
        return _render_errors(slug, errors, values)
    
    return redirect(url_for('posts.admin'))


def _slug_error(slug):
    if not slug:
        return 'Slug is required'
    if not SLUG_RE.fullmatch(slug):
        return 'Slug may only contain letters, numbers, hyphens and underscores'
    if slug.lower() in RESERVED_SLUGS:
        return f'Slug "{slug}" is reserved'
    return None


def _render_form(slug, post, errors=None, values=None):
    return respond('posts/admin/edit.html', {'post': post},
                   posts=get_posts_listings(),
                   is_new=slug == NEW_SLUG,
                   errors=errors or {},
                   values=values or post or {})


def _render_errors(slug, errors, values):
    if wants_json():
        return jsonify(errors), 200
    post = None if slug == NEW_SLUG else get_post(slug)
    return _render_form(slug, post=post.to_dict() if post else None,
                        errors=errors, values=values)


@posts_bp.errorhandler(404)
def post_not_found(error):
    slug = (request.view_args or {}).get('slug', NEW_SLUG)
    message = f'Uh oh! The post with the slug "{slug}" does not exist!'
    if wants_json():
        return jsonify(error=message), 404
    return render_template('errors/post_not_found.html', message=message), 404
