"""
Post Store

CRUD operations on posts, keyed by slug.
"""

import logging

from sqlalchemy.exc import IntegrityError

from blogcms.extensions import db
from blogcms.models import Post

logger = logging.getLogger(__name__)


class PostNotFoundError(LookupError):
    """No post exists with the requested slug."""

    def __init__(self, slug):
        super().__init__(f'No post with slug "{slug}"')
        self.slug = slug


class DuplicateSlugError(ValueError):
    """Another post already uses the slug."""

    def __init__(self, slug):
        super().__init__(f'A post with slug "{slug}" already exists')
        self.slug = slug


def get_posts_listings():
    """Return slug/title pairs for every post, newest first."""
    rows = db.session.query(Post.slug, Post.title)\
        .order_by(Post.created_at.desc(), Post.slug).all()
    return [{'slug': slug, 'title': title} for slug, title in rows]


def get_post(slug):
    """Return the post with ``slug`` or None."""
    return db.session.get(Post, slug)


def create_post(title, slug, markdown):
    """Insert a new post.

    Raises:
        DuplicateSlugError: if ``slug`` is already taken
    """
    if get_post(slug) is not None:
        raise DuplicateSlugError(slug)
    
    post = Post(slug=slug, title=title, markdown=markdown)
    db.session.add(post)
    _commit(slug)
    logger.info('Created post %s', slug)
    return post


def update_post(current_slug, title, slug, markdown):
    """Overwrite the post at ``current_slug``; ``slug`` may rename it.

    Raises:
        PostNotFoundError: if ``current_slug`` does not exist
        DuplicateSlugError: if renaming onto a slug another post uses
    """
    post = get_post(current_slug)
    if post is None:
        raise PostNotFoundError(current_slug)
    if slug != current_slug and get_post(slug) is not None:
        raise DuplicateSlugError(slug)
    
    post.title = title
    post.slug = slug
    post.markdown = markdown
    _commit(slug)
    
    if slug != current_slug:
        logger.info('Renamed post %s -> %s', current_slug, slug)
    else:
        logger.info('Updated post %s', slug)
    return post


def delete_post(slug):
    """Delete the post at ``slug``.

    Raises:
        PostNotFoundError: if it does not exist
    """
    post = get_post(slug)
    if post is None:
        raise PostNotFoundError(slug)
    
    db.session.delete(post)
    db.session.commit()
    logger.info('Deleted post %s', slug)


def _commit(slug):
    # a concurrent writer may take the slug between the check and the flush
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise DuplicateSlugError(slug)
