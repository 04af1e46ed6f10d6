"""
Services Package

Exports all services for easy importing.
"""

from blogcms.services.markdown import render_markdown
from blogcms.services.posts import (
    DuplicateSlugError,
    PostNotFoundError,
    create_post,
    delete_post,
    get_post,
    get_posts_listings,
    update_post,
)

__all__ = [
    'render_markdown',
    'DuplicateSlugError',
    'PostNotFoundError',
    'create_post',
    'delete_post',
    'get_post',
    'get_posts_listings',
    'update_post'
]
