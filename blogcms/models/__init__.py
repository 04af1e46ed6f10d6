"""
Models Package

Exports all models for easy importing.
"""

from blogcms.models.user import User
from blogcms.models.post import Post

__all__ = ['User', 'Post']
