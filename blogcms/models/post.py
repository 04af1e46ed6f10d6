"""
Post Model
"""

from blogcms.extensions import db
from blogcms.utils import utc_now


class Post(db.Model):
    """Blog post keyed by its slug"""
    __tablename__ = 'posts'
    
    slug = db.Column(db.String(255), primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    markdown = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utc_now, onupdate=utc_now,
                           nullable=False)
    
    def to_dict(self):
        return {
            'slug': self.slug,
            'title': self.title,
            'markdown': self.markdown,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
    
    def __repr__(self):
        return f'<Post {self.slug}>'
