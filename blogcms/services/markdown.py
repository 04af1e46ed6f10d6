"""
Markdown Rendering

Post bodies are written by admins only and are trusted: raw HTML in the
markdown is passed through unsanitized.
"""

import markdown as md
from markupsafe import Markup

MARKDOWN_EXTENSIONS = ['fenced_code', 'tables', 'sane_lists']


def render_markdown(text):
    """Render a post body to HTML markup safe to embed in a template."""
    return Markup(md.markdown(text or '', extensions=MARKDOWN_EXTENSIONS))
