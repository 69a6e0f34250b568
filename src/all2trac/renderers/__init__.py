#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/all2trac/renderers/__init__.py
"""AST renderers for converting document trees to wiki markup.

Available renderers:
- TracRenderer: Render to Trac wiki markup

Examples
--------
    >>> from all2trac.ast import Document, Heading, Text
    >>> from all2trac.renderers import TracRenderer
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")])
    ... ])
    >>> TracRenderer().render_to_string(doc)
    '== Title\\n'

"""

from all2trac.renderers.base import BaseRenderer, InlineContentMixin
from all2trac.renderers.trac import TracRenderer

__all__ = [
    "BaseRenderer",
    "InlineContentMixin",
    "TracRenderer",
]
