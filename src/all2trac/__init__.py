"""all2trac - render document trees as Trac wiki markup.

all2trac takes the document tree produced by an outline-document parser and
writes it out in the wiki dialect of the Trac issue tracker. Headings,
paragraphs, code blocks, lists and inline formatting map to fixed Trac
patterns. Tables are aligned column by column, with a separator rule under
the header row and an empty header added for tables that have none.

Requirements
------------
- Python 3.10+
- wcwidth for display-width measurement of table cells

Examples
--------
Render a document built in code:

    >>> from all2trac import to_trac
    >>> from all2trac.ast import DocumentBuilder, TableBuilder
    >>> table = TableBuilder().add_row(["a", "bb"]).add_row(["ccc", "d"])
    >>> doc = DocumentBuilder().add_table(table).get_document()
    >>> print(to_trac(doc), end="")
    || a   || bb ||
    || ccc || d  ||

Render a tree handed over as JSON:

    >>> from all2trac.ast import json_to_ast
    >>> doc = json_to_ast(open("document.json").read())
    >>> wiki_text = to_trac(doc)

"""

from __future__ import annotations

from typing import Optional

from all2trac.ast.nodes import Document
from all2trac.exceptions import (
    All2TracError,
    InvalidOptionsError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from all2trac.options.trac import TracRendererOptions
from all2trac.renderers.trac import TracRenderer

__version__ = "1.0.0"


def to_trac(document: Document, options: Optional[TracRendererOptions] = None) -> str:
    """Render a document tree to Trac wiki markup.

    Parameters
    ----------
    document : Document
        Document tree to render
    options : TracRendererOptions, optional
        Rendering options, defaults to ``TracRendererOptions()``

    Returns
    -------
    str
        Trac wiki markup ending with a single newline

    """
    return TracRenderer(options).render_to_string(document)


__all__ = [
    "__version__",
    "to_trac",
    "TracRenderer",
    "TracRendererOptions",
    "All2TracError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
]
