#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2trac/ast/utils.py
"""Utility functions for working with AST nodes.

Examples
--------
Extract text from a heading:

    >>> from all2trac.ast import Heading, Text, Emphasis
    >>> from all2trac.ast.utils import extract_text
    >>>
    >>> heading = Heading(level=1, content=[
    ...     Text(content="Hello "),
    ...     Emphasis(content=[Text(content="world")])
    ... ])
    >>> extract_text(heading)
    'Hello world'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from all2trac.ast.nodes import Code, Text, get_node_children

if TYPE_CHECKING:
    from all2trac.ast.nodes import Node


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = "") -> str:
    """Extract plain text from a node or list of nodes.

    Text and inline code content is concatenated depth-first. Formatting
    markup is dropped.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = ""
        String placed between the text of sibling nodes

    Returns
    -------
    str
        Concatenated text content

    """
    if isinstance(node_or_nodes, list):
        return joiner.join(part for part in (extract_text(node, joiner=joiner) for node in node_or_nodes) if part)

    node = node_or_nodes
    if isinstance(node, (Text, Code)):
        return node.content

    return joiner.join(
        part for part in (extract_text(child, joiner=joiner) for child in get_node_children(node)) if part
    )


__all__ = [
    "extract_text",
]
