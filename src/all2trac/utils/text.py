#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2trac/utils/text.py
"""Text measurement and normalization helpers.

Table columns are aligned by what a reader sees, not by how many code points
or bytes a string holds. East Asian wide characters occupy two cells, while
combining marks and zero-width characters occupy none. ``display_width``
delegates that decision to :mod:`wcwidth`.

"""

from __future__ import annotations

import re

from wcwidth import wcswidth, wcwidth

_WHITESPACE_RUN = re.compile(r"\s+")


def display_width(text: str) -> int:
    """Return the number of terminal cells needed to display ``text``.

    Parameters
    ----------
    text : str
        Text to measure

    Returns
    -------
    int
        Display width. Non-printable characters count as zero.

    Examples
    --------
    >>> display_width("abc")
    3
    >>> display_width("日本")
    4

    """
    width = wcswidth(text)
    if width >= 0:
        return width
    # wcswidth gives up on the whole string when any character is non-printable
    return sum(max(wcwidth(char), 0) for char in text)


def pad_to_width(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces up to ``width`` display cells.

    Text that is already wider than ``width`` is returned unchanged.

    """
    return text + " " * max(0, width - display_width(text))


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run (newlines included) into one space and strip the ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


__all__ = ["display_width", "pad_to_width", "collapse_whitespace"]
