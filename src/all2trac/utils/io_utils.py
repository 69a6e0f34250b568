#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2trac/utils/io_utils.py
"""Writing rendered wiki text to paths and streams."""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Union, cast

OutputTarget = Union[str, Path, IO[bytes], IO[str], None]


def _is_binary_stream(stream: object) -> bool:
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(stream, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: OutputTarget) -> Union[io.StringIO, None]:
    """Send wiki text to ``output``.

    A path is written as UTF-8 and replaced if it exists. Binary streams
    receive UTF-8 bytes, text streams receive the string. With ``output``
    set to None the text comes back as a rewound StringIO.

    Raises
    ------
    TypeError
        If ``content`` is not a string or ``output`` is not writable

    Examples
    --------
    >>> write_content("|| a ||", None).read()
    '|| a ||'

    >>> buffer = io.BytesIO()
    >>> write_content("|| a ||", buffer)
    >>> buffer.getvalue()
    b'|| a ||'

    """
    if not isinstance(content, str):
        raise TypeError(f"Content must be str, got {type(content)}")

    if output is None:
        return io.StringIO(content)

    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return None

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)
    return None


__all__ = ["write_content"]
