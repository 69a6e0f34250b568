#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2trac/renderers/base.py
"""Shared renderer plumbing: the abstract renderer and inline capture."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from all2trac.ast.nodes import Document, Node
from all2trac.exceptions import InvalidOptionsError, OutputWriteError
from all2trac.options.base import BaseRendererOptions
from all2trac.utils.io_utils import write_content

RenderTarget = Union[str, Path, IO[bytes], IO[str]]


class BaseRenderer(ABC):
    """Abstract parent of the wiki renderers.

    Subclasses implement ``render`` and usually ``render_to_string``,
    building the text with a visitor and handing it to
    ``write_text_output``.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Dialect options; subclasses substitute their defaults for None

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: RenderTarget) -> None:
        """Render ``doc`` and write the result to ``output``.

        Raises
        ------
        RenderingError
            If the document cannot be rendered
        OutputWriteError
            If the destination cannot be written

        """

    def render_to_string(self, doc: Document) -> str:
        """Render ``doc`` and return the text."""
        raise NotImplementedError(f"{type(self).__name__} cannot render to a string.")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        # None means "use defaults" and is always accepted
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: RenderTarget) -> None:
        """Write rendered text to a path or stream.

        Raises
        ------
        OutputWriteError
            If the operating system refuses the write
        TypeError
            If ``output`` is neither a path nor a writable object

        Examples
        --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> BaseRenderer.write_text_output("= Hello", buffer)
        >>> buffer.getvalue()
        '= Hello'

        """
        try:
            write_content(text, output)
        except OSError as e:
            raise OutputWriteError(str(output), original_error=e) from e


class InlineContentMixin:
    """Render inline children into a string instead of the main buffer.

    Users must keep their output in ``self._output`` and have visitor
    methods append to it.
    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        saved_output = self._output
        self._output = []
        try:
            for node in content:
                node.accept(self)
            return "".join(self._output)
        finally:
            self._output = saved_output
