#  Copyright (c) 2025 Tom Villani, Ph.D.
# all2trac/options/trac.py
"""Configuration options for Trac wiki rendering.

This module defines options for rendering AST documents to Trac wiki markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from all2trac.constants import DEFAULT_LANGUAGE_ALIASES, DEFAULT_PRESERVE_BREAKS
from all2trac.options.base import BaseRendererOptions


@dataclass(frozen=True)
class TracRendererOptions(BaseRendererOptions):
    """Configuration options for Trac wiki rendering.

    Parameters
    ----------
    preserve_breaks : bool, default False
        Whether paragraphs keep their line breaks.
        When False, every run of whitespace (newlines included) in a paragraph
        collapses to a single space so the paragraph reflows in Trac.
    language_aliases : dict of str to str, default {"f90": "fortran"}
        Source language names mapped to the processor names Trac knows.
        Code blocks in a language not listed here keep their language name.

    Examples
    --------
    Keep paragraph line breaks:
        >>> from all2trac.renderers.trac import TracRenderer
        >>> options = TracRendererOptions(preserve_breaks=True)
        >>> renderer = TracRenderer(options)

    Add an alias on top of the defaults:
        >>> options = TracRendererOptions()
        >>> options = options.create_updated(
        ...     language_aliases={**options.language_aliases, "sh": "bash"}
        ... )

    """

    preserve_breaks: bool = field(
        default=DEFAULT_PRESERVE_BREAKS,
        metadata={
            "help": "Keep line breaks inside paragraphs instead of reflowing them",
            "cli_name": "preserve-breaks",
            "importance": "core",
        },
    )
    language_aliases: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_LANGUAGE_ALIASES),
        metadata={
            "help": "Map source code block languages to Trac processor names (NAME=CANONICAL)",
            "cli_name": "language-alias",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option types.

        Raises
        ------
        ValueError
            If a field has a value of the wrong type.

        """
        super().__post_init__()
        if not isinstance(self.preserve_breaks, bool):
            raise ValueError(f"preserve_breaks must be a bool, got {type(self.preserve_breaks).__name__}")
        if not isinstance(self.language_aliases, dict):
            raise ValueError(f"language_aliases must be a dict, got {type(self.language_aliases).__name__}")
        for name, canonical in self.language_aliases.items():
            if not isinstance(name, str) or not isinstance(canonical, str):
                raise ValueError(f"language_aliases entries must map str to str, got {name!r}: {canonical!r}")
