#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for all2trac renderers.

Options are frozen dataclasses. Use ``create_updated`` (or the
``create_updated_options`` helper) to derive modified copies.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from all2trac.options.base import BaseRendererOptions, CloneFrozenMixin
from all2trac.options.trac import TracRendererOptions


def create_updated_options(options: Any, **kwargs: Any) -> Any:
    """Create a new options instance with updated values.

    Parameters
    ----------
    options : Any
        The original options instance (must be a dataclass)
    **kwargs : Any
        Field names and their new values

    Returns
    -------
    Any
        A new options instance of the same type

    """
    return replace(options, **kwargs)


__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "TracRendererOptions",
    "create_updated_options",
]
