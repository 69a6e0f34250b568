#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Immutable option containers for all2trac renderers."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-with-changes support for frozen option dataclasses."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        ``__post_init__`` runs again on the copy, so invalid values are
        rejected the same way as at construction time.

        Examples
        --------
        >>> from all2trac.options import TracRendererOptions
        >>> TracRendererOptions().create_updated(preserve_breaks=True).preserve_breaks
        True

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Common parent of every renderer's options.

    Dialect options are declared as dataclass fields carrying ``help``,
    ``cli_name`` and ``importance`` metadata.
    """

    def __post_init__(self) -> None:
        pass
