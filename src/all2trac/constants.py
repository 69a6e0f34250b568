#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for all2trac.

This module centralizes the Trac wiki tokens, table conventions and default
configuration values used across the library.

Constants are organized by category:
1. Type Definitions
2. Trac Wiki Tokens
3. Table Conventions
4. Renderer Defaults
5. Configuration Files
6. CLI Exit Codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TableRowType = Literal["standard", "rule"]

# =============================================================================
# Trac Wiki Tokens
# =============================================================================

TRAC_HEADING_CHAR = "="
TRAC_CODE_FENCE_OPEN = "{{{"
TRAC_CODE_FENCE_CLOSE = "}}}"
TRAC_PROCESSOR_PREFIX = "#!"
TRAC_COMMENT_TRIGGER = "#"
TRAC_ESCAPE_CHAR = "!"
TRAC_STRIKETHROUGH = "~~"
TRAC_SUBSCRIPT_PREFIX = "_"
TRAC_SUPERSCRIPT = "^"
TRAC_EMPHASIS = "''"
TRAC_STRONG = "'''"
TRAC_INLINE_CODE = "`"
TRAC_LINE_BREAK = "[[BR]]"
TRAC_THEMATIC_BREAK = "----"
TRAC_BLOCK_QUOTE_PREFIX = "> "

# Cell borders
TRAC_COLGROUP_OPENER = "|| "
TRAC_CELL_SEPARATOR = " "
TRAC_CELL_CLOSER = " ||"

# Table borders used by synthesized lines (rules and blank header rows)
TRAC_TABLE_LEFT_BORDER = "||"
TRAC_TABLE_RIGHT_BORDER = "||"
TRAC_COLUMN_SEPARATOR = "||"
TRAC_RULE_CHAR = "-"

# =============================================================================
# Table Conventions
# =============================================================================

# Dash runs and blank header cells never shrink below this
MIN_RULE_WIDTH = 3

# Only the second row of a table may be rendered as a rule
RULE_ROW_INDEX = 1

# Markers allowed in the first cell of a table with a special column
SPECIAL_COLUMN_MARKERS = frozenset({"#", "!", "$", "*", "_", "^", "/"})

# First-cell markers that turn a row into a non-exported special row
SPECIAL_ROW_MARKERS = frozenset({"/", "!", "^", "_", "$"})

COLGROUP_ROW_MARKER = "/"
COLGROUP_START_MARKERS = frozenset({"<", "<>"})
COLGROUP_END_MARKERS = frozenset({">", "<>"})

# Width/alignment cookies such as <10>, <l>, <r8>
COOKIE_PATTERN = r"<[lrc]?(\d+)?>"

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_PRESERVE_BREAKS = False
DEFAULT_LANGUAGE_ALIASES: dict[str, str] = {"f90": "fortran"}

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_TOOL_SECTION = "all2trac"
CONFIG_FILENAMES = [".all2trac.toml", ".all2trac.yaml", ".all2trac.yml", ".all2trac.json"]
CONFIG_ENV_VAR = "ALL2TRAC_CONFIG"

# =============================================================================
# CLI Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
