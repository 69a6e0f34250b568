#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for all2trac.

Renders a document tree, given as JSON, to Trac wiki markup.

Basic usage::

    $ all2trac document.json
    $ all2trac document.json -o document.wiki
    $ cat document.json | all2trac -

Rendering options::

    $ all2trac document.json --preserve-breaks --language-alias sh=bash

Use rich formatting::

    $ all2trac document.json --rich

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from all2trac import __version__
from all2trac.ast.nodes import Document
from all2trac.ast.serialization import json_to_ast
from all2trac.config import load_config_with_priority, options_from_config
from all2trac.constants import (
    CONFIG_ENV_VAR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from all2trac.exceptions import All2TracError, OutputWriteError, ParsingError, RenderingError, ValidationError
from all2trac.logging_utils import configure_logging
from all2trac.options.trac import TracRendererOptions
from all2trac.renderers.trac import TracRenderer

logger = logging.getLogger(__name__)


def _parse_language_alias(value: str) -> tuple[str, str]:
    """Parse a NAME=CANONICAL language alias argument."""
    name, sep, canonical = value.partition("=")
    if not sep or not name.strip() or not canonical.strip():
        raise argparse.ArgumentTypeError(f"Language alias must look like NAME=CANONICAL, got '{value}'")
    return name.strip(), canonical.strip()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the all2trac command."""
    parser = argparse.ArgumentParser(
        prog="all2trac",
        description="Render a JSON document tree to Trac wiki markup.",
    )
    parser.add_argument("input", metavar="INPUT", help="JSON document tree file, or '-' to read from stdin")
    parser.add_argument("-o", "--out", dest="out", help="Output file (default: stdout)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    config_group = parser.add_mutually_exclusive_group()
    config_group.add_argument("--config", help=f"Configuration file path (default: discovered, or ${CONFIG_ENV_VAR})")
    config_group.add_argument(
        "--no-config", action="store_true", help="Ignore configuration files and the environment variable"
    )

    render_group = parser.add_argument_group("Trac rendering options")
    render_group.add_argument(
        "--preserve-breaks",
        action="store_true",
        default=None,
        help="Keep line breaks inside paragraphs instead of reflowing them",
    )
    render_group.add_argument(
        "--language-alias",
        action="append",
        type=_parse_language_alias,
        default=[],
        metavar="NAME=CANONICAL",
        help="Map a code block language to a Trac processor name (repeatable)",
    )

    output_group = parser.add_argument_group("Output options")
    output_group.add_argument("--rich", action="store_true", help="Show the output in a rich panel")

    logging_group = parser.add_argument_group("Logging options")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Write log messages to this file as well")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (OutputWriteError, OSError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(parsed_args: argparse.Namespace) -> TracRendererOptions:
    """Build renderer options from configuration files and command-line flags.

    Command-line flags override values from the configuration file.

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file cannot be loaded
    ValidationError
        If the configuration holds unknown or invalid options

    """
    config = {}
    if not parsed_args.no_config:
        config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
    options = options_from_config(config)

    if parsed_args.preserve_breaks is not None:
        options = options.create_updated(preserve_breaks=parsed_args.preserve_breaks)
    if parsed_args.language_alias:
        options = options.create_updated(
            language_aliases={**options.language_aliases, **dict(parsed_args.language_alias)}
        )
    return options


def load_document(source: str) -> Document:
    """Load a document tree from a JSON file, or stdin when ``source`` is ``-``.

    A root node other than Document is wrapped in one.

    Raises
    ------
    OSError
        If the input file cannot be read
    ParsingError
        If the input is not a valid document tree

    """
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")

    node = json_to_ast(text)
    if isinstance(node, Document):
        return node
    logger.debug("Wrapping %s root node in a Document", type(node).__name__)
    return Document(children=[node])


def _print_rich(content: str, title: str) -> None:
    from rich.console import Console
    from rich.panel import Panel
    from rich.text import Text

    Console().print(Panel(Text(content.rstrip("\n")), title=title, expand=False))


def main(args: Optional[list[str]] = None) -> int:
    """Execute the all2trac command line."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = build_options(parsed_args)
        document = load_document(parsed_args.input)
        renderer = TracRenderer(options)
        if parsed_args.out:
            renderer.render(document, parsed_args.out)
            logger.info("Wrote %s", parsed_args.out)
        elif parsed_args.rich:
            _print_rich(renderer.render_to_string(document), title=parsed_args.input)
        else:
            renderer.render(document, sys.stdout)
    except (All2TracError, argparse.ArgumentTypeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
