#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Finding, reading and applying all2trac configuration files.

A configuration file holds renderer option names at its root::

    # .all2trac.toml
    preserve_breaks = true

    [language_aliases]
    f90 = "fortran"
    sh = "bash"

The same keys may live in a ``[tool.all2trac]`` table of pyproject.toml,
or in an equivalent YAML or JSON document. Loading problems are reported
as ``argparse.ArgumentTypeError`` so the CLI can surface them like any
other bad argument.
"""

import argparse
import json
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Callable, Dict, Optional

import yaml

from all2trac.constants import CONFIG_FILENAMES, CONFIG_TOOL_SECTION
from all2trac.exceptions import ValidationError
from all2trac.options.trac import TracRendererOptions

# suffix -> (format label, parser over the raw file text, decode error)
_FORMATS: Dict[str, tuple[str, Callable[[str], Any], type[Exception]]] = {
    ".toml": ("TOML", tomllib.loads, tomllib.TOMLDecodeError),
    ".yaml": ("YAML", yaml.safe_load, yaml.YAMLError),
    ".yml": ("YAML", yaml.safe_load, yaml.YAMLError),
    ".json": ("JSON", json.loads, json.JSONDecodeError),
}


def _read_mapping(config_path: Path, suffix: str) -> Dict[str, Any]:
    label, parse, decode_error = _FORMATS[suffix]
    try:
        data = parse(config_path.read_text(encoding="utf-8"))
    except decode_error as e:
        raise argparse.ArgumentTypeError(f"{config_path} is not valid {label}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Cannot read {label} config {config_path}: {e}") from e

    # An empty YAML document parses to None
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError(
            f"{label} config {config_path} must hold a mapping of options, got {type(data).__name__}"
        )
    return data


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.all2trac]`` table of a pyproject.toml, or ``{}``."""
    project = _read_mapping(pyproject_path, ".toml")
    section = project.get("tool", {}).get(CONFIG_TOOL_SECTION, {})
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{CONFIG_TOOL_SECTION}] in {pyproject_path} must be a table, got {type(section).__name__}"
        )
    return section


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Walk from ``start_dir`` (default: cwd) up to the root looking for a config.

    Within one directory the dedicated ``.all2trac.*`` files win over a
    pyproject.toml; a pyproject.toml only counts when it has a non-empty
    ``[tool.all2trac]`` table.

    Returns
    -------
    Path or None
        The nearest configuration file

    """
    directory = (start_dir or Path.cwd()).resolve()

    for candidate_dir in (directory, *directory.parents):
        for filename in CONFIG_FILENAMES:
            candidate = candidate_dir / filename
            if candidate.is_file():
                return candidate

        pyproject = candidate_dir / "pyproject.toml"
        if not pyproject.is_file():
            continue
        try:
            if _load_pyproject_section(pyproject):
                return pyproject
        except argparse.ArgumentTypeError:
            # someone else's broken pyproject.toml; keep looking upward
            continue

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Locate the configuration that applies when none is named explicitly.

    The parent-directory walk comes first, then the dedicated files in the
    user's home directory.
    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    return next((home / name for name in CONFIG_FILENAMES if (home / name).is_file()), None)


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Read one configuration file into a dictionary.

    The format follows the file name: ``pyproject.toml`` is read for its
    ``[tool.all2trac]`` table, otherwise ``.toml``, ``.yaml``/``.yml`` and
    ``.json`` select the parser.

    Raises
    ------
    argparse.ArgumentTypeError
        If the path is missing, unreadable, malformed or of an unknown format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    suffix = config_path.suffix.lower()
    if suffix not in _FORMATS:
        raise argparse.ArgumentTypeError(
            f"Unsupported config file format '{suffix}' for {config_path}; use .toml, .yaml, .yml or .json"
        )
    return _read_mapping(config_path, suffix)


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load the configuration that wins among the possible sources.

    ``explicit_path`` (the ``--config`` flag) beats ``env_var_path`` (the
    ``ALL2TRAC_CONFIG`` variable), which beats discovery. No source at all
    gives an empty dictionary.

    Raises
    ------
    argparse.ArgumentTypeError
        If the selected file cannot be loaded

    """
    chosen = explicit_path or env_var_path or discover_config_file()
    if not chosen:
        return {}
    return load_config_file(chosen)


def options_from_config(
    config: Dict[str, Any], base: Optional[TracRendererOptions] = None
) -> TracRendererOptions:
    """Build renderer options from a loaded configuration dictionary.

    Parameters
    ----------
    config : dict
        Configuration values keyed by option name
    base : TracRendererOptions, optional
        Options to update, defaults to ``TracRendererOptions()``

    Returns
    -------
    TracRendererOptions
        Options with the configured values applied

    Raises
    ------
    ValidationError
        If the configuration names an unknown option or has an invalid value

    Examples
    --------
    >>> options = options_from_config({"preserve_breaks": True})
    >>> options.preserve_breaks
    True

    """
    base = base or TracRendererOptions()
    known = {f.name for f in fields(TracRendererOptions)}
    for key, value in config.items():
        if key not in known:
            raise ValidationError(
                f"Unknown configuration option '{key}'. Valid options: {', '.join(sorted(known))}",
                parameter_name=key,
                parameter_value=value,
            )

    try:
        return base.create_updated(**config)
    except ValueError as e:
        raise ValidationError(f"Invalid configuration: {e}", original_error=e) from e


__all__ = [
    "find_config_in_parents",
    "discover_config_file",
    "load_config_file",
    "load_config_with_priority",
    "options_from_config",
]
