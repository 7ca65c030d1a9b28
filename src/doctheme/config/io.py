# topmark:header:start
#
#   project      : DocTheme
#   file         : io.py
#   file_relpath : src/doctheme/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render DocTheme TOML configuration.

Configuration lives either in ``doctheme.toml`` (top-level ``[display]`` and
``[groups]`` tables) or in ``pyproject.toml`` under ``[tool.doctheme]``.

Parsing and rendering are done with `tomlkit`; loaders return plain ``dict``
structures that can be merged straight into a documentation context.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) ``pyproject.toml`` in the discovery directory
    3) ``doctheme.toml`` in the discovery directory
    4) Extra config files passed explicitly (in the order provided)
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from doctheme.config.defaults import load_defaults_dict
from doctheme.config.keys import Toml
from doctheme.config.logging import get_logger
from doctheme.config.merge import deep_merge
from doctheme.constants import DOCTHEME_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from collections.abc import Iterable

    from doctheme.config.logging import DocthemeLogger

TomlTable = dict[str, Any]

logger: DocthemeLogger = get_logger(__name__)

# Only these top-level sections are meaningful to the theme.
_THEME_SECTIONS: tuple[str, ...] = (Toml.SECTION_DISPLAY, Toml.SECTION_GROUPS)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def load_theme_config(path: Path) -> TomlTable | None:
    """Read the theme configuration from a single TOML file.

    ``pyproject.toml`` files contribute their ``[tool.doctheme]`` table; any
    other file is read at the top level. Unknown sections are dropped with a
    warning.

    Args:
        path (Path): Path to ``doctheme.toml``, ``pyproject.toml`` or any TOML file.

    Returns:
        TomlTable | None: The ``display``/``groups`` tables found in the file, or
            ``None`` if a ``pyproject.toml`` has no ``[tool.doctheme]`` table.
    """
    logger.debug("Loading theme config from %s", path)
    data: TomlTable = load_toml_dict(path)

    if path.name == PYPROJECT_TOML_NAME:
        section: Any = data
        for part in PYPROJECT_TOOL_SECTION.split("."):
            section = section.get(part, {}) if isinstance(section, dict) else {}
        if not section:
            logger.debug("[%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
            return None
        data = cast("TomlTable", section)

    config: TomlTable = {}
    for key, value in data.items():
        if key not in _THEME_SECTIONS:
            logger.warning("Ignoring unknown config key '%s' in %s", key, path)
            continue
        if not isinstance(value, dict):
            logger.warning("Config key '%s' in %s must be a table; ignored", key, path)
            continue
        config[key] = value
    return config


def discover_config_files(start: Path) -> list[Path]:
    """Return the config files present in ``start``.

    Within a directory, ``pyproject.toml`` comes first and ``doctheme.toml``
    second, so a nearest-last-wins merge gives ``doctheme.toml`` precedence.

    Args:
        start (Path): Discovery directory. If it is a file, its parent is used.

    Returns:
        list[Path]: Existing config files in merge order.
    """
    anchor: Path = start.parent if start.is_file() else start
    found: list[Path] = []
    for name in (PYPROJECT_TOML_NAME, DOCTHEME_TOML_NAME):
        candidate: Path = anchor / name
        if candidate.is_file():
            found.append(candidate)
    return found


def load_merged_config(
    *,
    anchor: Path | None = None,
    extra_config_files: Iterable[Path] | None = None,
    no_config: bool = False,
) -> TomlTable:
    """Discover and merge configuration layers on top of the built-in defaults.

    Args:
        anchor (Path | None): Discovery directory (CWD if None).
        extra_config_files (Iterable[Path] | None): Explicit config files merged
            after discovery, in the given order.
        no_config (bool): If True, skip discovery (explicit files still apply).

    Returns:
        TomlTable: The merged ``display``/``groups`` configuration.
    """
    merged: TomlTable = load_defaults_dict()

    paths: list[Path] = []
    if not no_config:
        paths.extend(discover_config_files(anchor or Path.cwd()))
    paths.extend(Path(p) for p in extra_config_files or ())

    for path in paths:
        layer: TomlTable | None = load_theme_config(path)
        if layer is not None:
            merged = deep_merge(merged, layer)

    logger.debug("Merged theme config from %d file(s): %s", len(paths), merged)
    return merged


def render_defaults_toml(*, for_pyproject: bool = False) -> str:
    """Render the built-in defaults as TOML text.

    Args:
        for_pyproject (bool): If True, nest the output under ``[tool.doctheme]``.

    Returns:
        str: TOML document text.
    """
    defaults: TomlTable = load_defaults_dict()
    doc: tomlkit.TOMLDocument = tomlkit.document()
    if for_pyproject:
        tool = tomlkit.table(is_super_table=True)
        tool.add("doctheme", defaults)
        doc.add("tool", tool)
    else:
        for key, value in defaults.items():
            doc.add(key, value)
    return tomlkit.dumps(doc)
