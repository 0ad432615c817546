"""
Locate, read and create ``linkunwrap`` settings files.

Settings are looked up in this order:

1. an explicit path given by the caller
2. ``settings.toml`` or ``settings.json`` in the working directory
3. the per-user ``settings.toml`` (see :data:`SETTING_PATH`)
"""

from __future__ import annotations

__all__ = ["find_config_file", "init_config", "load_config"]

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from linkunwrap.infra.paths import DEFAULT_CONFIG_FILE, SETTING_PATH

logger = logging.getLogger(__name__)

LOCAL_FILENAMES = ("settings.toml", "settings.json")


def find_config_file(config_path: str | Path | None = None) -> Path | None:
    """Return the settings file that applies, or ``None`` if there is none.

    Args:
        config_path: Explicit settings file. When given, no other location
            is considered.

    Raises:
        FileNotFoundError: If ``config_path`` is given but does not exist.
    """
    if config_path:
        path = Path(config_path).expanduser().resolve()
        if not path.is_file():
            raise FileNotFoundError(f"Settings file not found: {path}")
        return path

    for name in LOCAL_FILENAMES:
        local_path = Path.cwd() / name
        if local_path.is_file():
            logger.debug("Using local settings: %s", local_path)
            return local_path.resolve()

    if SETTING_PATH.is_file():
        return SETTING_PATH
    return None


def _parse_settings(path: Path) -> dict[str, Any]:
    """Parse a ``.toml`` or ``.json`` settings file into a table.

    Raises:
        ValueError: If the extension is unsupported, the content does not
            parse, or the top level is not a table/object.
    """
    ext = path.suffix.lower()

    if ext == ".toml":
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e
    elif ext == ".json":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        raise ValueError(f"Unsupported settings file extension: {ext}")

    if not isinstance(data, dict):
        raise ValueError(f"Settings root must be a table, got {type(data)} in {path}")
    return data


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load the settings that apply to this run.

    Args:
        config_path: Optional explicit settings file.

    Returns:
        The parsed settings; an empty mapping when no settings file exists
        and none was requested.

    Raises:
        FileNotFoundError: If ``config_path`` is given but does not exist.
        ValueError: If the settings file cannot be parsed.
    """
    path = find_config_file(config_path)
    if path is None:
        logger.debug("No settings file found, using defaults")
        return {}

    logger.debug("Loading settings from: %s", path)
    return _parse_settings(path)


def init_config(
    target: str | Path | None = None, *, overwrite: bool = False
) -> Path:
    """Write the bundled sample settings to ``target``.

    Args:
        target: Destination file; the per-user settings file when omitted.
        overwrite: Replace an existing file instead of refusing.

    Returns:
        The path written.

    Raises:
        FileExistsError: If ``target`` exists and ``overwrite`` is false.
    """
    path = Path(target).expanduser() if target else SETTING_PATH
    if path.exists() and not overwrite:
        raise FileExistsError(f"Settings file already exists: {path}")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(DEFAULT_CONFIG_FILE.read_bytes())
    logger.info("Wrote sample settings to %s", path)
    return path
