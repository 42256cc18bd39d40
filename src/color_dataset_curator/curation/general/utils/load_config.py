# src/color_dataset_curator/curation/general/utils/load_config.py

"""Find the package <data/> directory and load validated JSON tables from it.

The kernel lexicon (data/semantic_kernels.json) is the table loaded this way. A
`.json5` file name is read through the optional json5 package, so hand-edited
lexicons may carry comments and trailing commas.

Lookup: explicit base_dir > CURATOR_DATA_DIR / DATA_DIR env override > the
nearest 'data' directory above this module.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

__all__ = [
    "DATA_DIR_ENV_VARS",
    "data_dir",
    "load_config",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
]

DATA_DIR_ENV_VARS: tuple[str, ...] = ("CURATOR_DATA_DIR", "DATA_DIR")

log = logging.getLogger(__name__)


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found above the package."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when a table is missing or its path escapes the data dir."""


class ConfigParseError(ValueError):
    """Raise when a table is not a JSON object or its validator rejects it."""


# ── Data directory ───────────────────────────────────────────────────────────
def data_dir(base_dir: Path | None = None) -> Path:
    """Resolve the directory tables are read from."""
    if base_dir is not None:
        return base_dir.resolve()
    for var in DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(os.path.expanduser(value)).resolve()
    here = Path(__file__).resolve()
    tried = [p / "data" for p in here.parents]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory found. Tried:\n  " + "\n  ".join(map(str, tried)))


def _parser_for(path: Path) -> Any:
    if path.suffix != ".json5":
        return json
    try:
        import json5
    except ImportError as e:
        raise ConfigParseError(f"{path.name}: reading .json5 needs the json5 extra") from e
    return json5


# ── Loading ──────────────────────────────────────────────────────────────────
def load_config(
    file: str | os.PathLike[str],
    *,
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    base_dir: Path | None = None,
) -> dict[str, Any]:
    """
    Does: Read <data>/<file> (".json" is appended when no suffix is given) as a JSON
          object and pass it through `validator`.
    Returns: The validated dict.
    Raises: ConfigFileNotFound, ConfigParseError (bad JSON, non-object top level,
            validator rejection).
    """
    root = data_dir(base_dir)
    name = os.fspath(file)
    if not name.endswith((".json", ".json5")):
        name = f"{name}.json"
    path = (root / name).resolve()
    if not path.is_relative_to(root):
        raise ConfigFileNotFound(f"Refusing to read outside the data dir: {path} (base={root})")
    if not path.is_file():
        raise ConfigFileNotFound(f"Data file not found: {path}")

    parser = _parser_for(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = parser.load(f)
    except ValueError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigParseError(f"{path.name}: expected an object, got {type(data).__name__}")
    if validator is not None:
        try:
            data = validator(data)
        except (ValueError, TypeError) as e:
            raise ConfigParseError(f"{path.name}: {e}") from e

    log.debug("loaded %s (%d keys)", path.name, len(data))
    return data
