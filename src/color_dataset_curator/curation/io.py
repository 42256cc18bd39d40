"""
io.py.

Does: Read raw datasets from JSON (or JSON5) files and write record lists back as JSON
      arrays. The only module of the curation stack that touches the filesystem.
Raises: DatasetIOError for missing files, undecodable content and write failures.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from color_dataset_curator.curation.errors import DatasetIOError

log = logging.getLogger(__name__)

__all__ = ["load_dataset", "save_dataset", "save_json"]


def load_dataset(
    path: str | os.PathLike[str],
    *,
    allow_comments: bool = False,
    encoding: str = "utf-8",
) -> Any:
    """
    Does: Deserialize one dataset file. `allow_comments=True` parses JSON5 (comments,
          trailing commas) through the optional json5 package.
    Returns: The raw value, shape unknown.
    """
    p = Path(path)
    if not p.is_file():
        raise DatasetIOError(f"Dataset not found: {p}")
    loader: Any = json
    if allow_comments:
        try:
            import json5 as loader
        except ImportError as e:
            raise DatasetIOError("json5 requested (allow_comments=True) but not installed") from e
    try:
        with p.open("r", encoding=encoding) as f:
            data = loader.load(f)
    except (ValueError, UnicodeDecodeError) as e:
        raise DatasetIOError(f"Invalid JSON in {p}: {e}") from e
    except OSError as e:
        raise DatasetIOError(f"Cannot read {p}: {e}") from e
    log.debug("loaded %s (%s)", p.name, type(data).__name__)
    return data


def save_json(data: Any, path: str | os.PathLike[str], *, minify: bool = False) -> Path:
    """Does: Write any JSON-serializable value, creating parent directories."""
    p = Path(path)
    try:
        if p.parent != Path("."):
            p.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(data, ensure_ascii=False, separators=(",", ":")) if minify else json.dumps(
            data, ensure_ascii=False, indent=2
        )
        p.write_text(text + "\n", encoding="utf-8")
    except (OSError, TypeError) as e:
        raise DatasetIOError(f"Cannot write {p}: {e}") from e
    return p


def save_dataset(
    records: Sequence[Mapping[str, Any]],
    path: str | os.PathLike[str],
    *,
    minify: bool = False,
) -> Path:
    """Does: Write records as a JSON array (tuples become lists)."""
    p = save_json([dict(r) for r in records], path, minify=minify)
    log.info("saved %d records → %s", len(records), p)
    return p
