"""Soft-fail file primitives used by the state loader.

These helpers never raise for a missing, unreadable or malformed file; they
return ``None`` and leave it to the caller to decide whether absence is an
error.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Literal

logger = logging.getLogger(__name__)


def resolve_file_path(base_path: str | Path, file_path: str | Path) -> Path:
    """Resolve *file_path* against the directory containing *base_path*.

    Relative paths are joined to ``base_path``'s parent directory; absolute
    paths are returned unchanged.  The result is always absolute.
    """
    base_dir = Path(base_path).parent
    return Path(os.path.abspath(base_dir / file_path))


def resolve_and_load_file(
    base_path: str | Path,
    file_path: str | Path,
    parse: Literal["json"] | None = None,
) -> Any:
    """Read *file_path* (resolved against *base_path*) and optionally parse it.

    Parameters
    ----------
    base_path:
        The file whose directory anchors relative paths (e.g. the schema file).
    file_path:
        The file to read, relative or absolute.
    parse:
        ``"json"`` to return the decoded JSON value instead of the raw text.

    Returns
    -------
    Any
        The text, the decoded JSON value, or ``None`` if the file cannot be
        read or decoded.
    """
    resolved = resolve_file_path(base_path, file_path)
    try:
        contents = resolved.read_text(encoding="utf-8")
        if parse == "json":
            return json.loads(contents)
    except (OSError, ValueError) as exc:
        logger.debug("Could not load '%s': %s", resolved, exc)
        return None
    return contents
