"""Load the state snapshot written by a previous generation run.

The snapshot path is resolved relative to the schema file's directory.  The
low-level read (:func:`resolve_and_load_file`) treats a missing, unreadable
or malformed file as "no content"; this loader turns "no content" into an
:class:`EmptyStateError` and wraps anything the read itself raises in a
:class:`LoadError`.  It never substitutes a default snapshot.
"""

from __future__ import annotations

import logging
from typing import Any

from schematic.state.files import resolve_and_load_file, resolve_file_path

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class LoadError(Exception):
    """Raised when the previous state file cannot be loaded."""


class EmptyStateError(LoadError):
    """Raised when the state file read succeeded but produced no content."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _is_empty(state: Any) -> bool:
    """Return True for decoded values that do not count as content.

    ``null``, ``false``, ``0`` and ``""`` are empty; ``{}`` and ``[]`` are not.
    """
    if isinstance(state, (dict, list)):
        return False
    return not state


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_state(state_file_path: str, schema_path: str) -> Any:
    """Load and decode the previous state file.

    Parameters
    ----------
    state_file_path:
        Path to the state file, relative to the schema file's directory or
        absolute.
    schema_path:
        Path to the schema file.

    Returns
    -------
    Any
        The decoded JSON document, unvalidated.  Use
        :func:`schematic.state.serializer.deserialize_state` for a typed
        :class:`StateSnapshot`.

    Raises
    ------
    LoadError
        If either path is empty, or if reading the file raised.
    EmptyStateError
        If the file yielded no content (missing, unreadable, malformed, or a
        falsy JSON scalar such as ``null``, ``false``, ``0`` or ``""``).
    """
    if not state_file_path:
        raise LoadError("State file path is required")

    if not schema_path:
        raise LoadError("Schema path is required")

    try:
        resolved = resolve_file_path(schema_path, state_file_path)
        logger.info("Loading existing state from: %s", resolved)
        state = resolve_and_load_file(schema_path, state_file_path, parse="json")
    except Exception as exc:
        raise LoadError(f"There was an error loading the state file: {state_file_path}. {exc}") from exc

    if _is_empty(state):
        raise EmptyStateError(f"State file is empty: {state_file_path}")

    logger.info("Previous state loaded successfully")
    return state
