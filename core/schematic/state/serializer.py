"""Deterministic serialization and validation for state snapshots.

Ensures that a :class:`StateSnapshot` round-trips through JSON without
information loss and that the serialized form is byte-identical for
identical snapshots (sorted keys, stable indentation, absent optional keys
omitted).
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from schematic.models.state import StateSnapshot


def state_to_dict(snapshot: StateSnapshot) -> dict[str, Any]:
    """Return the on-disk mapping for *snapshot* (camelCase keys)."""
    return snapshot.model_dump(mode="json", by_alias=True, exclude_none=True)


def serialize_state(snapshot: StateSnapshot) -> str:
    """Serialize a snapshot to a deterministic JSON string.

    Parameters
    ----------
    snapshot:
        The snapshot to serialize.

    Returns
    -------
    str
        A pretty-printed JSON string with sorted keys and a trailing newline.
    """
    return json.dumps(state_to_dict(snapshot), indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def deserialize_state(data: str | Mapping[str, Any]) -> StateSnapshot:
    """Validate a previously written snapshot.

    Parameters
    ----------
    data:
        The JSON text of a state file, or the value :func:`load_state`
        returned for it.

    Raises
    ------
    pydantic.ValidationError
        If the data does not conform to the snapshot schema.
    """
    if isinstance(data, str):
        return StateSnapshot.model_validate_json(data)
    return StateSnapshot.model_validate(data)


def validate_state_schema(data: str | Mapping[str, Any]) -> list[str]:
    """Validate snapshot data without raising.

    Returns
    -------
    list[str]
        Human-readable validation errors; empty when the data is a valid
        snapshot.
    """
    try:
        deserialize_state(data)
    except ValidationError as exc:
        return [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" if err.get("loc") else err["msg"]
            for err in exc.errors()
        ]
    except (ValueError, TypeError) as exc:
        return [f"Invalid JSON: {exc}"]

    return []
