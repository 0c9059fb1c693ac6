"""Content digest for model documents.

The digest is a SHA-256 hex string over the UTF-8 serialization of the
document.  Non-string values are serialized the way the host toolchain does
it: compact JSON, keys in insertion order, non-ASCII characters kept as-is.
A string is hashed unchanged, so ``compute_hash(doc)`` equals
``compute_hash(to_json_text(doc))``.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

from pydantic import BaseModel


def to_json_text(value: Any) -> str:
    """Serialize *value* to compact JSON text."""
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def compute_hash(value: Any) -> str:
    """Return the 64-character lowercase SHA-256 hex digest of *value*."""
    text = value if isinstance(value, str) else to_json_text(value)
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
