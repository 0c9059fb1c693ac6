"""State snapshot models.

A snapshot records every validated annotation extracted from one generation
run together with a digest of the model document it came from.
``generated_at`` is stored for persistence and human inspection but is
**not** part of the snapshot's identity: two snapshots of the same document
share ``schema_hash`` and ``indexes``.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from schematic.models.annotation import IndexAnnotation


def utc_timestamp() -> str:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ExtractionResult(BaseModel):
    """Validated annotations partitioned by kind."""

    model_config = ConfigDict(frozen=True)

    indexes: list[IndexAnnotation] = Field(
        default_factory=list,
        description="Validated ``index`` annotations in document order.",
    )


class StateSnapshot(BaseModel):
    """Immutable, content-hashed record of one generation run.

    Serialises with camelCase keys (``generatedAt``, ``schemaHash``) so the
    on-disk format matches what the host toolchain reads and writes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    generated_at: str = Field(
        default_factory=utc_timestamp,
        alias="generatedAt",
        description="ISO-8601 wall-clock time the snapshot was built (not part of identity).",
    )
    schema_hash: str = Field(
        ...,
        alias="schemaHash",
        pattern=r"^[0-9a-f]{64}$",
        description="SHA-256 hex digest of the serialized model document.",
    )
    indexes: list[IndexAnnotation] = Field(
        default_factory=list,
        description="Validated ``index`` annotations.",
    )
