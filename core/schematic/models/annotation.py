"""Validated annotation records.

Each annotation kind has one closed-shape record model.  Records reject any
key their contract does not declare and are immutable once constructed.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

# Untyped ``{"kind": ..., **args}`` record produced by the annotation parser.
RawAnnotation = dict[str, Any]


class IndexType(str, Enum):
    """Index flavours an ``index`` annotation may request."""

    ID = "id"
    UNIQUE = "unique"
    NORMAL = "normal"


class IndexAnnotation(BaseModel):
    """An ``@<prefix>.index(...)`` annotation attached to a model.

    ``where`` is a raw SQL predicate for partial indexes; it is carried
    through uninterpreted.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, use_enum_values=True)

    kind: Literal["index"] = Field(
        ...,
        description="Annotation discriminator.",
    )
    model: StrictStr = Field(
        ...,
        min_length=1,
        description="Name of the model whose documentation carries the annotation.",
    )
    name: StrictStr | None = Field(
        default=None,
        description="Explicit index name; generated downstream when omitted.",
    )
    fields: list[StrictStr] = Field(
        ...,
        min_length=1,
        strict=True,
        description="Indexed columns, in declaration order.",
    )
    type: IndexType | None = Field(
        default=None,
        description="Index flavour (id, unique or normal).",
    )
    where: StrictStr | None = Field(
        default=None,
        description="Partial-index predicate, passed through as written.",
    )

    # Optional keys may be omitted but not set to null.  Defaults are not
    # validated, so an absent key never reaches this check.
    @field_validator("name", "type", "where", mode="before")
    @classmethod
    def reject_explicit_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Value may be omitted but must not be null")
        return v

    @field_validator("fields")
    @classmethod
    def reject_duplicate_fields(cls, v: list[str]) -> list[str]:
        seen: set[str] = set()
        for field in v:
            if field in seen:
                raise ValueError(f"Duplicate field '{field}'")
            seen.add(field)
        return v


# Closed set of validated record variants.  Extend alongside the registry.
AnnotationRecord = IndexAnnotation
