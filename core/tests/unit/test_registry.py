"""Unit tests for schematic.schemas.registry and the index record contract."""

from __future__ import annotations

from typing import Literal

import pytest
from pydantic import BaseModel, ConfigDict, ValidationError

from schematic.models.annotation import IndexAnnotation, IndexType
from schematic.schemas.registry import (
    DEFAULT_REGISTRY,
    AnnotationRegistry,
    AnnotationValidationError,
    UnknownKindError,
    validate_annotation,
    validate_index,
)


def _raw(**overrides: object) -> dict[str, object]:
    raw: dict[str, object] = {"kind": "index", "model": "Post", "fields": ["authorId"]}
    raw.update(overrides)
    return raw


# ---------------------------------------------------------------------------
# validate_index -- accepted records
# ---------------------------------------------------------------------------


class TestValidateIndexAccepts:
    def test_minimal_record(self):
        record = validate_index(_raw())
        assert isinstance(record, IndexAnnotation)
        assert record.model_dump(exclude_none=True) == {
            "kind": "index",
            "model": "Post",
            "fields": ["authorId"],
        }
        assert record.name is None
        assert record.type is None
        assert record.where is None

    def test_full_record(self):
        record = validate_index(
            _raw(
                name="post_author_idx",
                fields=["authorId", "createdAt"],
                type="unique",
                where="deleted_at IS NULL",
            )
        )
        assert record.name == "post_author_idx"
        assert record.fields == ["authorId", "createdAt"]
        assert record.type == "unique"
        assert record.type == IndexType.UNIQUE
        assert record.where == "deleted_at IS NULL"

    @pytest.mark.parametrize("index_type", ["id", "unique", "normal"])
    def test_every_index_type(self, index_type: str):
        assert validate_index(_raw(type=index_type)).type == index_type

    def test_field_order_is_kept(self):
        assert validate_index(_raw(fields=["b", "a", "c"])).fields == ["b", "a", "c"]

    def test_record_is_immutable(self):
        record = validate_index(_raw())
        with pytest.raises(ValidationError):
            record.name = "other"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# validate_index -- rejected records
# ---------------------------------------------------------------------------


class TestValidateIndexRejects:
    def test_missing_fields(self):
        raw = _raw()
        del raw["fields"]
        with pytest.raises(AnnotationValidationError) as exc_info:
            validate_index(raw)
        assert exc_info.value.field == "fields"
        assert exc_info.value.kind == "index"

    def test_empty_fields(self):
        with pytest.raises(AnnotationValidationError) as exc_info:
            validate_index(_raw(fields=[]))
        assert exc_info.value.field == "fields"

    def test_fields_not_a_list(self):
        with pytest.raises(AnnotationValidationError) as exc_info:
            validate_index(_raw(fields="authorId"))
        assert exc_info.value.field == "fields"

    def test_non_string_field_entry(self):
        with pytest.raises(AnnotationValidationError) as exc_info:
            validate_index(_raw(fields=["a", 1]))
        assert exc_info.value.field == "fields.1"

    def test_duplicate_fields(self):
        with pytest.raises(AnnotationValidationError, match="Duplicate field 'a'") as exc_info:
            validate_index(_raw(fields=["a", "b", "a"]))
        assert exc_info.value.field == "fields"

    def test_unknown_index_type(self):
        with pytest.raises(AnnotationValidationError) as exc_info:
            validate_index(_raw(type="btree"))
        assert exc_info.value.field == "type"

    def test_non_string_name(self):
        with pytest.raises(AnnotationValidationError) as exc_info:
            validate_index(_raw(name=5))
        assert exc_info.value.field == "name"

    def test_non_string_where(self):
        with pytest.raises(AnnotationValidationError) as exc_info:
            validate_index(_raw(where=True))
        assert exc_info.value.field == "where"

    @pytest.mark.parametrize("key", ["name", "type", "where"])
    def test_explicit_null_optional_value(self, key: str):
        with pytest.raises(AnnotationValidationError, match="must not be null") as exc_info:
            validate_annotation(_raw(**{key: None}))
        assert exc_info.value.field == key

    def test_extra_key_is_rejected(self):
        with pytest.raises(AnnotationValidationError) as exc_info:
            validate_index(_raw(columns=["email"]))
        assert exc_info.value.field == "columns"
        assert "Extra inputs are not permitted" in exc_info.value.constraint

    def test_error_message_names_model_and_field(self):
        with pytest.raises(AnnotationValidationError, match="Invalid 'index' annotation on model 'Post': field 'type'"):
            validate_index(_raw(type="hash"))

    def test_pydantic_error_is_chained(self):
        with pytest.raises(AnnotationValidationError) as exc_info:
            validate_index(_raw(fields=[]))
        assert isinstance(exc_info.value.__cause__, ValidationError)


# ---------------------------------------------------------------------------
# Registry lookup
# ---------------------------------------------------------------------------


class CheckAnnotation(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["check"]
    model: str
    expression: str


class TestAnnotationRegistry:
    def test_default_registry_has_only_index(self):
        assert DEFAULT_REGISTRY.kinds() == ["index"]
        assert len(DEFAULT_REGISTRY) == 1

    def test_lookup_is_case_sensitive(self):
        assert "index" in DEFAULT_REGISTRY
        assert "Index" not in DEFAULT_REGISTRY

    def test_validate_dispatches_on_kind(self):
        record = validate_annotation(_raw())
        assert isinstance(record, IndexAnnotation)

    def test_unknown_kind_raises(self):
        with pytest.raises(UnknownKindError, match="partialIndex") as exc_info:
            validate_annotation({"kind": "partialIndex", "model": "User", "columns": ["email"]})
        assert exc_info.value.kind == "partialIndex"

    def test_get_unknown_kind_raises(self):
        with pytest.raises(UnknownKindError):
            DEFAULT_REGISTRY.get("check")

    def test_missing_kind_raises_unknown_kind(self):
        with pytest.raises(UnknownKindError):
            validate_annotation({"model": "User", "fields": ["id"]})

    def test_custom_registry(self):
        registry = AnnotationRegistry({"index": validate_index, "check": CheckAnnotation.model_validate})
        assert registry.kinds() == ["check", "index"]
        record = registry.validate({"kind": "check", "model": "User", "expression": "age >= 18"})
        assert isinstance(record, CheckAnnotation)

    def test_registry_copies_its_table(self):
        table = {"index": validate_index}
        registry = AnnotationRegistry(table)
        table["check"] = CheckAnnotation.model_validate
        assert "check" not in registry
