"""Annotation schema registry.

Maps each annotation kind to the validator for its closed-shape record.
The table is built once at import time and cannot be modified; adding a
new annotation kind means adding a record model and one entry to
``_VALIDATORS``, never touching the parser.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ValidationError

from schematic.models.annotation import AnnotationRecord, IndexAnnotation, RawAnnotation

logger = logging.getLogger(__name__)

AnnotationValidator = Callable[[RawAnnotation], AnnotationRecord]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class AnnotationValidationError(Exception):
    """Raised when a parsed annotation violates its kind's contract.

    Attributes
    ----------
    kind:
        The annotation kind being validated.
    field:
        Dotted path of the offending field (``fields.1`` for a list item).
    constraint:
        Human-readable description of the violated constraint.
    """

    def __init__(self, kind: str, field: str, constraint: str, model: str | None = None) -> None:
        self.kind = kind
        self.field = field
        self.constraint = constraint
        self.model = model
        where = f" on model '{model}'" if model else ""
        super().__init__(f"Invalid '{kind}' annotation{where}: field '{field}': {constraint}")


class UnknownKindError(Exception):
    """Raised when an annotation names a kind with no registered schema."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Unknown annotation kind: {kind}")


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def _validate_with(record_cls: type[BaseModel], raw: RawAnnotation) -> Any:
    """Validate *raw* against *record_cls*, translating pydantic errors."""
    try:
        return record_cls.model_validate(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "<root>"
        model = raw.get("model")
        raise AnnotationValidationError(
            kind=str(raw.get("kind")),
            field=field,
            constraint=first["msg"],
            model=model if isinstance(model, str) else None,
        ) from exc


def validate_index(raw: RawAnnotation) -> IndexAnnotation:
    """Validate an ``index`` annotation record."""
    return _validate_with(IndexAnnotation, raw)


_VALIDATORS: Mapping[str, AnnotationValidator] = MappingProxyType(
    {
        "index": validate_index,
    }
)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class AnnotationRegistry:
    """Read-only lookup from annotation kind to validator.

    Kinds are matched exactly and case-sensitively.
    """

    def __init__(self, validators: Mapping[str, AnnotationValidator]) -> None:
        self._validators = MappingProxyType(dict(validators))

    def get(self, kind: str) -> AnnotationValidator:
        """Return the validator for *kind*.

        Raises
        ------
        UnknownKindError
            If *kind* is not registered.
        """
        validator = self._validators.get(kind)
        if validator is None:
            raise UnknownKindError(kind)
        return validator

    def validate(self, raw: RawAnnotation) -> AnnotationRecord:
        """Look up ``raw["kind"]`` and validate *raw* against its contract.

        Raises
        ------
        UnknownKindError
            If the kind is not registered.
        AnnotationValidationError
            If the record violates the kind's contract.
        """
        kind = raw.get("kind")
        if not isinstance(kind, str):
            raise UnknownKindError(str(kind))
        logger.debug("Validating '%s' annotation.", kind)
        return self.get(kind)(raw)

    def kinds(self) -> list[str]:
        """Return all registered kinds, sorted."""
        return sorted(self._validators)

    def __len__(self) -> int:
        return len(self._validators)

    def __contains__(self, kind: object) -> bool:
        return kind in self._validators


DEFAULT_REGISTRY = AnnotationRegistry(_VALIDATORS)


def validate_annotation(raw: RawAnnotation) -> AnnotationRecord:
    """Validate *raw* against the default registry."""
    return DEFAULT_REGISTRY.validate(raw)
