"""Annotation kind registry and per-kind validation contracts."""

from schematic.schemas.registry import (
    DEFAULT_REGISTRY,
    AnnotationRegistry,
    AnnotationValidationError,
    AnnotationValidator,
    UnknownKindError,
    validate_annotation,
    validate_index,
)

__all__ = [
    "DEFAULT_REGISTRY",
    "AnnotationRegistry",
    "AnnotationValidationError",
    "AnnotationValidator",
    "UnknownKindError",
    "validate_annotation",
    "validate_index",
]
