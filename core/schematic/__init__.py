"""Schematic -- database intent annotations for data-model documentation.

Extracts ``@schematic.<kind>(...)`` annotations from model documentation,
validates them against per-kind contracts and records them in a
content-hashed state snapshot.

Quick start::

    from schematic import build_state, serialize_state

    snapshot = build_state(dmmf_document)
    print(serialize_state(snapshot))
"""

from schematic.config import ConfigError, SchematicConfig, Settings, extract_config, load_settings
from schematic.generator import GenerationResult, generate
from schematic.models import IndexAnnotation, IndexType, StateSnapshot
from schematic.parser import FormatError, parse_annotation, parse_value, split_arguments
from schematic.schemas import (
    AnnotationRegistry,
    AnnotationValidationError,
    UnknownKindError,
    validate_annotation,
)
from schematic.state import (
    EmptyStateError,
    LoadError,
    build_state,
    compute_hash,
    deserialize_state,
    extract_annotations,
    load_state,
    serialize_state,
)

__all__ = [
    "AnnotationRegistry",
    "AnnotationValidationError",
    "ConfigError",
    "EmptyStateError",
    "FormatError",
    "GenerationResult",
    "IndexAnnotation",
    "IndexType",
    "LoadError",
    "SchematicConfig",
    "Settings",
    "StateSnapshot",
    "UnknownKindError",
    "build_state",
    "compute_hash",
    "deserialize_state",
    "extract_annotations",
    "extract_config",
    "generate",
    "load_settings",
    "load_state",
    "parse_annotation",
    "parse_value",
    "serialize_state",
    "split_arguments",
    "validate_annotation",
]
