"""Snapshot state: extraction, hashing, building, loading and serialization."""

from schematic.state.builder import build_state
from schematic.state.extractor import (
    DocumentedModel,
    collect_annotations,
    extract_annotations,
    find_annotation_blocks,
    iter_models,
)
from schematic.state.files import resolve_and_load_file, resolve_file_path
from schematic.state.hashing import compute_hash, to_json_text
from schematic.state.loader import EmptyStateError, LoadError, load_state
from schematic.state.serializer import (
    deserialize_state,
    serialize_state,
    state_to_dict,
    validate_state_schema,
)

__all__ = [
    "DocumentedModel",
    "EmptyStateError",
    "LoadError",
    "build_state",
    "collect_annotations",
    "compute_hash",
    "deserialize_state",
    "extract_annotations",
    "find_annotation_blocks",
    "iter_models",
    "load_state",
    "resolve_and_load_file",
    "resolve_file_path",
    "serialize_state",
    "state_to_dict",
    "to_json_text",
    "validate_state_schema",
]
